"""Domain models for the CSV reader.

Configuration values, load statistics and structured error records.
"""

from .config_models import DialectConfig, HeaderConfig, ReaderConfig
from .error_record import ErrorRecord
from .load_statistics import LoadStatistics, LoadStatsAccumulator

__all__ = [
    # Configuration models
    "DialectConfig",
    "HeaderConfig",
    "ReaderConfig",
    # Load results
    "ErrorRecord",
    "LoadStatistics",
    "LoadStatsAccumulator",
]
