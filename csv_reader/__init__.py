"""Delimited text (CSV) reader with header reconciliation and row validation."""

from .config.loader import ConfigError, load_config, parse_config
from .models import DialectConfig, ErrorRecord, HeaderConfig, LoadStatistics, ReaderConfig
from .parsing.delimiter import detect_delimiter
from .parsing.errors import (
    BackendError,
    CSVReaderError,
    DetectionError,
    DuplicateColumnError,
    EmptyInputError,
    ErrorCode,
    HeaderMismatchError,
    IndexingError,
    InvalidLineError,
    UnexpectedHeaderColumnError,
)
from .parsing.tokenizer import tokenize
from .services.reader import CSVReader

__all__ = [
    "CSVReader",
    # Configuration
    "ConfigError",
    "DialectConfig",
    "HeaderConfig",
    "ReaderConfig",
    "load_config",
    "parse_config",
    # Results
    "ErrorRecord",
    "LoadStatistics",
    # Building blocks
    "detect_delimiter",
    "tokenize",
    # Errors
    "BackendError",
    "CSVReaderError",
    "DetectionError",
    "DuplicateColumnError",
    "EmptyInputError",
    "ErrorCode",
    "HeaderMismatchError",
    "IndexingError",
    "InvalidLineError",
    "UnexpectedHeaderColumnError",
]
