from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..parsing.rows import Row

"""DataFrame view of loaded rows."""


def rows_to_frame(rows: Sequence[Row], columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Build a string-typed DataFrame from loaded rows.

    Keyed rows use ``columns`` as the frame columns. Positional rows get
    integer columns sized to the widest row; shorter rows are padded with
    None.
    """
    if columns:
        df = pd.DataFrame([list(r.values()) if isinstance(r, dict) else list(r) for r in rows], columns=list(columns))
    else:
        df = pd.DataFrame([list(r) for r in rows])
    return df.astype(object)
