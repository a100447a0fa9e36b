from typing import List, Optional

import polars as pl

from gridboost.errors import MissingColumnError


DEFAULT_SENTINEL = '?'


def drop_missing(data: pl.DataFrame,
                 columns: Optional[List[str]] = None,
                 sentinel: str = DEFAULT_SENTINEL) -> pl.DataFrame:

    '''
    Compute data without rows that hold a missing value in any required column.

    A value is missing when it is null or when its string form equals `sentinel`.

    Args:
        data (pl.DataFrame): Input data
        columns (list[str] | None): Required columns, all columns when None
        sentinel (str): Missing-value marker used by the source file

    Returns:
        pl.DataFrame: Data with the offending rows removed, row order preserved
    '''

    if columns is None:
        columns = data.columns

    missing = [col for col in columns if col not in data.columns]
    if missing:
        raise MissingColumnError(f'Columns not found in data: {missing}')

    if not columns:
        return data

    return data.filter(
        pl.all_horizontal([
            pl.col(col).is_not_null() & (pl.col(col).cast(pl.Utf8).str.strip_chars() != sentinel)
            for col in columns
        ])
    )
