from typing import List, Optional

import polars as pl

from gridboost.errors import MissingColumnError, TypeConversionError


def to_numeric(data: pl.DataFrame, columns: Optional[List[str]] = None) -> pl.DataFrame:

    '''
    Compute data with the given columns strictly cast to Float64.

    Args:
        data (pl.DataFrame): Input data
        columns (list[str] | None): Columns to cast, all columns when None

    Returns:
        pl.DataFrame: Data with numeric columns

    NOTE: Nothing is coerced to null; the first value that does not parse
          raises TypeConversionError naming its column.
    '''

    if columns is None:
        columns = data.columns

    casts = []

    for col in columns:

        if col not in data.columns:
            raise MissingColumnError(f"Column '{col}' not found in data")

        series = data[col]

        if series.dtype.is_numeric():
            casts.append(series.cast(pl.Float64))
            continue

        parsed = series.cast(pl.Utf8).str.strip_chars().cast(pl.Float64, strict=False)
        bad = series.filter(parsed.is_null() & series.is_not_null())

        if bad.len() > 0:
            raise TypeConversionError(f"Column '{col}' has non-numeric value {bad[0]!r}")

        casts.append(parsed.alias(col))

    return data.with_columns(casts)
