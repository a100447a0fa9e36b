from typing import Any, Optional

import polars as pl

from gridboost.errors import MissingColumnError


def recode_target(data: pl.DataFrame,
                  column: str,
                  positive_code: Any,
                  alias: Optional[str] = None) -> pl.DataFrame:

    '''
    Compute binary target where `positive_code` is 1 and every other value is 0.

    Args:
        data (pl.DataFrame): Input data
        column (str): Categorical target column
        positive_code (Any): Code that marks the positive class, compared as a number
                             for numeric columns and as a string otherwise
        alias (str | None): New name for the recoded column, keeps `column` when None

    Returns:
        pl.DataFrame: Data with the recoded target in place of `column`
    '''

    if column not in data.columns:
        raise MissingColumnError(f"Target column '{column}' not found in data")

    name = alias if alias is not None else column

    if data[column].dtype.is_numeric():
        matches = pl.col(column).cast(pl.Float64) == float(positive_code)
    else:
        matches = pl.col(column).cast(pl.Utf8).str.strip_chars() == str(positive_code)

    recoded = matches.fill_null(False)

    data = data.with_columns(recoded.cast(pl.Int64).alias(column))

    if name != column:
        data = data.rename({column: name})

    return data
