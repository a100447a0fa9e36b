import polars as pl

from gridboost.errors import MissingColumnError


def drop_column(data: pl.DataFrame, column: str) -> pl.DataFrame:

    '''
    Compute data without the given column.

    Args:
        data (pl.DataFrame): Input data
        column (str): Name of the column to drop, typically a row identifier

    Returns:
        pl.DataFrame: Data without `column`
    '''

    if column not in data.columns:
        raise MissingColumnError(f"Column '{column}' not found in data")

    return data.drop(column)
