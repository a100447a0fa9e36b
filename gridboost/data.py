import logging
from typing import Any, List, Optional

import polars as pl

from gridboost.errors import MissingColumnError
from gridboost.transforms import drop_column, drop_missing, recode_target, to_numeric
from gridboost.transforms.drop_missing import DEFAULT_SENTINEL
from gridboost.utils.delimited_file_to_polars import delimited_file_to_polars

logger = logging.getLogger(__name__)


class TabularData:

    def __init__(self):

        '''Loads a delimited tabular file and cleans it for modeling.'''

        self.data = None
        self.data_columns = None

    def get_file(self,
                 file_url: str,
                 columns: List[str],
                 has_header: bool = False,
                 separator: str = ',') -> None:

        '''Get data from a delimited file by URL or local path.

        Args:
            file_url (str): The URL or path of the file
            columns (List[str]): Names for the columns of the file, in order
            has_header (bool): Whether the file has a header
            separator (str): Field delimiter

        Returns:
            self.data (pl.DataFrame)

        '''

        data = delimited_file_to_polars(file_url, has_header=has_header, separator=separator)

        if data.width != len(columns):
            raise MissingColumnError(
                f'Expected {len(columns)} columns {columns}, file has {data.width}'
            )

        data.columns = columns

        logger.info('Loaded %d rows with %d columns from %s', data.height, data.width, file_url)

        self.data = data
        self.data_columns = self.data.columns

    def clean(self,
              id_column: Optional[str],
              target_column: str,
              positive_code: Any,
              target_alias: Optional[str] = None,
              sentinel: str = DEFAULT_SENTINEL) -> pl.DataFrame:

        '''Compute model-ready data from the loaded file.

        Drops the identifier column, removes rows with `sentinel` in any column,
        recodes the target to 0/1 and casts every column to Float64.

        Args:
            id_column (str | None): Identifier column to drop, nothing dropped when None
            target_column (str): Categorical target column
            positive_code (Any): Target code that becomes 1
            target_alias (str | None): New name for the target column
            sentinel (str): Missing-value marker

        Returns:
            self.data (pl.DataFrame)

        '''

        if self.data is None:
            raise ValueError('No data loaded, call get_file() first')

        data = self.data

        if id_column is not None:
            data = drop_column(data, id_column)

        n_rows = data.height
        data = drop_missing(data, sentinel=sentinel)

        if data.height < n_rows:
            logger.info('Dropped %d rows containing %r', n_rows - data.height, sentinel)

        data = recode_target(data, target_column, positive_code, alias=target_alias)
        data = to_numeric(data)

        self.data = data
        self.data_columns = self.data.columns

        return self.data
