import io
from pathlib import Path

import polars as pl
import requests


def delimited_file_to_polars(file_url: str,
                             has_header: bool = False,
                             separator: str = ',') -> pl.DataFrame:

    '''Reads a delimited datafile to a polars DataFrame with every column as string.

    Args:
        file_url (str): URL (http or https) or local path of the datafile
        has_header (bool): Whether the file has a header
        separator (str): Field delimiter

    Returns:

        pl.DataFrame

    '''

    if file_url.startswith(('http://', 'https://')):
        response = requests.get(file_url, timeout=60)
        response.raise_for_status()
        source = io.BytesIO(response.content)

    else:
        if not Path(file_url).exists():
            raise FileNotFoundError(f'File not found: {file_url}')
        source = file_url

    return pl.read_csv(source,
                       has_header=has_header,
                       separator=separator,
                       infer_schema=False)
