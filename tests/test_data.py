from unittest import mock

import polars as pl
import requests

from gridboost import TabularData, MissingColumnError, TypeConversionError
from gridboost.datasets import BREAST_CANCER_COLUMNS, breast_cancer_wisconsin
from gridboost.transforms import drop_column, drop_missing, recode_target, to_numeric
from gridboost.utils import delimited_file_to_polars
from tests.utils.data import UCI_SAMPLE, temp_file


def test_breast_cancer_wisconsin_from_file():

    with temp_file(UCI_SAMPLE) as path:
        data = breast_cancer_wisconsin(path)

    assert data.height == 4, 'rows holding ? must be removed'
    assert 'id' not in data.columns
    assert 'class' not in data.columns
    assert data.columns[-1] == 'malignant'
    assert data['malignant'].to_list() == [0.0, 0.0, 1.0, 0.0]
    assert all(dtype == pl.Float64 for dtype in data.dtypes)
    assert data['clump_thickness'].to_list() == [5.0, 5.0, 8.0, 4.0]


def test_get_file_column_count_mismatch():

    loader = TabularData()

    with temp_file(UCI_SAMPLE) as path:
        try:
            loader.get_file(path, BREAST_CANCER_COLUMNS[:-1])
        except MissingColumnError:
            pass
        else:
            raise AssertionError('Expected MissingColumnError for wrong column count')


def test_clean_requires_loaded_data():

    try:
        TabularData().clean(id_column='id', target_column='class', positive_code=4)
    except ValueError:
        pass
    else:
        raise AssertionError('Expected ValueError when nothing is loaded')


def test_drop_missing_sentinel():

    data = pl.DataFrame({'a': ['1', '?', '3', '4'], 'b': ['1', '2', None, ' ? ']})

    assert drop_missing(data).height == 1
    assert drop_missing(data, columns=['a'])['a'].to_list() == ['1', '3', '4']
    assert drop_missing(data, columns=['a'], sentinel='NA').height == 4


def test_drop_column():

    data = pl.DataFrame({'id': ['x'], 'a': ['1']})

    assert drop_column(data, 'id').columns == ['a']

    try:
        drop_column(data, 'missing')
    except MissingColumnError:
        pass
    else:
        raise AssertionError('Expected MissingColumnError')


def test_recode_target():

    data = pl.DataFrame({'class': ['2', '4', '4', '2', '3']})

    recoded = recode_target(data, 'class', 4, alias='malignant')

    assert recoded.columns == ['malignant']
    assert recoded['malignant'].to_list() == [0, 1, 1, 0, 0]

    in_place = recode_target(pl.DataFrame({'class': [2, 4]}), 'class', 4)

    assert in_place['class'].to_list() == [0, 1]

    float_coded = recode_target(pl.DataFrame({'class': [2.0, 4.0, 4.0]}), 'class', 4)

    assert float_coded['class'].to_list() == [0, 1, 1]

    int_coded = recode_target(pl.DataFrame({'class': [2, 4, None]}), 'class', 4.0)

    assert int_coded['class'].to_list() == [0, 1, 0]


def test_delimited_file_from_url():

    response = mock.Mock()
    response.content = b'1,2,x\n3,4,y\n'

    with mock.patch('requests.get', return_value=response) as get:
        data = delimited_file_to_polars('https://example.com/sample.data')

    get.assert_called_once()
    response.raise_for_status.assert_called_once()
    assert data.shape == (2, 3)
    assert data.row(1) == ('3', '4', 'y')


def test_delimited_file_from_url_http_error():

    response = mock.Mock()
    response.raise_for_status.side_effect = requests.HTTPError('404 Client Error')

    with mock.patch('requests.get', return_value=response):
        try:
            delimited_file_to_polars('https://example.com/missing.data')
        except requests.HTTPError:
            pass
        else:
            raise AssertionError('Expected HTTPError to propagate')


def test_to_numeric():

    data = pl.DataFrame({'a': ['1', ' 2 ', '3.5'], 'b': [1, 2, 3]})

    numeric = to_numeric(data)

    assert numeric['a'].to_list() == [1.0, 2.0, 3.5]
    assert numeric['b'].dtype == pl.Float64

    try:
        to_numeric(pl.DataFrame({'a': ['1', 'x']}))
    except TypeConversionError as e:
        assert "'a'" in str(e)
    else:
        raise AssertionError('Expected TypeConversionError')
