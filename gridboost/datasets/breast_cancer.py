import polars as pl

from gridboost.data import TabularData


BREAST_CANCER_URL = (
    'https://archive.ics.uci.edu/ml/machine-learning-databases/'
    'breast-cancer-wisconsin/breast-cancer-wisconsin.data'
)

BREAST_CANCER_COLUMNS = [
    'id',
    'clump_thickness',
    'cell_size_uniformity',
    'cell_shape_uniformity',
    'marginal_adhesion',
    'single_epithelial_cell_size',
    'bare_nuclei',
    'bland_chromatin',
    'normal_nucleoli',
    'mitoses',
    'class',
]

MALIGNANT_CODE = 4


def breast_cancer_wisconsin(file_url: str = BREAST_CANCER_URL) -> pl.DataFrame:

    '''
    Compute the cleaned UCI Breast Cancer Wisconsin (Original) dataset.

    The `id` column is dropped, rows with `?` are removed and `class` becomes
    a 0/1 `malignant` column (class code 4).

    Args:
        file_url (str): URL or local path of breast-cancer-wisconsin.data

    Returns:
        pl.DataFrame: Nine Float64 measurement columns and the `malignant` label
    '''

    loader = TabularData()
    loader.get_file(file_url, BREAST_CANCER_COLUMNS)

    return loader.clean(id_column='id',
                        target_column='class',
                        positive_code=MALIGNANT_CODE,
                        target_alias='malignant')
