from gridboost.datasets.breast_cancer import BREAST_CANCER_COLUMNS
from gridboost.datasets.breast_cancer import BREAST_CANCER_URL
from gridboost.datasets.breast_cancer import breast_cancer_wisconsin

__all__ = [
    'BREAST_CANCER_COLUMNS',
    'BREAST_CANCER_URL',
    'breast_cancer_wisconsin',
]
