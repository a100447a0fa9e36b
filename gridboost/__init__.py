from gridboost.data import TabularData
from gridboost.formula import Formula, WILDCARD
from gridboost.params import Objective, XGBoostParams
from gridboost.adapter import adapt_and_train, predict_scores, train_xgboost
from gridboost.grid_search import GridSearch, run_grid
from gridboost.errors import FormulaResolutionError, MissingColumnError, TypeConversionError

import gridboost.datasets as datasets
import gridboost.metrics as metrics
import gridboost.reports as reports
import gridboost.transforms as transforms
import gridboost.utils as utils

__all__ = [
    'FormulaResolutionError',
    'Formula',
    'GridSearch',
    'MissingColumnError',
    'Objective',
    'TabularData',
    'TypeConversionError',
    'WILDCARD',
    'XGBoostParams',
    'adapt_and_train',
    'datasets',
    'metrics',
    'predict_scores',
    'reports',
    'run_grid',
    'train_xgboost',
    'transforms',
    'utils',
]
