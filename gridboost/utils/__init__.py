from gridboost.utils.delimited_file_to_polars import delimited_file_to_polars
from gridboost.utils.param_space import ParamSpace
from gridboost.utils.splits import split_bootstrap
from gridboost.utils.splits import split_fixed
from gridboost.utils.splits import split_kfold
from gridboost.utils.splits import split_monte_carlo
from gridboost.utils.splits import split_random

__all__ = [
    'delimited_file_to_polars',
    'ParamSpace',
    'split_bootstrap',
    'split_fixed',
    'split_kfold',
    'split_monte_carlo',
    'split_random',
]
