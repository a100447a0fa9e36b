from gridboost.transforms.drop_column import drop_column
from gridboost.transforms.drop_missing import drop_missing
from gridboost.transforms.recode_target import recode_target
from gridboost.transforms.to_numeric import to_numeric

__all__ = [
    'drop_column',
    'drop_missing',
    'recode_target',
    'to_numeric',
]
