import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Mapping


class Objective(str, Enum):

    REG_LOGISTIC = 'reg:logistic'
    BINARY_LOGISTIC = 'binary:logistic'
    REG_SQUAREDERROR = 'reg:squarederror'


@dataclass
class XGBoostParams:

    '''
    Hyperparameters for one boosted-tree training run.

    Args:
        nrounds (int): Number of boosting rounds
        eta (float): Learning rate
        max_depth (int): Maximum tree depth
        objective (Objective): Learning objective, scores land in [0, 1] for the logistic ones
        seed (int): Random seed handed to xgboost
        verbosity (int): xgboost verbosity, 0 is silent
        extra (dict): Any other xgboost keyword argument, passed through as is
    '''

    nrounds: int = 100
    eta: float = 0.3
    max_depth: int = 6
    objective: Objective = Objective.REG_LOGISTIC
    seed: int = 42
    verbosity: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):

        self.objective = Objective(self.objective)

        for name in ('nrounds', 'max_depth', 'seed', 'verbosity'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f'{name} must be int, got {value!r}')
            setattr(self, name, int(value))

        if isinstance(self.eta, bool) or not isinstance(self.eta, numbers.Real):
            raise TypeError(f'eta must be float, got {self.eta!r}')

        self.eta = float(self.eta)

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> 'XGBoostParams':

        '''
        Compute XGBoostParams from a flat mapping; unknown keys go to `extra`.

        Args:
            params (Mapping[str, Any]): Parameter names and values

        Returns:
            XGBoostParams: Typed parameter set
        '''

        known = {f.name for f in fields(cls) if f.name != 'extra'}

        kwargs = {key: value for key, value in params.items() if key in known}
        extra = {key: value for key, value in params.items() if key not in known and key != 'extra'}
        extra.update(params.get('extra', {}))

        return cls(**kwargs, extra=extra)

    def to_kwargs(self) -> Dict[str, Any]:

        '''Compute keyword arguments for a trainer, `extra` spread at top level.'''

        kwargs = {
            'nrounds': self.nrounds,
            'eta': self.eta,
            'max_depth': self.max_depth,
            'objective': self.objective.value,
            'seed': self.seed,
            'verbosity': self.verbosity,
        }
        kwargs.update(self.extra)

        return kwargs
