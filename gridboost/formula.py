from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

from gridboost.errors import FormulaResolutionError


class Wildcard(Enum):

    '''Predictor specifier meaning every column except the target.'''

    ALL = '.'


WILDCARD = Wildcard.ALL

Predictors = Union[Wildcard, Tuple[str, ...]]


@dataclass(frozen=True)
class Formula:

    '''
    Declarative `target ~ predictors` description of a supervised task.

    Args:
        target (str): Name of the label column
        predictors (Wildcard | Sequence[str]): WILDCARD or explicit predictor names
    '''

    target: str
    predictors: Predictors = WILDCARD

    def __post_init__(self):

        if not isinstance(self.target, str) or not self.target:
            raise FormulaResolutionError('Formula target must be a non-empty column name')

        if not isinstance(self.predictors, Wildcard):
            if isinstance(self.predictors, str):
                raise FormulaResolutionError(
                    'Explicit predictors must be a sequence of names, not a single string'
                )
            object.__setattr__(self, 'predictors', tuple(self.predictors))

    @classmethod
    def parse(cls, text: str) -> 'Formula':

        '''
        Compute Formula from text such as `malignant ~ .` or `y ~ a + b`.

        Args:
            text (str): Formula text

        Returns:
            Formula: Parsed formula
        '''

        if text.count('~') != 1:
            raise FormulaResolutionError(f"Formula must contain exactly one '~': {text!r}")

        lhs, rhs = (side.strip() for side in text.split('~'))

        if not lhs:
            raise FormulaResolutionError(f'Formula has no target: {text!r}')

        if rhs == WILDCARD.value:
            return cls(target=lhs)

        terms = [term.strip() for term in rhs.split('+')]

        if not all(terms):
            raise FormulaResolutionError(f'Formula has an empty predictor term: {text!r}')

        return cls(target=lhs, predictors=tuple(terms))

    @property
    def is_wildcard(self) -> bool:
        return isinstance(self.predictors, Wildcard)

    def resolve(self, columns: Sequence[str]) -> Tuple[str, List[str]]:

        '''
        Compute concrete target and ordered predictor columns.

        Args:
            columns (Sequence[str]): Columns available in the data, in order

        Returns:
            tuple[str, list[str]]: Target name and predictor names
        '''

        columns = list(columns)

        if self.target not in columns:
            raise FormulaResolutionError(f"Target '{self.target}' not found in columns {columns}")

        if self.is_wildcard:
            predictors = [col for col in columns if col != self.target]

        else:
            predictors = list(self.predictors)

            if self.target in predictors:
                raise FormulaResolutionError(
                    f"Target '{self.target}' is also listed as a predictor"
                )

            if len(set(predictors)) != len(predictors):
                raise FormulaResolutionError(f'Predictors listed more than once: {predictors}')

            unknown = [col for col in predictors if col not in columns]
            if unknown:
                raise FormulaResolutionError(f'Predictors not found in columns: {unknown}')

        if not predictors:
            raise FormulaResolutionError('Formula resolves to an empty predictor set')

        return self.target, predictors

    def __str__(self) -> str:

        rhs = WILDCARD.value if self.is_wildcard else ' + '.join(self.predictors)

        return f'{self.target} ~ {rhs}'


def as_formula(formula: Union[Formula, str]) -> Formula:

    if isinstance(formula, Formula):
        return formula

    if isinstance(formula, str):
        return Formula.parse(formula)

    raise TypeError(f'formula must be Formula or str, got {type(formula).__name__}')
