from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

import numpy as np
import polars as pl
import xgboost as xgb

from gridboost.errors import TypeConversionError
from gridboost.formula import Formula, as_formula
from gridboost.params import XGBoostParams

Hyperparameters = Union[XGBoostParams, Mapping[str, Any]]
Trainer = Callable[..., Any]


def resolve_formula(columns, formula: Union[Formula, str]) -> Tuple[str, List[str]]:

    '''
    Compute target and ordered predictors of `formula` for the given columns.

    Args:
        columns (Sequence[str]): Columns of the data
        formula (Formula | str): Formula or formula text

    Returns:
        tuple[str, list[str]]: Target name and predictor names
    '''

    return as_formula(formula).resolve(columns)


def to_matrix(data: pl.DataFrame,
              predictors: List[str],
              target: Optional[str] = None) -> Tuple[np.ndarray, Optional[np.ndarray]]:

    '''
    Compute numeric feature matrix and label vector in row order of `data`.

    Args:
        data (pl.DataFrame): Numeric data
        predictors (list[str]): Feature columns, in matrix column order
        target (str | None): Label column, no label vector when None

    Returns:
        tuple[np.ndarray, np.ndarray | None]: Matrix of shape (rows, predictors) and labels
    '''

    columns = predictors if target is None else predictors + [target]

    non_numeric = [col for col in columns if not data.schema[col].is_numeric()]
    if non_numeric:
        raise TypeConversionError(f'Columns must be numeric before training: {non_numeric}')

    x = data.select(predictors).to_numpy().astype(np.float64)
    y = data[target].to_numpy().astype(np.float64) if target is not None else None

    return x, y


def train_xgboost(x: np.ndarray,
                  y: np.ndarray,
                  nrounds: int,
                  eta: float,
                  max_depth: int,
                  objective: str,
                  seed: int = 42,
                  verbosity: int = 0,
                  **extra) -> xgb.XGBRegressor:

    '''
    Compute fitted xgboost model from a feature matrix and label vector.

    Args:
        x (np.ndarray): Feature matrix
        y (np.ndarray): Label vector
        nrounds (int): Number of boosting rounds
        eta (float): Learning rate
        max_depth (int): Maximum tree depth
        objective (str): xgboost objective
        seed (int): Random seed
        verbosity (int): xgboost verbosity
        **extra: Any other XGBRegressor keyword argument

    Returns:
        xgb.XGBRegressor: Fitted model
    '''

    model = xgb.XGBRegressor(n_estimators=nrounds,
                             learning_rate=eta,
                             max_depth=max_depth,
                             objective=objective,
                             random_state=seed,
                             verbosity=verbosity,
                             **extra)

    model.fit(x, y, verbose=False)

    return model


def adapt_and_train(data: pl.DataFrame,
                    formula: Union[Formula, str],
                    hyperparameters: Optional[Hyperparameters] = None,
                    trainer: Optional[Trainer] = None) -> Any:

    '''
    Compute trained model for `formula` over `data` with the given hyperparameters.

    The formula is resolved against the columns of `data`, the predictors and
    target are materialized as a matrix and a label vector, and both are handed
    to `trainer` together with the hyperparameters as keyword arguments.

    Args:
        data (pl.DataFrame): Numeric training data
        formula (Formula | str): Target and predictors, e.g. 'malignant ~ .'
        hyperparameters (XGBoostParams | Mapping | None): Training hyperparameters, defaults when None
        trainer (Callable | None): Callable (x, y, **hyperparameters) -> model, `train_xgboost` when None

    Returns:
        Any: Whatever `trainer` returns
    '''

    target, predictors = resolve_formula(data.columns, formula)

    if hyperparameters is None:
        hyperparameters = XGBoostParams()

    elif not isinstance(hyperparameters, XGBoostParams):
        hyperparameters = XGBoostParams.from_dict(hyperparameters)

    if trainer is None:
        trainer = train_xgboost

    x, y = to_matrix(data, predictors, target)

    return trainer(x, y, **hyperparameters.to_kwargs())


def predict_scores(model: Any, data: pl.DataFrame, formula: Union[Formula, str]) -> np.ndarray:

    '''
    Compute one score per row of `data` using the predictors of `formula`.

    Args:
        model (Any): Object with a `predict(matrix)` method
        data (pl.DataFrame): Numeric data holding the predictor columns
        formula (Formula | str): Formula the model was trained with

    Returns:
        np.ndarray: Scores in row order
    '''

    _, predictors = resolve_formula(data.columns, formula)
    x, _ = to_matrix(data, predictors)

    return np.asarray(model.predict(x), dtype=np.float64).reshape(-1)
