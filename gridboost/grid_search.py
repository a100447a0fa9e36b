import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import polars as pl
from tqdm import tqdm

from gridboost.adapter import Trainer, adapt_and_train, predict_scores, to_matrix
from gridboost.formula import Formula, as_formula
from gridboost.metrics.accuracy import DEFAULT_THRESHOLD, accuracy
from gridboost.utils.param_space import ParamSpace
from gridboost.utils.splits import Partition, split_fixed

logger = logging.getLogger(__name__)

SplitStrategy = Union[Callable[[pl.DataFrame], List[Partition]], Sequence[Partition]]

RESULT_COLUMNS = ['train_accuracy', 'test_accuracy', 'execution_time']


class GridSearch:

    '''GridSearch class for training one model per hyperparameter combination and partition.'''

    def __init__(self,
                 data: pl.DataFrame,
                 formula: Union[Formula, str],
                 trainer: Optional[Trainer] = None):

        '''
        Initializes the GridSearch.

        Args:
            data (pl.DataFrame): Numeric data, never modified
            formula (Formula | str): Target and predictors, e.g. 'malignant ~ .'
            trainer (Callable, optional): Callable (x, y, **hyperparameters) -> model, xgboost when None
        '''

        self.data = data
        self.formula = as_formula(formula)
        self.trainer = trainer

        self.target, self.predictors = self.formula.resolve(data.columns)
        to_matrix(data.head(0), self.predictors, self.target)

        self.results = None
        self.failures = []
        self.models = {}
        self.round_params = []

    def run(self,
            params: Mapping[str, Sequence[Any]],
            split_strategy: SplitStrategy = split_fixed,
            context_params: Optional[Dict[str, Any]] = None,
            threshold: float = DEFAULT_THRESHOLD,
            n_permutations: Optional[int] = None,
            seed: Optional[int] = None,
            fail_fast: bool = False,
            keep_models: bool = False,
            progress: bool = True) -> pl.DataFrame:

        '''
        Run one training per partition and parameter combination.

        Args:
            params (dict): Parameter names and their candidate values
            split_strategy (Callable | list): Callable data -> [(train, test), ...] or the pairs themselves
            context_params (dict): Fixed parameters added to every combination, not reported as columns
            threshold (float): Scores at or above it are predicted positive
            n_permutations (int): Sample this many combinations instead of the full grid
            seed (int): Seed for sampling combinations
            fail_fast (bool): Whether to raise on the first failed run instead of skipping it
            keep_models (bool): Whether to keep trained models in `self.models` by run id
            progress (bool): Whether to show a progress bar

        Returns:
            pl.DataFrame: The results sorted by test then train accuracy, best first
        '''

        self.failures = []
        self.models = {}
        self.round_params = []

        reserved = [key for key in params if key in ['id', 'partition'] + RESULT_COLUMNS]
        if reserved:
            raise ValueError(f'Parameter names clash with result columns: {reserved}')

        if context_params is not None:
            overlap = sorted(set(context_params) & set(params))
            if overlap:
                raise ValueError(f'Parameters set both in params and context_params: {overlap}')

        param_space = ParamSpace(params=dict(params), n_permutations=n_permutations, seed=seed)

        if callable(split_strategy):
            partitions = split_strategy(self.data)
        else:
            partitions = list(split_strategy)

        if not partitions:
            raise ValueError('split_strategy produced no partitions')

        cells = [(p, combo) for p in range(len(partitions)) for combo in param_space]

        logger.info('Running %d combinations over %d partitions (%d runs)',
                    len(param_space), len(partitions), len(cells))

        rows = []

        for i, (partition_no, round_params) in enumerate(tqdm(cells, disable=not progress)):
            start_time = time.time()
            train, test = partitions[partition_no]

            hyperparameters = dict(round_params)
            if context_params is not None:
                hyperparameters.update(context_params)

            self.round_params.append(round_params)

            try:
                model = adapt_and_train(train, self.formula, hyperparameters, trainer=self.trainer)
                train_accuracy = accuracy(train[self.target], predict_scores(model, train, self.formula), threshold)
                test_accuracy = accuracy(test[self.target], predict_scores(model, test, self.formula), threshold)

            except Exception as e:
                if fail_fast:
                    raise
                logger.warning('Run %d (partition %d, %s) failed: %s', i, partition_no, round_params, e)
                self.failures.append({'id': i,
                                      'partition': partition_no,
                                      'params': round_params,
                                      'error': e})
                continue

            if keep_models:
                self.models[i] = model

            round_results = {'id': i, 'partition': partition_no}
            round_results.update(round_params)
            round_results['train_accuracy'] = train_accuracy
            round_results['test_accuracy'] = test_accuracy
            round_results['execution_time'] = round(time.time() - start_time, 2)

            rows.append(round_results)

        if self.failures:
            logger.warning('%d of %d runs failed', len(self.failures), len(cells))

        self.results = _results_frame(rows, param_space.keys)

        return self.results


def _results_frame(rows: List[dict], param_keys: List[str]) -> pl.DataFrame:

    columns = ['id', 'partition'] + param_keys + RESULT_COLUMNS

    if not rows:
        schema = {'id': pl.Int64, 'partition': pl.Int64}
        schema.update({key: pl.Null for key in param_keys})
        schema.update({col: pl.Float64 for col in RESULT_COLUMNS})
        return pl.DataFrame(schema=schema)

    results = pl.DataFrame(rows, strict=False, infer_schema_length=None).select(columns)

    return results.sort(['test_accuracy', 'train_accuracy'],
                        descending=[True, True],
                        maintain_order=True)


def run_grid(data: pl.DataFrame,
             formula: Union[Formula, str],
             hyperparameter_grid: Mapping[str, Sequence[Any]],
             split_strategy: SplitStrategy = split_fixed,
             trainer: Optional[Trainer] = None,
             **kwargs) -> pl.DataFrame:

    '''
    Compute results table for every combination of `hyperparameter_grid` and partition.

    Args:
        data (pl.DataFrame): Numeric data
        formula (Formula | str): Target and predictors
        hyperparameter_grid (dict): Parameter names and their candidate values
        split_strategy (Callable | list): Partitioning of `data`
        trainer (Callable, optional): Training routine, xgboost when None
        **kwargs: Passed to `GridSearch.run`

    Returns:
        pl.DataFrame: The results sorted by test then train accuracy, best first
    '''

    return GridSearch(data, formula, trainer=trainer).run(hyperparameter_grid,
                                                          split_strategy=split_strategy,
                                                          **kwargs)
