from typing import List, Optional

import polars as pl


NON_PARAM_COLUMNS = ['id', 'partition', 'train_accuracy', 'test_accuracy', 'execution_time']


def summarize_results(results: pl.DataFrame, by: Optional[List[str]] = None) -> pl.DataFrame:

    '''
    Compute per-combination accuracy statistics across partitions.

    Args:
        results (pl.DataFrame): Results table from `GridSearch.run`
        by (list[str] | None): Grouping columns, every parameter column when None

    Returns:
        pl.DataFrame: One row per combination sorted by mean test accuracy, best first
    '''

    if by is None:
        by = [col for col in results.columns if col not in NON_PARAM_COLUMNS]

    if not by:
        raise ValueError('results has no parameter columns to group by')

    return (
        results
        .group_by(by, maintain_order=True)
        .agg([
            pl.len().alias('n_runs'),
            pl.col('test_accuracy').mean().alias('mean_test_accuracy'),
            pl.col('test_accuracy').std().alias('std_test_accuracy'),
            pl.col('test_accuracy').min().alias('min_test_accuracy'),
            pl.col('test_accuracy').max().alias('max_test_accuracy'),
            pl.col('train_accuracy').mean().alias('mean_train_accuracy'),
        ])
        .sort(['mean_test_accuracy', 'mean_train_accuracy'],
              descending=[True, True],
              maintain_order=True)
    )
