from typing import List, Optional, Sequence, Tuple
from itertools import accumulate

import numpy as np
import polars as pl


DEFAULT_TEST_FRACTION = 0.2
DEFAULT_N_SPLITS = 10
DEFAULT_K = 5

Partition = Tuple[pl.DataFrame, pl.DataFrame]


def split_random(data: pl.DataFrame, ratios: Sequence[float], seed: Optional[int] = None) -> List[pl.DataFrame]:

    '''Split the data into shuffled chunks

    Args:
        data (pl.DataFrame): The data to be split
        ratios (Sequence[float]): The ratios of the data to be split
        seed (int): The seed for the random number generator

    Returns:
        List[pl.DataFrame]
    '''

    total = data.height
    total_ratio = sum(ratios)
    bounds = [int(total * c / total_ratio) for c in accumulate(ratios)]
    # last chunk takes whatever rounding left over
    bounds[-1] = total
    starts = [0] + bounds[:-1]

    shuffled = data.sample(fraction=1.0, seed=seed, shuffle=True)

    return [shuffled.slice(start, end - start) for start, end in zip(starts, bounds)]


def _check_data(data: pl.DataFrame, min_rows: int = 2) -> None:

    if not isinstance(data, pl.DataFrame):
        raise TypeError('data must be a Polars DataFrame')

    if data.height < min_rows:
        raise ValueError(f'data must have at least {min_rows} rows, got {data.height}')


def split_fixed(data: pl.DataFrame,
                test_fraction: float = DEFAULT_TEST_FRACTION,
                seed: Optional[int] = None) -> List[Partition]:

    '''
    Compute a single shuffled train/test partition.

    Args:
        data (pl.DataFrame): Data to partition
        test_fraction (float): Share of rows in the test subset
        seed (int | None): Random seed for reproducible results

    Returns:
        List[Tuple[pl.DataFrame, pl.DataFrame]]: One (train, test) pair
    '''

    _check_data(data)

    if not 0.0 < test_fraction < 1.0:
        raise ValueError('test_fraction must be between 0 and 1')

    train, test = split_random(data, (1.0 - test_fraction, test_fraction), seed=seed)

    if train.is_empty() or test.is_empty():
        raise ValueError(f'test_fraction {test_fraction} leaves an empty subset for {data.height} rows')

    return [(train, test)]


def split_monte_carlo(data: pl.DataFrame,
                      n: int = DEFAULT_N_SPLITS,
                      test_fraction: float = DEFAULT_TEST_FRACTION,
                      seed: Optional[int] = None) -> List[Partition]:

    '''
    Compute `n` independent shuffled train/test partitions (repeated holdout).

    Args:
        data (pl.DataFrame): Data to partition
        n (int): Number of partitions
        test_fraction (float): Share of rows in each test subset
        seed (int | None): Random seed, partition i uses seed + i

    Returns:
        List[Tuple[pl.DataFrame, pl.DataFrame]]: `n` (train, test) pairs
    '''

    if n <= 0:
        raise ValueError('n must be positive')

    partitions = []

    for i in range(n):
        partition_seed = seed + i if seed is not None else None
        partitions.extend(split_fixed(data, test_fraction=test_fraction, seed=partition_seed))

    return partitions


def split_kfold(data: pl.DataFrame,
                k: int = DEFAULT_K,
                seed: Optional[int] = None) -> List[Partition]:

    '''
    Compute `k` partitions where each row is in exactly one test subset.

    Args:
        data (pl.DataFrame): Data to partition
        k (int): Number of folds
        seed (int | None): Random seed for the row shuffle

    Returns:
        List[Tuple[pl.DataFrame, pl.DataFrame]]: `k` (train, test) pairs, rows in original order
    '''

    if k < 2:
        raise ValueError('k must be at least 2')

    _check_data(data, min_rows=k)

    rng = np.random.default_rng(seed=seed)
    folds = np.array_split(rng.permutation(data.height), k)

    partitions = []

    for fold in folds:
        test_idx = np.sort(fold)
        train_idx = np.setdiff1d(np.arange(data.height), test_idx)
        partitions.append((data[train_idx.tolist()], data[test_idx.tolist()]))

    return partitions


def split_bootstrap(data: pl.DataFrame,
                    n: int = DEFAULT_N_SPLITS,
                    seed: Optional[int] = None) -> List[Partition]:

    '''
    Compute `n` bootstrap partitions: train is drawn with replacement, test is out-of-bag.

    Args:
        data (pl.DataFrame): Data to partition
        n (int): Number of partitions
        seed (int | None): Random seed, partition i uses seed + i

    Returns:
        List[Tuple[pl.DataFrame, pl.DataFrame]]: `n` (train, test) pairs
    '''

    if n <= 0:
        raise ValueError('n must be positive')

    _check_data(data)

    total_rows = data.height
    partitions = []

    for i in range(n):
        if seed is not None:
            rng = np.random.default_rng(seed=seed + i)
        else:
            rng = np.random.default_rng()

        train_idx = np.sort(rng.choice(total_rows, size=total_rows, replace=True))
        test_idx = np.setdiff1d(np.arange(total_rows), train_idx)

        if test_idx.size == 0:
            raise ValueError(f'Bootstrap sample {i} has no out-of-bag rows')

        partitions.append((data[train_idx.tolist()], data[test_idx.tolist()]))

    return partitions
