import numpy as np

from gridboost.utils import ParamSpace


def test_full_grid_in_order():

    space = ParamSpace({'nrounds': [5, 10], 'eta': [0.1, 0.3]})

    assert len(space) == 4
    assert list(space) == [{'nrounds': 5, 'eta': 0.1},
                           {'nrounds': 5, 'eta': 0.3},
                           {'nrounds': 10, 'eta': 0.1},
                           {'nrounds': 10, 'eta': 0.3}]


def test_sampled_grid_is_reproducible():

    params = {'a': [1, 2, 3], 'b': [1, 2, 3]}

    first = list(ParamSpace(params, n_permutations=4, seed=7))
    second = list(ParamSpace(params, n_permutations=4, seed=7))

    assert first == second
    assert len(first) == 4
    assert all(combo in list(ParamSpace(params)) for combo in first)


def test_invalid_params():

    for params, kwargs in [({}, {}),
                           ({'a': []}, {}),
                           ({'a': 'abc'}, {}),
                           ({'a': [1, 2]}, {'n_permutations': 3})]:
        try:
            ParamSpace(params, **kwargs)
        except (TypeError, ValueError):
            continue
        raise AssertionError(f'Expected rejection of {params} {kwargs}')


def test_numpy_candidates():

    space = ParamSpace({'nrounds': np.array([5, 10]), 'eta': np.linspace(0.1, 0.3, 3)})

    combos = list(space)

    assert len(space) == 6
    assert combos[0] == {'nrounds': 5, 'eta': 0.1}
    assert all(type(combo['nrounds']) is int for combo in combos)
    assert all(type(combo['eta']) is float for combo in combos)
    assert [combo['nrounds'] for combo in ParamSpace({'nrounds': range(1, 4)})] == [1, 2, 3]
