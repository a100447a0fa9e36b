import random
from itertools import product
from typing import Any, Dict, Iterable, Optional

import numpy as np


class ParamSpace:

    '''
    Create parameter space manager for grid and random search.

    Args:
        params (dict): Dictionary of parameter names and their candidate values.
        n_permutations (int | None): Number of combinations to sample, full grid when None.
        seed (int | None): Seed for sampling when `n_permutations` is set.
    '''

    def __init__(self,
                 params: Dict[str, Iterable[Any]],
                 n_permutations: Optional[int] = None,
                 seed: Optional[int] = None):

        if not params:
            raise ValueError('params cannot be empty')

        candidates = {}

        for key, values in params.items():
            if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
                raise TypeError(f"Candidates for '{key}' must be a list, tuple or array")
            candidates[key] = [v.item() if isinstance(v, np.generic) else v for v in values]
            if len(candidates[key]) == 0:
                raise ValueError(f"Candidates for '{key}' cannot be empty")

        params = candidates
        self.keys = list(params)
        combos = [dict(zip(self.keys, c)) for c in product(*(params[k] for k in self.keys))]

        if n_permutations is not None:
            if not 0 < n_permutations <= len(combos):
                raise ValueError(f'n_permutations must be between 1 and {len(combos)}')
            rng = random.Random(seed)
            picked = sorted(rng.sample(range(len(combos)), k=n_permutations))
            combos = [combos[i] for i in picked]

        self.combos = combos
        self.n_permutations = len(combos)

    def __len__(self) -> int:
        return self.n_permutations

    def __iter__(self):
        return (dict(combo) for combo in self.combos)

