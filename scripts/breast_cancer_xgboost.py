import argparse
import logging
from functools import partial

import polars as pl

import gridboost
from gridboost.datasets import BREAST_CANCER_URL, breast_cancer_wisconsin
from gridboost.reports import accuracy_histogram, summarize_results
from gridboost.utils import split_monte_carlo


parser = argparse.ArgumentParser(description='Grid search xgboost on the Breast Cancer Wisconsin data.')
parser.add_argument('--data', default=BREAST_CANCER_URL, help='URL or path of breast-cancer-wisconsin.data')
parser.add_argument('--formula', default='malignant ~ .')
parser.add_argument('--n-splits', type=int, default=100)
parser.add_argument('--test-fraction', type=float, default=0.2)
parser.add_argument('--seed', type=int, default=42)
parser.add_argument('--plot', action='store_true', help='Show the test accuracy histogram')
args = parser.parse_args()

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s %(message)s')

data = breast_cancer_wisconsin(args.data)

params = {
    'nrounds': [5, 10, 25],
    'eta': [0.1, 0.3],
    'max_depth': [3, 6],
}

search = gridboost.GridSearch(data, args.formula)
results = search.run(params,
                     split_strategy=partial(split_monte_carlo,
                                            n=args.n_splits,
                                            test_fraction=args.test_fraction,
                                            seed=args.seed),
                     context_params={'objective': 'reg:logistic'})

with pl.Config(tbl_rows=20):
    print(results.head(20))
    print(summarize_results(results))

if args.plot:
    accuracy_histogram(results)
