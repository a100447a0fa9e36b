import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt
import polars as pl

from gridboost.reports import accuracy_histogram, summarize_results


RESULTS = pl.DataFrame({
    'id': [0, 1, 2, 3],
    'partition': [0, 0, 1, 1],
    'nrounds': [5, 10, 5, 10],
    'train_accuracy': [0.9, 1.0, 0.8, 1.0],
    'test_accuracy': [0.8, 0.9, 0.6, 0.7],
    'execution_time': [0.1, 0.1, 0.1, 0.1],
})


def test_summarize_results():

    summary = summarize_results(RESULTS)

    assert summary['nrounds'].to_list() == [10, 5]
    assert summary['n_runs'].to_list() == [2, 2]
    assert [round(v, 6) for v in summary['mean_test_accuracy'].to_list()] == [0.8, 0.7]
    assert summary['max_test_accuracy'].to_list() == [0.9, 0.8]
    assert summary['min_test_accuracy'].to_list() == [0.7, 0.6]


def test_accuracy_histogram():

    fig = accuracy_histogram(RESULTS, show=False)

    assert len(fig.axes) == 1
    assert sum(patch.get_height() for patch in fig.axes[0].patches) == 4

    plt.close(fig)


def test_accuracy_histogram_unknown_column():

    try:
        accuracy_histogram(RESULTS, column='auc', show=False)
    except ValueError:
        pass
    else:
        raise AssertionError('Expected ValueError')
