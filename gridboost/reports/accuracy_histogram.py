import matplotlib.pyplot as plt
import polars as pl


def accuracy_histogram(results: pl.DataFrame,
                       column: str = 'test_accuracy',
                       bins: int = 20,
                       show: bool = True):

    '''
    Create histogram of accuracies across the runs of a grid search.

    Args:
        results (pl.DataFrame): Results table from `GridSearch.run`
        column (str): Accuracy column to plot
        bins (int): Number of histogram bins
        show (bool): Whether to display the figure

    Returns:
        matplotlib.figure.Figure: The histogram figure
    '''

    if column not in results.columns:
        raise ValueError(f"Column '{column}' not found in results")

    values = results[column].drop_nulls().to_numpy()

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(values, bins=bins, range=(0, 1), edgecolor='white')
    ax.set_xlabel(column.replace('_', ' ').capitalize())
    ax.set_ylabel('Runs')
    ax.set_title(f'{column} for {len(values)} runs of grid search.')
    ax.grid(alpha=0.3)
    fig.tight_layout()

    if show:
        plt.show()

    return fig
