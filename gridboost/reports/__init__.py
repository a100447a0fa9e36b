from gridboost.reports.accuracy_histogram import accuracy_histogram
from gridboost.reports.summary import summarize_results

__all__ = [
    'accuracy_histogram',
    'summarize_results',
]
