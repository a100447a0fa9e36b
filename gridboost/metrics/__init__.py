from gridboost.metrics.accuracy import DEFAULT_THRESHOLD
from gridboost.metrics.accuracy import accuracy
from gridboost.metrics.accuracy import predicted_class

__all__ = ['DEFAULT_THRESHOLD', 'accuracy', 'predicted_class']
