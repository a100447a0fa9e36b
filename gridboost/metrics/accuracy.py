import numpy as np

from sklearn.metrics import accuracy_score


DEFAULT_THRESHOLD = 0.5


def predicted_class(scores, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:

    '''
    Compute 0/1 class per score, 1 where score >= threshold.

    Args:
        scores (array): Real-valued scores
        threshold (float): Decision threshold

    Returns:
        np.ndarray: Integer class labels
    '''

    return (np.asarray(scores, dtype=np.float64).reshape(-1) >= threshold).astype(np.int64)


def accuracy(labels, scores, threshold: float = DEFAULT_THRESHOLD) -> float:

    '''
    Compute fraction of rows where the thresholded score equals the label.

    Args:
        labels (array): True 0/1 labels
        scores (array): Real-valued scores, one per label
        threshold (float): Decision threshold

    Returns:
        float: Accuracy in [0, 1]
    '''

    labels = np.asarray(labels, dtype=np.float64).reshape(-1)
    preds = predicted_class(scores, threshold)

    if labels.size == 0:
        raise ValueError('labels cannot be empty')

    if labels.size != preds.size:
        raise ValueError(f'labels ({labels.size}) and scores ({preds.size}) differ in length')

    return float(accuracy_score(labels, preds.astype(np.float64)))
