"""Default heuristics and index-set helpers."""

import numpy as np
from scipy.stats import median_abs_deviation


def mad_threshold(values: np.ndarray) -> float:
    """Median absolute deviation of values, used as a default distance threshold.

    Only the dependent variable is considered, so this is a rough default.
    Pass an explicit threshold when precision matters.
    """
    return float(median_abs_deviation(np.asarray(values, dtype=float), scale=1.0))


def default_min_samples(n_samples: int, fraction: float = 0.8) -> int:
    """
    Minimal sample size as a fraction of the dataset.

    The 0.8 default assumes well under 20% of the points are outliers.
    The result is never below 2, the number of points that define a line.
    """
    if not 0.0 < fraction <= 1.0:
        raise ValueError(f"fraction must be in (0, 1], got {fraction}")
    return min(n_samples, max(2, int(np.floor(fraction * n_samples))))


def outlier_complement(inliers: np.ndarray, n_samples: int) -> np.ndarray:
    """Sorted indices in [0, n_samples) that are not inliers."""
    mask = np.ones(n_samples, dtype=bool)
    mask[np.asarray(inliers, dtype=np.intp)] = False
    return np.flatnonzero(mask)
