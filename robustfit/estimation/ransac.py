"""RANSAC implementation for robust estimation."""

import logging
import math
from typing import Callable, Optional, Tuple, Union

import numpy as np
from scipy.special import comb

from robustfit.exceptions import DegenerateFitError, NoConsensusError

logger = logging.getLogger(__name__)

# Keeps the stopping rule away from log(0) and division by zero.
_RATIO_EPS = 1e-12

RandomState = Union[None, int, np.random.Generator]


def required_trials(inlier_count: int, n_samples: int, min_samples: int,
                    probability: float) -> int:
    """
    Number of trials needed to draw at least one all-inlier sample.

    With outlier ratio e = 1 - inlier_count / n_samples and sample size m,
    a single sample is clean with probability (1 - e)^m, so reaching the
    target probability p takes

        k = ceil(log(1 - p) / log(1 - (1 - e)^m))

    trials. Ratios are clamped so the formula stays finite.

    Args:
        inlier_count: Consensus size of the best model so far
        n_samples: Dataset size
        min_samples: Points drawn per trial
        probability: Target probability of drawing a clean sample

    Returns:
        Required number of trials, at least 1
    """
    outlier_ratio = 1.0 - inlier_count / float(n_samples)
    outlier_ratio = min(max(outlier_ratio, _RATIO_EPS), 1.0 - _RATIO_EPS)

    clean_sample = (1.0 - outlier_ratio) ** min_samples
    clean_sample = min(max(clean_sample, _RATIO_EPS), 1.0 - _RATIO_EPS)

    trials = math.log(1.0 - probability) / math.log(1.0 - clean_sample)
    return max(1, int(math.ceil(trials)))


class RANSAC:
    """RANSAC algorithm for outlier rejection."""

    def __init__(self, threshold: float = 3.0, max_trials: int = 1000,
                 min_samples: int = 2, probability: float = 0.99,
                 random_state: RandomState = None):
        if threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        if max_trials < 1:
            raise ValueError(f"max_trials must be >= 1, got {max_trials}")
        if min_samples < 2:
            raise ValueError(f"min_samples must be >= 2, got {min_samples}")
        if not 0.0 < probability < 1.0:
            raise ValueError(f"probability must be in (0, 1), got {probability}")

        self.threshold = threshold
        self.max_trials = max_trials
        self.min_samples = min_samples
        self.probability = probability
        self.random_state = random_state

    def initial_bound(self, n_samples: int) -> int:
        """Trial budget before any consensus is known."""
        subsets = comb(n_samples, self.min_samples, exact=True)
        return int(min(subsets, self.max_trials))

    def fit(self, data: np.ndarray,
            model_func: Callable[[np.ndarray], object],
            score_func: Callable[[object, np.ndarray, float], np.ndarray]
            ) -> Tuple[object, np.ndarray, int]:
        """
        Fit model using RANSAC.

        Args:
            data: Observations, one row per point
            model_func: Fits a model to a subset of rows, raising
                DegenerateFitError when it cannot
            score_func: Returns the indices of rows within threshold of a model

        Returns:
            Tuple of (best model, sorted inlier indices, trials run)

        Raises:
            NoConsensusError: If every trial failed to produce a model
        """
        n_samples = len(data)
        if n_samples < self.min_samples:
            raise ValueError(
                f"min_samples ({self.min_samples}) exceeds dataset size ({n_samples})"
            )

        exhaustive = self.min_samples == n_samples
        rng = None if exhaustive else np.random.default_rng(self.random_state)
        bound = 1 if exhaustive else self.initial_bound(n_samples)

        best_model: Optional[object] = None
        best_inliers = np.array([], dtype=np.intp)
        best_count = -1
        trials = 0

        while trials < bound:
            trials += 1

            if exhaustive:
                indices = np.arange(n_samples)
            else:
                indices = rng.choice(n_samples, self.min_samples, replace=False)

            try:
                model = model_func(data[indices])
            except DegenerateFitError as e:
                logger.debug("Trial %d skipped: %s", trials, e)
                continue

            inliers = np.asarray(score_func(model, data, self.threshold), dtype=np.intp)
            count = len(inliers)
            if count <= best_count:
                continue

            best_model = model
            best_inliers = inliers
            best_count = count

            needed = required_trials(best_count, n_samples, self.min_samples,
                                     self.probability)
            bound = min(bound, max(needed, trials))
            logger.debug("Trial %d: %d/%d inliers, bound now %d",
                         trials, best_count, n_samples, bound)

        if best_model is None:
            raise NoConsensusError(f"Every fit was degenerate in {trials} trials")

        logger.debug("RANSAC finished after %d trials with %d/%d inliers",
                     trials, best_count, n_samples)
        return best_model, best_inliers, trials
