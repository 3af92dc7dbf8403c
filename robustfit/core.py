"""
Robust line fitting
Main entry point for RANSAC linear regression
"""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from robustfit.config import merge_config
from robustfit.estimation.ransac import RANSAC, RandomState
from robustfit.exceptions import DegenerateFitError, InputShapeError
from robustfit.models.linear import LinearModel
from robustfit.utils.statistics import default_min_samples, mad_threshold, outlier_complement

logger = logging.getLogger(__name__)


def build_dataset(x: Sequence[float], y: Sequence[float]) -> np.ndarray:
    """
    Stack x and y into a read-only (N, 2) array

    Raises:
        InputShapeError: If x and y are not 1-D, differ in length or hold
            fewer than two points
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)

    if xs.ndim != 1 or ys.ndim != 1:
        raise InputShapeError(
            f"x and y must be one-dimensional, got shapes {xs.shape} and {ys.shape}"
        )
    if len(xs) != len(ys):
        raise InputShapeError(f"x and y differ in length: {len(xs)} != {len(ys)}")
    if len(xs) < 2:
        raise InputShapeError(f"At least 2 points are required, got {len(xs)}")
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise ValueError("x and y must contain only finite values")

    data = np.column_stack([xs, ys])
    data.flags.writeable = False
    return data


def ordinary_least_squares(x: Sequence[float], y: Sequence[float]) -> Tuple[float, float]:
    """Plain least-squares line over every point, as (intercept, slope)."""
    return LinearModel().fit(build_dataset(x, y))


class RobustLinearFitter:
    """Fit lines to data containing outliers"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize fitter

        Args:
            config: Configuration overrides merged over DEFAULT_CONFIG (optional)
        """
        self.config = merge_config(config)
        ransac_config = self.config["ransac"]
        self.model = LinearModel(tolerance=ransac_config["inlier_tolerance"])

    def fit(self, x: Sequence[float], y: Sequence[float],
            minimal_sample_size: Optional[int] = None,
            distance_threshold: Optional[float] = None,
            target_probability: Optional[float] = None,
            max_trials: Optional[int] = None,
            random_state: RandomState = None) -> Dict[str, Any]:
        """
        Fit a line robustly

        Omitted arguments fall back to defaults: the median absolute deviation
        of y for the threshold, 80% of the points for the sample size and the
        configured probability and trial cap.

        Args:
            x: Independent variable, N values
            y: Dependent variable, N values
            minimal_sample_size: Points drawn per trial (2 <= m <= N)
            distance_threshold: Largest residual counted as an inlier
            target_probability: Confidence of drawing one clean sample
            max_trials: Hard cap on the number of trials
            random_state: Seed or numpy Generator used for sampling

        Returns:
            Dictionary with model, inliers, outliers and fit diagnostics
        """
        data = build_dataset(x, y)
        n_samples = len(data)
        ransac_config = self.config["ransac"]

        if minimal_sample_size is None:
            minimal_sample_size = default_min_samples(
                n_samples, ransac_config["min_sample_fraction"]
            )
        elif minimal_sample_size > n_samples:
            raise ValueError(
                f"minimal_sample_size ({minimal_sample_size}) exceeds number of points ({n_samples})"
            )
        if distance_threshold is None:
            distance_threshold = mad_threshold(data[:, 1])
        if target_probability is None:
            target_probability = ransac_config["target_probability"]
        if max_trials is None:
            max_trials = ransac_config["max_trials"]

        ransac = RANSAC(
            threshold=distance_threshold,
            max_trials=max_trials,
            min_samples=minimal_sample_size,
            probability=target_probability,
            random_state=random_state
        )
        best_model, inliers, trials = ransac.fit(data, self.model.fit, self.model.score)
        outliers = outlier_complement(inliers, n_samples)

        # Refit on every inlier; the search model only saw a minimal sample
        try:
            model = self.model.fit(data[inliers])
            refit_succeeded = True
        except DegenerateFitError as e:
            logger.warning("Refit on %d inliers failed (%s), keeping search model",
                           len(inliers), e)
            model = best_model
            refit_succeeded = False

        logger.info("Robust fit: intercept=%.6g slope=%.6g, %d inliers, %d outliers, %d trials",
                    model[0], model[1], len(inliers), len(outliers), trials)

        return {
            "model": model,
            "inliers": inliers.tolist(),
            "outliers": outliers.tolist(),
            "refit_succeeded": refit_succeeded,
            "trials": trials,
            "threshold": float(distance_threshold),
            "min_samples": int(minimal_sample_size)
        }


def robust_linear_fit(x: Sequence[float], y: Sequence[float],
                      minimal_sample_size: Optional[int] = None,
                      distance_threshold: Optional[float] = None,
                      target_probability: Optional[float] = None,
                      *,
                      max_trials: Optional[int] = None,
                      random_state: RandomState = None,
                      config: Dict[str, Any] = None) -> Dict[str, Any]:
    """Fit y = intercept + slope * x with RANSAC. See RobustLinearFitter.fit."""
    fitter = RobustLinearFitter(config)
    return fitter.fit(
        x, y,
        minimal_sample_size=minimal_sample_size,
        distance_threshold=distance_threshold,
        target_probability=target_probability,
        max_trials=max_trials,
        random_state=random_state
    )
