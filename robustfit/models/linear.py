"""Least-squares line model."""

import numpy as np
from typing import Tuple

from robustfit.exceptions import DegenerateFitError

Line = Tuple[float, float]


class LinearModel:
    """Fit and score lines y = intercept + slope * x on (N, 2) point arrays.

    tolerance is relative to |y|, in the manner of numpy.isclose rtol.
    """

    def __init__(self, tolerance: float = 1e-9):
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = tolerance

    def fit(self, points: np.ndarray) -> Line:
        """
        Fit a least-squares line.

        Args:
            points: Array of shape (M, 2) holding x and y columns

        Returns:
            Tuple of (intercept, slope)

        Raises:
            DegenerateFitError: If the points do not determine a finite line
        """
        if len(points) < 2:
            raise DegenerateFitError(f"Need at least 2 points, got {len(points)}")

        xs = points[:, 0]
        ys = points[:, 1]
        design = np.column_stack([np.ones(len(points)), xs])

        solution, _, rank, _ = np.linalg.lstsq(design, ys, rcond=None)
        if rank < 2:
            raise DegenerateFitError("Design matrix is rank deficient (all x equal)")
        if not np.all(np.isfinite(solution)):
            raise DegenerateFitError("Least-squares solution is not finite")

        return float(solution[0]), float(solution[1])

    @staticmethod
    def predict(model: Line, xs: np.ndarray) -> np.ndarray:
        """Evaluate the line at xs."""
        intercept, slope = model
        return intercept + slope * np.asarray(xs, dtype=float)

    def residuals(self, model: Line, points: np.ndarray) -> np.ndarray:
        """Absolute vertical distance of every point from the line."""
        return np.abs(points[:, 1] - self.predict(model, points[:, 0]))

    def score(self, model: Line, points: np.ndarray, threshold: float) -> np.ndarray:
        """Indices of points whose residual is within threshold.

        Each point gets extra slack of tolerance * |y| for round-off, so the
        slack follows the scale of the data.
        """
        slack = self.tolerance * np.abs(points[:, 1])
        within = self.residuals(model, points) <= threshold + slack
        return np.flatnonzero(within)
