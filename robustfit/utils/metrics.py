"""Fit quality metrics."""

import numpy as np
from typing import Dict, Sequence, Tuple


class FitMetrics:
    """Compare fitted lines against data or known parameters."""

    @staticmethod
    def residual_summary(x: Sequence[float], y: Sequence[float],
                         model: Tuple[float, float]) -> Dict[str, float]:
        """Calculate absolute residual statistics of a line over (x, y)."""
        intercept, slope = model
        errors = np.abs(np.asarray(y, dtype=float)
                        - (intercept + slope * np.asarray(x, dtype=float)))
        return {
            'mean_error': float(np.mean(errors)),
            'median_error': float(np.median(errors)),
            'max_error': float(np.max(errors)),
            'rms_error': float(np.sqrt(np.mean(errors ** 2)))
        }

    @staticmethod
    def parameter_error(model: Tuple[float, float],
                        truth: Tuple[float, float]) -> float:
        """Euclidean distance between (intercept, slope) pairs."""
        return float(np.linalg.norm(np.asarray(model, dtype=float)
                                    - np.asarray(truth, dtype=float)))
