"""
robustfit - RANSAC linear regression for data with outliers.
"""

from .core import RobustLinearFitter, ordinary_least_squares, robust_linear_fit
from .exceptions import DegenerateFitError, InputShapeError, NoConsensusError, RobustFitError

__all__ = [
    'RobustLinearFitter',
    'robust_linear_fit',
    'ordinary_least_squares',
    'RobustFitError',
    'InputShapeError',
    'DegenerateFitError',
    'NoConsensusError',
]
__version__ = '1.0.0'
