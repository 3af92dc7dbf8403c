"""Model plugins for the RANSAC engine."""

from .linear import LinearModel

__all__ = ['LinearModel']
