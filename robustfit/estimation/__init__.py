"""Robust estimation engines."""

from .ransac import RANSAC, required_trials

__all__ = ['RANSAC', 'required_trials']
