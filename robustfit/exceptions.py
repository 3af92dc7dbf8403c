"""Exceptions raised by robustfit."""


class RobustFitError(Exception):
    """Base class for robustfit errors."""


class InputShapeError(RobustFitError, ValueError):
    """x and y do not describe a usable dataset."""


class DegenerateFitError(RobustFitError):
    """A model could not be fitted to the given subset."""


class NoConsensusError(RobustFitError):
    """No trial produced a model with enough support."""
