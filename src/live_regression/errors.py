#  Copyright (c) Michele De Stefano - 2026.


class LiveRegressionError(Exception):
    """Base exception for the project."""


class ResourceError(LiveRegressionError):
    """Raised when the dataset resource cannot be read or parsed."""


class ShapeMismatchError(LiveRegressionError):
    """Raised when the X and Y series do not have the same length."""
