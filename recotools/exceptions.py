"""Exceptions raised by RecoTools."""


class DimensionError(ValueError):
    """Raised when a grid is not rectangular or a view/scan count is not positive."""
