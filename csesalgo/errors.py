"""Exceptions shared across the package."""


class ImpossibleError(Exception):
    """Raised when a problem instance has no valid answer."""