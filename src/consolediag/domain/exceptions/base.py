"""Base exceptions for consolediag domain."""


class ConsoleDiagError(Exception):
    """Root exception for all consolediag errors.

    All domain exceptions inherit from this.
    Allows catching all consolediag-specific errors.
    """
