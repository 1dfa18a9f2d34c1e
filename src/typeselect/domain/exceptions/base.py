"""Base exceptions for typeselect domain."""


class TypeSelectError(Exception):
    """Root exception for all typeselect errors.

    All domain exceptions inherit from this.
    Allows catching all typeselect-specific errors.
    """
