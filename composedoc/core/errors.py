"""
ComposeDoc Errors

Exceptions raised when callers break the element contract.
Ordinary outcomes (removing an absent element, a hit-test miss)
are never reported through these.
"""


class CompositionError(Exception):
    """Base class for document tree contract violations."""


class InvalidResizeFactorError(CompositionError, ValueError):
    """Resize factor is zero, negative, NaN or infinite."""

    def __init__(self, factor):
        super().__init__(f"Resize factor must be a finite positive number, got {factor!r}")
        self.factor = factor


class OwnershipError(CompositionError):
    """Element is already owned by a group, or is not attached where expected."""


class CompositionCycleError(OwnershipError):
    """Adding the element would make a group contain itself."""
