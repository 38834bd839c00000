"""
cyclic_vectors/errors.py - Exception taxonomy for the vector engine.

Every failure the library raises derives from ``CyclicVectorError`` and also
from the closest builtin, so callers can catch either the library base class
or the familiar ``ValueError`` / ``ZeroDivisionError``.

Empty inputs are not errors: operations on empty vectors and empty criteria
return documented degenerate values instead of raising.
"""

from __future__ import annotations


class CyclicVectorError(Exception):
    """Base class for every error raised by cyclic_vectors."""


class ArithmeticPreconditionError(CyclicVectorError, ZeroDivisionError):
    """Raised when an arithmetic operation would divide by zero.

    Covers Euclidean division by zero, componentwise division or modulo by a
    sequence that is empty or contains a zero, and normalising a zero-sum
    distribution.

    Args:
        operation: Name of the operation that refused to run.
        reason: Short description of the failed precondition.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failing operation and the reason."""
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


class ValidationError(CyclicVectorError, ValueError):
    """Raised when a value object is constructed with invalid contents.

    Examples: a binary vector element outside {0, 1}, a non-positive
    stretch factor, or a non-positive modulus where one is required.
    """


class ParameterRangeError(CyclicVectorError, ValueError):
    """Raised when a parameter is outside its documented range.

    Args:
        name: Parameter name.
        value: The rejected value.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
    """

    def __init__(self, name: str, value: object, low: int, high: int) -> None:
        """Initialize with the parameter name, value and accepted bounds."""
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name} must be in [{low}, {high}], got {value!r}")


class EmptyMatrixError(CyclicVectorError, ValueError):
    """Raised when a query needs at least one row but the matrix is empty."""
