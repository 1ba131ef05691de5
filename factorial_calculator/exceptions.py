"""
Factorial Calculator Exceptions

Errors raised by factorial calculators. Each one also derives from the
matching built-in exception so callers can catch ``ValueError`` or
``OverflowError`` without importing this module.
"""

from typing import Optional


class FactorialError(Exception):
    """Base class for all factorial calculator errors."""


class InvalidArgumentError(FactorialError, ValueError):
    """Raised when the factorial is requested for a negative number.

    Attributes:
        n (int): The rejected input.
    """

    def __init__(self, n: int, message: Optional[str] = None):
        self.n = n
        super().__init__(message or f"Factorial is not defined for negative numbers (got {n})")


class FactorialOverflowError(FactorialError, OverflowError):
    """Raised when the input exceeds the calculator's configured upper bound.

    Attributes:
        n (int): The rejected input.
        max_n (int): The largest input the calculator accepts.
    """

    def __init__(self, n: int, max_n: int):
        self.n = n
        self.max_n = max_n
        super().__init__(f"Factorial of {n} exceeds the configured limit (max_n={max_n})")
