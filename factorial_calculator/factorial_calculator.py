"""
Factorial Calculator Implementation

This module contains the concrete implementation of the FactorialCalculator class,
which computes the factorial of a non-negative integer using an iterative approach.
"""

import logging
import math
import sys
from typing import Optional

from .exceptions import FactorialOverflowError, InvalidArgumentError
from .interfaces import IFactorialCalculator


logger = logging.getLogger(__name__)


class FactorialCalculator(IFactorialCalculator):
    """
    Concrete implementation of IFactorialCalculator using an iterative method.

    Python integers have arbitrary precision, so an unbounded calculator never
    overflows. Passing ``max_n`` turns on an explicit limit: larger inputs are
    rejected with FactorialOverflowError before any multiplication happens.

    Attributes:
        max_n (Optional[int]): Largest accepted input, or None for no limit.
    """

    def __init__(self, max_n: Optional[int] = None):
        """
        Args:
            max_n (Optional[int]): Largest accepted input. None disables the limit.

        Raises:
            ValueError: If max_n is negative or not an integer.
        """
        if max_n is not None and (isinstance(max_n, bool) or not isinstance(max_n, int) or max_n < 0):
            raise ValueError(f"max_n must be a non-negative integer or None, got {max_n!r}")
        self.max_n = max_n

    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer for which to compute the factorial.
                     Must be >= 0 and, when a limit is set, <= max_n.

        Returns:
            int: The factorial of n (n!).

        Raises:
            InvalidArgumentError: If n is negative.
            FactorialOverflowError: If n is greater than max_n.
            TypeError: If n is not an integer.

        Examples:
            >>> calculator = FactorialCalculator()
            >>> calculator.compute_factorial(0)
            1
            >>> calculator.compute_factorial(5)
            120
        """
        # bool is a subclass of int
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Expected an integer, got {type(n).__name__}")
        if n < 0:
            raise InvalidArgumentError(n)
        if self.max_n is not None and n > self.max_n:
            raise FactorialOverflowError(n, self.max_n)

        logger.debug("Computing factorial of %d", n)
        result = 1
        for i in range(2, n + 1):
            result *= i
        return result


_default_calculator = FactorialCalculator()


def factorial_of(n: int) -> int:
    """Return n! using an unbounded calculator."""
    return _default_calculator.compute_factorial(n)


def factorial_digits(n: int) -> int:
    """Return the number of decimal digits in n! without computing n!."""
    if n < 0:
        raise InvalidArgumentError(n)
    return math.floor(math.lgamma(n + 1) / math.log(10)) + 1


def largest_printable_n() -> Optional[int]:
    """Return the largest n whose factorial the interpreter can turn into a string.

    Returns None when the int-to-str digit limit is switched off.
    """
    limit = sys.get_int_max_str_digits()
    if not limit:
        return None
    n = 0
    while factorial_digits(n + 1) <= limit:
        n += 1
    return n


def ensure_printable(n: int) -> None:
    """Reject n when n! has more digits than the int-to-str limit allows.

    Raises:
        FactorialOverflowError: If str(n!) would fail.
    """
    limit = largest_printable_n()
    if limit is not None and n > limit:
        raise FactorialOverflowError(n, limit)
