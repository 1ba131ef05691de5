"""
Factorial Calculator Module

This module provides functionality for calculating factorials of non-negative integers.
It includes an interface, a concrete iterative implementation, request/response
models, settings, and the errors raised for invalid input.
"""

from .config import CalculatorSettings
from .exceptions import FactorialError, FactorialOverflowError, InvalidArgumentError
from .factorial_calculator import (
    FactorialCalculator,
    ensure_printable,
    factorial_digits,
    factorial_of,
    largest_printable_n,
)
from .interfaces import IFactorialCalculator
from .models import FactorialRequest, FactorialResponse

__all__ = [
    "CalculatorSettings",
    "FactorialCalculator",
    "FactorialError",
    "FactorialOverflowError",
    "FactorialRequest",
    "FactorialResponse",
    "IFactorialCalculator",
    "InvalidArgumentError",
    "ensure_printable",
    "factorial_digits",
    "factorial_of",
    "largest_printable_n",
]
