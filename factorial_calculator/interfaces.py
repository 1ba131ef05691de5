"""Contract shared by factorial calculators and the components that consume them."""

from abc import ABC, abstractmethod


class IFactorialCalculator(ABC):
    """Interface for components that compute n!.

    Implementations may accept every non-negative integer or stop at an
    upper bound. A bounded implementation rejects inputs above its bound
    before doing any work, so callers such as the HTTP API can tell a
    refused request from a failed one.
    """

    @abstractmethod
    def compute_factorial(self, n: int) -> int:
        """Return n! as an exact integer.

        Args:
            n: Non-negative integer within the implementation's bound.

        Raises:
            InvalidArgumentError: n is negative.
            FactorialOverflowError: n is above the bound.
            TypeError: n is not an int (bool included).
        """
        ...
