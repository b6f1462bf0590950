"""
Factorial Engine Interface

This module defines the abstract interface for exact factorial computation.
It provides a contract that concrete engines must follow.
"""

from abc import ABC, abstractmethod

from .big_uint import BigUint


class IFactorialEngine(ABC):
    """
    Abstract interface for exact factorial computation.

    Implementations return the factorial as a BigUint and must agree digit for
    digit across strategies. Input validation happens before any BigUint is
    allocated.
    """

    @abstractmethod
    def compute_linear(self, n: int) -> BigUint:
        """
        Compute n! by multiplying the accumulator by every integer 1..n.

        Args:
            n (int): A non-negative integer.

        Returns:
            BigUint: The exact value of n!.

        Raises:
            InvalidArgument: If n is negative.
            TypeError: If n is not an integer.
        """
        ...

    @abstractmethod
    def compute_optimized(self, n: int) -> BigUint:
        """
        Compute n! with the odd-square-difference strategy.

        Args:
            n (int): A non-negative integer.

        Returns:
            BigUint: The exact value of n!.

        Raises:
            InvalidArgument: If n is negative.
            TypeError: If n is not an integer.
        """
        ...
