"""
Factorial Engine Implementation

This module contains FactorialEngine, which computes n! exactly on top of
BigUint with either a linear product or the odd-square-difference strategy,
plus the module-level ``factorial`` and ``to_decimal_string`` helpers.
"""

import logging
from typing import Iterable, List, Union

from .big_uint import DEFAULT_RADIX, DEFAULT_WORD_BITS, BigUint, validate_radix
from .exceptions import InvalidArgument
from .interfaces import IFactorialEngine
from .models import FactorialResult, FactorialStrategy

logger = logging.getLogger(__name__)


def _validate_n(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument("Factorial is not defined for negative numbers")


def _parse_strategy(strategy: Union[FactorialStrategy, str]) -> FactorialStrategy:
    try:
        return FactorialStrategy(strategy)
    except ValueError:
        raise InvalidArgument(f"Unknown factorial strategy: {strategy!r}") from None


class FactorialEngine(IFactorialEngine):
    """
    Exact factorial engine over BigUint.

    Every call builds its own accumulator, so one engine can serve any number
    of sequential calls. ``last_multiplications`` reports how many big-number
    multiplications the most recent call performed.

    Attributes:
        radix (int): Radix of the BigUint accumulators.
        word_bits (int): Word size bounding each multiply step.
        last_multiplications (int): Multiplication count of the last call.
    """

    def __init__(self, radix: int = DEFAULT_RADIX, word_bits: int = DEFAULT_WORD_BITS):
        # fail on a bad radix here rather than on the first call
        validate_radix(radix, word_bits)
        self.radix = radix
        self.word_bits = word_bits
        self.last_multiplications = 0

    def _new(self, value: int) -> BigUint:
        return BigUint.from_small(value, radix=self.radix, word_bits=self.word_bits)

    def _multiply(self, accumulator: BigUint, multiplier: int) -> BigUint:
        self.last_multiplications += 1
        return accumulator.multiply_by_small(multiplier)

    def compute_linear(self, n: int) -> BigUint:
        """
        Compute n! as 1 * 1 * 2 * ... * n.

        Performs exactly n multiplications for n >= 2 and none for 0 or 1.

        Examples:
            >>> str(FactorialEngine().compute_linear(5))
            '120'
        """
        _validate_n(n)
        self.last_multiplications = 0
        accumulator = self._new(1)
        if n < 2:
            return accumulator
        for num in range(1, n + 1):
            accumulator = self._multiply(accumulator, num)
        logger.debug("linear %d! done in %d multiplications", n, self.last_multiplications)
        return accumulator

    def compute_optimized(self, n: int) -> BigUint:
        """
        Compute n! with the odd-square-difference strategy.

        With m = n // 2, the factors pair up around m as
        (m - k) * (m + k) = m*m - k*k for k = 1 .. m - 1. The leftover factors
        m and 2m give the seed 2*m*m, times n when n is odd. Each k*k is
        reached by adding the next odd number to the previous one, so the
        running middle square only ever needs a subtraction. The loop runs
        m - 1 times for both parities, so n = 2 and n = 3 are the seed alone.

        A term that does not fit the word is applied as its two factors;
        BigUint splits any factor that is still wider than the word.

        Examples:
            >>> str(FactorialEngine().compute_optimized(10))
            '3628800'
        """
        _validate_n(n)
        self.last_multiplications = 0
        if n < 2:
            return self._new(1)

        half = n // 2
        middle_square = half * half
        seed = 2 * middle_square * n if n % 2 else 2 * middle_square
        accumulator = self._new(seed)
        max_multiplier = accumulator.max_multiplier

        k = 0
        for num in range(1, n - 2, 2):
            k += 1
            middle_square -= num
            if middle_square <= max_multiplier:
                accumulator = self._multiply(accumulator, middle_square)
            else:
                accumulator = self._multiply(accumulator, half - k)
                accumulator = self._multiply(accumulator, half + k)
        logger.debug("optimized %d! done in %d multiplications", n, self.last_multiplications)
        return accumulator

    def compute(self, n: int,
                strategy: Union[FactorialStrategy, str] = FactorialStrategy.OPTIMIZED) -> BigUint:
        """
        Compute n! with the named strategy.

        Args:
            n (int): A non-negative integer.
            strategy (FactorialStrategy | str): ``"linear"`` or ``"optimized"``.

        Returns:
            BigUint: The exact value of n!.

        Raises:
            InvalidArgument: If n is negative or the strategy is unknown.
            TypeError: If n is not an integer.
        """
        strategy = _parse_strategy(strategy)
        if strategy is FactorialStrategy.LINEAR:
            return self.compute_linear(n)
        return self.compute_optimized(n)

    def compute_result(self, n: int,
                       strategy: Union[FactorialStrategy, str] = FactorialStrategy.OPTIMIZED) -> FactorialResult:
        """Compute n! and package it with its digit and multiplication counts."""
        strategy = _parse_strategy(strategy)
        value = self.compute(n, strategy)
        return FactorialResult(
            n=n,
            strategy=strategy,
            value=value.to_decimal_string(),
            digits=value.decimal_digit_count(),
            multiplications=self.last_multiplications,
        )

    def compute_many(self, ns: Iterable[int],
                     strategy: Union[FactorialStrategy, str] = FactorialStrategy.OPTIMIZED) -> List[BigUint]:
        """Compute independent factorials, one fresh accumulator each, in input order."""
        strategy = _parse_strategy(strategy)
        ns = list(ns)
        for n in ns:
            _validate_n(n)
        return [self.compute(n, strategy) for n in ns]


def factorial(n: int, strategy: Union[FactorialStrategy, str] = FactorialStrategy.OPTIMIZED) -> BigUint:
    """
    Compute n! exactly with the default radix.

    Examples:
        >>> factorial(25).to_decimal_string()
        '15511210043330985984000000'
    """
    return FactorialEngine().compute(n, strategy)


def to_decimal_string(value: BigUint) -> str:
    """Render a BigUint in base 10."""
    return value.to_decimal_string()
