"""
Arbitrary-precision unsigned integer

This module contains the BigUint value type used by the factorial engine.
A BigUint stores its value as a list of digits in a power-of-ten radix,
least-significant digit first, and supports exactly the arithmetic the
factorial strategies need: multiplication by a word-sized integer.
"""

import logging
from functools import total_ordering
from typing import Iterable, List, Tuple

from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)

DEFAULT_RADIX = 10 ** 9
DEFAULT_WORD_BITS = 64


def _decimal_width(radix: int) -> int:
    """Return k such that radix == 10 ** k, or raise InvalidArgument."""
    if isinstance(radix, bool) or not isinstance(radix, int) or radix < 10:
        raise InvalidArgument(f"Radix must be a power of ten >= 10, got {radix!r}")
    text = str(radix)
    if text != "1" + "0" * (len(text) - 1):
        raise InvalidArgument(f"Radix must be a power of ten >= 10, got {radix}")
    return len(text) - 1


def validate_radix(radix: int, word_bits: int) -> int:
    """
    Check that ``radix`` is usable with a ``word_bits``-bit word.

    The radix must be a power of ten and ``radix * radix`` must fit the word,
    so every single radix digit is itself a word-safe multiplier.

    Returns:
        int: The number of decimal digits per BigUint digit.

    Raises:
        InvalidArgument: If the radix or the word size is unusable.
    """
    width = _decimal_width(radix)
    if isinstance(word_bits, bool) or not isinstance(word_bits, int) or radix * radix > (1 << max(word_bits, 0)):
        raise InvalidArgument(f"Radix {radix} does not fit a {word_bits}-bit word")
    return width


@total_ordering
class BigUint:
    """
    Non-negative integer of unbounded size.

    Digits are kept least-significant first. The list is never empty and
    never has a most-significant zero digit, except for the value zero which
    is the single digit ``[0]``.

    ``word_bits`` models the machine word that holds one
    ``digit * multiplier + carry`` step. Since the carry never reaches the
    multiplier, that step stays below ``radix * multiplier``, so any
    multiplier up to ``max_multiplier`` is safe.

    Attributes:
        radix (int): The digit base, a power of ten.
        word_bits (int): Width of the modeled machine word.
    """

    def __init__(self, digits: Iterable[int], radix: int = DEFAULT_RADIX,
                 word_bits: int = DEFAULT_WORD_BITS):
        """
        Build a BigUint from raw digits.

        Args:
            digits (Iterable[int]): Digits, least-significant first.
            radix (int): Digit base, a power of ten.
            word_bits (int): Width of the machine word bounding one multiply step.

        Raises:
            InvalidArgument: If the radix, the word size or any digit is out of range.
        """
        self._width = validate_radix(radix, word_bits)
        self.radix = radix
        self.word_bits = word_bits

        normalized = list(digits)
        for digit in normalized:
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise InvalidArgument(f"Digit {digit!r} is not an integer")
            if not 0 <= digit < radix:
                raise InvalidArgument(f"Digit {digit} is outside [0, {radix - 1}]")
        while len(normalized) > 1 and normalized[-1] == 0:
            normalized.pop()
        self._digits: List[int] = normalized or [0]

    @classmethod
    def from_small(cls, value: int, radix: int = DEFAULT_RADIX,
                   word_bits: int = DEFAULT_WORD_BITS) -> "BigUint":
        """
        Create a BigUint holding ``value``.

        Args:
            value (int): A non-negative integer.
            radix (int): Digit base, a power of ten.
            word_bits (int): Width of the machine word.

        Returns:
            BigUint: The value split into digits.

        Raises:
            InvalidArgument: If value is negative or not an integer, or the
                radix is unusable.

        Examples:
            >>> BigUint.from_small(1234567890123).digits
            (567890123, 1234)
        """
        validate_radix(radix, word_bits)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Expected an integer, got {type(value).__name__}")
        if value < 0:
            raise InvalidArgument("BigUint cannot hold a negative value")
        digits = []
        while True:
            value, digit = divmod(value, radix)
            digits.append(digit)
            if value == 0:
                break
        return cls(digits, radix=radix, word_bits=word_bits)

    @property
    def digits(self) -> Tuple[int, ...]:
        return tuple(self._digits)

    @property
    def max_multiplier(self) -> int:
        """Largest multiplier for which ``digit * multiplier + carry`` fits the word."""
        return (1 << self.word_bits) // self.radix

    def is_zero(self) -> bool:
        return self._digits == [0]

    def multiply_by_small(self, multiplier: int) -> "BigUint":
        """
        Multiply by a non-negative integer.

        Each digit, least-significant first, becomes
        ``(digit * multiplier + carry) % radix`` and the quotient carries into
        the next digit. Whatever carry remains after the top digit is split
        into new digits.

        A multiplier above ``max_multiplier`` is applied one radix digit at a
        time, each partial product shifted into place and added, so no single
        step ever leaves the word.

        Args:
            multiplier (int): Non-negative integer.

        Returns:
            BigUint: A new value; ``self`` is left untouched.

        Raises:
            InvalidArgument: If multiplier is negative or not an integer.
        """
        if isinstance(multiplier, bool) or not isinstance(multiplier, int):
            raise InvalidArgument(f"Expected an integer, got {type(multiplier).__name__}")
        if multiplier < 0:
            raise InvalidArgument("Multiplier must be non-negative")
        if multiplier <= self.max_multiplier:
            return BigUint(self._scaled(multiplier), self.radix, self.word_bits)

        logger.debug("multiplier %d exceeds word limit, splitting by radix digit", multiplier)
        total = [0]
        shift = 0
        while multiplier:
            multiplier, part = divmod(multiplier, self.radix)
            if part:
                total = self._add_shifted(total, self._scaled(part), shift)
            shift += 1
        return BigUint(total, self.radix, self.word_bits)

    def _scaled(self, multiplier: int) -> List[int]:
        # multiplier <= max_multiplier, so digit * multiplier + carry fits the word
        if multiplier == 0:
            return [0]
        radix = self.radix
        result = []
        carry = 0
        for digit in self._digits:
            carry, digit = divmod(digit * multiplier + carry, radix)
            result.append(digit)
        while carry:
            carry, digit = divmod(carry, radix)
            result.append(digit)
        return result

    def _add_shifted(self, total: List[int], part: List[int], shift: int) -> List[int]:
        """Add ``part * radix**shift`` into ``total``; each step stays below 2 * radix."""
        radix = self.radix
        total = total + [0] * max(0, shift + len(part) - len(total))
        carry = 0
        for i, digit in enumerate(part, start=shift):
            carry, total[i] = divmod(total[i] + digit + carry, radix)
        i = shift + len(part)
        while carry:
            if i == len(total):
                total.append(0)
            carry, total[i] = divmod(total[i] + carry, radix)
            i += 1
        return total

    def to_decimal_string(self) -> str:
        """Render the value in base 10, most-significant digit first."""
        head = str(self._digits[-1])
        width = self._width
        return head + "".join(str(d).zfill(width) for d in reversed(self._digits[:-1]))

    def decimal_digit_count(self) -> int:
        """Number of base-10 digits, computed without building the string."""
        return len(str(self._digits[-1])) + self._width * (len(self._digits) - 1)

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = value * self.radix + digit
        return value

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        if len(self._digits) > 4:
            return f"BigUint(<{self.decimal_digit_count()} digits>, radix={self.radix})"
        return f"BigUint({self.to_decimal_string()}, radix={self.radix})"

    def _key(self, other: "BigUint"):
        # same radix compares digit lists, mixed radices fall back to int
        if self.radix == other.radix:
            return (len(self._digits), self._digits[::-1]), (len(other._digits), other._digits[::-1])
        return int(self), int(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine == theirs

    def __lt__(self, other) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine < theirs

    def __hash__(self) -> int:
        return hash(int(self))
