"""
Big Factorial Module

This module provides exact factorials of non-negative integers of any size.
It includes an arbitrary-precision BigUint, an engine interface, and a
concrete engine with a linear and an odd-square-difference strategy.
"""

from .big_uint import BigUint
from .exceptions import FactorialError, InvalidArgument
from .factorial_engine import FactorialEngine, factorial, to_decimal_string
from .interfaces import IFactorialEngine
from .models import FactorialResult, FactorialStrategy

__all__ = [
    "BigUint",
    "FactorialEngine",
    "FactorialError",
    "FactorialResult",
    "FactorialStrategy",
    "IFactorialEngine",
    "InvalidArgument",
    "factorial",
    "to_decimal_string",
]
