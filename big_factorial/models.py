from enum import Enum

from pydantic import BaseModel, Field


class FactorialStrategy(str, Enum):
    """Available factorial strategies."""

    LINEAR = "linear"
    OPTIMIZED = "optimized"


class FactorialResult(BaseModel):
    """Outcome of one factorial computation.

    Attributes:
        n (int): The input.
        strategy (FactorialStrategy): Strategy that produced the value.
        value (str): n! in base 10.
        digits (int): Number of base-10 digits of n!.
        multiplications (int): Big-number multiplications performed.
    """
    n: int = Field(..., ge=0, description="Input of the factorial")
    strategy: FactorialStrategy = Field(..., description="Strategy used")
    value: str = Field(..., description="Exact decimal value of n!")
    digits: int = Field(..., ge=1, description="Number of decimal digits")
    multiplications: int = Field(..., ge=0, description="Big-number multiplications performed")


class FactorialRequest(BaseModel):
    """Request model for computing a factorial.

    Attributes:
        n (int): Non-negative input.
        strategy (FactorialStrategy): Strategy to use, optimized by default.
    """
    n: int = Field(..., ge=0, description="Input, must be non-negative")
    strategy: FactorialStrategy = Field(
        FactorialStrategy.OPTIMIZED, description="Computation strategy"
    )


class FactorialResponse(FactorialResult):
    """Response model for the factorial endpoint."""
