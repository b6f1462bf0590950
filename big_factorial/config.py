import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from .big_uint import DEFAULT_RADIX, DEFAULT_WORD_BITS, validate_radix

# Load variables from a local .env file, if present
load_dotenv()


class Settings(BaseModel):
    """Runtime settings of the factorial service.

    Attributes:
        radix (int): Radix of BigUint accumulators, a power of ten.
        word_bits (int): Machine word bounding one multiply step.
        max_service_n (int): Largest n the HTTP service will compute.
        log_dir (str): Directory for log files.
    """
    radix: int = Field(DEFAULT_RADIX, ge=10, description="BigUint radix")
    word_bits: int = Field(DEFAULT_WORD_BITS, ge=8, description="Modeled word size in bits")
    max_service_n: int = Field(20000, ge=0, description="Largest n accepted over HTTP")
    log_dir: str = Field("logs", description="Directory for log files")

    @model_validator(mode="after")
    def check_radix_fits_word(self) -> "Settings":
        """Reject a radix that is not a power of ten or whose square overflows the word."""
        validate_radix(self.radix, self.word_bits)
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BIG_FACTORIAL_* environment variables."""
        return cls(
            radix=int(os.getenv("BIG_FACTORIAL_RADIX", DEFAULT_RADIX)),
            word_bits=int(os.getenv("BIG_FACTORIAL_WORD_BITS", DEFAULT_WORD_BITS)),
            max_service_n=int(os.getenv("BIG_FACTORIAL_MAX_SERVICE_N", 20000)),
            log_dir=os.getenv("BIG_FACTORIAL_LOG_DIR", "logs"),
        )
