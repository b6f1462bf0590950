"""Tests for the pydantic models, settings and DI container."""

import pytest
from pydantic import ValidationError

from big_factorial.config import Settings
from big_factorial.container import Container
from big_factorial.factorial_engine import FactorialEngine
from big_factorial.models import FactorialRequest, FactorialResult, FactorialStrategy


class TestFactorialRequest:
    """Test cases for FactorialRequest."""

    def test_defaults_to_optimized(self):
        request = FactorialRequest(n=10)
        assert request.n == 10
        assert request.strategy == FactorialStrategy.OPTIMIZED

    def test_accepts_strategy_by_value(self):
        request = FactorialRequest(n=3, strategy="linear")
        assert request.strategy is FactorialStrategy.LINEAR

    def test_negative_n_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            FactorialRequest(n=-1)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("n",) for error in errors)

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            FactorialRequest(n=3, strategy="recursive")


class TestFactorialResult:
    """Test cases for FactorialResult."""

    def test_serializes_strategy_as_value(self):
        result = FactorialResult(n=5, strategy="optimized", value="120", digits=3, multiplications=1)
        assert result.model_dump(mode="json")["strategy"] == "optimized"

    def test_digits_must_be_positive(self):
        with pytest.raises(ValidationError):
            FactorialResult(n=5, strategy="linear", value="120", digits=0, multiplications=5)


class TestSettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("BIG_FACTORIAL_RADIX", "BIG_FACTORIAL_WORD_BITS",
                     "BIG_FACTORIAL_MAX_SERVICE_N", "BIG_FACTORIAL_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.radix == 10 ** 9
        assert settings.word_bits == 64
        assert settings.max_service_n == 20000
        assert settings.log_dir == "logs"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BIG_FACTORIAL_RADIX", "10000")
        monkeypatch.setenv("BIG_FACTORIAL_MAX_SERVICE_N", "50")
        monkeypatch.setenv("BIG_FACTORIAL_LOG_DIR", "/tmp/factorial-logs")

        settings = Settings.from_env()

        assert settings.radix == 10000
        assert settings.max_service_n == 50
        assert settings.log_dir == "/tmp/factorial-logs"

    def test_rejects_tiny_radix(self):
        with pytest.raises(ValidationError):
            Settings(radix=2)

    def test_rejects_radix_that_is_not_power_of_ten(self):
        with pytest.raises(ValidationError):
            Settings(radix=16)

    def test_rejects_radix_whose_square_overflows_word(self):
        with pytest.raises(ValidationError):
            Settings(radix=10 ** 9, word_bits=32)


class TestContainer:
    """Test cases for the DI container."""

    def test_engine_uses_configured_radix(self):
        container = Container()
        container.settings.override(Settings(radix=100))

        engine = container.engine()

        assert isinstance(engine, FactorialEngine)
        assert engine.radix == 100
        assert engine.compute_optimized(6).digits == (20, 7)

    def test_narrow_word_engine_serves_n_above_word_limit(self, monkeypatch):
        monkeypatch.setenv("BIG_FACTORIAL_RADIX", "10")
        monkeypatch.setenv("BIG_FACTORIAL_WORD_BITS", "8")
        container = Container()

        engine = container.engine()
        result = engine.compute_result(30, "linear")

        assert engine.word_bits == 8
        assert result.value == "265252859812191058636308480000000"
        assert engine.compute_result(30, "optimized").value == result.value

    def test_engine_is_new_per_call(self):
        container = Container()
        assert container.engine() is not container.engine()
