from dependency_injector import containers, providers

from .config import Settings
from .factorial_engine import FactorialEngine


class Container(containers.DeclarativeContainer):
    """DI Container for managing dependencies."""

    settings = providers.Singleton(Settings.from_env)

    # a fresh engine per request keeps last_multiplications per call
    engine = providers.Factory(
        FactorialEngine,
        radix=settings.provided.radix,
        word_bits=settings.provided.word_bits,
    )
