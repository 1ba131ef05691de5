from dependency_injector import containers, providers

from .config import CalculatorSettings
from .factorial_calculator import FactorialCalculator


class Container(containers.DeclarativeContainer):
    """DI Container for managing dependencies."""

    settings = providers.Singleton(CalculatorSettings.from_env)

    calculator = providers.Singleton(
        FactorialCalculator,
        max_n=settings.provided.max_n,
    )
