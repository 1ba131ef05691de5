from fastapi import Depends, FastAPI, HTTPException, Path

from logging_config import setup_logging

from .container import Container
from .exceptions import FactorialOverflowError, InvalidArgumentError
from .factorial_calculator import ensure_printable
from .interfaces import IFactorialCalculator
from .models import FactorialRequest, FactorialResponse


container = Container()
settings = container.settings()

logger = setup_logging("factorial_calculator", log_dir=settings.log_dir, level=settings.log_level)

app = FastAPI(title="Factorial Calculator", description="API for calculating factorials")


def get_calculator() -> IFactorialCalculator:
    """Возвращает калькулятор из DI-контейнера."""
    return container.calculator()


def _calculate(calculator: IFactorialCalculator, n: int) -> FactorialResponse:
    """Вычисляет n! и переводит ошибки калькулятора в HTTP-ответы."""
    try:
        ensure_printable(n)
        result = calculator.compute_factorial(n)
        response = FactorialResponse.from_result(n, result)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FactorialOverflowError as e:
        logger.warning("Rejected n=%d above max_n=%d", e.n, e.max_n)
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error in factorial calculation: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info("Calculated factorial of %d", n)
    return response


@app.post("/factorial", response_model=FactorialResponse)
def factorial_endpoint(
    request: FactorialRequest,
    calculator: IFactorialCalculator = Depends(get_calculator),
) -> FactorialResponse:
    """Эндпоинт для вычисления факториала.

    Принимает запрос с неотрицательным числом n и возвращает n!.
    Отрицательное n отклоняется валидацией запроса (422).

    Raises:
        HTTPException: 413, если n больше настроенного max_n.
    """
    return _calculate(calculator, request.n)


@app.get("/factorial/{n}", response_model=FactorialResponse)
def factorial_by_path_endpoint(
    n: int = Path(..., description="Число, факториал которого нужно вычислить"),
    calculator: IFactorialCalculator = Depends(get_calculator),
) -> FactorialResponse:
    """Эндпоинт для вычисления факториала числа из пути.

    Raises:
        HTTPException: 400 для отрицательного n, 413 если n больше max_n.
    """
    return _calculate(calculator, n)


@app.get("/health")
def health() -> dict:
    return {"status": "healthy"}
