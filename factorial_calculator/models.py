from pydantic import BaseModel, Field


class FactorialRequest(BaseModel):
    """Модель запроса для вычисления факториала.

    Attributes:
        n (int): Число, факториал которого нужно вычислить.
    """
    n: int = Field(..., ge=0, description="Число, должно быть неотрицательным")


class FactorialResponse(BaseModel):
    """Модель ответа с результатом вычисления факториала.

    Attributes:
        n (int): Исходное число.
        result (int): Результат вычисления n!.
        digits (int): Количество десятичных цифр в результате.
    """
    n: int = Field(..., ge=0, description="Исходное число")
    result: int = Field(..., ge=1, description="Результат вычисления n!")
    digits: int = Field(..., ge=1, description="Количество цифр в результате")

    @classmethod
    def from_result(cls, n: int, result: int) -> "FactorialResponse":
        """Собирает ответ из входного числа и вычисленного факториала."""
        return cls(n=n, result=result, digits=len(str(result)))
