"""
GridCode — Код регионального меша

Immutable Pydantic модель: пара (уровень, числовой код).

Каноническое строковое представление — десятичные цифры, дополненные нулями
слева до длины кода уровня (4, 6, 8, 9, 10 или 11). Это единственная
сериализованная форма; GridCode.parse — единственный путь десериализации.

Равенство и хеш определяются парой (level, code).
"""

from pydantic import BaseModel, Field, model_validator

from jismesh.core.domain.grid_level import GridLevel
from jismesh.core.errors import EmptyGridCodeError, InvalidDigitError

_ASCII_DIGITS = frozenset("0123456789")


class GridCode(BaseModel):
    """
    Код меша.

    Создаётся Encoder'ом, напрямую из (level, code) или через parse().

    Examples:
        >>> mesh = GridCode.parse("5339")
        >>> mesh.level
        <GridLevel.LEVEL1: 'level1'>
        >>> str(GridCode(level=GridLevel.LEVEL1, code=1))
        '0001'
    """

    level: GridLevel = Field(..., description="Уровень меша")
    code: int = Field(..., ge=0, description="Числовое значение кода")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_code_fits_level(self) -> "GridCode":
        """Код, дополненный нулями, должен занимать ровно code_length цифр"""
        if self.code >= 10**self.level.code_length:
            raise ValueError(
                f"code {self.code} has more than {self.level.code_length} digits "
                f"required by {self.level.value}"
            )
        return self

    @classmethod
    def parse(cls, text: str) -> "GridCode":
        """
        Разбор строки кода.

        Уровень определяется по длине строки; для 10 цифр — по 9-й цифре
        (см. GridLevel.from_code_string): 1-4 → LEVEL4_QUARTER, иначе LEVEL5.
        Индексы 10..49 уровня LEVEL5 неотличимы от LEVEL4_QUARTER и
        разбираются как LEVEL4_QUARTER; такой код создаётся напрямую
        через GridCode(level=GridLevel.LEVEL5, code=...).

        Args:
            text: Строка кода (например, "5339", "533946", "53394611")

        Returns:
            GridCode

        Raises:
            EmptyGridCodeError: Пустая строка
            InvalidDigitError: Символ не ASCII-цифра (с позицией)
            InvalidCodeLengthError: Длина не соответствует ни одному уровню
        """
        if not text:
            raise EmptyGridCodeError()

        for position, char in enumerate(text):
            if char not in _ASCII_DIGITS:
                raise InvalidDigitError(position, char)

        return cls(level=GridLevel.from_code_string(text), code=int(text))

    def as_string(self) -> str:
        """Каноническая строка, дополненная нулями до длины уровня"""
        return f"{self.code:0{self.level.code_length}d}"

    def __str__(self) -> str:
        return self.as_string()
