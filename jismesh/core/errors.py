"""
Errors — Таксономия ошибок jismesh

Три класса ошибок, все локальные и детерминированные (без I/O, без retry):
1. Нарушение диапазона координат (глобальный диапазон или зона покрытия сетки)
2. Нарушение формата кода меша (пустая строка, не-цифра, неверная длина)
3. Неподдерживаемое уточнение уровня (to_level к более мелкому уровню)

CoordinateError и GridCodeFormatError наследуют ValueError, чтобы их можно было
выбрасывать из pydantic-валидаторов (pydantic оборачивает их в ValidationError).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jismesh.core.domain.grid_level import GridLevel


class JisMeshError(Exception):
    """Базовый класс всех ошибок jismesh"""


# =============================================================================
# COORDINATE ERRORS
# =============================================================================


class CoordinateError(JisMeshError, ValueError):
    """Координата вне допустимого диапазона"""


class LatitudeOutOfRangeError(CoordinateError):
    """Широта вне глобального диапазона [-90, 90] (или NaN/Inf)"""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Invalid latitude: {value} (must be between -90 and 90)")


class LongitudeOutOfRangeError(CoordinateError):
    """Долгота вне глобального диапазона [-180, 180] (или NaN/Inf)"""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Invalid longitude: {value} (must be between -180 and 180)")


class OutOfEnvelopeError(CoordinateError):
    """
    Координата вне зоны покрытия сетки.

    Зона покрытия: широта 20..46, долгота 122..154.
    """

    def __init__(self, lat: float, lon: float):
        self.lat = lat
        self.lon = lon
        super().__init__(
            f"Coordinate ({lat}, {lon}) is outside of the supported mesh envelope "
            f"(lat 20..46, lon 122..154)"
        )


# =============================================================================
# GRID CODE FORMAT ERRORS
# =============================================================================


class GridCodeFormatError(JisMeshError, ValueError):
    """Некорректный строковый формат кода меша"""


class EmptyGridCodeError(GridCodeFormatError):
    def __init__(self) -> None:
        super().__init__("Invalid mesh code format: empty string")


class InvalidDigitError(GridCodeFormatError):
    """Символ, не являющийся ASCII-цифрой, в позиции position"""

    def __init__(self, position: int, digit: str):
        self.position = position
        self.digit = digit
        super().__init__(f"Invalid digit {digit!r} at position {position}")


class InvalidCodeLengthError(GridCodeFormatError):
    """Длина кода не соответствует ни одному уровню"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid mesh code level: length {length}")


# =============================================================================
# HIERARCHY ERRORS
# =============================================================================


class UnsupportedRefinementError(JisMeshError):
    """
    Запрошен переход к уровню, который не является предком исходного кода.

    Переход к более мелкому уровню невозможен без дополнительной информации
    (неизвестно, какой из потомков выбрать).
    """

    def __init__(self, source: GridLevel, target: GridLevel):
        self.source = source
        self.target = target
        super().__init__(
            f"Cannot convert {source.value} code to {target.value}: "
            f"{target.value} is not an ancestor of {source.value}"
        )
