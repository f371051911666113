"""
Coordinate — Географическая координата (широта/долгота)

Immutable Pydantic модель. Проверки при публичном создании:
1. Широта в глобальном диапазоне [-90, 90]
2. Долгота в глобальном диапазоне [-180, 180]
3. Точка внутри зоны покрытия сетки (широта 20..46, долгота 122..154)

Coordinate.unchecked() пропускает проверки. Используется для производных
значений (углы ячеек, сдвинутые центры, точки обхода), которые при поиске
соседей могут законно оказаться чуть за границей зоны покрытия.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from jismesh.core.errors import (
    LatitudeOutOfRangeError,
    LongitudeOutOfRangeError,
    OutOfEnvelopeError,
)
from jismesh.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

# Глобальный диапазон
LAT_MIN: Final[float] = -90.0
LAT_MAX: Final[float] = 90.0
LON_MIN: Final[float] = -180.0
LON_MAX: Final[float] = 180.0

# Зона покрытия сетки
ENVELOPE_LAT_MIN: Final[float] = 20.0
ENVELOPE_LAT_MAX: Final[float] = 46.0
ENVELOPE_LON_MIN: Final[float] = 122.0
ENVELOPE_LON_MAX: Final[float] = 154.0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_latitude(lat: float) -> float:
    """
    Raises:
        LatitudeOutOfRangeError: Если широта вне [-90, 90] или NaN/Inf
    """
    if not is_valid_float(lat) or not LAT_MIN <= lat <= LAT_MAX:
        raise LatitudeOutOfRangeError(lat)
    return lat


def validate_longitude(lon: float) -> float:
    """
    Raises:
        LongitudeOutOfRangeError: Если долгота вне [-180, 180] или NaN/Inf
    """
    if not is_valid_float(lon) or not LON_MIN <= lon <= LON_MAX:
        raise LongitudeOutOfRangeError(lon)
    return lon


def is_in_envelope(lat: float, lon: float) -> bool:
    """Точка внутри зоны покрытия сетки (границы включительно)"""
    return (
        ENVELOPE_LAT_MIN <= lat <= ENVELOPE_LAT_MAX
        and ENVELOPE_LON_MIN <= lon <= ENVELOPE_LON_MAX
    )


def validate_envelope(lat: float, lon: float) -> None:
    """
    Raises:
        OutOfEnvelopeError: Если точка вне зоны покрытия
    """
    if not is_in_envelope(lat, lon):
        raise OutOfEnvelopeError(lat, lon)


# =============================================================================
# COORDINATE MODEL
# =============================================================================


class Coordinate(BaseModel):
    """
    Координата в градусах (WGS84/JGD2011, без преобразования датумов).

    Immutable модель (frozen=True).

    Examples:
        >>> tokyo = Coordinate(lat=35.6812, lon=139.7671)
        >>> tokyo.lat
        35.6812
        >>> Coordinate.new(35.6812, 139.7671) == tokyo
        True
    """

    lat: float = Field(..., description="Широта (градусы)")
    lon: float = Field(..., description="Долгота (градусы)")

    model_config = {"frozen": True}

    @field_validator("lat")
    @classmethod
    def validate_lat(cls, v: float) -> float:
        return validate_latitude(v)

    @field_validator("lon")
    @classmethod
    def validate_lon(cls, v: float) -> float:
        return validate_longitude(v)

    @model_validator(mode="after")
    def validate_in_envelope(self) -> "Coordinate":
        validate_envelope(self.lat, self.lon)
        return self

    @classmethod
    def new(cls, lat: float, lon: float) -> "Coordinate":
        """
        Создание координаты с типизированными ошибками.

        В отличие от Coordinate(lat=..., lon=...), ошибки не оборачиваются
        в pydantic.ValidationError.

        Raises:
            LatitudeOutOfRangeError: Широта вне [-90, 90]
            LongitudeOutOfRangeError: Долгота вне [-180, 180]
            OutOfEnvelopeError: Точка вне зоны покрытия
        """
        lat = validate_latitude(float(lat))
        lon = validate_longitude(float(lon))
        validate_envelope(lat, lon)
        return cls.model_construct(lat=lat, lon=lon)

    @classmethod
    def unchecked(cls, lat: float, lon: float) -> "Coordinate":
        """Создание координаты без проверок (только для производных значений)"""
        return cls.model_construct(lat=float(lat), lon=float(lon))

    def in_envelope(self) -> bool:
        return is_in_envelope(self.lat, self.lon)
