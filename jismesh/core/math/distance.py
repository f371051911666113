"""
Distance — Расстояние по большому кругу и угловые размеры радиуса

Haversine на сфере фиксированного радиуса. Подходит для сравнительно
коротких расстояний в пределах зоны покрытия сетки.
"""

import math
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from jismesh.core.domain.coordinate import Coordinate

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Средний радиус Земли (метры)
EARTH_RADIUS_METERS: Final[float] = 6_371_000.0

# Длина 1 градуса широты (метры, практически постоянна)
METERS_PER_DEGREE_LAT: Final[float] = 111_320.0


# =============================================================================
# РАССТОЯНИЯ
# =============================================================================


def haversine_distance(
    a: "Coordinate",
    b: "Coordinate",
    earth_radius_meters: float = EARTH_RADIUS_METERS,
) -> float:
    """
    Расстояние между двумя точками по формуле haversine.

    Args:
        a: Первая точка
        b: Вторая точка
        earth_radius_meters: Радиус сферы (default: EARTH_RADIUS_METERS)

    Returns:
        Расстояние в метрах (симметрично: d(a, b) == d(b, a))

    Examples:
        >>> tokyo = Coordinate(lat=35.6812, lon=139.7671)
        >>> yokohama = Coordinate(lat=35.4437, lon=139.6380)
        >>> round(haversine_distance(tokyo, yokohama) / 1000)
        29
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon) - math.radians(a.lon)

    h = math.sin(dlat / 2.0) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    c = 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))

    return earth_radius_meters * c


def bbox_offsets(
    center: "Coordinate",
    radius_meters: float,
    meters_per_degree: float = METERS_PER_DEGREE_LAT,
) -> tuple[float, float]:
    """
    Угловые полуразмеры прямоугольника, описанного вокруг круга радиуса radius_meters.

    Длина градуса долготы уменьшается к полюсам, поэтому долготная
    полуширина делится на cos(широты центра).

    Args:
        center: Центр круга
        radius_meters: Радиус (метры)
        meters_per_degree: Длина градуса широты (default: METERS_PER_DEGREE_LAT)

    Returns:
        (lat_offset, lon_offset) в градусах
    """
    lat_offset = radius_meters / meters_per_degree
    lon_offset = radius_meters / (meters_per_degree * math.cos(math.radians(center.lat)))

    return lat_offset, lon_offset
