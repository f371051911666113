"""
Тесты для ленивого перечисления мешей в круге

Проверяет:
1. Нулевой радиус → ровно один код (меш центра)
2. Отрицательный и нечисловой радиус → пустой результат
3. Все найденные меши в пределах радиуса (по центру ячейки)
4. Монотонность по радиусу и по уровню
5. Поиск от кода меша, restart(), конфигурацию
6. Круг у северной границы зоны покрытия
"""

import logging
import math

import pytest

from jismesh.convert import decode_center, encode
from jismesh.core.domain import ENVELOPE_LAT_MIN, Coordinate, GridCode, GridLevel
from jismesh.core.math import haversine_distance
from jismesh.spatial import (
    RadiusGridIterator,
    RadiusSearchConfig,
    grid_codes_in_radius,
    grid_codes_in_radius_from_code,
    radius_bounding_box,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def tokyo() -> Coordinate:
    """Станция Токио"""
    return Coordinate.new(35.6812, 139.7671)


# =============================================================================
# ОСОБЫЕ РАДИУСЫ
# =============================================================================


class TestSpecialRadius:
    """Нулевой, отрицательный и нечисловой радиус"""

    def test_zero_radius_single_cell(self, tokyo: Coordinate) -> None:
        codes = list(grid_codes_in_radius(tokyo, 0.0, GridLevel.LEVEL3))
        assert codes == [encode(tokyo, GridLevel.LEVEL3)]

    @pytest.mark.parametrize("radius", [-100.0, -1e-9, math.nan, math.inf, -math.inf])
    def test_invalid_radius_empty(self, tokyo: Coordinate, radius: float) -> None:
        assert list(grid_codes_in_radius(tokyo, radius, GridLevel.LEVEL3)) == []

    def test_zero_radius_restart(self, tokyo: Coordinate) -> None:
        iterator = grid_codes_in_radius(tokyo, 0.0, GridLevel.LEVEL3)
        first_pass = list(iterator)
        assert list(iterator) == []
        iterator.restart()
        assert list(iterator) == first_pass

    def test_special_paths_logged(self, tokyo: Coordinate, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jismesh.spatial.radius"):
            grid_codes_in_radius(tokyo, -1.0, GridLevel.LEVEL3)
            grid_codes_in_radius(tokyo, 0.0, GridLevel.LEVEL3)
        messages = [record.getMessage() for record in caplog.records]
        assert any("yields nothing" in message for message in messages)
        assert any("single cell" in message for message in messages)


# =============================================================================
# ПОЛОЖИТЕЛЬНЫЙ РАДИУС
# =============================================================================


class TestRadiusSearch:
    """Поиск по положительному радиусу"""

    def test_all_within_radius(self, tokyo: Coordinate) -> None:
        codes = list(grid_codes_in_radius(tokyo, 2000.0, GridLevel.LEVEL3))
        assert len(codes) > 1
        for code in codes:
            distance = haversine_distance(tokyo, decode_center(code))
            assert distance <= 2000.0, f"{code}: {distance:.2f} m"

    def test_increasing_radius(self, tokyo: Coordinate) -> None:
        """Больший радиус → больше мешей"""
        small = list(grid_codes_in_radius(tokyo, 500.0, GridLevel.LEVEL3))
        medium = list(grid_codes_in_radius(tokyo, 1000.0, GridLevel.LEVEL3))
        large = list(grid_codes_in_radius(tokyo, 2000.0, GridLevel.LEVEL3))
        assert len(small) < len(medium) < len(large)

    def test_finer_level_more_cells(self, tokyo: Coordinate) -> None:
        second = list(grid_codes_in_radius(tokyo, 10000.0, GridLevel.LEVEL2))
        third = list(grid_codes_in_radius(tokyo, 10000.0, GridLevel.LEVEL3))
        assert 0 < len(second) < len(third)
        assert all(code.level is GridLevel.LEVEL2 for code in second)
        assert all(code.level is GridLevel.LEVEL3 for code in third)

    def test_restart(self, tokyo: Coordinate) -> None:
        iterator = grid_codes_in_radius(tokyo, 2000.0, GridLevel.LEVEL3)
        first_pass = list(iterator)
        iterator.restart()
        assert list(iterator) == first_pass

    def test_is_iterator(self, tokyo: Coordinate) -> None:
        iterator = RadiusGridIterator(tokyo, 1000.0, GridLevel.LEVEL3)
        assert iter(iterator) is iterator

    def test_near_north_edge(self) -> None:
        """Круг, выходящий за северную границу зоны покрытия"""
        center = Coordinate.new(45.99, 140.0)
        codes = list(grid_codes_in_radius(center, 3000.0, GridLevel.LEVEL3))
        assert codes
        for code in codes:
            cell_center = decode_center(code)
            assert cell_center.lat < 46.0
            assert haversine_distance(center, cell_center) <= 3000.0

    def test_unclamped_box_matches_clamped(self) -> None:
        """Без обрезки точки вне зоны покрытия пропускаются обходом"""
        center = Coordinate.new(45.99, 140.0)
        clamped = list(grid_codes_in_radius(center, 3000.0, GridLevel.LEVEL3))
        unclamped = list(
            grid_codes_in_radius(center, 3000.0, GridLevel.LEVEL3, RadiusSearchConfig(clamp_to_envelope=False))
        )
        assert unclamped == clamped


# =============================================================================
# ПОИСК ОТ КОДА
# =============================================================================


class TestRadiusFromCode:
    """grid_codes_in_radius_from_code"""

    def test_contains_origin(self) -> None:
        code = GridCode.parse("53394611")
        nearby = list(grid_codes_in_radius_from_code(code, 1000.0))
        assert code in nearby
        assert all(item.level is GridLevel.LEVEL3 for item in nearby)

    def test_zero_radius_returns_origin(self) -> None:
        code = GridCode.parse("5339461174")
        assert list(grid_codes_in_radius_from_code(code, 0.0)) == [code]


# =============================================================================
# ПРЯМОУГОЛЬНИК ПОИСКА
# =============================================================================


class TestRadiusBoundingBox:
    """radius_bounding_box и RadiusSearchConfig"""

    def test_box_around_center(self, tokyo: Coordinate) -> None:
        box = radius_bounding_box(tokyo, 1000.0)
        assert box.min_lat < tokyo.lat < box.max_lat
        assert box.min_lon < tokyo.lon < box.max_lon
        assert box.max_lat - tokyo.lat == pytest.approx(1000.0 / 111_320.0)

    def test_clamped_to_envelope(self) -> None:
        south = Coordinate.new(20.01, 136.0)
        box = radius_bounding_box(south, 5000.0)
        assert box.min_lat == ENVELOPE_LAT_MIN

    def test_clamp_disabled(self) -> None:
        south = Coordinate.new(20.01, 136.0)
        box = radius_bounding_box(south, 5000.0, RadiusSearchConfig(clamp_to_envelope=False))
        assert box.min_lat < ENVELOPE_LAT_MIN

    def test_default_config(self) -> None:
        config = RadiusSearchConfig()
        assert config.earth_radius_meters == 6_371_000.0
        assert config.meters_per_degree == 111_320.0
        assert config.clamp_to_envelope is True

    def test_config_frozen(self) -> None:
        config = RadiusSearchConfig()
        with pytest.raises(AttributeError):
            config.clamp_to_envelope = False  # type: ignore[misc]

    def test_custom_earth_radius(self, tokyo: Coordinate) -> None:
        """Меньшая сфера → меньшие расстояния → не меньше мешей"""
        default = list(grid_codes_in_radius(tokyo, 2000.0, GridLevel.LEVEL3))
        smaller_sphere = RadiusSearchConfig(earth_radius_meters=5_000_000.0)
        custom = list(grid_codes_in_radius(tokyo, 2000.0, GridLevel.LEVEL3, smaller_sphere))
        assert set(default) <= set(custom)
