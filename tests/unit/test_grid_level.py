"""
Тесты для каталога уровней GridLevel

Проверяет:
1. Длины кодов и размеры ячеек
2. Родительские уровни и цепочки предков
3. Определение уровня по длине и по строке кода
"""

import pytest

from jismesh.core.domain import LEVEL_CATALOG, GridLevel, SuffixPacking
from jismesh.core.errors import InvalidCodeLengthError

# =============================================================================
# КАТАЛОГ
# =============================================================================


class TestLevelCatalog:
    """Тесты для LEVEL_CATALOG"""

    @pytest.mark.parametrize(
        "level, length",
        [
            (GridLevel.LEVEL1, 4),
            (GridLevel.LEVEL2, 6),
            (GridLevel.LEVEL3, 8),
            (GridLevel.LEVEL4_HALF, 9),
            (GridLevel.LEVEL4_QUARTER, 10),
            (GridLevel.LEVEL4_EIGHTH, 11),
            (GridLevel.LEVEL5, 10),
        ],
    )
    def test_code_length(self, level: GridLevel, length: int) -> None:
        assert level.code_length == length

    def test_every_level_in_catalog(self) -> None:
        assert set(LEVEL_CATALOG) == set(GridLevel)

    def test_catalog_read_only(self) -> None:
        with pytest.raises(TypeError):
            LEVEL_CATALOG[GridLevel.LEVEL1] = LEVEL_CATALOG[GridLevel.LEVEL2]  # type: ignore[index]

    @pytest.mark.parametrize(
        "level, lat_size, lon_size",
        [
            (GridLevel.LEVEL1, 40.0 / 60.0, 1.0),
            (GridLevel.LEVEL3, 30.0 / 3600.0, 45.0 / 3600.0),
            (GridLevel.LEVEL5, 3.0 / 3600.0, 4.5 / 3600.0),
        ],
    )
    def test_cell_size(self, level: GridLevel, lat_size: float, lon_size: float) -> None:
        """Размеры в секундах: 1次 2400 × 3600, 3次 30 × 45, 100m 3 × 4.5"""
        assert level.lat_size_degrees == pytest.approx(lat_size, abs=1e-10)
        assert level.lon_size_degrees == pytest.approx(lon_size, abs=1e-10)

    @pytest.mark.parametrize(
        "level",
        [
            GridLevel.LEVEL2,
            GridLevel.LEVEL3,
            GridLevel.LEVEL4_HALF,
            GridLevel.LEVEL4_QUARTER,
            GridLevel.LEVEL4_EIGHTH,
            GridLevel.LEVEL5,
        ],
    )
    def test_child_sizes_tile_parent(self, level: GridLevel) -> None:
        """rows × размер ребёнка == размер родителя (по каждой оси)"""
        params = level.params
        parent = level.parent
        assert parent is not None
        assert params.rows * level.lat_size_degrees == pytest.approx(parent.lat_size_degrees)
        assert params.cols * level.lon_size_degrees == pytest.approx(parent.lon_size_degrees)

    def test_approximate_sizes_decrease(self) -> None:
        sizes = [level.approximate_size_meters for level in GridLevel]
        assert sizes == sorted(sizes, reverse=True)

    def test_packing(self) -> None:
        assert GridLevel.LEVEL1.params.packing is SuffixPacking.ROOT
        assert GridLevel.LEVEL2.params.packing is SuffixPacking.DIGIT_PAIR
        assert GridLevel.LEVEL4_HALF.params.packing is SuffixPacking.QUADRANT
        assert GridLevel.LEVEL5.params.packing is SuffixPacking.ROW_MAJOR

    def test_max_index(self) -> None:
        """Наибольший суффикс: 77 для 2次, 4 для 1/2, 100 для 100m"""
        assert GridLevel.LEVEL2.params.max_index == 77
        assert GridLevel.LEVEL3.params.max_index == 99
        assert GridLevel.LEVEL4_HALF.params.max_index == 4
        assert GridLevel.LEVEL4_QUARTER.params.max_index == 16
        assert GridLevel.LEVEL4_EIGHTH.params.max_index == 64
        assert GridLevel.LEVEL5.params.max_index == 100


# =============================================================================
# ИЕРАРХИЯ УРОВНЕЙ
# =============================================================================


class TestLevelHierarchy:
    """Тесты для parent / lineage / is_ancestor_of"""

    def test_parents(self) -> None:
        assert GridLevel.LEVEL1.parent is None
        assert GridLevel.LEVEL2.parent is GridLevel.LEVEL1
        assert GridLevel.LEVEL3.parent is GridLevel.LEVEL2

    @pytest.mark.parametrize(
        "level",
        [
            GridLevel.LEVEL4_HALF,
            GridLevel.LEVEL4_QUARTER,
            GridLevel.LEVEL4_EIGHTH,
            GridLevel.LEVEL5,
        ],
    )
    def test_fine_levels_parent_is_level3(self, level: GridLevel) -> None:
        """Все 4次/5次 уровни — прямые дети 3次"""
        assert level.parent is GridLevel.LEVEL3

    def test_lineage(self) -> None:
        assert GridLevel.LEVEL1.lineage == (GridLevel.LEVEL1,)
        assert GridLevel.LEVEL5.lineage == (
            GridLevel.LEVEL1,
            GridLevel.LEVEL2,
            GridLevel.LEVEL3,
            GridLevel.LEVEL5,
        )

    def test_is_ancestor_of(self) -> None:
        assert GridLevel.LEVEL1.is_ancestor_of(GridLevel.LEVEL5)
        assert GridLevel.LEVEL3.is_ancestor_of(GridLevel.LEVEL4_HALF)
        assert not GridLevel.LEVEL3.is_ancestor_of(GridLevel.LEVEL3)
        assert not GridLevel.LEVEL4_HALF.is_ancestor_of(GridLevel.LEVEL4_QUARTER)
        assert not GridLevel.LEVEL5.is_ancestor_of(GridLevel.LEVEL3)


# =============================================================================
# ОПРЕДЕЛЕНИЕ УРОВНЯ
# =============================================================================


class TestLevelDetection:
    """Тесты для from_code_length / from_code_string"""

    def test_from_code_length(self) -> None:
        assert GridLevel.from_code_length(4) is GridLevel.LEVEL1
        assert GridLevel.from_code_length(9) is GridLevel.LEVEL4_HALF
        assert GridLevel.from_code_length(11) is GridLevel.LEVEL4_EIGHTH

    def test_ten_digits_default_to_quarter(self) -> None:
        assert GridLevel.from_code_length(10) is GridLevel.LEVEL4_QUARTER

    @pytest.mark.parametrize("length", [0, 1, 3, 5, 7, 12])
    def test_invalid_length(self, length: int) -> None:
        with pytest.raises(InvalidCodeLengthError) as exc_info:
            GridLevel.from_code_length(length)
        assert exc_info.value.length == length

    def test_from_code_string_non_ten_digits(self) -> None:
        assert GridLevel.from_code_string("533946") is GridLevel.LEVEL2
