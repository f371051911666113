"""
Packing — Упаковка индексов ячеек в цифры кода меша

Общие примитивы для Encoder и Decoder. Decoder обязан точно обращать
Encoder, поэтому оба используют одни и те же функции упаковки и одну и ту же
последовательность операций с float при вычислении юго-западного угла.

Схемы упаковки (SuffixPacking):
- ROOT (1次): p q r s, где pq = floor(lat * 1.5), rs = floor(lon - 100)
- DIGIT_PAIR (2次/3次): строка и столбец по одной цифре (0..7 или 0..9)
- QUADRANT (1/2): NE=1, SE=2, NW=3, SW=4
- ROW_MAJOR (1/4, 1/8, 100m): row * cols + col + 1

ОСОБЫЙ СЛУЧАЙ:
Индекс 100 уровня LEVEL5 (row=9, col=9) не помещается в две цифры:
third * 100 + 100 == (third + 1) * 100. Суффикс "00" никогда не возникает
при кодировании иначе, поэтому при разборе он трактуется как индекс 100
предыдущего кода 3次.
"""

import math
from types import MappingProxyType
from typing import Final, Mapping

from jismesh.core.domain.grid_level import GridLevel, SuffixPacking

# (row, col) → индекс квадранта 1/2 меша; row/col = 1 для северной/восточной половины
_QUADRANT_INDEX: Final[Mapping[tuple[int, int], int]] = MappingProxyType(
    {(1, 1): 1, (0, 1): 2, (1, 0): 3, (0, 0): 4}
)
_QUADRANT_CELL: Final[Mapping[int, tuple[int, int]]] = MappingProxyType(
    {index: cell for cell, index in _QUADRANT_INDEX.items()}
)

# Множитель широты и смещение долготы для 1次 меша
ROOT_LAT_FACTOR: Final[float] = 1.5
ROOT_LON_BASE: Final[float] = 100.0


# =============================================================================
# 1次 МЕШ
# =============================================================================


def root_indices(lat: float, lon: float) -> tuple[int, int]:
    """(floor(lat * 1.5), floor(lon - 100)) — две пары цифр 1次 меша"""
    return math.floor(lat * ROOT_LAT_FACTOR), math.floor(lon - ROOT_LON_BASE)


def pack_root(lat_index: int, lon_index: int) -> int:
    return lat_index * 100 + lon_index


def unpack_root(code: int) -> tuple[int, int]:
    return divmod(code, 100)


def root_origin(lat_index: int, lon_index: int) -> tuple[float, float]:
    """Юго-западный угол 1次 меша"""
    return lat_index / ROOT_LAT_FACTOR, lon_index + ROOT_LON_BASE


# =============================================================================
# СУФФИКСЫ БОЛЕЕ МЕЛКИХ УРОВНЕЙ
# =============================================================================


def pack_suffix(level: GridLevel, row: int, col: int) -> int:
    """
    Индекс дочерней ячейки (row, col) → суффикс кода уровня level.

    Raises:
        ValueError: Для LEVEL1 (у него нет суффикса относительно родителя)
    """
    packing = level.params.packing

    if packing is SuffixPacking.DIGIT_PAIR:
        return row * 10 + col
    if packing is SuffixPacking.QUADRANT:
        return _QUADRANT_INDEX[(row, col)]
    if packing is SuffixPacking.ROW_MAJOR:
        return row * level.params.cols + col + 1

    raise ValueError(f"{level.value} has no suffix relative to a parent level")


def unpack_suffix(level: GridLevel, suffix: int) -> tuple[int, int]:
    """
    Суффикс кода уровня level → индекс дочерней ячейки (row, col).

    Индекс квадранта вне 1..4 трактуется как юго-западный квадрант.

    Raises:
        ValueError: Для LEVEL1
    """
    packing = level.params.packing

    if packing is SuffixPacking.DIGIT_PAIR:
        return divmod(suffix, 10)
    if packing is SuffixPacking.QUADRANT:
        return _QUADRANT_CELL.get(suffix, (0, 0))
    if packing is SuffixPacking.ROW_MAJOR:
        return divmod(suffix - 1, level.params.cols)

    raise ValueError(f"{level.value} has no suffix relative to a parent level")


def append_suffix(prefix: int, level: GridLevel, suffix: int) -> int:
    """Код родителя + суффикс → код уровня level"""
    return prefix * level.params.suffix_base + suffix


def peel_suffix(value: int, level: GridLevel) -> tuple[int, int]:
    """
    Код уровня level → (код родителя, суффикс).

    Обратная операция к append_suffix, включая перенос индекса 100 уровня LEVEL5.
    """
    params = level.params
    prefix, suffix = divmod(value, params.suffix_base)

    if suffix == 0 and params.max_index == params.suffix_base:
        prefix -= 1
        suffix = params.suffix_base

    return prefix, suffix


def ancestor_value(value: int, level: GridLevel, target: GridLevel) -> int:
    """
    Числовой код предка уровня target для кода value уровня level.

    Эквивалентно обрезке строки кода до длины target (кроме индекса 100 LEVEL5,
    который переносится в цифры 3次 меша).

    Raises:
        ValueError: Если target не лежит на цепочке предков level
    """
    if target not in level.lineage:
        raise ValueError(f"{target.value} is not an ancestor of {level.value}")

    current = level
    while current is not target:
        value, _ = peel_suffix(value, current)
        current = current.parent

    return value


def split_suffixes(value: int, level: GridLevel) -> tuple[int, list[tuple[GridLevel, int]]]:
    """
    Разбор кода на код 1次 меша и суффиксы (от крупного уровня к мелкому).

    Returns:
        (root_code, [(level2, suffix), (level3, suffix), ...])
    """
    suffixes: list[tuple[GridLevel, int]] = []

    current = level
    while current.parent is not None:
        value, suffix = peel_suffix(value, current)
        suffixes.append((current, suffix))
        current = current.parent

    suffixes.reverse()
    return value, suffixes
