"""
Hierarchy — Навигация по уровням меша (родитель, дети, проекция на уровень)

JIS X 0410:
- 1次 меш делится на 8×8 = 64 меша 2次
- 2次 меш делится на 10×10 = 100 мешей 3次
- 3次 меш делится на 4 меша 1/2 (индексы 1..4)
- Все 4次/5次 уровни имеют родителем 3次 меш; детей у них нет
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from jismesh.convert.packing import ancestor_value, append_suffix, pack_suffix
from jismesh.core.domain.grid_code import GridCode
from jismesh.core.domain.grid_level import GridLevel
from jismesh.core.errors import UnsupportedRefinementError

# Уровень детей, возвращаемых children()
_CHILD_LEVEL: Final[Mapping[GridLevel, GridLevel]] = MappingProxyType(
    {
        GridLevel.LEVEL1: GridLevel.LEVEL2,
        GridLevel.LEVEL2: GridLevel.LEVEL3,
        GridLevel.LEVEL3: GridLevel.LEVEL4_HALF,
    }
)


def parent(code: GridCode) -> Optional[GridCode]:
    """
    Родительский меш (на один уровень крупнее).

    Args:
        code: Код меша

    Returns:
        Код родителя, или None для 1次 меша

    Examples:
        >>> str(parent(GridCode.parse("53394611")))
        '533946'
    """
    parent_level = code.level.parent
    if parent_level is None:
        return None

    return GridCode(
        level=parent_level,
        code=ancestor_value(code.code, code.level, parent_level),
    )


def children(code: GridCode) -> list[GridCode]:
    """
    Все дочерние меши следующего уровня.

    Порядок: по строкам с юга на север, внутри строки с запада на восток
    (для 2次/3次 — t/v старший разряд), для 1/2 меша — индексы 1..4.

    Returns:
        64 кода 2次 для 1次, 100 кодов 3次 для 2次, 4 кода 1/2 для 3次,
        пустой список для остальных уровней
    """
    child_level = _CHILD_LEVEL.get(code.level)
    if child_level is None:
        return []

    params = child_level.params
    suffixes = sorted(
        pack_suffix(child_level, row, col)
        for row in range(params.rows)
        for col in range(params.cols)
    )

    return [
        GridCode(level=child_level, code=append_suffix(code.code, child_level, suffix))
        for suffix in suffixes
    ]


def to_level(code: GridCode, target_level: GridLevel) -> GridCode:
    """
    Проекция кода на уровень target_level.

    - Тот же уровень → тот же код
    - Предок (крупнее по цепочке) → обрезка кода
    - Более мелкий уровень или 4次/5次 уровень не из цепочки → ошибка

    Raises:
        UnsupportedRefinementError: Если target_level не является предком
    """
    if code.level is target_level:
        return code

    if not target_level.is_ancestor_of(code.level):
        raise UnsupportedRefinementError(code.level, target_level)

    return GridCode(
        level=target_level,
        code=ancestor_value(code.code, code.level, target_level),
    )
