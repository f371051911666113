"""
GridLevel — Каталог уровней регионального меша

JIS X 0410: 1次/2次/3次メッシュ + 分割地域メッシュ (1/2, 1/4, 1/8) + 100m меш.

Семь фиксированных уровней. Параметры каждого уровня хранятся в статической
read-only таблице LEVEL_CATALOG и никогда не изменяются во время работы.

| Уровень        | Цифр | Ячейка (lat × lon)      | ≈ размер |
|----------------|------|-------------------------|----------|
| LEVEL1         | 4    | 40' × 1°                | 80 km    |
| LEVEL2         | 6    | 5' × 7'30"              | 10 km    |
| LEVEL3         | 8    | 30" × 45"               | 1 km     |
| LEVEL4_HALF    | 9    | 15" × 22.5"             | 500 m    |
| LEVEL4_QUARTER | 10   | 7.5" × 11.25"           | 250 m    |
| LEVEL4_EIGHTH  | 11   | 3.75" × 5.625"          | 125 m    |
| LEVEL5         | 10   | 3" × 4.5"               | 100 m    |

LEVEL4_QUARTER и LEVEL5 имеют одинаковую длину кода (10 цифр) и различаются
по 9-й цифре (см. GridLevel.from_code_string).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional

from jismesh.core.errors import InvalidCodeLengthError


# =============================================================================
# ENUMS
# =============================================================================


class SuffixPacking(str, Enum):
    """Способ упаковки индекса дочерней ячейки в цифры кода"""

    ROOT = "root"  # 1次: p q r s из floor(lat*1.5), floor(lon-100)
    DIGIT_PAIR = "digit_pair"  # 2次/3次: строка и столбец по одной цифре, с 0
    QUADRANT = "quadrant"  # 1/2: NE=1, SE=2, NW=3, SW=4
    ROW_MAJOR = "row_major"  # 1/4, 1/8, 100m: row * cols + col + 1


class GridLevel(str, Enum):
    """Уровень меша (от крупного к мелкому)"""

    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    LEVEL4_HALF = "level4_half"
    LEVEL4_QUARTER = "level4_quarter"
    LEVEL4_EIGHTH = "level4_eighth"
    LEVEL5 = "level5"

    @property
    def params(self) -> "LevelParams":
        return LEVEL_CATALOG[self]

    @property
    def code_length(self) -> int:
        return self.params.code_length

    @property
    def lat_size_degrees(self) -> float:
        return self.params.lat_size_degrees

    @property
    def lon_size_degrees(self) -> float:
        return self.params.lon_size_degrees

    @property
    def approximate_size_meters(self) -> float:
        return self.params.approximate_size_meters

    @property
    def parent(self) -> Optional["GridLevel"]:
        """Родительский уровень (None для LEVEL1, LEVEL3 для всех 4次/5次)"""
        return self.params.parent

    @property
    def lineage(self) -> tuple["GridLevel", ...]:
        """Цепочка уровней от LEVEL1 до текущего включительно"""
        chain = [self]
        while chain[-1].parent is not None:
            chain.append(chain[-1].parent)
        return tuple(reversed(chain))

    def is_ancestor_of(self, other: "GridLevel") -> bool:
        """True если self строго крупнее other и лежит на его цепочке предков"""
        return self is not other and self in other.lineage

    @classmethod
    def from_code_length(cls, length: int) -> "GridLevel":
        """
        Уровень по длине кода.

        10 цифр без анализа содержимого трактуются как LEVEL4_QUARTER;
        для строк используйте from_code_string.

        Raises:
            InvalidCodeLengthError: Если длина не в {4, 6, 8, 9, 10, 11}
        """
        level = _LEVEL_BY_LENGTH.get(length)
        if level is None:
            raise InvalidCodeLengthError(length)
        return level

    @classmethod
    def from_code_string(cls, code: str) -> "GridLevel":
        """
        Уровень по строке кода.

        Для 10-значного кода смотрим 9-ю цифру:
        - '1'..'4' → LEVEL4_QUARTER
        - иначе ('0', '5'..'9') → LEVEL5

        Raises:
            InvalidCodeLengthError: Если длина не в {4, 6, 8, 9, 10, 11}
        """
        if len(code) == 10:
            if code[8] in "1234":
                return cls.LEVEL4_QUARTER
            return cls.LEVEL5
        return cls.from_code_length(len(code))


# =============================================================================
# LEVEL PARAMS
# =============================================================================


@dataclass(frozen=True)
class LevelParams:
    """
    Параметры уровня меша.

    rows/cols — на сколько частей уровень делит ячейку родителя по широте/долготе.
    suffix_width — сколько цифр уровень добавляет к коду родителя.
    """

    code_length: int
    lat_size_degrees: float
    lon_size_degrees: float
    approximate_size_meters: float
    parent: Optional[GridLevel]
    packing: SuffixPacking
    rows: int
    cols: int
    suffix_width: int

    @property
    def suffix_base(self) -> int:
        return 10**self.suffix_width

    @property
    def max_index(self) -> int:
        """Наибольшее значение суффикса при корректном кодировании"""
        if self.packing is SuffixPacking.DIGIT_PAIR:
            return (self.rows - 1) * 10 + (self.cols - 1)
        if self.packing is SuffixPacking.QUADRANT:
            return 4
        return self.rows * self.cols


LEVEL_CATALOG: Final[Mapping[GridLevel, LevelParams]] = MappingProxyType(
    {
        GridLevel.LEVEL1: LevelParams(
            code_length=4,
            lat_size_degrees=40.0 / 60.0,
            lon_size_degrees=1.0,
            approximate_size_meters=80000.0,
            parent=None,
            packing=SuffixPacking.ROOT,
            rows=1,
            cols=1,
            suffix_width=4,
        ),
        GridLevel.LEVEL2: LevelParams(
            code_length=6,
            lat_size_degrees=5.0 / 60.0,
            lon_size_degrees=7.5 / 60.0,
            approximate_size_meters=10000.0,
            parent=GridLevel.LEVEL1,
            packing=SuffixPacking.DIGIT_PAIR,
            rows=8,
            cols=8,
            suffix_width=2,
        ),
        GridLevel.LEVEL3: LevelParams(
            code_length=8,
            lat_size_degrees=30.0 / 3600.0,
            lon_size_degrees=45.0 / 3600.0,
            approximate_size_meters=1000.0,
            parent=GridLevel.LEVEL2,
            packing=SuffixPacking.DIGIT_PAIR,
            rows=10,
            cols=10,
            suffix_width=2,
        ),
        GridLevel.LEVEL4_HALF: LevelParams(
            code_length=9,
            lat_size_degrees=15.0 / 3600.0,
            lon_size_degrees=22.5 / 3600.0,
            approximate_size_meters=500.0,
            parent=GridLevel.LEVEL3,
            packing=SuffixPacking.QUADRANT,
            rows=2,
            cols=2,
            suffix_width=1,
        ),
        GridLevel.LEVEL4_QUARTER: LevelParams(
            code_length=10,
            lat_size_degrees=7.5 / 3600.0,
            lon_size_degrees=11.25 / 3600.0,
            approximate_size_meters=250.0,
            parent=GridLevel.LEVEL3,
            packing=SuffixPacking.ROW_MAJOR,
            rows=4,
            cols=4,
            suffix_width=2,
        ),
        GridLevel.LEVEL4_EIGHTH: LevelParams(
            code_length=11,
            lat_size_degrees=3.75 / 3600.0,
            lon_size_degrees=5.625 / 3600.0,
            approximate_size_meters=125.0,
            parent=GridLevel.LEVEL3,
            packing=SuffixPacking.ROW_MAJOR,
            rows=8,
            cols=8,
            suffix_width=3,
        ),
        GridLevel.LEVEL5: LevelParams(
            code_length=10,
            lat_size_degrees=3.0 / 3600.0,
            lon_size_degrees=4.5 / 3600.0,
            approximate_size_meters=100.0,
            parent=GridLevel.LEVEL3,
            packing=SuffixPacking.ROW_MAJOR,
            rows=10,
            cols=10,
            suffix_width=2,
        ),
    }
)

# 10 цифр по умолчанию → LEVEL4_QUARTER (LEVEL5 различается только по содержимому)
_LEVEL_BY_LENGTH: Final[Mapping[int, GridLevel]] = MappingProxyType(
    {
        4: GridLevel.LEVEL1,
        6: GridLevel.LEVEL2,
        8: GridLevel.LEVEL3,
        9: GridLevel.LEVEL4_HALF,
        10: GridLevel.LEVEL4_QUARTER,
        11: GridLevel.LEVEL4_EIGHTH,
    }
)
