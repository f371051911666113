"""
Direction — Восемь направлений для поиска соседних мешей
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Direction(str, Enum):
    """
    Направление по компасу.

    Порядок итерации: N, NE, E, SE, S, SW, W, NW.
    """

    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"

    @property
    def offset(self) -> tuple[int, int]:
        """(знак шага по долготе, знак шага по широте)"""
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS: Final[Mapping[Direction, tuple[int, int]]] = MappingProxyType(
    {
        Direction.NORTH: (0, 1),
        Direction.NORTH_EAST: (1, 1),
        Direction.EAST: (1, 0),
        Direction.SOUTH_EAST: (1, -1),
        Direction.SOUTH: (0, -1),
        Direction.SOUTH_WEST: (-1, -1),
        Direction.WEST: (-1, 0),
        Direction.NORTH_WEST: (-1, 1),
    }
)

_OPPOSITES: Final[Mapping[Direction, Direction]] = MappingProxyType(
    {
        Direction.NORTH: Direction.SOUTH,
        Direction.NORTH_EAST: Direction.SOUTH_WEST,
        Direction.EAST: Direction.WEST,
        Direction.SOUTH_EAST: Direction.NORTH_WEST,
        Direction.SOUTH: Direction.NORTH,
        Direction.SOUTH_WEST: Direction.NORTH_EAST,
        Direction.WEST: Direction.EAST,
        Direction.NORTH_WEST: Direction.SOUTH_EAST,
    }
)
