"""
BoundingBox — Прямоугольная область в градусах

Immutable Pydantic модель: юго-западный и северо-восточный углы.

Порядок углов не проверяется: при south_west севернее/восточнее north_east
область считается вырожденной (contains всегда False, обход пустой).
"""

from pydantic import BaseModel, Field

from jismesh.core.domain.coordinate import Coordinate


class BoundingBox(BaseModel):
    """
    Прямоугольник, выровненный по осям широты/долготы.

    Прямое создание проверяет углы как обычные Coordinate (включая зону
    покрытия). Производные прямоугольники (ячейки у северной и восточной
    границы, описанные вокруг круга) создаются через BoundingBox.unchecked.
    """

    south_west: Coordinate = Field(..., description="Юго-западный угол")
    north_east: Coordinate = Field(..., description="Северо-восточный угол")

    model_config = {"frozen": True}

    @property
    def min_lat(self) -> float:
        return self.south_west.lat

    @property
    def max_lat(self) -> float:
        return self.north_east.lat

    @property
    def min_lon(self) -> float:
        return self.south_west.lon

    @property
    def max_lon(self) -> float:
        return self.north_east.lon

    def contains(self, coordinate: Coordinate) -> bool:
        """Точка внутри прямоугольника (границы включительно)"""
        return (
            self.min_lat <= coordinate.lat <= self.max_lat
            and self.min_lon <= coordinate.lon <= self.max_lon
        )

    def center(self) -> Coordinate:
        return Coordinate.unchecked(
            (self.min_lat + self.max_lat) / 2.0,
            (self.min_lon + self.max_lon) / 2.0,
        )

    @classmethod
    def unchecked(cls, south_west: Coordinate, north_east: Coordinate) -> "BoundingBox":
        """Создание прямоугольника без проверок углов (только для производных значений)"""
        return cls.model_construct(south_west=south_west, north_east=north_east)
