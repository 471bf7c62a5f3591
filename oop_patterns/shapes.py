"""
Shape drawing with polymorphic dispatch
Each shape knows how to draw itself, so DrawManager never branches on type
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __str__(self):
        return f"Point({self.x}, {self.y})"


class Shape(ABC):
    """Base figure with a center point and a type label"""

    def __init__(self, center: Point):
        self._center = center
        self._type = "BaseFigure"

    @property
    def center(self) -> Point:
        return self._center

    def get_type(self) -> str:
        return self._type

    @abstractmethod
    def draw(self) -> None:
        """Draw the figure"""


class Circle(Shape):
    def __init__(self, center: Point, radius: int):
        super().__init__(center)
        self._type = "Circle"
        self.radius = radius

    def draw(self) -> None:
        print("Draw Circle!")


class Square(Shape):
    def __init__(self, center: Point, side: int):
        super().__init__(center)
        self._type = "Square"
        self.side = side

    def draw(self) -> None:
        print("Draw Square!")


class DrawManager:
    """Owns a fixed list of shapes and draws them in insertion order"""

    def __init__(self):
        # Sample contents only
        origin = Point(0, 0)
        self._shapes: List[Shape] = []
        self._shapes.append(Square(origin, 3))
        self._shapes.append(Circle(origin, 3))

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def draw_shapes(self) -> None:
        """Draw every shape in the list"""
        for shape in self._shapes:
            shape.draw()
