"""Shirt giveaways, rectangle sorting and shoe filtering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class ShirtColor(Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Inventory:
    """A stock of shirts."""

    shirts: list[ShirtColor] = field(default_factory=list)

    def giveaway(self, user_preference: ShirtColor | None = None) -> ShirtColor:
        """Give the preferred colour, or the most stocked one without a preference."""
        return user_preference if user_preference is not None else self.most_stocked()

    def most_stocked(self) -> ShirtColor:
        """Return red when strictly more red shirts are stocked, otherwise blue."""
        reds = sum(1 for shirt in self.shirts if shirt is ShirtColor.RED)
        blues = sum(1 for shirt in self.shirts if shirt is ShirtColor.BLUE)
        return ShirtColor.RED if reds > blues else ShirtColor.BLUE


@dataclass
class Rectangle:
    width: int
    height: int


def sort_by_width(rectangles: Iterable[Rectangle]) -> list[Rectangle]:
    """Return the rectangles in stable order of width."""
    return sorted(rectangles, key=lambda rectangle: rectangle.width)


@dataclass
class Shoe:
    size: int
    style: str


def shoes_in_size(shoes: Iterable[Shoe], shoe_size: int) -> list[Shoe]:
    """Return the shoes of the given size, in their original order."""
    return [shoe for shoe in shoes if shoe.size == shoe_size]