"""Rectangle model: two sides and a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A plain width/height pair.

    Values are stored as given; zero and negative sides are accepted.
    The area is recomputed on every access, so it follows later changes
    to ``width`` or ``height``.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()
