"""Rectangle record with a computed area."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass
class Rectangle:
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"Rectangle {name} must be a number, got {type(value).__name__}"
                )

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()
