"""Rectangle: a plain mutable record with a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle whose fields may be reassigned after construction.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.area()
        200
        >>> r.width = 5
        >>> r.area()
        100
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
