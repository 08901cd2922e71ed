"""
Hitbox System
=============
Axis-aligned rectangles for collision detection.
- Hitbox: area that deals damage (live while a fighter is attacking)
- Bounding box: the fighter's body, always hittable
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Hitbox:
    """
    Rectangle in arena coordinates.
    (x, y) is the top-left corner.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: 'Hitbox') -> bool:
        """
        AABB overlap with strict inequalities.
        Rectangles that only share an edge do not overlap.
        """
        return (self.x < other.right and
                self.right > other.x and
                self.y < other.bottom and
                self.bottom > other.y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height), ready for pygame.draw.rect"""
        return (self.x, self.y, self.width, self.height)


def check_collision(box: Hitbox, fighter) -> bool:
    """Does the attack box overlap the fighter's current bounding box?"""
    return box.overlaps(fighter.bounding_box())
