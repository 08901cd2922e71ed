"""
Movement Controller
===================
Integrates keyboard-driven movement for a fighter and keeps it inside the arena.
"""

from dataclasses import dataclass
from typing import Tuple

from stick_brawlers.config import (
    ARENA_WIDTH, ARENA_HEIGHT, FIGHTER_WIDTH, FIGHTER_HEIGHT, FIGHTER_SPEED,
    Facing
)


@dataclass
class MovementController:
    """
    Position, facing and arena bounds for one fighter.
    Position is the top-left corner of the bounding box.
    """
    x: int = 0
    y: int = 0
    facing: Facing = Facing.RIGHT
    speed: int = FIGHTER_SPEED

    # Size of the body being moved
    width: int = FIGHTER_WIDTH
    height: int = FIGHTER_HEIGHT

    # Arena size
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT

    def apply_input(self, left: bool, right: bool, up: bool, down: bool):
        """
        Apply one tick of movement.
        Keys are applied in sequence, so opposite keys cancel out.
        """
        if left:
            self.x -= self.speed
            self.facing = Facing.LEFT
        if right:
            self.x += self.speed
            self.facing = Facing.RIGHT
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed

        self.clamp()

    def clamp(self):
        """Hard clamp into the arena"""
        self.x = max(0, min(self.max_x, self.x))
        self.y = max(0, min(self.max_y, self.y))

    def set_position(self, x: int, y: int):
        self.x = x
        self.y = y
        self.clamp()

    def set_arena(self, width: int, height: int):
        """Change arena bounds and pull the fighter back inside"""
        self.arena_width = width
        self.arena_height = height
        self.clamp()

    def get_position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def max_x(self) -> int:
        return self.arena_width - self.width

    @property
    def max_y(self) -> int:
        return self.arena_height - self.height

    @property
    def facing_right(self) -> bool:
        return self.facing == Facing.RIGHT
