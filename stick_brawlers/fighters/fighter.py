"""
Fighter Class
=============
Main fighter entity: movement, attack timers and health in one place.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Mapping, Tuple
import logging

from stick_brawlers.config import (
    AttackState, Facing,
    ARENA_WIDTH, ARENA_HEIGHT,
    FIGHTER_WIDTH, FIGHTER_HEIGHT, FIGHTER_SPEED, MAX_HEALTH,
    ATTACK_COOLDOWN, ATTACK_DURATION,
    ATTACK_REACH, ATTACK_HEIGHT, ATTACK_Y_OFFSET
)
from stick_brawlers.fighters.hitbox import Hitbox
from stick_brawlers.fighters.movement import MovementController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControlScheme:
    """Key bindings for one fighter (pygame key codes)"""
    up: int
    down: int
    left: int
    right: int
    attack: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> 'ControlScheme':
        return cls(
            up=mapping['up'],
            down=mapping['down'],
            left=mapping['left'],
            right=mapping['right'],
            attack=mapping['attack'],
        )

    def keys(self) -> Tuple[int, ...]:
        return (self.up, self.down, self.left, self.right, self.attack)


class Fighter:
    """
    One combatant.
    Owns position, facing, health and the attack cooldown/duration state machine.
    """

    def __init__(self, name: str, fighter_id: int, x: int, y: int,
                 color: Tuple[int, int, int], controls: ControlScheme,
                 arena_width: int = ARENA_WIDTH,
                 arena_height: int = ARENA_HEIGHT,
                 facing: Facing = Facing.RIGHT):
        self.name = name
        self.fighter_id = fighter_id
        self.color = color
        self.controls = controls

        self.width = FIGHTER_WIDTH
        self.height = FIGHTER_HEIGHT

        # Core systems
        self.movement = MovementController(
            facing=facing,
            speed=FIGHTER_SPEED,
            width=self.width,
            height=self.height,
            arena_width=arena_width,
            arena_height=arena_height,
        )
        self.movement.set_position(x, y)

        # Spawn point, restored on reset
        self._spawn = (self.movement.x, self.movement.y, facing)

        self.max_health = MAX_HEALTH
        self.health = MAX_HEALTH

        # Attack state
        self.attack_state = AttackState.IDLE
        self.cooldown_ticks = 0
        self.attack_ticks_remaining = ATTACK_DURATION
        self.swing_landed = False  # Current swing already hit?

    # Position properties
    @property
    def x(self) -> int:
        return self.movement.x

    @property
    def y(self) -> int:
        return self.movement.y

    @property
    def position(self) -> Tuple[int, int]:
        return self.movement.get_position()

    @property
    def facing(self) -> Facing:
        return self.movement.facing

    @property
    def facing_right(self) -> bool:
        return self.movement.facing_right

    def update(self, input_state):
        """Advance this fighter by one tick"""
        controls = self.controls
        self.movement.apply_input(
            left=input_state.is_pressed(controls.left),
            right=input_state.is_pressed(controls.right),
            up=input_state.is_pressed(controls.up),
            down=input_state.is_pressed(controls.down),
        )

        # Attack cooldown
        if self.cooldown_ticks > 0:
            self.cooldown_ticks -= 1

        # Attack duration
        if self.attack_state == AttackState.ATTACKING:
            self.attack_ticks_remaining -= 1
            if self.attack_ticks_remaining <= 0:
                self.attack_state = AttackState.IDLE
                self.attack_ticks_remaining = ATTACK_DURATION
                self.swing_landed = False

    def attack(self) -> bool:
        """
        Start an attack.
        Return True if it started, False if still on cooldown (request dropped).
        """
        if self.cooldown_ticks > 0:
            return False

        self.attack_state = AttackState.ATTACKING
        self.cooldown_ticks = ATTACK_COOLDOWN
        self.swing_landed = False
        logger.debug("%s attacks facing %s", self.name, self.facing.value)
        return True

    def take_damage(self, amount: int):
        """Subtract health, never below zero"""
        if amount < 0:
            raise ValueError(f"damage must be non-negative, got {amount}")
        self.health = max(0, self.health - amount)

    def get_attack_hitbox(self) -> Optional[Hitbox]:
        """
        Hitbox of the current attack, or None when idle.
        Rebuilt from the current position on every call.
        """
        if self.attack_state != AttackState.ATTACKING:
            return None

        center_x = self.x + self.width // 2
        if self.facing == Facing.RIGHT:
            box_x = center_x
        else:
            box_x = center_x - ATTACK_REACH

        return Hitbox(box_x, self.y + ATTACK_Y_OFFSET,
                      ATTACK_REACH, ATTACK_HEIGHT)

    def bounding_box(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.width, self.height)

    def set_arena(self, width: int, height: int):
        self.movement.set_arena(width, height)

    def reset(self):
        """Restore health, spawn point and attack state. Identity is kept."""
        x, y, facing = self._spawn
        self.movement.set_position(x, y)
        self.movement.facing = facing

        self.health = self.max_health

        self.attack_state = AttackState.IDLE
        self.cooldown_ticks = 0
        self.attack_ticks_remaining = ATTACK_DURATION
        self.swing_landed = False

    # Properties
    @property
    def is_attacking(self) -> bool:
        return self.attack_state == AttackState.ATTACKING

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    @property
    def can_attack(self) -> bool:
        return self.cooldown_ticks == 0

    @property
    def health_percent(self) -> float:
        return self.health / self.max_health * 100

    def get_state_info(self) -> Dict[str, Any]:
        """Snapshot of the fighter for rendering/debug"""
        return {
            'name': self.name,
            'id': self.fighter_id,
            'health': self.health,
            'x': self.x,
            'y': self.y,
            'facing': self.facing.value,
            'is_attacking': self.is_attacking,
            'cooldown_ticks': self.cooldown_ticks,
            'attack_ticks_remaining': self.attack_ticks_remaining,
        }

    def __repr__(self) -> str:
        return (f"Fighter({self.name!r}, id={self.fighter_id}, "
                f"pos={self.position}, hp={self.health})")
