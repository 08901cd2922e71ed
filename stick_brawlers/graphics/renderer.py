"""
Main Renderer
=============
Draws the arena and stick-figure fighters onto an off-screen surface.
"""

import pygame
from typing import Optional, Tuple

from stick_brawlers.config import (
    ARENA_WIDTH, ARENA_HEIGHT, ARENA_BG, GROUND_COLOR, GROUND_HEIGHT,
    DEBUG_HITBOXES, DEBUG_HITBOX_COLOR
)
from stick_brawlers.core.adapters import RenderAdapter

LINE_WIDTH = 3
HEAD_RADIUS = 10
ARM_SPAN = 15
ATTACK_ARM_SHIFT = 15
LEG_SPAN = 10


class Renderer(RenderAdapter):
    """
    pygame renderer.
    The game blits `surface` below the HUD every frame, so the last drawn
    tick stays on screen after the match ends.
    """

    def __init__(self, debug_hitboxes: bool = DEBUG_HITBOXES):
        self.surface: Optional[pygame.Surface] = None
        self.debug_hitboxes = debug_hitboxes
        self.set_arena(ARENA_WIDTH, ARENA_HEIGHT)

    def set_arena(self, width: int, height: int):
        """(Re)create the arena surface"""
        self.width = width
        self.height = height
        self.surface = pygame.Surface((width, height))
        self.begin_frame()

    def begin_frame(self):
        """Clear and draw the ground strip"""
        self.surface.fill(ARENA_BG)
        pygame.draw.rect(self.surface, GROUND_COLOR,
                         (0, self.height - GROUND_HEIGHT, self.width, GROUND_HEIGHT))

    def render(self, fighter):
        """Draw one fighter as a stick figure"""
        self._draw_stick_figure(self.surface, fighter)

        if self.debug_hitboxes:
            self._render_debug_hitboxes(fighter)

    def _draw_stick_figure(self, surface: pygame.Surface, fighter):
        color = fighter.color
        cx = fighter.x + fighter.width // 2
        y = fighter.y

        # Head
        pygame.draw.circle(surface, color, (cx, y + 10), HEAD_RADIUS, LINE_WIDTH)

        # Body
        pygame.draw.line(surface, color, (cx, y + 20), (cx, y + 50), LINE_WIDTH)

        # Arms (pushed forward while attacking)
        arm_offset = 0
        if fighter.is_attacking:
            arm_offset = ATTACK_ARM_SHIFT if fighter.facing_right else -ATTACK_ARM_SHIFT
        shoulder = (cx, y + 30)
        pygame.draw.line(surface, color, shoulder,
                         (cx - ARM_SPAN + arm_offset, y + 35), LINE_WIDTH)
        pygame.draw.line(surface, color, shoulder,
                         (cx + ARM_SPAN + arm_offset, y + 35), LINE_WIDTH)

        # Legs
        hip = (cx, y + 50)
        pygame.draw.line(surface, color, hip, (cx - LEG_SPAN, y + 60), LINE_WIDTH)
        pygame.draw.line(surface, color, hip, (cx + LEG_SPAN, y + 60), LINE_WIDTH)

    def _render_debug_hitboxes(self, fighter):
        """Body box (fighter color) and live attack box (red)"""
        pygame.draw.rect(self.surface, fighter.color,
                         fighter.bounding_box().as_tuple(), 1)

        attack_box = fighter.get_attack_hitbox()
        if attack_box:
            pygame.draw.rect(self.surface, DEBUG_HITBOX_COLOR,
                             attack_box.as_tuple(), 2)

    def get_size(self) -> Tuple[int, int]:
        return (self.width, self.height)
