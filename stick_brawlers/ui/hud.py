"""
HUD System
==========
Health bars and the winner banner.
"""

import pygame
from typing import Tuple, Optional

from stick_brawlers.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, HUD_HEIGHT, MAX_HEALTH,
    WHITE, DARK_GRAY, GOLD, UI_BG,
    HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED,
    BANNER_BG, BUTTON_BG, BUTTON_HOVER
)


class HealthBar:
    """
    Health bar with smooth animation and a delayed damage trail.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 is_flipped: bool = False):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.is_flipped = is_flipped

        # Values
        self.current = float(MAX_HEALTH)
        self.target = float(MAX_HEALTH)
        self.max_value = float(MAX_HEALTH)

        # Animation
        self.damage_display = float(MAX_HEALTH)  # Delayed damage bar
        self.damage_delay = 0.0
        self.lerp_speed = 12.0
        self.damage_lerp_speed = 3.0

        # Colors
        self.bg_color = DARK_GRAY
        self.border_color = WHITE
        self.damage_color = HEALTH_RED

        self.font: Optional[pygame.font.Font] = None

    def set_value(self, value: float, max_value: float = MAX_HEALTH):
        """Set health value"""
        self.target = max(0, min(max_value, value))
        self.max_value = max_value

    def snap(self):
        """Jump straight to the target (used on restart)"""
        self.current = self.target
        self.damage_display = self.target
        self.damage_delay = 0.0

    def update(self, dt: float):
        """Update animation"""
        diff = self.target - self.current
        self.current += diff * min(1.0, self.lerp_speed * dt)

        # Delayed damage bar
        if self.damage_delay > 0:
            self.damage_delay -= dt
        else:
            diff = self.current - self.damage_display
            self.damage_display += diff * min(1.0, self.damage_lerp_speed * dt)

        # Trigger delay when damage taken
        if self.target < self.damage_display - 1 and self.damage_delay <= 0:
            self.damage_delay = 0.3

    @property
    def text(self) -> str:
        """Health as shown next to the bar, e.g. '85%'"""
        return f"{round(self.target / self.max_value * 100)}%"

    def render(self, surface: pygame.Surface):
        """Render health bar"""
        if self.font is None:
            self.font = pygame.font.Font(None, 22)

        pygame.draw.rect(surface, self.bg_color,
                         (self.x, self.y, self.width, self.height))

        current_width = int(self.width * self.current / self.max_value)
        damage_width = int(self.width * self.damage_display / self.max_value)

        # Damage trail behind the fill
        if damage_width > current_width:
            if self.is_flipped:
                trail_x = self.x + self.width - damage_width
            else:
                trail_x = self.x + current_width
            pygame.draw.rect(surface, self.damage_color,
                             (trail_x, self.y, damage_width - current_width, self.height))

        if current_width > 0:
            fill_x = self.x + self.width - current_width if self.is_flipped else self.x
            color = self._get_health_color(self.current / self.max_value)
            pygame.draw.rect(surface, color,
                             (fill_x, self.y, current_width, self.height))

        pygame.draw.rect(surface, self.border_color,
                         (self.x, self.y, self.width, self.height), 2)

        label = self.font.render(self.text, True, WHITE)
        label_rect = label.get_rect(center=(self.x + self.width // 2,
                                            self.y + self.height // 2))
        surface.blit(label, label_rect)

    def _get_health_color(self, ratio: float) -> Tuple[int, int, int]:
        """Get color based on health ratio"""
        if ratio > 0.6:
            return HEALTH_GREEN
        elif ratio > 0.3:
            return HEALTH_YELLOW
        else:
            return HEALTH_RED


class WinnerBanner:
    """
    "Player N Wins!" overlay with a restart button.
    """

    def __init__(self, center: Tuple[int, int] = (SCREEN_WIDTH // 2,
                                                   HUD_HEIGHT + (SCREEN_HEIGHT - HUD_HEIGHT) // 2)):
        self.center = center
        self.visible = False
        self.winner_name = ""
        self.winner_color = GOLD

        self.panel_rect = pygame.Rect(0, 0, 360, 160)
        self.panel_rect.center = center
        self.button_rect = pygame.Rect(0, 0, 140, 40)
        self.button_rect.midbottom = (center[0], self.panel_rect.bottom - 20)

        self.title_font: Optional[pygame.font.Font] = None
        self.button_font: Optional[pygame.font.Font] = None

    def show(self, winner_name: str, color: Tuple[int, int, int] = GOLD):
        self.winner_name = winner_name
        self.winner_color = color
        self.visible = True

    def hide(self):
        self.visible = False

    @property
    def text(self) -> str:
        return f"{self.winner_name} Wins!"

    def button_hit(self, pos: Tuple[int, int]) -> bool:
        """Was the restart button clicked?"""
        return self.visible and self.button_rect.collidepoint(pos)

    def _init_fonts(self):
        if self.title_font is None:
            self.title_font = pygame.font.Font(None, 56)
            self.button_font = pygame.font.Font(None, 28)

    def render(self, surface: pygame.Surface,
               mouse_pos: Tuple[int, int] = (0, 0)):
        if not self.visible:
            return
        self._init_fonts()

        panel = pygame.Surface(self.panel_rect.size, pygame.SRCALPHA)
        panel.fill(BANNER_BG)
        surface.blit(panel, self.panel_rect.topleft)
        pygame.draw.rect(surface, self.winner_color, self.panel_rect, 2)

        title = self.title_font.render(self.text, True, self.winner_color)
        title_rect = title.get_rect(center=(self.center[0], self.panel_rect.top + 50))
        surface.blit(title, title_rect)

        hovered = self.button_rect.collidepoint(mouse_pos)
        pygame.draw.rect(surface, BUTTON_HOVER if hovered else BUTTON_BG, self.button_rect)
        pygame.draw.rect(surface, WHITE, self.button_rect, 1)
        label = self.button_font.render("Restart (R)", True, WHITE)
        surface.blit(label, label.get_rect(center=self.button_rect.center))


class HUD:
    """
    Top panel with both health bars and fighter names.
    """

    def __init__(self):
        bar_width = 300
        bar_height = 22
        bar_y = 34

        self.health_bar1 = HealthBar(20, bar_y, bar_width, bar_height, is_flipped=False)
        self.health_bar2 = HealthBar(SCREEN_WIDTH - 20 - bar_width, bar_y,
                                     bar_width, bar_height, is_flipped=True)

        self.fighter1_name = "PLAYER 1"
        self.fighter2_name = "PLAYER 2"
        self.fighter1_color = WHITE
        self.fighter2_color = WHITE
        self.name_font: Optional[pygame.font.Font] = None

    def update(self, dt: float):
        self.health_bar1.update(dt)
        self.health_bar2.update(dt)

    def render(self, surface: pygame.Surface):
        """Render entire HUD"""
        if self.name_font is None:
            self.name_font = pygame.font.Font(None, 24)

        pygame.draw.rect(surface, UI_BG, (0, 0, SCREEN_WIDTH, HUD_HEIGHT))

        self.health_bar1.render(surface)
        self.health_bar2.render(surface)

        name1 = self.name_font.render(self.fighter1_name, True, self.fighter1_color)
        name2 = self.name_font.render(self.fighter2_name, True, self.fighter2_color)
        surface.blit(name1, (22, 10))
        surface.blit(name2, (SCREEN_WIDTH - 22 - name2.get_width(), 10))
