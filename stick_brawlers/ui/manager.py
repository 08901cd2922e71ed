"""
UI Manager
==========
UIAdapter for pygame: health bars, winner banner, restart button.
"""

import pygame
from typing import Dict, Tuple, Optional

from stick_brawlers.core.adapters import UIAdapter
from stick_brawlers.ui.hud import HUD, HealthBar, WinnerBanner


class UIManager(UIAdapter):
    """
    Reflects match events on screen.
    Fighter ids map to the left (1) and right (2) health bars.
    """

    def __init__(self, fighters=()):
        self.hud = HUD()
        self.banner = WinnerBanner()

        self._bars: Dict[int, HealthBar] = {
            1: self.hud.health_bar1,
            2: self.hud.health_bar2,
        }
        self._names: Dict[int, str] = {1: "Player 1", 2: "Player 2"}
        self._colors: Dict[int, Tuple[int, int, int]] = {}

        for fighter in fighters:
            self.register_fighter(fighter)

    def register_fighter(self, fighter):
        """Take name and color for the HUD from a fighter"""
        self._names[fighter.fighter_id] = fighter.name
        self._colors[fighter.fighter_id] = fighter.color
        if fighter.fighter_id == 1:
            self.hud.fighter1_name = fighter.name.upper()
            self.hud.fighter1_color = fighter.color
        elif fighter.fighter_id == 2:
            self.hud.fighter2_name = fighter.name.upper()
            self.hud.fighter2_color = fighter.color

    # UIAdapter
    def on_health_changed(self, fighter_id: int, health: int):
        bar = self._bars.get(fighter_id)
        if bar:
            bar.set_value(health)

    def on_match_ended(self, winner_id: int):
        name = self._names.get(winner_id, f"Player {winner_id}")
        color = self._colors.get(winner_id)
        if color:
            self.banner.show(name, color)
        else:
            self.banner.show(name)

    def on_match_restarted(self):
        self.banner.hide()
        for bar in self._bars.values():
            bar.snap()

    def get_health_text(self, fighter_id: int) -> Optional[str]:
        bar = self._bars.get(fighter_id)
        return bar.text if bar else None

    def restart_button_hit(self, pos: Tuple[int, int]) -> bool:
        return self.banner.button_hit(pos)

    def update(self, dt: float):
        self.hud.update(dt)

    def render(self, surface: pygame.Surface, mouse_pos: Tuple[int, int] = (0, 0)):
        """Render UI on top of the arena"""
        self.hud.render(surface)
        self.banner.render(surface, mouse_pos)
