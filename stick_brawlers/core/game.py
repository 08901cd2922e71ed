"""
Main Game Engine for Stick Brawlers
"""

import pygame
import logging
from typing import Optional

from stick_brawlers.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, HUD_HEIGHT, ARENA_WIDTH, ARENA_HEIGHT,
    FPS, GAME_TITLE, DEBUG_FRAMERATE, KEY_QUIT, KEY_RESTART,
    AUDIO_ENABLED, BLACK, WHITE
)
from stick_brawlers.core.input_handler import InputHandler
from stick_brawlers.core.match import Match, build_fighters

logger = logging.getLogger(__name__)


class Game:
    """
    pygame host: window, clock and event pump around one Match.
    The match is ticked once per frame while active; once it has ended the
    last frame stays on screen until a restart.
    """

    def __init__(self):
        pygame.init()

        # Audio is optional (may fail on servers)
        self.audio_available = False
        if AUDIO_ENABLED:
            try:
                pygame.mixer.init()
                self.audio_available = True
            except pygame.error as e:
                logger.warning("could not initialize mixer: %s", e)

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt = 0.0  # Delta time in seconds
        self.fps = 0.0
        self.frame_count = 0

        self.input_handler = InputHandler()

        # Systems (set in initialize_systems)
        self.match: Optional[Match] = None
        self.renderer = None
        self.ui_manager = None
        self.sound_manager = None

    def initialize_systems(self, renderer, ui_manager, sound_manager=None):
        """Register adapters"""
        self.renderer = renderer
        self.ui_manager = ui_manager
        self.sound_manager = sound_manager

    def new_match(self) -> Match:
        """Build the two standard fighters and wire them into a match"""
        fighter1, fighter2 = build_fighters(ARENA_WIDTH, ARENA_HEIGHT)
        if self.ui_manager:
            self.ui_manager.register_fighter(fighter1)
            self.ui_manager.register_fighter(fighter2)

        self.set_match(Match(
            fighter1, fighter2,
            ARENA_WIDTH, ARENA_HEIGHT,
            render=self.renderer,
            ui=self.ui_manager,
            sound=self.sound_manager
        ))
        return self.match

    def set_match(self, match: Match):
        self.match = match
        self.input_handler.set_listeners(match.on_key_down, match.on_key_up)

    def run(self):
        """Main game loop"""
        if self.match is None:
            self.new_match()

        while self.running:
            self.dt = self.clock.tick(FPS) / 1000.0
            self.fps = self.clock.get_fps()
            self.frame_count += 1

            self._handle_events()

            if self.input_handler.should_quit() or \
                    self.input_handler.is_key_just_pressed(KEY_QUIT):
                self.running = False
                continue

            self._update()
            self._render()
            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """One tick while active, restart handling once ended"""
        if self.match.is_active:
            self.match.tick()
        else:
            restart_clicked = (
                self.input_handler.is_mouse_clicked() and
                self.ui_manager is not None and
                self.ui_manager.restart_button_hit(self.input_handler.get_mouse_pos())
            )
            if restart_clicked or self.input_handler.is_any_just_pressed(KEY_RESTART):
                self.match.restart()

        if self.ui_manager:
            self.ui_manager.update(self.dt)

    def _render(self):
        """Arena below the HUD, HUD and banner on top"""
        self.screen.fill(BLACK)

        if self.renderer:
            self.screen.blit(self.renderer.surface, (0, HUD_HEIGHT))

        if self.ui_manager:
            self.ui_manager.render(self.screen, self.input_handler.get_mouse_pos())

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        font = pygame.font.Font(None, 20)
        fps_text = font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (SCREEN_WIDTH // 2 - fps_text.get_width() // 2, 4))

    def _cleanup(self):
        """Clean up resources"""
        if self.sound_manager:
            self.sound_manager.cleanup()
        if self.audio_available:
            pygame.mixer.quit()
        pygame.quit()
