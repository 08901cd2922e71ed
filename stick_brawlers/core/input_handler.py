"""
Input handling for keyboard and mouse
"""

import pygame
from typing import Dict, Set, Tuple, Callable, Optional
from dataclasses import dataclass, field


@dataclass
class InputState:
    """
    Pressed/released flag per key code.
    Written by key events, read by the simulation.
    """
    keys: Dict[int, bool] = field(default_factory=dict)

    def press(self, key: int):
        self.keys[key] = True

    def release(self, key: int):
        self.keys[key] = False

    def is_pressed(self, key: int) -> bool:
        """Unknown keys read as released"""
        return self.keys.get(key, False)

    def pressed_keys(self) -> Set[int]:
        return {key for key, down in self.keys.items() if down}

    def clear(self):
        self.keys.clear()


@dataclass
class FrameInput:
    """Host-level input collected during one frame"""
    keys_just_pressed: Set[int] = field(default_factory=set)
    mouse_pos: Tuple[int, int] = (0, 0)
    mouse_just_clicked: bool = False
    quit_requested: bool = False


class InputHandler:
    """
    Turns pygame events into key down/up callbacks.
    Tracks just-pressed keys and mouse clicks for the host each frame.
    """

    def __init__(self, on_key_down: Optional[Callable[[int], object]] = None,
                 on_key_up: Optional[Callable[[int], object]] = None):
        self.frame = FrameInput()
        self._on_key_down = on_key_down
        self._on_key_up = on_key_up

    def set_listeners(self, on_key_down: Callable[[int], object],
                      on_key_up: Callable[[int], object]):
        """Route key events to a new receiver (e.g. a match)"""
        self._on_key_down = on_key_down
        self._on_key_up = on_key_up

    def update(self):
        """
        Reset per-frame state. Call once per frame before processing events.
        """
        self.frame.keys_just_pressed.clear()
        self.frame.mouse_just_clicked = False
        self.frame.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.frame.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.frame.keys_just_pressed.add(event.key)
            if self._on_key_down:
                self._on_key_down(event.key)

        elif event.type == pygame.KEYUP:
            if self._on_key_up:
                self._on_key_up(event.key)

        elif event.type == pygame.MOUSEMOTION:
            self.frame.mouse_pos = event.pos

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.frame.mouse_pos = event.pos
                self.frame.mouse_just_clicked = True

    def is_key_just_pressed(self, key: int) -> bool:
        """Check if key was just pressed this frame"""
        return key in self.frame.keys_just_pressed

    def is_any_just_pressed(self, keys) -> bool:
        return any(key in self.frame.keys_just_pressed for key in keys)

    def is_mouse_clicked(self) -> bool:
        """Check if the left button was clicked this frame"""
        return self.frame.mouse_just_clicked

    def get_mouse_pos(self) -> Tuple[int, int]:
        return self.frame.mouse_pos

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.frame.quit_requested
