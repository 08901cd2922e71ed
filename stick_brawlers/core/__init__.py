"""
Core game engine modules
"""

from stick_brawlers.core.state_machine import StateMachine
from stick_brawlers.core.input_handler import InputHandler, InputState
from stick_brawlers.core.adapters import RenderAdapter, UIAdapter
from stick_brawlers.core.match import Match, build_fighters

__all__ = [
    'StateMachine', 'InputHandler', 'InputState',
    'RenderAdapter', 'UIAdapter', 'Match', 'build_fighters'
]
