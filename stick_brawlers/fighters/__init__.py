"""
Fighter System Module
"""

from stick_brawlers.fighters.fighter import Fighter, ControlScheme
from stick_brawlers.fighters.hitbox import Hitbox, check_collision
from stick_brawlers.fighters.movement import MovementController

__all__ = ['Fighter', 'ControlScheme', 'Hitbox', 'check_collision', 'MovementController']
