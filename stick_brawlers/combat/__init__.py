"""
Combat System Module
"""

from stick_brawlers.combat.engine import CombatEngine, HitEvent, CombatState

__all__ = ['CombatEngine', 'HitEvent', 'CombatState']
