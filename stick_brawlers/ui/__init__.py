"""
UI System Module
"""

from stick_brawlers.ui.manager import UIManager
from stick_brawlers.ui.hud import HUD, HealthBar, WinnerBanner

__all__ = ['UIManager', 'HUD', 'HealthBar', 'WinnerBanner']
