"""
Stick Brawlers - Configuration & Constants
==========================================
All game settings, colors, controls and constants in one place.
"""

from enum import Enum, auto
from typing import Tuple

import pygame

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

ARENA_WIDTH = 800
ARENA_HEIGHT = 400
HUD_HEIGHT = 70
SCREEN_WIDTH = ARENA_WIDTH
SCREEN_HEIGHT = HUD_HEIGHT + ARENA_HEIGHT
FPS = 60
GAME_TITLE = "STICK BRAWLERS - Local Versus"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (40, 40, 40)

# Fighter colors
PLAYER1_COLOR = (76, 175, 80)     # #4CAF50
PLAYER2_COLOR = (244, 67, 54)     # #F44336

# Arena colors
ARENA_BG = (34, 34, 34)
GROUND_COLOR = (68, 68, 68)       # #444
GROUND_HEIGHT = 20

# UI colors
UI_BG = (20, 20, 30)
HEALTH_GREEN = (50, 200, 50)
HEALTH_YELLOW = (200, 200, 50)
HEALTH_RED = (200, 50, 50)
BANNER_BG = (0, 0, 0, 190)
BUTTON_BG = (70, 70, 90)
BUTTON_HOVER = (100, 100, 130)
GOLD = (255, 215, 0)
DEBUG_HITBOX_COLOR = (255, 0, 0)

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

FIGHTER_WIDTH = 30
FIGHTER_HEIGHT = 60
FIGHTER_SPEED = 5      # pixels per tick
MAX_HEALTH = 100

# Starting positions (top-left of bounding box)
PLAYER1_START: Tuple[int, int] = (100, 200)
PLAYER2_START: Tuple[int, int] = (600, 200)

PLAYER1_NAME = "Player 1"
PLAYER2_NAME = "Player 2"

# =============================================================================
# COMBAT SETTINGS
# =============================================================================

ATTACK_COOLDOWN = 30   # ticks before another attack may start
ATTACK_DURATION = 15   # ticks the attack window stays live
ATTACK_REACH = 40
ATTACK_HEIGHT = 20
ATTACK_Y_OFFSET = 25   # from the top of the bounding box
HIT_DAMAGE = 5

# Off by default: a held overlap lands on every tick of the attack window.
ONE_HIT_PER_SWING = False

# =============================================================================
# STATE ENUMS
# =============================================================================


class Facing(Enum):
    """Horizontal direction a fighter is looking"""
    LEFT = "left"
    RIGHT = "right"


class AttackState(Enum):
    IDLE = auto()
    ATTACKING = auto()


class MatchState(Enum):
    """Match lifecycle"""
    ACTIVE = auto()
    ENDED = auto()


# =============================================================================
# CONTROLS
# =============================================================================

# Action -> pygame key code. Bound into each fighter at construction.
PLAYER1_CONTROLS = {
    'up': pygame.K_w,
    'down': pygame.K_s,
    'left': pygame.K_a,
    'right': pygame.K_d,
    'attack': pygame.K_f,
}

PLAYER2_CONTROLS = {
    'up': pygame.K_o,
    'down': pygame.K_l,
    'left': pygame.K_k,
    'right': pygame.K_SEMICOLON,
    'attack': pygame.K_j,
}

# Host keys (not routed to fighters)
KEY_QUIT = pygame.K_ESCAPE
KEY_RESTART = (pygame.K_r, pygame.K_RETURN)

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512
SFX_VOLUME = 0.7

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_FRAMERATE = False
