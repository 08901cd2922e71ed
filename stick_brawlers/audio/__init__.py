"""
Audio System
============
Sound manager and procedural sound generation.
"""

from stick_brawlers.audio.sound_manager import SoundManager
from stick_brawlers.audio.generator import SoundGenerator, ProceduralSFX

__all__ = [
    'SoundManager',
    'SoundGenerator',
    'ProceduralSFX',
]
