"""
Sound Manager
=============
Plays the procedural hit / KO / restart cues. Silently disabled when no
audio device is available.
"""

import pygame
from typing import Optional
import logging

from stick_brawlers.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, SFX_VOLUME
)
from stick_brawlers.audio.generator import ProceduralSFX

logger = logging.getLogger(__name__)


class SoundManager:
    """
    Mixer setup and playback of named effects.
    """

    def __init__(self, enabled: bool = AUDIO_ENABLED, volume: float = SFX_VOLUME):
        self.enabled = enabled
        self.initialized = False
        self.volume = volume
        self.muted = False
        self._sfx: Optional[ProceduralSFX] = None

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        """Initialize pygame mixer and generate sounds"""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(
                    frequency=AUDIO_SAMPLE_RATE,
                    size=-16,
                    channels=AUDIO_CHANNELS,
                    buffer=AUDIO_BUFFER_SIZE
                )
            self._sfx = ProceduralSFX()
            self.initialized = True
            logger.info("sound manager initialized")

        except pygame.error as e:
            logger.warning("audio disabled: %s", e)
            self.enabled = False
            self.initialized = False

    def play(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        """Play a named effect. Return the channel, or None if nothing played."""
        if not self.initialized or self.muted:
            return None

        sound = self._sfx.get(sound_name)
        if sound is None:
            logger.debug("unknown sound %r", sound_name)
            return None

        sound.set_volume(self.volume)
        return sound.play()

    def play_hit(self) -> Optional[pygame.mixer.Channel]:
        return self.play('hit')

    def play_ko(self) -> Optional[pygame.mixer.Channel]:
        return self.play('ko')

    def play_restart(self) -> Optional[pygame.mixer.Channel]:
        return self.play('restart')

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def cleanup(self):
        if self.initialized:
            pygame.mixer.stop()
            self.initialized = False
            logger.info("sound manager cleaned up")
