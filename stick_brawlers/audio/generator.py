"""
Sound Generator
===============
Procedural sound effects. No audio files are loaded.
"""

import pygame
import numpy as np
from typing import Dict, Optional
from dataclasses import dataclass
from enum import Enum

from stick_brawlers.config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass(frozen=True)
class SoundParams:
    """Parameters for one generated sound"""
    frequency: float = 440.0
    duration: float = 0.2
    volume: float = 0.5
    wave_type: WaveType = WaveType.SINE

    # Envelope (ADSR)
    attack: float = 0.01
    decay: float = 0.05
    sustain: float = 0.7
    release: float = 0.1

    pitch_bend: float = 0.0  # Semitones per second
    noise_mix: float = 0.0


class SoundGenerator:
    """
    Turns SoundParams into 16-bit samples and pygame Sounds.
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE,
                 channels: int = AUDIO_CHANNELS, seed: Optional[int] = None):
        self.sample_rate = sample_rate
        self.channels = channels
        self._rng = np.random.default_rng(seed)
        self._cache: Dict[SoundParams, pygame.mixer.Sound] = {}

    def synthesize(self, params: SoundParams) -> np.ndarray:
        """
        Mono int16 samples for params.
        """
        num_samples = max(1, int(params.duration * self.sample_rate))
        t = np.linspace(0, params.duration, num_samples, dtype=np.float32)

        if params.pitch_bend != 0:
            freq = params.frequency * np.power(2, params.pitch_bend * t / 12)
            phase = np.cumsum(freq / self.sample_rate) * 2 * np.pi
        else:
            phase = 2 * np.pi * params.frequency * t

        samples = self._generate_wave(phase, params.wave_type)

        if params.noise_mix > 0:
            noise = self._rng.uniform(-1, 1, num_samples).astype(np.float32)
            samples = samples * (1 - params.noise_mix) + noise * params.noise_mix

        samples = samples * self._generate_envelope(params, num_samples)
        samples = np.clip(samples * params.volume, -1, 1)

        return (samples * 32767).astype(np.int16)

    def generate(self, params: SoundParams) -> pygame.mixer.Sound:
        """pygame Sound for params (mixer must be initialized)"""
        if params in self._cache:
            return self._cache[params]

        samples = self.synthesize(params)
        mixer_init = pygame.mixer.get_init()
        channels = mixer_init[2] if mixer_init else self.channels
        if channels == 2:
            samples = np.ascontiguousarray(np.column_stack((samples, samples)))
        sound = pygame.sndarray.make_sound(samples)

        self._cache[params] = sound
        return sound

    def _generate_wave(self, phase: np.ndarray, wave_type: WaveType) -> np.ndarray:
        if wave_type == WaveType.SINE:
            return np.sin(phase)

        elif wave_type == WaveType.SQUARE:
            return np.sign(np.sin(phase))

        elif wave_type == WaveType.TRIANGLE:
            return 2 * np.abs(2 * (phase / (2 * np.pi) % 1) - 1) - 1

        elif wave_type == WaveType.NOISE:
            return self._rng.uniform(-1, 1, len(phase)).astype(np.float32)

        return np.zeros_like(phase)

    def _generate_envelope(self, params: SoundParams, num_samples: int) -> np.ndarray:
        """ADSR envelope"""
        envelope = np.zeros(num_samples, dtype=np.float32)

        attack_samples = int(params.attack * self.sample_rate)
        decay_samples = int(params.decay * self.sample_rate)
        release_samples = int(params.release * self.sample_rate)
        sustain_samples = num_samples - attack_samples - decay_samples - release_samples

        if sustain_samples < 0:
            # Scale phases down to fit a short sound
            total = attack_samples + decay_samples + release_samples
            ratio = num_samples / total if total > 0 else 1
            attack_samples = int(attack_samples * ratio)
            decay_samples = int(decay_samples * ratio)
            release_samples = num_samples - attack_samples - decay_samples
            sustain_samples = 0

        idx = 0
        if attack_samples > 0:
            envelope[idx:idx + attack_samples] = np.linspace(0, 1, attack_samples)
            idx += attack_samples

        if decay_samples > 0:
            envelope[idx:idx + decay_samples] = np.linspace(1, params.sustain, decay_samples)
            idx += decay_samples

        if sustain_samples > 0:
            envelope[idx:idx + sustain_samples] = params.sustain
            idx += sustain_samples

        if idx < num_samples:
            start_val = envelope[idx - 1] if idx > 0 else params.sustain
            envelope[idx:] = np.linspace(start_val, 0, num_samples - idx)

        return envelope


# Named effects used by the game
SFX_PARAMS: Dict[str, SoundParams] = {
    'hit': SoundParams(
        frequency=160, duration=0.09, volume=0.45,
        wave_type=WaveType.NOISE,
        attack=0.001, decay=0.02, sustain=0.3, release=0.05,
        pitch_bend=-45
    ),
    'ko': SoundParams(
        frequency=220, duration=0.7, volume=0.55,
        wave_type=WaveType.SQUARE,
        attack=0.005, decay=0.1, sustain=0.6, release=0.3,
        pitch_bend=-14, noise_mix=0.15
    ),
    'restart': SoundParams(
        frequency=660, duration=0.15, volume=0.35,
        wave_type=WaveType.TRIANGLE,
        attack=0.005, decay=0.03, sustain=0.5, release=0.06,
        pitch_bend=12
    ),
}


class ProceduralSFX:
    """
    Pre-generated sound effects.
    """

    def __init__(self, generator: Optional[SoundGenerator] = None):
        self.generator = generator or SoundGenerator()
        self._sounds = {
            name: self.generator.generate(params)
            for name, params in SFX_PARAMS.items()
        }

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        return self._sounds.get(name)
