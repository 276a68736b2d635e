"""
sound.py: Best-effort synthesized sound effects on pygame.mixer.

Tones are generated once when the mixer comes up. The single `enabled` flag
is consulted each time an effect fires. If the mixer can't initialize or a
sound fails to play, the error is logged and the call becomes a no-op.
"""

import logging
import math
from array import array
from typing import Dict, List, Optional

import pygame

from .constants import (
    JUMP_SOUND, SCORE_SOUND, HIT_SOUND, SOUND_START_GAIN, SOUND_END_GAIN
)
from .data_models import GameEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
MAX_AMPLITUDE = 32767

EVENT_SOUNDS = {
    GameEvent.JUMP: "jump",
    GameEvent.SCORE: "score",
    GameEvent.GAME_OVER: "hit",
}


def _wave(kind: str, phase: float) -> float:
    """One sample in [-1, 1] for `phase` measured in cycles."""
    frac = phase - math.floor(phase)
    if kind == "sine":
        return math.sin(2 * math.pi * frac)
    if kind == "square":
        return 1.0 if frac < 0.5 else -1.0
    if kind == "sawtooth":
        return 2.0 * frac - 1.0
    raise ValueError(f"Unknown waveform: {kind}")


def synthesize(frequency: float, duration_ms: int, kind: str = "sine",
               sample_rate: int = SAMPLE_RATE,
               start_gain: float = SOUND_START_GAIN,
               end_gain: float = SOUND_END_GAIN) -> List[int]:
    """
    Mono signed 16-bit samples for a tone with an exponential gain ramp
    from `start_gain` to `end_gain` over the tone's duration.
    """
    count = int(sample_rate * duration_ms / 1000)
    if count <= 0:
        return []
    ratio = end_gain / start_gain
    samples = []
    for i in range(count):
        t = i / sample_rate
        gain = start_gain * ratio ** (i / count)
        samples.append(int(MAX_AMPLITUDE * gain * _wave(kind, frequency * t)))
    return samples


class SoundBoard:
    """Plays the jump, score and hit effects. Subscribe `on_event` to the engine."""

    TONES = {
        "jump": JUMP_SOUND,
        "score": SCORE_SOUND,
        "hit": HIT_SOUND,
    }

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self._inited = False
        self._failed_init = False

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def ensure_init(self) -> bool:
        """Initialize pygame.mixer and build the tones. Safe to call many times."""
        if self._inited:
            return True
        if self._failed_init:
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            frequency, size, channels = pygame.mixer.get_init()
            if size != -16:
                raise pygame.error(f"unsupported mixer sample format {size}")
            for name, (hz, ms, kind) in self.TONES.items():
                self._sounds[name] = self._build(hz, ms, kind, frequency, channels)
        except pygame.error as e:
            logger.warning("Audio not supported: %s", e)
            self._failed_init = True
            self._sounds.clear()
            return False
        self._inited = True
        return True

    @staticmethod
    def _build(hz: float, ms: int, kind: str, rate: int, channels: int) -> "pygame.mixer.Sound":
        mono = synthesize(hz, ms, kind, sample_rate=rate)
        buf = array("h")
        for sample in mono:
            buf.extend([sample] * channels)
        return pygame.mixer.Sound(buffer=buf.tobytes())

    def play(self, name: str) -> Optional["pygame.mixer.Channel"]:
        if not self.enabled or not self.ensure_init():
            return None
        sound = self._sounds.get(name)
        if sound is None:
            return None
        try:
            return sound.play()
        except pygame.error as e:
            logger.warning("Could not play %s: %s", name, e)
            return None

    def on_event(self, event: GameEvent):
        name = EVENT_SOUNDS.get(event)
        if name is not None:
            self.play(name)
