from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .splitter import split_by_delimiter

try:
    import sounddevice as sd
except Exception:  # pragma: no cover - optional runtime dependency
    sd = None


Pulse = Tuple[bool, float]  # (key_down, duration_seconds)

DASH_UNITS = 3.0
LETTER_GAP_UNITS = 3.0
WORD_GAP_UNITS = 7.0
TAIL_SECONDS = 0.3


@dataclass
class SounderConfig:
    sample_rate: int = 48000
    tone_hz: float = 650.0
    wpm: float = 20.0
    farnsworth_wpm: Optional[float] = None
    volume: float = 0.25
    attack_ms: float = 4.0
    release_ms: float = 6.0

    @property
    def unit_seconds(self) -> float:
        # PARIS timing: 50 units per word.
        return 1.2 / max(self.wpm, 1.0)

    @property
    def gap_unit_seconds(self) -> float:
        """Unit used for letter and word gaps; Farnsworth only ever slows them down."""
        slow = self.farnsworth_wpm
        if slow is None or not 1.0 <= slow < self.wpm:
            return self.unit_seconds
        return 1.2 / slow


class _PulseTrain:
    def __init__(self) -> None:
        self.pulses: List[Pulse] = []

    def key(self, down: bool, seconds: float) -> None:
        if self.pulses and self.pulses[-1][0] == down:
            self.pulses[-1] = (down, self.pulses[-1][1] + seconds)
        else:
            self.pulses.append((down, seconds))


class MorseSounder:
    """Keys Morse text ("... --- ..." with "/" between words) as a CW tone."""

    def __init__(self, config: SounderConfig):
        self.config = config

    def code_to_pulses(self, morse: str) -> List[Pulse]:
        unit = self.config.unit_seconds
        gap_unit = self.config.gap_unit_seconds
        train = _PulseTrain()

        words = [letters for letters in map(_letters_of, split_by_delimiter(morse, "/")) if letters]
        for w, letters in enumerate(words):
            if w:
                train.key(False, WORD_GAP_UNITS * gap_unit)
            for n, letter in enumerate(letters):
                if n:
                    train.key(False, LETTER_GAP_UNITS * gap_unit)
                for e, element in enumerate(letter):
                    if e:
                        train.key(False, unit)
                    train.key(True, unit if element == "." else DASH_UNITS * unit)
        return train.pulses

    def render(self, morse: str) -> np.ndarray:
        pulses = self.code_to_pulses(morse)
        if not pulses:
            return np.zeros(1, dtype=np.float32)

        sr = self.config.sample_rate
        counts = [max(int(round(seconds * sr)), 1) for _, seconds in pulses]
        gain = np.concatenate(
            [_keying_envelope(n, sr, self.config) if down else np.zeros(n, dtype=np.float32)
             for (down, _), n in zip(pulses, counts)]
        )
        gain = np.concatenate([gain, np.zeros(max(int(TAIL_SECONDS * sr), 1), dtype=np.float32)])

        # One continuous carrier keeps phase intact across gaps.
        t = np.arange(gain.size, dtype=np.float64) / sr
        carrier = np.sin(2.0 * np.pi * self.config.tone_hz * t)
        volume = float(np.clip(self.config.volume, 0.0, 1.0))
        return (carrier * gain * volume).astype(np.float32)

    def play(self, morse: str, device: Optional[int] = None, blocking: bool = True) -> None:
        if sd is None:
            raise RuntimeError("sounddevice is not installed; cannot play audio.")
        sd.play(self.render(morse), samplerate=self.config.sample_rate, device=device, blocking=blocking)


def list_output_devices() -> List[Tuple[int, str]]:
    if sd is None:
        return []
    return [
        (i, d.get("name", f"device-{i}"))
        for i, d in enumerate(sd.query_devices())
        if d.get("max_output_channels", 0) > 0
    ]


def _letters_of(word: str) -> List[str]:
    letters = ("".join(ch for ch in token if ch in ".-") for token in split_by_delimiter(word, " "))
    return [letter for letter in letters if letter]


def _keying_envelope(n: int, sample_rate: int, config: SounderConfig) -> np.ndarray:
    """Linear rise and fall; a burst shorter than both ramps becomes a triangle."""
    rise = min(max(int(sample_rate * config.attack_ms / 1000.0), 0), n)
    fall = min(max(int(sample_rate * config.release_ms / 1000.0), 0), n)
    if rise + fall > n:
        rise = n // 2
        fall = n - rise
    env = np.ones(n, dtype=np.float32)
    if rise:
        env[:rise] = np.linspace(0.0, 1.0, rise, endpoint=False, dtype=np.float32)
    if fall:
        env[n - fall:] = np.linspace(1.0, 0.0, fall, endpoint=False, dtype=np.float32)
    return env
