"""Sound descriptions, global volume, a mixer, and deferred resource loading."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1


class SoundCategory(enum.Enum):
    """Broad category a sound belongs to."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


@dataclass(frozen=True)
class Sound:
    """A sound to play: looping music or a one-shot effect."""

    path: str
    volume: float
    category: SoundCategory
    looping: bool


def music(path: str, volume: float) -> Sound:
    """A looping music track."""
    return Sound(str(path), float(volume), SoundCategory.MUSIC, True)


def sound_effect(path: str, volume: float) -> Sound:
    """A sound effect that plays once."""
    return Sound(str(path), float(volume), SoundCategory.SOUND_EFFECT, False)


@dataclass
class GlobalVolume:
    """Master volume as a linear factor between 0 and 3."""

    volume: float = 1.0

    def lower(self) -> float:
        """Step the volume down, never below the minimum."""
        self.volume = max(self.volume - VOLUME_STEP, MIN_VOLUME)
        return self.volume

    def raise_(self) -> float:
        """Step the volume up, never above the maximum."""
        self.volume = min(self.volume + VOLUME_STEP, MAX_VOLUME)
        return self.volume


class AudioBackend(Protocol):
    """Something that can actually produce sound."""

    def play(self, sound: Sound, volume: float) -> Any: ...

    def set_volume(self, channel: Any, volume: float) -> None: ...

    def stop(self, channel: Any) -> None: ...


@dataclass
class PlayingSound:
    """A sound that is currently playing and its effective volume."""

    sound: Sound
    volume: float
    channel: Any = None


@dataclass
class AudioMixer:
    """Tracks playing sounds and keeps them in line with the global volume."""

    global_volume: GlobalVolume = field(default_factory=GlobalVolume)
    backend: Optional[AudioBackend] = None
    playing: list[PlayingSound] = field(default_factory=list)

    def play(self, sound: Sound) -> PlayingSound:
        """Start ``sound`` scaled by the global volume."""
        volume = self.global_volume.volume * sound.volume
        channel = self.backend.play(sound, volume) if self.backend else None
        entry = PlayingSound(sound, volume, channel)
        self.playing.append(entry)
        return entry

    def stop(self, entry: PlayingSound) -> None:
        """Stop a playing sound."""
        self.playing.remove(entry)
        if self.backend is not None:
            self.backend.stop(entry.channel)

    def apply_global_volume(self) -> None:
        """Re-apply the global volume to sounds that are already playing."""
        for entry in self.playing:
            entry.volume = self.global_volume.volume * entry.sound.volume
            if self.backend is not None:
                self.backend.set_volume(entry.channel, entry.volume)


Loader = Callable[[], Any]


@dataclass
class ResourceLoader:
    """Resources that become available once their loader yields a value.

    A loader returns ``None`` while its resource is not ready yet.
    """

    resources: dict[str, Any] = field(default_factory=dict)
    _waiting: deque[tuple[str, Loader]] = field(default_factory=deque, repr=False)
    _finished: list[str] = field(default_factory=list, repr=False)

    def load_resource(self, name: str, loader: Loader) -> ResourceLoader:
        """Queue a resource; it is inserted by :meth:`poll` when ready."""
        self._waiting.append((name, loader))
        return self

    def poll(self) -> list[str]:
        """Try each waiting loader once and return the names that finished."""
        pending = list(self._waiting)
        self._waiting.clear()
        done = []
        for name, loader in pending:
            value = loader()
            if value is None:
                self._waiting.append((name, loader))
            else:
                self.resources[name] = value
                self._finished.append(name)
                done.append(name)
        return done

    def is_all_done(self) -> bool:
        """Whether every requested resource has been loaded."""
        return not self._waiting