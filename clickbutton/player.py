"""The player's dot that follows the cursor, and the click feedback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .effects import CircleBurst, PulseEffect

Point = tuple[float, float]

CLICK_PARTICLES_Z = 20.0
PLAYER_SIZE = 16.0
PLAYER_COLOR = (1.0, 0.0, 0.0)
PLAYER_Z = 100.0

CLICK_SOUND = "audio/sound_effects/click.ogg"
CLICK_SOUND_VOLUME = 0.1


def _player_pulse() -> PulseEffect:
    return PulseEffect(min=0.9, max=1.1, speed=0.5)


@dataclass
class Player:
    """The red dot steered with the mouse."""

    position: Point = (0.0, 0.0)
    clicked_on_target: bool = False
    scale: float = 1.0
    pulse: PulseEffect = field(default_factory=_player_pulse)
    z: float = PLAYER_Z

    def move_to(self, point: Optional[Point]) -> None:
        """Move to ``point`` in world coordinates; ``None`` leaves the player in place."""
        if point is None:
            return
        x, y = point
        self.position = (float(x), float(y))

    def update(self, dt: float) -> None:
        """Advance the pulsing animation by ``dt`` seconds."""
        self.scale = self.pulse.step(self.scale, dt)


def click_effect(position: Point) -> CircleBurst:
    """Rings shown where the player clicked on nothing in particular."""
    x, y = position
    return CircleBurst(location=(float(x), float(y), CLICK_PARTICLES_Z))