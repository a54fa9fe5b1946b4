"""The on-screen clock that counts survival time."""

from __future__ import annotations

import math
from dataclasses import dataclass

CLOCK_FONT_SIZE = 64.0
CLOCK_COLOR = (1.0, 0.0, 1.0)


def format_elapsed(seconds: float) -> str:
    """Render elapsed seconds as ``MM:SS`` with both fields rounded."""
    minutes = seconds / 60.0
    rest = math.fmod(seconds, 60.0)
    return f"{minutes:02.0f}:{rest:02.0f}"


@dataclass
class GameClock:
    """Accumulates elapsed time and produces its display text."""

    elapsed: float = 0.0

    @property
    def text(self) -> str:
        return format_elapsed(self.elapsed)

    def tick(self, dt: float) -> str:
        """Add ``dt`` seconds and return the new display text."""
        self.elapsed += dt
        return self.text