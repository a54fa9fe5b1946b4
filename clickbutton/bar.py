"""Progress bars that clamp their value and report becoming empty or full."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any

Color = tuple[float, float, float]

_TRACKED = frozenset({"min", "max", "current"})


class BarEvent(enum.Enum):
    """Notifications a bar can raise after settling."""

    EMPTY = "empty"
    FULL = "full"


@dataclass
class BarLayout:
    """Size and colours of a bar; the inner bar is inset by ``border_size``."""

    size: tuple[float, float] = (128.0, 16.0)
    color: Color = (1.0, 0.0, 0.0)
    border_size: float = 5.0
    border_color: Color = (0.0, 0.0, 0.0)


@dataclass
class BarBehavior:
    """Which events the bar raises."""

    trigger_on_full: bool = False
    trigger_on_empty: bool = False


@dataclass(eq=False)
class Bar:
    """A value between ``min`` and ``max``.

    Assigning to ``min``, ``max`` or ``current`` marks the bar as changed;
    :meth:`settle` then clamps the value and reports events.
    """

    min: float = 0.0
    max: float = 0.0
    current: float = 0.0
    layout: BarLayout = field(default_factory=BarLayout)
    behavior: BarBehavior = field(default_factory=BarBehavior)
    changed: bool = field(default=True, init=False, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        if name in _TRACKED:
            object.__setattr__(self, "changed", True)

    def settle(self) -> list[BarEvent]:
        """Clamp a changed bar and return the events it raises."""
        if not self.changed:
            return []
        if self.min > self.max:
            raise ValueError(f"bar minimum {self.min} exceeds maximum {self.max}")
        if self.current < self.min:
            self.current = self.min
        elif self.current > self.max:
            self.current = self.max
        events = []
        if self.behavior.trigger_on_empty and self.current == self.min:
            events.append(BarEvent.EMPTY)
        if self.behavior.trigger_on_full and self.current == self.max:
            events.append(BarEvent.FULL)
        self.changed = False
        return events

    def progress(self) -> float:
        """Fraction of the range that is filled; NaN for an empty range."""
        span = self.max - self.min
        if span == 0:
            return math.nan
        return (self.current - self.min) / span

    def fill(self) -> None:
        """Set the value to the maximum."""
        self.current = self.max