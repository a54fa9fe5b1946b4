"""Timers, pulsing scale and expanding circle particles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]
Rgba = tuple[float, float, float, float]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return a + (b - a) * t


def _lerp_color(a: Rgba, b: Rgba, t: float) -> Rgba:
    r, g, bl, al = (lerp(x, y, t) for x, y in zip(a, b))
    return (r, g, bl, al)


class TimerMode(enum.Enum):
    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """Counts elapsed seconds towards ``duration``."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    finished: bool = False
    times_finished_this_tick: int = 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished_this_tick > 0

    @property
    def fraction(self) -> float:
        if self.duration == 0:
            return 1.0
        return self.elapsed / self.duration

    def tick(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""
        if self.mode is not TimerMode.REPEATING and self.finished:
            self.times_finished_this_tick = 0
            return
        self.elapsed += dt
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
            return
        if self.mode is TimerMode.REPEATING:
            if self.duration == 0:
                self.times_finished_this_tick = 2**32 - 1
                self.elapsed = 0.0
            else:
                count, self.elapsed = divmod(self.elapsed, self.duration)
                self.times_finished_this_tick = int(count)
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration

    def reset(self) -> None:
        """Start counting from zero again."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0


@dataclass
class PulseEffect:
    """Scale that bounces between ``min`` and ``max`` at ``speed`` per second."""

    min: float = 0.95
    max: float = 1.05
    speed: float = 0.2
    direction: float = 1.0

    def step(self, scale: float, dt: float) -> float:
        """Return the next scale, reversing direction at the limits."""
        scale += self.direction * self.speed * dt
        if scale >= self.max or scale <= self.min:
            self.direction *= -1.0
        return min(max(scale, self.min), self.max)


@dataclass
class CircleBurst:
    """Request for a pair of expanding rings at ``location``."""

    location: Vec3 = (0.0, 0.0, 0.0)
    start_size: float = 24.0
    end_size: float = 32.0
    start_color: Rgba = (0.3, 0.3, 0.3, 1.0)
    end_color: Rgba = (0.0, 0.0, 0.0, 0.0)
    spacing: float = 4.0
    ttl: float = 0.5
    thickness: float = 2.0


@dataclass
class CircleParticle:
    """A ring that grows and fades over its lifetime."""

    location: Vec3
    timer: Timer
    start_size: float
    end_size: float
    start_color: Rgba
    end_color: Rgba
    inner_radius: float
    scale: float = field(init=False)
    color: Rgba = field(init=False)

    def __post_init__(self) -> None:
        self.scale = self.start_size
        self.color = self.start_color

    def update(self, dt: float) -> bool:
        """Advance the particle; return False once it should be removed."""
        self.timer.tick(dt)
        t = self.timer.fraction
        if self.timer.finished:
            return False
        self.scale = lerp(self.start_size, self.end_size, t)
        self.color = _lerp_color(self.start_color, self.end_color, t)
        return True


def _ring(burst: CircleBurst, start_size: float, end_size: float) -> CircleParticle:
    return CircleParticle(
        location=burst.location,
        timer=Timer(burst.ttl, TimerMode.ONCE),
        start_size=start_size,
        end_size=end_size,
        start_color=burst.start_color,
        end_color=burst.end_color,
        inner_radius=1.0 - burst.thickness / start_size,
    )


def spawn_circles(burst: CircleBurst) -> list[CircleParticle]:
    """Create the outer ring and a second ring ``spacing`` smaller."""
    return [
        _ring(burst, burst.start_size, burst.end_size),
        _ring(burst, burst.start_size - burst.spacing, burst.end_size - burst.spacing),
    ]