"""Hostile shapes: the chasing pentagon, pushable squares and shootable triangles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from .button import THE_BUTTON_SIZE
from .effects import Timer, TimerMode
from .player import PLAYER_SIZE

Point = tuple[float, float]

PENTAGON_Z = 95.0
PENTAGON_COLOR = (1.0, 0.5, 0.0)
PENTAGON_SIZE = 32.0
PENTAGON_SPEED = 192.0
SPAWN_DISTANCE = 1024.0

SQUARE_SPAWN_INTERVAL = 3.0
SQUARE_SIZE = 256.0
SQUARE_Z = 90.0
SQUARE_COLOR = (0.5, 0.0, 1.0)
SQUARE_SPEED = 1024.0
SQUARE_REST_DISTANCE_SQUARED = 10.0

TRIANGLE_SPAWN_INTERVAL = 2.5
TRIANGLE_SIZE = 48.0
TRIANGLE_COLOR = (0.0, 0.0, 1.0)
TRIANGLE_Z = 80.0
TRIANGLE_SPEED = 96.0
TRIANGLE_VERTICES: tuple[Point, Point, Point] = (
    (0.0, 0.0),
    (-TRIANGLE_SIZE, TRIANGLE_SIZE * 0.6),
    (-TRIANGLE_SIZE, -TRIANGLE_SIZE * 0.6),
)

FRAGMENT_SIZE = 12.0
FRAGMENTS_PER_TRIANGLE = 8
FRAGMENT_COLOR = (0.0, 0.0, 0.3)
FRAGMENT_Z = 0.0
FRAGMENT_SPREAD = TRIANGLE_SIZE * 0.3

BREAK_SOUND = "audio/sound_effects/break.ogg"
BREAK_SOUND_VOLUME = 0.2


def _normalize_or_zero(x: float, y: float) -> Point:
    length = math.hypot(x, y)
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (x / length, y / length)


def _distance_squared(a: Point, b: Point) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _angle(direction: Point) -> float:
    return math.atan2(direction[1], direction[0])


@dataclass
class Pentagon:
    """An orange pentagon that hunts the player."""

    position: Point
    rotation: float = 0.0
    z: float = PENTAGON_Z

    def update(self, player_position: Point, dt: float) -> bool:
        """Move towards the player; return True if the player has been caught."""
        start = self.position
        dx, dy = _normalize_or_zero(
            player_position[0] - start[0], player_position[1] - start[1]
        )
        step = PENTAGON_SPEED * dt
        self.position = (start[0] + dx * step, start[1] + dy * step)
        self.rotation = _angle((dx, dy))
        reach = PENTAGON_SIZE + PLAYER_SIZE
        return _distance_squared(player_position, start) <= reach * reach


def spawn_pentagon(rng: random.Random) -> Pentagon:
    """Place a pentagon at a random angle, far from the centre."""
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return Pentagon(
        position=(math.cos(angle) * SPAWN_DISTANCE, math.sin(angle) * SPAWN_DISTANCE)
    )


@dataclass
class Square:
    """A purple square that slides onto the button until dragged away."""

    position: Point
    rotation: float = 0.0
    drag_direction: Optional[Point] = None
    z: float = SQUARE_Z

    def drag(self, distance: Point) -> None:
        """Send the square off along a screen-space drag (y grows downward)."""
        dx, dy = _normalize_or_zero(distance[0], distance[1])
        self.drag_direction = (dx, -dy)

    def update(self, button_position: Point, window_width: float, dt: float) -> bool:
        """Move the square; return True once a dragged square has left the screen."""
        start = self.position
        if (
            self.drag_direction is None
            and _distance_squared(start, button_position) <= SQUARE_REST_DISTANCE_SQUARED
        ):
            return False
        if self.drag_direction is not None:
            direction = self.drag_direction
        else:
            direction = _normalize_or_zero(
                button_position[0] - start[0], button_position[1] - start[1]
            )
        step = SQUARE_SPEED * dt
        self.position = (start[0] + direction[0] * step, start[1] + direction[1] * step)
        self.rotation = _angle(direction)
        return (
            self.drag_direction is not None
            and _distance_squared(button_position, start) >= window_width * window_width
        )


def _square_timer() -> Timer:
    return Timer(SQUARE_SPAWN_INTERVAL, TimerMode.ONCE)


@dataclass
class SquareSpawner:
    """Spawns one square after a delay; reset it to allow the next."""

    timer: Timer = field(default_factory=_square_timer)

    def update(
        self, dt: float, window_width: float, rng: random.Random
    ) -> Optional[Square]:
        """Advance the delay and return a new square when it runs out."""
        self.timer.tick(dt)
        if not self.timer.just_finished:
            return None
        angle = rng.uniform(0.0, 2.0 * math.pi)
        radius = window_width * 0.6
        return Square(position=(math.cos(angle) * radius, math.sin(angle) * radius))

    def reset(self) -> None:
        """Start the delay for the next square."""
        self.timer.reset()


def _sign(p: Point, a: Point, b: Point) -> float:
    return (p[0] - b[0]) * (a[1] - b[1]) - (a[0] - b[0]) * (p[1] - b[1])


@dataclass
class Triangle:
    """A blue triangle flying at the button, tip first."""

    position: Point
    rotation: float = 0.0
    z: float = TRIANGLE_Z

    def update(self, button_position: Point, dt: float) -> bool:
        """Move towards the button; return True once it has reached it."""
        dx, dy = _normalize_or_zero(
            button_position[0] - self.position[0], button_position[1] - self.position[1]
        )
        step = TRIANGLE_SPEED * dt
        self.position = (self.position[0] + dx * step, self.position[1] + dy * step)
        self.rotation = _angle((dx, dy))
        return math.dist(self.position, button_position) <= THE_BUTTON_SIZE

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies on the rotated triangle."""
        dx = point[0] - self.position[0]
        dy = point[1] - self.position[1]
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        local = (dx * cos_r + dy * sin_r, -dx * sin_r + dy * cos_r)
        a, b, c = TRIANGLE_VERTICES
        d1 = _sign(local, a, b)
        d2 = _sign(local, b, c)
        d3 = _sign(local, c, a)
        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive)


def _triangle_timer() -> Timer:
    return Timer(TRIANGLE_SPAWN_INTERVAL, TimerMode.REPEATING)


@dataclass
class TriangleSpawner:
    """Spawns a triangle at the right edge at a fixed interval."""

    timer: Timer = field(default_factory=_triangle_timer)

    def update(
        self, dt: float, window_size: Point, rng: random.Random
    ) -> Optional[Triangle]:
        """Advance the interval and return a new triangle when it elapses."""
        self.timer.tick(dt)
        if not self.timer.finished:
            return None
        width, height = window_size
        y = rng.uniform(-height * 0.4, height * 0.4)
        return Triangle(position=(width * 0.7, y))


@dataclass
class Fragment:
    """A small shard left behind by a destroyed triangle."""

    position: Point
    rotation: float
    z: float = FRAGMENT_Z


def shatter(location: Point, rng: random.Random) -> list[Fragment]:
    """Scatter fragments randomly around ``location``."""
    fragments = []
    for _ in range(FRAGMENTS_PER_TRIANGLE):
        offset_x = rng.uniform(-FRAGMENT_SPREAD, FRAGMENT_SPREAD)
        offset_y = rng.uniform(-FRAGMENT_SPREAD, FRAGMENT_SPREAD)
        rotation = rng.uniform(0.0, 2.0 * math.pi)
        fragments.append(
            Fragment(
                position=(location[0] + offset_x, location[1] + offset_y),
                rotation=rotation,
            )
        )
    return fragments