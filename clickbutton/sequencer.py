"""Timed sequence of guide texts and mechanic activations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union


class SequenceError(Exception):
    """Raised when a sequence cannot be read or parsed."""


class GameMechanic(enum.Enum):
    """Game mechanics that the sequence can switch on."""

    NONE = "None"
    BUTTON = "Button"
    BUTTON_TIME = "Button Time"
    TIMER = "Timer"
    DURABILITY = "Durability"
    FIX = "Fix"
    TRIANGLES = "Triangles"
    SQUARE = "Square"
    VICTORY = "Victory"
    PENTAGON = "Pentagon"


def parse_mechanic(text: str) -> GameMechanic:
    """Parse a title-case mechanic name, ignoring ASCII case."""
    wanted = text.lower()
    for mechanic in GameMechanic:
        if mechanic.value.lower() == wanted:
            return mechanic
    raise SequenceError(f"unknown game mechanic: {text!r}")


@dataclass(frozen=True)
class ChangeText:
    """Replace the guide text."""

    text: str


@dataclass(frozen=True)
class SpawnMechanic:
    """Switch to a game mechanic."""

    mechanic: GameMechanic


@dataclass(frozen=True)
class Action:
    """An action fired ``time`` seconds after the previous one."""

    time: float
    kind: Union[ChangeText, SpawnMechanic]


def _parse_time(text: str, lineno: int) -> float:
    if "_" in text:
        raise SequenceError(f"line {lineno}: invalid time {text!r}")
    try:
        return float(text)
    except ValueError:
        raise SequenceError(f"line {lineno}: invalid time {text!r}") from None


def parse_sequence(text: str) -> list[Action]:
    """Parse ``time | T|M | content`` lines; blank lines and ``#`` comments are skipped."""
    actions: list[Action] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = [part.strip() for part in line.split("|")]
        if len(parts) != 3:
            raise SequenceError(
                f"line {lineno}: expected 3 fields separated by '|', got {len(parts)}"
            )
        time_text, action_type, content = parts
        time = _parse_time(time_text, lineno)
        if action_type == "T":
            kind: Union[ChangeText, SpawnMechanic] = ChangeText(content)
        elif action_type == "M":
            try:
                kind = SpawnMechanic(parse_mechanic(content))
            except SequenceError as exc:
                raise SequenceError(f"line {lineno}: {exc}") from None
        else:
            raise SequenceError(f"line {lineno}: invalid action type {action_type!r}")
        actions.append(Action(time, kind))
    return actions


def load_sequence(path: Union[str, PathLike]) -> list[Action]:
    """Read and parse a sequence file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SequenceError(f"Could not load asset: {exc}") from exc
    return parse_sequence(text)


@dataclass
class Sequencer:
    """Plays a list of actions, at most one per update."""

    actions: list[Action] = field(default_factory=list)
    elapsed_time: float = 0.0
    action_index: int = 0

    @property
    def finished(self) -> bool:
        return self.action_index >= len(self.actions)

    def update(self, dt: float) -> Action | None:
        """Advance time by ``dt`` and return the action that is due, if any."""
        if self.finished:
            return None
        action = self.actions[self.action_index]
        self.elapsed_time += dt
        if self.elapsed_time < action.time:
            return None
        self.elapsed_time -= action.time
        self.action_index += 1
        return action