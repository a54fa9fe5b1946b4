"""Top-level screen, menu and pause states with deferred transitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

_T = TypeVar("_T")


class Screen(enum.Enum):
    """The game's main screens."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"
    GAME_OVER = "game_over"


class Menu(enum.Enum):
    """Menus that can be shown on top of a screen."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


@dataclass(frozen=True)
class Transition(Generic[_T]):
    """A change of one state from ``old`` to ``new``."""

    old: _T
    new: _T


State = Union[Screen, Menu, bool]


@dataclass
class Navigation:
    """Current states plus requested next states.

    Requests made with the ``set_*`` methods take effect only when
    :meth:`apply` runs, just like a frame boundary in the game loop.
    Requesting the current value again still counts as a transition.
    """

    screen: Screen = Screen.LOADING
    menu: Menu = Menu.NONE
    paused: bool = False
    _next_screen: Screen | None = field(default=None, init=False, repr=False)
    _next_menu: Menu | None = field(default=None, init=False, repr=False)
    _next_paused: bool | None = field(default=None, init=False, repr=False)

    def set_screen(self, screen: Screen) -> None:
        """Request a change of screen."""
        self._next_screen = screen

    def set_menu(self, menu: Menu) -> None:
        """Request a change of menu."""
        self._next_menu = menu

    def set_paused(self, paused: bool) -> None:
        """Request pausing or unpausing."""
        self._next_paused = bool(paused)

    @property
    def pending(self) -> bool:
        """Whether any change has been requested but not applied."""
        return (
            self._next_screen is not None
            or self._next_menu is not None
            or self._next_paused is not None
        )

    def apply(self) -> list[Transition[State]]:
        """Apply requested changes and return them in screen, menu, pause order."""
        transitions: list[Transition[State]] = []
        if self._next_screen is not None:
            transitions.append(Transition(self.screen, self._next_screen))
            self.screen = self._next_screen
            self._next_screen = None
        if self._next_menu is not None:
            transitions.append(Transition(self.menu, self._next_menu))
            self.menu = self._next_menu
            self._next_menu = None
        if self._next_paused is not None:
            transitions.append(Transition(self.paused, self._next_paused))
            self.paused = self._next_paused
            self._next_paused = None
        return transitions