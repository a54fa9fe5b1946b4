"""Splash, loading and game-over screens, plus in-game pause handling."""

from __future__ import annotations

from dataclasses import dataclass, field

from .effects import Timer, TimerMode
from .menus import AppExit
from .sequencer import GameMechanic
from .states import Menu, Navigation, Screen
from .theme import Node, button, header, label, ui_root

SPLASH_BACKGROUND_COLOR = (0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"
NEXT_SCREEN = Screen.GAMEPLAY

PAUSE_OVERLAY_COLOR = (0.0, 0.0, 0.0, 0.8)
PAUSE_KEYS = frozenset({"p", "escape"})
CLOSE_KEYS = frozenset({"p"})

_GAME_OVER_REASONS = {
    GameMechanic.BUTTON_TIME: "THE BUTTON was not clicked during the last 6 seconds.",
    GameMechanic.DURABILITY: "THE BUTTON durability reached zero.",
    GameMechanic.TRIANGLES: "THE BUTTON was destroyed by triangle.",
    GameMechanic.PENTAGON: "You were caught by pentagon.",
    GameMechanic.VICTORY: "CG. You managed to survive the chaos.",
}


def game_over_text(reason: GameMechanic) -> tuple[str, str]:
    """Title and explanation shown on the game-over screen."""
    try:
        text = _GAME_OVER_REASONS[reason]
    except KeyError:
        raise ValueError(f"died to unsupported game mechanic: {reason}") from None
    title = "VICTORY" if reason is GameMechanic.VICTORY else "GAME OVER"
    return title, text


def build_game_over(navigation: Navigation, reason: GameMechanic) -> Node:
    """The game-over screen with Retry and Exit buttons."""
    title, text = game_over_text(reason)
    return ui_root(
        "Game over UI canvas",
        [
            header(title),
            label(text),
            button("Retry", lambda: navigation.set_screen(Screen.GAMEPLAY)),
            button("Exit", lambda: AppExit.SUCCESS),
        ],
    )


def build_loading_screen() -> Node:
    """A plain loading message."""
    return ui_root("Loading Screen", [label("Loading...")])


@dataclass
class FadeInOut:
    """Trapezoid-shaped fade: in, hold at full opacity, then out."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Current opacity between 0 and 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, dt: float) -> float:
        """Advance by ``dt`` seconds and return the new opacity."""
        self.t += dt
        return self.alpha()


def _splash_timer() -> Timer:
    return Timer(SPLASH_DURATION_SECS, TimerMode.ONCE)


@dataclass
class Splash:
    """Shows the splash image briefly, then moves on."""

    navigation: Navigation
    fade: FadeInOut = field(default_factory=FadeInOut)
    timer: Timer = field(default_factory=_splash_timer)

    def update(self, dt: float) -> float:
        """Advance the fade and timer; return the image opacity."""
        self.timer.tick(dt)
        alpha = self.fade.tick(dt)
        if self.timer.just_finished:
            self.navigation.set_screen(NEXT_SCREEN)
        return alpha

    def skip(self) -> None:
        """Leave the splash screen at once."""
        self.navigation.set_screen(NEXT_SCREEN)


@dataclass
class PauseController:
    """Pauses gameplay and opens or closes the pause menu on key presses."""

    navigation: Navigation
    cursor_visible: bool = True
    overlay: bool = False

    def handle_key(self, key: str) -> bool:
        """React to ``key`` ("p" or "escape"); return True if it was used."""
        nav = self.navigation
        if nav.screen is not Screen.GAMEPLAY:
            return False
        if nav.menu is Menu.NONE and key in PAUSE_KEYS:
            nav.set_paused(True)
            self.overlay = True
            nav.set_menu(Menu.PAUSE)
            self.cursor_visible = True
            return True
        if nav.menu is not Menu.NONE and key in CLOSE_KEYS:
            self._close_menu()
            return True
        return False

    def _close_menu(self) -> None:
        self.navigation.set_menu(Menu.NONE)
        self.cursor_visible = False

    def on_exit_gameplay(self) -> None:
        """Close any menu and unpause when gameplay ends."""
        self._close_menu()
        self.navigation.set_paused(False)
        self.overlay = False