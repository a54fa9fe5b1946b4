"""The application: state wiring, event handling and the pygame loop."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional

import pygame

from .audio import AudioMixer, GlobalVolume, ResourceLoader
from .menus import (
    CREDITS_MUSIC,
    AppExit,
    build_credits_menu,
    build_main_menu,
    build_pause_menu,
    build_settings_menu,
    settings_back_target,
)
from .screens import (
    SPLASH_BACKGROUND_COLOR,
    PauseController,
    Splash,
    build_game_over,
    build_loading_screen,
)
from .sequencer import load_sequence
from .states import Menu, Navigation, Screen, Transition
from .theme import Button, Node
from .world import GameWorld

TITLE = "Click this button!"
SEQUENCE_FILE = "sequence.seq"
SOUNDTRACK_FILE = "audio/music/soundtrack.ogg"
TOGGLE_DEBUG_KEY = "`"
_MAX_TRANSITION_ROUNDS = 8

_KEY_NAMES = {
    pygame.K_ESCAPE: "escape",
    pygame.K_p: "p",
    pygame.K_BACKQUOTE: TOGGLE_DEBUG_KEY,
}


class App:
    """Owns every part of the game and moves it forward frame by frame."""

    def __init__(
        self,
        assets: Path | str = Path("assets"),
        window_size: tuple[float, float] = (1280.0, 720.0),
        web: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.assets = Path(assets)
        self.window_size = window_size
        self.web = web
        self.navigation = Navigation()
        self.volume = GlobalVolume()
        self.mixer = AudioMixer(global_volume=self.volume)
        self.loader = ResourceLoader()
        self.loader.load_resource("sequence", lambda: load_sequence(self.assets / SEQUENCE_FILE))
        self.loader.load_resource("soundtrack", lambda: SOUNDTRACK_FILE)
        self.world = GameWorld(
            navigation=self.navigation,
            mixer=self.mixer,
            window_size=window_size,
            rng=rng or random.Random(),
        )
        self.pause = PauseController(self.navigation)
        self.splash: Optional[Splash] = None
        self.screen_ui: Optional[Node] = None
        self.menu_ui: Optional[Node] = None
        self.cursor: Optional[tuple[float, float]] = None
        self.debug = False
        self.running = True
        self._enter_screen(self.navigation.screen)

    # state transitions
    def _enter_screen(self, screen: Screen) -> None:
        self.screen_ui = None
        if screen is Screen.SPLASH:
            self.splash = Splash(self.navigation)
        elif screen is Screen.TITLE:
            self.navigation.set_menu(Menu.MAIN)
        elif screen is Screen.LOADING:
            self.screen_ui = build_loading_screen()
        elif screen is Screen.GAMEPLAY:
            self.world.sequence = list(self.loader.resources.get("sequence", []))
            self.world.start()
            self.pause.cursor_visible = False
        elif screen is Screen.GAME_OVER:
            reason = self.world.game_over_reason
            if reason is not None:
                self.screen_ui = build_game_over(self.navigation, reason)

    def _exit_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash = None
        elif screen is Screen.TITLE:
            self.navigation.set_menu(Menu.NONE)
        elif screen is Screen.GAMEPLAY:
            self.pause.on_exit_gameplay()
            self.pause.cursor_visible = True
            for entry in list(self.mixer.playing):
                if entry.sound.looping:
                    self.mixer.stop(entry)

    def _enter_menu(self, menu: Menu) -> None:
        nav = self.navigation
        self.menu_ui = {
            Menu.MAIN: lambda: build_main_menu(nav, self.loader, self.web),
            Menu.CREDITS: lambda: build_credits_menu(nav),
            Menu.SETTINGS: lambda: build_settings_menu(nav, self.volume),
            Menu.PAUSE: lambda: build_pause_menu(nav),
            Menu.NONE: lambda: None,
        }[menu]()
        if menu is Menu.CREDITS:
            self.mixer.play(CREDITS_MUSIC)
        if menu is Menu.NONE and nav.screen is Screen.GAMEPLAY:
            nav.set_paused(False)

    def _exit_menu(self, menu: Menu) -> None:
        if menu is Menu.CREDITS:
            for entry in list(self.mixer.playing):
                if entry.sound == CREDITS_MUSIC:
                    self.mixer.stop(entry)

    def _handle_transition(self, transition: Transition) -> None:
        if isinstance(transition.new, Screen):
            self._exit_screen(transition.old)
            self._enter_screen(transition.new)
        elif isinstance(transition.new, Menu):
            self._exit_menu(transition.old)
            self._enter_menu(transition.new)
        elif transition.new is False:
            self.pause.overlay = False

    def _apply_transitions(self) -> None:
        for _ in range(_MAX_TRANSITION_ROUNDS):
            if not self.navigation.pending:
                return
            for transition in self.navigation.apply():
                self._handle_transition(transition)

    # frame update
    def step(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds and apply state changes."""
        screen = self.navigation.screen
        if screen is Screen.SPLASH and self.splash is not None:
            self.splash.update(dt)
        elif screen is Screen.LOADING:
            self.loader.poll()
            if self.loader.is_all_done():
                self.navigation.set_screen(Screen.GAMEPLAY)
        elif screen is Screen.GAMEPLAY and not self.navigation.paused:
            self.world.update(dt, self.cursor)
        self.mixer.apply_global_volume()
        self._apply_transitions()

    # input
    def _to_world(self, pos: tuple[float, float]) -> tuple[float, float]:
        width, height = self.window_size
        return (pos[0] - width / 2, height / 2 - pos[1])

    def _active_ui(self) -> Optional[Node]:
        return self.menu_ui or self.screen_ui

    def _layout(self, root: Node) -> list[Button]:
        buttons = [n for n in root.walk() if isinstance(n, Button)]
        width, height = self.window_size
        y = height / 2
        for b in buttons:
            b.position = (width / 2 - b.size[0] / 2, y)
            y += b.size[1] + 20.0
        return buttons

    def _handle_key(self, key: str) -> None:
        nav = self.navigation
        if key == TOGGLE_DEBUG_KEY:
            self.debug = not self.debug
            return
        if key == "escape":
            if nav.screen is Screen.SPLASH and self.splash is not None:
                self.splash.skip()
            elif nav.menu is Menu.PAUSE:
                nav.set_menu(Menu.NONE)
            elif nav.menu is Menu.CREDITS:
                nav.set_menu(Menu.MAIN)
            elif nav.menu is Menu.SETTINGS:
                nav.set_menu(settings_back_target(nav.screen))
        self.pause.handle_key(key)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self._handle_key(name)
        elif event.type == pygame.MOUSEMOTION:
            self.cursor = self._to_world(event.pos)
            if event.buttons and event.buttons[0] and self._active_ui() is None:
                self.world.drag(self.cursor, event.rel)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            ui = self._active_ui()
            if ui is not None:
                for b in self._layout(ui):
                    if b.contains(event.pos):
                        if b.click() is AppExit.SUCCESS:
                            self.running = False
                        break
            elif self.navigation.screen is Screen.GAMEPLAY and not self.navigation.paused:
                self.world.click(self._to_world(event.pos))

    # rendering
    def _to_screen(self, point: tuple[float, float]) -> tuple[int, int]:
        width, height = self.window_size
        return (int(point[0] + width / 2), int(height / 2 - point[1]))

    def _draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        def rgb(c):
            return tuple(int(max(0.0, min(1.0, v)) * 255) for v in c[:3])

        if self.navigation.screen is Screen.SPLASH:
            surface.fill(rgb(SPLASH_BACKGROUND_COLOR))
        else:
            surface.fill((255, 255, 255))
        world = self.world
        if self.navigation.screen is Screen.GAMEPLAY:
            if world.buttons.button is not None:
                b = world.buttons.button
                pygame.draw.circle(surface, (0, 255, 0), self._to_screen(b.position), int(96 * b.scale))
            if world.buttons.fix_button is not None:
                f = world.buttons.fix_button
                pygame.draw.circle(surface, (255, 255, 0), self._to_screen(f.position), int(40 * f.scale))
            for t in world.triangles:
                pygame.draw.circle(surface, (0, 0, 255), self._to_screen(t.position), 24)
            for s in world.squares:
                c = self._to_screen(s.position)
                pygame.draw.rect(surface, (128, 0, 255), pygame.Rect(c[0] - 128, c[1] - 128, 256, 256))
            if world.pentagon is not None:
                pygame.draw.circle(surface, (255, 128, 0), self._to_screen(world.pentagon.position), 32)
            for p in world.particles:
                x, y, _ = p.location
                pygame.draw.circle(surface, rgb(p.color), self._to_screen((x, y)), int(p.scale), 2)
            pygame.draw.circle(
                surface, (255, 0, 0), self._to_screen(world.player.position), int(16 * world.player.scale)
            )
            text = font.render(world.guide_text, True, (102, 102, 102))
            surface.blit(text, (self.window_size[0] / 2 - text.get_width() / 2, self.window_size[1] * 0.2))
            if world.clock is not None:
                surface.blit(font.render(world.clock.text, True, (255, 0, 255)), (10, 10))
        ui = self._active_ui()
        if ui is not None:
            buttons = self._layout(ui)
            y = 40
            for node in ui.walk():
                if node.text and not isinstance(node, Button):
                    surface.blit(font.render(node.text, True, (40, 40, 40)), (40, y))
                    y += 40
            for b in buttons:
                pygame.draw.rect(surface, rgb(b.background), pygame.Rect(*b.position, *b.size))
                surface.blit(font.render(b.text or "", True, (236, 236, 236)), b.position)

    def run(self) -> None:
        """Open the window and run until the player quits."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((int(self.window_size[0]), int(self.window_size[1])))
            pygame.display.set_caption(TITLE)
            font = pygame.font.Font(None, 40)
            clock = pygame.time.Clock()
            while self.running:
                dt = clock.tick(60) / 1000.0
                for event in pygame.event.get():
                    self.handle_event(event)
                self.step(dt)
                pygame.mouse.set_visible(self.pause.cursor_visible)
                self._draw(surface, font)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--assets", default="assets", help="asset directory")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args(argv)
    App(assets=args.assets, window_size=(float(args.width), float(args.height))).run()
    return 0