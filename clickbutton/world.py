"""The gameplay world: guide text, sequencer and all active mechanics."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from .audio import AudioMixer, music, sound_effect
from .button import CLICK_SOUND, CLICK_SOUND_VOLUME, ButtonMechanics
from .clock import GameClock
from .effects import CircleBurst, CircleParticle, spawn_circles
from .enemies import (
    BREAK_SOUND,
    BREAK_SOUND_VOLUME,
    SQUARE_SIZE,
    Fragment,
    Pentagon,
    Square,
    SquareSpawner,
    Triangle,
    TriangleSpawner,
    shatter,
    spawn_pentagon,
)
from .player import CLICK_SOUND as BACKGROUND_CLICK_SOUND
from .player import CLICK_SOUND_VOLUME as BACKGROUND_CLICK_VOLUME
from .player import Player, click_effect
from .sequencer import Action, ChangeText, GameMechanic, Sequencer, SpawnMechanic
from .states import Navigation, Screen

Point = tuple[float, float]

INITIAL_GUIDE_TEXT = "You're the red dot. Move with your mouse."
GUIDE_FONT_SIZE = 40.0
GUIDE_COLOR = (0.4, 0.4, 0.4)

SOUNDTRACK = music("audio/music/soundtrack.ogg", 0.8)
NEW_TEXT_SOUND = sound_effect("audio/sound_effects/new_text.ogg", 0.2)
LOSE_SOUND = sound_effect("audio/sound_effects/lose.ogg", 0.4)
VICTORY_SOUND = sound_effect("audio/sound_effects/victory.ogg", 0.3)


def _square_contains(square: Square, point: Point) -> bool:
    dx = point[0] - square.position[0]
    dy = point[1] - square.position[1]
    c, s = math.cos(square.rotation), math.sin(square.rotation)
    lx, ly = dx * c + dy * s, -dx * s + dy * c
    half = SQUARE_SIZE / 2
    return abs(lx) <= half and abs(ly) <= half


@dataclass
class GameWorld:
    """Everything that lives on the gameplay screen."""

    navigation: Navigation = field(default_factory=Navigation)
    mixer: AudioMixer = field(default_factory=AudioMixer)
    sequence: list[Action] = field(default_factory=list)
    window_size: Point = (1280.0, 720.0)
    rng: random.Random = field(default_factory=random.Random)
    guide_text: str = ""
    mechanic: GameMechanic = GameMechanic.NONE
    game_over_reason: Optional[GameMechanic] = None
    sequencer: Sequencer = field(default_factory=Sequencer)
    player: Player = field(default_factory=Player)
    buttons: ButtonMechanics = field(default_factory=ButtonMechanics)
    clock: Optional[GameClock] = None
    pentagon: Optional[Pentagon] = None
    square_spawner: Optional[SquareSpawner] = None
    squares: list[Square] = field(default_factory=list)
    triangle_spawner: Optional[TriangleSpawner] = None
    triangles: list[Triangle] = field(default_factory=list)
    fragments: list[Fragment] = field(default_factory=list)
    particles: list[CircleParticle] = field(default_factory=list)

    def start(self) -> None:
        """Reset the world for a fresh run and start the soundtrack."""
        for entry in list(self.mixer.playing):
            self.mixer.stop(entry)
        self.guide_text = INITIAL_GUIDE_TEXT
        self.mechanic = GameMechanic.NONE
        self.game_over_reason = None
        self.sequencer = Sequencer(list(self.sequence))
        self.player = Player()
        self.buttons = ButtonMechanics()
        self.clock = None
        self.pentagon = None
        self.square_spawner = None
        self.squares = []
        self.triangle_spawner = None
        self.triangles = []
        self.fragments = []
        self.particles = []
        self.mixer.play(SOUNDTRACK)

    def set_mechanic(self, mechanic: GameMechanic) -> None:
        """Switch on ``mechanic``."""
        self.mechanic = mechanic
        if mechanic is GameMechanic.BUTTON:
            self.buttons.spawn_button()
        elif mechanic is GameMechanic.BUTTON_TIME:
            self.buttons.spawn_time_bar()
        elif mechanic is GameMechanic.TIMER:
            self.clock = GameClock()
        elif mechanic is GameMechanic.DURABILITY:
            self.buttons.spawn_durability_bar(self.window_size)
        elif mechanic is GameMechanic.FIX:
            self.buttons.spawn_fix_button(self.window_size)
        elif mechanic is GameMechanic.TRIANGLES:
            self.triangle_spawner = TriangleSpawner()
        elif mechanic is GameMechanic.SQUARE:
            self.square_spawner = SquareSpawner()
        elif mechanic is GameMechanic.PENTAGON:
            self.pentagon = spawn_pentagon(self.rng)
        elif mechanic is GameMechanic.VICTORY:
            self.mixer.play(VICTORY_SOUND)
            self.game_over(GameMechanic.VICTORY)

    def _run_action(self, action: Action) -> None:
        kind = action.kind
        if isinstance(kind, ChangeText):
            self.guide_text = kind.text
            if kind.text:
                self.mixer.play(NEW_TEXT_SOUND)
        elif isinstance(kind, SpawnMechanic):
            self.set_mechanic(kind.mechanic)

    def update(self, dt: float, cursor: Optional[Point]) -> None:
        """Advance the world by ``dt`` seconds with the cursor at ``cursor``."""
        self.player.move_to(cursor)
        self.player.update(dt)

        action = self.sequencer.update(dt)
        if action is not None:
            self._run_action(action)

        for reason in self.buttons.update(dt):
            self.game_over(reason)

        if self.clock is not None:
            self.clock.tick(dt)

        if self.pentagon is not None and self.pentagon.update(self.player.position, dt):
            self.game_over(GameMechanic.PENTAGON)

        button = self.buttons.button
        if self.square_spawner is not None:
            square = self.square_spawner.update(dt, self.window_size[0], self.rng)
            if square is not None:
                self.squares.append(square)
        if button is not None and len(self.squares) == 1:
            square = self.squares[0]
            if square.update(button.position, self.window_size[0], dt):
                self.squares.remove(square)
                if self.square_spawner is not None:
                    self.square_spawner.reset()

        if self.triangle_spawner is not None:
            triangle = self.triangle_spawner.update(dt, self.window_size, self.rng)
            if triangle is not None:
                self.triangles.append(triangle)
        if button is not None:
            for triangle in self.triangles:
                if triangle.update(button.position, dt):
                    self.game_over(GameMechanic.TRIANGLES)
                    break

        self.particles = [p for p in self.particles if p.update(dt)]

    def _burst(self, burst: CircleBurst) -> None:
        self.particles.extend(spawn_circles(burst))

    def click(self, position: Point) -> None:
        """Handle a click at ``position`` in world coordinates."""
        if any(_square_contains(square, position) for square in self.squares):
            return
        for triangle in self.triangles:
            if triangle.contains(position):
                self.player.clicked_on_target = True
                self.triangles.remove(triangle)
                self.fragments.extend(shatter(triangle.position, self.rng))
                self.mixer.play(sound_effect(BREAK_SOUND, BREAK_SOUND_VOLUME))
                return
        button = self.buttons.button
        if button is not None and button.contains(position):
            self.player.clicked_on_target = True
            self.mixer.play(sound_effect(CLICK_SOUND, CLICK_SOUND_VOLUME))
            self._burst(self.buttons.click_button())
            return
        fix = self.buttons.fix_button
        if fix is not None and self.buttons.durability_bar is not None and fix.contains(position):
            self.mixer.play(sound_effect(CLICK_SOUND, CLICK_SOUND_VOLUME))
            self._burst(self.buttons.click_fix())
            return
        self.mixer.play(sound_effect(BACKGROUND_CLICK_SOUND, BACKGROUND_CLICK_VOLUME))
        self._burst(click_effect(position))

    def drag(self, position: Point, distance: Point) -> None:
        """Drag whatever square lies under ``position`` by a screen-space ``distance``."""
        for square in self.squares:
            if _square_contains(square, position):
                square.drag(distance)
                return

    def game_over(self, reason: GameMechanic) -> None:
        """End the run for ``reason`` and go to the game-over screen."""
        if self.game_over_reason is not None:
            return
        if reason is not GameMechanic.VICTORY:
            self.mixer.play(LOSE_SOUND)
        self.game_over_reason = reason
        self.navigation.set_screen(Screen.GAME_OVER)