"""THE BUTTON, its time bar, the durability bar and the fix button."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .bar import Bar, BarBehavior, BarEvent, BarLayout
from .effects import CircleBurst, PulseEffect
from .player import CLICK_PARTICLES_Z
from .sequencer import GameMechanic

Point = tuple[float, float]

THE_BUTTON_Z = 50.0
THE_BUTTON_SIZE = 96.0
THE_BUTTON_COLOR = (0.0, 1.0, 0.0)
THE_BUTTON_TEXT = "Click\nme!"

TEXT_SIZE = 32.0
TEXT_COLOR = (0.0, 0.0, 0.0)

TIME_BAR_DURATION = 8.0

MAX_DURABILITY = 6.0
CLICK_DAMAGE = 1.0
BAR_COLOR = (1.0, 1.0, 0.0)
DURABILITY_BAR_SIZE = (448.0, 32.0)

FIX_BUTTON_SIZE = 40.0
FIX_BUTTON_TEXT = "FIX"

CLICK_SOUND = "audio/sound_effects/button_click.ogg"
CLICK_SOUND_VOLUME = 0.4


def _inside(center: Point, radius: float, point: Point) -> bool:
    return math.hypot(point[0] - center[0], point[1] - center[1]) <= radius


@dataclass
class TheButton:
    """The big green button in the middle of the screen."""

    position: Point = (0.0, 0.0)
    scale: float = 1.0
    pulse: PulseEffect = field(default_factory=PulseEffect)
    z: float = THE_BUTTON_Z

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies on the (scaled) button."""
        return _inside(self.position, THE_BUTTON_SIZE * self.scale, point)


def _fix_pulse() -> PulseEffect:
    return PulseEffect(min=0.98, max=1.02, speed=0.1)


@dataclass
class FixButton:
    """The small yellow button that restores durability."""

    position: Point = (0.0, 0.0)
    scale: float = 1.0
    pulse: PulseEffect = field(default_factory=_fix_pulse)
    z: float = THE_BUTTON_Z

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies on the (scaled) fix button."""
        return _inside(self.position, FIX_BUTTON_SIZE * self.scale, point)


@dataclass
class ButtonMechanics:
    """State of the button-related mechanics and their interplay."""

    button: Optional[TheButton] = None
    time_bar: Optional[Bar] = None
    time_bar_position: Point = (0.0, -THE_BUTTON_SIZE * 1.5)
    durability_bar: Optional[Bar] = None
    durability_bar_position: Point = (0.0, 0.0)
    fix_button: Optional[FixButton] = None

    def spawn_button(self) -> TheButton:
        """Place THE BUTTON at the centre of the world."""
        self.button = TheButton()
        return self.button

    def spawn_time_bar(self) -> Bar:
        """Add the bar that empties unless the button keeps being clicked."""
        self.time_bar = Bar(
            max=TIME_BAR_DURATION,
            current=TIME_BAR_DURATION,
            layout=BarLayout(color=THE_BUTTON_COLOR),
            behavior=BarBehavior(trigger_on_empty=True),
        )
        self.time_bar_position = (0.0, -THE_BUTTON_SIZE * 1.5)
        return self.time_bar

    def spawn_durability_bar(self, window_size: Point) -> Bar:
        """Add the durability bar near the bottom left of the window."""
        width, height = window_size
        self.durability_bar = Bar(
            max=MAX_DURABILITY,
            current=MAX_DURABILITY,
            layout=BarLayout(size=DURABILITY_BAR_SIZE, color=BAR_COLOR),
            behavior=BarBehavior(trigger_on_empty=True),
        )
        self.durability_bar_position = (width * -0.24, height * -0.42)
        return self.durability_bar

    def spawn_fix_button(self, window_size: Point) -> FixButton:
        """Add the fix button to the left of the durability bar."""
        width, height = window_size
        self.fix_button = FixButton(position=(width * -0.455, height * -0.42))
        return self.fix_button

    def click_button(self) -> CircleBurst:
        """Handle a click on THE BUTTON and return the rings to show."""
        if self.button is None:
            raise LookupError("the button has not been spawned")
        if self.durability_bar is not None:
            self.durability_bar.current -= CLICK_DAMAGE
        if self.time_bar is not None:
            self.time_bar.fill()
        x, y = self.button.position
        return CircleBurst(
            location=(x, y, CLICK_PARTICLES_Z),
            start_size=THE_BUTTON_SIZE * 1.1,
            end_size=THE_BUTTON_SIZE * 1.4,
            start_color=(*THE_BUTTON_COLOR, 1.0),
            thickness=4.0,
            spacing=8.0,
        )

    def click_fix(self) -> CircleBurst:
        """Refill durability and return the rings to show."""
        if self.fix_button is None:
            raise LookupError("the fix button has not been spawned")
        if self.durability_bar is None:
            raise LookupError("the durability bar has not been spawned")
        self.durability_bar.fill()
        x, y = self.fix_button.position
        return CircleBurst(
            location=(x, y, CLICK_PARTICLES_Z),
            start_size=FIX_BUTTON_SIZE * 1.1,
            end_size=FIX_BUTTON_SIZE * 1.4,
            start_color=(*BAR_COLOR, 1.0),
            thickness=2.0,
            spacing=4.0,
        )

    def update(self, dt: float) -> list[GameMechanic]:
        """Advance by ``dt`` seconds and return the reasons the game is lost, if any."""
        if self.button is not None:
            self.button.scale = self.button.pulse.step(self.button.scale, dt)
        if self.fix_button is not None:
            self.fix_button.scale = self.fix_button.pulse.step(self.fix_button.scale, dt)

        reasons: list[GameMechanic] = []
        if self.time_bar is not None:
            self.time_bar.current -= dt
            if BarEvent.EMPTY in self.time_bar.settle():
                reasons.append(GameMechanic.BUTTON_TIME)
        if self.durability_bar is not None:
            if BarEvent.EMPTY in self.durability_bar.settle():
                reasons.append(GameMechanic.DURABILITY)
        return reasons