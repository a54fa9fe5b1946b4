"""Colours, interaction palettes and a small tree of UI widgets."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .audio import sound_effect

Color = tuple[float, float, float]
Point = tuple[float, float]

# #ddd369
LABEL_TEXT: Color = (0.867, 0.827, 0.412)
# #fcfbcc
HEADER_TEXT: Color = (0.988, 0.984, 0.800)
# #ececec
BUTTON_TEXT: Color = (0.925, 0.925, 0.925)
# #4666bf
BUTTON_BACKGROUND: Color = (0.275, 0.400, 0.750)
# #6299d1
BUTTON_HOVERED_BACKGROUND: Color = (0.384, 0.600, 0.820)
# #3d4999
BUTTON_PRESSED_BACKGROUND: Color = (0.239, 0.286, 0.600)

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0

BUTTON_SIZE: Point = (380.0, 80.0)
BUTTON_SMALL_SIZE: Point = (30.0, 30.0)
ROOT_ROW_GAP = 20.0

HOVER_SOUND = sound_effect("audio/sound_effects/ui/button_hover.ogg", 1.0)
CLICK_SOUND = sound_effect("audio/sound_effects/ui/button_click.ogg", 1.0)

Action = Callable[[], Any]


class Interaction(enum.Enum):
    """Pointer state of an interactive widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background colour to show for ``interaction``."""
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


@dataclass(eq=False)
class Node:
    """A UI element with optional text, layout hints and child elements."""

    name: str = ""
    text: Optional[str] = None
    font_size: Optional[float] = None
    color: Optional[Color] = None
    children: list[Node] = field(default_factory=list)
    style: dict[str, Any] = field(default_factory=dict)

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth first, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class Button(Node):
    """A clickable widget whose background follows an interaction palette."""

    action: Optional[Action] = None
    size: Point = BUTTON_SIZE
    rounded: bool = False
    position: Point = (0.0, 0.0)
    palette: InteractionPalette = BUTTON_PALETTE
    interaction: Interaction = Interaction.NONE
    background: Color = BUTTON_BACKGROUND

    def interact(self, interaction: Interaction) -> None:
        """Change the interaction state and update the background."""
        self.interaction = interaction
        self.background = self.palette.color_for(interaction)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the rectangle with ``position`` as its top-left corner."""
        x, y = self.position
        width, height = self.size
        px, py = point
        return x <= px <= x + width and y <= py <= y + height

    def click(self) -> Any:
        """Run the button's action and return what it returns."""
        if self.action is None:
            return None
        return self.action()


def ui_root(name: str, children: Iterable[Node] = ()) -> Node:
    """A full-window column that centres its children and lets clicks through."""
    return Node(
        name=name,
        children=list(children),
        style={
            "position": "absolute",
            "width": "100%",
            "height": "100%",
            "align_items": "center",
            "justify_content": "center",
            "direction": "column",
            "row_gap": ROOT_ROW_GAP,
            "pickable": False,
        },
    )


def header(text: str) -> Node:
    """A large header label."""
    return Node(
        name="Header", text=str(text), font_size=HEADER_FONT_SIZE, color=HEADER_TEXT
    )


def label(text: str) -> Node:
    """A plain text label."""
    return Node(
        name="Label", text=str(text), font_size=LABEL_FONT_SIZE, color=LABEL_TEXT
    )


def _button(text: str, action: Action, size: Point, rounded: bool) -> Button:
    return Button(
        name="Button",
        text=str(text),
        font_size=BUTTON_FONT_SIZE,
        color=BUTTON_TEXT,
        action=action,
        size=size,
        rounded=rounded,
    )


def button(text: str, action: Action) -> Button:
    """A large rounded button."""
    return _button(text, action, BUTTON_SIZE, True)


def button_small(text: str, action: Action) -> Button:
    """A small square button."""
    return _button(text, action, BUTTON_SMALL_SIZE, False)