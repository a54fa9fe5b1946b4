"""Main, credits, settings and pause menus built from theme widgets."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

from .audio import GlobalVolume, ResourceLoader, music
from .states import Menu, Navigation, Screen
from .theme import Button, Node, button, button_small, header, label, ui_root

MENU_Z_INDEX = 2
GRID_COLUMN_WIDTH = 400.0
GRID_ROW_GAP = 10.0
GRID_COLUMN_GAP = 30.0

CREDITS_MUSIC = music("audio/music/Monkeys Spinning Monkeys.ogg", 1.0)

CREATED_BY: list[tuple[str, str]] = [("Developer", "Code & Gameplay Soundtrack")]
ASSETS: list[tuple[str, str]] = [
    ("Button SFX", "CC0"),
    ("Credits Music", "CC BY 3.0"),
    ("Supper Vanilla font", "Free for personal use & commercial use"),
]


class AppExit(enum.Enum):
    """Returned by a button action that asks the application to quit."""

    SUCCESS = 0


def _exit() -> AppExit:
    return AppExit.SUCCESS


def _grid_style() -> dict:
    return {
        "display": "grid",
        "row_gap": GRID_ROW_GAP,
        "column_gap": GRID_COLUMN_GAP,
        "columns": (GRID_COLUMN_WIDTH, GRID_COLUMN_WIDTH),
    }


def _menu_root(name: str, children: Iterable[Node]) -> Node:
    root = ui_root(name, children)
    root.style["z_index"] = MENU_Z_INDEX
    return root


def credits_grid(rows: Iterable[Sequence[str]]) -> Node:
    """Two-column grid: left cells right-aligned, right cells left-aligned."""
    cells: list[str] = []
    for row in rows:
        if len(row) != 2:
            raise ValueError(f"credits row must have 2 cells, got {len(row)}")
        cells.extend(row)
    children = []
    for i, text in enumerate(cells):
        cell = label(text)
        cell.style["justify_self"] = "end" if i % 2 == 0 else "start"
        children.append(cell)
    return Node(name="Grid", children=children, style=_grid_style())


def build_credits_menu(navigation: Navigation) -> Node:
    """The credits menu; Back returns to the main menu."""
    return _menu_root(
        "Credits Menu",
        [
            header("Created by"),
            credits_grid(CREATED_BY),
            header("Assets"),
            credits_grid(ASSETS),
            button("Back", lambda: navigation.set_menu(Menu.MAIN)),
        ],
    )


def build_main_menu(
    navigation: Navigation, loader: ResourceLoader, web: bool = False
) -> Node:
    """The title screen menu; there is no Exit button on the web."""

    def play() -> None:
        navigation.set_screen(Screen.GAMEPLAY if loader.is_all_done() else Screen.LOADING)

    buttons: list[Button] = [
        button("Play", play),
        button("Settings", lambda: navigation.set_menu(Menu.SETTINGS)),
        button("Credits", lambda: navigation.set_menu(Menu.CREDITS)),
    ]
    if not web:
        buttons.append(button("Exit", _exit))
    return _menu_root("Main Menu", buttons)


def build_pause_menu(navigation: Navigation) -> Node:
    """The in-game pause menu."""
    return _menu_root(
        "Pause Menu",
        [
            header("Game paused"),
            button("Continue", lambda: navigation.set_menu(Menu.NONE)),
            button("Settings", lambda: navigation.set_menu(Menu.SETTINGS)),
            button("Restart", lambda: navigation.set_screen(Screen.LOADING)),
            button("Exit", _exit),
        ],
    )


def settings_back_target(screen: Screen) -> Menu:
    """Where leaving settings goes: the main menu on the title screen, else pause."""
    return Menu.MAIN if screen is Screen.TITLE else Menu.PAUSE


def volume_label(volume: GlobalVolume) -> str:
    """The volume as a percentage, right-aligned in three characters."""
    percent = 100.0 * volume.volume
    return f"{percent:3.0f}%"


def build_settings_menu(navigation: Navigation, volume: GlobalVolume) -> Node:
    """The settings menu with master volume controls."""
    current = label(volume_label(volume))

    def lower() -> float:
        value = volume.lower()
        current.text = volume_label(volume)
        return value

    def raise_() -> float:
        value = volume.raise_()
        current.text = volume_label(volume)
        return value

    master = label("Master Volume")
    master.style["justify_self"] = "end"
    widget = Node(
        name="Global Volume Widget",
        style={"justify_self": "start"},
        children=[
            button_small("-", lower),
            Node(
                name="Current Volume",
                style={"padding_horizontal": 10.0, "justify_content": "center"},
                children=[current],
            ),
            button_small("+", raise_),
        ],
    )
    grid = Node(name="Settings Grid", children=[master, widget], style=_grid_style())
    return _menu_root(
        "Settings Menu",
        [
            header("Settings"),
            grid,
            button(
                "Back",
                lambda: navigation.set_menu(settings_back_target(navigation.screen)),
            ),
        ],
    )