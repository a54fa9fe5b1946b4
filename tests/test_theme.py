import pytest

from clickbutton.audio import sound_effect
from clickbutton.theme import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    CLICK_SOUND,
    HEADER_TEXT,
    HOVER_SOUND,
    LABEL_TEXT,
    Button,
    Interaction,
    InteractionPalette,
    Node,
    button,
    button_small,
    header,
    label,
    ui_root,
)


def test_palette_maps_each_interaction():
    palette = InteractionPalette(none=(1.0, 0.0, 0.0), hovered=(0.0, 1.0, 0.0), pressed=(0.0, 0.0, 1.0))
    assert palette.color_for(Interaction.NONE) == (1.0, 0.0, 0.0)
    assert palette.color_for(Interaction.HOVERED) == (0.0, 1.0, 0.0)
    assert palette.color_for(Interaction.PRESSED) == (0.0, 0.0, 1.0)


def test_button_uses_theme_palette():
    b = button("Go", lambda: None)
    assert b.background == BUTTON_BACKGROUND
    assert b.palette.color_for(Interaction.HOVERED) == BUTTON_HOVERED_BACKGROUND
    assert b.palette.color_for(Interaction.PRESSED) == BUTTON_PRESSED_BACKGROUND


def test_interact_changes_background():
    b = button("Go", lambda: None)
    b.interact(Interaction.PRESSED)
    assert b.interaction is Interaction.PRESSED
    assert b.background == BUTTON_PRESSED_BACKGROUND
    b.interact(Interaction.NONE)
    assert b.background == BUTTON_BACKGROUND


def test_header_and_label():
    h = header("Settings")
    assert (h.name, h.text, h.font_size, h.color) == ("Header", "Settings", 40.0, HEADER_TEXT)
    lab = label("Loading...")
    assert (lab.name, lab.text, lab.font_size, lab.color) == ("Label", "Loading...", 24.0, LABEL_TEXT)


def test_button_sizes():
    big = button("Play", lambda: None)
    small = button_small("+", lambda: None)
    assert big.size == (380.0, 80.0)
    assert big.rounded is True
    assert small.size == (30.0, 30.0)
    assert small.rounded is False
    assert big.color == BUTTON_TEXT
    assert big.font_size == 40.0


def test_click_runs_action():
    calls = []

    def action():
        calls.append("clicked")
        return "result"

    b = button("Play", action)
    assert b.click() == "result"
    assert calls == ["clicked"]


def test_click_without_action_returns_none():
    assert Button(text="idle").click() is None


@pytest.mark.parametrize(
    "point, inside",
    [((10.0, 20.0), True), ((40.0, 50.0), True), ((25.0, 35.0), True), ((41.0, 20.0), False), ((10.0, 19.0), False)],
)
def test_contains(point, inside):
    b = button_small("-", lambda: None)
    b.position = (10.0, 20.0)
    assert b.contains(point) is inside


def test_walk_is_depth_first():
    root = ui_root("Root", [header("A"), Node(name="Box", children=[label("B")]), label("C")])
    assert [n.name for n in root.walk()] == ["Root", "Header", "Box", "Label", "Label"]
    assert [n.text for n in root.walk() if n.text] == ["A", "B", "C"]


def test_ui_root_lets_clicks_through():
    root = ui_root("Menu", [])
    assert root.name == "Menu"
    assert root.style["pickable"] is False
    assert root.style["row_gap"] == 20.0
    assert root.children == []


@pytest.mark.parametrize(
    "sound, path",
    [
        (HOVER_SOUND, "audio/sound_effects/ui/button_hover.ogg"),
        (CLICK_SOUND, "audio/sound_effects/ui/button_click.ogg"),
    ],
)
def test_interaction_sounds_are_full_volume_effects(sound, path):
    expected = sound_effect(path, 1.0)
    assert sound.path == expected.path == path
    assert sound.volume == expected.volume == 1.0
    assert sound.looping is expected.looping is False