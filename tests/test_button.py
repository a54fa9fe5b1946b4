import pytest

from clickbutton.button import (
    CLICK_DAMAGE,
    FIX_BUTTON_SIZE,
    MAX_DURABILITY,
    THE_BUTTON_SIZE,
    THE_BUTTON_Z,
    TIME_BAR_DURATION,
    ButtonMechanics,
    FixButton,
    TheButton,
)
from clickbutton.player import CLICK_PARTICLES_Z
from clickbutton.sequencer import GameMechanic

WINDOW = (800.0, 600.0)


def test_button_spawns_at_centre():
    mechanics = ButtonMechanics()
    button = mechanics.spawn_button()
    assert button.position == (0.0, 0.0)
    assert button.z == THE_BUTTON_Z
    assert mechanics.button is button


def test_button_contains():
    button = TheButton()
    assert button.contains((0.0, 0.0))
    assert button.contains((THE_BUTTON_SIZE * 0.9, 0.0))
    assert not button.contains((THE_BUTTON_SIZE * 2, 0.0))


def test_fix_button_contains():
    fix = FixButton(position=(100.0, 100.0))
    assert fix.contains((100.0, 100.0))
    assert not fix.contains((100.0 + FIX_BUTTON_SIZE * 2, 100.0))


def test_click_without_button_raises():
    with pytest.raises(LookupError):
        ButtonMechanics().click_button()


def test_click_fix_without_fix_button_raises():
    mechanics = ButtonMechanics()
    mechanics.spawn_durability_bar(WINDOW)
    with pytest.raises(LookupError):
        mechanics.click_fix()


def test_time_bar_runs_out():
    mechanics = ButtonMechanics()
    mechanics.spawn_button()
    mechanics.spawn_time_bar()
    assert mechanics.update(TIME_BAR_DURATION / 2) == []
    assert mechanics.update(TIME_BAR_DURATION) == [GameMechanic.BUTTON_TIME]
    assert mechanics.time_bar.current == mechanics.time_bar.min


def test_click_refills_time_bar():
    mechanics = ButtonMechanics()
    mechanics.spawn_button()
    bar = mechanics.spawn_time_bar()
    mechanics.update(TIME_BAR_DURATION / 2)
    mechanics.click_button()
    assert bar.current == TIME_BAR_DURATION
    assert mechanics.update(TIME_BAR_DURATION / 2) == []


def test_durability_runs_out_after_clicks():
    mechanics = ButtonMechanics()
    mechanics.spawn_button()
    bar = mechanics.spawn_durability_bar(WINDOW)
    clicks = int(MAX_DURABILITY / CLICK_DAMAGE)
    for _ in range(clicks - 1):
        mechanics.click_button()
    assert mechanics.update(0.0) == []
    assert bar.current == MAX_DURABILITY - CLICK_DAMAGE * (clicks - 1)
    mechanics.click_button()
    assert mechanics.update(0.0) == [GameMechanic.DURABILITY]


def test_fix_restores_durability():
    mechanics = ButtonMechanics()
    mechanics.spawn_button()
    bar = mechanics.spawn_durability_bar(WINDOW)
    fix = mechanics.spawn_fix_button(WINDOW)
    for _ in range(3):
        mechanics.click_button()
    burst = mechanics.click_fix()
    assert bar.current == MAX_DURABILITY
    assert burst.location == (fix.position[0], fix.position[1], CLICK_PARTICLES_Z)
    assert FIX_BUTTON_SIZE < burst.start_size < burst.end_size
    assert mechanics.update(0.0) == []


def test_click_burst_surrounds_button():
    mechanics = ButtonMechanics()
    mechanics.spawn_button()
    burst = mechanics.click_button()
    assert burst.location == (0.0, 0.0, CLICK_PARTICLES_Z)
    assert THE_BUTTON_SIZE < burst.start_size < burst.end_size
    assert burst.start_color[3] == 1.0


def test_bars_placed_below_centre():
    mechanics = ButtonMechanics()
    mechanics.spawn_durability_bar(WINDOW)
    mechanics.spawn_fix_button(WINDOW)
    mechanics.spawn_time_bar()
    dx, dy = mechanics.durability_bar_position
    fx, fy = mechanics.fix_button.position
    assert -WINDOW[0] / 2 < fx < dx < 0
    assert -WINDOW[1] / 2 < dy < 0
    assert fy == dy
    assert mechanics.time_bar_position[1] < -THE_BUTTON_SIZE


def test_pulse_stays_in_range():
    mechanics = ButtonMechanics()
    button = mechanics.spawn_button()
    for _ in range(200):
        mechanics.update(0.05)
        assert button.pulse.min <= button.scale <= button.pulse.max