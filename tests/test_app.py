import random

import pygame
import pytest

from clickbutton.app import App, main
from clickbutton.sequencer import SequenceError
from clickbutton.states import Menu, Screen


@pytest.fixture
def app(tmp_path):
    (tmp_path / "sequence.seq").write_text("1 | T | hi\n", encoding="utf-8")
    return App(assets=tmp_path, rng=random.Random(0))


def test_loading_enters_gameplay(app):
    assert app.navigation.screen is Screen.LOADING
    app.step(0.0)
    assert app.navigation.screen is Screen.GAMEPLAY
    assert len(app.world.sequencer.actions) == 1


def test_missing_sequence_raises(tmp_path):
    app = App(assets=tmp_path)
    with pytest.raises(SequenceError):
        app.step(0.0)


def test_pause_key_opens_and_resumes(app):
    app.step(0.0)
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
    app.step(0.0)
    assert app.navigation.paused and app.navigation.menu is Menu.PAUSE
    assert app.menu_ui is not None
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    app.step(0.0)
    assert app.navigation.menu is Menu.NONE
    assert app.navigation.paused is False


def test_game_over_screen(app):
    app.step(0.0)
    app.world.game_over(app.world.game_over_reason or __import_reason())
    app.step(0.0)
    assert app.navigation.screen is Screen.GAME_OVER
    assert app.screen_ui is not None


def __import_reason():
    from clickbutton.sequencer import GameMechanic

    return GameMechanic.PENTAGON


def test_quit_event(app):
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.running is False


def test_debug_toggle(app):
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKQUOTE))
    assert app.debug is True


def test_main_rejects_bad_args():
    with pytest.raises(SystemExit):
        main(["--width", "wide"])