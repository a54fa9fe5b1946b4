from clickbutton.states import Menu, Navigation, Screen, Transition


def test_defaults_start_on_loading_without_menu():
    nav = Navigation()
    assert nav.screen is Screen.LOADING
    assert nav.menu is Menu.NONE
    assert nav.paused is False
    assert nav.apply() == []


def test_screen_change_is_deferred_until_apply():
    nav = Navigation()
    nav.set_screen(Screen.GAMEPLAY)
    assert nav.screen is Screen.LOADING
    assert nav.pending
    transitions = nav.apply()
    assert transitions == [Transition(Screen.LOADING, Screen.GAMEPLAY)]
    assert nav.screen is Screen.GAMEPLAY
    assert not nav.pending


def test_last_request_wins():
    nav = Navigation()
    nav.set_menu(Menu.MAIN)
    nav.set_menu(Menu.CREDITS)
    assert nav.apply() == [Transition(Menu.NONE, Menu.CREDITS)]
    assert nav.menu is Menu.CREDITS


def test_all_changes_applied_in_order():
    nav = Navigation(screen=Screen.GAMEPLAY)
    nav.set_paused(True)
    nav.set_menu(Menu.PAUSE)
    nav.set_screen(Screen.GAME_OVER)
    transitions = nav.apply()
    assert transitions == [
        Transition(Screen.GAMEPLAY, Screen.GAME_OVER),
        Transition(Menu.NONE, Menu.PAUSE),
        Transition(False, True),
    ]
    assert nav.paused is True
    assert nav.apply() == []


def test_setting_same_state_still_transitions():
    nav = Navigation(screen=Screen.GAMEPLAY)
    nav.set_screen(Screen.GAMEPLAY)
    assert nav.apply() == [Transition(Screen.GAMEPLAY, Screen.GAMEPLAY)]