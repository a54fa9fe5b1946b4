import pytest

from clickbutton.sequencer import (
    Action,
    ChangeText,
    GameMechanic,
    SequenceError,
    Sequencer,
    SpawnMechanic,
    load_sequence,
    parse_mechanic,
    parse_sequence,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Button Time", GameMechanic.BUTTON_TIME),
        ("button time", GameMechanic.BUTTON_TIME),
        ("VICTORY", GameMechanic.VICTORY),
        ("None", GameMechanic.NONE),
        ("pentagon", GameMechanic.PENTAGON),
    ],
)
def test_parse_mechanic(text, expected):
    assert parse_mechanic(text) is expected


@pytest.mark.parametrize("text", ["ButtonTime", "Circle", "", " Button"])
def test_parse_mechanic_rejects_unknown(text):
    with pytest.raises(SequenceError):
        parse_mechanic(text)


def test_every_mechanic_round_trips_through_its_name():
    for mechanic in GameMechanic:
        assert parse_mechanic(mechanic.value) is mechanic


def test_parse_sequence_skips_comments_and_blanks():
    text = """
    # intro
    1.5 | T | You're the red dot.

      3 | M | button
    0 | T |
    """
    assert parse_sequence(text) == [
        Action(1.5, ChangeText("You're the red dot.")),
        Action(3.0, SpawnMechanic(GameMechanic.BUTTON)),
        Action(0.0, ChangeText("")),
    ]


@pytest.mark.parametrize(
    "line",
    [
        "1 | T",
        "1 | T | a | b",
        "x | T | hello",
        "1_0 | T | hello",
        "1 | X | hello",
        "1 | M | nothing",
    ],
)
def test_parse_sequence_errors(line):
    with pytest.raises(SequenceError):
        parse_sequence(line)


def test_load_sequence_reads_file(tmp_path):
    path = tmp_path / "sequence.seq"
    path.write_text("2 | M | Triangles\n", encoding="utf-8")
    assert load_sequence(path) == [Action(2.0, SpawnMechanic(GameMechanic.TRIANGLES))]


def test_load_sequence_missing_file(tmp_path):
    with pytest.raises(SequenceError, match="Could not load asset"):
        load_sequence(tmp_path / "missing.seq")


def test_sequencer_fires_actions_in_order():
    first = Action(1.0, ChangeText("a"))
    second = Action(0.5, SpawnMechanic(GameMechanic.TIMER))
    seq = Sequencer([first, second])
    assert seq.update(0.5) is None
    assert seq.update(0.5) is first
    assert seq.update(0.5) is second
    assert seq.finished
    assert seq.update(10.0) is None


def test_sequencer_fires_one_action_per_update_and_carries_time():
    first = Action(1.0, ChangeText("a"))
    second = Action(0.5, ChangeText("b"))
    seq = Sequencer([first, second])
    assert seq.update(10.0) is first
    assert seq.action_index == 1
    assert seq.update(0.0) is second


def test_empty_sequencer_is_finished():
    seq = Sequencer()
    assert seq.finished
    assert seq.update(1.0) is None