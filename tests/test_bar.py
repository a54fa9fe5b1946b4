import math

import pytest

from clickbutton.bar import Bar, BarBehavior, BarEvent, BarLayout


def test_layout_defaults_from_source():
    layout = BarLayout()
    assert layout.size == (128.0, 16.0)
    assert layout.color == (1.0, 0.0, 0.0)
    assert layout.border_color == (0.0, 0.0, 0.0)


def test_settle_clamps_above_max_and_reports_full():
    bar = Bar(min=0.0, max=6.0, current=10.0, behavior=BarBehavior(trigger_on_full=True))
    assert bar.settle() == [BarEvent.FULL]
    assert bar.current == bar.max


def test_settle_clamps_below_min_and_reports_empty():
    bar = Bar(min=0.0, max=8.0, current=8.0, behavior=BarBehavior(trigger_on_empty=True))
    assert bar.settle() == []
    bar.current -= 20.0
    assert bar.settle() == [BarEvent.EMPTY]
    assert bar.current == bar.min


def test_unchanged_bar_raises_nothing_again():
    bar = Bar(min=0.0, max=6.0, current=0.0, behavior=BarBehavior(trigger_on_empty=True))
    assert bar.settle() == [BarEvent.EMPTY]
    assert bar.changed is False
    assert bar.settle() == []


def test_no_events_without_behavior():
    bar = Bar(min=0.0, max=6.0, current=-3.0)
    assert bar.settle() == []
    assert bar.current == bar.min


def test_equal_bounds_raise_both_events_in_order():
    behavior = BarBehavior(trigger_on_full=True, trigger_on_empty=True)
    bar = Bar(min=2.0, max=2.0, current=2.0, behavior=behavior)
    assert bar.settle() == [BarEvent.EMPTY, BarEvent.FULL]
    assert math.isnan(bar.progress())


def test_fill_marks_changed_and_sets_max():
    bar = Bar(min=0.0, max=8.0, current=3.0)
    bar.settle()
    bar.fill()
    assert bar.changed is True
    assert bar.current == bar.max
    assert bar.progress() == 1.0


def test_progress_bounds_and_monotonic():
    bar = Bar(min=1.0, max=9.0, current=1.0)
    assert bar.progress() == 0.0
    values = []
    for current in (1.0, 3.0, 5.0, 9.0):
        bar.current = current
        values.append(bar.progress())
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_min_above_max_is_an_error():
    bar = Bar(min=5.0, max=1.0, current=3.0)
    with pytest.raises(ValueError):
        bar.settle()