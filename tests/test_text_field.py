"""Tests for the typed text field"""

import numpy as np
import pytest

from inspectorlib.ui.widgets import text_field


class Recorder:
    """Collects committed values."""

    def __init__(self):
        self.values = []

    def __call__(self, value):
        self.values.append(value)


def test_speed_scenario(surface, state):
    """Test invalid text is kept until it parses"""
    commits = Recorder()

    surface.type_text("12.5abc")
    index = text_field(surface, state, 10.0, commits)

    assert commits.values == [10.0]
    assert state.parse_cache.get(index) == "12.5abc"

    # Next pass shows the pending text, then the user fixes it
    state.begin_pass()
    surface.type_text("12.5")
    index = text_field(surface, state, 10.0, commits)

    assert surface.of_kind("text_box")[-1].text == "12.5abc"
    assert commits.values == [10.0, 12.5]
    assert index not in state.parse_cache


@pytest.mark.parametrize("default, text, expected", [
    (1.0, "-3.1", -3.1),
    (0, "42", 42),
    (np.int16(1), "-300", np.int16(-300)),
    (np.uint32(1), "4000000000", np.uint32(4000000000)),
    (np.float32(1.0), "2.5", np.float32(2.5)),
    ("old", "new name", "new name"),
])
def test_valid_literal_commits_parsed_value(surface, state, default, text, expected):
    """Test valid literals commit and leave no cache entry"""
    commits = Recorder()
    surface.type_text(text)

    index = text_field(surface, state, default, commits)

    assert commits.values == [expected]
    assert type(commits.values[0]) is type(default)
    assert len(state.parse_cache) == 0
    assert index == 0


@pytest.mark.parametrize("default, text", [
    (1.0, "1e"),
    (5, "5.5"),
    (np.uint16(3), "-1"),
    (np.int16(3), "99999"),
])
def test_invalid_literal_keeps_default(surface, state, default, text):
    """Test invalid literals commit the previous value and are cached"""
    commits = Recorder()
    surface.type_text(text)

    index = text_field(surface, state, default, commits)

    assert commits.values == [default]
    assert state.parse_cache.get(index) == text


def test_shows_canonical_text_without_cache(surface, state):
    """Test the value's text form is shown when nothing is pending"""
    text_field(surface, state, 10.0, Recorder())

    assert surface.of_kind("text_box")[0].text == "10.0"


def test_changed_default_discards_pending_text(surface, state):
    """Test a new authoritative value replaces stale input"""
    surface.type_text("abc")
    text_field(surface, state, 10.0, Recorder())

    state.begin_pass()
    text_field(surface, state, 20.0, Recorder())

    assert surface.of_kind("text_box")[-1].text == "20.0"
    assert len(state.parse_cache) == 0


def test_boolean_uses_toggle(surface, state):
    """Test booleans are drawn as a toggle and bypass the cache"""
    commits = Recorder()
    surface.toggle(False)

    text_field(surface, state, True, commits)

    assert commits.values == [False]
    assert surface.of_kind("toggle")[0].text == "Bool"
    assert surface.of_kind("text_box") == []
    assert len(state.parse_cache) == 0


def test_explicit_value_type(surface, state):
    """Test an int default edited as a float"""
    commits = Recorder()
    surface.type_text("2.5")

    text_field(surface, state, 2, commits, value_type=float)

    assert commits.values == [2.5]


def test_unsupported_type_commits_zero_value(surface, state):
    """Test conversion failures never raise out of the field"""
    commits = Recorder()

    index = text_field(surface, state, [1, 2], commits)

    assert commits.values == [[]]
    assert index == 0
    assert state.cursor_index == 1


def test_commit_errors_propagate(surface, state):
    """Test errors raised by the commit callback are not swallowed"""

    def failing_setter(value):
        raise AttributeError("can't set attribute")

    with pytest.raises(AttributeError):
        text_field(surface, state, 1.0, failing_setter)


def test_disabled_under_error_flag(surface, state):
    """Test the field is disabled while the error flag is set"""
    state.error_flag = True

    text_field(surface, state, 1.0, Recorder())

    assert surface.of_kind("text_box")[0].enabled is False


def test_advances_once_per_call(surface, state):
    """Test each field claims exactly one row regardless of outcome"""
    surface.type_text("bad")
    surface.type_text("3")

    first = text_field(surface, state, 1.0, Recorder())
    second = text_field(surface, state, 1, Recorder())
    third = text_field(surface, state, True, Recorder())

    assert (first, second, third) == (0, 1, 2)
    assert state.cursor_index == 3
