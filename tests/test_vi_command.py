from collections import deque
from types import SimpleNamespace

import pytest

from lineedit.enums import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.vi_command import Command, CommandKind, parse_command
from lineedit.vi_motion import Motion, MotionKind, ReedlineOption, ViCharSearch


def _state(previous=None, last_char_search=None):
    return SimpleNamespace(previous=previous, last_char_search=last_char_search)


def test_parse_command_consumes_one_char():
    stream = deque("dw")
    assert parse_command(stream) == Command(CommandKind.DELETE)
    assert list(stream) == ["w"]


def test_parse_replace_char_takes_next_char():
    stream = deque("rk")
    assert parse_command(stream) == Command(CommandKind.REPLACE_CHAR, "k")
    assert not stream


def test_parse_replace_without_char_is_incomplete():
    assert parse_command(deque("r")) == Command(CommandKind.INCOMPLETE)


def test_parse_unknown_leaves_stream():
    stream = deque("w")
    assert parse_command(stream) is None
    assert list(stream) == ["w"]
    assert parse_command(deque()) is None


def test_whole_line_char_and_requires_motion():
    assert Command(CommandKind.DELETE).whole_line_char() == "d"
    assert Command(CommandKind.CHANGE).whole_line_char() == "c"
    assert Command(CommandKind.UNDO).whole_line_char() is None
    assert Command(CommandKind.DELETE).requires_motion()
    assert not Command(CommandKind.PASTE_AFTER).requires_motion()


def test_replace_char_validation():
    with pytest.raises(TypeError):
        Command(CommandKind.REPLACE_CHAR)
    with pytest.raises(ValueError):
        Command(CommandKind.UNDO, "x")


def test_delete_without_motion_is_incomplete():
    options = Command(CommandKind.DELETE).to_reedline(_state())
    assert len(options) == 1
    assert options[0].is_incomplete


def test_simple_command_edit():
    options = Command(CommandKind.REPLACE_CHAR, "z").to_reedline(_state())
    assert options == [ReedlineOption.of_edit(EditCommand(EditKind.REPLACE_CHAR, "z"))]


def test_repeat_last_action_uses_previous():
    previous = ReedlineEvent(EventKind.CLEAR_SCREEN)
    cmd = Command(CommandKind.REPEAT_LAST_ACTION)
    assert cmd.to_reedline(_state(previous=previous)) == [ReedlineOption.of_event(previous)]
    assert cmd.to_reedline(_state()) == []


def test_delete_line_motion():
    result = Command(CommandKind.DELETE).to_reedline_with_motion(
        Motion(MotionKind.LINE), _state()
    )
    assert result == [ReedlineOption.of_edit(EditCommand(EditKind.CUT_CURRENT_LINE))]


def test_change_appends_repaint():
    delete = Command(CommandKind.DELETE).to_reedline_with_motion(
        Motion(MotionKind.NEXT_WORD), _state()
    )
    change = Command(CommandKind.CHANGE).to_reedline_with_motion(
        Motion(MotionKind.NEXT_WORD), _state()
    )
    assert change[:-1] == delete
    assert change[-1] == ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT))


def test_up_down_give_nothing():
    for kind in (MotionKind.UP, MotionKind.DOWN):
        assert (
            Command(CommandKind.DELETE).to_reedline_with_motion(Motion(kind), _state())
            is None
        )


def test_non_motion_command_gives_nothing():
    assert (
        Command(CommandKind.UNDO).to_reedline_with_motion(Motion(MotionKind.LEFT), _state())
        is None
    )


def test_char_search_is_remembered_and_replayed():
    state = _state()
    result = Command(CommandKind.DELETE).to_reedline_with_motion(
        Motion(MotionKind.RIGHT_UNTIL, "x"), state
    )
    assert state.last_char_search == ViCharSearch.to_right("x")
    assert result == [ReedlineOption.of_edit(ViCharSearch.to_right("x").to_cut())]

    replay = Command(CommandKind.DELETE).to_reedline_with_motion(
        Motion(MotionKind.REPLAY_CHAR_SEARCH), state
    )
    assert replay == result
    reverse = Command(CommandKind.DELETE).to_reedline_with_motion(
        Motion(MotionKind.REVERSE_CHAR_SEARCH), state
    )
    assert reverse == [ReedlineOption.of_edit(ViCharSearch.to_left("x").to_cut())]


def test_replay_without_search_gives_nothing():
    assert (
        Command(CommandKind.DELETE).to_reedline_with_motion(
            Motion(MotionKind.REPLAY_CHAR_SEARCH), _state()
        )
        is None
    )