from collections import deque
from types import SimpleNamespace

import pytest

from lineedit.enums import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.vi_motion import (
    Motion,
    MotionKind,
    ParseResult,
    ParseStatus,
    ReedlineOption,
    ViCharSearch,
    parse_motion,
)


def _state():
    return SimpleNamespace(last_char_search=None)


@pytest.mark.parametrize(
    "char, kind",
    [
        ("h", MotionKind.LEFT),
        ("l", MotionKind.RIGHT),
        ("j", MotionKind.DOWN),
        ("k", MotionKind.UP),
        ("b", MotionKind.PREVIOUS_WORD),
        ("B", MotionKind.PREVIOUS_BIG_WORD),
        ("w", MotionKind.NEXT_WORD),
        ("W", MotionKind.NEXT_BIG_WORD),
        ("e", MotionKind.NEXT_WORD_END),
        ("E", MotionKind.NEXT_BIG_WORD_END),
        ("0", MotionKind.START),
        ("^", MotionKind.START),
        ("$", MotionKind.END),
        (";", MotionKind.REPLAY_CHAR_SEARCH),
        (",", MotionKind.REVERSE_CHAR_SEARCH),
    ],
)
def test_single_char_motions(char, kind):
    stream = deque([char, "x"])
    assert parse_motion(stream, None) == ParseResult.valid(Motion(kind))
    assert list(stream) == ["x"]


def test_find_motion_takes_target():
    stream = deque(["f", "f"])
    assert parse_motion(stream, None) == ParseResult.valid(
        Motion(MotionKind.RIGHT_UNTIL, "f")
    )
    assert not stream


@pytest.mark.parametrize("char", ["f", "t", "F", "T"])
def test_search_without_target_is_incomplete(char):
    result = parse_motion(deque([char]), None)
    assert result.status is ParseStatus.INCOMPLETE


def test_till_motion():
    assert parse_motion(deque(["t", "d"]), "d") == ParseResult.valid(
        Motion(MotionKind.RIGHT_BEFORE, "d")
    )


def test_empty_stream_is_incomplete():
    assert parse_motion(deque(), "d") == ParseResult.incomplete()


def test_command_char_gives_line():
    stream = deque(["d"])
    assert parse_motion(stream, "d") == ParseResult.valid(Motion(MotionKind.LINE))
    assert not stream


def test_garbage_is_invalid_and_not_consumed():
    stream = deque(["m"])
    result = parse_motion(stream, "d")
    assert result.is_invalid()
    assert list(stream) == ["m"]


def test_command_char_not_matched_without_command():
    assert parse_motion(deque(["d"]), None).is_invalid()


def test_parse_result_checks_value():
    with pytest.raises(ValueError):
        ParseResult(ParseStatus.VALID)
    with pytest.raises(ValueError):
        ParseResult(ParseStatus.INVALID, Motion(MotionKind.UP))


def test_motion_checks_char():
    with pytest.raises(TypeError):
        Motion(MotionKind.RIGHT_UNTIL)
    with pytest.raises(ValueError):
        Motion(MotionKind.UP, "x")


def test_up_to_reedline():
    options = Motion(MotionKind.UP).to_reedline(_state())
    assert [o.into_reedline_event() for o in options] == [
        ReedlineEvent(
            EventKind.UNTIL_FOUND,
            [ReedlineEvent(EventKind.MENU_UP), ReedlineEvent(EventKind.UP)],
        )
    ]


def test_right_to_reedline():
    options = Motion(MotionKind.RIGHT).to_reedline(_state())
    assert options == [
        ReedlineOption.of_event(
            ReedlineEvent(
                EventKind.UNTIL_FOUND,
                [
                    ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE),
                    ReedlineEvent(EventKind.MENU_RIGHT),
                    ReedlineEvent(EventKind.RIGHT),
                ],
            )
        )
    ]


@pytest.mark.parametrize(
    "kind, edit",
    [
        (MotionKind.NEXT_WORD, EditKind.MOVE_WORD_RIGHT_START),
        (MotionKind.NEXT_BIG_WORD, EditKind.MOVE_BIG_WORD_RIGHT_START),
        (MotionKind.START, EditKind.MOVE_TO_LINE_START),
        (MotionKind.END, EditKind.MOVE_TO_LINE_END),
        (MotionKind.PREVIOUS_WORD, EditKind.MOVE_WORD_LEFT),
    ],
)
def test_edit_motions(kind, edit):
    assert Motion(kind).to_reedline(_state()) == [
        ReedlineOption.of_edit(EditCommand(edit))
    ]


def test_line_motion_alone_yields_nothing():
    assert Motion(MotionKind.LINE).to_reedline(_state()) == []


def test_char_search_is_remembered_and_replayed():
    state = _state()
    first = Motion(MotionKind.LEFT_BEFORE, "q").to_reedline(state)
    assert first == [ReedlineOption.of_edit(EditCommand(EditKind.MOVE_LEFT_BEFORE, "q"))]
    assert state.last_char_search == ViCharSearch.till_left("q")
    replay = Motion(MotionKind.REPLAY_CHAR_SEARCH).to_reedline(state)
    assert replay == first
    reverse = Motion(MotionKind.REVERSE_CHAR_SEARCH).to_reedline(state)
    assert reverse == [
        ReedlineOption.of_edit(EditCommand(EditKind.MOVE_RIGHT_BEFORE, "q"))
    ]


def test_replay_without_search_yields_nothing():
    assert Motion(MotionKind.REPLAY_CHAR_SEARCH).to_reedline(_state()) == []
    assert Motion(MotionKind.REVERSE_CHAR_SEARCH).to_reedline(_state()) == []


@pytest.mark.parametrize(
    "search", [ViCharSearch.to_right("a"), ViCharSearch.to_left("a"),
               ViCharSearch.till_right("a"), ViCharSearch.till_left("a")]
)
def test_reverse_twice_is_identity(search):
    assert search.reverse().reverse() == search
    assert search.reverse() != search


def test_to_move_and_to_cut():
    assert ViCharSearch.to_right("z").to_move() == EditCommand(EditKind.MOVE_RIGHT_UNTIL, "z")
    assert ViCharSearch.to_left("z").to_cut() == EditCommand(EditKind.CUT_LEFT_UNTIL, "z")
    assert ViCharSearch.till_right("z").to_cut() == EditCommand(EditKind.CUT_RIGHT_BEFORE, "z")
    assert ViCharSearch.till_left("z").to_move() == EditCommand(EditKind.MOVE_LEFT_BEFORE, "z")


def test_option_into_event():
    edit = EditCommand(EditKind.UNDO)
    assert ReedlineOption.of_edit(edit).into_reedline_event() == ReedlineEvent(
        EventKind.EDIT, [edit]
    )
    repaint = ReedlineEvent(EventKind.REPAINT)
    assert ReedlineOption.of_event(repaint).into_reedline_event() == repaint
    assert ReedlineOption.incomplete().into_reedline_event() is None


def test_option_rejects_both():
    with pytest.raises(ValueError):
        ReedlineOption(ReedlineEvent(EventKind.REPAINT), EditCommand(EditKind.UNDO))