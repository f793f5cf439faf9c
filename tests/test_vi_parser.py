from types import SimpleNamespace

import pytest

from lineedit.enums import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.vi_command import Command, CommandKind
from lineedit.vi_motion import Motion, MotionKind, ParseResult
from lineedit.vi_parser import ParsedViSequence, parse


def _state():
    return SimpleNamespace(previous=None, last_char_search=None)


def _ev(kind, *args):
    return ReedlineEvent(kind, *args)


def _edit(kind):
    return _ev(EventKind.EDIT, [EditCommand(kind)])


def _multiple(*events):
    return _ev(EventKind.MULTIPLE, list(events))


def _until(*kinds):
    return _ev(EventKind.UNTIL_FOUND, [_ev(k) for k in kinds])


UP = _until(EventKind.MENU_UP, EventKind.UP)
RIGHT = _until(EventKind.HISTORY_HINT_COMPLETE, EventKind.MENU_RIGHT, EventKind.RIGHT)


@pytest.mark.parametrize(
    "chars, expected",
    [
        ("dw", ParsedViSequence(None, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD)))),
        ("2dw", ParsedViSequence(2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD)))),
        ("2d2w", ParsedViSequence(2, Command(CommandKind.DELETE), 2, ParseResult.valid(Motion(MotionKind.NEXT_WORD)))),
        ("2d20w", ParsedViSequence(2, Command(CommandKind.DELETE), 20, ParseResult.valid(Motion(MotionKind.NEXT_WORD)))),
        ("2dd", ParsedViSequence(2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.LINE)))),
        ("dtd", ParsedViSequence(None, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.RIGHT_BEFORE, "d")))),
        ("rk", ParsedViSequence(None, Command(CommandKind.REPLACE_CHAR, "k"), None, ParseResult.incomplete())),
        ("2ff", ParsedViSequence(2, None, None, ParseResult.valid(Motion(MotionKind.RIGHT_UNTIL, "f")))),
        ("2k", ParsedViSequence(2, None, None, ParseResult.valid(Motion(MotionKind.UP)))),
    ],
)
def test_complete_sequences(chars, expected):
    output = parse(chars)
    assert output == expected
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_has_garbage():
    output = parse("2dm")
    assert output == ParsedViSequence(2, Command(CommandKind.DELETE), None, ParseResult.invalid())
    assert output.is_valid() is False


def test_partial_action():
    output = parse("r")
    assert output == ParsedViSequence(None, Command(CommandKind.INCOMPLETE), None, ParseResult.incomplete())
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_partial_motion():
    output = parse("f")
    assert output == ParsedViSequence(None, None, None, ParseResult.incomplete())
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_delete_waiting_for_motion_is_not_complete():
    output = parse("d")
    assert output.is_valid()
    assert not output.is_complete()


@pytest.mark.parametrize(
    "chars, expected",
    [
        ("2k", _multiple(UP, UP)),
        ("k", _multiple(UP)),
        ("w", _multiple(_edit(EditKind.MOVE_WORD_RIGHT_START))),
        ("W", _multiple(_edit(EditKind.MOVE_BIG_WORD_RIGHT_START))),
        ("2l", _multiple(RIGHT, RIGHT)),
        ("l", _multiple(RIGHT)),
        ("0", _multiple(_edit(EditKind.MOVE_TO_LINE_START))),
        ("$", _multiple(_edit(EditKind.MOVE_TO_LINE_END))),
        ("i", _multiple(_ev(EventKind.REPAINT))),
        ("p", _multiple(_edit(EditKind.PASTE_CUT_BUFFER_AFTER))),
        ("2p", _multiple(_edit(EditKind.PASTE_CUT_BUFFER_AFTER), _edit(EditKind.PASTE_CUT_BUFFER_AFTER))),
        ("u", _multiple(_edit(EditKind.UNDO))),
        ("2u", _multiple(_edit(EditKind.UNDO), _edit(EditKind.UNDO))),
        ("dd", _multiple(_edit(EditKind.CUT_CURRENT_LINE))),
        ("dw", _multiple(_edit(EditKind.CUT_WORD_RIGHT_TO_NEXT))),
        ("dW", _multiple(_edit(EditKind.CUT_BIG_WORD_RIGHT_TO_NEXT))),
        ("de", _multiple(_edit(EditKind.CUT_WORD_RIGHT))),
        ("db", _multiple(_edit(EditKind.CUT_WORD_LEFT))),
        ("dB", _multiple(_edit(EditKind.CUT_BIG_WORD_LEFT))),
    ],
)
def test_reedline_move(chars, expected):
    assert parse(chars).to_reedline_event(_state()) == expected


def test_command_is_remembered_but_motion_is_not():
    state = _state()
    event = parse("dw").to_reedline_event(state)
    assert state.previous == event
    parse("w").to_reedline_event(state)
    assert state.previous == event


def test_delete_up_gives_none():
    state = _state()
    assert parse("dk").to_reedline_event(state) == _ev(EventKind.NONE)
    assert state.previous is None


def test_enters_insert_mode():
    assert parse("i").enters_insert_mode()
    assert parse("cw").enters_insert_mode()
    assert not parse("dw").enters_insert_mode()
    assert not parse("w").enters_insert_mode()
    assert not parse("c").enters_insert_mode()