"""Vi normal-mode commands and their translation into editor actions."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any

from lineedit.enums import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.vi_motion import Motion, MotionKind, ReedlineOption


class CommandKind(enum.Enum):
    INCOMPLETE = "incomplete"
    DELETE = "delete"
    DELETE_CHAR = "delete_char"
    REPLACE_CHAR = "replace_char"
    SUBSTITUTE_CHAR_WITH_INSERT = "substitute_char_with_insert"
    PASTE_AFTER = "paste_after"
    PASTE_BEFORE = "paste_before"
    ENTER_VI_APPEND = "enter_vi_append"
    ENTER_VI_INSERT = "enter_vi_insert"
    UNDO = "undo"
    CHANGE_TO_LINE_END = "change_to_line_end"
    DELETE_TO_END = "delete_to_end"
    APPEND_TO_END = "append_to_end"
    PREPEND_TO_START = "prepend_to_start"
    REWRITE_CURRENT_LINE = "rewrite_current_line"
    CHANGE = "change"
    HISTORY_SEARCH = "history_search"
    SWITCHCASE = "switchcase"
    REPEAT_LAST_ACTION = "repeat_last_action"


_COMMAND_CHARS = {
    "d": CommandKind.DELETE,
    "p": CommandKind.PASTE_AFTER,
    "P": CommandKind.PASTE_BEFORE,
    "i": CommandKind.ENTER_VI_INSERT,
    "a": CommandKind.ENTER_VI_APPEND,
    "u": CommandKind.UNDO,
    "c": CommandKind.CHANGE,
    "x": CommandKind.DELETE_CHAR,
    "s": CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": CommandKind.HISTORY_SEARCH,
    "C": CommandKind.CHANGE_TO_LINE_END,
    "D": CommandKind.DELETE_TO_END,
    "I": CommandKind.PREPEND_TO_START,
    "A": CommandKind.APPEND_TO_END,
    "S": CommandKind.REWRITE_CURRENT_LINE,
    "~": CommandKind.SWITCHCASE,
    ".": CommandKind.REPEAT_LAST_ACTION,
}

_SIMPLE_EDITS = {
    CommandKind.ENTER_VI_APPEND: EditKind.MOVE_RIGHT,
    CommandKind.PASTE_AFTER: EditKind.PASTE_CUT_BUFFER_AFTER,
    CommandKind.PASTE_BEFORE: EditKind.PASTE_CUT_BUFFER_BEFORE,
    CommandKind.UNDO: EditKind.UNDO,
    CommandKind.CHANGE_TO_LINE_END: EditKind.CLEAR_TO_LINE_END,
    CommandKind.DELETE_TO_END: EditKind.CUT_TO_LINE_END,
    CommandKind.APPEND_TO_END: EditKind.MOVE_TO_LINE_END,
    CommandKind.PREPEND_TO_START: EditKind.MOVE_TO_LINE_START,
    CommandKind.REWRITE_CURRENT_LINE: EditKind.CUT_CURRENT_LINE,
    CommandKind.DELETE_CHAR: EditKind.CUT_CHAR,
    CommandKind.SUBSTITUTE_CHAR_WITH_INSERT: EditKind.CUT_CHAR,
    CommandKind.SWITCHCASE: EditKind.SWITCHCASE_CHAR,
}

_SIMPLE_EVENTS = {
    CommandKind.ENTER_VI_INSERT: EventKind.REPAINT,
    CommandKind.HISTORY_SEARCH: EventKind.SEARCH_HISTORY,
}

_MOTION_CUTS = {
    MotionKind.NEXT_WORD: EditKind.CUT_WORD_RIGHT_TO_NEXT,
    MotionKind.NEXT_BIG_WORD: EditKind.CUT_BIG_WORD_RIGHT_TO_NEXT,
    MotionKind.NEXT_WORD_END: EditKind.CUT_WORD_RIGHT,
    MotionKind.NEXT_BIG_WORD_END: EditKind.CUT_BIG_WORD_RIGHT,
    MotionKind.PREVIOUS_WORD: EditKind.CUT_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditKind.CUT_BIG_WORD_LEFT,
    MotionKind.START: EditKind.CUT_FROM_LINE_START,
    MotionKind.LEFT: EditKind.BACKSPACE,
    MotionKind.RIGHT: EditKind.DELETE,
}


@dataclass(frozen=True)
class Command:
    """A vi command; REPLACE_CHAR carries the replacement character."""

    kind: CommandKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.REPLACE_CHAR:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise TypeError("REPLACE_CHAR needs a single character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} carries no character")

    def whole_line_char(self) -> str | None:
        """The letter that, typed again, makes the command act on the whole line."""
        if self.kind is CommandKind.DELETE:
            return "d"
        if self.kind is CommandKind.CHANGE:
            return "c"
        return None

    def requires_motion(self) -> bool:
        return self.kind in (CommandKind.DELETE, CommandKind.CHANGE)

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """Translate the command when no motion follows it."""
        kind = self.kind
        if kind in _SIMPLE_EVENTS:
            return [ReedlineOption.of_event(ReedlineEvent(_SIMPLE_EVENTS[kind]))]
        if kind in _SIMPLE_EDITS:
            return [ReedlineOption.of_edit(EditCommand(_SIMPLE_EDITS[kind]))]
        if kind is CommandKind.REPLACE_CHAR:
            return [ReedlineOption.of_edit(EditCommand(EditKind.REPLACE_CHAR, self.char))]
        if kind is CommandKind.REPEAT_LAST_ACTION:
            previous = vi_state.previous
            return [ReedlineOption.of_event(previous)] if previous is not None else []
        # DELETE, CHANGE and INCOMPLETE still wait for more input
        return [ReedlineOption.incomplete()]

    def _motion_edits(self, motion: Motion, vi_state: Any) -> list[EditCommand] | None:
        deleting = self.kind is CommandKind.DELETE
        kind = motion.kind
        if kind is MotionKind.END:
            return [
                EditCommand(
                    EditKind.CUT_TO_LINE_END if deleting else EditKind.CLEAR_TO_LINE_END
                )
            ]
        if kind is MotionKind.LINE:
            if deleting:
                return [EditCommand(EditKind.CUT_CURRENT_LINE)]
            return [
                EditCommand(EditKind.MOVE_TO_START),
                EditCommand(EditKind.CLEAR_TO_LINE_END),
            ]
        if kind in _MOTION_CUTS:
            return [EditCommand(_MOTION_CUTS[kind])]
        if kind in (MotionKind.UP, MotionKind.DOWN):
            return None
        search = motion.char_search()
        if search is not None:
            vi_state.last_char_search = search
            return [search.to_cut()]
        last = vi_state.last_char_search
        if last is None:
            return None
        if kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = last.reverse()
        return [last.to_cut()]

    def to_reedline_with_motion(
        self, motion: Motion, vi_state: Any
    ) -> list[ReedlineOption] | None:
        """Translate the command applied over ``motion``; None if the pair means nothing."""
        if self.kind not in (CommandKind.DELETE, CommandKind.CHANGE):
            return None
        edits = self._motion_edits(motion, vi_state)
        if edits is None:
            return None
        options = [ReedlineOption.of_edit(edit) for edit in edits]
        if self.kind is CommandKind.CHANGE:
            # Repaint so that the switch to insert mode is shown
            options.append(ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT)))
        return options


def parse_command(stream: deque[str]) -> Command | None:
    """Parse a command from the front of ``stream``, consuming what it uses."""
    if not stream:
        return None
    head = stream[0]
    if head == "r":
        stream.popleft()
        if stream:
            return Command(CommandKind.REPLACE_CHAR, stream.popleft())
        return Command(CommandKind.INCOMPLETE)
    kind = _COMMAND_CHARS.get(head)
    if kind is None:
        return None
    stream.popleft()
    return Command(kind)