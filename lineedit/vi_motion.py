"""Vi motions, character searches and the results of parsing vi key sequences."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lineedit.enums import EditCommand, EditKind, EventKind, ReedlineEvent

T = TypeVar("T")


@dataclass(frozen=True)
class ReedlineOption:
    """One piece of a parsed vi sequence: an event, an edit, or a marker that more input is needed."""

    event: ReedlineEvent | None = None
    edit: EditCommand | None = None

    def __post_init__(self) -> None:
        if self.event is not None and self.edit is not None:
            raise ValueError("an option holds either an event or an edit, not both")
        if self.event is not None and not isinstance(self.event, ReedlineEvent):
            raise TypeError(f"expected a ReedlineEvent, got {self.event!r}")
        if self.edit is not None and not isinstance(self.edit, EditCommand):
            raise TypeError(f"expected an EditCommand, got {self.edit!r}")

    @classmethod
    def of_event(cls, event: ReedlineEvent) -> ReedlineOption:
        return cls(event=event)

    @classmethod
    def of_edit(cls, edit: EditCommand) -> ReedlineOption:
        return cls(edit=edit)

    @classmethod
    def incomplete(cls) -> ReedlineOption:
        return cls()

    @property
    def is_incomplete(self) -> bool:
        return self.event is None and self.edit is None

    def into_reedline_event(self) -> ReedlineEvent | None:
        """The editor event this option stands for; None when incomplete."""
        if self.event is not None:
            return self.event
        if self.edit is not None:
            return ReedlineEvent(EventKind.EDIT, [self.edit])
        return None


class ParseStatus(enum.Enum):
    VALID = "valid"
    INCOMPLETE = "incomplete"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing part of a vi sequence; a valid result carries its value."""

    status: ParseStatus
    value: Any = None

    def __post_init__(self) -> None:
        if self.status is ParseStatus.VALID:
            if self.value is None:
                raise ValueError("a valid parse result needs a value")
        elif self.value is not None:
            raise ValueError(f"{self.status.name} carries no value")

    @classmethod
    def valid(cls, value: T) -> ParseResult[T]:
        return cls(ParseStatus.VALID, value)

    @classmethod
    def incomplete(cls) -> ParseResult[T]:
        return cls(ParseStatus.INCOMPLETE)

    @classmethod
    def invalid(cls) -> ParseResult[T]:
        return cls(ParseStatus.INVALID)

    def is_valid(self) -> bool:
        return self.status is ParseStatus.VALID

    def is_incomplete(self) -> bool:
        return self.status is ParseStatus.INCOMPLETE

    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID


class MotionKind(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    NEXT_WORD = "next_word"
    NEXT_BIG_WORD = "next_big_word"
    NEXT_WORD_END = "next_word_end"
    NEXT_BIG_WORD_END = "next_big_word_end"
    PREVIOUS_WORD = "previous_word"
    PREVIOUS_BIG_WORD = "previous_big_word"
    LINE = "line"
    START = "start"
    END = "end"
    RIGHT_UNTIL = "right_until"
    RIGHT_BEFORE = "right_before"
    LEFT_UNTIL = "left_until"
    LEFT_BEFORE = "left_before"
    REPLAY_CHAR_SEARCH = "replay_char_search"
    REVERSE_CHAR_SEARCH = "reverse_char_search"


_CHAR_MOTIONS = frozenset(
    {
        MotionKind.RIGHT_UNTIL,
        MotionKind.RIGHT_BEFORE,
        MotionKind.LEFT_UNTIL,
        MotionKind.LEFT_BEFORE,
    }
)


@dataclass(frozen=True)
class ViCharSearch:
    """A vi to/till character search (f, F, t, T), remembered for ``;`` and ``,``."""

    char: str
    right: bool
    till: bool

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise TypeError(f"expected a single character, got {self.char!r}")

    @classmethod
    def to_right(cls, char: str) -> ViCharSearch:
        """``f``"""
        return cls(char, right=True, till=False)

    @classmethod
    def to_left(cls, char: str) -> ViCharSearch:
        """``F``"""
        return cls(char, right=False, till=False)

    @classmethod
    def till_right(cls, char: str) -> ViCharSearch:
        """``t``"""
        return cls(char, right=True, till=True)

    @classmethod
    def till_left(cls, char: str) -> ViCharSearch:
        """``T``"""
        return cls(char, right=False, till=True)

    def reverse(self) -> ViCharSearch:
        """The same search in the other direction, as ``,`` uses it."""
        return ViCharSearch(self.char, right=not self.right, till=self.till)

    def to_move(self) -> EditCommand:
        """The edit command moving the cursor by this search."""
        if self.right:
            kind = EditKind.MOVE_RIGHT_BEFORE if self.till else EditKind.MOVE_RIGHT_UNTIL
        else:
            kind = EditKind.MOVE_LEFT_BEFORE if self.till else EditKind.MOVE_LEFT_UNTIL
        return EditCommand(kind, self.char)

    def to_cut(self) -> EditCommand:
        """The edit command cutting the text covered by this search."""
        if self.right:
            kind = EditKind.CUT_RIGHT_BEFORE if self.till else EditKind.CUT_RIGHT_UNTIL
        else:
            kind = EditKind.CUT_LEFT_BEFORE if self.till else EditKind.CUT_LEFT_UNTIL
        return EditCommand(kind, self.char)


def _ev(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _until_found(*kinds: EventKind) -> ReedlineEvent:
    return ReedlineEvent(EventKind.UNTIL_FOUND, [ReedlineEvent(k) for k in kinds])


_SIMPLE_EDITS = {
    MotionKind.NEXT_WORD: EditKind.MOVE_WORD_RIGHT_START,
    MotionKind.NEXT_BIG_WORD: EditKind.MOVE_BIG_WORD_RIGHT_START,
    MotionKind.NEXT_WORD_END: EditKind.MOVE_WORD_RIGHT_END,
    MotionKind.NEXT_BIG_WORD_END: EditKind.MOVE_BIG_WORD_RIGHT_END,
    MotionKind.PREVIOUS_WORD: EditKind.MOVE_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditKind.MOVE_BIG_WORD_LEFT,
    MotionKind.START: EditKind.MOVE_TO_LINE_START,
    MotionKind.END: EditKind.MOVE_TO_LINE_END,
}

_ARROW_EVENTS = {
    MotionKind.LEFT: (EventKind.MENU_LEFT, EventKind.LEFT),
    MotionKind.RIGHT: (
        EventKind.HISTORY_HINT_COMPLETE,
        EventKind.MENU_RIGHT,
        EventKind.RIGHT,
    ),
    MotionKind.UP: (EventKind.MENU_UP, EventKind.UP),
    MotionKind.DOWN: (EventKind.MENU_DOWN, EventKind.DOWN),
}

_SEARCH_FACTORIES = {
    MotionKind.RIGHT_UNTIL: ViCharSearch.to_right,
    MotionKind.RIGHT_BEFORE: ViCharSearch.till_right,
    MotionKind.LEFT_UNTIL: ViCharSearch.to_left,
    MotionKind.LEFT_BEFORE: ViCharSearch.till_left,
}


@dataclass(frozen=True)
class Motion:
    """A vi motion; the character searches carry their target character."""

    kind: MotionKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_MOTIONS:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise TypeError(f"{self.kind.name} needs a single character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} carries no character")

    def char_search(self) -> ViCharSearch | None:
        """The character search this motion performs, if it is one."""
        factory = _SEARCH_FACTORIES.get(self.kind)
        return factory(self.char) if factory is not None else None

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """Translate the motion on its own; character searches are remembered in ``vi_state``."""
        if self.kind in _ARROW_EVENTS:
            return [ReedlineOption.of_event(_until_found(*_ARROW_EVENTS[self.kind]))]
        if self.kind in _SIMPLE_EDITS:
            return [ReedlineOption.of_edit(EditCommand(_SIMPLE_EDITS[self.kind]))]
        if self.kind is MotionKind.LINE:
            # Only meaningful combined with a command such as dd or cc
            return []
        search = self.char_search()
        if search is not None:
            vi_state.last_char_search = search
            return [ReedlineOption.of_edit(search.to_move())]
        last = vi_state.last_char_search
        if last is None:
            return []
        if self.kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = last.reverse()
        return [ReedlineOption.of_edit(last.to_move())]


_MOTION_CHARS = {
    "h": MotionKind.LEFT,
    "l": MotionKind.RIGHT,
    "j": MotionKind.DOWN,
    "k": MotionKind.UP,
    "b": MotionKind.PREVIOUS_WORD,
    "B": MotionKind.PREVIOUS_BIG_WORD,
    "w": MotionKind.NEXT_WORD,
    "W": MotionKind.NEXT_BIG_WORD,
    "e": MotionKind.NEXT_WORD_END,
    "E": MotionKind.NEXT_BIG_WORD_END,
    "0": MotionKind.START,
    "^": MotionKind.START,
    "$": MotionKind.END,
    ";": MotionKind.REPLAY_CHAR_SEARCH,
    ",": MotionKind.REVERSE_CHAR_SEARCH,
}

_SEARCH_CHARS = {
    "f": MotionKind.RIGHT_UNTIL,
    "t": MotionKind.RIGHT_BEFORE,
    "F": MotionKind.LEFT_UNTIL,
    "T": MotionKind.LEFT_BEFORE,
}


def parse_motion(stream: deque[str], command_char: str | None) -> ParseResult[Motion]:
    """Parse a motion from the front of ``stream``, consuming what it uses.

    ``command_char`` is the command letter that, repeated, means the whole line
    (``dd``, ``cc``). Invalid input is left in the stream.
    """
    if not stream:
        return ParseResult.incomplete()
    head = stream[0]
    if head in _MOTION_CHARS:
        stream.popleft()
        return ParseResult.valid(Motion(_MOTION_CHARS[head]))
    if head in _SEARCH_CHARS:
        stream.popleft()
        if not stream:
            return ParseResult.incomplete()
        return ParseResult.valid(Motion(_SEARCH_CHARS[head], stream.popleft()))
    if command_char is not None and head == command_char:
        stream.popleft()
        return ParseResult.valid(Motion(MotionKind.LINE))
    return ParseResult.invalid()