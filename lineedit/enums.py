"""Key events, edit commands, editor events and the signals a line read ends with."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Union


class KeyModifiers(enum.Flag):
    """Modifier keys held down while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


_NAMED_KEYS = (
    "Backspace",
    "Enter",
    "Left",
    "Right",
    "Up",
    "Down",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Tab",
    "BackTab",
    "Delete",
    "Insert",
    "Null",
    "Esc",
)


@dataclass(frozen=True)
class Key:
    """A key code: either a named key or a character key (``name == "Char"``)."""

    name: str
    char: str | None = None

    BACKSPACE: ClassVar[Key]
    ENTER: ClassVar[Key]
    LEFT: ClassVar[Key]
    RIGHT: ClassVar[Key]
    UP: ClassVar[Key]
    DOWN: ClassVar[Key]
    HOME: ClassVar[Key]
    END: ClassVar[Key]
    PAGE_UP: ClassVar[Key]
    PAGE_DOWN: ClassVar[Key]
    TAB: ClassVar[Key]
    BACK_TAB: ClassVar[Key]
    DELETE: ClassVar[Key]
    INSERT: ClassVar[Key]
    NULL: ClassVar[Key]
    ESC: ClassVar[Key]

    def __post_init__(self) -> None:
        if self.name == "Char":
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"key {self.name!r} does not carry a character")

    @classmethod
    def from_char(cls, c: str) -> Key:
        """The key that types ``c``."""
        return cls("Char", c)

    @classmethod
    def function(cls, number: int) -> Key:
        """The function key ``F<number>``."""
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise ValueError("function keys are numbered from 1")
        return cls(f"F{number}")

    @property
    def is_char(self) -> bool:
        return self.name == "Char"

    def __str__(self) -> str:
        return f"Char({self.char})" if self.is_char else self.name


for _key_name in _NAMED_KEYS:
    _attr = "".join(
        ("_" + ch if ch.isupper() and i else ch) for i, ch in enumerate(_key_name)
    ).upper()
    setattr(Key, _attr, Key(_key_name))
del _key_name, _attr


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key was pressed, repeated or released."""

    code: Key
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    """Any mouse activity; its details are not interpreted by the editor."""

    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class PasteEvent:
    text: str


TerminalEvent = Union[KeyEvent, MouseEvent, ResizeEvent, FocusGained, FocusLost, PasteEvent]


class SignalKind(enum.Enum):
    SUCCESS = "success"
    CTRL_C = "ctrl_c"
    CTRL_D = "ctrl_d"


@dataclass(frozen=True)
class Signal:
    """How a line read ended: with content, with Ctrl+C or with Ctrl+D."""

    kind: SignalKind
    content: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignalKind.SUCCESS:
            if not isinstance(self.content, str):
                raise TypeError("a successful signal carries the entered text")
        elif self.content is not None:
            raise ValueError(f"{self.kind.name} carries no content")

    @classmethod
    def success(cls, content: str) -> Signal:
        return cls(SignalKind.SUCCESS, content)

    @classmethod
    def ctrl_c(cls) -> Signal:
        return cls(SignalKind.CTRL_C)

    @classmethod
    def ctrl_d(cls) -> Signal:
        return cls(SignalKind.CTRL_D)


# ---------------------------------------------------------------------------
# argument checking shared by EditCommand and ReedlineEvent


def _char(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError(f"expected a single character, got {value!r}")
    return value


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _index(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _dimension(value: Any) -> int:
    value = _index(value)
    if value > 0xFFFF:
        raise ValueError(f"terminal dimension out of range: {value}")
    return value


def _commands(value: Any) -> tuple:
    items = tuple(value)
    for item in items:
        if not isinstance(item, EditCommand):
            raise TypeError(f"expected an EditCommand, got {item!r}")
    return items


def _events(value: Any) -> tuple:
    items = tuple(value)
    for item in items:
        if not isinstance(item, ReedlineEvent):
            raise TypeError(f"expected a ReedlineEvent, got {item!r}")
    return items


class _Tagged:
    """An immutable value made of a kind and the arguments that kind takes."""

    __slots__ = ("kind", "args")

    _KIND: ClassVar[type]
    _SPECS: ClassVar[dict]
    _LABELS: ClassVar[dict]

    def __init__(self, kind: enum.Enum, *args: Any) -> None:
        if not isinstance(kind, self._KIND):
            raise TypeError(f"expected a {self._KIND.__name__}, got {kind!r}")
        spec: tuple[Callable[[Any], Any], ...] = self._SPECS.get(kind, ())
        if len(args) != len(spec):
            raise TypeError(
                f"{kind.value} takes {len(spec)} argument(s), got {len(args)}"
            )
        checked = tuple(check(arg) for check, arg in zip(spec, args))
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "args", checked)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.kind is other.kind and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.kind, self.args))

    def __repr__(self) -> str:
        parts = [f"{self._KIND.__name__}.{self.kind.name}"]
        parts.extend(repr(arg) for arg in self.args)
        return f"{type(self).__name__}({', '.join(parts)})"

    def __str__(self) -> str:
        return self._LABELS.get(self.kind, self.kind.value)


# ---------------------------------------------------------------------------
# edit commands


class EditKind(enum.Enum):
    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    COMPLETE = "Complete"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"


class EditType(enum.Enum):
    """How an edit command takes part in undo grouping."""

    MOVE_CURSOR = "move_cursor"
    UNDO_REDO = "undo_redo"
    EDIT_TEXT = "edit_text"


_CHAR_SEARCH_KINDS = (
    EditKind.CUT_RIGHT_UNTIL,
    EditKind.CUT_RIGHT_BEFORE,
    EditKind.MOVE_RIGHT_UNTIL,
    EditKind.MOVE_RIGHT_BEFORE,
    EditKind.CUT_LEFT_UNTIL,
    EditKind.CUT_LEFT_BEFORE,
    EditKind.MOVE_LEFT_UNTIL,
    EditKind.MOVE_LEFT_BEFORE,
)

_EDIT_SPECS: dict = {
    EditKind.MOVE_TO_POSITION: (_index,),
    EditKind.INSERT_CHAR: (_char,),
    EditKind.INSERT_STRING: (_text,),
    EditKind.REPLACE_CHAR: (_char,),
    EditKind.REPLACE_CHARS: (_index, _text),
    **{kind: (_char,) for kind in _CHAR_SEARCH_KINDS},
}

_EDIT_LABELS: dict = {
    EditKind.MOVE_TO_POSITION: "MoveToPosition  Value: <int>",
    EditKind.INSERT_CHAR: "InsertChar  Value: <char>",
    EditKind.INSERT_STRING: "InsertString Value: <string>",
    EditKind.REPLACE_CHAR: "ReplaceChar <char>",
    EditKind.REPLACE_CHARS: "ReplaceChars <int> <string>",
    **{kind: f"{kind.value} Value: <char>" for kind in _CHAR_SEARCH_KINDS},
}

_CURSOR_MOVES = frozenset(
    {
        EditKind.MOVE_TO_START,
        EditKind.MOVE_TO_END,
        EditKind.MOVE_TO_LINE_START,
        EditKind.MOVE_TO_LINE_END,
        EditKind.MOVE_TO_POSITION,
        EditKind.MOVE_LEFT,
        EditKind.MOVE_RIGHT,
        EditKind.MOVE_WORD_LEFT,
        EditKind.MOVE_BIG_WORD_LEFT,
        EditKind.MOVE_WORD_RIGHT,
        EditKind.MOVE_WORD_RIGHT_START,
        EditKind.MOVE_BIG_WORD_RIGHT_START,
        EditKind.MOVE_WORD_RIGHT_END,
        EditKind.MOVE_BIG_WORD_RIGHT_END,
        EditKind.MOVE_RIGHT_UNTIL,
        EditKind.MOVE_RIGHT_BEFORE,
        EditKind.MOVE_LEFT_UNTIL,
        EditKind.MOVE_LEFT_BEFORE,
    }
)


class EditCommand(_Tagged):
    """An editing action that can be bound to a key.

    ``EditCommand(EditKind.INSERT_CHAR, "a")``; kinds without data take no arguments.
    """

    __slots__ = ()
    _KIND = EditKind
    _SPECS = _EDIT_SPECS
    _LABELS = _EDIT_LABELS

    def edit_type(self) -> EditType:
        """Whether the command moves the cursor, edits text or undoes/redoes."""
        if self.kind in _CURSOR_MOVES:
            return EditType.MOVE_CURSOR
        if self.kind in (EditKind.UNDO, EditKind.REDO):
            return EditType.UNDO_REDO
        return EditType.EDIT_TEXT

    def __str__(self) -> str:
        return super().__str__()


# ---------------------------------------------------------------------------
# undo behaviour


def _is_whitespace(c: str) -> bool:
    # str.isspace also accepts the ASCII separator controls, which are not white space
    return c.isspace() and c not in "\x1c\x1d\x1e\x1f"


class UndoKind(enum.Enum):
    INSERT_CHARACTER = "insert_character"
    BACKSPACE = "backspace"
    DELETE = "delete"
    MOVE_CURSOR = "move_cursor"
    HISTORY_NAVIGATION = "history_navigation"
    CREATE_UNDO_POINT = "create_undo_point"
    UNDO_REDO = "undo_redo"


@dataclass(frozen=True)
class UndoBehavior:
    """Tag of a line change telling how it lands on the undo stack.

    Insertions carry the inserted character; backspace and delete may carry
    the removed one.
    """

    kind: UndoKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is UndoKind.INSERT_CHARACTER:
            _char(self.char)
        elif self.kind in (UndoKind.BACKSPACE, UndoKind.DELETE):
            if self.char is not None:
                _char(self.char)
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} carries no character")

    def create_undo_point_after(self, previous: UndoBehavior) -> bool:
        """Whether this change starts a new undo set after ``previous``."""
        prev, new = previous.kind, self.kind
        if new is UndoKind.MOVE_CURSOR:
            return False
        if prev is not new:
            return True
        if new is UndoKind.HISTORY_NAVIGATION:
            return False
        if new is UndoKind.INSERT_CHARACTER:
            c_prev, c_new = previous.char, self.char
            return c_prev in ("\n", "\r") or (
                not _is_whitespace(c_prev) and _is_whitespace(c_new)
            )
        if new in (UndoKind.BACKSPACE, UndoKind.DELETE):
            c_prev, c_new = previous.char, self.char
            if c_prev is None or c_new is None:
                return False
            return c_new in ("\n", "\r") or (
                _is_whitespace(c_prev) and not _is_whitespace(c_new)
            )
        return True


# ---------------------------------------------------------------------------
# editor events


class EventKind(enum.Enum):
    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    SUBMIT = "Submit"
    SUBMIT_OR_NEWLINE = "SubmitOrNewline"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"


_EVENT_SPECS: dict = {
    EventKind.RESIZE: (_dimension, _dimension),
    EventKind.EDIT: (_commands,),
    EventKind.MULTIPLE: (_events,),
    EventKind.UNTIL_FOUND: (_events,),
    EventKind.MENU: (_text,),
    EventKind.EXECUTE_HOST_COMMAND: (_text,),
}

_EVENT_LABELS: dict = {
    EventKind.RESIZE: "Resize <int> <int>",
    EventKind.EDIT: "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
    EventKind.MULTIPLE: "Multiple[ { ReedLineEvents, } ]",
    EventKind.UNTIL_FOUND: "UntilFound [ { ReedLineEvents, } ]",
    EventKind.MENU: "Menu Name: <string>",
}


class ReedlineEvent(_Tagged):
    """An action of the line editor.

    ``ReedlineEvent(EventKind.EDIT, [cmd, ...])``,
    ``ReedlineEvent(EventKind.RESIZE, width, height)``; sequences are stored as tuples.
    """

    __slots__ = ()
    _KIND = EventKind
    _SPECS = _EVENT_SPECS
    _LABELS = _EVENT_LABELS

    def __str__(self) -> str:
        return super().__str__()


@dataclass(frozen=True)
class ReedlineRawEvent:
    """A terminal event that is never a key release; key repeats become presses."""

    event: TerminalEvent

    @classmethod
    def convert_from(cls, event: TerminalEvent) -> ReedlineRawEvent | None:
        """Wrap ``event``, or return None for a released key."""
        if isinstance(event, KeyEvent):
            if event.kind is KeyEventKind.RELEASE:
                return None
            if event.kind is KeyEventKind.REPEAT:
                return cls(replace(event, kind=KeyEventKind.PRESS))
        return cls(event)