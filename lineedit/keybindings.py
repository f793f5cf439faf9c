"""Key bindings, edit-mode interface and cursor shape configuration."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from lineedit.enums import (
    EditCommand,
    EditKind,
    EventKind,
    Key,
    KeyModifiers,
    ReedlineEvent,
    ReedlineRawEvent,
)


class EditModeKind(enum.Enum):
    """What the prompt indicator should show for the current edit mode."""

    EMACS = "emacs"
    VI_NORMAL = "vi_normal"
    VI_INSERT = "vi_insert"


class EditMode(abc.ABC):
    """A style of turning terminal input into editor events."""

    @abc.abstractmethod
    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        """Translate a terminal event into an editor event."""

    @abc.abstractmethod
    def edit_mode(self) -> EditModeKind:
        """The mode to display in the prompt indicator."""


class CursorStyle(enum.Enum):
    DEFAULT_USER_SHAPE = "default_user_shape"
    BLINKING_BLOCK = "blinking_block"
    STEADY_BLOCK = "steady_block"
    BLINKING_UNDER_SCORE = "blinking_under_score"
    STEADY_UNDER_SCORE = "steady_under_score"
    BLINKING_BAR = "blinking_bar"
    STEADY_BAR = "steady_bar"


@dataclass
class CursorConfig:
    """Cursor shape per edit mode; None leaves the cursor unchanged in that mode."""

    vi_insert: CursorStyle | None = None
    vi_normal: CursorStyle | None = None
    emacs: CursorStyle | None = None


@dataclass(frozen=True)
class KeyCombination:
    modifier: KeyModifiers
    key_code: Key


@dataclass
class Keybindings:
    """Maps key combinations to editor events."""

    bindings: dict[KeyCombination, ReedlineEvent] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Keybindings:
        return cls()

    def add_binding(
        self, modifier: KeyModifiers, key_code: Key, command: ReedlineEvent
    ) -> None:
        """Bind ``command`` to the key combination, replacing any earlier binding.

        Raises ValueError for an empty UNTIL_FOUND event.
        """
        if command.kind is EventKind.UNTIL_FOUND and not command.args[0]:
            raise ValueError(
                "UntilFound should contain a series of potential events to handle"
            )
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(
        self, modifier: KeyModifiers, key_code: Key
    ) -> ReedlineEvent | None:
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(
        self, modifier: KeyModifiers, key_code: Key
    ) -> ReedlineEvent | None:
        """Unbind the combination, returning the event it was bound to, if any."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def get_keybindings(self) -> Mapping[KeyCombination, ReedlineEvent]:
        return MappingProxyType(self.bindings)


def _event(kind: EventKind, *args) -> ReedlineEvent:
    return ReedlineEvent(kind, *args)


def _until_found(*events: ReedlineEvent) -> ReedlineEvent:
    return ReedlineEvent(EventKind.UNTIL_FOUND, events)


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An EDIT event running the single ``command``."""
    return ReedlineEvent(EventKind.EDIT, [command])


def _edit(kind: EditKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O (external editor)."""
    ctrl = KeyModifiers.CONTROL
    kb.add_binding(KeyModifiers.NONE, Key.ESC, _event(EventKind.ESC))
    kb.add_binding(ctrl, Key.from_char("c"), _event(EventKind.CTRL_C))
    kb.add_binding(ctrl, Key.from_char("d"), _event(EventKind.CTRL_D))
    kb.add_binding(ctrl, Key.from_char("l"), _event(EventKind.CLEAR_SCREEN))
    kb.add_binding(ctrl, Key.from_char("r"), _event(EventKind.SEARCH_HISTORY))
    kb.add_binding(ctrl, Key.from_char("o"), _event(EventKind.OPEN_EDITOR))


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, Home/End and their Ctrl variants, plus Ctrl-A/E/P/N."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    up = _until_found(_event(EventKind.MENU_UP), _event(EventKind.UP))
    down = _until_found(_event(EventKind.MENU_DOWN), _event(EventKind.DOWN))
    left = _until_found(_event(EventKind.MENU_LEFT), _event(EventKind.LEFT))
    right = _until_found(
        _event(EventKind.HISTORY_HINT_COMPLETE),
        _event(EventKind.MENU_RIGHT),
        _event(EventKind.RIGHT),
    )
    word_right = _until_found(
        _event(EventKind.HISTORY_HINT_WORD_COMPLETE),
        _edit(EditKind.MOVE_WORD_RIGHT),
    )
    line_end = _until_found(
        _event(EventKind.HISTORY_HINT_COMPLETE),
        _edit(EditKind.MOVE_TO_LINE_END),
    )

    kb.add_binding(none, Key.UP, up)
    kb.add_binding(none, Key.DOWN, down)
    kb.add_binding(none, Key.LEFT, left)
    kb.add_binding(none, Key.RIGHT, right)

    kb.add_binding(ctrl, Key.LEFT, _edit(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(ctrl, Key.RIGHT, word_right)

    kb.add_binding(none, Key.HOME, _edit(EditKind.MOVE_TO_LINE_START))
    kb.add_binding(ctrl, Key.from_char("a"), _edit(EditKind.MOVE_TO_LINE_START))
    kb.add_binding(none, Key.END, line_end)
    kb.add_binding(ctrl, Key.from_char("e"), line_end)

    kb.add_binding(ctrl, Key.HOME, _edit(EditKind.MOVE_TO_START))
    kb.add_binding(ctrl, Key.END, _edit(EditKind.MOVE_TO_END))

    kb.add_binding(ctrl, Key.from_char("p"), up)
    kb.add_binding(ctrl, Key.from_char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace and their word-wise variants."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    kb.add_binding(none, Key.BACKSPACE, _edit(EditKind.BACKSPACE))
    kb.add_binding(none, Key.DELETE, _edit(EditKind.DELETE))
    kb.add_binding(ctrl, Key.BACKSPACE, _edit(EditKind.BACKSPACE_WORD))
    kb.add_binding(ctrl, Key.DELETE, _edit(EditKind.DELETE_WORD))
    # Base commands should not affect the cut buffer
    kb.add_binding(ctrl, Key.from_char("h"), _edit(EditKind.BACKSPACE))
    kb.add_binding(ctrl, Key.from_char("w"), _edit(EditKind.BACKSPACE_WORD))


def default_vi_normal_keybindings() -> Keybindings:
    """Default bindings for vi normal mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    # Backspace and Delete as vi does it
    kb.add_binding(KeyModifiers.NONE, Key.BACKSPACE, _edit(EditKind.MOVE_LEFT))
    kb.add_binding(KeyModifiers.NONE, Key.DELETE, _edit(EditKind.DELETE))
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """Default bindings for vi insert mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    return kb