"""Emacs-style parsing of terminal input."""

from __future__ import annotations

from lineedit.enums import (
    EditCommand,
    EditKind,
    EventKind,
    FocusGained,
    FocusLost,
    Key,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ReedlineEvent,
    ReedlineRawEvent,
    ResizeEvent,
)
from lineedit.keybindings import (
    EditMode,
    EditModeKind,
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    edit_bind,
)

_INSERTING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _edit(kind: EditKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def _until_found(*events: ReedlineEvent) -> ReedlineEvent:
    return ReedlineEvent(EventKind.UNTIL_FOUND, events)


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def default_emacs_keybindings() -> Keybindings:
    """The default emacs key bindings."""
    ctrl, alt = KeyModifiers.CONTROL, KeyModifiers.ALT
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)

    # Could be common, but in vi Enter also changes the mode
    kb.add_binding(KeyModifiers.NONE, Key.ENTER, ReedlineEvent(EventKind.ENTER))

    word_right = _until_found(
        ReedlineEvent(EventKind.HISTORY_HINT_WORD_COMPLETE),
        _edit(EditKind.MOVE_WORD_RIGHT),
    )

    # Ctrl moves
    kb.add_binding(
        ctrl,
        Key.from_char("b"),
        _until_found(ReedlineEvent(EventKind.MENU_LEFT), ReedlineEvent(EventKind.LEFT)),
    )
    kb.add_binding(
        ctrl,
        Key.from_char("f"),
        _until_found(
            ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE),
            ReedlineEvent(EventKind.MENU_RIGHT),
            ReedlineEvent(EventKind.RIGHT),
        ),
    )
    # Undo/redo
    kb.add_binding(ctrl, Key.from_char("g"), _edit(EditKind.REDO))
    kb.add_binding(ctrl, Key.from_char("z"), _edit(EditKind.UNDO))
    # Cutting
    kb.add_binding(ctrl, Key.from_char("y"), _edit(EditKind.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(ctrl, Key.from_char("w"), _edit(EditKind.CUT_WORD_LEFT))
    kb.add_binding(ctrl, Key.from_char("k"), _edit(EditKind.CUT_TO_END))
    kb.add_binding(ctrl, Key.from_char("u"), _edit(EditKind.CUT_FROM_START))
    # Edits
    kb.add_binding(ctrl, Key.from_char("t"), _edit(EditKind.SWAP_GRAPHEMES))

    # Alt moves
    kb.add_binding(alt, Key.LEFT, _edit(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(alt, Key.RIGHT, word_right)
    kb.add_binding(alt, Key.from_char("b"), _edit(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(alt, Key.from_char("f"), word_right)
    # Alt edits
    kb.add_binding(alt, Key.DELETE, _edit(EditKind.DELETE_WORD))
    kb.add_binding(alt, Key.BACKSPACE, _edit(EditKind.BACKSPACE_WORD))
    kb.add_binding(alt, Key.from_char("m"), _edit(EditKind.BACKSPACE_WORD))
    # Alt cutting
    kb.add_binding(alt, Key.from_char("d"), _edit(EditKind.CUT_WORD_RIGHT))
    # Case changes
    kb.add_binding(alt, Key.from_char("u"), _edit(EditKind.UPPERCASE_WORD))
    kb.add_binding(alt, Key.from_char("l"), _edit(EditKind.LOWERCASE_WORD))
    kb.add_binding(alt, Key.from_char("c"), _edit(EditKind.CAPITALIZE_CHAR))

    return kb


class Emacs(EditMode):
    """Parses terminal events like an emacs-style editor."""

    def __init__(self, keybindings: Keybindings | None = None) -> None:
        self.keybindings = (
            keybindings if keybindings is not None else default_emacs_keybindings()
        )

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.event
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent(EventKind.MOUSE)
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent(EventKind.RESIZE, inner.width, inner.height)
        if isinstance(inner, (FocusGained, FocusLost)):
            return ReedlineEvent(EventKind.NONE)
        if isinstance(inner, PasteEvent):
            text = inner.text.replace("\r\n", "\n").replace("\r", "\n")
            return edit_bind(EditCommand(EditKind.INSERT_STRING, text))
        raise TypeError(f"unknown terminal event: {inner!r}")

    def _parse_key(self, key_event: KeyEvent) -> ReedlineEvent:
        modifier, code = key_event.modifiers, key_event.code
        if not code.is_char:
            found = self.keybindings.find_binding(modifier, code)
            return found if found is not None else ReedlineEvent(EventKind.NONE)

        # Mixed modifiers (e.g. AltGr as Ctrl+Alt) come from non-US keyboards
        c = code.char if modifier == KeyModifiers.NONE else _ascii_lower(code.char)
        found = self.keybindings.find_binding(modifier, Key.from_char(c))
        if found is not None:
            return found
        if modifier in _INSERTING_MODIFIERS:
            if modifier == KeyModifiers.SHIFT:
                c = _ascii_upper(c)
            return edit_bind(EditCommand(EditKind.INSERT_CHAR, c))
        return ReedlineEvent(EventKind.NONE)

    def edit_mode(self) -> EditModeKind:
        return EditModeKind.EMACS