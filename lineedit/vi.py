"""Vi-style parsing of terminal input, with a normal and an insert mode."""

from __future__ import annotations

import enum

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
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
    edit_bind,
)
from lineedit.vi_parser import parse

_INSERTING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def _none() -> ReedlineEvent:
    return ReedlineEvent(EventKind.NONE)


def _insert_char(c: str) -> ReedlineEvent:
    return edit_bind(EditCommand(EditKind.INSERT_CHAR, c))


class ViMode(enum.Enum):
    NORMAL = "normal"
    INSERT = "insert"


class Vi(EditMode):
    """Parses terminal events like a vi-style editor.

    ``alternate_esc_seq`` is a pair of keys that, typed one after the other in
    insert mode, act like Esc (for example ``j`` then ``k``).
    """

    def __init__(
        self,
        insert_keybindings: Keybindings | None = None,
        normal_keybindings: Keybindings | None = None,
        alternate_esc_seq: tuple[Key, Key] | None = None,
        mode: ViMode = ViMode.INSERT,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self.alternate_esc_seq = (
            alternate_esc_seq if alternate_esc_seq is not None else (Key.NULL, Key.NULL)
        )
        self.mode = mode
        self.cache: list[str] = []
        self.previous: ReedlineEvent | None = None
        # last f, F, t, T motion, for ; and ,
        self.last_char_search = None
        self.most_recent_keycode: Key = Key.NULL

    def _exit_insert_mode(self) -> ReedlineEvent:
        self.most_recent_keycode = Key.NULL
        self.cache.clear()
        self.mode = ViMode.NORMAL
        return ReedlineEvent(
            EventKind.MULTIPLE,
            [ReedlineEvent(EventKind.ESC), ReedlineEvent(EventKind.REPAINT)],
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
            return _none()
        if isinstance(inner, PasteEvent):
            text = inner.text.replace("\r\n", "\n").replace("\r", "\n")
            return edit_bind(EditCommand(EditKind.INSERT_STRING, text))
        raise TypeError(f"unknown terminal event: {inner!r}")

    def _parse_key(self, key_event: KeyEvent) -> ReedlineEvent:
        code, modifiers = key_event.code, key_event.modifiers
        esc1, esc2 = self.alternate_esc_seq
        recent = self.most_recent_keycode

        if self.mode is ViMode.INSERT and modifiers == KeyModifiers.NONE:
            if code == esc2 and recent == esc1:
                return self._exit_insert_mode()
            if code == esc1:
                self.most_recent_keycode = code
                return _none()
            if (
                code.is_char
                and esc1.is_char
                and esc2.is_char
                and recent.is_char
                and code != esc2
                and recent == esc1
            ):
                # The first key of the sequence was typed text after all
                self.most_recent_keycode = code
                return ReedlineEvent(
                    EventKind.MULTIPLE,
                    [_insert_char(esc1.char), _insert_char(code.char)],
                )

        if code.is_char:
            if self.mode is ViMode.NORMAL:
                return self._parse_normal_char(modifiers, code.char)
            return self._parse_insert_char(modifiers, code.char)

        if modifiers == KeyModifiers.NONE and code == Key.ESC:
            return self._exit_insert_mode()
        if modifiers == KeyModifiers.NONE and code == Key.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent(EventKind.ENTER)

        bindings = (
            self.normal_keybindings
            if self.mode is ViMode.NORMAL
            else self.insert_keybindings
        )
        found = bindings.find_binding(modifiers, code)
        return found if found is not None else _none()

    def _parse_normal_char(self, modifiers: KeyModifiers, char: str) -> ReedlineEvent:
        c = _ascii_lower(char)
        found = self.normal_keybindings.find_binding(modifiers, Key.from_char(c))
        if found is not None:
            return found
        if modifiers not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return _none()

        self.cache.append(_ascii_upper(c) if modifiers == KeyModifiers.SHIFT else c)
        sequence = parse(self.cache)
        if not sequence.is_valid():
            self.cache.clear()
            return _none()
        if sequence.is_complete():
            if sequence.enters_insert_mode():
                self.mode = ViMode.INSERT
            result = sequence.to_reedline_event(self)
            self.cache.clear()
            return result
        return _none()

    def _parse_insert_char(self, modifiers: KeyModifiers, char: str) -> ReedlineEvent:
        # Mixed modifiers (e.g. AltGr as Ctrl+Alt) come from non-US keyboards
        c = char if modifiers == KeyModifiers.NONE else _ascii_lower(char)
        found = self.insert_keybindings.find_binding(modifiers, Key.from_char(c))
        if found is not None:
            return found
        if modifiers in _INSERTING_MODIFIERS:
            self.most_recent_keycode = Key.from_char(c)
            if modifiers == KeyModifiers.SHIFT:
                c = _ascii_upper(c)
            return _insert_char(c)
        return _none()

    def edit_mode(self) -> EditModeKind:
        if self.mode is ViMode.NORMAL:
            return EditModeKind.VI_NORMAL
        return EditModeKind.VI_INSERT