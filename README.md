# lineedit

This is the core of an interactive line editor. It has no terminal I/O of
its own. It turns terminal events (key presses, pastes, resizes) into editor
events and edit commands. You can build a prompt on top of whatever terminal
library you prefer.

## What is inside

- `lineedit.enums` defines the terminal events: `KeyEvent`, `Key`,
  `KeyModifiers`, `KeyEventKind`, `MouseEvent`, `ResizeEvent`,
  `FocusGained`, `FocusLost` and `PasteEvent`. It also defines the editing
  vocabulary:
  - `EditCommand` with its `EditKind` and `edit_type()`.
  - `ReedlineEvent` with its `EventKind`.
  - `Signal`, which records how a line read ended.
  - `UndoBehavior.create_undo_point_after()`, which handles undo grouping.

  `ReedlineRawEvent.convert_from()` drops key releases and turns key repeats
  into presses.
- `lineedit.keybindings` provides the following:
  - `Keybindings`, which maps `(KeyModifiers, Key)` combinations to events.
  - `edit_bind()`.
  - The shared default bindings: `add_common_control_bindings`,
    `add_common_navigation_bindings` and `add_common_edit_bindings`.
  - `default_vi_normal_keybindings()` and `default_vi_insert_keybindings()`.
  - The `EditMode` interface and `EditModeKind`.
  - `CursorConfig` and `CursorStyle`.
- `lineedit.emacs` provides the `Emacs` edit mode and
  `default_emacs_keybindings()`.
- `lineedit.vi` provides the modal `Vi` edit mode. It supports:
  - Insert and normal modes.
  - An optional two-key alternative to Esc.
  - Counts, `d`/`c` operators with motions, `dd`/`cc` and `r`.
  - `f`/`t`/`F`/`T` searches, repeated with `;` and `,`.
  - `.` to repeat the last command.

  Its parser lives in `lineedit.vi_parser` (`parse`, `ParsedViSequence`),
  `lineedit.vi_command` (`Command`, `parse_command`) and `lineedit.vi_motion`
  (`Motion`, `ViCharSearch`, `parse_motion`).
- `lineedit.hinting` provides `is_whitespace_str()` and
  `get_first_token()`. Use them to accept a hint one word at a time.
- `lineedit.highlighter` provides `ExampleHighlighter` and
  `SimpleMatchHighlighter`. Both return a list of `(Style, text)` pieces.
- `lineedit.external_printer` provides `ExternalPrinter`. It is a bounded
  queue that other threads can use to send lines to print while a line is
  being edited.

## Example

```python
from lineedit.emacs import Emacs
from lineedit.enums import Key, KeyEvent, KeyModifiers, ReedlineRawEvent

mode = Emacs()
raw = ReedlineRawEvent.convert_from(KeyEvent(Key.from_char("l"), KeyModifiers.CONTROL))
print(mode.parse_event(raw))   # ClearScreen
```

Vi mode starts in insert mode. After Esc, the keys `2`, `d`, `w` produce
one `MULTIPLE` event that holds two `CutWordRightToNext` edits:

```python
from lineedit.vi import Vi
from lineedit.enums import Key, KeyEvent, ReedlineRawEvent

vi = Vi()
for key in (Key.ESC, Key.from_char("2"), Key.from_char("d"), Key.from_char("w")):
    event = vi.parse_event(ReedlineRawEvent.convert_from(KeyEvent(key)))
print(event.kind, event.args)
```

## What it does not do

The package does not do any of the following:

- Read from or draw to the terminal.
- Hold an edit buffer or apply `EditCommand`s to text.
- Keep or search a history.
- Offer completion menus or a history-based hinter.
- Open an external editor.

It stops at producing events and commands. The program that embeds it
carries them out.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```