"""Line-editor core: key events, edit commands, Emacs and Vi modes, hint tokens and highlighting."""

__version__ = "0.1.0"

__all__ = [
    "emacs",
    "enums",
    "external_printer",
    "highlighter",
    "hinting",
    "keybindings",
    "vi",
    "vi_command",
    "vi_motion",
    "vi_parser",
]