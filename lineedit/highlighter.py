"""Syntax highlighting of the edit buffer into styled pieces of text."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, replace
from typing import List, Tuple


class Color(enum.Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"
    CYAN = "cyan"
    WHITE = "white"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_PURPLE = "light_purple"
    LIGHT_CYAN = "light_cyan"
    LIGHT_GRAY = "light_gray"
    DEFAULT = "default"


@dataclass(frozen=True)
class Style:
    """Text style; the builder methods return a modified copy."""

    foreground: Color | None = None
    is_bold: bool = False
    is_italic: bool = False
    is_underline: bool = False

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)


StyledText = List[Tuple[Style, str]]

DEFAULT_BUFFER_MATCH_COLOR = Color.GREEN
DEFAULT_BUFFER_NEUTRAL_COLOR = Color.WHITE
DEFAULT_BUFFER_NOTMATCH_COLOR = Color.RED


class Highlighter(abc.ABC):
    """Turns the buffer into styled pieces that together spell the buffer."""

    @abc.abstractmethod
    def highlight(self, line: str, cursor: int) -> StyledText:
        """Style ``line``; ``cursor`` is the insertion point."""


def _utf8_len(s: str) -> int:
    return len(s.encode("utf-8"))


class ExampleHighlighter(Highlighter):
    """Highlights the longest known command found in the line."""

    def __init__(self, external_commands: list[str] | None = None) -> None:
        self.external_commands = list(external_commands or [])
        self.match_color = DEFAULT_BUFFER_MATCH_COLOR
        self.notmatch_color = DEFAULT_BUFFER_NOTMATCH_COLOR
        self.neutral_color = DEFAULT_BUFFER_NEUTRAL_COLOR

    def highlight(self, line: str, cursor: int) -> StyledText:
        matches = [c for c in self.external_commands if c in line]
        if matches:
            longest = ""
            for item in matches:
                if _utf8_len(item) > _utf8_len(longest):
                    longest = item
            if longest:
                before, _, after = line.partition(longest)
            else:
                before, after = "", line
            return [
                (Style().fg(self.neutral_color), before),
                (Style().fg(self.match_color), longest),
                (Style().bold().fg(self.neutral_color), after),
            ]
        if not self.external_commands:
            return [(Style().fg(self.neutral_color), line)]
        return [(Style().fg(self.notmatch_color), line)]

    def change_colors(
        self, match_color: Color, notmatch_color: Color, neutral_color: Color
    ) -> None:
        self.match_color = match_color
        self.notmatch_color = notmatch_color
        self.neutral_color = neutral_color


class SimpleMatchHighlighter(Highlighter):
    """Highlights every exact, non-overlapping match of a query."""

    def __init__(self, query: str = "") -> None:
        self.query = query
        self.neutral_style = Style()
        self.match_style = Style().fg(Color.GREEN)

    def highlight(self, line: str, cursor: int) -> StyledText:
        if not self.query:
            return [(self.neutral_style, line)]
        styled: StyledText = []
        next_idx = 0
        idx = line.find(self.query)
        while idx != -1:
            if idx != next_idx:
                styled.append((self.neutral_style, line[next_idx:idx]))
            styled.append((self.match_style, self.query))
            next_idx = idx + len(self.query)
            idx = line.find(self.query, next_idx)
        if next_idx != len(line):
            styled.append((self.neutral_style, line[next_idx:]))
        return styled

    def _copy(self) -> SimpleMatchHighlighter:
        other = SimpleMatchHighlighter(self.query)
        other.neutral_style = self.neutral_style
        other.match_style = self.match_style
        return other

    def with_query(self, query: str) -> SimpleMatchHighlighter:
        other = self._copy()
        other.query = query
        return other

    def with_match_style(self, match_style: Style) -> SimpleMatchHighlighter:
        other = self._copy()
        other.match_style = match_style
        return other

    def with_neutral_style(self, neutral_style: Style) -> SimpleMatchHighlighter:
        other = self._copy()
        other.neutral_style = neutral_style
        return other