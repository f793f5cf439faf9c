"""Parsing of whole vi key sequences: count, command, count, motion."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import chain
from typing import Any, Iterable

from lineedit.enums import EventKind, ReedlineEvent
from lineedit.vi_command import Command, CommandKind, parse_command
from lineedit.vi_motion import Motion, ParseResult, ParseStatus, ReedlineOption, parse_motion

_DIGITS = "0123456789"

_INSERT_COMMANDS = frozenset(
    {
        CommandKind.ENTER_VI_INSERT,
        CommandKind.ENTER_VI_APPEND,
        CommandKind.CHANGE_TO_LINE_END,
        CommandKind.APPEND_TO_END,
        CommandKind.PREPEND_TO_START,
        CommandKind.REWRITE_CURRENT_LINE,
        CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
        CommandKind.HISTORY_SEARCH,
    }
)


@dataclass(frozen=True)
class ParsedViSequence:
    multiplier: int | None
    command: Command | None
    count: int | None
    motion: ParseResult[Motion]

    def is_valid(self) -> bool:
        return not self.motion.is_invalid()

    def is_complete(self) -> bool:
        command, status = self.command, self.motion.status
        if command is None:
            return status is ParseStatus.VALID
        if command.kind is CommandKind.INCOMPLETE:
            return False
        if status is ParseStatus.VALID:
            return True
        if status is ParseStatus.INCOMPLETE:
            return not command.requires_motion()
        return False

    def _total_multiplier(self) -> int:
        # vim only considers the product of both counts
        return (self.multiplier or 1) * (self.count or 1)

    def _apply_multiplier(
        self, raw_events: list[ReedlineOption] | None
    ) -> ReedlineEvent:
        none = ReedlineEvent(EventKind.NONE)
        if raw_events is None:
            return none
        repeated = chain.from_iterable([raw_events] * self._total_multiplier())
        events = [
            event
            for event in (option.into_reedline_event() for option in repeated)
            if event is not None
        ]
        if not events or none in events:
            return none
        return ReedlineEvent(EventKind.MULTIPLE, events)

    def enters_insert_mode(self) -> bool:
        if self.command is None:
            return False
        kind, status = self.command.kind, self.motion.status
        if kind in _INSERT_COMMANDS:
            return status is ParseStatus.INCOMPLETE
        if kind is CommandKind.CHANGE:
            return status is ParseStatus.VALID
        return False

    def _remember(self, event: ReedlineEvent, vi_state: Any) -> ReedlineEvent:
        if event.kind is not EventKind.NONE:
            vi_state.previous = event
        return event

    def to_reedline_event(self, vi_state: Any) -> ReedlineEvent:
        """The editor event for the sequence; commands are remembered for ``.``."""
        command, motion = self.command, self.motion
        if command is not None:
            if self.count is None and motion.is_incomplete():
                event = self._apply_multiplier(command.to_reedline(vi_state))
                return self._remember(event, vi_state)
            if motion.is_valid():
                event = self._apply_multiplier(
                    command.to_reedline_with_motion(motion.value, vi_state)
                )
                return self._remember(event, vi_state)
            return ReedlineEvent(EventKind.NONE)
        if motion.is_valid():
            return self._apply_multiplier(motion.value.to_reedline(vi_state))
        return ReedlineEvent(EventKind.NONE)


def _parse_number(stream: deque[str]) -> int | None:
    if not stream or stream[0] not in _DIGITS or stream[0] == "0":
        return None
    count = 0
    while stream and stream[0] in _DIGITS:
        count = count * 10 + int(stream.popleft())
    return count


def parse(chars: Iterable[str]) -> ParsedViSequence:
    """Parse a vi key sequence such as ``2d3w``."""
    stream = deque(chars)
    multiplier = _parse_number(stream)
    command = parse_command(stream)
    count = _parse_number(stream)
    motion = parse_motion(
        stream, command.whole_line_char() if command is not None else None
    )
    return ParsedViSequence(multiplier, command, count, motion)