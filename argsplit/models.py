"""Data models for argsplit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class GroupKind(Enum):
    """How an argument was delimited in the original text.

    Attributes:
        UNSET: Nothing buffered since the last argument ended. Never appears
            on a finalized token.
        PLAIN: Bare word separated by whitespace.
        QUOTED: Span delimited by double quotes.
        CODE: Span delimited by one or more backticks.
    """

    UNSET = auto()
    PLAIN = auto()
    QUOTED = auto()
    CODE = auto()


@dataclass(frozen=True)
class Token:
    """A single finalized argument.

    Attributes:
        content: Decoded text with delimiters stripped and escapes resolved.
        kind: Grouping used for the argument.
        start_offset: Index in the original text where the argument's
            delimiter, escape, or first character begins.
        width: Number of backticks delimiting a `CODE` token, 0 otherwise.
    """

    content: str
    kind: GroupKind
    start_offset: int
    width: int = 0

    @property
    def is_plain(self) -> bool:
        return self.kind is GroupKind.PLAIN

    @property
    def is_quoted(self) -> bool:
        return self.kind is GroupKind.QUOTED

    @property
    def is_code(self) -> bool:
        return self.kind is GroupKind.CODE


@dataclass
class ScanState:
    """Mutable state threaded through one call to the splitter.

    Attributes:
        kind: Group currently being accumulated.
        buffer: Characters of the argument under construction.
        start: Offset where the current group started.
        escaped: True while the next character is escaped.
        escape_start: Offset of the backslash that set `escaped`.
        matched: Backtick width of the open code group, 0 when unknown.
        pending: Consecutive unescaped backticks not yet classified.
        tokens: Arguments finalized so far.
    """

    kind: GroupKind = GroupKind.UNSET
    buffer: list[str] = field(default_factory=list)
    start: int = 0
    escaped: bool = False
    escape_start: int = 0
    matched: int = 0
    pending: int = 0
    tokens: list[Token] = field(default_factory=list)


@dataclass(frozen=True)
class BacktickRun:
    """Outcome of classifying one run of backticks.

    Attributes:
        literal: Backticks appended as content of the open group because the
            run is too short to close it.
        closes: Whether the run closes the open code group.
        complete_groups: Empty code groups opened and closed within the run.
        opens: Width of the code group left open after the run, 0 for none.
        carried: Backticks that become the first content of the new group.
    """

    literal: int = 0
    closes: bool = False
    complete_groups: int = 0
    opens: int = 0
    carried: int = 0
