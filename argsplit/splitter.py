"""State machine that splits text into arguments."""

from __future__ import annotations

from collections.abc import Callable

from .backticks import resolve_backtick_run
from .config import SplitConfig, validate_split_config
from .constants import BACKTICK, ESCAPE, QUOTE, WHITESPACE
from .exceptions import InputTooLongError, InternalSplitError, UnterminatedGroupError
from .models import GroupKind, ScanState, Token
from .sequence import TokenSequence

_OPEN_KINDS = (GroupKind.UNSET, GroupKind.PLAIN)


class Splitter:
    """Split text into arguments grouped by whitespace, quotes, and backticks.

    A splitter keeps scan state only for the duration of one `split` call, so
    an instance can be reused sequentially but not reentered.

    Args:
        config: Configuration with the backtick width and input limit.
            Defaults to a new `SplitConfig`, which sets no input limit.
        warn: Callback receiving diagnostic messages, such as a dropped
            trailing backslash.
    """

    def __init__(
        self,
        config: SplitConfig | None = None,
        warn: Callable[[str], None] | None = None,
    ):
        self.config = config or SplitConfig()
        validate_split_config(self.config)
        self.warn = warn
        self._state: ScanState | None = None

    def split(self, text: str) -> TokenSequence:
        """Split `text` into a `TokenSequence`.

        Args:
            text: Text to split.

        Returns:
            TokenSequence: Arguments together with the original text.

        Raises:
            InputTooLongError: If a maximum length is configured and `text`
                exceeds it.
            UnterminatedGroupError: If a quoted or code group is still open at
                the end of the text.
            InternalSplitError: If the scanner reaches an inconsistent state.

        Examples:
            Splitter().split('say "hello world"').get(1)  # "hello world"
        """
        max_input_length = self.config.max_input_length
        if max_input_length is not None and len(text) > max_input_length:
            raise InputTooLongError(len(text), max_input_length)

        self._state = state = ScanState()
        try:
            for index, char in enumerate(text):
                self._consume(char, index)
            # None marks the end of input
            self._consume(None, len(text))

            if state.kind is not GroupKind.UNSET:
                raise UnterminatedGroupError(state.kind)
            return TokenSequence(text, state.tokens)
        finally:
            self._state = None

    def _consume(self, char: str | None, index: int) -> None:
        state = self._state
        if char == BACKTICK and not state.escaped and state.kind is not GroupKind.QUOTED:
            state.pending += 1
            return

        if state.pending:
            self._end_backtick_run(index)
        self._consume_normal(char, index)

    def _consume_normal(self, char: str | None, index: int) -> None:
        state = self._state

        if char is None:
            if state.escaped:
                state.escaped = False
                self._warn(f"Dropped trailing backslash at offset {state.escape_start}")
            if state.kind in _OPEN_KINDS:
                self._finalize()
            return

        if state.escaped:
            state.escaped = False
            self._append(char, state.escape_start)
        elif char == ESCAPE:
            state.escaped = True
            state.escape_start = index
        elif char == QUOTE:
            if state.kind is GroupKind.QUOTED:
                self._finalize()
            elif state.kind in _OPEN_KINDS:
                self._finalize()
                self._open(GroupKind.QUOTED, index)
            else:
                self._append(char, index)
        elif char in WHITESPACE:
            if state.kind in _OPEN_KINDS:
                self._finalize()
            else:
                self._append(char, index)
        else:
            self._append(char, index)

    def _end_backtick_run(self, index: int) -> None:
        state = self._state
        width = self.config.max_code_width

        if state.kind in _OPEN_KINDS:
            self._finalize()
        elif state.kind is GroupKind.CODE:
            if not state.matched:
                raise InternalSplitError(
                    "Parsing a code block, but unknown number of backticks to match."
                )
        else:
            raise InternalSplitError(
                f"Backticks are recorded but group is in unexpected state `{state.kind.name}`"
            )

        run = resolve_backtick_run(state.pending, state.matched, width)
        offset = index - state.pending
        state.pending = 0

        if run.literal:
            state.buffer.append(BACKTICK * run.literal)
            return

        if run.closes:
            offset += state.matched
            self._finalize()

        for _ in range(run.complete_groups):
            self._open(GroupKind.CODE, offset, width)
            self._finalize()
            offset += 2 * width

        if run.opens:
            self._open(GroupKind.CODE, offset, run.opens)
            state.buffer.append(BACKTICK * run.carried)

    def _open(self, kind: GroupKind, start: int, width: int = 0) -> None:
        state = self._state
        state.kind = kind
        state.start = start
        state.matched = width

    def _append(self, text: str, index: int) -> None:
        state = self._state
        if state.kind is GroupKind.UNSET:
            self._open(GroupKind.PLAIN, index)
        state.buffer.append(text)

    def _finalize(self) -> None:
        """Push the argument under construction, if any, and reset the group.

        Empty arguments are kept only when they were explicitly delimited.
        """
        state = self._state
        content = "".join(state.buffer)
        if content or state.kind in (GroupKind.QUOTED, GroupKind.CODE):
            state.tokens.append(Token(content, state.kind, state.start, state.matched))
        state.buffer.clear()
        state.kind = GroupKind.UNSET
        state.matched = 0

    def _warn(self, message: str) -> None:
        if self.warn is not None:
            self.warn(message)


def split(
    text: str,
    config: SplitConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> TokenSequence:
    """Split `text` into arguments with a fresh `Splitter`.

    Args:
        text: Text to split.
        config: Optional configuration.
        warn: Optional callback for diagnostic messages.

    Returns:
        TokenSequence: Arguments together with the original text.

    Raises:
        SplitError: If the text cannot be split.

    Examples:
        split("run `ls -la` now").get(1)  # "ls -la"
    """
    return Splitter(config, warn=warn).split(text)
