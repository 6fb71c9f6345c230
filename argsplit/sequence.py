"""Array-like access to split arguments."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Token


class TokenSequence:
    """Ordered arguments together with the text they were split from.

    Besides list-style access, the sequence can restore any contiguous range
    of arguments to the exact original text, delimiters and escapes included.

    Args:
        original: Text the arguments were split from.
        tokens: Finalized arguments in scan order.
    """

    def __init__(self, original: str, tokens: Iterable[Token] = ()):
        self._original = original
        self._tokens = list(tokens)

    @property
    def original(self) -> str:
        """Text the arguments were split from."""
        return self._original

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Arguments with their metadata."""
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenSequence):
            return NotImplemented
        return self._original == other._original and self._tokens == other._tokens

    def __repr__(self) -> str:
        return f"TokenSequence(original={self._original!r}, tokens={self._tokens!r})"

    def length(self) -> int:
        return len(self._tokens)

    def token(self, i: int) -> Token | None:
        """Return the argument at index `i` with its metadata, or None."""
        if 0 <= i < len(self._tokens):
            return self._tokens[i]
        return None

    def get(self, i: int) -> str | None:
        """Return the content of argument `i`, or None when out of range.

        Examples:
            split("a b").get(1)  # "b"
            split("a b").get(5)  # None
        """
        token = self.token(i)
        return token.content if token is not None else None

    def restore(self, start: int = 0, end: int | None = None) -> str:
        """Restore the original text spanning arguments `start` to `end`.

        Indices are clamped to the argument range: a negative index counts as
        0, a `start` past the last argument gives an empty string, and an `end`
        that is absent or past the last argument extends to the end of the
        original text.

        Args:
            start: Index of the first argument to include.
            end: Index (exclusive) of the argument where the text stops.

        Returns:
            str: Verbatim substring of the original text.

        Examples:
            split('cmd "a b" c').restore(1)  # '"a b" c'
            split('cmd "a b" c').restore(0, 2)  # 'cmd "a b" '
        """
        start_offset = self._offset(max(start, 0))
        end_offset = len(self._original) if end is None else self._offset(max(end, 0))
        return self._original[start_offset:end_offset]

    def _offset(self, i: int) -> int:
        if i < len(self._tokens):
            return self._tokens[i].start_offset
        return len(self._original)

    def shift(self) -> str | None:
        """Remove and return the content of the first argument, or None when empty."""
        if not self._tokens:
            return None
        return self._tokens.pop(0).content

    def slice(self, start: int | None = None, end: int | None = None) -> TokenSequence:
        """Return a new sequence over arguments ``[start, end)``.

        The new sequence shares the original text; this sequence is unchanged.
        """
        return TokenSequence(self._original, self._tokens[start:end])
