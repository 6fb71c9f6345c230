"""Package-specific exception types."""

from __future__ import annotations

from .models import GroupKind


class SplitError(Exception):
    """Base class for errors raised while splitting arguments.

    Messages are rendered with a ``SplitError:`` prefix so they read the same
    wherever they are displayed.

    Args:
        message: Description of the failure.
    """

    prefix = "SplitError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class UnterminatedGroupError(SplitError, ValueError):
    """Raised when the input ends while a quoted or code group is still open.

    Args:
        kind: Kind of the group left open.
    """

    def __init__(self, kind: GroupKind):
        self.kind = kind
        super().__init__(f"Unfinished group (type = {kind.name.lower()})")


class InputTooLongError(SplitError, ValueError):
    """Raised when the input exceeds the configured maximum length.

    Args:
        length: Length of the rejected input in characters.
        max_input_length: Maximum allowed length in characters.
    """

    def __init__(self, length: int, max_input_length: int):
        self.length = length
        self.max_input_length = max_input_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Input of {self.length} characters exceeds maximum allowed length "
            f"of {self.max_input_length} characters"
        )


class InternalSplitError(SplitError, RuntimeError):
    """Raised when the scanner reaches a state it should never be in.

    This always indicates a defect in the splitter rather than bad input.
    """
