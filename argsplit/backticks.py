"""Classification of backtick runs."""

from __future__ import annotations

from .constants import MAX_CODE_WIDTH
from .models import BacktickRun


def resolve_backtick_run(
    run_length: int, open_width: int = 0, max_width: int = MAX_CODE_WIDTH
) -> BacktickRun:
    """Decide what a run of consecutive unescaped backticks does.

    A run shorter than the width of the open code group cannot close it and is
    literal content. Otherwise the open group closes, and whatever remains is
    divided into units of `max_width` backticks. Units pair up into empty,
    self-closed code groups. An unpaired unit opens a new group of `max_width`
    and the leftover backticks become its first characters; with no unpaired
    unit the leftover backticks open a group of their own width.

    Args:
        run_length: Number of backticks in the run.
        open_width: Width of the code group currently open, 0 when none is.
        max_width: Largest number of backticks forming one delimiter.

    Returns:
        BacktickRun: How the run affects the scanner.

    Examples:
        resolve_backtick_run(1)  # opens a group of width 1
        resolve_backtick_run(1, open_width=2)  # one literal backtick
        resolve_backtick_run(8)  # one empty group, then opens width 2
    """
    if open_width and run_length < open_width:
        return BacktickRun(literal=run_length)

    remaining = run_length - open_width
    units, leftover = divmod(remaining, max_width)
    complete_groups, unpaired = divmod(units, 2)

    if unpaired:
        return BacktickRun(
            closes=bool(open_width),
            complete_groups=complete_groups,
            opens=max_width,
            carried=leftover,
        )
    return BacktickRun(
        closes=bool(open_width),
        complete_groups=complete_groups,
        opens=leftover,
    )
