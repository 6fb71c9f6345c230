"""
argsplit: shell-like argument splitting for command-style text.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    argsplit 'deploy "staging east" `--dry-run`'

Library Usage:
    from argsplit import split

    args = split('deploy "staging east" `--dry-run`')
    command = args.shift()
    rest = args.restore()
"""

from .backticks import resolve_backtick_run
from .config import ConfigError, SplitConfig
from .exceptions import InputTooLongError, InternalSplitError, SplitError, UnterminatedGroupError
from .models import GroupKind, Token
from .sequence import TokenSequence
from .splitter import Splitter, split

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "split",
    "Splitter",
    "resolve_backtick_run",
    # Data models
    "GroupKind",
    "Token",
    "TokenSequence",
    # Configuration
    "SplitConfig",
    # Exceptions
    "ConfigError",
    "InputTooLongError",
    "InternalSplitError",
    "SplitError",
    "UnterminatedGroupError",
    # Version
    "__version__",
]
