"""Constants used across the argsplit package."""

from __future__ import annotations

from .config import SplitConfig

DEFAULT_CONFIG = SplitConfig()

# Delimiters
BACKTICK = "`"
QUOTE = '"'
ESCAPE = "\\"
WHITESPACE = frozenset(" \t\n\r\f\v")

# Backtick groups are at most this wide unless configured otherwise
MAX_CODE_WIDTH = DEFAULT_CONFIG.max_code_width
