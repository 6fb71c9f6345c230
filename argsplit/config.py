"""Configuration loading and management."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

MAX_INPUT_LENGTH_ENV_VAR = "ARGSPLIT_MAX_INPUT_LENGTH"
OUTPUT_FORMATS = ("plain", "json")


@dataclass
class SplitConfig:
    """Configuration for splitting text into arguments.

    Attributes:
        max_code_width: Largest number of backticks that form one code
            delimiter. Longer runs are divided into groups of this width.
        max_input_length: Maximum input length in characters, or None for
            no limit.
        output_format: Rendering used by the command line (``"plain"`` or
            ``"json"``).

    Examples:
        SplitConfig(max_code_width=3, output_format="json")
    """

    max_code_width: int = 3

    # Limits
    max_input_length: int | None = None

    # Output
    output_format: str = "plain"


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_code_width` must be a positive integer")
    """


def load_config(search_path: Path) -> SplitConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.argsplit]`` table from `pyproject.toml` and the ``[argsplit]``
    or ``[tool.argsplit]`` table from `.argsplit.toml` when present. TOML files
    that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        SplitConfig: Loaded configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If a table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("scripts"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "argsplit")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".argsplit.toml",
            table_paths=[("argsplit",), ("tool", "argsplit")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return SplitConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> SplitConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> SplitConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return SplitConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_split_config(config: SplitConfig) -> None:
    """Validate the fields of a `SplitConfig` that affect splitting.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the code width or the input limit is not a positive
            integer. An input limit of None is accepted.
    """
    limits = {
        "max_code_width": config.max_code_width,
        **(
            {"max_input_length": config.max_input_length}
            if config.max_input_length is not None
            else {}
        ),
    }
    _ensure_integers(limits)
    _ensure_positive(limits)


def validate_config(config: SplitConfig) -> None:
    """Validate a `SplitConfig` instance, including command-line output settings.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If numeric limits are invalid or the output format is
            unsupported.
    """
    validate_split_config(config)

    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"`output_format` must be one of: {', '.join(OUTPUT_FORMATS)}")


def apply_overrides(config: SplitConfig, **overrides: object) -> SplitConfig:
    """Apply override values to a `SplitConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        SplitConfig: Updated configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `SplitConfig`.

    Examples:
        updated = apply_overrides(config, output_format="json")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def get_max_input_length(default: int | None) -> int | None:
    """Resolve the maximum input length, honouring `ARGSPLIT_MAX_INPUT_LENGTH`.

    Args:
        default: Fallback value when the environment variable is unset.

    Returns:
        int | None: Maximum input length in characters, or None for no limit.

    Raises:
        ConfigError: If the environment value is not a positive integer.
    """
    env_value = os.environ.get(MAX_INPUT_LENGTH_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_length = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_LENGTH_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ConfigError(error_message) from error

    if max_length <= 0:
        raise ConfigError(f"{MAX_INPUT_LENGTH_ENV_VAR} must be a positive integer, got {max_length}.")

    return max_length


def build_config(search_path: Path, **overrides: object) -> SplitConfig:
    """Load, override, and validate configuration.

    The environment limit is applied on top of file values; explicit overrides
    win over both.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        SplitConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), output_format="json")
    """
    config = load_config(search_path)
    config = replace(config, max_input_length=get_max_input_length(config.max_input_length))
    try:
        config = apply_overrides(config, **overrides)
    except TypeError as error:
        raise ConfigError(str(error)) from error
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
