"""Configuration loading and validation.

Loads ``settings.toml`` and validates all fields when a plugin starts,
so a typo in a link policy or channel prefix list is reported once at
load time rather than silently changing every message later.

The validated config is exposed as a :class:`Settings` dataclass with
typed fields for each section: ``markup``, ``channels`` and ``logging``.
Every section is optional; missing values fall back to the defaults
below.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from chatbot_text.errors import ActionableError
from chatbot_text.markup import LinkPolicy
from chatbot_text.patterns import (
    DEFAULT_CHANNEL_MAX_LENGTH,
    DEFAULT_CHANNEL_PREFIXES,
    channel_pattern,
)

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class MarkupConfig:
    """HTML conversion settings from ``[markup]``."""

    link_policy: LinkPolicy | None = None


@dataclass
class ChannelConfig:
    """Channel name syntax from ``[channels]``."""

    prefixes: str = DEFAULT_CHANNEL_PREFIXES
    max_length: int = DEFAULT_CHANNEL_MAX_LENGTH

    def pattern(self) -> re.Pattern[str]:
        """Compile the channel-name pattern for these settings."""
        return channel_pattern(self.prefixes, self.max_length)


@dataclass
class LoggingConfig:
    """Logging settings from ``[logging]``."""

    level: str = "INFO"
    log_dir: str = ""


@dataclass
class Settings:
    """Top-level validated configuration."""

    markup: MarkupConfig = field(default_factory=MarkupConfig)
    channels: ChannelConfig = field(default_factory=ChannelConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~chatbot_text.errors.ActionableError`:
      - CONFIG if the file is missing
      - PARSE if the TOML is malformed
      - VALIDATION if field values are unknown or out of range

    Returns a fully validated :class:`Settings` instance.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy from config/settings.toml",
        )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    return _validate(data)


def _validate(data: dict[str, object]) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- markup section ------------------------------------------------------
    markup_data = _optional_section(data, "markup")

    raw_policy = markup_data.get("link_policy")
    link_policy: LinkPolicy | None = None
    if raw_policy is not None:
        try:
            link_policy = LinkPolicy(str(raw_policy).lower())
        except ValueError:
            choices = ", ".join(p.value for p in LinkPolicy)
            raise ActionableError.validation(
                field_name="markup.link_policy",
                reason=f"'{raw_policy}' is not one of: {choices}",
                suggestion="Set [markup].link_policy to a known policy or remove it",
            ) from None

    # -- channels section ----------------------------------------------------
    channels_data = _optional_section(data, "channels")

    prefixes = str(channels_data.get("prefixes", DEFAULT_CHANNEL_PREFIXES))
    if not prefixes:
        raise ActionableError.validation(
            field_name="channels.prefixes",
            reason="must contain at least one prefix character",
            suggestion='Set [channels].prefixes to e.g. "#&"',
        )

    max_length = int(channels_data.get("max_length", DEFAULT_CHANNEL_MAX_LENGTH))  # type: ignore[call-overload]
    if max_length < 2:
        raise ActionableError.validation(
            field_name="channels.max_length",
            reason=f"is {max_length} — must be >= 2",
            suggestion="Set [channels].max_length to the server's CHANNELLEN (usually 50)",
        )

    # -- logging section -----------------------------------------------------
    logging_data = _optional_section(data, "logging")

    level = str(logging_data.get("level", "INFO")).upper()
    if level not in _LOG_LEVELS:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not one of: {', '.join(_LOG_LEVELS)}",
            suggestion=f"Set [logging].level to one of {', '.join(_LOG_LEVELS)}",
        )

    return Settings(
        markup=MarkupConfig(link_policy=link_policy),
        channels=ChannelConfig(prefixes=prefixes, max_length=max_length),
        logging=LoggingConfig(level=level, log_dir=str(logging_data.get("log_dir", ""))),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str) -> dict[str, object]:
    """Return a top-level section, ``{}`` if absent, or raise CONFIG if not a table."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
