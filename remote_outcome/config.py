from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from remote_outcome.parsing.hint_patterns import PUSH_HINTS, HintPattern

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


@dataclass
class TelegramConfig:
    """Telegram bot used to deliver outcome notifications."""

    bot_token: str
    chat_id: int


@dataclass
class PresentationConfig:
    """Full-log rendering and retention settings."""

    max_log_chars: int = 3500
    terminal_cols: int = 160
    log_store_size: int = 100


@dataclass
class DebugConfig:
    """Debug mode settings."""

    enabled: bool = False
    trace: bool = False
    verbose: bool = False


@dataclass
class AppConfig:
    """Top-level application configuration aggregating all subsections."""

    hints: list[HintPattern] = field(default_factory=list)
    telegram: TelegramConfig | None = None
    presentation: PresentationConfig = field(default_factory=PresentationConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    def hint_table(self) -> tuple[HintPattern, ...]:
        """Built-in push hints followed by the configured ones."""
        return PUSH_HINTS + tuple(self.hints)


def _parse_hints(raw_hints) -> list[HintPattern]:
    if not isinstance(raw_hints, list):
        raise ConfigError("hints must be a list of {hint, label} entries")
    hints = []
    for i, entry in enumerate(raw_hints):
        if not isinstance(entry, dict):
            raise ConfigError(f"hints[{i}] must be a mapping")
        hint = entry.get("hint")
        label = entry.get("label")
        if not hint or not isinstance(hint, str):
            raise ConfigError(f"hints[{i}].hint is required")
        if not label or not isinstance(label, str):
            raise ConfigError(f"hints[{i}].label is required")
        hints.append(HintPattern(hint=hint, label=label))
    return hints


def _positive_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ConfigError(f"presentation.{key} must be a positive integer")
    return value


def _section(raw: dict, key: str) -> dict:
    # `or {}` fallback handles YAML null values for optional sections
    section = raw.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{key} must be a mapping")
    return section


def _parse_telegram(telegram_raw: dict) -> TelegramConfig | None:
    if not telegram_raw:
        return None
    if not telegram_raw.get("bot_token"):
        raise ConfigError("telegram.bot_token is required")
    if telegram_raw.get("chat_id") is None:
        raise ConfigError("telegram.chat_id is required")
    try:
        chat_id = int(telegram_raw["chat_id"])
    except (TypeError, ValueError) as exc:
        raise ConfigError("telegram.chat_id must be an integer") from exc
    return TelegramConfig(bot_token=str(telegram_raw["bot_token"]), chat_id=chat_id)


def load_config(path: str | None) -> AppConfig:
    """Load and validate application configuration from a YAML file.

    Every section is optional. ``telegram`` is only needed for delivering
    notifications, and when present must carry both ``bot_token`` and
    ``chat_id``.

    Args:
        path: Filesystem path to the YAML configuration file, or None for
            the built-in defaults.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        ConfigError: If the file does not exist, is not a mapping, or a
            section holds invalid values.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    # An empty file loads as None
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a YAML mapping")

    hints = _parse_hints(raw.get("hints") or [])

    telegram = _parse_telegram(_section(raw, "telegram"))
    presentation_raw = _section(raw, "presentation")
    debug_raw = _section(raw, "debug")

    logger.debug("Loaded config from %s", path)
    logger.debug("Configured %d extra push hints", len(hints))

    return AppConfig(
        hints=hints,
        telegram=telegram,
        presentation=PresentationConfig(
            max_log_chars=_positive_int(presentation_raw, "max_log_chars", 3500),
            terminal_cols=_positive_int(presentation_raw, "terminal_cols", 160),
            log_store_size=_positive_int(presentation_raw, "log_store_size", 100),
        ),
        debug=DebugConfig(
            enabled=bool(debug_raw.get("enabled", False)),
            trace=bool(debug_raw.get("trace", False)),
            verbose=bool(debug_raw.get("verbose", False)),
        ),
    )
