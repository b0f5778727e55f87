"""
workdays.config
~~~~~~~~~~~~~~~

YAML configuration.  String values may reference environment variables as
``${VAR}`` or ``${VAR:default}``::

    calendar:
      holidays_file: ${WORKDAYS_HOLIDAYS:}
      weekmask: [1, 1, 1, 1, 1, 0, 0]
    clock:
      stale_after_minutes: 20
    logging:
      level: INFO
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_ENV_RE = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _substitute_env_vars(value: str) -> str:
    return _ENV_RE.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), value)


def _process_config_values(obj: Any) -> Any:
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


@dataclass
class CalendarConfig:
    """An empty holidays_file selects the packaged table."""

    holidays_file: str = ""
    weekmask: list[int] = field(default_factory=lambda: [1, 1, 1, 1, 1, 0, 0])


@dataclass
class ClockConfig:
    stale_after_minutes: float = 20


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class Config:
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: str | Path) -> Config:
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _build_config(_process_config_values(raw))


def _build_config(raw: dict[str, Any]) -> Config:
    calendar_raw = raw.get("calendar") or {}
    clock_raw = raw.get("clock") or {}
    logging_raw = raw.get("logging") or {}

    return Config(
        calendar=CalendarConfig(
            holidays_file=calendar_raw.get("holidays_file", ""),
            weekmask=[int(w) for w in calendar_raw.get("weekmask", [1, 1, 1, 1, 1, 0, 0])],
        ),
        clock=ClockConfig(
            stale_after_minutes=float(clock_raw.get("stale_after_minutes", 20)),
        ),
        logging=LoggingConfig(
            level=logging_raw.get("level", "INFO"),
            format=logging_raw.get("format", DEFAULT_LOG_FORMAT),
        ),
    )
