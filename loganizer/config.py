"""Loading of the JSON file that lists the logs to analyse."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, List


class ConfigError(Exception):
    """The configuration file could not be read or parsed."""


@dataclass(frozen=True)
class LogConfig:
    """One log file entry of the configuration."""

    id: str = ""
    path: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "LogConfig":
        """Build an entry from a decoded JSON object.

        Keys are matched case-insensitively, unknown keys are ignored and
        missing or null values are left empty.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"cannot use {type(data).__name__} as a log configuration entry"
            )
        names = [f.name for f in fields(cls)]
        values: dict[str, str] = {}
        for name in names:
            if name in data:
                value = data[name]
            else:
                matches = [v for k, v in data.items() if str(k).lower() == name]
                if not matches:
                    continue
                value = matches[-1]
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"field {name!r} must be a string, not {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)


def load_config(config_path: str) -> List[LogConfig]:
    """Read a JSON array of log entries from ``config_path``."""
    try:
        with open(config_path, encoding="utf-8") as fh:
            text = fh.read()
    except OSError as exc:
        raise ConfigError(f"failed to open config file: {exc}") from exc

    try:
        document, _ = json.JSONDecoder().raw_decode(text.lstrip())
        if document is None:
            return []
        if not isinstance(document, list):
            raise ConfigError(
                f"expected a JSON array, got {type(document).__name__}"
            )
        return [LogConfig.from_dict(item) for item in document]
    except (ValueError, ConfigError) as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc