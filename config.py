from __future__ import annotations

from dataclasses import dataclass, field
import os
import re


DEFAULT_LISTEN_HOST = "0.0.0.0"

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_UNITS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str | float | int) -> float:
    """Parse ``1m``, ``90s``, ``1h30m`` or a bare number of seconds."""
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip().lower()
    if not text:
        raise ValueError("empty duration")
    try:
        return float(text)
    except ValueError:
        pass
    total = 0.0
    position = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()
    if position != len(text):
        raise ValueError(f"invalid duration: {value!r}")
    return total


def parse_listen(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {address!r}")
    return host or DEFAULT_LISTEN_HOST, int(port)


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    return int(raw) if raw else None


def _optional_duration(name: str) -> float | None:
    raw = os.getenv(name)
    return parse_duration(raw) if raw else None


@dataclass(slots=True)
class EngineSettings:
    command: str = field(default_factory=lambda: os.getenv("COMMAND", "/usr/bin/trans"))
    default_engine: str = field(default_factory=lambda: os.getenv("DEFAULT_ENGINE", "google"))
    preferred_engine: str = field(default_factory=lambda: os.getenv("PREFERRED_ENGINE", "google"))
    timeout: float | None = field(default_factory=lambda: _optional_duration("ENGINE_TIMEOUT"))


@dataclass(slots=True)
class NotificationSettings:
    tg_token: str | None = field(default_factory=lambda: os.getenv("TG_TOKEN"))
    tg_chat_id: int | None = field(default_factory=lambda: _optional_int("TG_CHAT_ID"))
    interval: float = field(default_factory=lambda: parse_duration(os.getenv("NOTIFICATION_INTERVAL", "1m")))


@dataclass(slots=True)
class AppSettings:
    engine: EngineSettings = field(default_factory=EngineSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    redis_url: str = field(default_factory=lambda: os.getenv("REDIS_URL", "redis://redis/1"))
    listen: str = field(default_factory=lambda: os.getenv("LISTEN", ":8888"))


SETTINGS = AppSettings()
