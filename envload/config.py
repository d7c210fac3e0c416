from __future__ import annotations

import os
from dataclasses import dataclass


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _parse_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    env_file: str
    env_url: str
    override_keys: bool
    http_timeout: float
    log_level: str
    json_logs: bool

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            env_file=os.getenv("ENVLOAD_FILE", ".env"),
            env_url=os.getenv("ENVLOAD_URL", ""),
            override_keys=_parse_bool("ENVLOAD_OVERRIDE", False),
            http_timeout=_parse_float("ENVLOAD_HTTP_TIMEOUT", 10.0),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json_logs=_parse_bool("LOG_FORMAT_JSON", False),
        )
