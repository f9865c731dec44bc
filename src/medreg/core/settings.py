from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


def _env_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Server settings, read from `MEDREG_*` environment variables."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    access_log: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        port_raw = env.get("MEDREG_PORT", "").strip()
        try:
            port = int(port_raw) if port_raw else cls.port
        except ValueError as ex:
            raise ValueError(f"Invalid MEDREG_PORT: {port_raw!r}") from ex
        return cls(
            host=env.get("MEDREG_HOST", "").strip() or cls.host,
            port=port,
            log_level=(env.get("MEDREG_LOG_LEVEL", "").strip() or cls.log_level).upper(),
            access_log=_env_bool(env.get("MEDREG_ACCESS_LOG"), cls.access_log),
        )
