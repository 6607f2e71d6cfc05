from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..api.parsing import parse_origins
from .log import parse_log_level

DEFAULT_SOURCE = "oui.txt"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as ex:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from ex


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


@dataclass(frozen=True)
class ServiceConfig:
    """Process configuration.

    Values come from `OUISERVE_*` environment variables; CLI flags override them.
    """

    source: str = DEFAULT_SOURCE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"
    access_log: bool = True
    cors_origins: tuple[str, ...] = field(default_factory=tuple)
    attach_url: str = ""

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls(
            source=os.getenv("OUISERVE_SOURCE", "").strip() or DEFAULT_SOURCE,
            host=os.getenv("OUISERVE_HOST", "").strip() or DEFAULT_HOST,
            port=_env_int("OUISERVE_PORT", DEFAULT_PORT),
            log_level=parse_log_level(os.getenv("OUISERVE_LOG_LEVEL", "").strip() or "info"),
            access_log=_env_bool("OUISERVE_ACCESS_LOG", True),
            cors_origins=tuple(parse_origins(os.getenv("OUISERVE_CORS_ORIGINS"))),
            attach_url=normalize_base_url(os.getenv("OUISERVE_URL", "")),
        )
