from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..core.entries import OuiEntry
from ..core.registry import OuiRegistry
from ..sdk.client import OuiClient
from .app import create_app
from .config import ServiceConfig, normalize_base_url
from .log import parse_log_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OuiServer:
    host: str
    port: int
    url: str
    _server: uvicorn.Server | None = field(default=None, repr=False, compare=False)
    _thread: threading.Thread | None = field(default=None, repr=False, compare=False)

    def client(self) -> OuiClient:
        return OuiClient(self.url.rstrip("/"))

    def resolve_vendor(self, address: str, *, timeout_s: float = 10.0) -> str | None:
        """Resolve an address through this server's HTTP API."""
        return self.client().resolve_vendor(address, timeout_s=timeout_s)

    def get_entry(self, prefix: str, *, timeout_s: float = 10.0) -> OuiEntry | None:
        return self.client().get_entry(prefix, timeout_s=timeout_s)

    def stop(self, *, timeout_s: float = 5.0) -> None:
        if self._server is None:
            return
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if an ouiserve server is reachable."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            data = r.json()
            return bool(data.get("ok"))
    except Exception:
        return False


def _wait_until_alive(base_url: str, *, timeout_s: float) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if _is_server_alive(base_url):
            return True
        time.sleep(0.05)
    return False


def run(
    *,
    host: str | None = None,
    port: int = 0,
    source: str | None = None,
    registry: OuiRegistry | None = None,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 10.0,
) -> OuiServer | OuiClient:
    """Start an ouiserve server in a background thread with a single Python call.

    Behavior:
    - If OUISERVE_URL is set, attach to that existing server (client mode)
      unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at
      http://{host}:{port}, attach to it unless `new_server=True`.
    - Otherwise load the registry (from `registry`, `source`, or
      OUISERVE_SOURCE) and start a new server, returning an `OuiServer`.

    `port=0` means "pick a free port", so there is nothing to attach to.
    Loading errors (RegistryLoadError) propagate before any thread starts.
    """

    log_level = parse_log_level(log_level)
    env = ServiceConfig.from_env()
    host = host or env.host

    # 1) Try attaching to an explicitly provided server.
    if env.attach_url and not new_server:
        if _is_server_alive(env.attach_url, timeout_s=connect_timeout_s):
            return OuiClient(env.attach_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            return OuiClient(default_url)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    cfg = ServiceConfig(
        source=source or env.source,
        host=host,
        port=port,
        log_level=log_level,
        access_log=access_log,
        cors_origins=env.cors_origins,
    )
    app = create_app(cfg, registry=registry)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host}:{port}/"
    if not _wait_until_alive(url.rstrip("/"), timeout_s=startup_timeout_s):
        server.should_exit = True
        raise RuntimeError(f"ouiserve did not become ready at {url} within {startup_timeout_s}s")

    logger.info("ouiserve listening on %s", url)
    return OuiServer(host=host, port=port, url=url, _server=server, _thread=thread)


def serve(config: ServiceConfig | None = None) -> None:
    """Load the registry and serve in the foreground until interrupted."""

    cfg = config or ServiceConfig.from_env()
    app = create_app(cfg)
    uvicorn.run(
        app,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level,
        access_log=cfg.access_log,
    )
