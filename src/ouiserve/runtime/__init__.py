from __future__ import annotations

from .app import create_app
from .config import ServiceConfig
from .log import configure_logging
from .server import OuiServer, run, serve

__all__ = ["create_app", "ServiceConfig", "configure_logging", "OuiServer", "run", "serve"]
