from __future__ import annotations

import logging

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import OuiRegistry
from ..io.oui_txt import load_oui_file
from .config import ServiceConfig

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig | None = None, registry: OuiRegistry | None = None) -> FastAPI:
    """Load the registry (unless one is given) and build the full app.

    Raises RegistryLoadError when the configured source cannot be read; the
    caller is expected to abort startup.
    """

    cfg = config or ServiceConfig.from_env()
    if registry is None:
        logger.info("Loading OUI registry from %s", cfg.source)
        registry = load_oui_file(cfg.source)
    return create_api_app(registry, cors_origins=list(cfg.cors_origins))
