from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ...core.registry import OuiRegistry
from ..parsing import parse_prefix_param
from ..serializers import entries_to_items, entry_to_item

logger = logging.getLogger(__name__)


def get_registry(request: Request) -> OuiRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        # The app factory always sets this; reaching here means a misconfigured app.
        raise HTTPException(status_code=503, detail="OUI registry not loaded")
    return registry


def mount_oui_api(app: FastAPI) -> None:
    @app.get("/oui")
    @app.get("/oui/", include_in_schema=False)
    def list_ouis(registry: OuiRegistry = Depends(get_registry)) -> list[dict[str, Any]]:
        return entries_to_items(registry.list_all())

    @app.get("/oui/{oui}")
    def get_oui(oui: str, registry: OuiRegistry = Depends(get_registry)) -> dict[str, Any]:
        entry = registry.get(parse_prefix_param(oui))
        if entry is None:
            raise HTTPException(status_code=404, detail="OUI not found")
        return entry_to_item(entry)

    @app.get("/mac/{address}", response_class=PlainTextResponse)
    def resolve_mac(address: str, registry: OuiRegistry = Depends(get_registry)) -> PlainTextResponse:
        vendor = registry.resolve(address)
        if vendor is None:
            logger.debug("No vendor for address %r", address)
            raise HTTPException(status_code=404, detail="Vendor not found")
        return PlainTextResponse(vendor)

    @app.get("/mac/{address}/entry")
    def resolve_mac_entry(address: str, registry: OuiRegistry = Depends(get_registry)) -> dict[str, Any]:
        entry = registry.lookup(address)
        if entry is None:
            raise HTTPException(status_code=404, detail="Vendor not found")
        return entry_to_item(entry)
