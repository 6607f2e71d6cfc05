from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ..core.registry import OuiRegistry
from .routes import mount_oui_api


def create_api_app(registry: OuiRegistry, *, cors_origins: list[str] | None = None) -> FastAPI:
    """Build the HTTP app around an already-loaded registry.

    The registry is stored on `app.state` and never replaced; routes only read it.
    """

    app = FastAPI(title="ouiserve", version="0.1.0")
    app.state.registry = registry

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_origins),
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    def root() -> str:
        return "app is ok!"

    @app.get("/healthz")
    def healthz(request: Request) -> dict:
        reg = request.app.state.registry
        return {"ok": True, "entries": len(reg)}

    mount_oui_api(app)

    return app
