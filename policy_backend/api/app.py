"""FastAPI application factory.

Routers
-------
    /health    — liveness probe
    /api       — tool listing and invocation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from policy_backend import __version__
from policy_backend.config import configure_logging
from policy_backend.api.routers import tools as tools_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="RGF Policy Advisor API",
        description=(
            "HTTP interface for the RGF car-insurance policy advisor. "
            "Exposes page extraction tools, the policy questionnaire "
            "and rule-based policy recommendations."
        ),
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "message": "RGF Policy Advisor is running"}

    app.include_router(tools_router.router, prefix="/api", tags=["tools"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn policy_backend.api.app:app --reload
app = create_app()
