"""FastAPI application entry point for the Resume Ecosystem API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_ecosystem import __version__
from resume_ecosystem.api.errors import register_exception_handlers
from resume_ecosystem.api.routes import achievements, auth, health, integrations, resume

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from resume_ecosystem.data.db import init_db

    init_db()
    yield


app = FastAPI(
    title="Resume Ecosystem API",
    description="API for tracking achievements and keeping a generated resume in sync",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(achievements.router, prefix="/api")
app.include_router(resume.router, prefix="/api")
app.include_router(integrations.router, prefix="/api")


@app.get("/", tags=["health"])
def root() -> dict[str, object]:
    """List the endpoint groups served by the API."""
    return {
        "message": "Resume Ecosystem API",
        "version": __version__,
        "endpoints": {
            "auth": "/api/auth",
            "achievements": "/api/achievements",
            "resume": "/api/resume",
            "integrations": "/api/integrations",
        },
    }


def main() -> None:
    """Start the development server."""
    import uvicorn

    from resume_ecosystem.config import configure_logging, get_host, get_port, is_development

    configure_logging()
    uvicorn.run(
        "resume_ecosystem.api.main:app",
        host=get_host(),
        port=get_port(),
        reload=is_development(),
    )


if __name__ == "__main__":
    main()
