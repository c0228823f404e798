"""
Jira Resume API - Main FastAPI application
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .routers import accounts, settings, reports


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Jira Resume API",
        description="Summarize Jira worklogs into a status report with OpenRouter.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # CORS middleware for a local front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Settings page
    app.include_router(accounts.router, prefix="/api/accounts", tags=["accounts"])
    app.include_router(settings.router, prefix="/api/settings", tags=["settings"])

    # Popup
    app.include_router(reports.router, prefix="/api/reports", tags=["reports"])

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "version": __version__}

    return app


# Create the default app instance
app = create_app()
