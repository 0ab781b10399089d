"""
FastAPI application for Tasknote
Run with: uvicorn tasknote.main:app
"""
from fastapi import FastAPI

from .api.routes import tasks_router
from .utils.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Tasknote", description="Personal task lists with filters, reminders and categories")
    app.include_router(tasks_router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
