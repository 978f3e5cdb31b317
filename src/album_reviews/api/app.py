"""FastAPI application factory for the Album Reviews context.

The domain must already be initialized; see ``src/app.py``.
"""

from fastapi import FastAPI, Request

from album_reviews.api.errors import register_error_handlers
from album_reviews.api.routes import album_router
from album_reviews.domain import album_reviews


def create_app() -> FastAPI:
    app = FastAPI(
        title="Album Reviews API",
        description="Album ratings, reviews, and review comments",
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Album Reviews domain context for each request."""
        with album_reviews.domain_context():
            return await call_next(request)

    app.include_router(album_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok", "domain": album_reviews.name}

    return app
