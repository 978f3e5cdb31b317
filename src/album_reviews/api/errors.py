"""Render core errors as HTTP responses.

Client faults carry the core's explanation. Dependency failures carry only
the generic retry message defined on the error class.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from album_reviews.errors import DependencyFailure, ReviewsError

logger = structlog.get_logger(__name__)


async def reviews_error_handler(request: Request, exc: ReviewsError) -> JSONResponse:
    if isinstance(exc, DependencyFailure):
        logger.error(
            "Dependency failure",
            path=request.url.path,
            error=type(exc).__name__,
            **exc.context,
        )
        message = type(exc).message
    else:
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content={"errors": [message]})


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers plus the ``ReviewsError`` renderer."""
    register_exception_handlers(app)
    app.add_exception_handler(ReviewsError, reviews_error_handler)
