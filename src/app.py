"""Album Reviews FastAPI application.

Processes commands synchronously via HTTP.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# PROTEAN_ENV selects the config overlay from domain.toml.
from album_reviews.domain import album_reviews

album_reviews.init()

from album_reviews.api.app import create_app  # noqa: E402

app = create_app()
