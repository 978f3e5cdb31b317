"""Shared BDD fixtures for the Album Reviews domain."""

import asyncio

import pytest
from album_reviews.errors import ReviewsError


@pytest.fixture()
def error():
    """Container for captured core errors."""
    return {"exc": None}


@pytest.fixture()
def run():
    """Drive a workflow coroutine to completion, capturing core errors."""

    def _run(coro, error):
        try:
            return asyncio.run(coro)
        except ReviewsError as exc:
            error["exc"] = exc
            return None

    return _run
