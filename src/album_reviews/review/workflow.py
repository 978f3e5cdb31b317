"""ReviewWorkflow — read, write, and delete reviews.

Inputs arrive as primitives from the transport layer, including the author's
identity. Failures surface as ``album_reviews.errors`` types; nothing is
retried and no write is compensated.
"""

import asyncio
from dataclasses import dataclass

import structlog

from album_reviews.albums.port import AlbumData, AlbumDataProvider
from album_reviews.errors import (
    AlbumUnavailable,
    DeletionFailed,
    InvalidContent,
    InvalidRating,
    MissingRating,
    RatingConflict,
    ReviewNotFound,
    ReviewUnavailable,
    StoreUnavailable,
)
from album_reviews.rating.gate import RatingGate
from album_reviews.rating.rating import is_valid_rating_value
from album_reviews.review.review import Review
from album_reviews.stores.port import ReviewStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReviewWithAlbum:
    album_data: AlbumData
    review: Review


class ReviewWorkflow:
    def __init__(
        self,
        rating_gate: RatingGate,
        review_store: ReviewStore,
        album_provider: AlbumDataProvider,
    ) -> None:
        self.rating_gate = rating_gate
        self.review_store = review_store
        self.album_provider = album_provider

    # -------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------
    async def _fetch_album(self, album_id):
        try:
            return await self.album_provider.fetch(album_id)
        except Exception as exc:
            logger.warning("Album fetch failed", album_id=album_id, error=repr(exc))
            raise AlbumUnavailable(album_id=album_id) from exc

    async def _fetch_review(self, review_id):
        try:
            return await self.review_store.find_by_id(review_id)
        except Exception as exc:
            logger.warning("Review fetch failed", review_id=review_id, error=repr(exc))
            raise ReviewUnavailable(review_id=review_id) from exc

    async def get(self, album_id: str, review_id: str) -> ReviewWithAlbum:
        """Fetch a review together with the metadata of the album it reviews."""
        album_data, review = await asyncio.gather(
            self._fetch_album(album_id),
            self._fetch_review(review_id),
            return_exceptions=True,
        )
        if isinstance(album_data, BaseException):
            raise album_data
        if isinstance(review, BaseException):
            raise review

        if review is None or str(review.album_id) != str(album_id):
            raise ReviewNotFound(album_id=album_id, review_id=review_id)

        return ReviewWithAlbum(album_data=album_data, review=review)

    # -------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------
    async def create(self, author_id: str, album_id: str, content: str | None, rating_value: float | None = None):
        """Post a review, creating the rating in the same write when one is supplied."""
        if not isinstance(content, str) or not content.strip():
            raise InvalidContent()
        if rating_value is not None and not is_valid_rating_value(rating_value):
            raise InvalidRating(rating=rating_value)

        try:
            await self.rating_gate.ensure_rating_for(album_id, author_id, rating_value)
            return await self.review_store.create(author_id, album_id, content, rating_value)
        except RatingConflict as exc:
            raise MissingRating(album_id=album_id, author_id=author_id) from exc

    async def delete(self, review_id: str, album_id: str | None = None) -> None:
        """Delete a review. A failed delete and a missing review are reported alike.

        With ``album_id``, a review of another album counts as missing.
        """
        try:
            deleted = await self.review_store.delete(review_id, album_id=album_id)
        except StoreUnavailable as exc:
            raise DeletionFailed(review_id=review_id, reason="store_error") from exc

        if not deleted:
            logger.warning("Nothing deleted", review_id=review_id)
            raise DeletionFailed(review_id=review_id, reason="not_found")
