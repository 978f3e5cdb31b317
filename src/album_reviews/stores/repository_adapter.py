"""Store adapters backed by the domain's Protean repositories.

Reads go straight to the repositories. Writes are dispatched as commands so
each one runs in its own unit of work. None of the adapter methods await
between reading and writing, so a write is never interleaved with another
request on the same event loop.
"""

from contextlib import contextmanager

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from album_reviews.comment.comment import thread_for
from album_reviews.errors import RatingConflict, ReviewsError, StoreUnavailable
from album_reviews.rating.rate import RateAlbum
from album_reviews.rating.rating import Rating, find_rating
from album_reviews.review.posting import PostReview
from album_reviews.review.removal import DeleteReview
from album_reviews.review.review import Review
from album_reviews.stores.port import CommentStore, RatingStore, ReviewStore

logger = structlog.get_logger(__name__)


@contextmanager
def store_call(store: str, operation: str, **context):
    """Translate any failure of the backing store into ``StoreUnavailable``."""
    try:
        yield
    except (ReviewsError, RatingConflict):
        raise
    except Exception as exc:
        logger.error(
            "Store call failed",
            store=store,
            operation=operation,
            error=repr(exc),
            **context,
        )
        raise StoreUnavailable(store=store, operation=operation) from exc


class RepositoryRatingStore(RatingStore):
    async def exists(self, album_id: str, user_id: str) -> bool:
        with store_call("ratings", "exists", album_id=album_id, user_id=user_id):
            return find_rating(album_id, user_id) is not None

    async def create(self, album_id: str, user_id: str, value: float) -> Rating:
        with store_call("ratings", "create", album_id=album_id, user_id=user_id):
            rating_id = current_domain.process(
                RateAlbum(album_id=album_id, rater_id=user_id, value=value),
                asynchronous=False,
            )
            return current_domain.repository_for(Rating).get(rating_id)


class RepositoryReviewStore(ReviewStore):
    async def find_by_id(self, review_id: str) -> Review | None:
        with store_call("reviews", "find_by_id", review_id=review_id):
            try:
                return current_domain.repository_for(Review).get(review_id)
            except ObjectNotFoundError:
                return None

    async def create(
        self,
        author_id: str,
        album_id: str,
        content: str,
        rating_value: float | None = None,
    ) -> Review:
        with store_call("reviews", "create", album_id=album_id, author_id=author_id):
            review_id = current_domain.process(
                PostReview(
                    album_id=album_id,
                    author_id=author_id,
                    content=content,
                    rating=rating_value,
                ),
                asynchronous=False,
            )
            return current_domain.repository_for(Review).get(review_id)

    async def delete(self, review_id: str, album_id: str | None = None) -> bool:
        with store_call("reviews", "delete", review_id=review_id):
            deleted = current_domain.process(
                DeleteReview(review_id=review_id, album_id=album_id),
                asynchronous=False,
            )
            return bool(deleted)


class RepositoryCommentStore(CommentStore):
    async def find_all_by_review_id(self, review_id: str) -> list:
        with store_call("comments", "find_all_by_review_id", review_id=review_id):
            return thread_for(review_id)
