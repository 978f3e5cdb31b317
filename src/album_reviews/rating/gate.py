"""RatingGate — a review needs a rating by the same listener.

The gate is the early, user-facing check. The authoritative check is
repeated by the review store inside the write itself (see
``album_reviews.review.posting``), so a rating that vanishes between the two
still cannot produce an orphaned review.
"""

import structlog

from album_reviews.errors import RatingConflict
from album_reviews.stores.port import RatingStore

logger = structlog.get_logger(__name__)


class RatingGate:
    def __init__(self, rating_store: RatingStore) -> None:
        self.rating_store = rating_store

    async def ensure_rating_for(self, album_id: str, user_id: str, supplied_rating_value: float | None = None) -> bool:
        """Check that a review by ``user_id`` on ``album_id`` will be backed by a rating.

        Returns ``True`` when the supplied value must be written alongside the
        review, ``False`` when an existing rating already backs it.

        Raises ``RatingConflict`` when no value is supplied and none exists.
        ``StoreUnavailable`` from the existence check propagates.
        """
        if supplied_rating_value is not None:
            return True

        if await self.rating_store.exists(album_id, user_id):
            return False

        logger.info("Review rejected for missing rating", album_id=album_id, user_id=user_id)
        raise RatingConflict(album_id, user_id)
