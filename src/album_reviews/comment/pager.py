"""CommentPager — one page of the comment thread on a review."""

import structlog

from album_reviews.errors import NoComments, OffsetOutOfRange
from album_reviews.pagination import InvalidRange, Page, paginate, validate_offset_and_limit
from album_reviews.stores.port import CommentStore

logger = structlog.get_logger(__name__)


class CommentPager:
    def __init__(self, comment_store: CommentStore) -> None:
        self.comment_store = comment_store

    async def get_page(self, review_id: str, offset, limit) -> Page:
        """Return page ``offset`` of the review's comments, ``limit`` per page.

        An empty thread raises ``NoComments`` and is not paginated.
        """
        offset, limit = validate_offset_and_limit(offset, limit)

        comments = await self.comment_store.find_all_by_review_id(review_id)
        if not comments:
            raise NoComments(review_id=review_id)

        try:
            return paginate(comments, offset, limit)
        except InvalidRange as exc:
            logger.info(
                "Comment offset out of range",
                review_id=review_id,
                offset=offset,
                limit=limit,
                total=len(comments),
            )
            raise OffsetOutOfRange(offset=offset, limit=limit) from exc
