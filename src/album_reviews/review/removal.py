"""DeleteReview — remove a review outright.

Returns whether a review was removed; deleting an unknown review is not an
error at this level. When ``album_id`` is given, a review of any other album
is treated as unknown.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from album_reviews.domain import album_reviews
from album_reviews.review.review import Review

logger = structlog.get_logger(__name__)


@album_reviews.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    album_id = Identifier()


@album_reviews.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        try:
            review = repo.get(command.review_id)
        except ObjectNotFoundError:
            logger.info("Review to delete not found", review_id=str(command.review_id))
            return False

        if command.album_id is not None and str(review.album_id) != str(command.album_id):
            logger.info(
                "Review to delete belongs to another album",
                review_id=str(command.review_id),
                album_id=str(command.album_id),
            )
            return False

        repo._dao.delete(review)
        logger.info("Review deleted", review_id=str(command.review_id))
        return True
