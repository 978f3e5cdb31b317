"""PostReview — write a review together with the rating it depends on.

The whole check-and-write runs inside the handler's unit of work:

1. If a rating value is supplied, the (album, author) rating is upserted.
   Otherwise an existing rating is required.
2. A listener may hold only one review per album.
3. The review is added.

Nothing in between yields control, and the rating and the review commit or
roll back together, so two concurrent posts for the same pair cannot both
pass the rating check and both write.
"""

import structlog
from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from album_reviews.domain import album_reviews
from album_reviews.errors import RatingConflict, ReviewAlreadyExists
from album_reviews.rating.rating import find_rating, rate_album
from album_reviews.review.review import Review

logger = structlog.get_logger(__name__)


@album_reviews.command(part_of="Review")
class PostReview:
    album_id = Identifier(required=True)
    author_id = Identifier(required=True)
    content = Text(required=True)
    rating = Float()


@album_reviews.command_handler(part_of=Review)
class PostReviewHandler:
    @handle(PostReview)
    def post_review(self, command):
        if command.rating is not None:
            rate_album(
                album_id=command.album_id,
                rater_id=command.author_id,
                value=command.rating,
            )
        elif find_rating(command.album_id, command.author_id) is None:
            raise RatingConflict(command.album_id, command.author_id)

        repo = current_domain.repository_for(Review)
        existing = repo._dao.query.filter(
            album_id=str(command.album_id),
            author_id=str(command.author_id),
        ).all()
        if existing.items:
            raise ReviewAlreadyExists(
                album_id=str(command.album_id),
                author_id=str(command.author_id),
            )

        review = Review.post(
            album_id=command.album_id,
            author_id=command.author_id,
            content=command.content,
            rating=command.rating,
        )
        repo.add(review)

        logger.info(
            "Review posted",
            review_id=str(review.id),
            album_id=str(command.album_id),
            author_id=str(command.author_id),
            with_rating=command.rating is not None,
        )
        return str(review.id)
