"""Review aggregate — a listener's written commentary on an album.

A Review only exists alongside a Rating of the same album by the same
listener. The pairing is enforced where reviews are written
(``album_reviews.review.posting``), because it spans two aggregates. The
rating supplied with the review, if any, is embedded for display.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Text

from album_reviews.domain import album_reviews
from album_reviews.review.events import ReviewPosted


@album_reviews.aggregate
class Review:
    album_id = Identifier(required=True)
    author_id = Identifier(required=True)
    content = Text(required=True)
    rating = Float()
    posted_at = DateTime()

    @invariant.post
    def content_must_not_be_blank(self):
        if self.content is not None and len(self.content.strip()) == 0:
            raise ValidationError({"content": ["Review content cannot be empty"]})

    @classmethod
    def post(cls, album_id, author_id, content, rating=None):
        """Post a new review."""
        now = datetime.now(UTC)

        review = cls(
            album_id=album_id,
            author_id=author_id,
            content=content,
            rating=rating,
            posted_at=now,
        )

        review.raise_(
            ReviewPosted(
                review_id=str(review.id),
                album_id=str(album_id),
                author_id=str(author_id),
                content=content,
                rating=rating,
                posted_at=now,
            )
        )

        return review
