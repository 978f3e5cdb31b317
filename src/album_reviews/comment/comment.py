"""Comment aggregate — a reply attached to a review.

Comments are read back as a whole thread, oldest first, and paginated in
memory.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Text
from protean.utils.globals import current_domain

from album_reviews.comment.events import CommentPosted
from album_reviews.domain import album_reviews


@album_reviews.aggregate
class Comment:
    review_id = Identifier(required=True)
    author_id = Identifier(required=True)
    content = Text(required=True)
    posted_at = DateTime()

    @invariant.post
    def content_must_not_be_blank(self):
        if self.content is not None and len(self.content.strip()) == 0:
            raise ValidationError({"content": ["Comment content cannot be empty"]})

    @classmethod
    def post(cls, review_id, author_id, content):
        now = datetime.now(UTC)
        comment = cls(
            review_id=review_id,
            author_id=author_id,
            content=content,
            posted_at=now,
        )
        comment.raise_(
            CommentPosted(
                comment_id=str(comment.id),
                review_id=str(review_id),
                author_id=str(author_id),
                content=content,
                posted_at=now,
            )
        )
        return comment


def thread_for(review_id) -> list[Comment]:
    """All comments on a review in posting order."""
    repo = current_domain.repository_for(Comment)
    # Ties on posted_at keep insertion order
    return (
        repo._dao.query.filter(review_id=str(review_id))
        .order_by("posted_at")
        .limit(None)
        .all()
        .items
    )
