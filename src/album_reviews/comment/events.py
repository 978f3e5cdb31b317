"""Domain events for the Comment aggregate."""

from protean.fields import DateTime, Identifier, Text

from album_reviews.domain import album_reviews


@album_reviews.event(part_of="Comment")
class CommentPosted:
    """Someone replied to a review."""

    __version__ = "v1"

    comment_id = Identifier(required=True)
    review_id = Identifier(required=True)
    author_id = Identifier(required=True)
    content = Text(required=True)
    posted_at = DateTime(required=True)
