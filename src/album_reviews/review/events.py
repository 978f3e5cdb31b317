"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Float, Identifier, Text

from album_reviews.domain import album_reviews


@album_reviews.event(part_of="Review")
class ReviewPosted:
    """A listener posted a review of an album."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    album_id = Identifier(required=True)
    author_id = Identifier(required=True)
    content = Text(required=True)
    rating = Float()
    posted_at = DateTime(required=True)
