"""Domain events for the Rating aggregate."""

from protean.fields import DateTime, Float, Identifier

from album_reviews.domain import album_reviews


@album_reviews.event(part_of="Rating")
class AlbumRated:
    """A listener rated an album, or changed an earlier rating."""

    __version__ = "v1"

    rating_id = Identifier(required=True)
    album_id = Identifier(required=True)
    rater_id = Identifier(required=True)
    value = Float(required=True)
    rated_at = DateTime(required=True)
