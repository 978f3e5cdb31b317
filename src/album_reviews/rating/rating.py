"""Rating aggregate — one listener's score for one album.

At most one Rating exists per (album, rater) pair. Rating the same album
again updates the existing Rating instead of adding a second one; see
``rate_album`` for the lookup-then-upsert used by every writer.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier
from protean.utils.globals import current_domain

from album_reviews.domain import album_reviews
from album_reviews.rating.events import AlbumRated

MIN_RATING = 0.0
MAX_RATING = 10.0


def is_valid_rating_value(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return MIN_RATING <= value <= MAX_RATING


@album_reviews.aggregate
class Rating:
    album_id = Identifier(required=True)
    rater_id = Identifier(required=True)
    value = Float(required=True)
    rated_at = DateTime()

    @invariant.post
    def value_must_be_in_range(self):
        if self.value is not None and not is_valid_rating_value(self.value):
            raise ValidationError({"value": [f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}"]})

    @classmethod
    def rate(cls, album_id, rater_id, value):
        """Record a first rating of an album by a listener."""
        rating = cls(album_id=album_id, rater_id=rater_id, value=value)
        rating._record(value)
        return rating

    def change(self, value):
        """Replace the score of an existing rating."""
        self.value = value
        self._record(value)

    def _record(self, value):
        now = datetime.now(UTC)
        self.rated_at = now
        self.raise_(
            AlbumRated(
                rating_id=str(self.id),
                album_id=str(self.album_id),
                rater_id=str(self.rater_id),
                value=value,
                rated_at=now,
            )
        )


def find_rating(album_id, rater_id) -> Rating | None:
    """Return the rating a listener gave an album, if any."""
    repo = current_domain.repository_for(Rating)
    existing = repo._dao.query.filter(
        album_id=str(album_id),
        rater_id=str(rater_id),
    ).all()
    return existing.items[0] if existing.items else None


def rate_album(album_id, rater_id, value) -> Rating:
    """Create or update the (album, rater) rating and stage it for persistence.

    Must run inside a unit of work (a command handler) so the lookup and the
    write are committed together.
    """
    rating = find_rating(album_id, rater_id)
    if rating is None:
        rating = Rating.rate(album_id=album_id, rater_id=rater_id, value=value)
    else:
        rating.change(value)

    current_domain.repository_for(Rating).add(rating)
    return rating
