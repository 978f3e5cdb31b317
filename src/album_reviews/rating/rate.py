"""RateAlbum — rate an album without writing a review.

Repeated ratings of the same album by the same listener update the existing
Rating in place.
"""

import structlog
from protean.fields import Float, Identifier
from protean.utils.mixins import handle

from album_reviews.domain import album_reviews
from album_reviews.rating.rating import Rating, rate_album

logger = structlog.get_logger(__name__)


@album_reviews.command(part_of="Rating")
class RateAlbum:
    album_id = Identifier(required=True)
    rater_id = Identifier(required=True)
    value = Float(required=True)


@album_reviews.command_handler(part_of=Rating)
class RateAlbumHandler:
    @handle(RateAlbum)
    def rate_album(self, command):
        rating = rate_album(
            album_id=command.album_id,
            rater_id=command.rater_id,
            value=command.value,
        )
        logger.info(
            "Album rated",
            album_id=str(command.album_id),
            rater_id=str(command.rater_id),
            value=command.value,
        )
        return str(rating.id)
