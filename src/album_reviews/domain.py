"""Album Reviews bounded context — Ratings, Reviews, and Comment threads.

Lets a listener rate an album, attach a review to it (a review always rides
on a rating by the same listener), read a review alongside the album's
metadata, and page through the comments left on a review.
"""

import structlog
from protean.domain import Domain

album_reviews = Domain(name="album_reviews")

logger = structlog.get_logger(__name__)
