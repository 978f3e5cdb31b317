"""Error taxonomy for the Album Reviews context.

Every error a caller can observe derives from ``ReviewsError``. The family
decides how the error is reported:

- ``InvalidInput`` / ``InvariantViolation``: client fault, the message is a
  human-readable explanation of what to fix.
- ``NotFound``: the requested thing does not exist.
- ``DependencyFailure``: a store or the album provider failed. Reported as a
  generic server fault; the cause is logged, never shown.

``RatingConflict`` is internal to the rating gate and is always translated
into ``MissingRating`` before it leaves a workflow.
"""

RETRY_SUFFIX = "Please try again or contact a site contributor."


class ReviewsError(Exception):
    """Base class for all errors raised by the Album Reviews core."""

    status_code = 500
    message = "An internal server error occurred. " + RETRY_SUFFIX

    def __init__(self, message: str | None = None, **context) -> None:
        self.message = message or self.message
        self.context = context
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Client input
# ---------------------------------------------------------------------------
class InvalidInput(ReviewsError):
    status_code = 400
    message = "The request is malformed."


class InvalidContent(InvalidInput):
    message = "A review must have non-empty content."


class InvalidRating(InvalidInput):
    message = "A rating must be a number between 0 and 10."


class InvalidRequest(InvalidInput):
    message = "Must send an offset and a limit with this request."


class OffsetOutOfRange(InvalidInput):
    message = "The given offset is out of range for the total number of items."


# ---------------------------------------------------------------------------
# Rating / review coupling
# ---------------------------------------------------------------------------
class InvariantViolation(ReviewsError):
    status_code = 400
    message = "The request would break a review invariant."


class MissingRating(InvariantViolation):
    message = (
        "To write a review, a rating must be provided in the creation request or already "
        "exist for this album by the user."
    )


class ReviewAlreadyExists(InvariantViolation):
    message = "You have already reviewed this album."


class RatingConflict(Exception):
    """No rating exists for the pair and none was supplied."""

    def __init__(self, album_id, user_id) -> None:
        self.album_id = album_id
        self.user_id = user_id
        super().__init__("review requires a rating to be supplied or pre-existing")


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class NotFound(ReviewsError):
    status_code = 404
    message = "The requested resource does not exist."


class NoComments(NotFound):
    message = "There are no comments for this review."


class ReviewNotFound(NotFound):
    message = "This review does not exist."


# ---------------------------------------------------------------------------
# Dependency failures
# ---------------------------------------------------------------------------
class DependencyFailure(ReviewsError):
    status_code = 500


class AlbumUnavailable(DependencyFailure):
    message = "Could not retrieve album data due to an internal server error. " + RETRY_SUFFIX


class ReviewUnavailable(DependencyFailure):
    message = "Could not retrieve review data due to an internal server error. " + RETRY_SUFFIX


class StoreUnavailable(DependencyFailure):
    message = "An internal server error occurred while accessing stored data. " + RETRY_SUFFIX


class DeletionFailed(DependencyFailure):
    message = "An internal server error occurred trying to delete this review. " + RETRY_SUFFIX
