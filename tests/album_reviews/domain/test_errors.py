"""Tests for the error taxonomy: families decide how an error is reported."""

import pytest
from album_reviews.errors import (
    AlbumUnavailable,
    DeletionFailed,
    DependencyFailure,
    InvalidContent,
    InvalidInput,
    InvalidRating,
    InvalidRequest,
    InvariantViolation,
    MissingRating,
    NoComments,
    NotFound,
    OffsetOutOfRange,
    RatingConflict,
    ReviewAlreadyExists,
    ReviewNotFound,
    ReviewsError,
    ReviewUnavailable,
    StoreUnavailable,
)


class TestFamilies:
    @pytest.mark.parametrize(
        ("error_cls", "family", "status"),
        [
            (InvalidContent, InvalidInput, 400),
            (InvalidRating, InvalidInput, 400),
            (InvalidRequest, InvalidInput, 400),
            (OffsetOutOfRange, InvalidInput, 400),
            (MissingRating, InvariantViolation, 400),
            (ReviewAlreadyExists, InvariantViolation, 400),
            (NoComments, NotFound, 404),
            (ReviewNotFound, NotFound, 404),
            (AlbumUnavailable, DependencyFailure, 500),
            (ReviewUnavailable, DependencyFailure, 500),
            (StoreUnavailable, DependencyFailure, 500),
            (DeletionFailed, DependencyFailure, 500),
        ],
    )
    def test_family_and_status(self, error_cls, family, status):
        error = error_cls()
        assert isinstance(error, family)
        assert isinstance(error, ReviewsError)
        assert error.status_code == status

    def test_rating_conflict_is_internal(self):
        assert not issubclass(RatingConflict, ReviewsError)


class TestMessages:
    def test_default_message(self):
        assert str(NoComments()) == "There are no comments for this review."

    def test_context_is_kept(self):
        error = DeletionFailed(review_id="R1", reason="not_found")
        assert error.context == {"review_id": "R1", "reason": "not_found"}

    def test_dependency_messages_suggest_retry(self):
        for error_cls in (AlbumUnavailable, ReviewUnavailable, StoreUnavailable, DeletionFailed):
            assert "Please try again" in error_cls.message

    def test_missing_rating_explains_requirement(self):
        assert "a rating must be provided" in MissingRating().message
