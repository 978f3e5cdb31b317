"""Pydantic request/response schemas for the Album Reviews API.

These are separate from Protean commands (anti-corruption pattern). Request
fields the core validates itself (review content, offsets) are left loose
here so the core reports them with its own messages.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateReviewRequest(BaseModel):
    author_id: str
    content: str | None = None
    rating: float | None = None


class RateAlbumRequest(BaseModel):
    rater_id: str
    value: float = Field(ge=0, le=10)


class PostCommentRequest(BaseModel):
    author_id: str
    content: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class AlbumSchema(BaseModel):
    album_id: str
    name: str
    artists: list[str] = []
    release_date: str | None = None
    total_tracks: int | None = None


class ReviewSchema(BaseModel):
    review_id: str
    album_id: str
    author_id: str
    content: str
    rating: float | None = None
    posted_at: datetime | None = None

    @classmethod
    def from_review(cls, review) -> ReviewSchema:
        return cls(
            review_id=str(review.id),
            album_id=str(review.album_id),
            author_id=str(review.author_id),
            content=review.content,
            rating=review.rating,
            posted_at=review.posted_at,
        )


class ReviewWithAlbumResponse(BaseModel):
    album_data: AlbumSchema
    review: ReviewSchema


class CommentSchema(BaseModel):
    comment_id: str
    author_id: str
    content: str
    posted_at: datetime | None = None

    @classmethod
    def from_comment(cls, comment) -> CommentSchema:
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            content=comment.content,
            posted_at=comment.posted_at,
        )


class CommentPageResponse(BaseModel):
    comments: list[CommentSchema]
    next: int | None = None
    prev: int | None = None
    total: int


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
