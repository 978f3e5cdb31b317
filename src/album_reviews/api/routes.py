"""FastAPI routes for the Album Reviews bounded context.

Reads and review writes go through the core workflows; standalone ratings
and comments are plain Protean commands. The caller's identity travels in
the request body; no session state is consulted.
"""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from album_reviews.albums import get_album_provider
from album_reviews.api.schemas import (
    AlbumSchema,
    CommentPageResponse,
    CommentSchema,
    CreateReviewRequest,
    IdResponse,
    PostCommentRequest,
    RateAlbumRequest,
    ReviewSchema,
    ReviewWithAlbumResponse,
    StatusResponse,
)
from album_reviews.comment.pager import CommentPager
from album_reviews.comment.posting import PostComment
from album_reviews.rating.gate import RatingGate
from album_reviews.rating.rate import RateAlbum
from album_reviews.review.workflow import ReviewWorkflow
from album_reviews.stores.repository_adapter import (
    RepositoryCommentStore,
    RepositoryRatingStore,
    RepositoryReviewStore,
)

album_router = APIRouter(prefix="/albums", tags=["reviews"])


def _review_workflow() -> ReviewWorkflow:
    return ReviewWorkflow(
        rating_gate=RatingGate(RepositoryRatingStore()),
        review_store=RepositoryReviewStore(),
        album_provider=get_album_provider(),
    )


@album_router.get("/{album_id}/reviews/{review_id}", response_model=ReviewWithAlbumResponse)
async def get_review(album_id: str, review_id: str) -> ReviewWithAlbumResponse:
    """Fetch a review with its album's metadata."""
    result = await _review_workflow().get(album_id, review_id)
    return ReviewWithAlbumResponse(
        album_data=AlbumSchema(**result.album_data.to_dict()),
        review=ReviewSchema.from_review(result.review),
    )


@album_router.post("/{album_id}/reviews", status_code=201, response_model=ReviewSchema)
async def create_review(album_id: str, body: CreateReviewRequest) -> ReviewSchema:
    """Write a review, optionally rating the album in the same request."""
    review = await _review_workflow().create(
        author_id=body.author_id,
        album_id=album_id,
        content=body.content,
        rating_value=body.rating,
    )
    return ReviewSchema.from_review(review)


@album_router.delete("/{album_id}/reviews/{review_id}", response_model=StatusResponse)
async def delete_review(album_id: str, review_id: str) -> StatusResponse:
    """Delete a review."""
    await _review_workflow().delete(review_id, album_id=album_id)
    return StatusResponse()


@album_router.get("/{album_id}/reviews/{review_id}/comments", response_model=CommentPageResponse)
async def get_comments(
    album_id: str,
    review_id: str,
    offset: str | None = None,
    limit: str | None = None,
) -> CommentPageResponse:
    """Page through the comments on a review."""
    page = await CommentPager(RepositoryCommentStore()).get_page(review_id, offset, limit)
    return CommentPageResponse(
        comments=[CommentSchema.from_comment(comment) for comment in page.items],
        next=page.next,
        prev=page.prev,
        total=page.total,
    )


@album_router.post("/{album_id}/reviews/{review_id}/comments", status_code=201, response_model=IdResponse)
async def post_comment(album_id: str, review_id: str, body: PostCommentRequest) -> IdResponse:
    """Reply to a review."""
    command = PostComment(
        review_id=review_id,
        album_id=album_id,
        author_id=body.author_id,
        content=body.content,
    )
    comment_id = current_domain.process(command, asynchronous=False)
    return IdResponse(id=comment_id)


@album_router.put("/{album_id}/rating", response_model=IdResponse)
async def rate_album(album_id: str, body: RateAlbumRequest) -> IdResponse:
    """Rate an album, or change an earlier rating."""
    command = RateAlbum(
        album_id=album_id,
        rater_id=body.rater_id,
        value=body.value,
    )
    rating_id = current_domain.process(command, asynchronous=False)
    return IdResponse(id=rating_id)
