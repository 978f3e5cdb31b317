"""PostComment — reply to an existing review.

When ``album_id`` is given, the review must belong to that album.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from album_reviews.comment.comment import Comment
from album_reviews.domain import album_reviews
from album_reviews.errors import ReviewNotFound
from album_reviews.review.review import Review

logger = structlog.get_logger(__name__)


@album_reviews.command(part_of="Comment")
class PostComment:
    review_id = Identifier(required=True)
    album_id = Identifier()
    author_id = Identifier(required=True)
    content = Text(required=True)


@album_reviews.command_handler(part_of=Comment)
class PostCommentHandler:
    @handle(PostComment)
    def post_comment(self, command):
        try:
            review = current_domain.repository_for(Review).get(command.review_id)
        except ObjectNotFoundError:
            raise ReviewNotFound(review_id=str(command.review_id))
        if command.album_id is not None and str(review.album_id) != str(command.album_id):
            raise ReviewNotFound(review_id=str(command.review_id), album_id=str(command.album_id))

        comment = Comment.post(
            review_id=command.review_id,
            author_id=command.author_id,
            content=command.content,
        )
        current_domain.repository_for(Comment).add(comment)

        logger.info(
            "Comment posted",
            comment_id=str(comment.id),
            review_id=str(command.review_id),
        )
        return str(comment.id)
