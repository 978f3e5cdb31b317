"""Tests for the Comment aggregate."""

import pytest
from album_reviews.comment.comment import Comment
from album_reviews.comment.events import CommentPosted
from protean.exceptions import ValidationError


class TestCommentPost:
    def test_post_sets_fields(self):
        comment = Comment.post(review_id="R1", author_id="U2", content="Agreed!")
        assert str(comment.review_id) == "R1"
        assert str(comment.author_id) == "U2"
        assert comment.content == "Agreed!"
        assert comment.posted_at is not None

    def test_blank_content_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Comment.post(review_id="R1", author_id="U2", content="  ")
        assert "Comment content cannot be empty" in str(exc.value)

    def test_post_raises_comment_posted(self):
        comment = Comment.post(review_id="R1", author_id="U2", content="Agreed!")
        event = comment._events[0]
        assert isinstance(event, CommentPosted)
        assert event.comment_id == str(comment.id)
        assert event.review_id == "R1"
        assert CommentPosted.__version__ == "v1"
