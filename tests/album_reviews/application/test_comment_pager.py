"""Tests for CommentPager."""

import pytest
from album_reviews.comment.pager import CommentPager
from album_reviews.comment.posting import PostComment
from album_reviews.errors import InvalidRequest, NoComments, OffsetOutOfRange, StoreUnavailable
from album_reviews.review.posting import PostReview
from album_reviews.stores.port import CommentStore
from protean import current_domain


class RecordingCommentStore(CommentStore):
    def __init__(self, comments=(), unavailable=False):
        self.comments = list(comments)
        self.unavailable = unavailable
        self.calls = []

    async def find_all_by_review_id(self, review_id):
        self.calls.append(review_id)
        if self.unavailable:
            raise StoreUnavailable(store="comments")
        return list(self.comments)


@pytest.fixture()
def review_id():
    return current_domain.process(
        PostReview(album_id="A1", author_id="U1", content="Great", rating=5),
        asynchronous=False,
    )


@pytest.fixture()
def ten_comments(review_id):
    for i in range(1, 11):
        current_domain.process(
            PostComment(review_id=review_id, author_id="U2", content=f"c{i}"),
            asynchronous=False,
        )
    return review_id


class TestGetPage:
    @pytest.mark.asyncio
    async def test_second_page(self, comment_pager, ten_comments):
        page = await comment_pager.get_page(ten_comments, 1, 4)

        assert [c.content for c in page.items] == ["c5", "c6", "c7", "c8"]
        assert page.next == 2
        assert page.prev == 0
        assert page.total == 10

    @pytest.mark.asyncio
    async def test_string_parameters(self, comment_pager, ten_comments):
        page = await comment_pager.get_page(ten_comments, "0", "3")
        assert [c.content for c in page.items] == ["c1", "c2", "c3"]
        assert page.prev is None

    @pytest.mark.asyncio
    async def test_offset_out_of_range(self, comment_pager, ten_comments):
        with pytest.raises(OffsetOutOfRange):
            await comment_pager.get_page(ten_comments, 3, 5)

    @pytest.mark.asyncio
    async def test_no_comments_is_terminal(self, comment_pager, review_id):
        with pytest.raises(NoComments):
            await comment_pager.get_page(review_id, 0, 5)


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(("offset", "limit"), [(None, 5), (0, None), (-1, 5), (0, 0), ("x", 5)])
    async def test_invalid_parameters_rejected_before_store(self, offset, limit):
        store = RecordingCommentStore(comments=["c1"])
        with pytest.raises(InvalidRequest):
            await CommentPager(store).get_page("R1", offset, limit)
        assert store.calls == []


class TestStoreFailure:
    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        store = RecordingCommentStore(unavailable=True)
        with pytest.raises(StoreUnavailable):
            await CommentPager(store).get_page("R1", 0, 5)


class TestLongThread:
    @pytest.mark.asyncio
    async def test_pages_cover_every_comment(self, comment_pager, review_id):
        for i in range(150):
            current_domain.process(
                PostComment(review_id=review_id, author_id="U2", content=f"c{i}"),
                asynchronous=False,
            )

        contents = []
        offset = 0
        while offset is not None:
            page = await comment_pager.get_page(review_id, offset, 7)
            assert page.total == 150
            contents.extend(c.content for c in page.items)
            offset = page.next

        assert contents == [f"c{i}" for i in range(150)]

    @pytest.mark.asyncio
    async def test_last_page_past_one_hundred(self, comment_pager, review_id):
        for i in range(150):
            current_domain.process(
                PostComment(review_id=review_id, author_id="U2", content=f"c{i}"),
                asynchronous=False,
            )

        page = await comment_pager.get_page(review_id, 29, 5)

        assert [c.content for c in page.items] == ["c145", "c146", "c147", "c148", "c149"]
        assert page.next is None
        assert page.prev == 28
