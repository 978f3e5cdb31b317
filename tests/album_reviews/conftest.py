import pytest
from album_reviews.albums import reset_album_provider, set_album_provider
from album_reviews.albums.fake_adapter import FakeAlbumProvider
from album_reviews.albums.port import AlbumData
from album_reviews.comment.pager import CommentPager
from album_reviews.rating.gate import RatingGate
from album_reviews.review.workflow import ReviewWorkflow
from album_reviews.stores.repository_adapter import (
    RepositoryCommentStore,
    RepositoryRatingStore,
    RepositoryReviewStore,
)
from protean import current_domain
from protean.integrations.pytest import DomainFixture

KIND_OF_BLUE = AlbumData(
    album_id="A1",
    name="Kind of Blue",
    artists=("Miles Davis",),
    release_date="1959-08-17",
    total_tracks=5,
)


@pytest.fixture(scope="session")
def album_reviews_bed():
    from album_reviews.domain import album_reviews

    bed = DomainFixture(album_reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(album_reviews_bed):
    with album_reviews_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def album_provider():
    provider = FakeAlbumProvider(albums=[KIND_OF_BLUE])
    set_album_provider(provider)
    yield provider
    reset_album_provider()


@pytest.fixture()
def rating_store():
    return RepositoryRatingStore()


@pytest.fixture()
def review_store():
    return RepositoryReviewStore()


@pytest.fixture()
def comment_store():
    return RepositoryCommentStore()


@pytest.fixture()
def review_workflow(rating_store, review_store, album_provider):
    return ReviewWorkflow(
        rating_gate=RatingGate(rating_store),
        review_store=review_store,
        album_provider=album_provider,
    )


@pytest.fixture()
def comment_pager(comment_store):
    return CommentPager(comment_store)
