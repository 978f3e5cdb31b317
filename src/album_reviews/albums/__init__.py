"""Process-wide album metadata source.

Review reads look albums up through whichever provider is installed here.
Until an adapter for a real music catalogue is installed, lookups are served
by a ``FakeAlbumProvider`` that knows no albums.
"""

from album_reviews.albums.fake_adapter import FakeAlbumProvider
from album_reviews.albums.port import AlbumDataProvider

_current_provider: AlbumDataProvider | None = None


def get_album_provider() -> AlbumDataProvider:
    """Return the installed provider, creating an empty fake on first use."""
    global _current_provider
    if _current_provider is None:
        _current_provider = FakeAlbumProvider()
    return _current_provider


def set_album_provider(provider: AlbumDataProvider) -> None:
    """Install the provider used for every subsequent album lookup."""
    global _current_provider
    _current_provider = provider


def reset_album_provider() -> None:
    global _current_provider
    _current_provider = None
