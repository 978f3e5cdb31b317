"""Configurable fake album provider for development and testing.

Serves albums from an in-memory catalogue without any external calls. It can
be told to fail every request, to exercise the album-unavailable path.
"""

from album_reviews.albums.port import AlbumData, AlbumDataProvider


class AlbumLookupError(Exception):
    """The fake provider could not serve an album."""


class FakeAlbumProvider(AlbumDataProvider):
    """Configurable fake album provider."""

    def __init__(self, albums: list[AlbumData] | None = None) -> None:
        self.albums: dict[str, AlbumData] = {album.album_id: album for album in albums or []}
        self.should_succeed: bool = True
        self.failure_reason: str = "Album service unreachable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Album service unreachable") -> None:
        """Configure provider behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def add_album(self, album: AlbumData) -> None:
        self.albums[album.album_id] = album

    async def fetch(self, album_id: str) -> AlbumData:
        self.calls.append({"method": "fetch", "album_id": album_id})

        if not self.should_succeed:
            raise AlbumLookupError(self.failure_reason)
        try:
            return self.albums[album_id]
        except KeyError:
            raise AlbumLookupError(f"Unknown album {album_id}") from None
