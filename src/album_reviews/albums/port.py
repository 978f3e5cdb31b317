"""Album metadata port (abstract interface).

The album catalogue lives in an external music service. Reviews only ever
read from it, so the contract is a single idempotent fetch.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AlbumData:
    """Album metadata as returned by the provider."""

    album_id: str
    name: str
    artists: tuple[str, ...] = field(default_factory=tuple)
    release_date: str | None = None
    total_tracks: int | None = None

    def to_dict(self) -> dict:
        return {
            "album_id": self.album_id,
            "name": self.name,
            "artists": list(self.artists),
            "release_date": self.release_date,
            "total_tracks": self.total_tracks,
        }


class AlbumDataProvider(ABC):
    """Abstract album metadata provider."""

    @abstractmethod
    async def fetch(self, album_id: str) -> AlbumData:
        """Fetch metadata for one album. Raises on any failure."""
        ...
