"""Storage ports (abstract interfaces) used by the review workflows.

Every method is a coroutine. Implementations raise ``StoreUnavailable`` when
the backing store cannot complete a call; domain errors raised while writing
(``RatingConflict``, ``ReviewAlreadyExists``) pass through unchanged.
"""

from abc import ABC, abstractmethod


class RatingStore(ABC):
    @abstractmethod
    async def exists(self, album_id: str, user_id: str) -> bool:
        """Whether ``user_id`` has rated ``album_id``."""
        ...

    @abstractmethod
    async def create(self, album_id: str, user_id: str, value: float):
        """Create, or update, the rating of ``album_id`` by ``user_id``."""
        ...


class ReviewStore(ABC):
    @abstractmethod
    async def find_by_id(self, review_id: str):
        """Return the review, or ``None`` if there is no such review."""
        ...

    @abstractmethod
    async def create(self, author_id: str, album_id: str, content: str, rating_value: float | None = None):
        """Write a review and, when ``rating_value`` is given, its rating.

        The rating check and the write form one atomic operation: raises
        ``RatingConflict`` when no rating is supplied and none exists at
        write time.
        """
        ...

    @abstractmethod
    async def delete(self, review_id: str, album_id: str | None = None) -> bool:
        """Delete a review. Returns ``False`` if nothing was deleted.

        With ``album_id``, only a review of that album is deleted.
        """
        ...


class CommentStore(ABC):
    @abstractmethod
    async def find_all_by_review_id(self, review_id: str) -> list:
        """All comments on a review, oldest first."""
        ...
