"""
Abstract interface for the remote blog backend.
"""

from abc import ABC, abstractmethod
from typing import Callable

from app.domain.models import BlogPost, MediaFile

# Called with (bytes_sent, bytes_total) as the multipart body goes out.
ProgressCallback = Callable[[int, int], None]


class BlogApiPort(ABC):
    """Port for listing, storing and deleting posts on the blog backend."""

    @abstractmethod
    async def list_posts(self) -> list[BlogPost]:
        """
        Fetch every post, in the order the backend returns them.

        Raises:
            TransportError: the request failed or the body was not parseable.
            RejectedRequest: the backend answered with a non-2xx status.
        """
        ...

    @abstractmethod
    async def store_post(
        self,
        title: str,
        description: str,
        media: MediaFile,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        """
        Upload a new post as multipart fields `title`, `description`, `media`.

        The response body is not consumed.
        """
        ...

    @abstractmethod
    async def delete_post(self, post_id: str) -> None:
        """Delete a post by id. The response body is not consumed."""
        ...

    async def aclose(self) -> None:
        """Release any underlying connection pool."""
        return None
