"""
Concrete implementation of BlogApiPort over HTTP using httpx.
"""

import logging
from typing import AsyncIterator
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.domain.errors import RejectedRequest, TransportError
from app.domain.models import BlogPost, MediaFile
from app.ports.blog_port import BlogApiPort, ProgressCallback

logger = logging.getLogger(__name__)

# Size of each slice of the multipart body handed to the transport.
UPLOAD_CHUNK_SIZE = 64 * 1024


class HttpxBlogAdapter(BlogApiPort):
    """Talks to the blog backend's getBlog / storeBlog / deleteBlog routes."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def list_posts(self) -> list[BlogPost]:
        response = await self._send("GET", "/getBlog")
        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(f"getBlog returned a non-JSON body: {exc}") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("blogs"), list):
            raise TransportError("getBlog response has no 'blogs' list")

        posts: list[BlogPost] = []
        for raw in payload["blogs"]:
            try:
                posts.append(BlogPost.model_validate(raw))
            except ValidationError as exc:
                logger.warning("Skipping malformed blog entry %r: %s", raw, exc)
        return posts

    async def store_post(
        self,
        title: str,
        description: str,
        media: MediaFile,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        # Let httpx encode the multipart body once, then stream it back out
        # in slices so every slice can be reported as sent.
        encoded = self._client.build_request(
            "POST",
            "/storeBlog",
            data={"title": title, "description": description},
            files={"media": (media.filename, media.data, media.content_type)},
        )
        body = encoded.read()
        headers = {
            "Content-Type": encoded.headers["Content-Type"],
            "Content-Length": str(len(body)),
        }
        await self._send(
            "POST",
            "/storeBlog",
            content=_iter_body(body, on_progress),
            headers=headers,
        )

    async def delete_post(self, post_id: str) -> None:
        await self._send("DELETE", f"/deleteBlog/{quote(post_id, safe='')}")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path} failed: {type(exc).__name__}: {exc}") from exc

        if response.is_error:
            raise RejectedRequest(
                response.status_code,
                f"{method} {path} rejected with status {response.status_code}",
            )
        return response


async def _iter_body(
    body: bytes, on_progress: ProgressCallback | None
) -> AsyncIterator[bytes]:
    total = len(body)
    if on_progress:
        on_progress(0, total)
    for start in range(0, total, UPLOAD_CHUNK_SIZE):
        chunk = body[start:start + UPLOAD_CHUNK_SIZE]
        yield chunk
        if on_progress:
            on_progress(start + len(chunk), total)
