import os

# Settings are read at import time; give them a backend before anything loads.
os.environ.setdefault("BACKEND_URL", "http://backend.test")

import pytest

from app.adapters.notice_board_adapter import NoticeBoardAdapter
from app.domain.models import BlogPost, MediaFile
from app.ports.blog_port import BlogApiPort
from app.services.blog_manager import BlogManager


class FakeBlogApi(BlogApiPort):
    """In-memory stand-in for the blog backend."""

    def __init__(self, posts=None):
        self.posts = list(posts or [])
        self.calls = []
        self.fail_list = None
        self.fail_store = None
        self.fail_delete = None
        self.progress_steps = (0, 50, 100)
        self.after_progress = None
        self._next_id = 100

    async def list_posts(self):
        self.calls.append(("list",))
        if self.fail_list:
            raise self.fail_list
        return [BlogPost.model_validate(p) for p in self.posts]

    async def store_post(self, title, description, media, on_progress=None):
        self.calls.append(("store", title, description, media.filename))
        for step in self.progress_steps:
            if on_progress:
                on_progress(step, 100)
            if self.after_progress:
                self.after_progress()
        if self.fail_store:
            raise self.fail_store
        self._next_id += 1
        self.posts.append({
            "_id": str(self._next_id),
            "title": title,
            "description": description,
            "mediaUrl": f"/uploads/{media.filename}",
            "mediaType": media.media_type.value,
        })

    async def delete_post(self, post_id):
        self.calls.append(("delete", post_id))
        if self.fail_delete:
            raise self.fail_delete
        self.posts = [p for p in self.posts if p["_id"] != post_id]

    def network_calls(self, kind=None):
        return [c for c in self.calls if kind is None or c[0] == kind]


POST_A = {
    "_id": "1",
    "title": "A",
    "description": "d",
    "mediaUrl": "u1",
    "mediaType": "image",
}


@pytest.fixture
def api():
    return FakeBlogApi(posts=[dict(POST_A)])


@pytest.fixture
def notices():
    return NoticeBoardAdapter()


@pytest.fixture
def manager(api, notices):
    return BlogManager(api=api, notifier=notices)


@pytest.fixture
def video():
    return MediaFile(filename="video.mp4", content_type="video/mp4", data=b"\x00\x01fakevideo")


@pytest.fixture
def image():
    return MediaFile(filename="photo.png", content_type="image/png", data=b"\x89PNGfake")


@pytest.fixture
def make_api():
    return FakeBlogApi
