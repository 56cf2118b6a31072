import json

import httpx
import pytest

from app.adapters.httpx_blog_adapter import UPLOAD_CHUNK_SIZE, HttpxBlogAdapter
from app.domain.enums import MediaType
from app.domain.errors import RejectedRequest, TransportError
from app.domain.models import MediaFile

BASE_URL = "http://backend.test/api"


def make_adapter(handler):
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpxBlogAdapter(client=client)


async def test_list_posts_parses_blogs_in_order():
    seen = []

    def handler(request):
        seen.append((request.method, str(request.url)))
        return httpx.Response(200, json={"blogs": [
            {"_id": "1", "title": "A", "description": "line one\nline two", "mediaUrl": "u1", "mediaType": "image"},
            {"_id": 7, "title": "B", "description": "", "mediaUrl": "https://cdn/v.mp4", "mediaType": "video"},
        ]})

    adapter = make_adapter(handler)
    posts = await adapter.list_posts()
    await adapter.aclose()

    assert seen == [("GET", f"{BASE_URL}/getBlog")]
    assert [p.id for p in posts] == ["1", "7"]
    assert posts[0].description == "line one\nline two"
    assert posts[1].media_type is MediaType.VIDEO


async def test_list_posts_skips_entries_without_media():
    def handler(request):
        return httpx.Response(200, json={"blogs": [
            {"_id": "1", "title": "A", "mediaUrl": None, "mediaType": "image"},
            {"_id": "2", "title": "B", "mediaUrl": "u2", "mediaType": "audio"},
            {"_id": "3", "title": "C", "mediaUrl": "u3", "mediaType": "image"},
        ]})

    posts = await make_adapter(handler).list_posts()

    assert [p.id for p in posts] == ["3"]


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>oops</html>"),
    httpx.Response(200, json={"posts": []}),
    httpx.Response(200, json=[]),
])
async def test_list_posts_unparseable_body_is_transport_error(response):
    with pytest.raises(TransportError):
        await make_adapter(lambda request: response).list_posts()


async def test_non_2xx_is_rejected_request():
    with pytest.raises(RejectedRequest) as exc_info:
        await make_adapter(lambda request: httpx.Response(503)).list_posts()

    assert exc_info.value.status_code == 503


async def test_connection_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError):
        await make_adapter(handler).delete_post("1")


async def test_store_post_sends_multipart_and_reports_progress():
    captured = {}

    def handler(request):
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = request.content
        return httpx.Response(201, json={"message": "stored"})

    payload = b"v" * (UPLOAD_CHUNK_SIZE * 3 + 10)
    media = MediaFile(filename="clip.mp4", content_type="video/mp4", data=payload)
    progress = []

    await make_adapter(handler).store_post(
        "Title", "Body\ntext", media, on_progress=lambda sent, total: progress.append((sent, total))
    )

    body = captured["body"]
    assert captured["url"] == f"{BASE_URL}/storeBlog"
    assert captured["headers"]["content-type"].startswith("multipart/form-data; boundary=")
    assert int(captured["headers"]["content-length"]) == len(body)
    assert b'name="title"' in body and b"Title" in body
    assert b'name="description"' in body and b"Body\ntext" in body
    assert b'name="media"; filename="clip.mp4"' in body
    assert b"Content-Type: video/mp4" in body
    assert payload in body

    total = len(body)
    assert progress[0] == (0, total)
    assert progress[-1] == (total, total)
    sent = [s for s, _ in progress]
    assert sent == sorted(sent)
    assert len(progress) >= 4


async def test_store_post_rejected():
    media = MediaFile(filename="a.png", content_type="image/png", data=b"png")

    with pytest.raises(RejectedRequest):
        await make_adapter(lambda request: httpx.Response(413)).store_post("t", "d", media)


async def test_delete_post_targets_id():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path))
        return httpx.Response(200, content=json.dumps({"ok": True}))

    await make_adapter(handler).delete_post("65f1c0ffee")

    assert seen == [("DELETE", "/api/deleteBlog/65f1c0ffee")]


async def test_list_posts_skips_entries_with_empty_title():
    def handler(request):
        return httpx.Response(200, json={"blogs": [
            {"_id": "1", "title": "", "mediaUrl": "u1", "mediaType": "image"},
            {"_id": "2", "mediaUrl": "u2", "mediaType": "image"},
            {"_id": "3", "title": "C", "mediaUrl": "u3", "mediaType": "video"},
        ]})

    posts = await make_adapter(handler).list_posts()

    assert [p.id for p in posts] == ["3"]
