"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To point the admin at a
different backend transport, change the adapter instantiation here.
Nothing else in the codebase changes  (Open/Closed Principle).
"""

from functools import lru_cache

import httpx
from fastapi import Request

from app.adapters.httpx_blog_adapter import HttpxBlogAdapter
from app.adapters.notice_board_adapter import NoticeBoardAdapter
from app.config import settings
from app.ports.notifier_port import NotifierPort
from app.services.blog_manager import BlogManager
from app.services.verify_service import VerifyService


# ── Singletons (cached) ──────────────────────────────────────


def build_http_client() -> httpx.AsyncClient:
    # Timeout(None) disables every phase; a configured value applies to all of them
    return httpx.AsyncClient(
        base_url=settings.backend_url,
        timeout=httpx.Timeout(settings.request_timeout_seconds),
    )


@lru_cache(maxsize=1)
def _get_blog_adapter() -> HttpxBlogAdapter:
    return HttpxBlogAdapter(client=build_http_client())


@lru_cache(maxsize=1)
def _get_notice_board() -> NoticeBoardAdapter:
    return NoticeBoardAdapter(max_notices=settings.notice_history)


@lru_cache(maxsize=1)
def build_blog_manager() -> BlogManager:
    return BlogManager(api=_get_blog_adapter(), notifier=_get_notice_board())


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_notifier() -> NotifierPort:
    """Inject the notice board."""
    return _get_notice_board()


def get_blog_manager(request: Request) -> BlogManager:
    """The single admin view state, attached to the app at startup."""
    return request.app.state.blog_manager


def get_verify_service() -> VerifyService:
    """Injects the configured secret into the password check."""
    return VerifyService(secret=settings.app_password)
