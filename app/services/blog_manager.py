"""
Blog manager — the admin view's state and its create / list / delete workflow.
Depends on ports only (Dependency Inversion).

State is one record: the post list, the draft, and a tagged upload state
(IDLE / UPLOADING). The list is always re-fetched after a mutation, never
patched locally.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from app.domain.enums import NoticeLevel, UploadPhase
from app.domain.errors import BlogAdminError, DraftValidationError
from app.domain.models import (
    BlogPost,
    DraftPost,
    DraftView,
    ManagerSnapshot,
    MediaFile,
    MediaSummary,
    Notice,
    UploadState,
)
from app.ports.blog_port import BlogApiPort
from app.ports.notifier_port import NotifierPort
from app.services.media_preview import decode_preview

logger = logging.getLogger(__name__)

# Asked before a delete goes out; True means go ahead.
Confirmation = Callable[[str], Awaitable[bool]]

DELETE_PROMPT = "Are you sure you want to delete this blog?"
EMPTY_LIST_MESSAGE = "No blogs available."


def upload_percent(bytes_sent: int, bytes_total: int) -> int:
    """round(sent * 100 / total), halves rounded up, clamped to [0, 100]."""
    if bytes_total <= 0:
        return 0
    percent = (bytes_sent * 200 + bytes_total) // (bytes_total * 2)
    return max(0, min(100, percent))


class BlogManager:
    """Owns the admin view state and orchestrates calls to the blog backend."""

    def __init__(self, api: BlogApiPort, notifier: NotifierPort) -> None:
        self._api = api
        self._notifier = notifier

        self.posts: list[BlogPost] = []
        self.draft = DraftPost()
        self.upload = UploadState()

        # Only the decode started for the currently selected file may
        # write the preview.
        self._preview_token = 0
        self._preview_tasks: set[asyncio.Task] = set()

        # A list response is applied only if no newer fetch already landed.
        self._fetch_seq = 0
        self._applied_seq = 0

    # ── Listing ───────────────────────────────────────────────

    async def mount(self) -> None:
        """Initial load when the view comes up."""
        await self.fetch_list()

    async def fetch_list(self) -> bool:
        """
        Replace the post list with the backend's current list.

        On failure the previous list stays as it is and the error is only
        logged. Returns True when the response was applied.
        """
        self._fetch_seq += 1
        seq = self._fetch_seq

        try:
            posts = await self._api.list_posts()
        except BlogAdminError as exc:
            logger.error("Failed to fetch blogs: %s", exc)
            return False

        if seq < self._applied_seq:
            logger.info("Discarding stale blog list (fetch #%d, already at #%d)", seq, self._applied_seq)
            return False

        self._applied_seq = seq
        self.posts = posts
        logger.info("Loaded %d blogs", len(posts))
        return True

    # ── Draft ─────────────────────────────────────────────────

    def update_draft(self, title: str | None = None, description: str | None = None) -> None:
        if title is not None:
            self.draft.title = title
        if description is not None:
            self.draft.description = description

    def select_media(self, media: MediaFile | None) -> asyncio.Task | None:
        """
        Attach a file to the draft and start decoding its preview.

        Passing None clears both the media and the preview. Returns the
        decode task so callers can wait for the preview if they need it.
        """
        if media is not None and media.media_type is None:
            raise DraftValidationError(
                f"Only image or video files are accepted, got '{media.content_type}'"
            )

        self._preview_token += 1
        self.draft.media = media
        self.draft.preview = None

        if media is None:
            return None

        task = asyncio.create_task(self._load_preview(media, self._preview_token))
        self._preview_tasks.add(task)
        task.add_done_callback(self._forget_preview_task)
        return task

    async def _load_preview(self, media: MediaFile, token: int) -> None:
        preview = await decode_preview(media)
        if token != self._preview_token:
            logger.debug("Dropping preview for '%s', a newer file was selected", media.filename)
            return
        self.draft.preview = preview

    def _forget_preview_task(self, task: asyncio.Task) -> None:
        self._preview_tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Preview decode failed: %s", task.exception())

    # ── Create ────────────────────────────────────────────────

    def _validate_draft(self) -> None:
        if self.upload.loading:
            raise DraftValidationError("An upload is already in progress")
        if self.draft.missing_fields():
            raise DraftValidationError("All fields are required")

    async def submit_draft(self) -> Notice:
        """
        Validate the draft and upload it.

        Idle → Validating → (reject → Idle) | Uploading → Idle.
        Progress is reset to 0 when the upload ends either way.
        """
        try:
            self._validate_draft()
        except DraftValidationError as exc:
            return self._acknowledge(NoticeLevel.VALIDATION, str(exc))

        title = self.draft.title
        description = self.draft.description
        media = self.draft.media

        self.upload = UploadState(phase=UploadPhase.UPLOADING, progress=0)
        logger.info("Uploading blog '%s' (%s, %d bytes)", title, media.content_type, media.size)

        try:
            await self._api.store_post(
                title, description, media, on_progress=self._on_upload_progress
            )
        except BlogAdminError as exc:
            logger.error("Failed to upload blog '%s': %s", title, exc)
            self.upload = UploadState()
            return self._acknowledge(NoticeLevel.ERROR, "Failed to upload blog")

        self._reset_draft()
        self.upload = UploadState()
        await self.fetch_list()
        return self._acknowledge(NoticeLevel.SUCCESS, "Blog uploaded successfully!")

    def _on_upload_progress(self, bytes_sent: int, bytes_total: int) -> None:
        if not self.upload.loading:
            return
        percent = upload_percent(bytes_sent, bytes_total)
        if percent > self.upload.progress:
            self.upload.progress = percent

    def _reset_draft(self) -> None:
        self._preview_token += 1
        self.draft = DraftPost()

    # ── Delete ────────────────────────────────────────────────

    async def delete_post(self, post_id: str, confirm: Confirmation) -> Notice | None:
        """
        Delete a post after the user confirms, then refresh the list.

        Returns None when the user declined. The entry stays listed until
        the refresh lands.
        """
        if not await confirm(DELETE_PROMPT):
            logger.info("Delete of blog %s cancelled", post_id)
            return None

        try:
            await self._api.delete_post(post_id)
        except BlogAdminError as exc:
            logger.error("Failed to delete blog %s: %s", post_id, exc)
            return self._acknowledge(NoticeLevel.ERROR, "Failed to delete blog")

        await self.fetch_list()
        return self._acknowledge(NoticeLevel.SUCCESS, "Blog deleted successfully!")

    # ── View ──────────────────────────────────────────────────

    def snapshot(self) -> ManagerSnapshot:
        media = self.draft.media
        return ManagerSnapshot(
            phase=self.upload.phase,
            loading=self.upload.loading,
            progress=self.upload.progress,
            draft=DraftView(
                title=self.draft.title,
                description=self.draft.description,
                media=(
                    MediaSummary(
                        filename=media.filename,
                        content_type=media.content_type,
                        size=media.size,
                    )
                    if media is not None
                    else None
                ),
                preview=self.draft.preview,
                preview_kind=media.media_type if media is not None and self.draft.preview else None,
            ),
            posts=list(self.posts),
            empty_message=None if self.posts else EMPTY_LIST_MESSAGE,
        )

    async def aclose(self) -> None:
        await self._api.aclose()

    def _acknowledge(self, level: NoticeLevel, message: str) -> Notice:
        notice = Notice(level=level, message=message)
        self._notifier.notify(notice)
        return notice
