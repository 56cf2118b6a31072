"""
Blog admin endpoints — thin HTTP layer over the BlogManager view state.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from app.dependencies import get_blog_manager, get_notifier
from app.domain.enums import NoticeLevel
from app.domain.errors import DraftValidationError
from app.domain.models import DraftUpdate, ManagerSnapshot, MediaFile, Notice
from app.ports.notifier_port import NotifierPort
from app.services.blog_manager import DELETE_PROMPT, BlogManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/blog", tags=["Blog Admin"])


def _raise_for_notice(notice: Notice) -> Notice:
    """Map a failed acknowledgment onto an HTTP error status."""
    if notice.level is NoticeLevel.VALIDATION:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=notice.message,
        )
    if notice.level is NoticeLevel.ERROR:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=notice.message,
        )
    return notice


@router.get("/", response_model=ManagerSnapshot)
async def get_state(manager: BlogManager = Depends(get_blog_manager)):
    """Current posts, draft, and upload progress."""
    return manager.snapshot()


@router.post("/refresh", response_model=ManagerSnapshot)
async def refresh_posts(manager: BlogManager = Depends(get_blog_manager)):
    """
    Re-fetch the post list from the backend.
    A failed fetch keeps the previous list.
    """
    await manager.fetch_list()
    return manager.snapshot()


@router.put("/draft", response_model=ManagerSnapshot)
async def update_draft(
    body: DraftUpdate,
    manager: BlogManager = Depends(get_blog_manager),
):
    manager.update_draft(title=body.title, description=body.description)
    return manager.snapshot()


@router.post("/draft/media", response_model=ManagerSnapshot)
async def select_media(
    file: UploadFile,
    manager: BlogManager = Depends(get_blog_manager),
):
    """Attach an image or video to the draft. The preview is filled in shortly after."""
    media = MediaFile(
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        data=await file.read(),
    )
    try:
        manager.select_media(media)
    except DraftValidationError as exc:
        logger.info("Rejected media '%s': %s", media.filename, exc)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=str(exc),
        )
    return manager.snapshot()


@router.delete("/draft/media", response_model=ManagerSnapshot)
async def clear_media(manager: BlogManager = Depends(get_blog_manager)):
    manager.select_media(None)
    return manager.snapshot()


@router.post("/submit", response_model=Notice)
async def submit_draft(manager: BlogManager = Depends(get_blog_manager)):
    """Upload the draft. Poll GET /admin/blog meanwhile to follow progress."""
    notice = await manager.submit_draft()
    return _raise_for_notice(notice)


@router.delete("/posts/{post_id}", response_model=Notice)
async def delete_post(
    post_id: str,
    confirm: bool = False,
    manager: BlogManager = Depends(get_blog_manager),
):
    """
    Delete a post. The caller answers the confirmation prompt with
    `confirm=true`; anything else leaves the post alone.
    """

    async def _answer(prompt: str) -> bool:
        return confirm

    notice = await manager.delete_post(post_id, confirm=_answer)
    if notice is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{DELETE_PROMPT} Resend with confirm=true.",
        )
    return _raise_for_notice(notice)


@router.get("/notices", response_model=list[Notice])
async def drain_notices(notifier: NotifierPort = Depends(get_notifier)):
    """Pending acknowledgments, oldest first. Each notice is returned once."""
    return notifier.drain()
