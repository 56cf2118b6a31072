"""
Local media preview — turns a selected file into a data URL the
admin UI can drop straight into an <img> or <video> element.
"""

import asyncio
import base64

from app.domain.models import MediaFile


def to_data_url(media: MediaFile) -> str:
    """Encode the file as `data:<mime>;base64,<payload>`."""
    payload = base64.b64encode(media.data).decode("ascii")
    return f"data:{media.content_type};base64,{payload}"


async def decode_preview(media: MediaFile) -> str:
    # Videos can be large; keep the base64 pass off the event loop.
    return await asyncio.to_thread(to_data_url, media)
