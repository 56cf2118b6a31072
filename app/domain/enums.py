"""Enums shared across the domain layer."""

from enum import Enum


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "MediaType | None":
        """Map a MIME type like 'video/mp4' to its media type, or None."""
        major = (content_type or "").split("/", 1)[0].strip().lower()
        for member in cls:
            if member.value == major:
                return member
        return None


class UploadPhase(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION = "validation"
