"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.domain.enums import MediaType, NoticeLevel, UploadPhase


# ── Blog posts (backend wire format) ──────────────────────────


class BlogPost(BaseModel):
    """A stored post as returned by GET /getBlog."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="id",
    )
    title: str = Field(..., min_length=1)
    description: str = ""
    media_url: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("mediaUrl", "media_url"),
        serialization_alias="mediaUrl",
    )
    media_type: MediaType = Field(
        ...,
        validation_alias=AliasChoices("mediaType", "media_type"),
        serialization_alias="mediaType",
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Mongo-style ids may arrive as ints or {"$oid": ...}
        if isinstance(value, dict) and "$oid" in value:
            value = value["$oid"]
        if isinstance(value, int):
            value = str(value)
        return value

    @property
    def render_kind(self) -> str:
        """Which element renders this post's media: 'image' or 'video'."""
        return self.media_type.value


# ── Draft (client-only) ───────────────────────────────────────


class MediaFile(BaseModel):
    """A locally selected image or video, held in memory until submit."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str
    data: bytes

    @property
    def media_type(self) -> MediaType | None:
        return MediaType.from_content_type(self.content_type)

    @property
    def size(self) -> int:
        return len(self.data)


class DraftPost(BaseModel):
    """The post being composed. Reset to empty after a successful create."""

    title: str = ""
    description: str = ""
    media: MediaFile | None = None
    preview: str | None = None

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.title:
            missing.append("title")
        if not self.description:
            missing.append("description")
        if self.media is None:
            missing.append("media")
        return missing

    def is_empty(self) -> bool:
        return (
            not self.title
            and not self.description
            and self.media is None
            and self.preview is None
        )


class UploadState(BaseModel):
    """Tagged upload state. `loading` is derived from the phase."""

    phase: UploadPhase = UploadPhase.IDLE
    progress: int = Field(0, ge=0, le=100)

    @property
    def loading(self) -> bool:
        return self.phase is UploadPhase.UPLOADING


class Notice(BaseModel):
    """A user-facing acknowledgment (the alert the view would show)."""

    level: NoticeLevel
    message: str


# ── Admin API views ───────────────────────────────────────────


class DraftUpdate(BaseModel):
    """Request body for PUT /admin/blog/draft."""

    title: str | None = None
    description: str | None = None


class MediaSummary(BaseModel):
    filename: str
    content_type: str
    size: int


class DraftView(BaseModel):
    title: str
    description: str
    media: MediaSummary | None = None
    preview: str | None = None
    preview_kind: MediaType | None = None


class ManagerSnapshot(BaseModel):
    """Response model for GET /admin/blog."""

    phase: UploadPhase
    loading: bool
    progress: int
    draft: DraftView
    posts: list[BlogPost] = Field(default_factory=list)
    empty_message: str | None = None


# ── Verify ────────────────────────────────────────────────────


class VerifyRequest(BaseModel):
    """Request body for POST /verify."""

    password: str = ""


class VerifyResponse(BaseModel):
    success: bool
