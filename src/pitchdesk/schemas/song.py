"""Song and pitch schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from src.pitchdesk.models.enums import PitchStatus
from src.pitchdesk.schemas.pagination import ApiModel


class SongCreate(ApiModel):
    """Schema for registering an uploaded song's metadata."""

    title: str = Field(min_length=1, max_length=200)
    artist: str | None = Field(default=None, max_length=200)
    duration: int | None = Field(default=None, ge=0, description="Duration in seconds")
    file_path: str = Field(min_length=1, max_length=1000)
    mime_type: str | None = Field(default=None, max_length=100)
    file_size: int | None = Field(default=None, ge=0, description="File size in bytes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Song title cannot be empty or whitespace only")
        return v


class SongRead(ApiModel):
    id: UUID
    organization_id: UUID
    uploaded_by_id: UUID
    title: str
    artist: str | None
    duration: int | None
    file_path: str
    mime_type: str | None
    file_size: int | None
    created_at: datetime
    updated_at: datetime


class SongListItem(ApiModel):
    """Song joined with its uploader's name and email."""

    id: UUID
    title: str
    artist: str | None
    duration: int | None
    mime_type: str | None
    file_size: int | None
    uploaded_by_id: UUID
    uploader_name: str
    uploader_email: str
    created_at: datetime


class PitchCreate(ApiModel):
    """Schema for creating a pitch."""

    description: str = Field(
        min_length=1,
        max_length=2000,
        examples=["Upbeat pop track perfect for summer release"],
    )
    target_artists: list[str] = Field(min_length=1, examples=[["Ariana Grande", "Dua Lipa"]])
    tags: list[str] = Field(default_factory=list, examples=[["pop", "summer", "upbeat"]])

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Pitch description cannot be empty or whitespace only")
        return v


class PitchRead(ApiModel):
    id: UUID
    song_id: UUID
    created_by_id: UUID
    description: str
    status: PitchStatus
    target_artists: list[str]
    tags: list[str]
    created_at: datetime
    updated_at: datetime
