"""Song and pitch models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Index
from sqlmodel import Field, SQLModel

from src.pitchdesk.models.base import utc_now
from src.pitchdesk.models.enums import PitchStatus


class Song(SQLModel, table=True):
    """Song uploaded to an organization.

    Note: file bytes are kept by external storage; only the path is recorded.
    """

    __tablename__ = "songs"
    __table_args__ = (
        Index("ix_songs_org_created_at_id", "organization_id", "created_at", "id"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    uploaded_by_id: UUID = Field(foreign_key="users.id")
    title: str = Field(max_length=200)
    artist: str | None = Field(default=None, max_length=200)
    duration: int | None = Field(default=None, ge=0)  # seconds
    file_path: str = Field(max_length=1000)
    mime_type: str | None = Field(default=None, max_length=100)
    file_size: int | None = Field(default=None, ge=0)  # bytes
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def belongs_to_organization(self, organization_id: UUID) -> bool:
        return self.organization_id == organization_id


class Pitch(SQLModel, table=True):
    """Pitch of a song to a list of target artists."""

    __tablename__ = "pitches"
    __table_args__ = (Index("ix_pitches_song_created_at_id", "song_id", "created_at", "id"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    song_id: UUID = Field(foreign_key="songs.id", index=True)
    created_by_id: UUID = Field(foreign_key="users.id")
    description: str = Field(max_length=2000)
    status: str = Field(default=PitchStatus.DRAFT.value, max_length=20)
    target_artists: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
