"""Repositories for Song and Pitch entities."""

from uuid import UUID

from sqlmodel import select

from src.pitchdesk.core.pagination import KeysetPlanner, Page, PaginationQuery
from src.pitchdesk.models import Pitch, Song, User
from src.pitchdesk.repositories.base import BaseRepository
from src.pitchdesk.schemas.song import PitchRead, SongListItem


class SongRepository(BaseRepository[Song]):
    """Repository for Song entity."""

    model = Song
    planner = KeysetPlanner(Song.created_at, Song.id)

    async def get_in_organization(self, song_id: UUID, organization_id: UUID) -> Song | None:
        """Get a song only if it belongs to the organization."""
        result = await self.session.execute(
            select(Song).where(Song.id == song_id, Song.organization_id == organization_id)
        )
        return result.scalar_one_or_none()

    async def list_for_organization(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[SongListItem]:
        """List songs of an organization with uploader info, newest first."""
        statement = (
            select(
                Song.id,
                Song.title,
                Song.artist,
                Song.duration,
                Song.mime_type,
                Song.file_size,
                Song.uploaded_by_id,
                Song.created_at,
                User.name.label("uploader_name"),  # type: ignore[attr-defined]
                User.email.label("uploader_email"),  # type: ignore[attr-defined]
            )
            .join(User, User.id == Song.uploaded_by_id)  # type: ignore[arg-type]
            .where(Song.organization_id == organization_id)
        )
        return await self.paginate(
            statement, query, self.planner, SongListItem.model_validate, scalars=False
        )


class PitchRepository(BaseRepository[Pitch]):
    """Repository for Pitch entity."""

    model = Pitch
    planner = KeysetPlanner(Pitch.created_at, Pitch.id)

    async def list_for_song(self, song_id: UUID, query: PaginationQuery) -> Page[PitchRead]:
        """List pitches of one song, newest first."""
        statement = select(Pitch).where(Pitch.song_id == song_id)
        return await self.paginate(statement, query, self.planner, PitchRead.model_validate)

    async def list_for_organization(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[PitchRead]:
        """List pitches across all songs of an organization, newest first."""
        statement = (
            select(Pitch)
            .join(Song, Song.id == Pitch.song_id)  # type: ignore[arg-type]
            .where(Song.organization_id == organization_id)
        )
        return await self.paginate(statement, query, self.planner, PitchRead.model_validate)
