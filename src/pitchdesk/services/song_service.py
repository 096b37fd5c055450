"""Song catalog service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pitchdesk.core.errors import NotFoundError
from src.pitchdesk.core.logging import get_logger
from src.pitchdesk.core.pagination import Page, PaginationQuery
from src.pitchdesk.models import Song
from src.pitchdesk.repositories import SongRepository
from src.pitchdesk.schemas.song import SongCreate, SongListItem

logger = get_logger(__name__)


class SongService:
    """Service for song registration and listing."""

    def __init__(self, song_repo: SongRepository, session: AsyncSession):
        self.song_repo = song_repo
        self.session = session

    async def register_song(
        self, organization_id: UUID, uploaded_by_id: UUID, data: SongCreate
    ) -> Song:
        """Record metadata of a song whose file is already in storage."""
        song = Song(
            organization_id=organization_id,
            uploaded_by_id=uploaded_by_id,
            **data.model_dump(),
        )
        self.song_repo.add(song)
        try:
            await self.session.commit()
            await self.session.refresh(song)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Song registered", song_id=str(song.id), organization_id=str(organization_id))
        return song

    async def get_song(self, organization_id: UUID, song_id: UUID) -> Song:
        """Get a song of the organization.

        Raises:
            NotFoundError: If the song does not exist in this organization
        """
        song = await self.song_repo.get_in_organization(song_id, organization_id)
        if song is None:
            raise NotFoundError(f"Song {song_id} not found")
        return song

    async def list_songs(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[SongListItem]:
        return await self.song_repo.list_for_organization(organization_id, query)
