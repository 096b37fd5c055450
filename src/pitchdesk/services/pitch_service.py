"""Pitch service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pitchdesk.core.errors import InvalidReferenceError, NotFoundError
from src.pitchdesk.core.logging import get_logger
from src.pitchdesk.core.pagination import Page, PaginationQuery
from src.pitchdesk.models import Pitch, PitchStatus
from src.pitchdesk.repositories import PitchRepository, SongRepository
from src.pitchdesk.schemas.song import PitchCreate, PitchRead

logger = get_logger(__name__)


class PitchService:
    """Service for pitch creation and listing."""

    def __init__(
        self,
        pitch_repo: PitchRepository,
        song_repo: SongRepository,
        session: AsyncSession,
    ):
        self.pitch_repo = pitch_repo
        self.song_repo = song_repo
        self.session = session

    async def create_pitch(
        self,
        organization_id: UUID,
        song_id: UUID,
        created_by_id: UUID,
        data: PitchCreate,
    ) -> Pitch:
        """Create a DRAFT pitch for a song of the organization.

        Raises:
            NotFoundError: If the song does not exist
            InvalidReferenceError: If the song belongs to another organization
        """
        song = await self.song_repo.get_by_id(song_id)
        if song is None:
            raise NotFoundError(f"Song with ID {song_id} not found")
        if not song.belongs_to_organization(organization_id):
            raise InvalidReferenceError("Song does not belong to the specified organization")

        pitch = Pitch(
            song_id=song_id,
            created_by_id=created_by_id,
            description=data.description,
            status=PitchStatus.DRAFT.value,
            target_artists=list(data.target_artists),
            tags=list(data.tags),
        )
        self.pitch_repo.add(pitch)
        try:
            await self.session.commit()
            await self.session.refresh(pitch)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Pitch created", pitch_id=str(pitch.id), song_id=str(song_id))
        return pitch

    async def list_song_pitches(
        self, organization_id: UUID, song_id: UUID, query: PaginationQuery
    ) -> Page[PitchRead]:
        """List pitches of a song after checking it belongs to the organization.

        Raises:
            NotFoundError: If the song does not exist in this organization
        """
        song = await self.song_repo.get_in_organization(song_id, organization_id)
        if song is None:
            raise NotFoundError(f"Song {song_id} not found")
        return await self.pitch_repo.list_for_song(song_id, query)

    async def list_organization_pitches(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[PitchRead]:
        return await self.pitch_repo.list_for_organization(organization_id, query)
