"""Organization and membership service."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.pitchdesk.core.errors import DuplicateResourceError, NotFoundError
from src.pitchdesk.core.logging import get_logger
from src.pitchdesk.core.pagination import Page, PaginationQuery
from src.pitchdesk.models import Organization, OrganizationMember, OrganizationRole
from src.pitchdesk.repositories import MemberRepository, OrganizationRepository, UserRepository
from src.pitchdesk.schemas.organization import MemberListItem, OrganizationListItem

logger = get_logger(__name__)


class OrganizationService:
    """Service for organization and membership operations."""

    def __init__(
        self,
        organization_repo: OrganizationRepository,
        member_repo: MemberRepository,
        user_repo: UserRepository,
        session: AsyncSession,
    ):
        self.organization_repo = organization_repo
        self.member_repo = member_repo
        self.user_repo = user_repo
        self.session = session

    async def create_organization(
        self, name: str, creator_id: UUID, description: str | None = None
    ) -> Organization:
        """Create an organization and add the creator as its first MANAGER.

        Both rows are committed together.
        """
        organization = Organization(name=name, description=description)
        self.organization_repo.add(organization)
        try:
            await self.session.flush()
            self.member_repo.create_membership(
                organization.id, creator_id, OrganizationRole.MANAGER
            )
            await self.session.commit()
            await self.session.refresh(organization)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Organization created",
            organization_id=str(organization.id),
            creator_id=str(creator_id),
        )
        return organization

    async def list_for_user(
        self, user_id: UUID, query: PaginationQuery
    ) -> Page[OrganizationListItem]:
        """List organizations the user belongs to."""
        return await self.organization_repo.list_for_user(user_id, query)

    async def list_members(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[MemberListItem]:
        """List members of an organization."""
        return await self.member_repo.list_for_organization(organization_id, query)

    async def add_member(
        self, organization_id: UUID, email: str, role: OrganizationRole
    ) -> OrganizationMember:
        """Add an existing user to an organization.

        Raises:
            NotFoundError: If no user has this email
            DuplicateResourceError: If the user is already a member
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise NotFoundError(f"User with email {email} not found")

        existing = await self.member_repo.get_membership(organization_id, user.id)
        if existing is not None:
            raise DuplicateResourceError("User is already a member of this organization")

        membership = self.member_repo.create_membership(organization_id, user.id, role)
        try:
            await self.session.commit()
            await self.session.refresh(membership)
        except IntegrityError as e:
            # Fallback in case of race condition
            await self.session.rollback()
            raise DuplicateResourceError(
                "User is already a member of this organization"
            ) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Member added",
            organization_id=str(organization_id),
            member_user_id=str(user.id),
            role=role.value,
        )
        return membership
