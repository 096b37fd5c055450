"""Repositories for Organization and OrganizationMember entities."""

from uuid import UUID

from sqlmodel import select

from src.pitchdesk.core.pagination import KeysetPlanner, Page, PaginationQuery
from src.pitchdesk.models import Organization, OrganizationMember, OrganizationRole, User
from src.pitchdesk.repositories.base import BaseRepository
from src.pitchdesk.schemas.organization import MemberListItem, OrganizationListItem


class OrganizationRepository(BaseRepository[Organization]):
    """Repository for Organization entity."""

    model = Organization
    planner = KeysetPlanner(Organization.created_at, Organization.id)

    async def list_for_user(
        self, user_id: UUID, query: PaginationQuery
    ) -> Page[OrganizationListItem]:
        """List organizations where the user is a member, newest first.

        Args:
            user_id: User whose memberships scope the listing
            query: Page size and optional cursor

        Returns:
            Page of organization list items
        """
        statement = (
            select(Organization)
            .join(
                OrganizationMember,
                Organization.id == OrganizationMember.organization_id,  # type: ignore[arg-type]
            )
            .where(OrganizationMember.user_id == user_id)
        )
        return await self.paginate(
            statement, query, self.planner, OrganizationListItem.model_validate
        )


class MemberRepository(BaseRepository[OrganizationMember]):
    """Repository for organization memberships."""

    model = OrganizationMember
    planner = KeysetPlanner(OrganizationMember.joined_at, OrganizationMember.id)

    async def get_membership(
        self, organization_id: UUID, user_id: UUID
    ) -> OrganizationMember | None:
        """Get a user's membership in an organization."""
        result = await self.session.execute(
            select(OrganizationMember).where(
                OrganizationMember.organization_id == organization_id,
                OrganizationMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    def create_membership(
        self,
        organization_id: UUID,
        user_id: UUID,
        role: OrganizationRole = OrganizationRole.SONGWRITER,
    ) -> OrganizationMember:
        """Create a new membership (add to session, no commit)."""
        membership = OrganizationMember(
            organization_id=organization_id,
            user_id=user_id,
            role=role.value,
        )
        self.session.add(membership)
        return membership

    async def list_for_organization(
        self, organization_id: UUID, query: PaginationQuery
    ) -> Page[MemberListItem]:
        """List members of an organization with their user profile, newest first."""
        statement = (
            select(
                OrganizationMember.id,
                OrganizationMember.organization_id,
                OrganizationMember.user_id,
                OrganizationMember.role,
                OrganizationMember.joined_at,
                User.email,
                User.name,
            )
            .join(User, User.id == OrganizationMember.user_id)  # type: ignore[arg-type]
            .where(OrganizationMember.organization_id == organization_id)
        )
        return await self.paginate(
            statement, query, self.planner, MemberListItem.model_validate, scalars=False
        )
