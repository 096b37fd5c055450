"""Organization and membership models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Index, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pitchdesk.models.base import utc_now
from src.pitchdesk.models.enums import OrganizationRole


class Organization(SQLModel, table=True):
    """Organization (tenant) that owns songs and pitches."""

    __tablename__ = "organizations"
    __table_args__ = (Index("ix_organizations_created_at_id", "created_at", "id"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class OrganizationMember(SQLModel, table=True):
    """Membership of a user in an organization, with a role."""

    __tablename__ = "organization_members"
    __table_args__ = (
        UniqueConstraint("organization_id", "user_id", name="uq_organization_members_org_user"),
        Index("ix_organization_members_org_joined_at_id", "organization_id", "joined_at", "id"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    role: str = Field(default=OrganizationRole.SONGWRITER.value, max_length=50)
    joined_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> OrganizationRole:
        """Get role as OrganizationRole enum."""
        return OrganizationRole(self.role)
