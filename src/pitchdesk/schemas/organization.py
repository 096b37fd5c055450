"""Organization schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.pitchdesk.models.enums import OrganizationRole
from src.pitchdesk.schemas.pagination import ApiModel


class OrganizationCreate(ApiModel):
    """Schema for creating an organization."""

    name: str = Field(min_length=1, max_length=200, examples=["Songwriters United"])
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Organization name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class OrganizationRead(ApiModel):
    id: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class OrganizationListItem(ApiModel):
    """Organization as shown in the current user's organization list."""

    id: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class MemberAdd(ApiModel):
    """Schema for adding an existing user to an organization."""

    email: EmailStr = Field(examples=["songwriter@example.com"])
    role: OrganizationRole = Field(examples=[OrganizationRole.SONGWRITER])


class MemberRead(ApiModel):
    id: UUID
    organization_id: UUID
    user_id: UUID
    role: OrganizationRole
    joined_at: datetime


class MemberListItem(ApiModel):
    """Organization member joined with the member's user profile."""

    id: UUID
    organization_id: UUID
    user_id: UUID
    email: str
    name: str
    role: OrganizationRole
    joined_at: datetime
