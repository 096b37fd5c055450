"""Shared enums for models."""

from enum import Enum


class OrganizationRole(str, Enum):
    """Member role within an organization."""

    MANAGER = "MANAGER"
    SONGWRITER = "SONGWRITER"


class PitchStatus(str, Enum):
    """Lifecycle state of a pitch."""

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
