"""Strongly typed identifiers for gate domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
SessionId = NewType("SessionId", UUID)
