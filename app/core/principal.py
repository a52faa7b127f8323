"""Calling principal passed explicitly into every service operation"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from app.models.enums import Role


@dataclass(frozen=True)
class Principal:
    user_id: UUID
    role: Role
    domain_id: Optional[UUID] = None
    username: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_lead(self) -> bool:
        return self.role == Role.LEAD

    @property
    def is_member(self) -> bool:
        return self.role == Role.MEMBER

    @property
    def can_grade(self) -> bool:
        return self.role in (Role.LEAD, Role.ADMIN)

    @classmethod
    def from_user(cls, user) -> "Principal":
        return cls(user_id=user.id, role=user.role, domain_id=user.domain_id, username=user.username)
