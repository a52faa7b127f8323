"""Role and domain-scope checks shared by the content and grading services"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthorizationError
from app.core.principal import Principal
from app.models.domain import DomainLead


class AccessService:

    @staticmethod
    async def is_domain_lead(db: AsyncSession, user_id: UUID, domain_id: UUID) -> bool:
        result = await db.execute(
            select(DomainLead.id).where(
                DomainLead.user_id == user_id,
                DomainLead.domain_id == domain_id,
            )
        )
        return result.first() is not None

    @staticmethod
    async def get_led_domain_ids(db: AsyncSession, user_id: UUID) -> List[UUID]:
        """Domains the user currently leads"""
        result = await db.execute(
            select(DomainLead.domain_id).where(DomainLead.user_id == user_id)
        )
        return list(result.scalars().all())

    @staticmethod
    def ensure_grader(principal: Principal) -> None:
        if not principal.can_grade:
            raise AuthorizationError("Lead or admin role required")

    @staticmethod
    def ensure_admin(principal: Principal) -> None:
        if not principal.is_admin:
            raise AuthorizationError("Admin role required")

    @staticmethod
    async def ensure_domain_access(
        db: AsyncSession,
        principal: Principal,
        domain_id: Optional[UUID],
        message: str = "You do not have access to this domain",
    ) -> None:
        """
        Admins pass unconditionally; leads must lead ``domain_id``; members
        never manage domain content.

        Raises:
            AuthorizationError: If the principal may not act on the domain
        """
        if principal.is_admin:
            return
        if not principal.is_lead or domain_id is None:
            raise AuthorizationError(message)
        if not await AccessService.is_domain_lead(db, principal.user_id, domain_id):
            raise AuthorizationError(message)
