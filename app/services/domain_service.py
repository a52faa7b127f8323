"""Domain lead assignment"""

from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError, NotFoundError
from app.core.logging import get_logger
from app.core.principal import Principal
from app.models.domain import Domain, DomainLead
from app.models.enums import Role
from app.models.user import User
from app.services.access_service import AccessService

logger = get_logger(__name__)


class DomainService:

    @staticmethod
    async def assign_lead(db: AsyncSession, principal: Principal, domain_id: UUID, user_id: UUID) -> DomainLead:
        """
        Make ``user_id`` the lead of ``domain_id``.

        A lead has one active domain: existing DomainLead rows for the user
        are removed before the new one is added, and ``user.domain_id`` is
        moved along with it, all in one transaction.
        """
        AccessService.ensure_admin(principal)

        domain = await db.get(Domain, domain_id)
        if domain is None:
            raise NotFoundError("Domain not found")
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        if user.role != Role.LEAD:
            raise ValidationError("User must be a LEAD", fields={"user_id": "not a lead"})

        await db.execute(delete(DomainLead).where(DomainLead.user_id == user_id))
        link = DomainLead(user_id=user_id, domain_id=domain_id)
        db.add(link)
        user.domain_id = domain_id
        await db.commit()
        await db.refresh(link)

        logger.info("Lead assigned", extra={"user_id": str(user_id), "domain_id": str(domain_id)})
        return link

    @staticmethod
    async def remove_lead(db: AsyncSession, principal: Principal, domain_id: UUID, user_id: UUID) -> None:
        AccessService.ensure_admin(principal)

        result = await db.execute(
            delete(DomainLead).where(DomainLead.user_id == user_id, DomainLead.domain_id == domain_id)
        )
        if result.rowcount == 0:
            await db.rollback()
            raise NotFoundError("Lead is not assigned to this domain")

        user = await db.get(User, user_id)
        if user is not None and user.domain_id == domain_id:
            user.domain_id = None
        await db.commit()
        logger.info("Lead removed", extra={"user_id": str(user_id), "domain_id": str(domain_id)})
