"""Notification Emitter

Two kinds of writes: the grading notice, which joins the caller's grading
transaction, and the publish fan-out, which runs after the primary write has
committed and never propagates its own failures.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.models.communication import Notification
from app.models.enums import NotificationType, Role, GradeStatus
from app.models.user import User

logger = get_logger(__name__)


class NotificationService:

    @staticmethod
    def grade_message(status: GradeStatus, target_title: str, points: int) -> Tuple[str, str]:
        """(title, body) of the notice sent to the submitter"""
        if status == GradeStatus.CHECKED:
            return (
                "Submission Graded",
                f"Your submission for {target_title} has been graded. You received {points} points.",
            )
        return (
            "Submission Rejected",
            f"Your submission for {target_title} has been rejected.",
        )

    @staticmethod
    async def notify_grade_result(
        db: AsyncSession,
        user_id: UUID,
        status: GradeStatus,
        target_title: str,
        points: int,
    ) -> Notification:
        """Stage the grading notice; committed with the grade"""
        title, body = NotificationService.grade_message(status, target_title, points)
        notification = Notification(
            user_id=user_id,
            title=title,
            body=body,
            type=NotificationType.INFO,
            is_read=False,
        )
        db.add(notification)
        await db.flush()
        return notification

    @staticmethod
    async def notify_domain_members(
        db: AsyncSession,
        domain_id: UUID,
        title: str,
        body: str,
    ) -> int:
        """
        Create one ALERT per member of the domain and commit it.

        Best effort: any failure is logged and rolled back, and 0 is
        returned. Call only after the publishing write has been committed.
        """
        try:
            result = await db.execute(
                select(User.id).where(User.domain_id == domain_id, User.role == Role.MEMBER)
            )
            member_ids = list(result.scalars().all())
            if not member_ids:
                return 0
            db.add_all([
                Notification(
                    user_id=member_id,
                    title=title,
                    body=body,
                    type=NotificationType.ALERT,
                    is_read=False,
                )
                for member_id in member_ids
            ])
            await db.commit()
        except Exception:
            await db.rollback()
            logger.warning(
                "Publish notification fan-out failed",
                extra={"domain_id": str(domain_id), "title": title},
                exc_info=True,
            )
            return 0

        logger.info(
            "Publish notifications created",
            extra={"domain_id": str(domain_id), "recipients": len(member_ids)},
        )
        return len(member_ids)

    @staticmethod
    async def list_for_user(db: AsyncSession, user_id: UUID, limit: Optional[int] = None) -> List[Notification]:
        """Newest first, capped at NOTIFICATION_FEED_LIMIT"""
        result = await db.execute(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit or settings.NOTIFICATION_FEED_LIMIT)
        )
        return list(result.scalars().all())

    @staticmethod
    async def mark_read(db: AsyncSession, user_id: UUID, notification_id: UUID) -> None:
        """Mark one of the user's notifications read; others' ids are not found"""
        result = await db.execute(
            update(Notification)
            .where(Notification.id == notification_id, Notification.user_id == user_id)
            .values(is_read=True)
        )
        if result.rowcount == 0:
            await db.rollback()
            raise NotFoundError("Notification not found")
        await db.commit()

    @staticmethod
    async def mark_all_read(db: AsyncSession, user_id: UUID) -> int:
        result = await db.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
        )
        await db.commit()
        return result.rowcount
