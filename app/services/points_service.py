"""Points Ledger

Entries are keyed by the graded submission's id. Writes here never commit:
they run inside the caller's grading transaction.
"""

from typing import List
from uuid import UUID

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import PointsSourceType
from app.models.points import PointsEntry


class PointsService:

    @staticmethod
    async def clear_for_submission(
        db: AsyncSession,
        submission_id: UUID,
        source_type: PointsSourceType,
    ) -> int:
        """Remove any live entry for the submission; returns rows deleted"""
        result = await db.execute(
            delete(PointsEntry).where(
                PointsEntry.source_id == submission_id,
                PointsEntry.source_type == source_type,
            )
        )
        return result.rowcount

    @staticmethod
    async def award(
        db: AsyncSession,
        user_id: UUID,
        submission_id: UUID,
        source_type: PointsSourceType,
        points: int,
        reason: str,
        awarded_by: UUID,
    ) -> PointsEntry:
        entry = PointsEntry(
            user_id=user_id,
            source_type=source_type,
            source_id=submission_id,
            points=points,
            reason=reason,
            awarded_by=awarded_by,
        )
        db.add(entry)
        await db.flush()
        return entry

    @staticmethod
    async def total_points(db: AsyncSession, user_id: UUID) -> int:
        """Sum of the user's ledger, recomputed on every call"""
        result = await db.execute(
            select(func.coalesce(func.sum(PointsEntry.points), 0)).where(PointsEntry.user_id == user_id)
        )
        return int(result.scalar_one())

    @staticmethod
    async def list_entries(db: AsyncSession, user_id: UUID) -> List[PointsEntry]:
        result = await db.execute(
            select(PointsEntry)
            .where(PointsEntry.user_id == user_id)
            .order_by(PointsEntry.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def entries_for_submission(db: AsyncSession, submission_id: UUID) -> List[PointsEntry]:
        result = await db.execute(select(PointsEntry).where(PointsEntry.source_id == submission_id))
        return list(result.scalars().all())
