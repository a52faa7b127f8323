"""Leaderboard Aggregator"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.domain import Domain
from app.models.enums import Role
from app.models.points import PointsEntry
from app.models.user import User
from app.schemas.leaderboard import LeaderboardEntry


class LeaderboardService:

    @staticmethod
    async def get_leaderboard(db: AsyncSession, domain_id: Optional[UUID] = None) -> List[LeaderboardEntry]:
        """
        Rank members by ledger total, highest first.

        Only MEMBER users are ranked; members without points appear with 0.
        Ties are broken by username ascending. Rank is the 1-based position
        in that order and is never stored.
        """
        total = func.coalesce(func.sum(PointsEntry.points), 0).label("total_points")
        stmt = (
            select(User.id, User.username, Domain.name, total)
            .outerjoin(Domain, Domain.id == User.domain_id)
            .outerjoin(PointsEntry, PointsEntry.user_id == User.id)
            .where(User.role == Role.MEMBER)
            .group_by(User.id, User.username, Domain.name)
            .order_by(total.desc(), User.username.asc())
        )
        if domain_id is not None:
            stmt = stmt.where(User.domain_id == domain_id)

        result = await db.execute(stmt)
        return [
            LeaderboardEntry(
                user_id=user_id,
                username=username,
                domain_name=domain_name or settings.LEADERBOARD_NA_DOMAIN,
                total_points=int(points),
                rank=position,
            )
            for position, (user_id, username, domain_name, points) in enumerate(result.all(), start=1)
        ]
