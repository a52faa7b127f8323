"""Leaderboard and points schemas"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.models.enums import PointsSourceType


class LeaderboardEntry(BaseModel):
    user_id: UUID
    username: str
    domain_name: str
    total_points: int
    rank: int


class PointsEntryResponse(BaseModel):
    id: UUID
    source_type: PointsSourceType
    source_id: UUID
    points: int
    reason: str
    awarded_by: Optional[UUID] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PointsSummary(BaseModel):
    user_id: UUID
    total_points: int
    entries: List[PointsEntryResponse] = []
