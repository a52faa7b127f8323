"""Points ledger"""

from sqlalchemy import Column, String, Integer, ForeignKey, Uuid, Enum, Index
from sqlalchemy.orm import relationship

from app.models.base import BaseModel
from app.models.enums import PointsSourceType


class PointsEntry(BaseModel):
    """
    One award of points. source_id is the id of the graded *submission*
    (not of the assignment or quiz), so a re-grade can find and replace the
    previous award with a keyed lookup. At most one entry exists per
    (source_id, source_type).
    """
    __tablename__ = "points_entries"
    __table_args__ = (
        Index("uq_points_entries_source", "source_id", "source_type", unique=True),
    )

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    source_type = Column(Enum(PointsSourceType, name="points_source_type"), nullable=False)
    source_id = Column(Uuid, nullable=False)
    points = Column(Integer, nullable=False)
    reason = Column(String(500), nullable=False)
    awarded_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    user = relationship("User", back_populates="points_entries", foreign_keys=[user_id])

    def __repr__(self) -> str:
        return f"<PointsEntry {self.points} to {self.user_id} for {self.source_type} {self.source_id}>"
