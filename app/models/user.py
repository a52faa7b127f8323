"""Identity: users of every role"""

from sqlalchemy import Column, String, ForeignKey, Uuid, Enum
from sqlalchemy.orm import relationship

from app.models.base import BaseModel
from app.models.enums import Role


class User(BaseModel):
    """
    Unified user model for all roles (Admin, Lead, Member).
    domain_id is the member's domain; for leads it mirrors the current
    DomainLead row.
    """
    __tablename__ = "users"

    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(Role, name="user_role"), nullable=False, default=Role.MEMBER, index=True)
    domain_id = Column(Uuid, ForeignKey("domains.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    domain = relationship("Domain", back_populates="members")
    led_domains = relationship("DomainLead", back_populates="user", cascade="all, delete-orphan")
    submissions = relationship("Submission", back_populates="user", foreign_keys="Submission.user_id")
    points_entries = relationship("PointsEntry", back_populates="user", foreign_keys="PointsEntry.user_id")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_lead(self) -> bool:
        return self.role == Role.LEAD

    @property
    def is_member(self) -> bool:
        return self.role == Role.MEMBER

    def __repr__(self) -> str:
        return f"<User {self.username} ({self.role})>"
