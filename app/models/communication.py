"""Communication Models (Notifications)"""

from sqlalchemy import Column, String, Text, Boolean, ForeignKey, Uuid, Enum
from sqlalchemy.orm import relationship

from app.models.base import BaseModel
from app.models.enums import NotificationType


class Notification(BaseModel):
    """
    In-app notification record. Created by grading and publishing; the
    owning user may only flip is_read.
    """
    __tablename__ = "notifications"

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    type = Column(Enum(NotificationType, name="notification_type"), nullable=False, default=NotificationType.INFO)
    is_read = Column(Boolean, nullable=False, default=False, index=True)

    # Relationships
    user = relationship("User", back_populates="notifications")

    def __repr__(self) -> str:
        return f"<Notification {self.type} {'read' if self.is_read else 'unread'}>"
