"""Notification schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from app.models.enums import NotificationType


class NotificationResponse(BaseModel):
    id: UUID
    title: str
    body: str
    type: NotificationType
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationMarkRead(BaseModel):
    """Either a single notification id or mark_all_read"""
    id: Optional[UUID] = None
    mark_all_read: bool = False

    @model_validator(mode="after")
    def check_target(self):
        if not self.mark_all_read and self.id is None:
            raise ValueError("Provide id or set mark_all_read")
        return self
