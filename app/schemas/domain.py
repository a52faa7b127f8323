"""Domain lead assignment schemas"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class DomainLeadAssign(BaseModel):
    user_id: UUID


class DomainLeadResponse(BaseModel):
    id: UUID
    user_id: UUID
    domain_id: UUID

    model_config = ConfigDict(from_attributes=True)
