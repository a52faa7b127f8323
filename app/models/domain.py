"""Domains (learning tracks), their leads and resource library"""

from sqlalchemy import Column, String, Text, Integer, ForeignKey, UniqueConstraint, Uuid, Enum
from sqlalchemy.orm import relationship

from app.models.base import BaseModel, DomainScopedMixin
from app.models.enums import ResourceType


class Domain(BaseModel):
    """
    A learning track. Members belong to exactly one domain; leads are linked
    through DomainLead.
    """
    __tablename__ = "domains"

    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    max_capacity = Column(Integer, nullable=True)

    # Relationships
    members = relationship("User", back_populates="domain")
    leads = relationship("DomainLead", back_populates="domain", cascade="all, delete-orphan")
    assignments = relationship("Assignment", back_populates="domain")
    quizzes = relationship("Quiz", back_populates="domain")
    resources = relationship("Resource", back_populates="domain")

    def __repr__(self) -> str:
        return f"<Domain {self.name}>"


class DomainLead(BaseModel):
    """
    "User leads domain". The pair is unique; one active domain per lead is
    kept by DomainService.assign_lead, not by a constraint on user_id.
    """
    __tablename__ = "domain_leads"
    __table_args__ = (
        UniqueConstraint("user_id", "domain_id", name="uq_domain_leads_user_domain"),
    )

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    domain_id = Column(Uuid, ForeignKey("domains.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User", back_populates="led_domains")
    domain = relationship("Domain", back_populates="leads")

    def __repr__(self) -> str:
        return f"<DomainLead {self.user_id} -> {self.domain_id}>"


class Resource(BaseModel, DomainScopedMixin):
    """Library item (video, document, link). Managed by the resource library."""
    __tablename__ = "resources"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(Enum(ResourceType, name="resource_type"), nullable=False)
    url = Column(String(1000), nullable=False)
    uploaded_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    domain = relationship("Domain", back_populates="resources")

    def __repr__(self) -> str:
        return f"<Resource {self.type} {self.title}>"
