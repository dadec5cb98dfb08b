import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index, Boolean, Uuid
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from safehouse.db.types import UtcDateTime
from safehouse.utils.kinds import DocumentKind


class LifeSituationDocument(Base):
    """Single-table row for every document variant, keyed by ``discriminator``."""
    __tablename__ = 'life_situation_documents'
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    survivor_id = Column(Uuid, ForeignKey('survivors.id'), nullable=False)
    discriminator = Column(String(32), nullable=False)
    created = Column(UtcDateTime, nullable=False, default=now_utc)
    last_edit = Column(UtcDateTime, nullable=False, default=now_utc)
    document_date = Column(UtcDateTime, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    survivor = relationship("Survivor", back_populates="documents")

    __mapper_args__ = {"polymorphic_on": discriminator}

    __table_args__ = (
        Index('idx_life_situation_documents_survivor_id', 'survivor_id'),
        Index('idx_life_situation_documents_discriminator', 'discriminator'),
    )


class Inquiry(LifeSituationDocument):
    working_experience = Column(Text, nullable=True)
    is_forwarded_by_organization = Column(Boolean, nullable=True, default=False)
    forwarded_by_organization = Column(Text, nullable=True)
    is_forwarded_by_person = Column(Boolean, nullable=True, default=False)
    forwarded_by_person = Column(Text, nullable=True)
    is_forwarded_by_survivor = Column(Boolean, nullable=True, default=False)
    forwarded_by_survivor = Column(Text, nullable=True)
    is_self_inquiry = Column(Boolean, nullable=True, default=False)
    self_inquiry_sources_mask = Column(Integer, nullable=True, default=0)

    __mapper_args__ = {"polymorphic_identity": DocumentKind.INQUIRY.value}


class ChildrenChange(LifeSituationDocument):
    __mapper_args__ = {"polymorphic_identity": DocumentKind.CHILDREN_CHANGE.value}


class EducationChange(LifeSituationDocument):
    __mapper_args__ = {"polymorphic_identity": DocumentKind.EDUCATION_CHANGE.value}
