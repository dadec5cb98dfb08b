from sqlalchemy import Column, String, Text, ForeignKey, Index, Uuid
from .base import Base
from safehouse.utils.kinds import RecordKind


class BaseRecord(Base):
    """Single-table row for every record variant; ``content`` holds the JSON payload."""
    __tablename__ = 'records'
    id = Column(Uuid, primary_key=True)
    document_id = Column(Uuid, ForeignKey('life_situation_documents.id'), nullable=False)
    discriminator = Column(String(32), nullable=False)
    content = Column(Text, nullable=False)

    __mapper_args__ = {"polymorphic_on": discriminator}

    __table_args__ = (
        Index('idx_records_document_id', 'document_id'),
        Index('idx_records_discriminator', 'discriminator'),
    )


class ChildrenRecord(BaseRecord):
    __mapper_args__ = {"polymorphic_identity": RecordKind.CHILDREN.value}


class CitizenshipRecord(BaseRecord):
    __mapper_args__ = {"polymorphic_identity": RecordKind.CITIZENSHIP.value}


class DomicileRecord(BaseRecord):
    __mapper_args__ = {"polymorphic_identity": RecordKind.DOMICILE.value}


class EducationLevelRecord(BaseRecord):
    __mapper_args__ = {"polymorphic_identity": RecordKind.EDUCATION_LEVEL.value}


class SpecialityRecord(BaseRecord):
    __mapper_args__ = {"polymorphic_identity": RecordKind.SPECIALITY.value}
