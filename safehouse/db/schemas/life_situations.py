import uuid
from datetime import datetime
from typing import ClassVar, List, Optional
from pydantic import BaseModel, ConfigDict

from safehouse.utils.kinds import DocumentKind
from .survivors import Survivor
from .records import BaseRecord, ChildrenRecord, EducationLevelRecord
from .inquiry_sources import (
    InquirySource,
    SelfInquiry,
    ForwardedByOrganization,
    ForwardedByPerson,
    ForwardedBySurvivor,
)


class LifeSituationDocument(BaseModel):
    kind: ClassVar[DocumentKind]

    id: uuid.UUID
    is_deleted: bool = False
    created: datetime
    last_edit: datetime
    document_date: Optional[datetime] = None
    survivor: Survivor
    records: List[BaseRecord] = []
    model_config = ConfigDict(frozen=True)


class Inquiry(LifeSituationDocument):
    kind: ClassVar[DocumentKind] = DocumentKind.INQUIRY

    working_experience: Optional[str] = None
    sources: List[InquirySource] = []

    def source_of(self, source_type: type) -> Optional[InquirySource]:
        """Return the source of the given variant, if the inquiry has one."""
        return next((s for s in self.sources if type(s) is source_type), None)

    @property
    def is_self_inquiry(self) -> bool:
        return self.source_of(SelfInquiry) is not None

    @property
    def forwarded_by_organization(self) -> Optional[str]:
        source = self.source_of(ForwardedByOrganization)
        return source.name if source else None

    @property
    def forwarded_by_person(self) -> Optional[str]:
        source = self.source_of(ForwardedByPerson)
        return source.name if source else None

    @property
    def forwarded_by_survivor(self) -> Optional[str]:
        source = self.source_of(ForwardedBySurvivor)
        return source.name if source else None


class ChildrenChange(LifeSituationDocument):
    kind: ClassVar[DocumentKind] = DocumentKind.CHILDREN_CHANGE

    children_record: ChildrenRecord


class EducationChange(LifeSituationDocument):
    kind: ClassVar[DocumentKind] = DocumentKind.EDUCATION_CHANGE

    education_record: EducationLevelRecord
