"""
Domain-split Pydantic schemas.

Re-exports survivors, records, inquiry sources and documents from one
import path.
"""

# Import order: define base/simple types first to satisfy forward refs
from .survivors import Survivor
from .records import (
    PlaceKind,
    EducationLevel,
    BaseRecord,
    ChildrenRecord,
    CitizenshipRecord,
    DomicileRecord,
    EducationLevelRecord,
    SpecialityRecord,
)
from .inquiry_sources import (
    InquiryChannel,
    InquirySource,
    SelfInquiry,
    ForwardedByOrganization,
    ForwardedByPerson,
    ForwardedBySurvivor,
)
from .life_situations import LifeSituationDocument, Inquiry, ChildrenChange, EducationChange

__all__ = [
    # survivors
    "Survivor",
    # records
    "PlaceKind",
    "EducationLevel",
    "BaseRecord",
    "ChildrenRecord",
    "CitizenshipRecord",
    "DomicileRecord",
    "EducationLevelRecord",
    "SpecialityRecord",
    # inquiry sources
    "InquiryChannel",
    "InquirySource",
    "SelfInquiry",
    "ForwardedByOrganization",
    "ForwardedByPerson",
    "ForwardedBySurvivor",
    # documents
    "LifeSituationDocument",
    "Inquiry",
    "ChildrenChange",
    "EducationChange",
]
