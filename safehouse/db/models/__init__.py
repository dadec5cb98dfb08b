"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from one import path.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .survivors import Survivor
from .life_situations import LifeSituationDocument, Inquiry, ChildrenChange, EducationChange
from .records import (
    BaseRecord,
    ChildrenRecord,
    CitizenshipRecord,
    DomicileRecord,
    EducationLevelRecord,
    SpecialityRecord,
)

__all__ = [
    # base
    "Base",
    "now_utc",
    # survivors
    "Survivor",
    # documents
    "LifeSituationDocument",
    "Inquiry",
    "ChildrenChange",
    "EducationChange",
    # records
    "BaseRecord",
    "ChildrenRecord",
    "CitizenshipRecord",
    "DomicileRecord",
    "EducationLevelRecord",
    "SpecialityRecord",
]
