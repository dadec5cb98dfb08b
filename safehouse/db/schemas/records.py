"""
Record payloads attached to life-situation documents.

Payloads are stored as JSON with PascalCase field names (``Id``,
``Citizenship``, ...), which is what the aliases below produce.
"""
import uuid
from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class PlaceKind(str, Enum):
    FLAT = "flat"
    HOUSE = "house"
    DORM = "dorm"
    SHELTER = "shelter"
    STREET = "street"
    OTHER = "other"


class EducationLevel(str, Enum):
    NONE = "none"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    VOCATIONAL = "vocational"
    COURSES = "courses"
    HIGHER = "higher"


class BaseRecord(BaseModel):
    id: uuid.UUID
    model_config = ConfigDict(frozen=True, alias_generator=to_pascal, populate_by_name=True)


class ChildrenRecord(BaseRecord):
    has_children: bool
    details: Optional[str] = None


class CitizenshipRecord(BaseRecord):
    citizenship: str


class DomicileRecord(BaseRecord):
    details: Optional[str] = None
    place_kind: PlaceKind
    country: Optional[str] = None
    region: Optional[str] = None
    settlement: Optional[str] = None
    address: Optional[str] = None
    since: Optional[date] = None
    until: Optional[date] = None
    is_current: bool = False
    is_registered: bool = False
    with_relatives: bool = False
    with_children: bool = False


class EducationLevelRecord(BaseRecord):
    level: EducationLevel
    details: Optional[str] = None


class SpecialityRecord(BaseRecord):
    speciality: str
