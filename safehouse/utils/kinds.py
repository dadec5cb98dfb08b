"""
Discriminator values for the polymorphic document and record tables.

The variant sets are closed: every consumer matches on these enums
exhaustively, and the stored discriminator column holds the enum value.
"""

from enum import Enum
from typing import Dict


class DocumentKind(str, Enum):
    INQUIRY = "inquiry"
    CHILDREN_CHANGE = "children_change"
    EDUCATION_CHANGE = "education_change"


class RecordKind(str, Enum):
    CHILDREN = "children"
    CITIZENSHIP = "citizenship"
    DOMICILE = "domicile"
    EDUCATION_LEVEL = "education_level"
    SPECIALITY = "speciality"


# The record each change document is created with; it may appear only once.
DEFINING_RECORD_KINDS: Dict[DocumentKind, RecordKind] = {
    DocumentKind.CHILDREN_CHANGE: RecordKind.CHILDREN,
    DocumentKind.EDUCATION_CHANGE: RecordKind.EDUCATION_LEVEL,
}
