"""
Record type registry.

Single mapping from a domain record type to the row class and discriminator
used to store it. Adding a record kind means adding one entry to ``_SHAPES``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from safehouse.db import models, schemas
from safehouse.errors import UnsupportedRecordKind
from safehouse.utils.kinds import RecordKind


@dataclass(frozen=True)
class RecordShape:
    kind: RecordKind
    domain_type: Type[schemas.BaseRecord]
    row_type: Type[models.BaseRecord]

    def serialize(self, record: schemas.BaseRecord) -> str:
        return record.model_dump_json(by_alias=True)

    def deserialize(self, content: str) -> schemas.BaseRecord:
        return self.domain_type.model_validate_json(content)


_SHAPES: Dict[RecordKind, RecordShape] = {
    RecordKind.CHILDREN: RecordShape(RecordKind.CHILDREN, schemas.ChildrenRecord, models.ChildrenRecord),
    RecordKind.CITIZENSHIP: RecordShape(RecordKind.CITIZENSHIP, schemas.CitizenshipRecord, models.CitizenshipRecord),
    RecordKind.DOMICILE: RecordShape(RecordKind.DOMICILE, schemas.DomicileRecord, models.DomicileRecord),
    RecordKind.EDUCATION_LEVEL: RecordShape(
        RecordKind.EDUCATION_LEVEL, schemas.EducationLevelRecord, models.EducationLevelRecord
    ),
    RecordKind.SPECIALITY: RecordShape(RecordKind.SPECIALITY, schemas.SpecialityRecord, models.SpecialityRecord),
}

_BY_DOMAIN_TYPE: Dict[type, RecordShape] = {shape.domain_type: shape for shape in _SHAPES.values()}


def resolve_storage_shape(record: schemas.BaseRecord) -> RecordShape:
    """Return the storage shape for a record's exact runtime type.

    Subclasses of registered types and look-alikes of ``BaseRecord`` are
    rejected: lookup is by ``type(record)``, not ``isinstance``.
    """
    shape = _BY_DOMAIN_TYPE.get(type(record))
    if shape is None:
        raise UnsupportedRecordKind(type(record))
    return shape


def shape_for_kind(kind: RecordKind | str) -> RecordShape:
    try:
        return _SHAPES[RecordKind(kind)]
    except ValueError:
        raise UnsupportedRecordKind(kind) from None


def registered_kinds() -> tuple[RecordKind, ...]:
    return tuple(_SHAPES)
