"""
Conversion between domain objects (pydantic schemas) and ORM rows.

Document and record variants are matched exhaustively against the closed
``DocumentKind``/``RecordKind`` enumerations; anything unregistered fails.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Iterable, List, Optional, Type

from safehouse.db import models, schemas
from safehouse.db.repositories import records as repo_records
from safehouse.db.repositories.inquiry_sources import InquiryFields, decode_inquiry_sources
from safehouse.db.repositories.record_registry import resolve_storage_shape, shape_for_kind
from safehouse.errors import InvalidArgument
from safehouse.utils.kinds import DocumentKind


class LifeSituationMapper:
    # Records
    def record_to_row(self, record: schemas.BaseRecord, document_id: uuid.UUID) -> models.BaseRecord:
        return repo_records.build_record_row(record, document_id, resolve_storage_shape(record))

    def row_to_record(self, db_record: models.BaseRecord) -> schemas.BaseRecord:
        return shape_for_kind(db_record.discriminator).deserialize(db_record.content)

    # Survivors
    def survivor_to_row(self, survivor: schemas.Survivor) -> models.Survivor:
        return models.Survivor(id=survivor.id, num=survivor.num, name=survivor.name)

    def survivor_to_domain(self, db_survivor: models.Survivor) -> schemas.Survivor:
        return schemas.Survivor.model_validate(db_survivor)

    # Documents
    def inquiry_to_row(
        self,
        *,
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
        fields: InquiryFields,
    ) -> models.Inquiry:
        return models.Inquiry(
            id=document_id,
            is_deleted=is_deleted,
            created=created,
            last_edit=last_edit,
            survivor_id=survivor_id,
            document_date=document_date,
            is_forwarded_by_organization=fields.is_forwarded_by_organization,
            forwarded_by_organization=fields.forwarded_by_organization,
            is_forwarded_by_person=fields.is_forwarded_by_person,
            forwarded_by_person=fields.forwarded_by_person,
            is_forwarded_by_survivor=fields.is_forwarded_by_survivor,
            forwarded_by_survivor=fields.forwarded_by_survivor,
            is_self_inquiry=fields.is_self_inquiry,
            self_inquiry_sources_mask=fields.self_inquiry_sources_mask,
        )

    def change_to_row(
        self,
        kind: DocumentKind,
        *,
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
    ) -> models.LifeSituationDocument:
        """Build the row for a record-carrying document variant."""
        if kind == DocumentKind.CHILDREN_CHANGE:
            row_type = models.ChildrenChange
        elif kind == DocumentKind.EDUCATION_CHANGE:
            row_type = models.EducationChange
        else:
            raise InvalidArgument(f"{kind!r} is not a record-carrying document kind")
        return row_type(
            id=document_id,
            is_deleted=is_deleted,
            created=created,
            last_edit=last_edit,
            survivor_id=survivor_id,
            document_date=document_date,
        )

    def document_to_domain(
        self,
        db_document: models.LifeSituationDocument,
        db_records: Iterable[models.BaseRecord] = (),
    ) -> schemas.LifeSituationDocument:
        records = [self.row_to_record(db_record) for db_record in db_records]
        common = dict(
            id=db_document.id,
            is_deleted=db_document.is_deleted,
            created=db_document.created,
            last_edit=db_document.last_edit,
            document_date=db_document.document_date,
            survivor=self.survivor_to_domain(db_document.survivor),
            records=records,
        )
        try:
            kind = DocumentKind(db_document.discriminator)
        except ValueError:
            raise InvalidArgument(f"Unsupported document kind: {db_document.discriminator!r}") from None
        if kind == DocumentKind.INQUIRY:
            return schemas.Inquiry(
                **common,
                working_experience=db_document.working_experience,
                sources=decode_inquiry_sources(db_document),
            )
        if kind == DocumentKind.CHILDREN_CHANGE:
            return schemas.ChildrenChange(
                **common, children_record=_first_of(records, schemas.ChildrenRecord)
            )
        if kind == DocumentKind.EDUCATION_CHANGE:
            return schemas.EducationChange(
                **common, education_record=_first_of(records, schemas.EducationLevelRecord)
            )
        raise InvalidArgument(f"Unsupported document kind: {kind!r}")


def _first_of(records: List[schemas.BaseRecord], record_type: Type[schemas.BaseRecord]):
    return next((record for record in records if type(record) is record_type), None)
