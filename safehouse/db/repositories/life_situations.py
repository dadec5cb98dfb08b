"""
Life-situation documents repository.

Public async contract over the document and record tables: lookup, creation,
per-survivor listing, record attachment, working-experience updates and
citizenship autocomplete hints. Soft-deleted documents are invisible to
every read here except the citizenship hints.
"""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import AsyncIterator, Iterable, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from safehouse.cancellation import CancellationToken, ensure_token
from safehouse.db import models, schemas
from safehouse.db.mapping import LifeSituationMapper
from safehouse.db.repositories import citizenship as repo_citizenship
from safehouse.db.repositories import documents as repo_documents
from safehouse.db.repositories import records as repo_records
from safehouse.db.repositories.inquiry_sources import encode_inquiry_sources
from safehouse.db.repositories.record_registry import resolve_storage_shape
from safehouse.errors import ConstraintViolation, InvalidArgument, NotFound
from safehouse.utils.kinds import DEFINING_RECORD_KINDS, DocumentKind

logger = logging.getLogger(__name__)


class LifeSituationDocumentsRepository:
    """Repository facade bound to one session and one mapper.

    Every operation checks its cancellation token before touching storage, so
    a pre-cancelled call never writes anything.
    """

    def __init__(self, db: Session, mapper: LifeSituationMapper):
        if db is None:
            raise InvalidArgument("db session is required")
        if mapper is None:
            raise InvalidArgument("mapper is required")
        self._db = db
        self._mapper = mapper

    @contextmanager
    def _constraint_violations(self, subject: str):
        try:
            yield
        except (IntegrityError, FlushError) as e:
            self._db.rollback()
            logger.warning(f"Constraint violated while storing {subject}: {e}")
            raise ConstraintViolation(f"Constraint violated while storing {subject}") from e

    def _materialize(self, db_document: models.LifeSituationDocument) -> schemas.LifeSituationDocument:
        db_records = repo_records.fetch_records_by_document(self._db, db_document.id)
        return self._mapper.document_to_domain(db_document, db_records)

    def _require_survivor(self, survivor_id: uuid.UUID) -> None:
        if not repo_documents.survivor_exists(self._db, survivor_id):
            raise ConstraintViolation(f"Survivor {survivor_id} does not exist")

    def _require_live_document(self, document_id: uuid.UUID) -> models.LifeSituationDocument:
        db_document = repo_documents.fetch_document_by_id(self._db, document_id)
        if db_document is None or db_document.is_deleted:
            raise NotFound(f"Document {document_id} not found")
        return db_document

    async def get_single(
        self, document_id: uuid.UUID, cancellation: Optional[CancellationToken] = None
    ) -> schemas.LifeSituationDocument:
        token = ensure_token(cancellation)
        token.raise_if_cancelled()
        db_document = repo_documents.fetch_document_by_id(self._db, document_id)
        token.raise_if_cancelled()
        if db_document is None or db_document.is_deleted:
            raise NotFound(f"Document {document_id} not found")
        return self._materialize(db_document)

    async def create_inquiry(
        self,
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
        reserved: bool,
        inquiry_sources: Iterable[schemas.InquirySource],
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        """Create an inquiry with its sources folded into flat columns.

        ``reserved`` is accepted for call compatibility and is not stored.
        """
        ensure_token(cancellation).raise_if_cancelled()
        fields = encode_inquiry_sources(inquiry_sources)
        self._require_survivor(survivor_id)
        db_inquiry = self._mapper.inquiry_to_row(
            document_id=document_id,
            is_deleted=is_deleted,
            created=created,
            last_edit=last_edit,
            survivor_id=survivor_id,
            document_date=document_date,
            fields=fields,
        )
        with self._constraint_violations(f"inquiry {document_id}"):
            repo_documents.insert_document(self._db, db_inquiry)
        logger.info(f"Inquiry {document_id} created for survivor {survivor_id}")

    async def create_children_change(
        self,
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
        children_record: schemas.ChildrenRecord,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        ensure_token(cancellation).raise_if_cancelled()
        self._create_change(
            DocumentKind.CHILDREN_CHANGE, schemas.ChildrenRecord, children_record,
            document_id, is_deleted, created, last_edit, survivor_id, document_date,
        )

    async def create_education_change(
        self,
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
        education_record: schemas.EducationLevelRecord,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        ensure_token(cancellation).raise_if_cancelled()
        self._create_change(
            DocumentKind.EDUCATION_CHANGE, schemas.EducationLevelRecord, education_record,
            document_id, is_deleted, created, last_edit, survivor_id, document_date,
        )

    def _create_change(
        self,
        kind: DocumentKind,
        record_type: Type[schemas.BaseRecord],
        record: Optional[schemas.BaseRecord],
        document_id: uuid.UUID,
        is_deleted: bool,
        created: datetime,
        last_edit: datetime,
        survivor_id: uuid.UUID,
        document_date: Optional[datetime],
    ) -> None:
        if record is None:
            raise InvalidArgument(f"{kind.value} requires a {record_type.__name__}")
        if type(record) is not record_type:
            raise InvalidArgument(f"{kind.value} requires a {record_type.__name__}, got {type(record).__name__}")
        shape = resolve_storage_shape(record)
        self._require_survivor(survivor_id)
        db_document = self._mapper.change_to_row(
            kind,
            document_id=document_id,
            is_deleted=is_deleted,
            created=created,
            last_edit=last_edit,
            survivor_id=survivor_id,
            document_date=document_date,
        )
        with self._constraint_violations(f"{kind.value} {document_id}"):
            repo_documents.insert_document(self._db, db_document, commit=False)
            repo_records.insert_record(self._db, record, document_id, shape, commit=False)
            self._db.commit()
        logger.info(f"{kind.value} {document_id} created for survivor {survivor_id}")

    async def get_all_by_survivor(
        self, survivor_id: uuid.UUID, cancellation: Optional[CancellationToken] = None
    ) -> AsyncIterator[schemas.LifeSituationDocument]:
        token = ensure_token(cancellation)
        token.raise_if_cancelled()
        for db_document in repo_documents.fetch_documents_by_survivor(self._db, survivor_id):
            token.raise_if_cancelled()
            if db_document.is_deleted:
                continue
            yield self._materialize(db_document)

    async def add_record(
        self,
        document_id: uuid.UUID,
        record: schemas.BaseRecord,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        ensure_token(cancellation).raise_if_cancelled()
        if record is None:
            raise InvalidArgument("record is required")
        shape = resolve_storage_shape(record)
        db_document = self._require_live_document(document_id)
        if DEFINING_RECORD_KINDS.get(DocumentKind(db_document.discriminator)) == shape.kind and (
            repo_records.document_has_record_kind(self._db, document_id, shape.kind)
        ):
            raise ConstraintViolation(
                f"Document {document_id} already carries its {shape.kind.value} record"
            )
        with self._constraint_violations(f"{shape.kind.value} record {record.id}"):
            repo_records.insert_record(self._db, record, document_id, shape)
        logger.info(f"{shape.kind.value} record {record.id} attached to document {document_id}")

    async def set_working_experience(
        self,
        document_id: uuid.UUID,
        working_experience: Optional[str],
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        ensure_token(cancellation).raise_if_cancelled()

        def _apply(db_inquiry: models.Inquiry) -> None:
            db_inquiry.working_experience = working_experience

        repo_documents.update_document_field(self._db, document_id, _apply, variant=models.Inquiry)

    async def delete(self, document_id: uuid.UUID, cancellation: Optional[CancellationToken] = None) -> None:
        """Soft-delete a document; it stays stored but becomes invisible to reads."""
        ensure_token(cancellation).raise_if_cancelled()

        def _mark_deleted(db_document: models.LifeSituationDocument) -> None:
            db_document.is_deleted = True

        repo_documents.update_document_field(self._db, document_id, _mark_deleted)
        logger.info(f"Document {document_id} soft-deleted")

    async def get_citizenship_completions(
        self, cancellation: Optional[CancellationToken] = None
    ) -> AsyncIterator[str]:
        token = ensure_token(cancellation)
        token.raise_if_cancelled()
        for label in repo_citizenship.collect_citizenships(self._db):
            token.raise_if_cancelled()
            yield label
