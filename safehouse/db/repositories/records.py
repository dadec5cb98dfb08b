"""
Record repository functions.

Records are append-only: inserted once, never updated or deleted here.
"""
from __future__ import annotations

import logging
import uuid
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.orm import Session

from safehouse.db import models, schemas
from safehouse.db.repositories.record_registry import RecordShape
from safehouse.utils.kinds import RecordKind

logger = logging.getLogger(__name__)


def build_record_row(record: schemas.BaseRecord, document_id: uuid.UUID, shape: RecordShape) -> models.BaseRecord:
    return shape.row_type(id=record.id, document_id=document_id, content=shape.serialize(record))


def insert_record(
    db: Session,
    record: schemas.BaseRecord,
    document_id: uuid.UUID,
    shape: RecordShape,
    *,
    commit: bool = True,
) -> models.BaseRecord:
    db_record = build_record_row(record, document_id, shape)
    db.add(db_record)
    try:
        if commit:
            db.commit()
            db.refresh(db_record)
        else:
            db.flush()
    except Exception as e:
        db.rollback()
        logger.error(f"Error inserting {shape.kind.value} record {record.id}: {e}")
        raise
    return db_record


def fetch_records_by_discriminator(db: Session, kind: RecordKind) -> Iterator[models.BaseRecord]:
    """Stream every stored record of one kind across all documents."""
    stmt = (
        select(models.BaseRecord)
        .where(models.BaseRecord.discriminator == RecordKind(kind).value)
        .order_by(models.BaseRecord.id)
    )
    yield from db.scalars(stmt)


def fetch_records_by_document(db: Session, document_id: uuid.UUID) -> Iterator[models.BaseRecord]:
    stmt = (
        select(models.BaseRecord)
        .where(models.BaseRecord.document_id == document_id)
        .order_by(models.BaseRecord.id)
    )
    yield from db.scalars(stmt)


def document_has_record_kind(db: Session, document_id: uuid.UUID, kind: RecordKind) -> bool:
    stmt = select(models.BaseRecord.id).where(
        models.BaseRecord.document_id == document_id,
        models.BaseRecord.discriminator == RecordKind(kind).value,
    )
    return db.scalar(stmt.limit(1)) is not None
