"""
Life-situation document repository functions.

Row-level primitives over the document table. Nothing here filters
soft-deleted rows except ``update_document_field``; read filtering is the
facade's job.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterator, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from safehouse.db import models
from safehouse.errors import NotFound

logger = logging.getLogger(__name__)


def survivor_exists(db: Session, survivor_id: uuid.UUID) -> bool:
    return db.scalar(select(models.Survivor.id).where(models.Survivor.id == survivor_id)) is not None


def insert_document(db: Session, document: models.LifeSituationDocument, *, commit: bool = True):
    """Persist a new document row; storage errors propagate after rollback."""
    db.add(document)
    try:
        if commit:
            db.commit()
            db.refresh(document)
        else:
            db.flush()
    except Exception as e:
        db.rollback()
        logger.error(f"Error inserting document {document.id}: {e}")
        raise
    return document


def fetch_document_by_id(db: Session, document_id: uuid.UUID) -> Optional[models.LifeSituationDocument]:
    return db.get(models.LifeSituationDocument, document_id)


def fetch_documents_by_survivor(db: Session, survivor_id: uuid.UUID) -> Iterator[models.LifeSituationDocument]:
    stmt = (
        select(models.LifeSituationDocument)
        .where(models.LifeSituationDocument.survivor_id == survivor_id)
        .order_by(models.LifeSituationDocument.created, models.LifeSituationDocument.id)
    )
    yield from db.scalars(stmt)


def update_document_field(
    db: Session,
    document_id: uuid.UUID,
    mutator: Callable[[models.LifeSituationDocument], None],
    *,
    variant: Type[models.LifeSituationDocument] = models.LifeSituationDocument,
):
    """Apply ``mutator`` to one live document of the given variant and commit."""
    db_document = db.scalar(
        select(variant).where(variant.id == document_id, variant.is_deleted.is_(False))
    )
    if db_document is None:
        logger.warning(f"Live {variant.__name__} with ID: {document_id} not found for update.")
        raise NotFound(f"{variant.__name__} {document_id} not found")
    mutator(db_document)
    try:
        db.commit()
        db.refresh(db_document)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating document {document_id}: {e}")
        raise
    return db_document
