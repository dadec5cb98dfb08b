"""
Citizenship autocomplete hints.

Collects the distinct citizenship labels stored across every document,
deleted or not: the vocabulary does not depend on any one case.
"""
from __future__ import annotations

import json
import logging
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from safehouse.db.repositories import records as repo_records
from safehouse.utils.kinds import RecordKind

logger = logging.getLogger(__name__)

CITIZENSHIP_FIELD = "Citizenship"


def _extract_label(content: str) -> Optional[str]:
    try:
        payload = json.loads(content)
    except (TypeError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    label = payload.get(CITIZENSHIP_FIELD)
    return label if isinstance(label, str) else None


def collect_citizenships(db: Session) -> Iterator[str]:
    """Yield distinct citizenship labels in ascending order.

    Recomputed on every call; records with unreadable content are skipped.
    """
    labels = set()
    for db_record in repo_records.fetch_records_by_discriminator(db, RecordKind.CITIZENSHIP):
        label = _extract_label(db_record.content)
        if label is None:
            logger.warning(f"Skipping citizenship record {db_record.id}: no readable '{CITIZENSHIP_FIELD}' field")
            continue
        labels.add(label)
    yield from sorted(labels)
