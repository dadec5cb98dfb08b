"""
Inquiry source encoding.

Folds the set of inquiry sources supplied at creation time into the flat
columns stored on an inquiry row, and unfolds them again on read.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from safehouse.db import models, schemas
from safehouse.errors import InvalidArgument


@dataclass(frozen=True)
class InquiryFields:
    is_forwarded_by_organization: bool = False
    forwarded_by_organization: Optional[str] = None
    is_forwarded_by_person: bool = False
    forwarded_by_person: Optional[str] = None
    is_forwarded_by_survivor: bool = False
    forwarded_by_survivor: Optional[str] = None
    is_self_inquiry: bool = False
    self_inquiry_sources_mask: int = 0


def encode_inquiry_sources(sources: Optional[Iterable[schemas.InquirySource]]) -> InquiryFields:
    """Return the flat inquiry columns for a collection of sources.

    A repeated variant overwrites the earlier free text; channel flags of every
    self-inquiry source are OR-ed into one mask.
    """
    values = {}
    mask = 0
    for source in sources or ():
        if isinstance(source, schemas.SelfInquiry):
            values["is_self_inquiry"] = True
            for channel in source.channels:
                mask |= int(channel)
        elif isinstance(source, schemas.ForwardedByOrganization):
            values["is_forwarded_by_organization"] = True
            values["forwarded_by_organization"] = source.name
        elif isinstance(source, schemas.ForwardedByPerson):
            values["is_forwarded_by_person"] = True
            values["forwarded_by_person"] = source.name
        elif isinstance(source, schemas.ForwardedBySurvivor):
            values["is_forwarded_by_survivor"] = True
            values["forwarded_by_survivor"] = source.name
        else:
            raise InvalidArgument(f"Unknown inquiry source: {type(source).__name__}")
    return InquiryFields(self_inquiry_sources_mask=mask, **values)


def decode_inquiry_sources(row: models.Inquiry) -> List[schemas.InquirySource]:
    sources: List[schemas.InquirySource] = []
    if row.is_self_inquiry:
        sources.append(schemas.SelfInquiry(channels=schemas.InquiryChannel(row.self_inquiry_sources_mask or 0)))
    if row.is_forwarded_by_organization:
        sources.append(schemas.ForwardedByOrganization(name=row.forwarded_by_organization or ""))
    if row.is_forwarded_by_person:
        sources.append(schemas.ForwardedByPerson(name=row.forwarded_by_person or ""))
    if row.is_forwarded_by_survivor:
        sources.append(schemas.ForwardedBySurvivor(name=row.forwarded_by_survivor or ""))
    return sources
