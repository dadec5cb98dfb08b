import uuid
from datetime import datetime

import pytest
from pydantic import ValidationError

from safehouse.db import models, schemas
from safehouse.db.repositories.inquiry_sources import InquiryFields
from safehouse.errors import InvalidArgument, UnsupportedRecordKind
from safehouse.utils.kinds import DocumentKind

NOW = datetime(2026, 3, 1, 10, 30)


def _survivor_row():
    return models.Survivor(id=uuid.uuid4(), num=7, name="Survivor")


def _citizenship_row(document_id, label="c1"):
    record = schemas.CitizenshipRecord(id=uuid.uuid4(), citizenship=label)
    return models.CitizenshipRecord(id=record.id, document_id=document_id, content=record.model_dump_json(by_alias=True))


def test_record_to_row_serializes_payload(mapper):
    document_id = uuid.uuid4()
    record = schemas.SpecialityRecord(id=uuid.uuid4(), speciality="cook")
    row = mapper.record_to_row(record, document_id)
    assert isinstance(row, models.SpecialityRecord)
    assert row.document_id == document_id
    assert mapper.row_to_record(row) == record


def test_record_to_row_rejects_unknown_kind(mapper):
    class Tattoo(schemas.BaseRecord):
        pass

    with pytest.raises(UnsupportedRecordKind):
        mapper.record_to_row(Tattoo(id=uuid.uuid4()), uuid.uuid4())


def test_survivor_round_trip(mapper):
    survivor = schemas.Survivor(id=uuid.uuid4(), num=3, name="A")
    assert mapper.survivor_to_domain(mapper.survivor_to_row(survivor)) == survivor


def test_inquiry_row_materializes_as_inquiry(mapper):
    row = mapper.inquiry_to_row(
        document_id=uuid.uuid4(),
        is_deleted=False,
        created=NOW,
        last_edit=NOW,
        survivor_id=uuid.uuid4(),
        document_date=None,
        fields=InquiryFields(is_forwarded_by_person=True, forwarded_by_person="neighbour"),
    )
    assert row.discriminator == DocumentKind.INQUIRY.value
    row.survivor = _survivor_row()
    row.working_experience = "baker"

    document = mapper.document_to_domain(row, [_citizenship_row(row.id)])

    assert isinstance(document, schemas.Inquiry)
    assert document.working_experience == "baker"
    assert document.forwarded_by_person == "neighbour"
    assert not document.is_self_inquiry
    assert document.survivor.num == 7
    assert [r.citizenship for r in document.records] == ["c1"]


def test_children_change_picks_its_record(mapper):
    row = mapper.change_to_row(
        DocumentKind.CHILDREN_CHANGE,
        document_id=uuid.uuid4(),
        is_deleted=False,
        created=NOW,
        last_edit=NOW,
        survivor_id=uuid.uuid4(),
        document_date=NOW,
    )
    row.survivor = _survivor_row()
    children = schemas.ChildrenRecord(id=uuid.uuid4(), has_children=True, details="two")

    document = mapper.document_to_domain(row, [mapper.record_to_row(children, row.id)])

    assert isinstance(document, schemas.ChildrenChange)
    assert document.children_record == children


def test_children_change_without_record_fails_validation(mapper):
    row = mapper.change_to_row(
        DocumentKind.CHILDREN_CHANGE,
        document_id=uuid.uuid4(),
        is_deleted=False,
        created=NOW,
        last_edit=NOW,
        survivor_id=uuid.uuid4(),
        document_date=None,
    )
    row.survivor = _survivor_row()
    with pytest.raises(ValidationError):
        mapper.document_to_domain(row, [])


def test_change_to_row_rejects_inquiry_kind(mapper):
    with pytest.raises(InvalidArgument):
        mapper.change_to_row(
            DocumentKind.INQUIRY,
            document_id=uuid.uuid4(),
            is_deleted=False,
            created=NOW,
            last_edit=NOW,
            survivor_id=uuid.uuid4(),
            document_date=None,
        )


def test_unknown_document_discriminator_is_rejected(mapper):
    row = models.Inquiry(id=uuid.uuid4(), is_deleted=False, created=NOW, last_edit=NOW)
    row.survivor = _survivor_row()
    row.discriminator = "complaint"
    with pytest.raises(InvalidArgument):
        mapper.document_to_domain(row)
