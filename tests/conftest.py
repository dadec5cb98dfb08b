import uuid

import pytest
from sqlalchemy.orm import sessionmaker

from safehouse.db import models
from safehouse.db.database import build_engine
from safehouse.db.mapping import LifeSituationMapper
from safehouse.db.repositories.life_situations import LifeSituationDocumentsRepository
from safehouse.utils.settings import IN_MEMORY_SQLITE_URL, DatabaseSettings


@pytest.fixture
def engine():
    # Fresh private in-memory database per test; build_engine creates the schema.
    eng = build_engine(DatabaseSettings(url=IN_MEMORY_SQLITE_URL))
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mapper():
    return LifeSituationMapper()


@pytest.fixture
def repository(db_session, mapper):
    return LifeSituationDocumentsRepository(db_session, mapper)


@pytest.fixture
def add_survivor(db_session):
    counter = {"num": 0}

    def _add(name="name"):
        counter["num"] += 1
        survivor_id = uuid.uuid4()
        db_session.add(models.Survivor(id=survivor_id, num=counter["num"], name=name))
        db_session.commit()
        return survivor_id

    return _add


@pytest.fixture
def add_inquiry(db_session):
    def _add(survivor_id, *, is_deleted=False, **fields):
        document_id = uuid.uuid4()
        db_session.add(models.Inquiry(id=document_id, survivor_id=survivor_id, is_deleted=is_deleted, **fields))
        db_session.commit()
        return document_id

    return _add


@pytest.fixture
def add_citizenship_row(db_session):
    def _add(document_id, content):
        record_id = uuid.uuid4()
        db_session.add(models.CitizenshipRecord(id=record_id, document_id=document_id, content=content))
        db_session.commit()
        return record_id

    return _add
