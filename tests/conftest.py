"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from kasten.application.learning.use_cases.progress_use_case import ProgressUseCase
from kasten.application.learning.use_cases.record_answer_use_case import RecordAnswerUseCase
from kasten.config import Settings
from kasten.core import Container, create_container
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.repositories import ProgressViews
from tests.fake_couchdb import FakeCouchDB
from tests.fakes import InMemoryProgressStore


@pytest.fixture
def store() -> InMemoryProgressStore:
    """Fresh in-memory progress store for each test."""
    return InMemoryProgressStore()


@pytest.fixture
def progress_use_case(store: InMemoryProgressStore) -> ProgressUseCase:
    return ProgressUseCase(progress_repository=store, progress_view_repository=store)


@pytest.fixture
def record_answer_use_case(progress_use_case: ProgressUseCase) -> RecordAnswerUseCase:
    return RecordAnswerUseCase(progress_use_case=progress_use_case)


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, ENVIRONMENT="test", COUCHDB_URL="http://couchdb.test:5984")


@pytest.fixture
def fake_couchdb(settings: Settings) -> FakeCouchDB:
    return FakeCouchDB(settings.DATABASE_NAME, ProgressViews.from_settings(settings))


@pytest.fixture
def couchdb_client(
    settings: Settings, fake_couchdb: FakeCouchDB
) -> Generator[CouchDBClient, None, None]:
    """Client talking to the fake CouchDB."""
    client = CouchDBClient.from_settings(settings, transport=fake_couchdb.transport())
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def container(
    settings: Settings, couchdb_client: CouchDBClient
) -> Generator[Container, None, None]:
    """Application container wired to the fake CouchDB."""
    container = create_container(settings)
    container.couchdb_client.override(couchdb_client)
    try:
        yield container
    finally:
        container.couchdb_client.reset_override()
