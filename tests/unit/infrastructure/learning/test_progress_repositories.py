"""Tests for the CouchDB-backed progress repositories."""

import pytest

from kasten.config import Settings
from kasten.domain.common.value_objects import DeckId, ProgressId, UserId
from kasten.domain.learning.entities.progress import Progress
from kasten.exceptions import ConflictError, StoreError
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.repositories import (
    ProgressRepository,
    ProgressViewRepository,
    ProgressViews,
)
from tests.fake_couchdb import FakeCouchDB


@pytest.fixture
def repository(couchdb_client: CouchDBClient) -> ProgressRepository:
    return ProgressRepository(couchdb_client)


@pytest.fixture
def view_repository(couchdb_client: CouchDBClient, settings: Settings) -> ProgressViewRepository:
    return ProgressViewRepository(couchdb_client, ProgressViews.from_settings(settings))


class TestProgressRepository:
    def test_save_new_and_find(self, repository: ProgressRepository) -> None:
        saved = repository.save(Progress.create(UserId("U1"), DeckId("D1"), card_count=2))

        found = repository.find_by_id(saved.id)

        assert saved.id.is_assigned
        assert found == saved

    def test_find_missing(self, repository: ProgressRepository) -> None:
        assert repository.find_by_id(ProgressId("nope")) is None
        assert repository.find_by_id(ProgressId.generate()) is None

    def test_save_existing_replaces_document(
        self, repository: ProgressRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        saved = repository.save(Progress.create(UserId("U1"), DeckId("D1"), card_count=2))
        saved.record_answer(1, success=True)

        replaced = repository.save(saved)

        assert replaced.id == saved.id
        assert replaced.revision != saved.revision
        assert fake_couchdb.documents[saved.id.value]["Karten"] == [0, 1]

    def test_save_stale_record_conflicts(self, repository: ProgressRepository) -> None:
        saved = repository.save(Progress.create(UserId("U1"), DeckId("D1"), card_count=1))
        repository.save(saved)

        with pytest.raises(ConflictError):
            repository.save(saved)

    def test_delete(self, repository: ProgressRepository, fake_couchdb: FakeCouchDB) -> None:
        saved = repository.save(Progress.create(UserId("U1"), DeckId("D1"), card_count=1))

        assert repository.delete(saved.id) is True
        assert repository.delete(saved.id) is False
        assert fake_couchdb.documents == {}


    def test_foreign_document_is_store_error(
        self, repository: ProgressRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        fake_couchdb.put({"_id": "other", "type": "deck"})

        with pytest.raises(StoreError, match="Document other is not a valid progress record"):
            repository.find_by_id(ProgressId("other"))

    def test_stored_level_out_of_range_is_store_error(
        self, repository: ProgressRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        fake_couchdb.put({"_id": "bad", "User": "U1", "Kasten": "D1", "Karten": [7]})

        with pytest.raises(StoreError, match="bad") as exc_info:
            repository.find_by_id(ProgressId("bad"))
        assert exc_info.value.status_code == 502

class TestProgressViewRepository:
    def test_ids_by_user_and_deck(
        self, view_repository: ProgressViewRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        wanted = fake_couchdb.put({"User": "U1", "Kasten": "D1", "Karten": [0]})
        fake_couchdb.put({"User": "U1", "Kasten": "D2", "Karten": [0]})

        ids = view_repository.find_ids_by_user_and_deck(UserId("U1"), DeckId("D1"))

        assert ids == [ProgressId(wanted["_id"])]

    def test_ids_by_user_and_by_deck(
        self, view_repository: ProgressViewRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        a = fake_couchdb.put({"User": "U1", "Kasten": "D1", "Karten": [0]})
        b = fake_couchdb.put({"User": "U2", "Kasten": "D1", "Karten": [0]})
        c = fake_couchdb.put({"User": "U1", "Kasten": "D2", "Karten": [0]})

        by_user = view_repository.find_ids_by_user(UserId("U1"))
        by_deck = view_repository.find_ids_by_deck(DeckId("D1"))

        assert by_user == [ProgressId(a["_id"]), ProgressId(c["_id"])]
        assert by_deck == [ProgressId(a["_id"]), ProgressId(b["_id"])]

    def test_card_subjects(
        self, view_repository: ProgressViewRepository, fake_couchdb: FakeCouchDB
    ) -> None:
        fake_couchdb.put({"User": "U1", "Kasten": "D1", "Karten": [0, 2, 4]})

        assert view_repository.find_card_subjects(UserId("U1"), DeckId("D1"), "2") == [4]
        assert view_repository.find_card_subjects(UserId("U1"), DeckId("D1"), "3") == []

    def test_custom_view_locations(self) -> None:
        settings = Settings(_env_file=None, VIEW_BY_USER="progress/by-user")
        views = ProgressViews.from_settings(settings)
        fake = FakeCouchDB(settings.DATABASE_NAME, views)
        stored = fake.put({"User": "U1", "Kasten": "D1", "Karten": [0]})

        client = CouchDBClient.from_settings(settings, transport=fake.transport())
        ids = ProgressViewRepository(client, views).find_ids_by_user(UserId("U1"))
        client.close()

        assert ids == [ProgressId(stored["_id"])]
        assert fake.requests[-1].url.path == "/lernen/_design/progress/_view/by-user"
