"""Tests for the progress design documents and their provisioning."""

from structlog.testing import capture_logs

from kasten.config import Settings
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.design_documents import (
    BY_DECK_MAP,
    BY_USER_AND_DECK_MAP,
    CARD_SUBJECT_MAP,
    build_design_documents,
    provision_views,
)
from kasten.infrastructure.learning.repositories import ProgressViews
from tests.fake_couchdb import FakeCouchDB


class TestBuildDesignDocuments:
    def test_default_grouping(self, settings: Settings) -> None:
        documents = build_design_documents(ProgressViews.from_settings(settings))

        assert sorted(documents) == ["karten", "kasten", "user"]
        assert documents["kasten"] == {
            "gelernt-von": {"map": BY_USER_AND_DECK_MAP},
            "nach-id": {"map": BY_DECK_MAP},
        }
        assert list(documents["user"]) == ["nach-user"]
        assert documents["karten"]["fach-nach-karte"]["map"] == CARD_SUBJECT_MAP

    def test_card_index_is_emitted_as_string(self) -> None:
        assert "String(i)" in CARD_SUBJECT_MAP


class TestProvisionViews:
    def test_writes_every_design_document(
        self, couchdb_client: CouchDBClient, fake_couchdb: FakeCouchDB, settings: Settings
    ) -> None:
        written = provision_views(couchdb_client, ProgressViews.from_settings(settings))

        assert sorted(written) == ["karten", "kasten", "user"]
        assert sorted(fake_couchdb.design_documents) == ["karten", "kasten", "user"]
        assert fake_couchdb.design_documents["kasten"]["_id"] == "_design/kasten"

    def test_creates_missing_database(
        self, couchdb_client: CouchDBClient, fake_couchdb: FakeCouchDB, settings: Settings
    ) -> None:
        fake_couchdb.database_exists = False

        with capture_logs() as logs:
            provision_views(couchdb_client, ProgressViews.from_settings(settings))

        assert fake_couchdb.database_exists
        events = [entry["event"] for entry in logs if entry["event"] != "couchdb_request"]
        assert events[0] == "created_database"
        assert events.count("provisioned_design_document") == 3

    def test_running_twice_updates_in_place(
        self, couchdb_client: CouchDBClient, fake_couchdb: FakeCouchDB, settings: Settings
    ) -> None:
        views = ProgressViews.from_settings(settings)

        provision_views(couchdb_client, views)
        provision_views(couchdb_client, views)

        assert fake_couchdb.design_documents["user"]["_rev"].startswith("2-")
