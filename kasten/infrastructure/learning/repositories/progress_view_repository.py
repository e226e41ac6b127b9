"""Read access to the secondary indexes CouchDB maintains over progress records."""

from dataclasses import dataclass

from kasten.config import Settings
from kasten.domain.common.value_objects.ids import DeckId, ProgressId, UserId
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.couchdb.views import ViewLocation


@dataclass(frozen=True)
class ProgressViews:
    """Locations of the four progress views."""

    by_user_and_deck: ViewLocation
    by_user: ViewLocation
    card_subject: ViewLocation
    by_deck: ViewLocation

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProgressViews":
        return cls(
            by_user_and_deck=ViewLocation.parse(settings.VIEW_BY_USER_AND_DECK),
            by_user=ViewLocation.parse(settings.VIEW_BY_USER),
            card_subject=ViewLocation.parse(settings.VIEW_CARD_SUBJECT),
            by_deck=ViewLocation.parse(settings.VIEW_BY_DECK),
        )


class ProgressViewRepository:
    """Key lookups against the progress views, returning rows in index order."""

    def __init__(self, client: CouchDBClient, views: ProgressViews) -> None:
        self.client = client
        self.views = views

    def find_ids_by_user_and_deck(self, user_id: UserId, deck_id: DeckId) -> list[ProgressId]:
        rows = self.client.query_view(self.views.by_user_and_deck, (user_id.value, deck_id.value))
        return [ProgressId(row.id) for row in rows]

    def find_ids_by_user(self, user_id: UserId) -> list[ProgressId]:
        rows = self.client.query_view(self.views.by_user, user_id.value)
        return [ProgressId(row.id) for row in rows]

    def find_ids_by_deck(self, deck_id: DeckId) -> list[ProgressId]:
        rows = self.client.query_view(self.views.by_deck, deck_id.value)
        return [ProgressId(row.id) for row in rows]

    def find_card_subjects(self, user_id: UserId, deck_id: DeckId, card_index: str) -> list[int]:
        """Subjects emitted for a card; the card index is keyed as a decimal string."""
        rows = self.client.query_view(
            self.views.card_subject, (user_id.value, deck_id.value, card_index)
        )
        return [row.value for row in rows]
