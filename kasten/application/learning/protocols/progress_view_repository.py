"""Protocol for the secondary indexes over progress records."""

from typing import Protocol

from kasten.domain.common.value_objects.ids import DeckId, ProgressId, UserId


class ProgressViewRepositoryProtocol(Protocol):
    """Protocol for key lookups in the progress views.

    All results come back in index order.
    """

    def find_ids_by_user_and_deck(self, user_id: UserId, deck_id: DeckId) -> list[ProgressId]: ...

    def find_ids_by_user(self, user_id: UserId) -> list[ProgressId]: ...

    def find_ids_by_deck(self, deck_id: DeckId) -> list[ProgressId]: ...

    def find_card_subjects(self, user_id: UserId, deck_id: DeckId, card_index: str) -> list[int]:
        """
        Find the subjects recorded for one card of a user's deck.

        Args:
            user_id: The learner
            deck_id: The deck
            card_index: Position of the card, as a decimal string

        Returns:
            Subject values of all matching rows
        """
        ...
