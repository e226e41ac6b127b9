"""Exceptions for learning use cases."""

from kasten.exceptions import NotFoundError


class ProgressNotFoundError(NotFoundError):
    """Progress record not found error."""

    def __init__(
        self,
        progress_id: str | None = None,
        *,
        user_id: str | None = None,
        deck_id: str | None = None,
    ) -> None:
        """Initialize with a record ID or the (user, deck) pair that was looked up."""
        self.progress_id = progress_id
        self.user_id = user_id
        self.deck_id = deck_id
        if progress_id is not None:
            super().__init__(f"Progress with id {progress_id} not found")
        elif user_id is not None and deck_id is not None:
            super().__init__(f"User {user_id} has not studied deck {deck_id}")
        else:
            super().__init__("Progress not found")


class CardSubjectNotFoundError(NotFoundError):
    """No subject is recorded for the card."""

    def __init__(self, user_id: str, deck_id: str, card_index: str) -> None:
        self.user_id = user_id
        self.deck_id = deck_id
        self.card_index = card_index
        super().__init__(
            f"No card {card_index} found in deck {deck_id} for user {user_id}"
        )
