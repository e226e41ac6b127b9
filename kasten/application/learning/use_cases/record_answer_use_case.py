"""Use case for recording answers to cards."""

import structlog

from kasten.application.learning.use_cases.progress_use_case import ProgressUseCase
from kasten.domain.learning.entities.progress import Progress

logger = structlog.get_logger(__name__)


class RecordAnswerUseCase:
    """Use case for applying an answer to a card's mastery level."""

    def __init__(self, progress_use_case: ProgressUseCase) -> None:
        """Initialize use case with the progress access use case."""
        self.progress_use_case = progress_use_case

    def record_answer(
        self, user_id: str, deck_id: str, card_index: int, success: bool
    ) -> Progress:
        """
        Record that a user answered a card of a deck.

        The progress record is read, the card's level is moved up (capped
        at the top level) or reset, and the whole record is written back.
        The write carries the revision that was read, so a concurrent change
        to the same record surfaces as a ConflictError instead of being
        overwritten. Nothing is retried.

        Args:
            user_id: ID of the user
            deck_id: ID of the deck
            card_index: Position of the card within the deck
            success: Whether the answer was correct

        Returns:
            The stored progress record after the answer

        Raises:
            ProgressNotFoundError: If the user has not studied the deck
            CardIndexOutOfRangeError: If the index addresses no card
            ConflictError: If the record changed since it was read
        """
        progress = self.progress_use_case.fetch_by_user_and_deck(user_id, deck_id)
        level = progress.record_answer(card_index, success)
        progress = self.progress_use_case.replace(progress)

        logger.info(
            "recorded_answer",
            progress_id=progress.id.value,
            card_index=card_index,
            success=success,
            level=level,
        )
        return progress
