"""
Progress entity tracking one learner's mastery of one deck.
"""

from dataclasses import dataclass, field

from kasten.domain.common.entity import Entity
from kasten.domain.common.exceptions import InvariantViolationError
from kasten.domain.common.value_objects import DeckId, ProgressId, Revision, UserId
from kasten.domain.learning.exceptions import CardIndexOutOfRangeError
from kasten.domain.learning.services.mastery import (
    MAX_CARD_LEVEL,
    MIN_CARD_LEVEL,
    is_valid_card_level,
    next_card_level,
)


@dataclass
class Progress(Entity[ProgressId]):
    """
    Learning progress of a user for a deck.

    Business Rules:
    - One level per card of the deck, addressed by the card's position
    - Every level lies between MIN_CARD_LEVEL and MAX_CARD_LEVEL
    - User and deck never change once the record exists
    - At most one record per (user, deck); callers must not create duplicates
    """

    id: ProgressId
    user_id: UserId
    deck_id: DeckId
    card_levels: list[int] = field(default_factory=list)
    revision: Revision | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.card_levels = list(self.card_levels)
        for position, level in enumerate(self.card_levels):
            if not is_valid_card_level(level):
                raise InvariantViolationError(
                    "Progress",
                    f"card {position} has level {level!r}, "
                    f"expected {MIN_CARD_LEVEL}..{MAX_CARD_LEVEL}",
                )

    @property
    def card_count(self) -> int:
        return len(self.card_levels)

    def record_answer(self, card_index: int, success: bool) -> int:
        """
        Apply an answer to a card and return its new level.

        A correct answer raises the level by one up to MAX_CARD_LEVEL,
        a wrong answer resets it to MIN_CARD_LEVEL. Other cards keep
        their levels.

        Args:
            card_index: Position of the card within the deck
            success: Whether the answer was correct

        Returns:
            The card's level after the answer

        Raises:
            CardIndexOutOfRangeError: If the index addresses no card; the
                record is left untouched
        """
        self._check_index(card_index)
        level = next_card_level(self.card_levels[card_index], success)
        self.card_levels[card_index] = level
        return level

    def _check_index(self, card_index: int) -> None:
        # negative indexes are rejected, never wrapped around
        if card_index < 0 or card_index >= self.card_count:
            raise CardIndexOutOfRangeError(card_index, self.card_count)

    @classmethod
    def create(cls, user_id: UserId, deck_id: DeckId, card_count: int) -> "Progress":
        """Create progress for a deck the user starts (ID is empty until persisted)."""
        if card_count < 0:
            raise InvariantViolationError("Progress", "card count cannot be negative")
        return cls(
            id=ProgressId.generate(),
            user_id=user_id,
            deck_id=deck_id,
            card_levels=[MIN_CARD_LEVEL] * card_count,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProgressId,
        user_id: UserId,
        deck_id: DeckId,
        card_levels: list[int],
        revision: Revision | None = None,
    ) -> "Progress":
        """Reconstitute progress from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            deck_id=deck_id,
            card_levels=card_levels,
            revision=revision,
        )
