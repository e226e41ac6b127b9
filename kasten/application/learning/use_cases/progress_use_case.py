"""Use case for progress record queries and bulk maintenance."""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

import structlog

from kasten.application.learning.protocols.progress_repository import ProgressRepositoryProtocol
from kasten.application.learning.protocols.progress_view_repository import (
    ProgressViewRepositoryProtocol,
)
from kasten.application.learning.use_cases.exceptions import (
    CardSubjectNotFoundError,
    ProgressNotFoundError,
)
from kasten.domain.common.value_objects.ids import DeckId, ProgressId, UserId
from kasten.domain.learning.entities.progress import Progress
from kasten.exceptions import ValidationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ProgressUseCase:
    """
    Use case for reading and writing progress records.

    Lookups by user or deck go through the views to get record IDs and then
    fetch every record by ID. Bulk operations run one record at a time and
    stop at the first error; records handled before the error stay changed.
    """

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        progress_view_repository: ProgressViewRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.progress_repository = progress_repository
        self.progress_view_repository = progress_view_repository

    def fetch_by_id(self, progress_id: str) -> Progress:
        """
        Get a progress record by its ID.

        Raises:
            ProgressNotFoundError: If no record has this ID
        """
        progress = self.progress_repository.find_by_id(ProgressId(progress_id))
        if progress is None:
            raise ProgressNotFoundError(progress_id)
        return progress

    def fetch_by_user_and_deck(self, user_id: str, deck_id: str) -> Progress:
        """
        Get the progress of a user for a deck.

        If the view holds more than one record for the pair, the first one
        in index order is used.

        Raises:
            ProgressNotFoundError: If the user has not studied the deck
        """
        # no record is stored under an empty user or deck id
        progress_ids: list[ProgressId] = []
        if user_id and deck_id:
            progress_ids = self.progress_view_repository.find_ids_by_user_and_deck(
                UserId(user_id), DeckId(deck_id)
            )
        if not progress_ids:
            raise ProgressNotFoundError(user_id=user_id, deck_id=deck_id)
        if len(progress_ids) > 1:
            logger.warning(
                "duplicate_progress_records",
                user_id=user_id,
                deck_id=deck_id,
                progress_ids=[str(progress_id) for progress_id in progress_ids],
            )
        return self.fetch_by_id(progress_ids[0].value)

    def fetch_all_by_user(self, user_id: str) -> list[Progress]:
        """
        Get every progress record of a user, in index order.

        Raises:
            ProgressNotFoundError: If a record listed by the view is gone;
                no partial result is returned
        """
        progress_ids = self._ids_by_user(user_id)
        return [self.fetch_by_id(progress_id.value) for progress_id in progress_ids]

    def fetch_all_by_deck(self, deck_id: str) -> list[Progress]:
        """
        Get every progress record for a deck, in index order.

        Raises:
            ProgressNotFoundError: If a record listed by the view is gone;
                no partial result is returned
        """
        progress_ids = self._ids_by_deck(deck_id)
        return [self.fetch_by_id(progress_id.value) for progress_id in progress_ids]

    def fetch_card_subject(self, user_id: str, deck_id: str, card_index: int | str) -> int:
        """
        Get the subject recorded for one card of a user's deck.

        Args:
            user_id: ID of the user
            deck_id: ID of the deck
            card_index: Position of the card, as int or decimal string

        Returns:
            Subject of the first matching view row

        Raises:
            CardSubjectNotFoundError: If the view has no row for the card
        """
        index_key = str(card_index).strip()
        subjects: list[int] = []
        if user_id and deck_id:
            subjects = self.progress_view_repository.find_card_subjects(
                UserId(user_id), DeckId(deck_id), index_key
            )
        if not subjects:
            raise CardSubjectNotFoundError(user_id, deck_id, index_key)
        return subjects[0]

    def create(self, progress: Progress) -> Progress:
        """
        Store a new progress record.

        Does not look for an existing record of the same user and deck.

        Returns:
            The stored record with its assigned id and revision
        """
        created = self.progress_repository.save(progress)
        logger.info(
            "created_progress",
            progress_id=created.id.value,
            user_id=created.user_id.value,
            deck_id=created.deck_id.value,
        )
        return created

    def replace(self, progress: Progress) -> Progress:
        """
        Overwrite a stored progress record with the given one.

        The whole document is written. The record's revision travels with
        it, so a write based on an outdated revision fails in the store.

        Returns:
            The stored record with its new revision

        Raises:
            ValidationError: If the record has never been stored
            ConflictError: If the stored document has a newer revision
        """
        if not progress.id.is_assigned:
            raise ValidationError("Cannot replace a progress record without an id")
        replaced = self.progress_repository.save(progress)
        logger.debug("replaced_progress", progress_id=replaced.id.value)
        return replaced

    def delete_by_id(self, progress_id: str) -> None:
        """
        Delete a progress record.

        Raises:
            ProgressNotFoundError: If no record has this ID
        """
        deleted = self.progress_repository.delete(ProgressId(progress_id))
        if not deleted:
            raise ProgressNotFoundError(progress_id)
        logger.info("deleted_progress", progress_id=progress_id)

    def delete_all_by_deck(self, deck_id: str) -> int:
        """
        Delete every progress record for a deck.

        Not atomic: the first failing delete aborts the run and leaves the
        remaining records in place. Running it again resumes the work.

        Returns:
            Number of deleted records
        """
        progress_ids = self._ids_by_deck(deck_id)
        deleted = _run_sequentially(
            "delete_all_by_deck",
            [progress_id.value for progress_id in progress_ids],
            self.delete_by_id,
        )
        logger.info("deleted_deck_progress", deck_id=deck_id, count=deleted)
        return deleted

    def replace_all(self, progresses: Iterable[Progress]) -> int:
        """
        Replace several progress records one after another.

        Stops at the first error; later records are not written.

        Returns:
            Number of replaced records
        """
        return _run_sequentially("replace_all", list(progresses), self.replace)

    def _ids_by_user(self, user_id: str) -> list[ProgressId]:
        if not user_id:
            return []
        return self.progress_view_repository.find_ids_by_user(UserId(user_id))

    def _ids_by_deck(self, deck_id: str) -> list[ProgressId]:
        if not deck_id:
            return []
        return self.progress_view_repository.find_ids_by_deck(DeckId(deck_id))


def _run_sequentially(operation: str, items: Sequence[T], action: Callable[[T], object]) -> int:
    """Apply an action to each item in order, stopping at the first error."""
    completed = 0
    for item in items:
        try:
            action(item)
        except Exception:
            logger.warning(
                "bulk_operation_aborted",
                operation=operation,
                completed=completed,
                total=len(items),
            )
            raise
        completed += 1
    return completed
