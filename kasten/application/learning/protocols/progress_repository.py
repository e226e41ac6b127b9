"""Protocol for Progress repository in learning context."""

from typing import Protocol

from kasten.domain.common.value_objects.ids import ProgressId
from kasten.domain.learning.entities.progress import Progress


class ProgressRepositoryProtocol(Protocol):
    """Protocol for Progress record operations by document ID."""

    def find_by_id(self, progress_id: ProgressId) -> Progress | None:
        """
        Find a progress record by ID.

        Args:
            progress_id: The progress record ID

        Returns:
            Progress entity if found, None otherwise
        """
        ...

    def save(self, progress: Progress) -> Progress:
        """
        Save a progress entity (create or whole-document replace).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with store-assigned id and revision
        """
        ...

    def delete(self, progress_id: ProgressId) -> bool:
        """
        Delete a progress record.

        Args:
            progress_id: The progress record ID

        Returns:
            True if deleted, False if not found
        """
        ...
