"""Repository for Progress domain entities."""

from pydantic import ValidationError

from kasten.domain.common.exceptions import DomainError
from kasten.domain.common.value_objects.ids import ProgressId
from kasten.domain.learning.entities.progress import Progress
from kasten.exceptions import StoreError
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.mappers.progress_mapper import ProgressMapper
from kasten.infrastructure.learning.schemas.progress_document import ProgressDocument


class ProgressRepository:
    """Repository for Progress domain entities stored as CouchDB documents."""

    def __init__(self, client: CouchDBClient) -> None:
        self.client = client
        self.mapper = ProgressMapper()

    def find_by_id(self, progress_id: ProgressId) -> Progress | None:
        """
        Find a progress record by ID.

        Args:
            progress_id: The progress record ID

        Returns:
            Progress entity if found, None otherwise

        Raises:
            StoreError: If the stored document is not a valid progress record
        """
        if not progress_id.is_assigned:
            return None
        data = self.client.get_document(progress_id.value)
        if data is None:
            return None
        try:
            return self.mapper.to_domain(ProgressDocument.model_validate(data))
        except (ValidationError, DomainError) as exc:
            raise StoreError(
                f"Document {progress_id} is not a valid progress record: {exc}"
            ) from exc

    def save(self, progress: Progress) -> Progress:
        """
        Save a progress entity (create or whole-document replace).

        A record with an id overwrites the stored document; its revision is
        sent along, so the store rejects the write if the document changed.

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with store-assigned id and revision
        """
        document = self.mapper.to_document(progress)
        document_id, revision = self.client.save_document(document.to_json())
        saved = document.model_copy(update={"id": document_id, "rev": revision})
        return self.mapper.to_domain(saved)

    def delete(self, progress_id: ProgressId) -> bool:
        """
        Delete a progress record.

        Args:
            progress_id: The progress record ID

        Returns:
            True if deleted, False if not found
        """
        if not progress_id.is_assigned:
            return False
        return self.client.delete_document(progress_id.value)
