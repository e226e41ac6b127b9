"""Mapper for progress document ↔ Domain conversion."""

from kasten.domain.common.value_objects import DeckId, ProgressId, Revision, UserId
from kasten.domain.learning.entities.progress import Progress
from kasten.infrastructure.learning.schemas.progress_document import ProgressDocument


class ProgressMapper:
    """Mapper for progress document ↔ Domain conversion."""

    def to_domain(self, document: ProgressDocument) -> Progress:
        """Convert stored document to domain entity."""
        return Progress.create_with_id(
            id=ProgressId(document.id or ""),
            user_id=UserId(document.user),
            deck_id=DeckId(document.deck),
            card_levels=list(document.card_levels),
            revision=Revision(document.rev) if document.rev else None,
        )

    def to_document(self, domain_entity: Progress) -> ProgressDocument:
        """Convert domain entity to stored document."""
        return ProgressDocument(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            rev=domain_entity.revision.value if domain_entity.revision else None,
            user=domain_entity.user_id.value,
            deck=domain_entity.deck_id.value,
            card_levels=list(domain_entity.card_levels),
        )
