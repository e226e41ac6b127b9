"""
Map functions for the progress views and their provisioning.

All four views are computed from progress documents alone, so dropping
and re-creating them rebuilds the indexes from the stored records.
"""

import structlog

from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.repositories.progress_view_repository import ProgressViews

logger = structlog.get_logger(__name__)

BY_USER_AND_DECK_MAP = """function (doc) {
  if (doc.User && doc.Kasten) {
    emit([doc.User, doc.Kasten], doc._id);
  }
}"""

BY_USER_MAP = """function (doc) {
  if (doc.User && doc.Kasten) {
    emit(doc.User, doc._id);
  }
}"""

CARD_SUBJECT_MAP = """function (doc) {
  if (doc.User && doc.Kasten && doc.Karten) {
    for (var i = 0; i < doc.Karten.length; i++) {
      emit([doc.User, doc.Kasten, String(i)], doc.Karten[i]);
    }
  }
}"""

BY_DECK_MAP = """function (doc) {
  if (doc.User && doc.Kasten) {
    emit(doc.Kasten, doc._id);
  }
}"""


def build_design_documents(views: ProgressViews) -> dict[str, dict[str, dict[str, str]]]:
    """
    Group the view map functions by design document.

    Returns:
        Mapping of design document name to its ``views`` section
    """
    design_documents: dict[str, dict[str, dict[str, str]]] = {}
    for location, map_function in (
        (views.by_user_and_deck, BY_USER_AND_DECK_MAP),
        (views.by_user, BY_USER_MAP),
        (views.card_subject, CARD_SUBJECT_MAP),
        (views.by_deck, BY_DECK_MAP),
    ):
        design_documents.setdefault(location.design, {})[location.view] = {"map": map_function}
    return design_documents


def provision_views(client: CouchDBClient, views: ProgressViews) -> list[str]:
    """
    Create the database if needed and upload the progress design documents.

    Returns:
        Names of the design documents written
    """
    if client.ensure_database():
        logger.info("created_database", database=client.database)

    written = []
    for name, design_views in build_design_documents(views).items():
        revision = client.put_design_document(name, design_views)
        logger.info("provisioned_design_document", design=name, revision=revision)
        written.append(name)
    return written
