"""CouchDB HTTP client used by the progress repositories."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from kasten.config import Settings
from kasten.exceptions import ConflictError, StoreError, StoreUnavailableError
from kasten.infrastructure.couchdb.views import ViewKey, ViewLocation, ViewRow, encode_key

logger = structlog.get_logger(__name__)


class CouchDBClient:
    """HTTP client for a single CouchDB database.

    Every failure reported by the server or the transport is raised as a
    StoreError subclass. Nothing is retried here.
    """

    def __init__(
        self,
        base_url: str,
        database: str,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.database = database
        auth = httpx.BasicAuth(username, password or "") if username else None
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=auth,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.BaseTransport | None = None
    ) -> "CouchDBClient":
        username = password = None
        if settings.couchdb_auth_enabled and settings.COUCHDB_PASSWORD is not None:
            username = settings.COUCHDB_USER
            password = settings.COUCHDB_PASSWORD.get_secret_value()
        return cls(
            base_url=settings.COUCHDB_URL,
            database=settings.DATABASE_NAME,
            username=username,
            password=password,
            timeout=settings.REQUEST_TIMEOUT,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _document_path(self, document_id: str) -> str:
        return f"/{self.database}/{quote(document_id, safe='')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        accept: tuple[int, ...] = (),
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and translate failures into store errors."""
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise StoreUnavailableError(f"CouchDB request timed out: {method} {path}") from exc
        except httpx.TransportError as exc:
            raise StoreUnavailableError(f"CouchDB is unreachable: {exc}") from exc

        logger.debug("couchdb_request", method=method, path=path, status=response.status_code)

        if response.status_code in accept:
            return response
        if response.status_code == 409:
            raise ConflictError(kwargs.get("json", {}).get("_id"))
        if response.is_error:
            raise StoreError(
                f"CouchDB {method} {path} failed with {response.status_code}: "
                f"{_error_reason(response)}"
            )
        return response

    # --- Documents ---

    def get_document(self, document_id: str) -> dict[str, Any] | None:
        """Fetch a document by ID, None if it does not exist."""
        response = self._request("GET", self._document_path(document_id), accept=(404,))
        if response.status_code == 404:
            return None
        return _json_body(response)

    def save_document(self, document: dict[str, Any]) -> tuple[str, str]:
        """
        Insert or overwrite a whole document.

        Documents without ``_id`` are posted and get an id from the server.
        Documents with ``_id`` replace the stored document; when ``_rev``
        is stale the server answers with a conflict.

        Returns:
            Tuple of (document id, new revision)
        """
        document_id = document.get("_id")
        if document_id:
            response = self._request("PUT", self._document_path(document_id), json=document)
        else:
            response = self._request("POST", f"/{self.database}", json=document)
        data = _json_body(response)
        return data["id"], data["rev"]

    def delete_document(self, document_id: str) -> bool:
        """
        Delete a document by ID.

        Returns:
            True if deleted, False if no such document exists
        """
        document = self.get_document(document_id)
        if document is None:
            return False
        response = self._request(
            "DELETE",
            self._document_path(document_id),
            params={"rev": document["_rev"]},
            accept=(404,),
        )
        return response.status_code != 404

    # --- Views ---

    def query_view(self, location: ViewLocation, key: ViewKey) -> list[ViewRow]:
        """Return the rows of a view matching a key, in index order."""
        response = self._request(
            "GET",
            f"/{self.database}/{location.path}",
            params={"key": encode_key(key)},
        )
        return [
            ViewRow(id=row.get("id", ""), key=row.get("key"), value=row.get("value"))
            for row in _json_body(response).get("rows", [])
        ]

    # --- Administration ---

    def ensure_database(self) -> bool:
        """Create the database. Returns False if it already existed."""
        response = self._request("PUT", f"/{self.database}", accept=(412,))
        return response.status_code != 412

    def put_design_document(self, name: str, views: dict[str, dict[str, str]]) -> str:
        """Create or update a design document. Returns its new revision."""
        document: dict[str, Any] = {
            "_id": f"_design/{name}",
            "language": "javascript",
            "views": views,
        }
        existing = self._request("GET", f"/{self.database}/_design/{name}", accept=(404,))
        if existing.status_code != 404:
            document["_rev"] = _json_body(existing)["_rev"]
        response = self._request("PUT", f"/{self.database}/_design/{name}", json=document)
        return _json_body(response)["rev"]


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        request = response.request
        raise StoreError(
            f"CouchDB {request.method} {request.url.path} returned a body that is not JSON"
        ) from exc


def _error_reason(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict):
        return str(data.get("reason") or data.get("error") or data)
    return str(data)
