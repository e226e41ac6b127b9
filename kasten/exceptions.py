"""Custom exception hierarchy for the kasten progress core."""


class KastenError(Exception):
    """Base exception for all kasten errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(KastenError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(KastenError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class StoreError(KastenError):
    """The document store rejected or failed a request."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message, status_code=status_code)


class StoreUnavailableError(StoreError):
    """The document store could not be reached or timed out."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=503)


class ConflictError(StoreError):
    """A document was written with a revision that is no longer current."""

    def __init__(self, document_id: str | None = None) -> None:
        self.document_id = document_id
        if document_id:
            message = f"Document {document_id} was changed concurrently"
        else:
            message = "Document update conflict"
        super().__init__(message, status_code=409)
