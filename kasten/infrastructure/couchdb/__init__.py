from .client import CouchDBClient
from .views import ViewKey, ViewLocation, ViewRow, encode_key

__all__ = [
    "CouchDBClient",
    "ViewKey",
    "ViewLocation",
    "ViewRow",
    "encode_key",
]
