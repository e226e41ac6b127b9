"""Common value objects shared across all domain modules."""

from .ids import DeckId, ProgressId, Revision, UserId

__all__ = [
    "DeckId",
    "ProgressId",
    "Revision",
    "UserId",
]
