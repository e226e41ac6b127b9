from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed learner identifier."""

    value: str


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck ("Kasten") identifier."""

    value: str


@dataclass(frozen=True)
class ProgressId(EntityId):
    """
    Strongly-typed progress record identifier.

    The empty string marks a record that has not been stored yet;
    the store assigns the real id on insert.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("ProgressId must be a string")

    @classmethod
    def generate(cls) -> "ProgressId":
        return cls("")  # Store assigns real ID

    @property
    def is_assigned(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class Revision(ValueObject):
    """Opaque document version token handed out by the store."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Revision cannot be empty")

    def __str__(self) -> str:
        return self.value
