"""
Identity types for domain entities.

A progress record keeps its store-assigned id for its whole lifetime while
its card levels change on every answer.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base for string identifiers.

    Subclasses keep user, deck and record ids from being mixed up.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{type(self).__name__} must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Something with an ``id`` that outlives changes to its other fields."""

    id: IdType
