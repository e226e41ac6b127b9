"""
Base class for Value Objects.

Value objects here are frozen dataclasses, so equality, hashing and repr
come from the dataclass. The base only adds conversion to plain values for
documents and log fields.
"""

from dataclasses import astuple


class ValueObject:
    """
    Marker base for immutable, self-validating domain values.

    Subclasses are declared with ``@dataclass(frozen=True)`` and check their
    fields in ``__post_init__``.
    """

    def to_primitive(self) -> object:
        """Return the single wrapped value, or a tuple of all fields."""
        values = astuple(self)  # type: ignore[call-overload]
        return values[0] if len(values) == 1 else values
