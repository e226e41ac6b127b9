"""View addressing and key encoding for CouchDB secondary indexes."""

import json
from dataclasses import dataclass
from typing import Any

# Scalar keys or ordered tuples of scalars
ViewKey = str | int | tuple[str | int, ...]


def encode_key(key: ViewKey) -> str:
    """
    Encode a view key the way CouchDB expects it in the ``key`` parameter.

    Composite keys become JSON arrays, so values containing quotes or
    brackets cannot change the shape of the key.
    """
    if isinstance(key, tuple):
        return json.dumps(list(key), separators=(",", ":"))
    return json.dumps(key, separators=(",", ":"))


@dataclass(frozen=True)
class ViewLocation:
    """A view inside a design document."""

    design: str
    view: str

    @classmethod
    def parse(cls, location: str) -> "ViewLocation":
        design, _, view = location.partition("/")
        if not design or not view:
            raise ValueError(f"View location '{location}' must look like 'design/view'")
        return cls(design=design, view=view)

    @property
    def path(self) -> str:
        return f"_design/{self.design}/_view/{self.view}"

    def __str__(self) -> str:
        return f"{self.design}/{self.view}"


@dataclass(frozen=True)
class ViewRow:
    """One row returned by a view query."""

    id: str
    key: Any
    value: Any
