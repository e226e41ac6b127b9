"""Pydantic schema for progress documents as stored in CouchDB."""

from pydantic import BaseModel, ConfigDict, Field


class ProgressDocument(BaseModel):
    """
    Stored shape of a progress record.

    Field aliases are the names used in the database, which the
    view map functions rely on.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(None, alias="_id", description="Document id")
    rev: str | None = Field(None, alias="_rev", description="Document revision")
    user: str = Field(..., alias="User", min_length=1, description="Learner id")
    deck: str = Field(..., alias="Kasten", min_length=1, description="Deck id")
    card_levels: list[int] = Field(
        default_factory=list, alias="Karten", description="Level per card, by position"
    )

    def to_json(self) -> dict[str, object]:
        """Serialize with database field names, leaving out unset id/revision."""
        return self.model_dump(by_alias=True, exclude_none=True)
