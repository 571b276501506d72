"""SOQL query data model."""

from pydantic import BaseModel, ConfigDict, Field


class Query(BaseModel):
    """Fully built SOQL query.

    The retrieval engine never inspects ``text``; it is passed to the
    service verbatim. ``label`` only shows up in log records.
    """

    text: str = Field(..., min_length=1)
    label: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def __str__(self) -> str:
        return self.text
