"""
Typed Pydantic models for the parser output contract.

Field names are snake_case in Python; the JSON shape consumed by the
presentation layer uses the camelCase aliases (mainContent, originalHtml).
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Footnote(BaseModel):
    """
    A single numbered footnote definition.

    Identity is ``id``. Duplicates are possible when upstream markup is
    malformed; they are kept as found and never merged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=1, description="Footnote number as referenced by [N] markers.")
    content: str = Field(..., description="Tag-free, trimmed footnote text.")
    original_html: Optional[str] = Field(
        None,
        alias="originalHtml",
        description="Raw inner fragment for display; None for text-derived footnotes.",
    )


class ParsedEmail(BaseModel):
    """
    Main body plus its footnotes, sorted ascending by id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    main_content: str = Field(..., alias="mainContent")
    footnotes: List[Footnote] = Field(default_factory=list)

    @field_validator("footnotes")
    @classmethod
    def validate_sorted(cls, v: List[Footnote]) -> List[Footnote]:
        ids = [f.id for f in v]
        if ids != sorted(ids):
            raise ValueError(f"footnotes must be sorted ascending by id, got {ids}")
        return v

    @property
    def footnote_ids(self) -> List[int]:
        return [f.id for f in self.footnotes]

    def get_footnote(self, footnote_id: int) -> Optional[Footnote]:
        """Return the first footnote with *footnote_id*, used for reference → popover lookup."""
        for footnote in self.footnotes:
            if footnote.id == footnote_id:
                return footnote
        return None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
