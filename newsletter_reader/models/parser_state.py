"""
ParserState — transient record of one parse call.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ParserState:
    """What the orchestrator decided for a single input. Never persisted."""

    raw_input: str
    is_html: bool
    working_content: str                    # after wrapper extraction (HTML only)
    delimiter_offset: Optional[int] = None
    main_section: str = ""
    footnote_section: str = ""
    path: str = ""                          # "delimited" | "fallback"
    matcher: Optional[str] = None           # matcher that produced the footnotes

    @property
    def delimited(self) -> bool:
        return self.delimiter_offset is not None

    def to_dict(self) -> dict:
        return {
            "is_html": self.is_html,
            "delimiter_offset": self.delimiter_offset,
            "path": self.path,
            "matcher": self.matcher,
            "input_chars": len(self.raw_input),
            "main_chars": len(self.main_section),
            "footnote_chars": len(self.footnote_section),
        }
