"""
Reference Scanner — ``[N]`` markers in body text.

Independent of footnote extraction: callers compare the two to warn when the
source mail client truncated the footnotes.
"""
from typing import List

from newsletter_reader.config.constants import FOOTNOTE_REF_CLASS, REFERENCE_MARKER_RE
from newsletter_reader.models.footnote import ParsedEmail


def find_footnote_references(text: str) -> List[int]:
    """Distinct reference ids found in *text*, ascending."""
    if not text:
        return []
    return sorted({int(m.group(1)) for m in REFERENCE_MARKER_RE.finditer(text)})


def find_missing_footnotes(text: str, parsed: ParsedEmail) -> List[int]:
    """Referenced ids in *text* that have no footnote in *parsed*."""
    defined = set(parsed.footnote_ids)
    return [ref for ref in find_footnote_references(text) if ref not in defined]


def highlight_footnote_references(content: str) -> str:
    """Wrap every ``[N]`` marker in a span the reader can attach popovers to."""
    return REFERENCE_MARKER_RE.sub(
        lambda m: f'<span class="{FOOTNOTE_REF_CLASS}" data-footnote-id="{int(m.group(1))}">{m.group(0)}</span>',
        content,
    )
