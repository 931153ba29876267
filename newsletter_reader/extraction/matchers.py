"""
Footnote matchers — one function per footnote encoding.

Every matcher is a pure function ``(block, parse_fragment=None) -> tuple`` of
Footnote objects, in document order. Patterns are compiled module constants
and only used through ``finditer``, so no scan position survives a call.

Encodings:
    - Newsletter divs, id ending in ``footnote-N`` (Gmail prefixes the id)
    - Same without the hyphen, ``footnoteN``
    - Any element whose id contains ``footnote`` + digits
    - ``<p><sup>N</sup> …</p>`` paragraphs
    - ``[N] …`` segments in rendered text, or at line starts in plain text
"""
import logging
from typing import Iterable, Optional, Tuple

from newsletter_reader.config.constants import (
    BRACKET_LINE_RE,
    BRACKET_TEXT_RE,
    GENERIC_ID_RE,
    HYPHENATED_DIV_RE,
    SUPERSCRIPT_PARAGRAPH_RE,
    UNHYPHENATED_DIV_RE,
)
from newsletter_reader.markup.dom import FragmentParser
from newsletter_reader.markup.tag_stripper import strip_tags
from newsletter_reader.models.footnote import Footnote

logger = logging.getLogger(__name__)

Candidate = Tuple[str, str, Optional[str]]      # (id digits, content, original_html)


def _collect(candidates: Iterable[Candidate]) -> Tuple[Footnote, ...]:
    footnotes = []
    for raw_id, content, original_html in candidates:
        footnote_id = int(raw_id)
        content = content.strip()
        if not content or footnote_id < 1:
            continue
        footnotes.append(Footnote(id=footnote_id, content=content, original_html=original_html))
    return tuple(footnotes)


def _html_candidates(pattern, block: str, parse_fragment: Optional[FragmentParser], id_group: int, inner_group: int):
    for match in pattern.finditer(block):
        inner = match.group(inner_group)
        yield match.group(id_group), strip_tags(inner, parse_fragment), inner


# ==========================================================================
# HTML encodings
# ==========================================================================

def match_hyphenated_div(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """``<div id="m_123footnote-6">…</div>``"""
    return _collect(_html_candidates(HYPHENATED_DIV_RE, block, parse_fragment, 1, 2))


def match_unhyphenated_div(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """``<div id="m_123footnote6">…</div>``"""
    return _collect(_html_candidates(UNHYPHENATED_DIV_RE, block, parse_fragment, 1, 2))


def match_generic_id(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """Any tag with an id containing ``footnote`` + digits, up to its own closing tag."""
    return _collect(_html_candidates(GENERIC_ID_RE, block, parse_fragment, 2, 3))


def match_superscript_paragraph(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """``<p><sup>3</sup> text</p>``"""
    return _collect(_html_candidates(SUPERSCRIPT_PARAGRAPH_RE, block, parse_fragment, 1, 2))


# ==========================================================================
# Text encodings
# ==========================================================================

def match_bracket_text(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """
    ``[N] text`` segments in the rendered text of an HTML block.

    A segment runs until the next ``[N]`` or the end of the text.
    """
    text = strip_tags(block, parse_fragment)
    return _collect(
        (m.group(1), m.group(2), None) for m in BRACKET_TEXT_RE.finditer(text)
    )


def match_bracket_lines(block: str, parse_fragment: Optional[FragmentParser] = None) -> Tuple[Footnote, ...]:
    """
    Plain text: a line starting with ``[N]`` runs until the next such line
    or the end of the text, so multi-line footnotes stay whole.
    """
    return _collect(
        (m.group(1), m.group(2), None) for m in BRACKET_LINE_RE.finditer(block)
    )
