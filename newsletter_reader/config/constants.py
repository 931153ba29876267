"""
Constants used across the parser.
All regex patterns and fixed thresholds live here.

Tag patterns use ``[^<>]*`` inside a tag and stop element bodies at the next
footnote opener, so an unclosed tag never makes a match scan to the end of
the input.
"""
import re
from typing import List, Tuple

# =============================================================================
# Format detection
# =============================================================================
HTML_START_RE = re.compile(r"<[a-z][^<>]*>", re.IGNORECASE)

# =============================================================================
# Delimiter reconstruction
# =============================================================================
DELIMITER_WINDOW_CHARS: int = 50

# Any apostrophe spelling seen in newsletter markup and its rendered text,
# including zero-padded numeric references (&#039;).
APOSTROPHE_PATTERN: str = (
    r"(?:'|’|‘|&#0*39;|&#x0*27;|&apos;|&rsquo;|&lsquo;|&#0*821[67];|&#x0*201[89];)"
)
APOSTROPHE_CHARS = frozenset({"'", "’", "‘"})

# Between two delimiter words in markup: whitespace, non-breaking space entities, or tags.
HTML_WORD_SEPARATOR: str = r"(?:\s|&nbsp;|&#0*160;|&#x0*a0;|<[^<>]*>)+"
TEXT_WORD_SEPARATOR: str = r"\s+"

# =============================================================================
# Sanitizer
# =============================================================================
# Anchored at the start of a whitespace run
STYLE_ATTR_RE = re.compile(r"""(?<!\s)\s+style\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
CLASS_ATTR_RE = re.compile(r"""(?<!\s)\s+class\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
OFFICE_PARAGRAPH_RE = re.compile(
    r"<o:p\b[^<>]*/>|<o:p\b[^<>]*>(?:(?!<o:p\b).)*?</o:p>",
    re.IGNORECASE | re.DOTALL,
)
EMPTY_SPAN_RE = re.compile(r"<span\b[^<>]*></span>", re.IGNORECASE)
FOOTNOTE_ANCHOR_RE = re.compile(
    r"""<a\b[^<>]*href\s*=\s*["'][^"'<>]*footnote[_-]?(\d+)["'][^<>]*>((?:(?!<a\b).)*?)</a>""",
    re.IGNORECASE | re.DOTALL,
)

FOOTNOTE_LINK_CLASS: str = "footnote-link"
FOOTNOTE_REF_CLASS: str = "footnote-ref"

# =============================================================================
# Footnote definition patterns (priority order lives in extraction.chain)
# =============================================================================
# The id attribute itself, not data-id / aria-*id
ID_ATTR: str = r"(?<![\w-])id\s*=\s*"

FOOTNOTE_DIV_OPEN: str = r"<div\b[^<>]*" + ID_ATTR + r"""["'][^"'<>]*footnote"""
FOOTNOTE_ELEMENT_OPEN: str = r"<[a-z][a-z0-9]*\b[^<>]*" + ID_ATTR + r"""["']?[^"'\s<>]*footnote"""


def _body_until(stop: str) -> str:
    """Lazy element body that never runs past the *stop* opener."""
    return r"((?:(?!" + stop + r").)*?)"


HYPHENATED_DIV_RE = re.compile(
    FOOTNOTE_DIV_OPEN + r"""-(\d+)["'][^<>]*>""" + _body_until(FOOTNOTE_DIV_OPEN) + r"</div>",
    re.IGNORECASE | re.DOTALL,
)
UNHYPHENATED_DIV_RE = re.compile(
    FOOTNOTE_DIV_OPEN + r"""(\d+)["'][^<>]*>""" + _body_until(FOOTNOTE_DIV_OPEN) + r"</div>",
    re.IGNORECASE | re.DOTALL,
)
GENERIC_ID_RE = re.compile(
    r"<([a-z][a-z0-9]*)\b[^<>]*" + ID_ATTR
    + r"""["']?[^"'\s<>]*?footnote[_-]?(\d+)[^"'\s<>]*["']?[^<>]*>"""
    + _body_until(FOOTNOTE_ELEMENT_OPEN) + r"</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
SUPERSCRIPT_PARAGRAPH_RE = re.compile(
    r"<p\b[^<>]*>\s*<sup\b[^<>]*>\s*(\d+)\s*</sup>\s*" + _body_until(r"<p\b") + r"</p>",
    re.IGNORECASE | re.DOTALL,
)
BRACKET_TEXT_RE = re.compile(r"\[(\d+)\]\s*(.*?)(?=\[\d+\]|\Z)", re.DOTALL)
BRACKET_LINE_RE = re.compile(
    r"^[ \t]*\[(\d+)\][ \t]*(.*?)(?=^[ \t]*\[\d+\]|\Z)",
    re.MULTILINE | re.DOTALL,
)

# =============================================================================
# Reference markers
# =============================================================================
REFERENCE_MARKER_RE = re.compile(r"\[(\d+)\]")

# =============================================================================
# Generic fallback separators: (name, pattern, consumed)
# A consumed separator is dropped; an unconsumed one opens the trailing block.
# =============================================================================
FALLBACK_SEPARATORS: List[Tuple[str, "re.Pattern[str]", bool]] = [
    ("horizontal_rule", re.compile(r"<hr\b[^<>]*>", re.IGNORECASE), True),
    ("footnotes_heading", re.compile(r"<h[1-6]\b[^<>]*>\s*footnotes?\s*</h[1-6]>", re.IGNORECASE), True),
    ("footnotes_label", re.compile(r"footnotes?:", re.IGNORECASE), True),
    ("footnote_paragraph", re.compile(r"<p\b[^<>]*" + ID_ATTR + r"""["']?footnote""", re.IGNORECASE), False),
]

FOOTNOTE_ID_ELEMENT_RE = re.compile(
    FOOTNOTE_ELEMENT_OPEN + r"[_-]?\d+",
    re.IGNORECASE,
)

# =============================================================================
# Tag stripping
# =============================================================================
INVISIBLE_ELEMENTS: List[str] = ["script", "style", "noscript"]
RAW_TAG_RE = re.compile(r"<[^<>]*>")
