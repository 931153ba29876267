"""
Generic Fallback Parser — used when the delimiter phrase is absent.

Split strategy (first hit wins):
    1. Explicit separator: <hr>, a "Footnotes" heading, a "Footnotes:" label,
       or a <p> whose id starts with "footnote"
    2. [N] references in the text AND footnote-identified elements in the
       markup: split at the first such element
    3. No split: everything is main content, no footnotes
"""
import logging
from typing import Optional, Tuple

from newsletter_reader.config.constants import (
    FALLBACK_SEPARATORS,
    FOOTNOTE_ID_ELEMENT_RE,
    HTML_START_RE,
    RAW_TAG_RE,
    REFERENCE_MARKER_RE,
)
from newsletter_reader.extraction.chain import run_chain, select_chain
from newsletter_reader.markup.dom import FragmentParser
from newsletter_reader.markup.sanitizer import sanitize_html
from newsletter_reader.markup.tag_stripper import strip_tags
from newsletter_reader.models.footnote import ParsedEmail
from newsletter_reader.models.parser_state import ParserState
from newsletter_reader.parsing.errors import NoMainContentError

logger = logging.getLogger(__name__)


def _has_visible_text(fragment: str, is_html: bool, parse_fragment: Optional[FragmentParser]) -> bool:
    if not fragment.strip():
        return False
    if not is_html:
        return True
    # Tags only: nothing for the parser to find
    if not RAW_TAG_RE.sub("", fragment).strip():
        return False
    return bool(strip_tags(fragment, parse_fragment).strip())


def find_fallback_split(
    content: str,
    is_html: bool,
    parse_fragment: Optional[FragmentParser] = None,
) -> Optional[Tuple[int, int, str]]:
    """
    Locate where the footnote block starts.

    A separator occurrence only counts when visible text precedes it, so a
    leading <hr> does not swallow the whole email. Each stretch of content is
    checked once: only the slice since the previous occurrence is stripped.

    Returns:
        (main_end, trailing_start, reason) or None when no split applies.
    """
    for name, pattern, consumed in FALLBACK_SEPARATORS:
        scanned = 0
        for match in pattern.finditer(content):
            if _has_visible_text(content[scanned: match.start()], is_html, parse_fragment):
                trailing_start = match.end() if consumed else match.start()
                return match.start(), trailing_start, name
            scanned = match.start()

    has_references = bool(REFERENCE_MARKER_RE.search(strip_tags(content, parse_fragment) if is_html else content))
    first_definition = FOOTNOTE_ID_ELEMENT_RE.search(content)
    if has_references and first_definition is not None:
        return first_definition.start(), first_definition.start(), "footnote_element"

    return None


def apply_fallback(state: ParserState, parse_fragment: Optional[FragmentParser] = None) -> ParsedEmail:
    """
    Run the generic fallback on ``state.working_content`` and record the
    outcome on *state*.

    Raises:
        NoMainContentError: If sanitizing leaves nothing to show.
    """
    content = state.working_content
    split = find_fallback_split(content, state.is_html, parse_fragment)

    if split is None:
        logger.info("No footnote structure detected, whole input is main content")
        main, trailing = content.strip(), ""
    else:
        main_end, trailing_start, reason = split
        logger.debug("Fallback split by %s at offset %d", reason, main_end)
        main, trailing = content[:main_end].strip(), content[trailing_start:].strip()

    if state.is_html:
        main = sanitize_html(main)
    if not main.strip():
        raise NoMainContentError()

    footnotes, matcher = run_chain(trailing, select_chain(state.is_html, fallback=True), parse_fragment)

    state.path = "fallback"
    state.main_section = main
    state.footnote_section = trailing
    state.matcher = matcher
    return ParsedEmail(main_content=main, footnotes=list(footnotes))


def fallback_parse(
    content: str,
    is_html: Optional[bool] = None,
    parse_fragment: Optional[FragmentParser] = None,
) -> ParsedEmail:
    """
    Parse *content* without relying on the delimiter phrase.

    Args:
        content: Text or HTML.
        is_html: Format override; detected from the content when None.
        parse_fragment: Injected fragment parser.
    """
    if is_html is None:
        is_html = bool(HTML_START_RE.search(content))
    state = ParserState(raw_input=content, is_html=is_html, working_content=content)
    return apply_fallback(state, parse_fragment)
