"""
Footnote Extraction Chain — ordered fallback over the matchers.

The first matcher returning at least one footnote wins; lower-priority
matchers are never consulted after that, so ids from different encodings
never mix.

Chains:
    delimited HTML:  hyphenated div > unhyphenated div > generic id > bracket text
    fallback HTML:   hyphenated div > unhyphenated div > generic id > superscript > bracket text
    plain text:      bracket lines
"""
import logging
from typing import Callable, Optional, Sequence, Tuple

from newsletter_reader.extraction.matchers import (
    match_bracket_lines,
    match_bracket_text,
    match_generic_id,
    match_hyphenated_div,
    match_superscript_paragraph,
    match_unhyphenated_div,
)
from newsletter_reader.markup.dom import FragmentParser
from newsletter_reader.models.footnote import Footnote
from newsletter_reader.parsing.metrics import record_matcher_hit

logger = logging.getLogger(__name__)

Matcher = Callable[..., Tuple[Footnote, ...]]

DELIMITED_HTML_CHAIN: Tuple[Matcher, ...] = (
    match_hyphenated_div,
    match_unhyphenated_div,
    match_generic_id,
    match_bracket_text,
)

FALLBACK_HTML_CHAIN: Tuple[Matcher, ...] = (
    match_hyphenated_div,
    match_unhyphenated_div,
    match_generic_id,
    match_superscript_paragraph,
    match_bracket_text,
)

PLAIN_TEXT_CHAIN: Tuple[Matcher, ...] = (match_bracket_lines,)


def run_chain(
    block: str,
    chain: Sequence[Matcher],
    parse_fragment: Optional[FragmentParser] = None,
) -> Tuple[Tuple[Footnote, ...], Optional[str]]:
    """
    Evaluate *chain* against *block* until a matcher yields footnotes.

    Returns:
        (footnotes sorted by id, name of the winning matcher or None).
        The sort is stable: duplicate ids keep their document order.
    """
    if not block or not block.strip():
        return (), None

    for matcher in chain:
        found = matcher(block, parse_fragment)
        if found:
            logger.debug("Matcher %s found %d footnotes", matcher.__name__, len(found))
            record_matcher_hit(matcher.__name__)
            return tuple(sorted(found, key=lambda f: f.id)), matcher.__name__

    return (), None


def select_chain(is_html: bool, fallback: bool = False) -> Tuple[Matcher, ...]:
    if not is_html:
        return PLAIN_TEXT_CHAIN
    return FALLBACK_HTML_CHAIN if fallback else DELIMITED_HTML_CHAIN


def extract_footnotes(
    block: str,
    is_html: bool,
    fallback: bool = False,
    parse_fragment: Optional[FragmentParser] = None,
) -> Tuple[Footnote, ...]:
    """
    Extract footnote definitions from a trailing block.

    Args:
        block: Trailing block (after the delimiter or fallback separator).
        is_html: Whether the source was detected as HTML.
        fallback: Use the generic-fallback chain (adds superscript paragraphs).
        parse_fragment: Injected fragment parser for tag stripping.

    Returns:
        Footnotes sorted ascending by id; empty when nothing matched.
    """
    footnotes, _matcher = run_chain(block, select_chain(is_html, fallback), parse_fragment)
    return footnotes
