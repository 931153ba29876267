"""
Delimiter Locator — boundary between the newsletter body and the trailing
subscription / footnotes block.

The boundary is a known introductory phrase ("If you'd like to get …").
In plain text a direct search is enough. In HTML the phrase's words are
interleaved with markup, so the phrase is found in the text view first and
then mapped back onto the markup:

    1. Strip tags, search the phrase in the text
    2. Take the first words of the matched text, rebuild them as a pattern
       that tolerates whitespace, &nbsp; and tags between words, search the HTML
    3. Last resort: search the phrase directly in the raw HTML
"""
import logging
import re
from typing import List, Optional

from newsletter_reader.config.constants import (
    APOSTROPHE_CHARS,
    APOSTROPHE_PATTERN,
    DELIMITER_WINDOW_CHARS,
    HTML_WORD_SEPARATOR,
    TEXT_WORD_SEPARATOR,
)
from newsletter_reader.config.settings import DELIMITER_MATCH_WORDS, NEWSLETTER_DELIMITER_PHRASE
from newsletter_reader.markup.dom import FragmentParser
from newsletter_reader.markup.tag_stripper import strip_tags

logger = logging.getLogger(__name__)


def _word_pattern(word: str) -> str:
    """Escape *word*; any apostrophe matches every apostrophe spelling."""
    return "".join(APOSTROPHE_PATTERN if ch in APOSTROPHE_CHARS else re.escape(ch) for ch in word)


def build_phrase_pattern(words: List[str], separator: str = TEXT_WORD_SEPARATOR) -> "re.Pattern[str]":
    """Case-insensitive pattern matching *words* in order, joined by *separator*."""
    return re.compile(separator.join(_word_pattern(w) for w in words), re.IGNORECASE)


def _search(pattern: "re.Pattern[str]", content: str) -> Optional[int]:
    match = pattern.search(content)
    return match.start() if match else None


def locate_delimiter(
    content: str,
    is_html: bool,
    phrase: Optional[str] = None,
    word_count: Optional[int] = None,
    parse_fragment: Optional[FragmentParser] = None,
) -> Optional[int]:
    """
    Offset of the delimiter phrase in *content*, or None.

    Args:
        content: Text or HTML (already unwrapped).
        is_html: Selects the markup-tolerant strategy.
        phrase: Delimiter phrase. Defaults to NEWSLETTER_DELIMITER_PHRASE.
        word_count: Words used to rebuild the HTML pattern. Defaults to DELIMITER_MATCH_WORDS.
        parse_fragment: Injected fragment parser for the text view.

    Returns:
        Offset into *content*. None triggers the generic fallback.
    """
    if phrase is None:
        phrase = NEWSLETTER_DELIMITER_PHRASE
    if word_count is None:
        word_count = DELIMITER_MATCH_WORDS

    words = phrase.split()
    if not words or not content:
        return None

    phrase_pattern = build_phrase_pattern(words)

    if not is_html:
        return _search(phrase_pattern, content)

    # 1. Text view
    text = strip_tags(content, parse_fragment)
    text_match = phrase_pattern.search(text)
    if text_match is None:
        logger.debug("Delimiter phrase not present in text view")
        return None

    # 2. Rebuild from the matched text and map back onto the markup
    window = text[text_match.start(): text_match.start() + DELIMITER_WINDOW_CHARS]
    anchor_words = window.split()[:word_count]
    offset = _search(build_phrase_pattern(anchor_words, HTML_WORD_SEPARATOR), content)
    if offset is not None:
        return offset

    # 3. Raw phrase in the markup
    logger.debug("Markup-tolerant delimiter search failed, trying raw phrase")
    offset = _search(phrase_pattern, content)
    if offset is None:
        logger.warning("Delimiter phrase found in text but not in markup")
    return offset
