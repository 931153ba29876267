"""
Tag Stripper — visible text of an HTML fragment.

Equivalent to DOM ``textContent`` with scripts and styles removed: text nodes
are concatenated as-is, no separators are inserted.
"""
import html as _html
import logging
from typing import Optional

from bs4 import ParserRejectedMarkup

from newsletter_reader.config.constants import INVISIBLE_ELEMENTS, RAW_TAG_RE
from newsletter_reader.markup.dom import FragmentParser, resolve_fragment_parser

logger = logging.getLogger(__name__)


def strip_tags(html: str, parse_fragment: Optional[FragmentParser] = None) -> str:
    """
    Return only the visible text of *html*.

    Malformed or unclosed markup is recovered best-effort. If the tree builder
    rejects the markup outright, tags are removed with a plain regex instead.
    """
    if not html:
        return ""

    parser = resolve_fragment_parser(parse_fragment)
    try:
        soup = parser(html)
    except ParserRejectedMarkup as e:
        logger.warning("Markup rejected by HTML parser, using regex strip: %s", e)
        return _html.unescape(RAW_TAG_RE.sub("", html))

    for element in soup(INVISIBLE_ELEMENTS):
        element.decompose()
    return soup.get_text()
