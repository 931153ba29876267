"""
Wrapper Extractor — drops forwarding / email-client scaffolding.

Forwarded newsletters arrive inside client chrome (sender header, forwarded
subject line, logos). The newsletter itself is a table whose id ends with a
fixed suffix (e.g. ``m_-1234wrapper`` after Gmail prefixes it).
"""
import logging
from typing import Optional

from bs4 import ParserRejectedMarkup

from newsletter_reader.config.settings import WRAPPER_ID_SUFFIX
from newsletter_reader.markup.dom import FragmentParser, resolve_fragment_parser

logger = logging.getLogger(__name__)


def extract_newsletter_body(
    html: str,
    id_suffix: Optional[str] = None,
    parse_fragment: Optional[FragmentParser] = None,
) -> str:
    """
    Return the outer markup of the newsletter table, or *html* unchanged.

    Args:
        html: Full HTML as pasted by the user.
        id_suffix: Table id suffix. Defaults to WRAPPER_ID_SUFFIX.
        parse_fragment: Injected fragment parser (defaults to BeautifulSoup).
    """
    if id_suffix is None:
        id_suffix = WRAPPER_ID_SUFFIX

    parser = resolve_fragment_parser(parse_fragment)
    try:
        soup = parser(html)
    except ParserRejectedMarkup as e:
        logger.warning("Markup rejected by HTML parser, keeping input as-is: %s", e)
        return html

    table = soup.find("table", id=lambda value: bool(value) and value.endswith(id_suffix))
    if table is None:
        return html

    logger.debug("Newsletter wrapper table found: id=%s", table.get("id"))
    return str(table)
