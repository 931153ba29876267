"""
Parse Orchestrator — main entry point of the newsletter parser.

Flow:
    1. Detect HTML vs plain text; unwrap forwarded HTML mail
    2. Look for the subscription phrase
    3. Found: split there, clean up HTML main content, extract footnotes
       Not found: generic fallback split

Errors (raised, recoverable by the caller):
    EmptyInputError     blank input
    NoMainContentError  nothing left before the delimiter
"""
import logging
from typing import Optional, Tuple

from newsletter_reader.config.constants import HTML_START_RE
from newsletter_reader.extraction.chain import run_chain, select_chain
from newsletter_reader.markup.dom import FragmentParser
from newsletter_reader.markup.sanitizer import sanitize_html
from newsletter_reader.markup.wrapper import extract_newsletter_body
from newsletter_reader.models.footnote import ParsedEmail
from newsletter_reader.models.parser_state import ParserState
from newsletter_reader.parsing.delimiter import locate_delimiter
from newsletter_reader.parsing.errors import EmailParseError, EmptyInputError, NoMainContentError
from newsletter_reader.parsing.fallback import apply_fallback
from newsletter_reader.parsing.metrics import record_parse_error, record_parse_path, timed_parse

logger = logging.getLogger(__name__)


def is_html_content(content: str) -> bool:
    """True when *content* contains at least one opening tag."""
    return bool(HTML_START_RE.search(content))


def _parse_delimited(state: ParserState, parse_fragment: Optional[FragmentParser]) -> ParsedEmail:
    offset = state.delimiter_offset
    assert offset is not None

    main = state.working_content[:offset].strip()
    trailing = state.working_content[offset:].strip()

    if state.is_html:
        main = sanitize_html(main)
    if not main.strip():
        raise NoMainContentError()

    footnotes, matcher = run_chain(trailing, select_chain(state.is_html), parse_fragment)

    state.path = "delimited"
    state.main_section = main
    state.footnote_section = trailing
    state.matcher = matcher
    return ParsedEmail(main_content=main, footnotes=list(footnotes))


def parse_email_with_state(
    content: str,
    phrase: Optional[str] = None,
    parse_fragment: Optional[FragmentParser] = None,
) -> Tuple[ParsedEmail, ParserState]:
    """
    Parse a newsletter and return the decisions taken along the way.

    Args:
        content: Pasted email content, HTML fragment or plain text.
        phrase: Delimiter phrase override (defaults to NEWSLETTER_DELIMITER_PHRASE).
        parse_fragment: Injected fragment parser (defaults to BeautifulSoup).

    Returns:
        (ParsedEmail, ParserState)

    Raises:
        EmptyInputError: If *content* is empty or whitespace-only.
        NoMainContentError: If nothing precedes the footnote block.
    """
    with timed_parse():
        try:
            if not content or not content.strip():
                raise EmptyInputError()

            # Detect format, unwrap forwarded mail
            is_html = is_html_content(content)
            working = extract_newsletter_body(content, parse_fragment=parse_fragment) if is_html else content
            state = ParserState(raw_input=content, is_html=is_html, working_content=working)

            # Find where the subscription block starts
            state.delimiter_offset = locate_delimiter(
                working, is_html, phrase=phrase, parse_fragment=parse_fragment
            )

            if state.delimited:
                parsed = _parse_delimited(state, parse_fragment)
            else:
                logger.info("Delimiter not found, using generic fallback")
                parsed = apply_fallback(state, parse_fragment)

        except EmailParseError as e:
            logger.warning("Email parse failed (%s): %s", type(e).__name__, e)
            record_parse_error(type(e).__name__)
            raise

    record_parse_path(state.path, state.is_html)
    logger.info(
        "Parsed %s email via %s path: %d footnotes (matcher=%s)",
        "HTML" if state.is_html else "plain-text",
        state.path,
        len(parsed.footnotes),
        state.matcher,
    )
    return parsed, state


def parse_email(
    content: str,
    phrase: Optional[str] = None,
    parse_fragment: Optional[FragmentParser] = None,
) -> ParsedEmail:
    """
    Turn pasted newsletter content into a ParsedEmail.

    Always succeeds for non-blank input unless a delimiter is found with
    nothing before it; ambiguous structure falls back instead of failing.
    """
    parsed, _state = parse_email_with_state(content, phrase=phrase, parse_fragment=parse_fragment)
    return parsed
