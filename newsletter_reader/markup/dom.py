"""
Fragment parser — the document-model capability needed by the Tag Stripper
and the Wrapper Extractor.

A fragment parser is any callable ``(html) -> BeautifulSoup``. The default one
is built once from HTML_PARSER_FEATURES; callers may inject their own
(e.g. an lxml-backed soup) wherever a ``parse_fragment`` argument is accepted.
"""
from typing import Callable, Optional

from bs4 import BeautifulSoup

from newsletter_reader.config.settings import HTML_PARSER_FEATURES

FragmentParser = Callable[[str], BeautifulSoup]


def soup_fragment_parser(features: str = HTML_PARSER_FEATURES) -> FragmentParser:
    """Return a fragment parser backed by the given BeautifulSoup tree builder."""

    def parse_fragment(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, features)

    return parse_fragment


default_fragment_parser: FragmentParser = soup_fragment_parser()


def resolve_fragment_parser(parse_fragment: Optional[FragmentParser]) -> FragmentParser:
    """Injected parser if given, else the one selected at startup."""
    return parse_fragment if parse_fragment is not None else default_fragment_parser
