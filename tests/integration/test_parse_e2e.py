"""
Integration tests — full parse from pasted content to ParsedEmail.
"""
import re
import time

import pytest

from newsletter_reader.extraction.references import find_missing_footnotes
from newsletter_reader.parsing.errors import EmailParseError, EmptyInputError, NoMainContentError
from newsletter_reader.parsing.pipeline import is_html_content, parse_email, parse_email_with_state
from newsletter_reader.parsing.serialization import dump_parsed_email, load_parsed_email


class TestFormatDetection:
    def test_tag_means_html(self):
        assert is_html_content("Hello <b>there</b>") is True

    def test_angle_brackets_alone_are_text(self):
        assert is_html_content("1 < 2 and 3 > 2") is False


class TestParseEmailHtml:
    """Delimited and fallback parsing of HTML newsletters."""

    def test_delimited_newsletter(self, delimited_html):
        parsed, state = parse_email_with_state(delimited_html)

        assert state.path == "delimited"
        assert state.matcher == "match_hyphenated_div"
        assert parsed.footnote_ids == [1, 2]
        assert parsed.footnotes[0].content == "[1] First footnote with emphasis."
        assert parsed.footnotes[0].original_html == "<p>[1] First footnote with <i>emphasis</i>.</p>"

    def test_main_content_is_sanitized(self, delimited_html):
        parsed = parse_email(delimited_html)

        assert "MoviePass Economy II" in parsed.main_content
        assert "style=" not in parsed.main_content
        assert 'class="body"' not in parsed.main_content
        assert 'data-footnote-id="1"' in parsed.main_content
        assert 'data-footnote-id="2"' in parsed.main_content

    def test_subscription_text_excluded(self, delimited_html):
        parsed = parse_email(delimited_html)

        assert "subscribe at this link" not in parsed.main_content
        assert "First footnote" not in parsed.main_content

    def test_forwarded_newsletter_unwrapped(self, forwarded_html):
        parsed = parse_email(forwarded_html)

        assert "View in browser" in parsed.main_content
        assert "MoviePass Economy II" in parsed.main_content
        assert "sender@example.com" not in parsed.main_content
        assert "Forwarded message" not in parsed.main_content
        assert "MoviePass Is Back With Betting" not in parsed.main_content
        assert [(f.id, f.content) for f in parsed.footnotes] == [(1, "[1] Betting on box office results.")]

    def test_gmail_footnotes_without_delimiter(self, footnote_divs_html, footnote_divs_expected):
        parsed, state = parse_email_with_state(footnote_divs_html)

        assert state.path == "fallback"
        assert [(f.id, f.content) for f in parsed.footnotes] == footnote_divs_expected
        assert re.search(r"id=\"[^\"]*footnote-\d+\"", parsed.main_content) is None
        assert find_missing_footnotes(parsed.main_content, parsed) == []

    def test_zero_padded_apostrophe_stays_delimited(self):
        content = "<p>Body[1]</p><p>If you&#039;d like to get Money Stuff, subscribe.</p><p>[1] One.</p>"
        parsed, state = parse_email_with_state(content)

        assert state.path == "delimited"
        assert [(f.id, f.content) for f in parsed.footnotes] == [(1, "One.")]
        assert "subscribe" not in parsed.main_content

    def test_injected_fragment_parser_used(self, delimited_html, counting_fragment_parser):
        parsed = parse_email(delimited_html, parse_fragment=counting_fragment_parser)

        assert parsed.footnote_ids == [1, 2]
        assert counting_fragment_parser.calls


class TestParseEmailPlainText:
    def test_delimited_plain_text(self, plain_text_email):
        parsed, state = parse_email_with_state(plain_text_email)

        assert state.is_html is False
        assert state.path == "delimited"
        assert parsed.main_content == (
            "Money Stuff\n\nThe first thing[1] is funny. The second thing[2] is also funny."
        )
        assert [(f.id, f.content) for f in parsed.footnotes] == [
            (1, "First footnote."),
            (2, "Second footnote, which\nruns over two lines."),
        ]
        assert all(f.original_html is None for f in parsed.footnotes)

    def test_phrase_override(self):
        parsed = parse_email("Body.\nSTOP HERE\n[1] One.", phrase="stop here")

        assert parsed.main_content == "Body."
        assert parsed.footnote_ids == [1]

    def test_references_without_definitions(self):
        parsed, state = parse_email_with_state("Body[1] and more[2].")

        assert state.path == "fallback"
        assert parsed.main_content == "Body[1] and more[2]."
        assert parsed.footnotes == []
        assert find_missing_footnotes(parsed.main_content, parsed) == [1, 2]


class TestParseErrors:
    @pytest.mark.parametrize("content", ["", "   ", "\n\t\n"])
    def test_blank_input(self, content):
        with pytest.raises(EmptyInputError, match="Email content is empty"):
            parse_email(content)

    def test_delimiter_at_start(self):
        with pytest.raises(NoMainContentError):
            parse_email("If you'd like to get Money Stuff, subscribe.\n[1] A note.")

    def test_errors_share_base_class(self):
        assert issubclass(EmptyInputError, EmailParseError)
        assert issubclass(NoMainContentError, ValueError)


class TestParseProperties:
    def test_idempotent(self, delimited_html):
        assert parse_email(delimited_html) == parse_email(delimited_html)

    def test_result_survives_storage(self, forwarded_html):
        parsed = parse_email(forwarded_html)
        assert load_parsed_email(dump_parsed_email(parsed)) == parsed

    def test_footnotes_sorted(self):
        content = (
            "<p>Body[2][1].</p>"
            "<p>If you'd like to get Money Stuff, subscribe.</p>"
            '<div id="footnote-2">Two</div><div id="footnote-1">One</div>'
        )
        assert parse_email(content).footnote_ids == [1, 2]


class TestHostileInput:
    """Small hostile inputs must parse in bounded time."""

    def test_many_leading_rules(self):
        started = time.perf_counter()
        parsed = parse_email("<hr>" * 3000 + "<p>Body only.</p>")

        assert time.perf_counter() - started < 5.0
        assert "Body only." in parsed.main_content
        assert parsed.footnotes == []

    def test_many_unclosed_footnote_divs(self):
        started = time.perf_counter()
        parsed, state = parse_email_with_state("<p>Body[1]</p>" + '<div id="footnote-1">x' * 5000)

        assert time.perf_counter() - started < 5.0
        assert state.path == "fallback"
        assert parsed.main_content == "<p>Body[1]</p>"
        assert parsed.footnotes == []
