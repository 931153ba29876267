"""
Shared test fixtures for the newsletter parser test suite.
"""
import pytest
from bs4 import BeautifulSoup


# ==========================================================================
# HTML: footnote divs with Gmail-prefixed ids, no delimiter phrase
# ==========================================================================

@pytest.fixture
def footnote_divs_html():
    return """
<html>
<body>
<div>
<p>This is a test email with footnotes. Here is footnote reference [6] and another one [7].</p>
<p>More content with footnote [8] and [9].</p>
</div>

<div id="m_2112239859843597646footnote-6" style="font-style: italic;">
<p>[6] I mean, Elon Musk keeps taking new jobs, but that is a very special case.</p>
</div>
<div id="m_2112239859843597646footnote-7" style="font-style: italic;">
<p>[7] I am assuming that this is a small and simple software startup and there are no liabilities.</p>
</div>
<div id="m_2112239859843597646footnote-8" style="font-style: italic;">
<p>[8] "In a seven-figure deal," you could add, though I'm not sure that's even impressive these days.</p>
</div>
<div id="m_2112239859843597646footnote-9" style="font-style: italic;">
<p>[9] "It could not possibly be material to them financially" and "doing this would undermine the signal value of getting acquired by Google."</p>
</div>
</body>
</html>
"""


@pytest.fixture
def footnote_divs_expected():
    """(id, content) pairs found in footnote_divs_html."""
    return [
        (6, "[6] I mean, Elon Musk keeps taking new jobs, but that is a very special case."),
        (7, "[7] I am assuming that this is a small and simple software startup and there are no liabilities."),
        (8, "[8] \"In a seven-figure deal,\" you could add, though I'm not sure that's even impressive these days."),
        (
            9,
            "[9] \"It could not possibly be material to them financially\" and "
            "\"doing this would undermine the signal value of getting acquired by Google.\"",
        ),
    ]


# ==========================================================================
# HTML: newsletter with the subscription delimiter
# ==========================================================================

@pytest.fixture
def delimited_html():
    return """<div>
<h1>MoviePass Economy II</h1>
<p>The first thing<a href="https://example.com/x#m_1footnote-1" style="color:#000">[1]</a> is funny.</p>
<p class="body">The second thing<a href="#footnote_2">[2]</a> is too.</p>
<p>If you&#39;d like to get <b>Money Stuff</b> in handy email form, right in your inbox, please <a href="https://example.com/subscribe">subscribe at this link</a>.</p>
<div id="m_1footnote-1"><p>[1] First footnote with <i>emphasis</i>.</p></div>
<div id="m_1footnote-2"><p>[2] Second footnote.</p></div>
</div>"""


# ==========================================================================
# HTML: newsletter forwarded through a mail client
# ==========================================================================

@pytest.fixture
def forwarded_html():
    return """<div class="gmail_quote">
<img alt="Gmail" src="https://example.com/gmail-logo.png">
<div>Forwarding Reader &lt;sender@example.com&gt;</div>
<div>---------- Forwarded message ---------</div>
<div>Subject: Money Stuff: MoviePass Is Back With Betting</div>
<table id="m_-8215wrapper" width="100%">
<tr><td>
<a href="https://example.com/view">View in browser</a>
<h1>MoviePass Economy II</h1>
<p>MoviePass wants you to bet on movies.[1]</p>
<p>If you'd like to get Money Stuff in handy email form, right in your inbox, please subscribe.</p>
<div id="m_-8215footnote-1"><p>[1] Betting on box office results.</p></div>
</td></tr>
</table>
</div>"""


# ==========================================================================
# Plain text newsletter
# ==========================================================================

@pytest.fixture
def plain_text_email():
    return (
        "Money Stuff\n"
        "\n"
        "The first thing[1] is funny. The second thing[2] is also funny.\n"
        "\n"
        "If you'd like to get Money Stuff in handy email form, right in your inbox, "
        "please subscribe at this link.\n"
        "\n"
        "[1] First footnote.\n"
        "[2] Second footnote, which\n"
        "runs over two lines.\n"
    )


# ==========================================================================
# Fragment parser injection
# ==========================================================================

@pytest.fixture
def counting_fragment_parser():
    """html.parser-backed fragment parser that records every call."""
    calls = []

    def parse_fragment(html):
        calls.append(html)
        return BeautifulSoup(html, "html.parser")

    parse_fragment.calls = calls
    return parse_fragment
