"""
Content Sanitizer — display cleanup of the main body.

Regex based: the markup is not re-serialized, so everything the
rules below do not touch reaches the reader byte-for-byte.

Rules:
    1. Drop style="…" and class="…" attributes
    2. Drop Outlook <o:p> markup
    3. Drop empty <span></span>
    4. Rewrite footnote anchors into internal footnote links
"""
from newsletter_reader.config.constants import (
    CLASS_ATTR_RE,
    EMPTY_SPAN_RE,
    FOOTNOTE_ANCHOR_RE,
    FOOTNOTE_LINK_CLASS,
    OFFICE_PARAGRAPH_RE,
    STYLE_ATTR_RE,
)


def _footnote_link(match) -> str:
    footnote_id = int(match.group(1))
    link_text = match.group(2)
    return (
        f'<a href="#footnote-{footnote_id}" class="{FOOTNOTE_LINK_CLASS}" '
        f'data-footnote-id="{footnote_id}">{link_text}</a>'
    )


def sanitize_html(html: str) -> str:
    """Strip client styling from *html* and make footnote anchors clickable in-app."""
    clean = STYLE_ATTR_RE.sub("", html)
    clean = CLASS_ATTR_RE.sub("", clean)
    clean = OFFICE_PARAGRAPH_RE.sub("", clean)
    clean = EMPTY_SPAN_RE.sub("", clean)

    # Runs after class removal so the link class survives
    return FOOTNOTE_ANCHOR_RE.sub(_footnote_link, clean)
