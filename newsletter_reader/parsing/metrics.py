"""
Prometheus Metrics — parser observability.

Exposes counters and a histogram for:
- Parse outcomes per path (delimited / fallback)
- Which footnote matcher won the chain
- Parse errors per error type
- Parse latency

Usage
-----
    from newsletter_reader.parsing.metrics import timed_parse, record_parse_path

    with timed_parse():
        parsed = parse_email(content)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Successful parses, labelled by orchestrator path.
PARSE_OUTCOMES: Counter = Counter(
    "newsletter_parse_outcomes_total",
    "Successful parses by path (delimited / fallback)",
    ["path", "format"],
)

# Winning matcher of the footnote extraction chain.
MATCHER_HITS: Counter = Counter(
    "newsletter_footnote_matcher_hits_total",
    "Footnote extraction chain winners by matcher name",
    ["matcher"],
)

# Parse errors surfaced to the caller.
PARSE_ERRORS: Counter = Counter(
    "newsletter_parse_errors_total",
    "Parse errors by error type",
    ["error_type"],
)

# End-to-end parse latency (seconds).
PARSE_LATENCY: Histogram = Histogram(
    "newsletter_parse_seconds",
    "Time spent in one parse call in seconds",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_parse_path(path: str, is_html: bool) -> None:
    """Increment the outcome counter for *path*."""
    PARSE_OUTCOMES.labels(path=path, format="html" if is_html else "text").inc()


def record_matcher_hit(matcher: str) -> None:
    """Increment the hit counter for *matcher*."""
    MATCHER_HITS.labels(matcher=matcher).inc()


def record_parse_error(error_type: str) -> None:
    """Increment the error counter for *error_type*."""
    PARSE_ERRORS.labels(error_type=error_type).inc()


@contextmanager
def timed_parse() -> Generator[None, None, None]:
    """
    Context manager that records parse latency.

    Usage::

        with timed_parse():
            parsed = parse_email(content)
    """
    with PARSE_LATENCY.time():
        yield
