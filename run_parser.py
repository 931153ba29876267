"""
Run the newsletter parser on one saved email.

Reads:
  an HTML or plain-text file as pasted from the mail client

Produces:
  <input>.parsed.json  (or --output) in the persisted ParsedEmail shape

Also reports [N] references with no matching footnote, which usually means
the mail client clipped the message.
"""
import argparse
import logging
import sys
from pathlib import Path

from newsletter_reader.config.settings import LOG_LEVEL, MAX_INPUT_CHARS
from newsletter_reader.extraction.references import find_missing_footnotes
from newsletter_reader.parsing.errors import EmailParseError
from newsletter_reader.parsing.pipeline import parse_email_with_state
from newsletter_reader.parsing.serialization import dump_parsed_email

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_parser")


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    arg_parser.add_argument("input", type=Path, help="Saved email content (HTML or text)")
    arg_parser.add_argument("-o", "--output", type=Path, default=None, help="Where to write the JSON result")
    args = arg_parser.parse_args(argv)

    output_file: Path = args.output or args.input.with_suffix(".parsed.json")

    # -----------------------------------------------------------------------
    # Load input (size guard lives here, at the call boundary)
    # -----------------------------------------------------------------------
    content = args.input.read_text(encoding="utf-8", errors="replace")
    logger.info("input             : %s (%d chars)", args.input, len(content))

    if len(content) > MAX_INPUT_CHARS:
        logger.error("Input exceeds MAX_INPUT_CHARS (%d), refusing to parse", MAX_INPUT_CHARS)
        return 2

    # -----------------------------------------------------------------------
    # Parse
    # -----------------------------------------------------------------------
    try:
        parsed, state = parse_email_with_state(content)
    except EmailParseError as e:
        logger.error("Could not parse email: %s", e)
        return 1

    logger.info("format            : %s", "html" if state.is_html else "text")
    logger.info("path              : %s", state.path)
    logger.info("matcher           : %s", state.matcher)
    logger.info("footnotes         : %d", len(parsed.footnotes))

    missing = find_missing_footnotes(parsed.main_content, parsed)
    if missing:
        logger.warning(
            "References without footnotes: %s (the email may have been truncated)", missing
        )

    # -----------------------------------------------------------------------
    # Save output
    # -----------------------------------------------------------------------
    output_file.write_text(dump_parsed_email(parsed, indent=2), encoding="utf-8")
    logger.info("Output saved to   : %s", output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
