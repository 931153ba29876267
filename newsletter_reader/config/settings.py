"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Delimiter ---
NEWSLETTER_DELIMITER_PHRASE: str = os.getenv("NEWSLETTER_DELIMITER_PHRASE", "If you'd like to get Money Stuff")
DELIMITER_MATCH_WORDS: int = int(os.getenv("DELIMITER_MATCH_WORDS", "6"))

# --- Wrapper ---
WRAPPER_ID_SUFFIX: str = os.getenv("WRAPPER_ID_SUFFIX", "wrapper")

# --- HTML parsing ---
# Any BeautifulSoup tree builder name: "html.parser", "lxml", "html5lib"
HTML_PARSER_FEATURES: str = os.getenv("HTML_PARSER_FEATURES", "html.parser")

# --- Host guard ---
MAX_INPUT_CHARS: int = int(os.getenv("MAX_INPUT_CHARS", "2000000"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
