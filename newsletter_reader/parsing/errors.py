"""
Parse error taxonomy.

Both errors are recoverable by the caller (re-prompt for input); their
messages are meant to be shown to the user as-is.
"""


class EmailParseError(ValueError):
    """Base class for inputs the parser cannot turn into a ParsedEmail."""


class EmptyInputError(EmailParseError):
    def __init__(self, message: str = "Email content is empty"):
        super().__init__(message)


class NoMainContentError(EmailParseError):
    def __init__(self, message: str = "No main content found before the subscription section"):
        super().__init__(message)
