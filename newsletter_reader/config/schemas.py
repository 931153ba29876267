"""
JSON Schema for the persisted ParsedEmail shape.

The presentation layer stores parse results (e.g. in local storage) and
reloads them later; payloads are validated against this schema before they
are turned back into models.
"""

PARSED_EMAIL_SCHEMA: dict = {
    "name": "parsed_email_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["mainContent", "footnotes"],
        "properties": {
            "mainContent": {
                "type": "string",
                "minLength": 1,
                "description": "Newsletter body preceding the footnote block (HTML or text)",
            },
            "footnotes": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["id", "content"],
                    "properties": {
                        "id": {
                            "type": "integer",
                            "minimum": 1,
                            "description": "Footnote number as referenced by [N] markers",
                        },
                        "content": {
                            "type": "string",
                            "description": "Tag-free, trimmed footnote text",
                        },
                        "originalHtml": {
                            "type": ["string", "null"],
                            "description": "Raw inner fragment for richer rendering",
                        },
                    },
                },
            },
        },
    },
}
