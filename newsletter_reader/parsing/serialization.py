"""
Serialization — lossless JSON round-trip of ParsedEmail.

Storage itself belongs to the caller; this module only produces and checks
the JSON shape ({"mainContent", "footnotes": [{"id", "content", "originalHtml"}]}).

Load validation stages:
    1. JSON parse
    2. Schema conformance (jsonschema)
    3. Model construction (pydantic: id >= 1, sort order)
    4. Quality checks (duplicate ids → warning)
"""
import json
import logging
from collections import Counter
from typing import List

from jsonschema import ValidationError, validate
from pydantic import ValidationError as ModelValidationError

from newsletter_reader.config.schemas import PARSED_EMAIL_SCHEMA
from newsletter_reader.models.footnote import ParsedEmail
from newsletter_reader.models.validation import ValidationResult
from newsletter_reader.parsing.errors import EmailParseError

logger = logging.getLogger(__name__)


def dump_parsed_email(parsed: ParsedEmail, indent: int | None = None) -> str:
    """Serialize *parsed* to the persisted JSON shape."""
    return json.dumps(parsed.to_dict(), ensure_ascii=False, indent=indent)


def validate_parsed_payload(payload: str | dict) -> ValidationResult:
    """
    Multi-stage validation of a stored ParsedEmail payload.

    Args:
        payload: JSON string or already-decoded dict.

    Returns:
        ValidationResult with the decoded payload when valid.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Parse JSON
    # ------------------------------------------------------------------
    if isinstance(payload, dict):
        data = payload
    else:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 2: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=data, schema=PARSED_EMAIL_SCHEMA["schema"])
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 3: Model invariants
    # ------------------------------------------------------------------
    try:
        ParsedEmail.model_validate(data)
    except ModelValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(f"Model violation at {location}: {err['msg']}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 4: Quality checks
    # ------------------------------------------------------------------
    id_counts = Counter(f["id"] for f in data["footnotes"])
    duplicates = sorted(fid for fid, count in id_counts.items() if count > 1)
    if duplicates:
        warnings.append(f"Duplicate footnote ids: {duplicates}")

    return ValidationResult(valid=True, errors=errors, warnings=warnings, payload=data)


def load_parsed_email(payload: str | dict) -> ParsedEmail:
    """
    Rebuild a ParsedEmail from its persisted JSON shape.

    Raises:
        EmailParseError: If the payload fails validation.
    """
    result = validate_parsed_payload(payload)
    if not result.valid:
        logger.error("Stored parse result rejected: %s", result.errors)
        raise EmailParseError(f"Stored email is invalid: {result.error_message()}")
    for warning in result.warnings:
        logger.warning("Stored parse result: %s", warning)
    return ParsedEmail.model_validate(result.payload)
