"""
ValidationResult — outcome of validating a persisted ParsedEmail payload.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ValidationResult:
    """Schema + model validation outcome for a stored payload."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    payload: Optional[dict] = None          # normalized payload, only when valid

    def error_message(self) -> str:
        """Single human-readable line, suitable for re-prompting the user."""
        if self.valid:
            return ""
        return "; ".join(self.errors) or "invalid payload"
