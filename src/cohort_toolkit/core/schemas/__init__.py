"""Schema validation for level-input and assessment payloads."""

from .validator import validate_level_input, validate_assessment, ValidationError

__all__ = ["validate_level_input", "validate_assessment", "ValidationError"]
