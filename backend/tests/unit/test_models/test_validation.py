"""Unit tests for validation models.

Tests cover:
- ValidationResult creation and constraints
- Factory functions for creating results
"""

import pytest
from pydantic import ValidationError

from auror_exam.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_valid_result(self) -> None:
        """ValidationResult can indicate success."""
        result = ValidationResult(valid=True)

        assert result.valid is True
        assert result.allowed is True
        assert result.rejection_code is None
        assert result.rejection_reason is None
        assert result.context == {}
        assert result.message == ""

    def test_invalid_result(self) -> None:
        """ValidationResult can indicate failure with details."""
        result = ValidationResult(
            valid=False,
            rejection_code=RejectionCode.EXIT_LOCKED,
            rejection_reason="The door is locked.",
        )

        assert result.allowed is False
        assert result.rejection_code == RejectionCode.EXIT_LOCKED
        assert result.message == "The door is locked."

    def test_invalid_requires_code(self) -> None:
        """Invalid result must have rejection_code."""
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(valid=False, rejection_reason="Some reason")

        assert "rejection_code is required" in str(exc_info.value)

    def test_invalid_requires_reason(self) -> None:
        """Invalid result must have rejection_reason."""
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(valid=False, rejection_code=RejectionCode.NO_EXIT)

        assert "rejection_reason is required" in str(exc_info.value)


class TestFactoryFunctions:
    """Tests for valid_result and invalid_result."""

    def test_valid_result_with_context(self) -> None:
        result = valid_result(destination="dark_corridor", direction="north")

        assert result.valid is True
        assert result.context == {"destination": "dark_corridor", "direction": "north"}

    def test_invalid_result(self) -> None:
        result = invalid_result(
            RejectionCode.TOO_DARK,
            "It's too dark to see where you're going.",
            direction="north",
        )

        assert result.valid is False
        assert result.rejection_code == RejectionCode.TOO_DARK
        assert result.context == {"direction": "north"}

    def test_codes_are_strings(self) -> None:
        assert RejectionCode.CREATURE_BLOCKS == "creature_blocks"
        assert RejectionCode("engaged") is RejectionCode.ENGAGED
