"""
Validation models for the examination engine.

ValidationResult represents the outcome of checking a movement attempt
against the maze's rules. It indicates whether the move is allowed and
carries the narrative reason when it is not.

Example:
    >>> # Successful validation
    >>> result = ValidationResult(
    ...     valid=True,
    ...     context={"destination": "dark_corridor"},
    ... )

    >>> # Failed validation
    >>> result = ValidationResult(
    ...     valid=False,
    ...     rejection_code=RejectionCode.EXIT_LOCKED,
    ...     rejection_reason="The heavy iron door is locked.",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RejectionCode(str, Enum):
    """Why a movement attempt was refused."""

    NO_EXIT = "no_exit"
    TOO_DARK = "too_dark"
    EXIT_LOCKED = "exit_locked"
    CREATURE_BLOCKS = "creature_blocks"
    ENGAGED = "engaged"


class ValidationResult(BaseModel):
    """Result of validating a movement attempt.

    Attributes:
        valid: Whether the move is allowed
        rejection_code: Code indicating why validation failed (if invalid)
        rejection_reason: Narrative explanation shown to the player (if invalid)
        context: Additional context (destination, direction)
    """

    valid: bool

    # Rejection details (required if valid=False)
    rejection_code: RejectionCode | None = None
    rejection_reason: str | None = None

    context: dict[str, object] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_rejection_fields(self) -> "ValidationResult":
        """Ensure rejection fields are present when valid=False."""
        if not self.valid:
            if self.rejection_code is None:
                raise ValueError("rejection_code is required when valid=False")
            if self.rejection_reason is None:
                raise ValueError("rejection_reason is required when valid=False")
        return self

    @property
    def allowed(self) -> bool:
        return self.valid

    @property
    def message(self) -> str:
        return self.rejection_reason or ""


def valid_result(**context: object) -> ValidationResult:
    """Create a successful ValidationResult.

    Example:
        >>> result = valid_result(destination="dark_corridor")
        >>> assert result.valid
    """
    return ValidationResult(valid=True, context=dict(context))


def invalid_result(
    code: RejectionCode,
    reason: str,
    **context: object,
) -> ValidationResult:
    """Create a failed ValidationResult.

    Example:
        >>> result = invalid_result(RejectionCode.NO_EXIT, "You can't go that way.")
        >>> assert not result.valid
    """
    return ValidationResult(
        valid=False,
        rejection_code=code,
        rejection_reason=reason,
        context=dict(context),
    )
