"""Pydantic models for the Auror examination"""

from auror_exam.models.game import (
    ChallengeState,
    Color,
    CombatState,
    CommandResult,
    DementorPhase,
    GamePhase,
    GameState,
    Grade,
    JourneyEntry,
)
from auror_exam.models.command import (
    ActionVerb,
    CommandType,
    Direction,
    ParsedCommand,
    SystemCommand,
)
from auror_exam.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)
from auror_exam.models.world import Item, Location, World, WorldData

__all__ = [
    # Game models
    "GameState",
    "ChallengeState",
    "CombatState",
    "JourneyEntry",
    "CommandResult",
    "Grade",
    "GamePhase",
    "DementorPhase",
    "Color",
    # Command models
    "ParsedCommand",
    "CommandType",
    "Direction",
    "SystemCommand",
    "ActionVerb",
    # Validation models
    "ValidationResult",
    "RejectionCode",
    "valid_result",
    "invalid_result",
    # World models
    "World",
    "Location",
    "Item",
    "WorldData",
]
