"""
Movement validator for the examination engine.

This module decides whether the candidate may leave the current location
in a given direction. It never changes state: damage for stumbling in the
dark or provoking the Hippogriff is applied by the movement handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from auror_exam.engine.conditions import conditions_met
from auror_exam.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)

if TYPE_CHECKING:
    from auror_exam.models.game import GameState
    from auror_exam.models.world import WorldData


class MovementValidator:
    """Validates movement against the maze's gates.

    Checks, in precedence order:
        1. An exit exists in the direction
        2. Darkness: a dark location without wandlight only allows its
           retreat direction
        3. Hard locks on the exit (door, chasm, passage, Hippogriff,
           guards, duel opponent, eastern barrier)
        4. An engaged hostile blocks every exit

    Returns ValidationResult with:
        - valid=True: destination and direction in context
        - valid=False: rejection code and the narrative reason

    Example:
        >>> validator = MovementValidator()
        >>> result = validator.validate(state, "north", world)
        >>> if result.valid:
        ...     destination = result.context["destination"]
    """

    def validate(
        self,
        state: "GameState",
        direction: str,
        world: "WorldData",
    ) -> ValidationResult:
        """Validate a movement attempt.

        Args:
            state: Current game state
            direction: Canonical direction ("north", "up", ...)
            world: World data with location definitions

        Returns:
            ValidationResult indicating success or failure with reason
        """
        location = world.get_location(state.location)
        if location is None or direction not in location.exits:
            return invalid_result(
                code=RejectionCode.NO_EXIT,
                reason="You can't go that way.",
                direction=direction,
            )

        if (
            location.dark
            and not state.challenge_state.lumos_active
            and direction != location.retreat
        ):
            return invalid_result(
                code=RejectionCode.TOO_DARK,
                reason=location.dark_message or "It's too dark to find your way.",
                direction=direction,
            )

        for lock in location.locks:
            if lock.direction == direction and conditions_met(lock.when, state, world):
                return invalid_result(
                    code=lock.code,
                    reason=lock.message,
                    direction=direction,
                )

        block = location.blocked_when
        if block is not None and conditions_met(block.when, state, world):
            return invalid_result(
                code=RejectionCode.ENGAGED,
                reason=block.message,
                direction=direction,
            )

        return valid_result(
            destination=location.exits[direction],
            direction=direction,
            from_location=state.location,
        )
