"""
Movement handler for the examination engine.

This handler processes movement commands, wrapping the MovementValidator
and applying the consequences the validator only reports: stumbling in the
dark, provoking the Hippogriff, and the one-time entry effects of the
destination.
"""

from __future__ import annotations

import logging
from typing import Callable

from auror_exam.engine.challenges import Entry, dementor, guards, hippogriff, inferi, training
from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.state import GameStateManager
from auror_exam.engine.validators.movement import MovementValidator
from auror_exam.models.game import Color, CommandResult
from auror_exam.models.validation import RejectionCode

logger = logging.getLogger(__name__)

DARK_STUMBLE_DAMAGE = 5

FALL_DEATH_MESSAGE = """You stumble in the darkness and fall, striking your head on the stone floor.
The last thing you feel is cold...

Hours later, a search party finds your body at the bottom of a pit.
"First-year spell would have saved them," an examiner sighs.

EXAMINATION FAILED - CANDIDATE FELL"""

# Entry effects keyed by destination
ENTRY_EFFECTS: dict[str, Callable[[GameStateManager], Entry | None]] = {
    dementor.LOCATION: dementor.on_enter,
    inferi.LOCATION: inferi.on_enter,
    guards.LOCATION: guards.on_enter,
    training.LOCATION: training.on_enter,
}


class MovementHandler:
    """Handles movement commands.

    Attributes:
        validator: The MovementValidator deciding legality

    Example:
        >>> handler = MovementHandler()
        >>> result = handler.handle("north", manager)
        >>> result.state.location
        'dark_corridor'
    """

    def __init__(self):
        self.validator = MovementValidator()

    def handle(self, direction: str, manager: GameStateManager) -> CommandResult:
        """Validate and execute a move.

        Args:
            direction: Canonical direction from the parser
            manager: State manager for this turn

        Returns:
            CommandResult narrating the move or the refusal
        """
        result = self.validator.validate(manager.state, direction, manager.world)

        if not result.valid:
            logger.debug(
                f"Move {direction} from {manager.location_id} refused: "
                f"{result.rejection_code.value}"
            )
            return self._reject(result.rejection_code, result.message, manager)

        from_location = manager.location_id
        destination = str(result.context["destination"])
        manager.move_to(destination, direction)

        if from_location == training.LOCATION:
            manager.state.combat_state = None

        description = get_location_description(manager.state, manager.world)

        if (
            from_location == guards.LOCATION
            and destination == guards.BEYOND
            and not manager.challenges.stealth_passed
            and manager.challenges.guards_evaded
        ):
            return guards.cross(manager, description)

        entry = None
        on_enter = ENTRY_EFFECTS.get(destination)
        if on_enter is not None:
            entry = on_enter(manager)

        if entry is None:
            return manager.respond(description, Color.NORMAL)
        return manager.respond(f"{description}\n\n{entry.message}", entry.color or Color.NORMAL)

    def _reject(
        self, code: RejectionCode, reason: str, manager: GameStateManager
    ) -> CommandResult:
        if code == RejectionCode.CREATURE_BLOCKS:
            return hippogriff.block(manager)

        location = manager.get_current_location()
        if location is not None and location.dark and not manager.challenges.lumos_active:
            if not manager.damage(DARK_STUMBLE_DAMAGE):
                manager.die()
                return manager.respond(FALL_DEATH_MESSAGE, Color.DAMAGE)
            return manager.respond(
                f"{reason}\n\nYou stumble and hit your head on the wall. "
                f"[-{DARK_STUMBLE_DAMAGE} HP]",
                Color.DAMAGE,
            )

        return manager.respond(reason)
