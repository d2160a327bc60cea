"""
Progressive hint engine.

Hints are authored per location in locations.yaml as ordered nudges, each
rule guarded by a ``when`` map so a solved challenge stops producing hints.
The first request at a location costs 2 points; repeats are free and walk
forward through the nudges until the last, most specific one.
"""

from __future__ import annotations

import logging

from auror_exam.engine.conditions import conditions_met
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import CommandResult

logger = logging.getLogger(__name__)

HINT_PENALTY = 2


class HintEngine:
    """Chooses and charges for hints.

    Example:
        >>> engine = HintEngine()
        >>> engine.handle(manager).message
        'The door is sealed. Maybe a charm can unlock doors?\\n\\n[-2 points for hint]'
    """

    def select(self, manager: GameStateManager, count: int) -> str:
        """Pick the nudge for the nth request at the current location."""
        location = manager.get_current_location()
        for rule in location.hints if location else []:
            if rule.nudges and conditions_met(rule.when, manager.state, manager.world):
                return rule.nudges[min(count, len(rule.nudges) - 1)]
        return manager.world.world.default_hint

    def handle(self, manager: GameStateManager) -> CommandResult:
        state = manager.state
        location_id = manager.location_id
        count = state.hint_request_counts.get(location_id, 0)

        hint = self.select(manager, count)
        state.hint_request_counts[location_id] = count + 1

        if count == 0:
            state.score -= HINT_PENALTY
            state.hints_used += 1
            logger.debug(f"Hint charged at {location_id}")
            return manager.respond(f"{hint}\n\n[-{HINT_PENALTY} points for hint]")

        return manager.respond(f"{hint}\n\n[No additional penalty for repeated hint]")
