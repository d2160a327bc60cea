"""
Location descriptions composed from conditional segments.

Descriptions are rebuilt from the current state on every call. Flags such
as "door unlocked" or "bridge built" change the narrated text without
changing the location, so nothing here is cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from auror_exam.engine.conditions import conditions_met
from auror_exam.engine.world import get_world

if TYPE_CHECKING:
    from auror_exam.models.game import GameState
    from auror_exam.models.world import WorldData


def get_location_description(state: "GameState", world: "WorldData | None" = None) -> str:
    """Describe the candidate's current location.

    Segments sharing a group form an if/elif chain: the first one whose
    conditions hold is shown and the rest of the group is skipped.

    Args:
        state: Current game state
        world: World data; the configured world when omitted

    Returns:
        Paragraphs separated by blank lines
    """
    world = world or get_world()
    location = world.get_location(state.location)
    if location is None:
        return "You are nowhere."

    paragraphs = []
    shown_groups: set[str] = set()
    for segment in location.description:
        if segment.group is not None and segment.group in shown_groups:
            continue
        if not conditions_met(segment.when, state, world):
            continue
        paragraphs.append(segment.text)
        if segment.group is not None:
            shown_groups.add(segment.group)

    return "\n\n".join(paragraphs)
