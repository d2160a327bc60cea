"""
Condition evaluation for world data.

A condition is a ``when`` map from the world YAML. Every key must hold for
the map to match; an empty map always matches.

Keys:
    <ChallengeState field or property>: value the flag must equal
    item_available: item ID still lying in the current location
    carrying: item ID in the candidate's inventory

Example:
    >>> conditions_met({"door_unlocked": False}, state, world)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from auror_exam.models.game import ChallengeState

if TYPE_CHECKING:
    from auror_exam.models.game import GameState
    from auror_exam.models.world import Conditions, WorldData


SPECIAL_KEYS = frozenset({"item_available", "carrying"})


def challenge_keys() -> set[str]:
    """Every ChallengeState attribute a condition may test."""
    keys = set(ChallengeState.model_fields)
    keys.update(
        name
        for name, value in vars(ChallengeState).items()
        if isinstance(value, property)
    )
    return keys


def item_key(location_id: str, item_id: str) -> str:
    """Key used in GameState.items_taken for a static room item."""
    return f"{location_id}:{item_id}"


def item_available(
    state: "GameState", world: "WorldData", location_id: str, item_id: str
) -> bool:
    """True when the item is placed in the location and nobody took it yet."""
    location = world.get_location(location_id)
    if location is None or item_id not in location.items:
        return False
    return item_key(location_id, item_id) not in state.items_taken


def conditions_met(
    when: "Conditions", state: "GameState", world: "WorldData"
) -> bool:
    """Check a ``when`` map against the state at the current location."""
    for key, expected in when.items():
        if key == "item_available":
            if not item_available(state, world, state.location, str(expected)):
                return False
        elif key == "carrying":
            if str(expected) not in state.inventory:
                return False
        elif getattr(state.challenge_state, key) != expected:
            return False
    return True
