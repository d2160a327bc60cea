"""
Examination state management.

create_initial_state() builds a fresh GameState. GameStateManager wraps the
working copy of the state during a single turn: resolvers mutate it through
the manager's helpers and return a CommandResult built from it.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from auror_exam.engine.conditions import item_key
from auror_exam.engine.world import get_world
from auror_exam.models.game import (
    ChallengeState,
    Color,
    CommandResult,
    GamePhase,
    GameState,
    JourneyEntry,
)

if TYPE_CHECKING:
    from auror_exam.models.world import Location, WorldData


class RandomSource(Protocol):
    """The subset of random.Random the engine draws from."""

    def random(self) -> float: ...

    def choice(self, seq): ...

    def randint(self, a: int, b: int) -> int: ...


def create_initial_state(world: "WorldData | None" = None) -> GameState:
    """Create the state of a candidate who has not yet given their name.

    Args:
        world: World data; the configured world when omitted

    Returns:
        GameState in the intro phase at the starting location
    """
    world = world or get_world()
    start = world.world.starting_location
    max_health = world.world.max_health

    return GameState(
        health=max_health,
        max_health=max_health,
        location=start,
        visited_locations={start},
        journey_log=[JourneyEntry(location=start)],
        challenge_state=ChallengeState(),
        game_phase=GamePhase.INTRO,
    )


class GameStateManager:
    """Manages the working state for one turn.

    The processor hands the manager a private copy of the caller's state,
    so every helper mutates in place without aliasing the input.

    Attributes:
        state: Working GameState for this turn
        world: Loaded world data
        rng: Random source for flavor and outcome rolls

    Example:
        >>> manager = GameStateManager(state.model_copy(deep=True), world)
        >>> manager.award(10, "alohomora")
        >>> result = manager.respond("The door swings open.", Color.MAGIC)
    """

    def __init__(
        self,
        state: GameState,
        world: "WorldData",
        rng: RandomSource | None = None,
    ):
        self.state = state
        self.world = world
        self.rng = rng or random.Random()

    @property
    def challenges(self) -> ChallengeState:
        """Shortcut to the per-challenge flags."""
        return self.state.challenge_state

    @property
    def location_id(self) -> str:
        return self.state.location

    def get_current_location(self) -> "Location | None":
        """Get the current location object.

        Returns:
            The Location object for the current location, or None if not found
        """
        return self.world.get_location(self.state.location)

    def move_to(self, location_id: str, direction: str | None = None) -> bool:
        """Move the candidate to a new location.

        The last journey entry always describes the current location: it is
        stamped with the direction taken and a new entry is appended.

        Args:
            location_id: The destination location ID
            direction: How the candidate left, for the journey log

        Returns:
            True if this was a first visit, False otherwise
        """
        first_visit = location_id not in self.state.visited_locations

        if self.state.journey_log:
            self.state.journey_log[-1] = JourneyEntry(
                location=self.state.location, direction=direction
            )
        self.state.journey_log.append(JourneyEntry(location=location_id))

        self.state.location = location_id
        self.state.visited_locations.add(location_id)
        return first_visit

    def has_item(self, item_id: str) -> bool:
        return item_id in self.state.inventory

    def add_item(self, item_id: str) -> bool:
        """Add an item to inventory.

        Returns:
            True if the item was added, False if already present
        """
        if item_id in self.state.inventory:
            return False
        self.state.inventory.append(item_id)
        return True

    def remove_item(self, item_id: str) -> bool:
        """Remove an item from inventory.

        Returns:
            True if the item was removed, False if not present
        """
        if item_id not in self.state.inventory:
            return False
        self.state.inventory.remove(item_id)
        return True

    def mark_taken(self, location_id: str, item_id: str) -> None:
        """Record that a static room item has been picked up."""
        self.state.items_taken.add(item_key(location_id, item_id))

    def award(self, points: int, challenge: str | None = None) -> None:
        """Add points and optionally mark a challenge complete."""
        self.state.score += points
        if challenge:
            self.state.challenges_completed.add(challenge)

    def damage(self, amount: int) -> bool:
        """Apply damage, never below zero.

        Returns:
            True if the candidate is still standing
        """
        self.state.health = max(0, self.state.health - amount)
        return self.state.health > 0

    def heal(self, amount: int) -> int:
        """Restore health up to the maximum.

        Returns:
            The amount actually restored
        """
        healed = min(amount, self.state.max_health - self.state.health)
        self.state.health += healed
        return healed

    def die(self) -> None:
        """End the examination in failure."""
        self.state.game_phase = GamePhase.DEATH

    def win(self) -> None:
        """End the examination in success."""
        self.state.game_phase = GamePhase.VICTORY

    def respond(self, message: str, color: Color | None = None) -> CommandResult:
        """Build the turn result from the working state."""
        return CommandResult(message=message, state=self.state, color=color)
