"""
Shared pytest fixtures for Auror Examination backend tests.

This module provides:
- world: The bundled auror-exam world, loaded once per process
- sample_world_data: Minimal WorldData for fast validator/loader tests
- rng: ScriptedRandom for deterministic outcome rolls
- state / make_manager: Candidate states placed anywhere in the maze
- engine / play: A GameEngine and a helper that feeds it several commands
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Callable

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from auror_exam.engine.processor import GameEngine  # noqa: E402
from auror_exam.engine.state import GameStateManager, create_initial_state  # noqa: E402
from auror_exam.engine.world import get_world  # noqa: E402
from auror_exam.models.game import CommandResult, GamePhase, GameState  # noqa: E402
from auror_exam.models.world import (  # noqa: E402
    DescriptionSegment,
    ExitLock,
    Item,
    Location,
    World,
    WorldData,
)

if TYPE_CHECKING:
    from tests.mocks.rng import ScriptedRandom


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# World Data Fixtures
# =============================================================================


@pytest.fixture
def world() -> WorldData:
    """The bundled examination world."""
    return get_world("auror-exam")


@pytest.fixture
def sample_world_data() -> WorldData:
    """Create a minimal 3-room layout for testing.

    Layout:
        [vault] (north, locked while door_unlocked is false)
           |
        [start_room] --- [cellar] (east, dark, retreat west)
    """
    return WorldData(
        world=World(name="Test World", starting_location="start_room"),
        locations={
            "start_room": Location(
                name="Starting Room",
                description=[DescriptionSegment(text="A plain stone room.")],
                exits={"north": "vault", "east": "cellar"},
                items=["test_potion"],
                locks=[
                    ExitLock(
                        direction="north",
                        when={"door_unlocked": False},
                        message="The vault door is locked.",
                    )
                ],
            ),
            "vault": Location(name="Vault", exits={"south": "start_room"}),
            "cellar": Location(
                name="Cellar",
                exits={"west": "start_room"},
                dark=True,
                retreat="west",
            ),
        },
        items={
            "test_potion": Item(name="Test Potion", aliases=["potion"], heals=10),
        },
    )


# =============================================================================
# Game State Fixtures
# =============================================================================


@pytest.fixture
def rng() -> "ScriptedRandom":
    """Random source with no scripted draws (defaults only)."""
    from tests.mocks.rng import ScriptedRandom

    return ScriptedRandom()


@pytest.fixture
def state(world: WorldData) -> GameState:
    """A named candidate standing in the entrance hall, mid-examination."""
    state = create_initial_state(world)
    state.player_name = "Harry"
    state.game_phase = GamePhase.PLAYING
    return state


@pytest.fixture
def make_manager(state: GameState, world: WorldData, rng) -> Callable[..., GameStateManager]:
    """Factory for managers placed at a location with challenge flags set.

    Usage:
        def test_something(make_manager):
            manager = make_manager("chasm_room", lumos_active=True, health=40)
    """

    def _factory(location: str | None = None, health: int | None = None, **flags) -> GameStateManager:
        working = state.model_copy(deep=True)
        if location is not None:
            working.location = location
            working.visited_locations.add(location)
        if health is not None:
            working.health = health
        for name, value in flags.items():
            setattr(working.challenge_state, name, value)
        return GameStateManager(working, world, rng)

    return _factory


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def engine(world: WorldData, rng) -> GameEngine:
    """Engine bound to the bundled world and the scripted rng."""
    return GameEngine(world=world, rng=rng)


@pytest.fixture
def play(engine: GameEngine) -> Callable[..., CommandResult]:
    """Feed several commands to the engine, threading the state through.

    Usage:
        def test_something(play, state):
            result = play(state, "alohomora", "north")
    """

    def _play(state: GameState, *commands: str) -> CommandResult:
        result = None
        for command in commands:
            result = engine.process_command(state, command)
            state = result.state
        return result

    return _play
