"""
Game state models - Pydantic models for examination session state

GameState is a plain value: the engine copies it at the start of every turn
and never hands the caller's instance back. Everything the engine knows about
a candidate's progress lives here.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# Enumerations
# =============================================================================


class GamePhase(str, Enum):
    """Lifecycle of an examination session."""

    INTRO = "intro"
    NAMING = "naming"
    PLAYING = "playing"
    VICTORY = "victory"
    DEATH = "death"


class DementorPhase(str, Enum):
    """Progress through the Dementor encounter."""

    INITIAL = "initial"
    MEMORY_NEEDED = "memory_needed"
    COMPLETE = "complete"


class Color(str, Enum):
    """Presentation hint attached to a command result."""

    NORMAL = "normal"
    DAMAGE = "damage"
    HEALING = "healing"
    MAGIC = "magic"
    GOLD = "gold"
    WARNING = "warning"


# The nine scored challenges shown as "x/9" in the score display
SCORED_CHALLENGES = (
    "alohomora",
    "lumos",
    "levitation",
    "dementor",
    "inferi",
    "hippogriff",
    "stealth",
    "duel",
    "final",
)


# =============================================================================
# Challenge & Combat State
# =============================================================================


class ChallengeState(BaseModel):
    """Per-challenge progress flags.

    Completion flags only ever move from False to True. lumos_active,
    wearing_cloak and stealth_active are toggles.
    """

    # Door and passage
    door_unlocked: bool = False
    passage_cleared: bool = False

    # Light and levitation
    lumos_active: bool = False
    levitation_bridge_built: bool = False

    # Dementor encounter
    dementor_defeated: bool = False
    dementor_phase: DementorPhase = DementorPhase.INITIAL
    dementor_engaged: bool = False
    awaiting_memory: bool = False

    # Training hall
    protego_training_complete: bool = False

    # Inferi encounter
    inferi_cleared: bool = False
    inferi_engaged: bool = False

    # Hippogriff
    hippogriff_bowed: bool = False
    hippogriff_trusts: bool = False
    hippogriff_ridden: bool = False

    # Guards
    stealth_passed: bool = False
    stealth_active: bool = False
    guards_alerted: bool = False
    wearing_cloak: bool = False

    # Death Eater duel
    death_eater_defeated: bool = False
    death_eater_health: int = Field(default=100, ge=0, le=100)
    duel_round: int = 0
    duel_defending: bool = False

    # Mirror of Erised
    final_challenge_complete: bool = False
    mirror_looked_once: bool = False

    @property
    def eastern_trials_complete(self) -> bool:
        """Dementor, Inferi and Hippogriff all resolved."""
        return (
            self.dementor_defeated and self.inferi_cleared and self.hippogriff_trusts
        )

    @property
    def guards_evaded(self) -> bool:
        """The guards cannot stop the candidate from walking north."""
        return self.stealth_passed or self.wearing_cloak or self.stealth_active


class CombatState(BaseModel):
    """Structured multi-round combat (the training dummy assessment)."""

    enemy: str
    enemy_health: int
    enemy_max_health: int
    round: int = 0
    player_defending: bool = False


class JourneyEntry(BaseModel):
    """One step of the candidate's route. direction is how they left."""

    location: str
    direction: str | None = None


# =============================================================================
# Game State
# =============================================================================


class GameState(BaseModel):
    """Complete state of one examination attempt"""

    player_name: str = ""
    health: int = 100
    max_health: int = 100
    location: str = "entrance_hall"
    inventory: list[str] = Field(default_factory=list)
    visited_locations: set[str] = Field(default_factory=set)
    challenges_completed: set[str] = Field(default_factory=set)
    game_phase: GamePhase = GamePhase.INTRO
    score: int = 0
    hints_used: int = 0
    episkey_casts: int = 0
    journey_log: list[JourneyEntry] = Field(default_factory=list)
    challenge_state: ChallengeState = Field(default_factory=ChallengeState)
    combat_state: CombatState | None = None
    attempt_counts: dict[str, int] = Field(default_factory=dict)
    hint_request_counts: dict[str, int] = Field(default_factory=dict)
    items_taken: set[str] = Field(default_factory=set)  # "<location>:<item>"
    restart_pending: bool = False


class CommandResult(BaseModel):
    """Outcome of processing one line of player input"""

    message: str
    state: GameState
    color: Color | None = None


class Grade(BaseModel):
    """Final examination grade"""

    grade: str
    title: str
    description: str
