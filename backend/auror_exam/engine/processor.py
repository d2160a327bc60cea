"""
Examination turn processor.

This module is the single entry point of the engine: one line of player
input in, one CommandResult out. The caller's GameState is never mutated;
every turn works on a deep copy.

Turn pipeline while playing:
    1. Bookkeeping (attempt counter, pending restart cleared)
    2. Patronus memory input, if the Dementor is waiting for one
    3. Parse
    4. Unforgivable Curse refusal and the west_z easter egg
    5. Dispatch to the handler for the command type
    6. Continuous hazard damage
    7. End-of-examination banner when the phase changed
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from auror_exam.engine.challenges import dementor
from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.effects import apply_continuous_effects
from auror_exam.engine.grading import calculate_grade
from auror_exam.engine.handlers import (
    ActionHandler,
    ItemHandler,
    MovementHandler,
    SpellHandler,
    SystemHandler,
)
from auror_exam.engine.handlers.spells import UNFORGIVABLE_MESSAGE
from auror_exam.engine.parser import parse_command
from auror_exam.engine.spells import is_unforgivable
from auror_exam.engine.state import GameStateManager, RandomSource, create_initial_state
from auror_exam.engine.world import get_world
from auror_exam.models.command import CommandType, ParsedCommand
from auror_exam.models.game import (
    SCORED_CHALLENGES,
    Color,
    CommandResult,
    GamePhase,
    GameState,
)

if TYPE_CHECKING:
    from auror_exam.models.world import WorldData

logger = logging.getLogger(__name__)

RULE = "═" * 67

RESTART_PROMPT = "Are you sure you want to restart? Type RESTART CONFIRM to confirm."
ENDED_MESSAGE = "The examination has ended. Type RESTART to try again."

EASTER_EGG = """You attempt to venture west with mysterious confidence...

The water seems to ripple with ancient magic. A ghostly voice echoes from the depths:

"Ah, one who seeks the secret path! But alas, this way is reserved only for
those who have truly proven their devotion to the wizarding world.

Go forth, young wizard. Read all seven sacred tomes of Harry Potter - every page,
every word, every footnote. Study the house-elf liberation movements, memorize
the Quidditch World Cup results, learn why Dumbledore loved socks.

Only when you have absorbed the complete chronicles, when you can recite
Hermione's class schedule and name every Weasley in birth order, when you
dream in Parseltongue and sneeze in spells...

ONLY THEN shall you be deemed eligible to venture west into these sacred waters.

For now, the passage remains closed to you. Go! Read! Return when you are worthy!"

The voice fades. The water stills. Perhaps you should try another direction."""


class GameEngine:
    """Processes examination turns.

    Attributes:
        world: Loaded world data
        rng: Random source shared by every turn (seedable for tests)

    Example:
        >>> engine = GameEngine()
        >>> state = create_initial_state()
        >>> result = engine.process_command(state, "Harry")
        >>> result.state.game_phase
        <GamePhase.PLAYING: 'playing'>
        >>> result = engine.process_command(result.state, "alohomora")
        >>> result.state.score
        10
    """

    def __init__(
        self,
        world: "WorldData | None" = None,
        rng: RandomSource | None = None,
    ):
        self.world = world or get_world()
        self.rng = rng

        items = ItemHandler()
        self.movement = MovementHandler()
        self.spells = SpellHandler(items)
        self.actions = ActionHandler(items)
        self.system = SystemHandler()

        self._dispatch: dict[CommandType, Callable[[ParsedCommand, GameStateManager], CommandResult]] = {
            CommandType.MOVEMENT: lambda c, m: self.movement.handle(c.verb, m),
            CommandType.SPELL: self.spells.handle,
            CommandType.ACTION: self.actions.handle,
            CommandType.SYSTEM: lambda c, m: self.system.handle(c.verb, m),
            CommandType.UNKNOWN: self._unknown,
        }

    def start(self, state: GameState) -> CommandResult:
        """Show the premise and ask for the candidate's name."""
        manager = self._manager(state)
        manager.state.game_phase = GamePhase.NAMING
        return manager.respond(self._name_prompt(), Color.GOLD)

    def process_command(self, state: GameState, raw_input: str) -> CommandResult:
        """Process one line of player input.

        Args:
            state: State before the turn; left untouched
            raw_input: Exactly what the player typed

        Returns:
            CommandResult holding a new GameState
        """
        manager = self._manager(state)
        lowered = raw_input.strip().lower()

        if lowered in ("restart", "restart confirm"):
            return self._restart(manager, confirmed=lowered == "restart confirm")

        phase = manager.state.game_phase
        if phase in (GamePhase.INTRO, GamePhase.NAMING):
            return self._name(manager, raw_input.strip())
        if phase == GamePhase.DEATH:
            return manager.respond(ENDED_MESSAGE)
        if phase == GamePhase.VICTORY:
            return self._results(manager)

        return self._play(manager, state, raw_input)

    # =========================================================================
    # Phases
    # =========================================================================

    def _play(self, manager: GameStateManager, before: GameState, raw_input: str) -> CommandResult:
        state = manager.state
        state.restart_pending = False
        state.attempt_counts[state.location] = state.attempt_counts.get(state.location, 0) + 1

        if manager.challenges.awaiting_memory:
            return self._finish(manager, before, dementor.submit_memory(manager, raw_input))

        command = parse_command(raw_input)

        if command.type == CommandType.SPELL and is_unforgivable(command.verb):
            logger.info(f"Unforgivable curse refused at {state.location}")
            return manager.respond(UNFORGIVABLE_MESSAGE, Color.WARNING)

        if state.location == "entrance_hall" and raw_input.strip().lower() == "west_z":
            return manager.respond(EASTER_EGG, Color.MAGIC)

        logger.debug(f"Dispatching {command.type.value}:{command.verb} at {state.location}")
        result = self._dispatch[command.type](command, manager)
        result = apply_continuous_effects(manager, before, command, result)
        return self._finish(manager, before, result)

    def _finish(
        self, manager: GameStateManager, before: GameState, result: CommandResult
    ) -> CommandResult:
        """Append the end-of-examination banner when the phase just changed."""
        phase = manager.state.game_phase
        if phase == before.game_phase:
            return result

        logger.info(
            f"Examination of {manager.state.player_name!r} ended: {phase.value} "
            f"(score {manager.state.score}, health {manager.state.health})"
        )
        if phase == GamePhase.DEATH:
            banner = self._failed_banner(manager.state)
        else:
            banner = self._complete_banner(manager.state)
        return manager.respond(f"{result.message}\n\n{banner}", result.color)

    def _unknown(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        return manager.respond("I don't understand that command. Type HELP for assistance.")

    def _name(self, manager: GameStateManager, name: str) -> CommandResult:
        if not name:
            manager.state.game_phase = GamePhase.NAMING
            return manager.respond(self._name_prompt(), Color.GOLD)

        state = manager.state
        state.player_name = name
        state.game_phase = GamePhase.PLAYING
        logger.info(f"Candidate {name!r} begins the examination")

        description = get_location_description(state, self.world)
        return manager.respond(
            f"""Good luck, {name}.

{self.world.world.briefing}

{description}

Type JOURNEY anytime to see where you've been.
Type HELP for commands or HINT if stuck (WARNING: hints reduce your score by 2 points).""",
            Color.GOLD,
        )

    def _restart(self, manager: GameStateManager, confirmed: bool) -> CommandResult:
        state = manager.state
        if (
            state.game_phase == GamePhase.PLAYING
            and not confirmed
            and not state.restart_pending
        ):
            state.restart_pending = True
            return manager.respond(RESTART_PROMPT, Color.WARNING)

        fresh = create_initial_state(self.world)
        fresh.game_phase = GamePhase.NAMING
        logger.info("Examination restarted")
        return CommandResult(message=self._name_prompt(), state=fresh, color=Color.GOLD)

    def _results(self, manager: GameStateManager) -> CommandResult:
        """Show the final results once, then close the examination."""
        state = manager.state
        grade = calculate_grade(state)
        manager.die()
        return manager.respond(
            f"""{RULE}
                    EXAMINATION RESULTS
{RULE}

  Candidate: {state.player_name}
  Final Score: {state.score} points
  Health Remaining: {state.health}/{state.max_health}
  Hints Used: {state.hints_used}
  Challenges Completed: {self._completed(state)}/{self.world.world.total_challenges}

  GRADE: {grade.grade} - {grade.title}
  {grade.description}

{RULE}

Congratulations on completing the Auror Examination!
Type RESTART to play again.""",
            Color.GOLD,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _manager(self, state: GameState) -> GameStateManager:
        return GameStateManager(state.model_copy(deep=True), self.world, self.rng)

    def _name_prompt(self) -> str:
        world = self.world.world
        return f"{world.premise}\n\n{world.name_prompt}"

    def _completed(self, state: GameState) -> int:
        return len(state.challenges_completed & set(SCORED_CHALLENGES))

    def _failed_banner(self, state: GameState) -> str:
        grade = calculate_grade(state)
        return f"""{RULE}
                    EXAMINATION FAILED
{RULE}

  Candidate: {state.player_name}
  Final Score: {state.score} points
  GRADE: {grade.grade} - {grade.title}

Type RESTART to try again."""

    def _complete_banner(self, state: GameState) -> str:
        grade = calculate_grade(state)
        return f"""{RULE}
                    EXAMINATION COMPLETE
{RULE}

  Candidate: {state.player_name}
  Final Score: {state.score} points
  Health Remaining: {state.health}/{state.max_health}
  Hints Used: {state.hints_used}
  Challenges Completed: {self._completed(state)}/{self.world.world.total_challenges}

  GRADE: {grade.grade} - {grade.title}
  {grade.description}

{RULE}

Type RESTART to play again."""


def process_command(
    state: GameState, raw_input: str, rng: RandomSource | None = None
) -> CommandResult:
    """Process one turn against the configured world.

    Example:
        >>> result = process_command(create_initial_state(), "Harry")
        >>> result.state.player_name
        'Harry'
    """
    return GameEngine(rng=rng).process_command(state, raw_input)
