"""
Continuous hazard damage, applied after every dispatched command.

Hostiles that were already engaged when the turn began keep attacking no
matter what the candidate typed, so stalling in a dangerous room is never
free. Hazards are checked in a fixed order and at most one fires per turn.

Example:
    >>> result = apply_continuous_effects(manager, before, command, result)
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from auror_exam.engine.challenges import dementor, duel, guards, inferi
from auror_exam.engine.spells import COMBAT_SPELLS, Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.command import CommandType, ParsedCommand
from auror_exam.models.game import Color, CommandResult, GamePhase, GameState

logger = logging.getLogger(__name__)


class Hit(NamedTuple):
    """One hazard's blow for this turn."""

    damage: int
    message: str
    death_message: str
    color: Color | None = None


def _dementor(manager: GameStateManager, before: GameState, command: ParsedCommand) -> Hit | None:
    if not (before.challenge_state.dementor_engaged and not before.challenge_state.dementor_defeated):
        return None
    if manager.challenges.dementor_defeated:
        return None
    return Hit(
        dementor.STANDING_DAMAGE,
        dementor.STANDING_MESSAGE.format(damage=dementor.STANDING_DAMAGE),
        dementor.DEATH_MESSAGE,
    )


def _inferi(manager: GameStateManager, before: GameState, command: ParsedCommand) -> Hit | None:
    if not (before.challenge_state.inferi_engaged and not before.challenge_state.inferi_cleared):
        return None
    if manager.challenges.inferi_cleared:
        return None
    return Hit(
        inferi.STANDING_DAMAGE,
        inferi.STANDING_MESSAGE.format(damage=inferi.STANDING_DAMAGE),
        inferi.DEATH_MESSAGE,
    )


def _guards(manager: GameStateManager, before: GameState, command: ParsedCommand) -> Hit | None:
    if not before.challenge_state.guards_alerted or not guards.is_hostile(manager):
        return None
    flavor = manager.rng.choice(guards.ATTACK_MESSAGES)
    return Hit(
        guards.STANDING_DAMAGE,
        f"{flavor} [-{guards.STANDING_DAMAGE} HP]\n\n{guards.STANDING_FOOTER}",
        guards.DEATH_MESSAGE,
    )


def _duel(manager: GameStateManager, before: GameState, command: ParsedCommand) -> Hit | None:
    if before.challenge_state.death_eater_defeated or not duel.is_active(manager):
        return None
    if command.type == CommandType.SPELL and Spell(command.verb) in COMBAT_SPELLS:
        return None

    challenges = manager.challenges
    flavor = duel.HESITATION_MESSAGES[challenges.duel_round % len(duel.HESITATION_MESSAGES)]
    challenges.duel_round += 1
    return Hit(
        duel.STANDING_DAMAGE,
        f"{flavor} [-{duel.STANDING_DAMAGE} HP]\n\n{duel.STANDING_FOOTER}",
        duel.DEATH_MESSAGE,
        Color.DAMAGE,
    )


# (location, check) in the order hazards are resolved
HAZARDS = [
    (dementor.LOCATION, _dementor),
    (inferi.LOCATION, _inferi),
    (guards.LOCATION, _guards),
    (duel.LOCATION, _duel),
]


def apply_continuous_effects(
    manager: GameStateManager,
    before: GameState,
    command: ParsedCommand,
    result: CommandResult,
) -> CommandResult:
    """Let engaged hostiles strike after the command resolved.

    A hazard only fires when the candidate was in its room at the start of
    the turn and is still there; walking in is handled by the entry effect
    and walking out escapes.

    Args:
        manager: State manager holding the post-command state
        before: Snapshot of the state at the start of the turn
        command: The command that was just resolved
        result: The command's result

    Returns:
        The result, extended with the hazard's message when one fired
    """
    if manager.state.game_phase != GamePhase.PLAYING:
        return result

    for location_id, check in HAZARDS:
        if before.location != location_id or manager.location_id != location_id:
            continue

        hit = check(manager, before, command)
        if hit is None:
            continue

        logger.debug(f"Hazard at {location_id} hits for {hit.damage}")
        if not manager.damage(hit.damage):
            manager.die()
            return manager.respond(f"{result.message}\n\n{hit.death_message}", Color.DAMAGE)

        color = hit.color or (Color.MAGIC if result.color == Color.MAGIC else Color.DAMAGE)
        return manager.respond(f"{result.message}\n\n{hit.message}", color)

    return result
