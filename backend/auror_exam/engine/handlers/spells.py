"""
Spell handler for the examination engine.

Routes a recognised incantation to the challenge resolver that owns it.
Most spells only matter in one room; everywhere else they fizzle with a
short line of flavor text.
"""

from __future__ import annotations

import logging
from typing import Callable

from auror_exam.engine.challenges import (
    dementor,
    duel,
    guards,
    hippogriff,
    inferi,
    levitation,
    light,
    lock,
    passage,
    shout,
    training,
)
from auror_exam.engine.handlers.items import ItemHandler, health_line
from auror_exam.engine.spells import ATTACK_SPELLS, FIRE_SPELLS, Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.command import ParsedCommand
from auror_exam.models.game import Color, CommandResult

logger = logging.getLogger(__name__)

MAX_EPISKEY_CASTS = 3

UNFORGIVABLE_MESSAGE = """The use of Unforgivable Curses is strictly forbidden by the Ministry of Magic.
As an Auror candidate, you should know that using such curses would result in
immediate imprisonment in Azkaban. You feel your wand arm lower instinctively.

The examiners are watching. Choose a different approach."""

SECTUMSEMPRA_MESSAGE = """You begin the incantation for Sectumsempra, but hesitate. This dark curse
could cause terrible harm. As an Auror candidate, you should use more controlled magic.
The examiners would not look kindly on such excessive force."""

SpellResolver = Callable[[ParsedCommand, GameStateManager], CommandResult]


class SpellHandler:
    """Resolves spell commands.

    Each Spell maps to one resolver; spells without a resolver fall back
    to the generic "no effect" response.

    Example:
        >>> handler = SpellHandler(ItemHandler())
        >>> handler.handle(parse_command("lumos"), manager).color
        <Color.MAGIC: 'magic'>
    """

    def __init__(self, items: ItemHandler):
        self.items = items
        self._resolvers: dict[Spell, SpellResolver] = {
            Spell.UNKNOWN: self._unknown,
            Spell.ACCIO: self._accio,
            Spell.LUMOS: lambda c, m: light.cast_lumos(m),
            Spell.LUMOS_MAXIMA: lambda c, m: light.cast_lumos(m, maxima=True),
            Spell.NOX: lambda c, m: light.cast_nox(m),
            Spell.WINGARDIUM_LEVIOSA: lambda c, m: levitation.cast_levitation(m),
            Spell.EXPECTO_PATRONUM: lambda c, m: dementor.cast_patronus(m),
            Spell.PROTEGO: self._protego,
            Spell.PROTEGO_MAXIMA: self._protego,
            Spell.CONFUNDO: lambda c, m: guards.cast_confundo(m),
            Spell.MUFFLIATO: lambda c, m: guards.cast_muffliato(m),
            Spell.AGUAMENTI: lambda c, m: inferi.cast_aguamenti(m),
            Spell.EPISKEY: self._episkey,
            Spell.REVELIO: self._revelio,
            Spell.HOMENUM_REVELIO: self._revelio,
            Spell.ALOHOMORA: lambda c, m: lock.cast_alohomora(m),
            Spell.REDUCIO: lambda c, m: passage.cast_reducio(m),
            Spell.SECTUMSEMPRA: lambda c, m: m.respond(SECTUMSEMPRA_MESSAGE, Color.WARNING),
            Spell.AVADA_KEDAVRA: self._unforgivable,
            Spell.CRUCIO: self._unforgivable,
            Spell.IMPERIO: self._unforgivable,
        }
        for spell in FIRE_SPELLS:
            self._resolvers[spell] = self._fire
        for spell in ATTACK_SPELLS:
            self._resolvers[spell] = self._attack

    def handle(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        spell = Spell(command.verb)
        resolver = self._resolvers.get(spell, self._no_effect)
        logger.debug(f"Casting {spell.value} at {manager.location_id}")
        return resolver(command, manager)

    # =========================================================================
    # Fallbacks
    # =========================================================================

    def _unknown(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        return manager.respond("Nothing happens. That doesn't seem to be a proper incantation.")

    def _no_effect(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        return manager.respond(
            "You cast the spell, but it doesn't seem to have any effect here.", Color.MAGIC
        )

    def _unforgivable(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        return manager.respond(UNFORGIVABLE_MESSAGE, Color.WARNING)

    def _accio(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        if not command.target:
            return self._no_effect(command, manager)
        return self.items.accio(manager, command.target)

    # =========================================================================
    # Combat
    # =========================================================================

    def _protego(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        maxima = command.verb == Spell.PROTEGO_MAXIMA.value
        if duel.is_active(manager):
            return duel.defend(manager, maxima)
        if training.is_active(manager):
            return training.defend(manager, maxima)

        incantation = '"Protego Maxima!"' if maxima else '"Protego!"'
        if manager.location_id not in (duel.LOCATION, guards.LOCATION):
            return manager.respond(
                f"{incantation}\n\nA shimmering shield forms before you, then fades. "
                "There's no attack to block.",
                Color.MAGIC,
            )
        return manager.respond(
            f"{incantation}\n\nA protective shield shimmers around you.", Color.MAGIC
        )

    def _fire(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        spell = Spell(command.verb)
        if inferi.is_active(manager):
            return inferi.burn(manager, spell)
        if duel.is_active(manager):
            return duel.attack(manager, spell)
        if training.is_active(manager):
            return training.attack(manager, spell)
        return manager.respond(
            f"{shout(spell)}\n\nFire bursts from your wand, but there's nothing here "
            "that needs burning.",
            Color.MAGIC,
        )

    def _attack(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        spell = Spell(command.verb)
        return attack_with(spell, manager)

    # =========================================================================
    # Healing and detection
    # =========================================================================

    def _episkey(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        state = manager.state
        if state.episkey_casts >= MAX_EPISKEY_CASTS:
            return manager.respond(
                """"Episkey..."

You attempt the healing charm, but your magical reserves are depleted. The spell
takes too much from the caster to use repeatedly. You'll need another method of healing."""
            )

        if state.health >= state.max_health:
            return manager.respond("You're not injured. There's nothing to heal.")

        healed = manager.heal(manager.rng.randint(15, 20))
        state.episkey_casts += 1

        if state.episkey_casts >= MAX_EPISKEY_CASTS:
            aftermath = "drained. That was the last time you can cast this."
        else:
            aftermath = "better, though the spell has tired you slightly."

        return manager.respond(
            f""""Episkey!"

A warm sensation spreads through your body as minor wounds close and bruises fade.
{health_line(manager, healed)}

You feel {aftermath}""",
            Color.HEALING,
        )

    def _revelio(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        spell = Spell(command.verb)
        location = manager.location_id

        if (
            spell == Spell.HOMENUM_REVELIO
            and location == guards.LOCATION
            and not manager.challenges.stealth_passed
        ):
            return manager.respond(
                """"Homenum Revelio!"

The spell confirms what you can already see: two guards patrol ahead.
You'll need to deal with them somehow - fight or sneak.""",
                Color.MAGIC,
            )

        if location == passage.HIDDEN_ROOM:
            found = (
                "Ancient protective enchantments glow faintly on the walls - "
                "this place has been hidden for centuries."
            )
        elif location == passage.LOCATION:
            found = (
                "You detect a faint magical signature further east, "
                "something hidden from casual discovery."
            )
        else:
            return manager.respond(
                f"{shout(spell)}\n\nThe revealing charm finds nothing hidden in this area.",
                Color.MAGIC,
            )

        return manager.respond(
            f"{shout(spell)}\n\nThe spell washes over the area. {found}", Color.MAGIC
        )


def attack_with(spell: Spell, manager: GameStateManager) -> CommandResult:
    """Offensive spell routing, shared with the ATTACK action."""
    if duel.is_active(manager):
        return duel.attack(manager, spell)
    if training.is_active(manager):
        return training.attack(manager, spell)
    if manager.location_id == guards.LOCATION and not manager.challenges.stealth_passed:
        return guards.fight(manager, spell)
    if inferi.is_active(manager):
        return inferi.repel(manager, spell)
    if (
        manager.location_id == hippogriff.LOCATION
        and not manager.challenges.hippogriff_trusts
    ):
        return hippogriff.attack(manager)
    return manager.respond(
        f"{shout(spell)}\n\nThe spell fires into the air, but there's no target here.",
        Color.MAGIC,
    )
