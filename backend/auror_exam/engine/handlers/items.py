"""
Item and inspection handler for the examination engine.

Covers the commands that deal with things rather than places: examine,
take, use, wear, remove, read, and the summoning charm. Item identity is
resolved through the aliases in items.yaml, so "vial", "essence" and
"dittany" all name the same potion.
"""

from __future__ import annotations

import logging

from auror_exam.engine.challenges import mirror
from auror_exam.engine.challenges.guards import LOCATION as GUARD_CORRIDOR
from auror_exam.engine.conditions import conditions_met, item_available
from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

logger = logging.getLogger(__name__)

CLOAK = "invisibility_cloak"
DITTANY = "dittany"
RUNE_WORDS = ("rune", "wall", "carving", "inscription")


def health_line(manager: GameStateManager, healed: int) -> str:
    """HP summary shown after any healing."""
    state = manager.state
    if state.health >= state.max_health:
        return f"[Restored to full health: {state.health}/{state.max_health}]"
    return f"[+{healed} HP -> {state.health}/{state.max_health}]"


class ItemHandler:
    """Resolves item and inspection commands.

    Example:
        >>> handler = ItemHandler()
        >>> handler.take(manager, "vial").message
        'You carefully pick up the vial of Essence of Dittany and store it safely.'
    """

    # =========================================================================
    # Inspection
    # =========================================================================

    def examine(self, manager: GameStateManager, target: str | None) -> CommandResult:
        """Describe a detail of the room or an item.

        Without a target this is the same as LOOK.
        """
        if not target:
            return manager.respond(get_location_description(manager.state, manager.world))

        detail = self._find_detail(manager, target)
        if detail is not None:
            return manager.respond(detail)

        item_id = manager.world.find_item(target)
        if item_id is not None and (
            manager.has_item(item_id)
            or item_available(manager.state, manager.world, manager.location_id, item_id)
        ):
            return manager.respond(manager.world.items[item_id].examine)

        return manager.respond(
            f"You examine the {target}, but there's nothing particularly notable about it."
        )

    def read(self, manager: GameStateManager, target: str | None) -> CommandResult:
        if not target:
            return manager.respond("Read what? Try READ RUNES or specify what to read.")

        location = manager.get_current_location()
        if any(word in target for word in RUNE_WORDS):
            for rune in location.runes if location else []:
                if conditions_met(rune.when, manager.state, manager.world):
                    return manager.respond(rune.text)
            return manager.respond(
                "You examine the runes, but they seem purely decorative in this area."
            )

        detail = self._find_detail(manager, target)
        if detail is not None:
            return manager.respond(detail)

        return manager.respond("There's nothing readable with that name here.")

    def _find_detail(self, manager: GameStateManager, target: str) -> str | None:
        location = manager.get_current_location()
        if location is None:
            return None
        for detail in location.details:
            if not any(keyword in target for keyword in detail.keywords):
                continue
            if conditions_met(detail.when, manager.state, manager.world):
                return detail.text
        return None

    # =========================================================================
    # Inventory
    # =========================================================================

    def take(self, manager: GameStateManager, target: str | None) -> CommandResult:
        if not target:
            return manager.respond("Take what? You need to specify what to take.")

        if any(word in target for word in mirror.MIRROR_WORDS):
            return mirror.take(manager)

        item_id = manager.world.find_item(target)
        if item_id is None:
            return manager.respond(f"There's no {target} here to take.")

        item = manager.world.items[item_id]
        if manager.has_item(item_id):
            return manager.respond(f"You already have the {item.name}.")

        location_id = manager.location_id
        if not item_available(manager.state, manager.world, location_id, item_id):
            return manager.respond(f"There's no {target} here to take.")

        manager.add_item(item_id)
        manager.mark_taken(location_id, item_id)
        logger.debug(f"Took {item_id} from {location_id}")
        return manager.respond(
            item.take_description, Color.MAGIC if item.wearable else None
        )

    def use(self, manager: GameStateManager, target: str | None) -> CommandResult:
        """Consume a healing item, or put on something wearable."""
        if not target:
            return manager.respond("Use what? You need to specify an item from your inventory.")

        item_id = manager.world.find_item(target)
        if item_id is None:
            return manager.respond(f"You don't have any {target}, or it can't be used here.")

        item = manager.world.items[item_id]
        if item.wearable:
            return self.wear(manager, target)

        if not manager.has_item(item_id):
            return manager.respond(f"You don't have any {item.name}.")

        state = manager.state
        if state.health >= state.max_health:
            return manager.respond(item.full_health_message)

        healed = manager.heal(item.heals)
        manager.remove_item(item_id)
        return manager.respond(
            f"{item.use_description}\n{health_line(manager, healed)}", Color.HEALING
        )

    def wear(self, manager: GameStateManager, target: str | None) -> CommandResult:
        if target and manager.world.find_item(target) != CLOAK:
            return manager.respond(f"You can't wear the {target}.")

        if not manager.has_item(CLOAK):
            return manager.respond("You don't have anything wearable.")

        challenges = manager.challenges
        if challenges.wearing_cloak:
            return manager.respond("You're already wearing the Invisibility Cloak.")

        challenges.wearing_cloak = True

        if manager.location_id == GUARD_CORRIDOR and not challenges.stealth_passed:
            if challenges.guards_alerted:
                extra = """The guards look around in confusion as you vanish from sight.
"Where did they go?" You can now slip past them to the north."""
            else:
                extra = """The guards continue their patrol, unable to see you. You can now
move north past them undetected."""
            challenges.guards_alerted = False
        else:
            extra = """(Note: The cloak makes you invisible, but some magical creatures
and powerful wizards may still detect your presence through other means.)"""

        return manager.respond(
            f"""You sweep the Invisibility Cloak around your shoulders. The silvery fabric
settles over you, and you watch as your body fades from view.

You are now invisible.

{extra}""",
            Color.MAGIC,
        )

    def remove(self, manager: GameStateManager, target: str | None) -> CommandResult:
        if target and manager.world.find_item(target) != CLOAK:
            return manager.respond(f"You're not wearing a {target}.")

        challenges = manager.challenges
        if not challenges.wearing_cloak:
            return manager.respond("You're not wearing anything special.")

        challenges.wearing_cloak = False
        return manager.respond(
            "You remove the Invisibility Cloak. Your body becomes visible once more."
        )

    # =========================================================================
    # Summoning
    # =========================================================================

    def accio(self, manager: GameStateManager, target: str) -> CommandResult:
        """Summon an item from this room or any room one step away."""
        target = target.strip()

        if DITTANY in target:
            source = self._summon_source(manager, DITTANY)
            if source is not None:
                manager.add_item(DITTANY)
                manager.mark_taken(source, DITTANY)
                return manager.respond(
                    """"Accio Dittany!"

A small vial zooms toward you from somewhere nearby, landing in your outstretched hand.
You now have Essence of Dittany.""",
                    Color.MAGIC,
                )
            return manager.respond(
                """"Accio Dittany!"

You hear something rattle in the distance, but nothing comes. Perhaps there's no
Dittany close enough to summon from here.""",
                Color.MAGIC,
            )

        if "wand" in target:
            return manager.respond(
                '"Accio Wand!"\n\nYour own wand vibrates in your hand. '
                "That probably wasn't what you meant."
            )

        return manager.respond(
            f""""Accio {target.capitalize()}!"

Nothing happens. Either there's no {target} nearby, or it's protected against summoning.""",
            Color.MAGIC,
        )

    def _summon_source(self, manager: GameStateManager, item_id: str) -> str | None:
        if manager.has_item(item_id):
            return None

        location = manager.get_current_location()
        if location is None:
            return None

        for location_id in [manager.location_id, *location.exits.values()]:
            if item_available(manager.state, manager.world, location_id, item_id):
                return location_id
        return None
