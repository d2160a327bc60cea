"""
Action handler for the examination engine.

Physical verbs are dispatched through a table keyed by ActionVerb. Verbs
with no special meaning anywhere in the maze (drop, open, close) share a
generic refusal.
"""

from __future__ import annotations

import logging
from typing import Callable

from auror_exam.engine.challenges import hippogriff, mirror, passage
from auror_exam.engine.handlers.items import ItemHandler
from auror_exam.engine.state import GameStateManager
from auror_exam.models.command import ActionVerb, ParsedCommand
from auror_exam.models.game import CommandResult

logger = logging.getLogger(__name__)

ActionResolver = Callable[[GameStateManager, str | None], CommandResult]


class ActionHandler:
    """Resolves action commands.

    Attributes:
        items: Shared ItemHandler for the inventory verbs

    Example:
        >>> handler = ActionHandler(ItemHandler())
        >>> handler.handle(parse_command("bow"), manager).message
        'You bow politely. Nothing happens.'
    """

    def __init__(self, items: ItemHandler):
        self.items = items
        self._resolvers: dict[ActionVerb, ActionResolver] = {
            ActionVerb.EXAMINE: items.examine,
            ActionVerb.TAKE: items.take,
            ActionVerb.USE: items.use,
            ActionVerb.WEAR: items.wear,
            ActionVerb.REMOVE: items.remove,
            ActionVerb.READ: items.read,
            ActionVerb.BOW: lambda m, t: hippogriff.bow(m),
            ActionVerb.RIDE: lambda m, t: hippogriff.ride(m),
            ActionVerb.CRAWL: lambda m, t: passage.crawl(m),
            ActionVerb.LEAVE: lambda m, t: mirror.leave(m),
            ActionVerb.SEE: mirror.see,
            ActionVerb.TOUCH: mirror.touch,
            ActionVerb.ATTACK: self._attack,
            ActionVerb.CLAIM: lambda m, t: m.respond("There's nothing to claim here."),
        }

    def handle(self, command: ParsedCommand, manager: GameStateManager) -> CommandResult:
        verb = ActionVerb(command.verb)
        resolver = self._resolvers.get(verb)
        if resolver is None:
            return self._generic(verb, command.target, manager)
        logger.debug(f"Action {verb.value} target={command.target!r}")
        return resolver(manager, command.target)

    def _attack(self, manager: GameStateManager, target: str | None) -> CommandResult:
        """Bare-handed aggression only means something to the Hippogriff."""
        if (
            manager.location_id == hippogriff.LOCATION
            and not manager.challenges.hippogriff_trusts
        ):
            return hippogriff.attack(manager)
        return manager.respond("There's nothing here to attack.")

    def _generic(
        self, verb: ActionVerb, target: str | None, manager: GameStateManager
    ) -> CommandResult:
        if not target:
            return manager.respond(f"{verb.value.capitalize()} what?")
        return manager.respond(f"You can't {verb.value} the {target}.")
