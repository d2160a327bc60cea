"""
System command handler: help, hint, inventory, look, score, journey, quit.

RESTART never reaches this handler; the processor intercepts it before
parsing so it works in every phase.
"""

from __future__ import annotations

from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.hints import HintEngine
from auror_exam.engine.state import GameStateManager
from auror_exam.models.command import SystemCommand
from auror_exam.models.game import SCORED_CHALLENGES, Color, CommandResult

JOURNEY_WIDTH = 35


class SystemHandler:
    """Resolves system commands.

    Example:
        >>> handler = SystemHandler()
        >>> handler.handle("inventory", manager).message
        'You are carrying nothing but your wand.'
    """

    def __init__(self, hints: HintEngine | None = None):
        self.hints = hints or HintEngine()
        self._resolvers = {
            SystemCommand.HELP: self.help,
            SystemCommand.HINT: self.hints.handle,
            SystemCommand.INVENTORY: self.inventory,
            SystemCommand.LOOK: self.look,
            SystemCommand.SCORE: self.score,
            SystemCommand.JOURNEY: self.journey,
            SystemCommand.QUIT: self.quit,
        }

    def handle(self, verb: str, manager: GameStateManager) -> CommandResult:
        resolver = self._resolvers.get(SystemCommand(verb))
        if resolver is None:
            return manager.respond("Unknown command.")
        return resolver(manager)

    def help(self, manager: GameStateManager) -> CommandResult:
        return manager.respond(manager.world.world.help_text)

    def look(self, manager: GameStateManager) -> CommandResult:
        return manager.respond(get_location_description(manager.state, manager.world))

    def inventory(self, manager: GameStateManager) -> CommandResult:
        state = manager.state
        if not state.inventory:
            return manager.respond("You are carrying nothing but your wand.")

        lines = []
        for item_id in state.inventory:
            item = manager.world.get_item(item_id)
            name = item.name if item else item_id
            if item and item.wearable and manager.challenges.wearing_cloak:
                name += " (wearing)"
            lines.append(f"- {name}")

        return manager.respond(
            "You are carrying:\n" + "\n".join(lines) + "\n\nAnd of course, your wand."
        )

    def score(self, manager: GameStateManager) -> CommandResult:
        state = manager.state
        completed = len(state.challenges_completed & set(SCORED_CHALLENGES))
        return manager.respond(
            f"""EXAMINATION PROGRESS

Challenges completed: {completed}/{manager.world.world.total_challenges}
Current score: {state.score} points
Hints used: {state.hints_used}
Health: {state.health}/{state.max_health}

Keep going. The final chamber awaits.""",
            Color.GOLD,
        )

    def journey(self, manager: GameStateManager) -> CommandResult:
        """Boxed list of the rooms visited, with the way the candidate left each."""
        log = manager.state.journey_log
        if not log:
            return manager.respond("Your journey has not yet begun.")

        border = "═" * JOURNEY_WIDTH
        blank = "║" + " " * JOURNEY_WIDTH + "║"
        rows = [
            f"╔{border}╗",
            "║" + "       YOUR JOURNEY".ljust(JOURNEY_WIDTH) + "║",
            f"╠{border}╣",
            blank,
        ]

        for index, entry in enumerate(log, start=1):
            if index == len(log):
                content = "→ YOU ARE HERE"
            else:
                location = manager.world.get_location(entry.location)
                content = location.name if location else entry.location
                if entry.direction:
                    content += f" (went {entry.direction})"
            rows.append("║" + f"  {index}. {content}".ljust(JOURNEY_WIDTH) + "║")

        rows += [blank, f"╚{border}╝"]
        return manager.respond("\n".join(rows))

    def quit(self, manager: GameStateManager) -> CommandResult:
        manager.die()
        return manager.respond(
            "Thank you for taking the Auror Examination. Type RESTART to try again."
        )
