"""The sealed iron door of the entrance hall."""

from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "entrance_hall"


def cast_alohomora(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION:
        return manager.respond(
            '"Alohomora!"\n\nYou cast the unlocking charm, but there\'s nothing locked here.',
            Color.MAGIC,
        )

    if manager.challenges.door_unlocked:
        return manager.respond("The door is already unlocked.")

    manager.challenges.door_unlocked = True
    manager.award(10, "alohomora")

    return manager.respond(
        """"Alohomora!"

You point your wand at the heavy iron door. There's a satisfying click as the
lock disengages. The door swings open with a creak, revealing darkness beyond.

[DOOR UNLOCKED - +10 points]""",
        Color.MAGIC,
    )
