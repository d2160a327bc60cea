"""The narrow Shadow Passage and its two ways through."""

from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "shadow_passage"
HIDDEN_ROOM = "hidden_room"


def _squeeze_through(manager: GameStateManager, points: int, narration: str) -> CommandResult:
    manager.challenges.passage_cleared = True
    manager.award(points)
    manager.move_to(HIDDEN_ROOM, "east")
    description = get_location_description(manager.state, manager.world)
    return manager.respond(f"{narration}\n\n{description}", Color.MAGIC)


def crawl(manager: GameStateManager) -> CommandResult:
    """Physical solution, worth less than the magical one."""
    if manager.location_id != LOCATION:
        return manager.respond("There's no need to crawl here.")

    if manager.challenges.passage_cleared:
        return manager.respond("You've already cleared this passage.")

    return _squeeze_through(
        manager,
        5,
        """You get down on your hands and knees and carefully crawl through the tight space.
Cobwebs brush against your face and dust fills your nostrils, but you manage
to squeeze through to the other side.

[PASSAGE CLEARED - +5 points]""",
    )


def cast_reducio(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION:
        return manager.respond(
            '"Reducio!"\n\nThe shrinking charm swirls from your wand, but there\'s nothing here that needs shrinking.',
            Color.MAGIC,
        )

    if manager.challenges.passage_cleared:
        return manager.respond("You've already passed through this area.")

    return _squeeze_through(
        manager,
        10,
        """"Reducio!"

You cast the Shrinking Charm on yourself. Your body compresses, everything around
you growing larger. The tight passage that seemed impossibly narrow now appears
as a wide corridor.

You slip through easily, then feel the magic fade as you return to normal size
on the other side.

[NARROW PASSAGE CLEARED - +10 points (Magic solution)]""",
    )
