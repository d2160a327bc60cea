"""Wandlight and the dark passages."""

from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult


def in_darkness(manager: GameStateManager) -> bool:
    location = manager.get_current_location()
    return location is not None and location.dark


def cast_lumos(manager: GameStateManager, maxima: bool = False) -> CommandResult:
    """Light the wand. The first light cast inside a dark location scores."""
    if manager.challenges.lumos_active:
        return manager.respond("Your wand is already lit.")

    manager.challenges.lumos_active = True
    incantation = '"Lumos Maxima!"' if maxima else '"Lumos!"'
    dark = in_darkness(manager)

    if dark and "lumos" not in manager.state.challenges_completed:
        manager.award(10, "lumos")
        intensity = "brilliant" if maxima else "steady"
        description = get_location_description(manager.state, manager.world)
        return manager.respond(
            f"""{incantation}

A {intensity} light erupts from the tip of your wand, pushing back the darkness.
The shadows retreat, revealing the passage around you.

[DARK CORRIDOR CHALLENGE COMPLETED - +10 points]

{description}""",
            Color.MAGIC,
        )

    message = f"{incantation}\n\nLight springs from your wand, illuminating your surroundings."
    if dark:
        message += "\n\n" + get_location_description(manager.state, manager.world)
    return manager.respond(message, Color.MAGIC)


def cast_nox(manager: GameStateManager) -> CommandResult:
    if not manager.challenges.lumos_active:
        return manager.respond("Your wand light is already extinguished.")

    manager.challenges.lumos_active = False
    return manager.respond('"Nox."\n\nThe light from your wand fades away.', Color.MAGIC)
