"""The Great Chasm and its scattered bridge stones."""

from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "chasm_room"


def cast_levitation(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION:
        return manager.respond(
            "You cast Wingardium Leviosa, but there's nothing here that needs levitating.",
            Color.MAGIC,
        )

    if manager.challenges.levitation_bridge_built:
        return manager.respond("The bridge is already in place.")

    manager.challenges.levitation_bridge_built = True
    manager.award(10, "levitation")

    return manager.respond(
        """"Wingardium Leviosa!"

You focus your will on the heavy stone blocks. One by one, they rise into the air,
hovering against gravity. With careful movements of your wand, you guide them
into position across the chasm.

The blocks settle into place, forming a solid bridge. The magic holds them steady.

[LEVITATION PUZZLE COMPLETED - +10 points]""",
        Color.MAGIC,
    )
