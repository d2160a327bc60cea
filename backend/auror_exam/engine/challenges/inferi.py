"""
The Inferi of the Underground Lake.

Only fire clears them. Stunning spells knock one down for a moment and
water makes them stronger.
"""

from auror_exam.engine.challenges import Entry, shout
from auror_exam.engine.spells import Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "inferi_lake"

ENTRY_DAMAGE = 10
STANDING_DAMAGE = 15
AGUAMENTI_DAMAGE = 10

STANDING_MESSAGE = "The Inferi grab at you with rotting hands! [-{damage} HP]"

DEATH_MESSAGE = """Cold, dead hands drag you beneath the water.
The pale faces surround you as darkness closes in...

You sink into the dark water, joining the other pale forms below.
The examiners will find only disturbed water and silence.

EXAMINATION FAILED - CANDIDATE DROWNED"""


def is_active(manager: GameStateManager) -> bool:
    return manager.location_id == LOCATION and not manager.challenges.inferi_cleared


def on_enter(manager: GameStateManager) -> Entry | None:
    """Walking in wakes the drowned; they block every exit until burned."""
    if manager.challenges.inferi_cleared:
        return None

    manager.challenges.inferi_engaged = True
    if not manager.damage(ENTRY_DAMAGE):
        manager.die()
        return Entry(DEATH_MESSAGE, Color.DAMAGE)

    return Entry(
        "Pale hands reach for you! Cold fingers grasp your ankle before you wrench free. "
        f"[-{ENTRY_DAMAGE} HP]",
        Color.DAMAGE,
    )


def burn(manager: GameStateManager, spell: Spell) -> CommandResult:
    """Incendio or Confringo against an active horde."""
    manager.challenges.inferi_cleared = True
    manager.challenges.inferi_engaged = False
    manager.award(10, "inferi")

    if spell == Spell.INCENDIO:
        effect = "Flames erupt from your wand, sweeping across the water"
    else:
        effect = "A ball of fire explodes from your wand, engulfing the creatures"

    return manager.respond(
        f"""{shout(spell)}

{effect}. The pale bodies shriek and recoil, flames catching
on their rotted flesh. They sink back beneath the water, fleeing the fire.

The lake surface churns briefly, then goes still. Ash floats on the water.
The path to the eastern shore is clear.

[INFERI CHALLENGE COMPLETED - +10 points]""",
        Color.MAGIC,
    )


def repel(manager: GameStateManager, spell: Spell) -> CommandResult:
    """Offensive spells only knock an Inferius down for a moment."""
    return manager.respond(
        f"""{shout(spell)}

Your spell strikes one of the pale bodies. It falls back into the water...
but moments later, it rises again. These things don't stay down.

Something else might be more effective against the undead.""",
        Color.MAGIC,
    )


def cast_aguamenti(manager: GameStateManager) -> CommandResult:
    if not is_active(manager):
        return manager.respond(
            '"Aguamenti!"\n\nA stream of clear water sprays from your wand, splashing on the floor.',
            Color.MAGIC,
        )

    if not manager.damage(AGUAMENTI_DAMAGE):
        manager.die()
        return manager.respond(
            """"Aguamenti!"

Water sprays from your wand... and the pale bodies surge forward with renewed
vigor! The water seems to invigorate them. Cold hands grasp at you, pulling
you under...

YOU HAVE DIED. The examination has ended in failure.""",
            Color.DAMAGE,
        )

    return manager.respond(
        f""""Aguamenti!"

Water sprays from your wand... and the pale bodies surge forward with renewed
vigor! The water seems to invigorate them. One grabs your ankle before you
wrench free. [-{AGUAMENTI_DAMAGE} HP]

That was the wrong approach. These creatures respond to water, but not in the
way you wanted.""",
        Color.DAMAGE,
    )
