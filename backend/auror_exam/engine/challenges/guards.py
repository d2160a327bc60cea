"""
The guard patrol in the Guard Corridor.

Three ways past: confuse them, fight them, or walk by unseen under the
Invisibility Cloak or a Muffliato charm. Once alerted, the guards attack
every turn until one of those succeeds (see engine.effects).
"""

from auror_exam.engine.challenges import Entry, shout
from auror_exam.engine.spells import Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "guard_corridor"
BEYOND = "beyond_guards"

FIGHT_DAMAGE = 20
STANDING_DAMAGE = 15

ATTACK_MESSAGES = [
    '"STOP!" A Stunning Spell narrowly misses you!',
    "You dodge a jet of red light - barely!",
    '"Intruder!" A curse grazes your shoulder!',
    "Both guards attack at once!",
]

STANDING_FOOTER = "The guards are alert and attacking. You need a solution quickly!"

DEATH_MESSAGE = """"INTRUDER!" The guards spot your movement!

Multiple curses fly at you. You try to dodge, but there are too many.
Stunning Spells hit you from both sides. Your heart stops.

"Excessive force noted," one guard says flatly to the other.

EXAMINATION FAILED - SUBDUED BY GUARDS"""


def is_hostile(manager: GameStateManager) -> bool:
    """Alerted guards who can still see the candidate."""
    challenges = manager.challenges
    return (
        manager.location_id == LOCATION
        and challenges.guards_alerted
        and not challenges.guards_evaded
    )


def on_enter(manager: GameStateManager) -> Entry | None:
    challenges = manager.challenges
    if challenges.stealth_passed:
        return None

    if challenges.wearing_cloak:
        return Entry(
            """Two guards patrol ahead. They don't notice you slip into the corridor,
invisible beneath your cloak. You can proceed north past them undetected."""
        )
    if challenges.stealth_active:
        return Entry(
            """Two guards patrol ahead. Your muffled footsteps make no sound as you slip
into the corridor. You can proceed north past them undetected."""
        )

    challenges.guards_alerted = True
    return Entry(
        """You freeze. Two guards patrol ahead, wands drawn. They haven't spotted you yet,
but they're alert. Fighting two experienced guards head-on would be dangerous.

Perhaps there's a cleverer way past them..."""
    )


def cross(manager: GameStateManager, description: str) -> CommandResult:
    """Walking north past the guards while hidden, after the move is made."""
    challenges = manager.challenges
    challenges.stealth_passed = True
    challenges.guards_alerted = False
    manager.award(10, "stealth")

    if challenges.wearing_cloak:
        narration = """You slip past the guards undetected. The guards look right through you,
unable to see beneath your Invisibility Cloak. They continue their patrol,
completely unaware of your passage."""
    else:
        narration = """You creep past the guards on silent feet. Wrapped in your Muffliato charm,
not a footstep reaches them. They continue their patrol, completely unaware
of your passage."""

    return manager.respond(
        f"{narration}\n\n[STEALTH SECTION COMPLETED - +10 points]\n\n{description}",
        Color.MAGIC,
    )


def cast_confundo(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION:
        return manager.respond(
            '"Confundo!"\n\nThe spell shoots from your wand, but there\'s no one here to confuse.',
            Color.MAGIC,
        )

    challenges = manager.challenges
    if challenges.stealth_passed:
        return manager.respond("The guards are already dealt with.")

    was_alerted = challenges.guards_alerted
    challenges.stealth_passed = True
    challenges.guards_alerted = False
    manager.award(10, "stealth")

    if was_alerted:
        return manager.respond(
            """"Confundo!"

Your spell strikes one of the guards. His eyes glaze over momentarily.

"Did you hear that noise down the east corridor?" he says suddenly.
"We should check it out immediately!"

Both guards hurry off in the wrong direction, completely forgetting about you.
The path north is clear.

[STEALTH SECTION COMPLETED - +10 points]""",
            Color.MAGIC,
        )

    return manager.respond(
        """"Confundo!"

Your spell strikes one of the guards before they fully notice you. His eyes
glaze over, confused.

"Wait... did we finish our patrol of the east wing?"
"I... I don't think so. We should head there now."

The guards wander off in the wrong direction, thoroughly bewildered. The path
north is clear.

[STEALTH SECTION COMPLETED - +10 points]""",
        Color.MAGIC,
    )


def cast_muffliato(manager: GameStateManager) -> CommandResult:
    """Silences the candidate's footsteps; the crossing itself scores."""
    challenges = manager.challenges
    if manager.location_id != LOCATION or challenges.stealth_passed:
        challenges.stealth_active = True
        return manager.respond(
            '"Muffliato!"\n\nA faint buzzing fills your ears as the charm settles around you.',
            Color.MAGIC,
        )

    if challenges.stealth_active:
        return manager.respond("Your Muffliato charm is already in place.")

    challenges.stealth_active = True
    challenges.guards_alerted = False
    return manager.respond(
        """"Muffliato!"

A faint buzzing settles around you. The guards frown and shake their heads,
as if trying to clear a ringing in their ears. Your footsteps make no sound
at all now.

You could slip north past them while the charm holds.""",
        Color.MAGIC,
    )


def fight(manager: GameStateManager, spell: Spell) -> CommandResult:
    """An offensive spell at the guards: costly, and worth fewer points."""
    if not manager.damage(FIGHT_DAMAGE):
        manager.die()
        return manager.respond(
            """You attack the guards! They react instantly, both firing curses at once.
You manage to stun one, but the other's Stunning Spell catches you full in the chest.
Everything goes dark.

The surviving guard checks your pulse and shakes his head.
"Stealth was always an option," he mutters.

EXAMINATION FAILED - COMBAT CASUALTY""",
            Color.DAMAGE,
        )

    manager.challenges.stealth_passed = True
    manager.challenges.guards_alerted = False
    manager.award(5, "stealth")
    return manager.respond(
        f"""You burst from cover, wand blazing!

{shout(spell)}

You stun one guard, but the other returns fire. A Stinging Hex catches your arm
before your second spell takes them down. [-{FIGHT_DAMAGE} HP]

Both guards lie unconscious. The path is clear, though the loud fight may have
alerted others.

[GUARDS DEFEATED - +5 points (Combat approach)]""",
        Color.DAMAGE,
    )
