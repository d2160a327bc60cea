"""The Hippogriff of the Creature Enclosure: bow twice, never threaten."""

from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "creature_enclosure"
BEYOND = "beyond_creature"

BLOCK_DAMAGE = 25
ATTACK_DAMAGE = 40
ATTACK_PENALTY = 5


def bow(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION:
        return manager.respond("You bow politely. Nothing happens.")

    challenges = manager.challenges
    if challenges.hippogriff_trusts:
        return manager.respond("The creature dips its head in acknowledgment.")

    if challenges.hippogriff_bowed:
        challenges.hippogriff_trusts = True
        manager.award(15, "hippogriff")
        return manager.respond(
            """You maintain your bow, not breaking eye contact.

After a long, tense moment... the creature bows its great feathered head in return!

It steps aside, allowing you to pass. Its fierce eyes seem almost approving now.

[HIPPOGRIFF CHALLENGE COMPLETED - +15 points (Proper etiquette bonus)]""",
            Color.MAGIC,
        )

    challenges.hippogriff_bowed = True
    return manager.respond(
        """You bow low, maintaining eye contact with the proud creature.

The Hippogriff's fierce orange eyes bore into you. It doesn't move, doesn't blink.
The tension stretches on...

Wait. Hold your bow. Don't look away."""
    )


def attack(manager: GameStateManager) -> CommandResult:
    """Raising a wand at an untrusting Hippogriff."""
    if not manager.damage(ATTACK_DAMAGE):
        manager.die()
        return manager.respond(
            """You raise your wand against the proud creature. Its eyes flash with fury.
Before you can complete your spell, it lunges. Talons rake across you with
terrible force. The last thing you see is those fierce orange eyes.

The Hippogriff returns to its calm stance, as if nothing happened.
Your body lies still in the straw.

EXAMINATION FAILED - MAULED BY CREATURE""",
            Color.DAMAGE,
        )

    manager.state.score = max(0, manager.state.score - ATTACK_PENALTY)
    return manager.respond(
        f"""You raise your wand threateningly. The creature's eyes flash with fury!
It rears up, wings spreading wide, and strikes with its talons. You barely
dodge the worst of it, but still take a vicious hit. [-{ATTACK_DAMAGE} HP]

The creature snorts angrily, more hostile than before. Perhaps aggression
is not the answer here.""",
        Color.DAMAGE,
    )


def block(manager: GameStateManager) -> CommandResult:
    """Walking north past the creature before it trusts the candidate.

    The candidate is thrown back and stays in the enclosure.
    """
    if not manager.damage(BLOCK_DAMAGE):
        manager.die()
        return manager.respond(
            """You try to walk past the Hippogriff without proper respect.

The creature screeches in outrage! Its talons flash, catching you across the chest.
You fall backward, blood streaming from the wounds.

EXAMINATION FAILED - KILLED BY HIPPOGRIFF

You should have bowed. Pride before a proud creature is fatal.""",
            Color.DAMAGE,
        )

    description = get_location_description(manager.state, manager.world)
    return manager.respond(
        f"""You try to walk past the Hippogriff without proper respect.

SCREEEEEE!

The creature rears up in fury! Its sharp talons slash across your arm as you
stumble backward into the previous chamber. [-{BLOCK_DAMAGE} HP]

The Hippogriff blocks your path, wings spread, eyes blazing. You feel blood
running down your arm.

It will not let you pass until you show proper respect. You must BOW.

{description}""",
        Color.DAMAGE,
    )


def ride(manager: GameStateManager) -> CommandResult:
    if manager.location_id != LOCATION or not manager.challenges.hippogriff_trusts:
        return manager.respond("There's nothing here to ride.")

    if not manager.challenges.hippogriff_ridden:
        manager.challenges.hippogriff_ridden = True
        manager.award(5)

    manager.move_to(BEYOND, "north")
    description = get_location_description(manager.state, manager.world)
    return manager.respond(
        f"""You approach the Hippogriff and it allows you to mount. With powerful beats of
its wings, you soar upward through the shaft of light. The wind rushes past.

The creature lands gracefully in a corridor beyond, then nudges you off gently.
It turns and flies back the way it came.

You've saved considerable time and energy.

{description}""",
        Color.MAGIC,
    )
