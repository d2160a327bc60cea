"""
The Dementor of the Frost Chamber.

Phases: initial -> memory_needed -> complete. The first Patronus is too
weak and asks for a memory; while awaiting_memory is set the processor
hands the next raw input to submit_memory instead of the parser.
"""

from auror_exam.engine.challenges import Entry
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult, DementorPhase

LOCATION = "dementor_chamber"

ENTRY_DAMAGE = 10
STANDING_DAMAGE = 10
MIN_MEMORY_LENGTH = 10

PATRONUS_FORMS = ["stag", "phoenix", "otter", "doe", "wolf", "eagle", "lion"]

STANDING_MESSAGE = "The Dementor glides closer. Despair overwhelms you. [-{damage} HP]"

DEATH_MESSAGE = """The Dementor descends upon you. The cold becomes unbearable.
Everything goes dark as the last of your happiness is drained away...

Your body will be found later, cold and still, with no visible injuries.
The examiners will note: "Dementor's Kiss - total soul extraction."

EXAMINATION FAILED - CANDIDATE LOST"""


def on_enter(manager: GameStateManager) -> Entry | None:
    """Walking in engages the Dementor until it is driven off."""
    if manager.challenges.dementor_defeated:
        return None

    manager.challenges.dementor_engaged = True
    if not manager.damage(ENTRY_DAMAGE):
        manager.die()
        return Entry(DEATH_MESSAGE, Color.DAMAGE)

    return Entry(
        "The cold seeps into your bones. You feel your happiness draining away. "
        f"[-{ENTRY_DAMAGE} HP]",
        Color.DAMAGE,
    )


def cast_patronus(manager: GameStateManager) -> CommandResult:
    """A Patronus alone is too weak; it opens the prompt for a happy memory."""
    if manager.location_id != LOCATION:
        return manager.respond(
            """"Expecto Patronum!"

Silver mist erupts from your wand, swirling briefly before fading.
Without a true threat to focus against, the Patronus doesn't fully form.""",
            Color.MAGIC,
        )

    challenges = manager.challenges
    if challenges.dementor_defeated:
        return manager.respond(
            "The chamber is clear. There's no need for a Patronus here anymore."
        )

    challenges.dementor_phase = DementorPhase.MEMORY_NEEDED
    challenges.awaiting_memory = True
    return manager.respond(
        """"Expecto Patronum!"

Silver mist shoots from your wand, but it's weak - barely more than wisps of light.
The hooded figure hesitates for a moment, then continues its approach. The cold
intensifies. Your happy thoughts feel distant, fading...

You need something stronger. A memory. Your happiest memory.

Think of your happiest moment - truly feel it - and describe it:""",
        Color.MAGIC,
    )


def submit_memory(manager: GameStateManager, text: str) -> CommandResult:
    """Evaluate free text typed while the Patronus waits for a memory.

    Any memory of at least ten characters succeeds. The Patronus form is
    flavor only.
    """
    memory = text.strip()
    if len(memory) < MIN_MEMORY_LENGTH:
        return manager.respond(
            """You try to focus on that thought, but it's not enough.
The memory needs to be more specific, more meaningful...

The Dementor draws closer. Think harder! What is your happiest memory?"""
        )

    challenges = manager.challenges
    challenges.dementor_defeated = True
    challenges.dementor_engaged = False
    challenges.dementor_phase = DementorPhase.COMPLETE
    challenges.awaiting_memory = False
    manager.award(10, "dementor")

    patronus = manager.rng.choice(PATRONUS_FORMS)

    return manager.respond(
        f"""You focus on that memory - truly feel it - the joy, the warmth, the love.

"EXPECTO PATRONUM!"

A blinding silver light erupts from your wand, coalescing into the form of a
brilliant silver {patronus.upper()}! Your Patronus charges at the Dementor,
driving it back with radiant force.

The hooded figure shrieks - a horrible, rattling sound - and flees into the shadows.
Warmth floods back into the chamber. Your happy memories return.

[DEMENTOR CHALLENGE COMPLETED - +10 points]""",
        Color.MAGIC,
    )
