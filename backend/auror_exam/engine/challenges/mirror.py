"""
The Mirror of Erised, the final test.

Turning away is the wise answer. Looking once is only a warning; looking a
second time is a gamble against the candidate's own heart. Touching the
mirror is always fatal to the attempt.
"""

from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "final_chamber"
MIRROR_WORDS = ("mirror", "glass", "erised")

# Chance the second look reveals a desire for power
CORRUPTION_CHANCE = 0.10


def is_mirror(target: str | None) -> bool:
    return not target or any(word in target for word in MIRROR_WORDS)


def is_present(manager: GameStateManager) -> bool:
    return (
        manager.location_id == LOCATION
        and not manager.challenges.final_challenge_complete
    )


def see(manager: GameStateManager, target: str | None) -> CommandResult:
    if is_present(manager) and is_mirror(target):
        return _gaze(manager)

    if not target:
        return manager.respond("See what?")
    return manager.respond(f"You look at the {target}, but nothing special happens.")


def touch(manager: GameStateManager, target: str | None) -> CommandResult:
    """Touch, reach for, or look into.

    Anything the candidate reaches for in the final chamber is the mirror:
    its pull leaves nothing else in the room worth touching.
    """
    if is_present(manager):
        return _consume(manager)

    if not target:
        return manager.respond("Touch what?")
    return manager.respond(f"You touch the {target}, but nothing happens.")


def take(manager: GameStateManager) -> CommandResult:
    """Trying to take the mirror means laying hands on it."""
    if not is_present(manager):
        return manager.respond("There's no mirror here.")
    return _consume(manager)


def leave(manager: GameStateManager) -> CommandResult:
    if not is_present(manager):
        return manager.respond("There's nothing to leave here.")

    manager.challenges.final_challenge_complete = True
    manager.award(20, "final")
    manager.win()
    return manager.respond(
        """You close your eyes and turn away from the mirror.

It takes all your willpower. Part of you screams to look, just once, to see
what you truly desire. But you remember Dumbledore's words: "The happiest man
on earth would look into the mirror and see only himself, exactly as he is."

You don't need the mirror to know what you want. You want to be an Auror.
And that desire is one you can achieve through your own actions.

"Remarkable," the voice says, warm with approval. "Few have the wisdom to
turn away. The mirror shows you nothing you cannot earn for yourself."

The chamber fills with golden light. The mirror vanishes, and a door
materializes in the far wall.

[FINAL CHALLENGE COMPLETED - +20 points (Wisdom bonus)]

You step through the door and emerge into sunlight. Examiners await you,
their faces stern but approving.

"Congratulations," one says. "You have completed the Auror examination.\"""",
        Color.GOLD,
    )


def _gaze(manager: GameStateManager) -> CommandResult:
    challenges = manager.challenges

    if not challenges.mirror_looked_once:
        challenges.mirror_looked_once = True
        return manager.respond(
            """You begin to step toward the mirror, drawn to its gleaming surface.

For a moment, you glimpse something in the reflection - something that calls to you,
promises you everything you ever wanted...

But then you remember Dumbledore's warning: "It does not do to dwell on dreams
and forget to live."

You hesitate at the edge. Part of you wants desperately to see what the mirror
will show. But another part knows the danger.

You can still TURN AWAY and walk past safely.

Or you can LOOK again and gaze into your heart's desire...

But be warned: The mirror has destroyed many who looked too deeply.""",
            Color.WARNING,
        )

    challenges.final_challenge_complete = True

    if manager.rng.random() < CORRUPTION_CHANCE:
        manager.state.score = 0
        manager.die()
        return manager.respond(
            """You step closer and gaze into the mirror's gleaming surface...

You see yourself - powerful, commanding, feared. Dark wizards bow before you.
Ancient magic crackles at your fingertips. You stand above everyone, answering
to no one. Supreme. Unstoppable.

The vision is intoxicating. You lean closer, wanting more...

"ENOUGH!"

Examiners rush in and pull you away. You struggle against them, desperate to
see more of that glorious vision.

The voice speaks, cold and final:

"You have failed. The mirror revealed your true desire: not to serve and protect,
but to dominate and control. You would have become exactly what Aurors are sworn
to fight against."

EXAMINATION FAILED - CORRUPTED BY DESIRE

An Auror who desires power above all else is a Dark wizard in waiting.
This is an automatic disqualification, regardless of previous performance.""",
            Color.DAMAGE,
        )

    manager.award(10, "final")
    manager.win()
    return manager.respond(
        """Unable to resist, you step closer and gaze into the mirror's gleaming surface...

The reflection that stares back is you - but different. You wear the robes of
an Auror, the badge gleaming on your chest. Behind you, you see grateful faces
of people you've saved, dark wizards you've brought to justice. But what strikes
you most is the look in your reflection's eyes: determination, wisdom, and peace.

You realize: this isn't a fantasy of power. This is simply you, having achieved
what you've worked for through your own merit and dedication.

It takes effort, but you tear your eyes away from the mirror.

The voice speaks, with measured approval:

"You looked into Erised against better judgment, but your heart revealed itself
to be true. You desire duty and purpose, not power. This saves you - barely.
Remember: a wiser Auror would have turned away."

The mirror fades, and a door appears.

[FINAL CHALLENGE COMPLETED - +10 points (Acceptable - risky choice)]

You step through. The examiners nod, but their expressions are stern.

"You passed. But remember: luck favors the prepared, not the reckless.\"""",
        Color.WARNING,
    )


def _consume(manager: GameStateManager) -> CommandResult:
    manager.challenges.final_challenge_complete = True
    manager.state.score = 0
    manager.die()
    return manager.respond(
        """Your fingers reach toward the mirror's surface...

The moment you touch it, visions flood your mind. You see yourself - powerful,
respected, feared. Dark artifacts answer to your command. You are unstoppable.
You are everything you ever wanted to be.

You cannot look away. Hours pass. Days. You don't notice.

The examiners find you standing before the mirror, eyes glazed, a smile frozen
on your face. They've seen this before. They know what must be done.

"Another one lost to Erised," an examiner sighs. "They never learn - the mirror
shows only desire, never the path to achieve it. They waste away, wanting."

They gently lead you from the chamber, but your eyes stay fixed on the mirror
until the very last moment. You'll spend weeks in St. Mungo's, recovering.

EXAMINATION FAILED - CONSUMED BY DESIRE

The wisest wizards never look into the Mirror of Erised at all.
This is an automatic disqualification, regardless of previous performance.""",
        Color.DAMAGE,
    )
