"""
The Death Eater duel.

A multi-round fight against a 100 HP opponent. Each attack lands first and
the counter-attack follows: nothing in round 0, 5 HP through a lingering
Protego shield, 15 HP otherwise. Hesitating with anything but a combat
spell is punished separately by engine.effects.
"""

from auror_exam.engine.challenges import shout
from auror_exam.engine.spells import Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CommandResult

LOCATION = "death_eater_chamber"

STANDING_DAMAGE = 15
SHIELDED_DAMAGE = 5

# (damage, effect) per attack spell; anything else hits for DEFAULT_STRIKE
SPELL_DAMAGE: dict[Spell, tuple[int, str]] = {
    Spell.STUPEFY: (25, "A jet of red light hits them square in the chest!"),
    Spell.EXPELLIARMUS: (
        25,
        "The disarming spell connects, and they struggle to keep grip on their wand!",
    ),
    Spell.REDUCTO: (30, "The blasting curse explodes against their defenses!"),
    Spell.CONFRINGO: (
        30,
        "Fire engulfs them momentarily before they manage to extinguish it!",
    ),
    Spell.INCENDIO: (
        30,
        "Fire engulfs them momentarily before they manage to extinguish it!",
    ),
    Spell.PETRIFICUS_TOTALUS: (
        20,
        "They partially freeze but manage to shake off the Body-Bind!",
    ),
    Spell.IMPEDIMENTA: (15, "They slow momentarily, fighting against the jinx!"),
    Spell.FLIPENDO: (15, "The knockback jinx sends them stumbling backward!"),
}
DEFAULT_STRIKE = (20, "Your spell strikes the Death Eater!")

DEATH_BLOWS = [
    "A dark curse tears through you. Your wand clatters to the floor.",
    "The Death Eater's final hex breaks through your defenses. You crumple.",
    "A jet of red light catches you in the chest. Your vision fades.",
]

# Counter-attacks by how hurt the Death Eater is: (health above, attacks, taunt)
COUNTER_ATTACKS = [
    (
        70,
        [
            "They flick their wand - a Stunning Spell races toward you!",
            "Dark light gathers at their wand tip as they counter-attack!",
            '"Is that the best you can do?" they sneer, launching a curse!',
        ],
        "The Death Eater looks confident, circling you slowly.",
    ),
    (
        30,
        [
            "They snarl and fire a rapid volley of hexes!",
            "Breathing hard, they slash their wand viciously through the air!",
            "Blood runs down their face as they cast another curse!",
        ],
        "They're hurt but dangerous. The duel is far from over.",
    ),
    (
        -1,
        [
            "Panic in their eyes, they throw everything they have at you!",
            "With a desperate scream, they unleash a barrage of dark magic!",
            "Staggering, they raise their wand for one more strike!",
        ],
        "They're weakening fast! One more good hit should finish this!",
    ),
]

DEFENSE_MESSAGES = [
    "A dark curse splashes harmlessly against your barrier!",
    "The Death Eater's hex rebounds off your shield!",
    "Your shield flares brightly, absorbing a jet of green sparks!",
    "The curse dissipates against your protective magic!",
]

HESITATION_MESSAGES = [
    "The Death Eater seizes your hesitation! A curse flies at you!",
    '"Focus on the duel!" A hex catches you off guard!',
    "While distracted, you take a direct hit from their wand!",
    "The Death Eater attacks while you waste time!",
]

STANDING_FOOTER = "You're in a duel! Attack with combat spells or defend with Protego!"

DEATH_MESSAGE = """While you hesitate, the Death Eater strikes!

A dark curse tears through you. Your wand clatters to the floor.

The masked figure stands over you, lowering their wand.
"Another one who wasn't ready," they say coldly.

EXAMINATION FAILED - DEFEATED IN COMBAT"""


def is_active(manager: GameStateManager) -> bool:
    return manager.location_id == LOCATION and not manager.challenges.death_eater_defeated


def strike(spell: Spell) -> tuple[int, str]:
    """Damage and narration for an attack spell, shared with the training hall."""
    return SPELL_DAMAGE.get(spell, DEFAULT_STRIKE)


def attack(manager: GameStateManager, spell: Spell) -> CommandResult:
    challenges = manager.challenges
    round_ = challenges.duel_round
    was_defending = challenges.duel_defending

    damage, effect = strike(spell)
    enemy_health = max(0, challenges.death_eater_health - damage)

    incoming = 0
    if round_ > 0:
        incoming = SHIELDED_DAMAGE if was_defending else STANDING_DAMAGE

    if not manager.damage(incoming):
        manager.die()
        return manager.respond(
            f"""You duel fiercely, but the Death Eater gains the upper hand.
{DEATH_BLOWS[round_ % len(DEATH_BLOWS)]}

The masked figure stands over you, lowering their wand.
"Another one who wasn't ready," they say coldly.

EXAMINATION FAILED - DEFEATED IN COMBAT""",
            Color.DAMAGE,
        )

    if enemy_health == 0:
        challenges.death_eater_defeated = True
        challenges.death_eater_health = 0
        challenges.duel_defending = False

        disarmed = spell == Spell.EXPELLIARMUS
        points = 15 if disarmed else 10
        manager.award(points, "duel")

        if disarmed:
            outcome = """Their wand spirals through the air and clatters to the floor. The Death Eater
stumbles, defeated but conscious, hands raised in surrender."""
        else:
            outcome = "The force of your spell drives them to the ground. They don't get up."
        bonus = " (Mercy bonus)" if disarmed else ""

        return manager.respond(
            f"""{shout(spell)}

{effect}

{outcome}

"Impressive dueling," you hear from somewhere above. An examiner's voice.
"The trial by combat is concluded."

[DEATH EATER DUEL COMPLETED - +{points} points{bonus}]""",
            Color.MAGIC,
        )

    challenges.death_eater_health = enemy_health
    challenges.duel_round = round_ + 1
    challenges.duel_defending = False

    for threshold, attacks, taunt in COUNTER_ATTACKS:
        if enemy_health > threshold:
            counter = attacks[round_ % len(attacks)]
            break

    if incoming and was_defending:
        counter += f"\nYour lingering shield absorbs most of the blow. [-{incoming} HP]"
    elif incoming:
        counter += f"\nThe spell grazes you! [-{incoming} HP]"

    return manager.respond(
        f"""{shout(spell)}

{effect}

{counter}

{taunt}""",
        Color.DAMAGE if incoming else Color.MAGIC,
    )


def defend(manager: GameStateManager, maxima: bool = False) -> CommandResult:
    """Protego during the duel: the next counter-attack only grazes."""
    challenges = manager.challenges
    round_ = challenges.duel_round
    challenges.duel_defending = True
    challenges.duel_round = round_ + 1

    incantation = "Protego Maxima!" if maxima else "Protego!"
    return manager.respond(
        f""""{incantation}"

A shimmering shield springs up before you. {DEFENSE_MESSAGES[round_ % len(DEFENSE_MESSAGES)]}

The Death Eater snarls in frustration. "You can't hide behind shields forever!"

You're protected for now, but defense alone won't win this duel.""",
        Color.MAGIC,
    )
