"""
Combat Training Hall: the optional dummy assessment.

Walking in starts a structured CombatState fight against an enchanted
dummy. It uses the duel's damage table, but its hexes can never knock the
candidate below 1 HP, and winning is worth a small bonus outside the nine
scored challenges.
"""

from auror_exam.engine.challenges import Entry, shout
from auror_exam.engine.challenges.duel import strike
from auror_exam.engine.spells import Spell
from auror_exam.engine.state import GameStateManager
from auror_exam.models.game import Color, CombatState, CommandResult

LOCATION = "training_hall"
ENEMY = "training_dummy"
DUMMY_HEALTH = 50
COUNTER_DAMAGE = 10
BONUS = 5

COUNTER_MESSAGES = [
    "The dummy's wand arm snaps forward, loosing a Stinging Hex!",
    "Runes flare red along its base as it fires back!",
    "It pivots with a grinding of gears and answers with a jet of sparks!",
]


def is_active(manager: GameStateManager) -> bool:
    return manager.location_id == LOCATION and manager.state.combat_state is not None


def on_enter(manager: GameStateManager) -> Entry | None:
    if manager.challenges.protego_training_complete:
        return None

    manager.state.combat_state = CombatState(
        enemy=ENEMY, enemy_health=DUMMY_HEALTH, enemy_max_health=DUMMY_HEALTH
    )
    return Entry(
        "The dummy raises its wand. Shield yourself with PROTEGO, then strike back.",
        Color.WARNING,
    )


def attack(manager: GameStateManager, spell: Spell) -> CommandResult:
    combat = manager.state.combat_state
    damage, _ = strike(spell)
    combat.enemy_health = max(0, combat.enemy_health - damage)

    if combat.enemy_health == 0:
        manager.state.combat_state = None
        manager.challenges.protego_training_complete = True
        manager.award(BONUS)
        return manager.respond(
            f"""{shout(spell)}

Your spell strikes the dummy full on. It topples backward, smoke curling from
its wand arm, and the runes along its base fade to grey.

"ASSESSMENT COMPLETE. CANDIDATE MAY PROCEED."

[COMBAT TRAINING COMPLETED - +{BONUS} points]""",
            Color.MAGIC,
        )

    was_defending = combat.player_defending
    round_ = combat.round
    combat.round += 1
    combat.player_defending = False

    counter = COUNTER_MESSAGES[round_ % len(COUNTER_MESSAGES)]
    if was_defending:
        counter += "\nYour lingering shield absorbs the hex completely."
        color = Color.MAGIC
    else:
        # The dummy is a training tool and never takes a candidate down
        taken = min(COUNTER_DAMAGE, manager.state.health - 1)
        manager.damage(taken)
        counter += f"\nThe hex stings your arm! [-{taken} HP]"
        color = Color.DAMAGE

    return manager.respond(
        f"""{shout(spell)}

The spell strikes the dummy, scorching its robes. [Dummy: {combat.enemy_health}/{combat.enemy_max_health}]

{counter}""",
        color,
    )


def defend(manager: GameStateManager, maxima: bool = False) -> CommandResult:
    combat = manager.state.combat_state
    combat.player_defending = True
    combat.round += 1

    incantation = "Protego Maxima!" if maxima else "Protego!"
    return manager.respond(
        f""""{incantation}"

A shimmering shield springs up before you. The dummy's hex splashes against it
and fizzles out.

"SHIELD ACKNOWLEDGED. NOW RETALIATE."
""".rstrip(),
        Color.MAGIC,
    )
