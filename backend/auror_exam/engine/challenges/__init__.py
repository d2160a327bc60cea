"""
Challenge resolvers.

One module per mini-challenge of the examination. Each resolver takes the
turn's GameStateManager, mutates only its own challenge flags plus the
shared score, health, inventory, location and completion sets, and returns
a CommandResult.

Modules that react to the candidate walking in expose ``on_enter`` returning
an Entry (extra narration appended after the room description).
"""

from typing import NamedTuple

from auror_exam.engine.spells import Spell
from auror_exam.models.game import Color


class Entry(NamedTuple):
    """Narration added when the candidate enters a location."""

    message: str
    color: Color | None = None


def shout(spell: Spell | str) -> str:
    """Quoted incantation as the candidate calls it out: "Stupefy!" """
    name = spell.value if isinstance(spell, Spell) else spell
    return f'"{name.capitalize()}!"'
