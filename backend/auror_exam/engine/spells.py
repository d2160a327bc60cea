"""
Spell vocabulary and fuzzy incantation matching.

Every incantation the examination recognises is a member of Spell. Matching
tolerates small typos: an exact incantation wins outright, otherwise the
entry with the smallest edit distance within its tolerance is chosen.

Example:
    >>> match_spell("lumos maximaa")
    SpellMatch(spell=<Spell.LUMOS_MAXIMA: 'lumos maxima'>, exact=False)
    >>> is_unforgivable("crucio")
    True
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class SpellCategory(str, Enum):
    """Broad school of magic a spell belongs to."""

    LIGHT = "light"
    DEFENSE = "defense"
    OFFENSE = "offense"
    UTILITY = "utility"
    STEALTH = "stealth"
    HEALING = "healing"
    UNFORGIVABLE = "unforgivable"


class Spell(str, Enum):
    """Known incantations, in matching priority order."""

    # Light
    LUMOS = "lumos"
    LUMOS_MAXIMA = "lumos maxima"
    NOX = "nox"

    # Defense
    PROTEGO = "protego"
    PROTEGO_MAXIMA = "protego maxima"
    EXPECTO_PATRONUM = "expecto patronum"
    SALVIO_HEXIA = "salvio hexia"

    # Offense
    STUPEFY = "stupefy"
    EXPELLIARMUS = "expelliarmus"
    PETRIFICUS_TOTALUS = "petrificus totalus"
    IMPEDIMENTA = "impedimenta"
    REDUCTO = "reducto"
    INCENDIO = "incendio"
    CONFRINGO = "confringo"
    BOMBARDA = "bombarda"
    DIFFINDO = "diffindo"
    FLIPENDO = "flipendo"
    DEPULSO = "depulso"
    RICTUSEMPRA = "rictusempra"
    INCARCEROUS = "incarcerous"
    LEVICORPUS = "levicorpus"
    LOCOMOTOR_MORTIS = "locomotor mortis"
    TARANTALLEGRA = "tarantallegra"
    DENSAUGEO = "densaugeo"
    FURNUNCULUS = "furnunculus"
    SECTUMSEMPRA = "sectumsempra"

    # Utility
    WINGARDIUM_LEVIOSA = "wingardium leviosa"
    ACCIO = "accio"
    ALOHOMORA = "alohomora"
    REPARO = "reparo"
    REVELIO = "revelio"
    HOMENUM_REVELIO = "homenum revelio"
    FINITE_INCANTATEM = "finite incantatem"
    AGUAMENTI = "aguamenti"
    SONORUS = "sonorus"
    QUIETUS = "quietus"
    POINT_ME = "point me"
    PACK = "pack"
    REDUCIO = "reducio"
    ENGORGIO = "engorgio"
    CONFUNDO = "confundo"
    OBLIVIATE = "obliviate"

    # Stealth
    MUFFLIATO = "muffliato"

    # Healing
    EPISKEY = "episkey"
    VULNERA_SANENTUR = "vulnera sanentur"
    TERGEO = "tergeo"

    # Unforgivable
    AVADA_KEDAVRA = "avada kedavra"
    CRUCIO = "crucio"
    IMPERIO = "imperio"

    # Recognised as an attempted incantation, but not a real one
    UNKNOWN = "unknown_spell"


SPELL_CATEGORIES: dict[Spell, SpellCategory] = {
    Spell.LUMOS: SpellCategory.LIGHT,
    Spell.LUMOS_MAXIMA: SpellCategory.LIGHT,
    Spell.NOX: SpellCategory.LIGHT,
    Spell.PROTEGO: SpellCategory.DEFENSE,
    Spell.PROTEGO_MAXIMA: SpellCategory.DEFENSE,
    Spell.EXPECTO_PATRONUM: SpellCategory.DEFENSE,
    Spell.SALVIO_HEXIA: SpellCategory.DEFENSE,
    Spell.STUPEFY: SpellCategory.OFFENSE,
    Spell.EXPELLIARMUS: SpellCategory.OFFENSE,
    Spell.PETRIFICUS_TOTALUS: SpellCategory.OFFENSE,
    Spell.IMPEDIMENTA: SpellCategory.OFFENSE,
    Spell.REDUCTO: SpellCategory.OFFENSE,
    Spell.INCENDIO: SpellCategory.OFFENSE,
    Spell.CONFRINGO: SpellCategory.OFFENSE,
    Spell.BOMBARDA: SpellCategory.OFFENSE,
    Spell.DIFFINDO: SpellCategory.OFFENSE,
    Spell.FLIPENDO: SpellCategory.OFFENSE,
    Spell.DEPULSO: SpellCategory.OFFENSE,
    Spell.RICTUSEMPRA: SpellCategory.OFFENSE,
    Spell.INCARCEROUS: SpellCategory.OFFENSE,
    Spell.LEVICORPUS: SpellCategory.OFFENSE,
    Spell.LOCOMOTOR_MORTIS: SpellCategory.OFFENSE,
    Spell.TARANTALLEGRA: SpellCategory.OFFENSE,
    Spell.DENSAUGEO: SpellCategory.OFFENSE,
    Spell.FURNUNCULUS: SpellCategory.OFFENSE,
    Spell.SECTUMSEMPRA: SpellCategory.OFFENSE,
    Spell.WINGARDIUM_LEVIOSA: SpellCategory.UTILITY,
    Spell.ACCIO: SpellCategory.UTILITY,
    Spell.ALOHOMORA: SpellCategory.UTILITY,
    Spell.REPARO: SpellCategory.UTILITY,
    Spell.REVELIO: SpellCategory.UTILITY,
    Spell.HOMENUM_REVELIO: SpellCategory.UTILITY,
    Spell.FINITE_INCANTATEM: SpellCategory.UTILITY,
    Spell.AGUAMENTI: SpellCategory.UTILITY,
    Spell.SONORUS: SpellCategory.UTILITY,
    Spell.QUIETUS: SpellCategory.UTILITY,
    Spell.POINT_ME: SpellCategory.UTILITY,
    Spell.PACK: SpellCategory.UTILITY,
    Spell.REDUCIO: SpellCategory.UTILITY,
    Spell.ENGORGIO: SpellCategory.UTILITY,
    Spell.CONFUNDO: SpellCategory.UTILITY,
    Spell.OBLIVIATE: SpellCategory.UTILITY,
    Spell.MUFFLIATO: SpellCategory.STEALTH,
    Spell.EPISKEY: SpellCategory.HEALING,
    Spell.VULNERA_SANENTUR: SpellCategory.HEALING,
    Spell.TERGEO: SpellCategory.HEALING,
    Spell.AVADA_KEDAVRA: SpellCategory.UNFORGIVABLE,
    Spell.CRUCIO: SpellCategory.UNFORGIVABLE,
    Spell.IMPERIO: SpellCategory.UNFORGIVABLE,
}

# Incantations eligible for matching, in declaration order
INCANTATIONS: tuple[Spell, ...] = tuple(s for s in Spell if s is not Spell.UNKNOWN)

# Spells that count as taking part in a duel
COMBAT_SPELLS = frozenset(
    {
        Spell.STUPEFY,
        Spell.EXPELLIARMUS,
        Spell.PETRIFICUS_TOTALUS,
        Spell.IMPEDIMENTA,
        Spell.REDUCTO,
        Spell.CONFRINGO,
        Spell.INCENDIO,
        Spell.FLIPENDO,
        Spell.DEPULSO,
        Spell.PROTEGO,
        Spell.PROTEGO_MAXIMA,
    }
)

ATTACK_SPELLS = frozenset(
    {
        Spell.STUPEFY,
        Spell.EXPELLIARMUS,
        Spell.IMPEDIMENTA,
        Spell.PETRIFICUS_TOTALUS,
        Spell.REDUCTO,
        Spell.FLIPENDO,
        Spell.DEPULSO,
    }
)

FIRE_SPELLS = frozenset({Spell.INCENDIO, Spell.CONFRINGO})


class SpellMatch(NamedTuple):
    """A recognised incantation and whether it was typed exactly."""

    spell: Spell
    exact: bool


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def max_distance(incantation: str) -> int:
    """Typo tolerance: long incantations forgive two edits, short ones one."""
    return 2 if len(incantation) > 8 else 1


def match_spell(text: str) -> SpellMatch | None:
    """Match free text against the known incantations.

    Ties on distance resolve to the first incantation in declaration order.

    Args:
        text: Candidate incantation, any case or surrounding whitespace

    Returns:
        SpellMatch, or None if nothing is close enough
    """
    normalized = text.lower().strip()
    if not normalized:
        return None

    try:
        spell = Spell(normalized)
    except ValueError:
        spell = None
    if spell is not None and spell is not Spell.UNKNOWN:
        return SpellMatch(spell, True)

    best: Spell | None = None
    best_distance = 0
    for candidate in INCANTATIONS:
        distance = levenshtein(normalized, candidate.value)
        if distance > max_distance(candidate.value):
            continue
        if best is None or distance < best_distance:
            best, best_distance = candidate, distance

    if best is None:
        return None
    return SpellMatch(best, False)


def get_spell_category(spell: str) -> SpellCategory | None:
    try:
        return SPELL_CATEGORIES.get(Spell(spell))
    except ValueError:
        return None


def is_unforgivable(text: str) -> bool:
    """True when text is, or fuzzily matches, an Unforgivable Curse."""
    match = match_spell(text)
    return (
        match is not None
        and SPELL_CATEGORIES[match.spell] is SpellCategory.UNFORGIVABLE
    )
