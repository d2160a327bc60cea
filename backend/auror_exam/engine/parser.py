"""
Rule-based command parser for the examination engine.

Classifies a line of player input as movement, spell, action, system or
unknown. Parsing is pure: the same text always yields the same command,
and no game state is consulted.
"""

from __future__ import annotations

import logging
import re

from auror_exam.engine.spells import Spell, match_spell
from auror_exam.models.command import (
    ActionVerb,
    CommandType,
    Direction,
    ParsedCommand,
    SystemCommand,
)

logger = logging.getLogger(__name__)


class CommandParser:
    """Parse player input into a ParsedCommand.

    Rules are tried in order:
        1. Empty input is unknown
        2. Directions: north, n, go north, walk n, ...
        3. System words and their synonyms: help, ?, i, inv, l, map, ...
        4. Spells: optional "cast " prefix, "accio <thing>", fuzzy match
        5. Actions: two-word synonyms, then one-word synonyms, then verbs
        6. Anything longer than three characters is a failed incantation

    Example:
        >>> parser = CommandParser()
        >>> parser.parse("go north").verb
        'north'
        >>> parser.parse("cast lumos").type == CommandType.SPELL
        True
        >>> parser.parse("pick up dittany").target
        'dittany'
    """

    # Direction patterns: maps regex pattern to normalized direction
    DIRECTION_PATTERNS: dict[str, Direction] = {
        r"^((go|walk|move|head)\s+)?(north|n)$": Direction.NORTH,
        r"^((go|walk|move|head)\s+)?(south|s)$": Direction.SOUTH,
        r"^((go|walk|move|head)\s+)?(east|e)$": Direction.EAST,
        r"^((go|walk|move|head)\s+)?(west|w)$": Direction.WEST,
        r"^((go|walk|move|head)\s+)?(up|u)$": Direction.UP,
        r"^((go|walk|move|head)\s+)?(down|d)$": Direction.DOWN,
        r"^((go|walk|move)\s+)?(enter|in)$": Direction.ENTER,
        r"^((go|walk|move)\s+)?(exit|out)$": Direction.EXIT,
    }

    SYSTEM_SYNONYMS: dict[str, SystemCommand] = {
        "i": SystemCommand.INVENTORY,
        "inv": SystemCommand.INVENTORY,
        "items": SystemCommand.INVENTORY,
        "l": SystemCommand.LOOK,
        "look around": SystemCommand.LOOK,
        "h": SystemCommand.HELP,
        "?": SystemCommand.HELP,
        "hints": SystemCommand.HINT,
        "clue": SystemCommand.HINT,
        "map": SystemCommand.JOURNEY,
    }

    # Checked before the one-word synonyms so "look at" beats "look"
    TWO_WORD_SYNONYMS: dict[str, ActionVerb] = {
        "look at": ActionVerb.EXAMINE,
        "look into": ActionVerb.TOUCH,
        "pick up": ActionVerb.TAKE,
        "turn away": ActionVerb.LEAVE,
    }

    ACTION_SYNONYMS: dict[str, ActionVerb] = {
        "look": ActionVerb.EXAMINE,
        "inspect": ActionVerb.EXAMINE,
        "check": ActionVerb.EXAMINE,
        "study": ActionVerb.EXAMINE,
        "x": ActionVerb.EXAMINE,
        "get": ActionVerb.TAKE,
        "grab": ActionVerb.TAKE,
        "pickup": ActionVerb.TAKE,
        "drink": ActionVerb.USE,
        "apply": ActionVerb.USE,
        "consume": ActionVerb.USE,
        "turn": ActionVerb.LEAVE,
        "gaze": ActionVerb.SEE,
        "stare": ActionVerb.SEE,
        "peer": ActionVerb.SEE,
        "reach": ActionVerb.TOUCH,
    }

    def parse(self, raw_input: str) -> ParsedCommand:
        """Classify raw player input.

        Args:
            raw_input: Exactly what the player typed

        Returns:
            ParsedCommand; never raises
        """
        normalized = " ".join(raw_input.lower().split())

        if not normalized:
            return ParsedCommand(type=CommandType.UNKNOWN, verb="", raw_input=raw_input)

        command = (
            self._parse_direction(normalized, raw_input)
            or self._parse_system(normalized, raw_input)
            or self._parse_spell(normalized, raw_input)
            or self._parse_action(normalized, raw_input)
        )
        if command is None:
            if len(normalized) > 3:
                command = ParsedCommand(
                    type=CommandType.SPELL,
                    verb=Spell.UNKNOWN.value,
                    target=normalized,
                    raw_input=raw_input,
                )
            else:
                command = ParsedCommand(
                    type=CommandType.UNKNOWN, verb=normalized, raw_input=raw_input
                )

        logger.debug(f"Parsed {raw_input!r} as {command.type.value}:{command.verb}")
        return command

    def _parse_direction(self, normalized: str, raw_input: str) -> ParsedCommand | None:
        for pattern, direction in self.DIRECTION_PATTERNS.items():
            if re.match(pattern, normalized):
                return ParsedCommand(
                    type=CommandType.MOVEMENT, verb=direction.value, raw_input=raw_input
                )
        return None

    def _parse_system(self, normalized: str, raw_input: str) -> ParsedCommand | None:
        system = self.SYSTEM_SYNONYMS.get(normalized)
        if system is None:
            try:
                system = SystemCommand(normalized)
            except ValueError:
                return None
        return ParsedCommand(type=CommandType.SYSTEM, verb=system.value, raw_input=raw_input)

    def _parse_spell(self, normalized: str, raw_input: str) -> ParsedCommand | None:
        attempt = normalized[len("cast "):] if normalized.startswith("cast ") else normalized

        if attempt.startswith("accio "):
            return ParsedCommand(
                type=CommandType.SPELL,
                verb=Spell.ACCIO.value,
                target=attempt[len("accio "):].strip(),
                raw_input=raw_input,
            )

        match = match_spell(attempt)
        if match is None:
            return None
        return ParsedCommand(
            type=CommandType.SPELL, verb=match.spell.value, raw_input=raw_input
        )

    def _parse_action(self, normalized: str, raw_input: str) -> ParsedCommand | None:
        words = normalized.split(" ")

        if len(words) >= 2:
            verb = self.TWO_WORD_SYNONYMS.get(" ".join(words[:2]))
            if verb is not None:
                target = " ".join(words[2:]) or None
                return ParsedCommand(
                    type=CommandType.ACTION, verb=verb.value, target=target, raw_input=raw_input
                )

        first, rest = words[0], " ".join(words[1:]) or None
        verb = self.ACTION_SYNONYMS.get(first)
        if verb is None:
            try:
                verb = ActionVerb(first)
            except ValueError:
                return None
        return ParsedCommand(
            type=CommandType.ACTION, verb=verb.value, target=rest, raw_input=raw_input
        )


_parser = CommandParser()


def parse_command(raw_input: str) -> ParsedCommand:
    """Parse input with the shared parser instance."""
    return _parser.parse(raw_input)
