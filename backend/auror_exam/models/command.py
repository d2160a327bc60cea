"""
Command models for the examination engine.

This module defines the structured representation of player input after
parsing but before dispatch.

Key concepts:
    - ParsedCommand: The classified command handed to the dispatcher
    - CommandType: Which dispatcher branch handles the command
    - Direction / SystemCommand / ActionVerb: Closed vocabularies

Spell incantations have their own closed vocabulary in
auror_exam.engine.spells.

Example:
    >>> command = ParsedCommand(
    ...     type=CommandType.ACTION,
    ...     verb=ActionVerb.TAKE,
    ...     target="dittany",
    ...     raw_input="pick up dittany",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CommandType(str, Enum):
    """Dispatcher branch for a parsed command."""

    MOVEMENT = "movement"
    SPELL = "spell"
    ACTION = "action"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class Direction(str, Enum):
    """Canonical movement directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    EXIT = "exit"


class SystemCommand(str, Enum):
    """Meta commands that do not act on the world."""

    HELP = "help"
    HINT = "hint"
    INVENTORY = "inventory"
    LOOK = "look"
    SCORE = "score"
    QUIT = "quit"
    RESTART = "restart"
    JOURNEY = "journey"


class ActionVerb(str, Enum):
    """Physical actions the candidate can attempt.

    Object Interaction: EXAMINE, TAKE, USE, DROP, READ, OPEN, CLOSE
    Creatures: ATTACK, BOW, RIDE
    Body: CRAWL, WEAR, REMOVE, TOUCH, SEE, LEAVE, CLAIM
    """

    EXAMINE = "examine"
    TAKE = "take"
    USE = "use"
    DROP = "drop"
    READ = "read"
    OPEN = "open"
    CLOSE = "close"
    ATTACK = "attack"
    BOW = "bow"
    RIDE = "ride"
    LEAVE = "leave"
    CRAWL = "crawl"
    CLAIM = "claim"
    WEAR = "wear"
    REMOVE = "remove"
    TOUCH = "touch"
    SEE = "see"


class ParsedCommand(BaseModel):
    """Classified player input.

    Attributes:
        type: Dispatcher branch
        verb: Canonical verb. A Direction, SystemCommand, ActionVerb or Spell
            value for recognised input, the normalised text for unknown input
        target: Optional object of the verb ("dittany" in "take dittany")
        raw_input: Exactly what the player typed
    """

    type: CommandType
    verb: str
    target: str | None = None
    raw_input: str = ""
