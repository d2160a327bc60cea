"""
Command handlers for the examination engine.

Each handler resolves one dispatcher branch: movement, spells, physical
actions (with item interactions shared through ItemHandler) and system
commands.
"""

from auror_exam.engine.handlers.actions import ActionHandler
from auror_exam.engine.handlers.items import ItemHandler
from auror_exam.engine.handlers.movement import MovementHandler
from auror_exam.engine.handlers.spells import SpellHandler
from auror_exam.engine.handlers.system import SystemHandler

__all__ = [
    "ActionHandler",
    "ItemHandler",
    "MovementHandler",
    "SpellHandler",
    "SystemHandler",
]
