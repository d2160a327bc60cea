"""
Validators for the examination engine.

Validators decide whether an action is legal without changing state.
"""

from auror_exam.engine.validators.movement import MovementValidator

__all__ = ["MovementValidator"]
