"""Examination engine components.

- Parsing: `engine/parser.py` and the spell vocabulary in `engine/spells.py`
- World: YAML loading in `engine/world.py`, checks in `engine/validator.py`
- Rules: movement legality, challenge resolvers and generic handlers
- Turn loop: `engine/processor.py` ties parsing, dispatch and continuous
  effects together

Import directly from submodules to avoid circular imports:
    from auror_exam.engine.processor import GameEngine, process_command
    from auror_exam.engine.state import GameStateManager, create_initial_state
"""

# Note: No eager imports to avoid circular import issues
