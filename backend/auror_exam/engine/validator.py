"""
World Validator - Validates consistency of YAML world definitions

Checks:
- Location references: starting location, exits and item placements are valid
- Gates: lock and retreat directions name real exits of their location
- Conditions: every ``when`` key is a known challenge flag or special key
- Orphan detection: locations that no exit leads to (warnings)
"""

from dataclasses import dataclass, field

from auror_exam.engine.conditions import SPECIAL_KEYS, challenge_keys
from auror_exam.engine.world import WorldLoader
from auror_exam.models.world import Conditions, WorldData


@dataclass
class ValidationResult:
    """Result of world validation"""

    world_id: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """World is valid if there are no errors (warnings are OK)"""
        return len(self.errors) == 0

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)


class WorldValidator:
    """Validates world definition consistency"""

    def __init__(self, world_data: WorldData, world_id: str):
        self.world_data = world_data
        self.world_id = world_id
        self.result = ValidationResult(world_id=world_id)
        self.known_keys = challenge_keys() | SPECIAL_KEYS

    def validate(self) -> ValidationResult:
        """Run all validation checks"""
        self._validate_starting_location()
        self._validate_location_references()
        self._validate_gates()
        self._validate_conditions()
        self._detect_unreachable_locations()

        return self.result

    def _validate_starting_location(self):
        start = self.world_data.world.starting_location
        if start not in self.world_data.locations:
            self.result.add_error(f"Starting location '{start}' does not exist")

    def _validate_location_references(self):
        """Exits must lead to real locations and items must be defined"""
        for loc_id, location in self.world_data.locations.items():
            for direction, dest_id in location.exits.items():
                if dest_id not in self.world_data.locations:
                    self.result.add_error(
                        f"Location '{loc_id}' exit '{direction}' points to "
                        f"nonexistent location '{dest_id}'"
                    )

            for item_id in location.items:
                if item_id not in self.world_data.items:
                    self.result.add_error(
                        f"Location '{loc_id}' places undefined item '{item_id}'"
                    )

    def _validate_gates(self):
        """Locks and retreat directions must refer to exits that exist"""
        for loc_id, location in self.world_data.locations.items():
            for lock in location.locks:
                if lock.direction not in location.exits:
                    self.result.add_error(
                        f"Location '{loc_id}' locks direction '{lock.direction}' "
                        f"which has no exit"
                    )

            if location.retreat and location.retreat not in location.exits:
                self.result.add_error(
                    f"Location '{loc_id}' retreat '{location.retreat}' has no exit"
                )

            if location.dark and not location.retreat:
                self.result.add_warning(
                    f"Dark location '{loc_id}' has no retreat direction"
                )

    def _validate_conditions(self):
        """Every condition key must name something the engine can evaluate"""
        for loc_id, location in self.world_data.locations.items():
            sources: list[tuple[str, Conditions]] = []
            sources += [(f"description[{i}]", s.when) for i, s in enumerate(location.description)]
            sources += [(f"locks[{lock.direction}]", lock.when) for lock in location.locks]
            sources += [(f"details[{i}]", d.when) for i, d in enumerate(location.details)]
            sources += [(f"runes[{i}]", r.when) for i, r in enumerate(location.runes)]
            sources += [(f"hints[{i}]", h.when) for i, h in enumerate(location.hints)]
            if location.blocked_when:
                sources.append(("blocked_when", location.blocked_when.when))

            for where, when in sources:
                for key, value in when.items():
                    if key not in self.known_keys:
                        self.result.add_error(
                            f"Location '{loc_id}' {where} checks unknown condition '{key}'"
                        )
                    elif key in SPECIAL_KEYS and value not in self.world_data.items:
                        self.result.add_error(
                            f"Location '{loc_id}' {where} refers to undefined item '{value}'"
                        )

    def _detect_unreachable_locations(self):
        """Locations no exit leads to are only reachable by relocation"""
        targets = {
            dest
            for location in self.world_data.locations.values()
            for dest in location.exits.values()
        }
        targets.add(self.world_data.world.starting_location)

        for loc_id in self.world_data.locations:
            if loc_id not in targets:
                self.result.add_warning(f"Location '{loc_id}' has no exit leading to it")


def validate_world(world_id: str, worlds_dir: str | None = None) -> ValidationResult:
    """
    Validate a world definition for consistency.

    Args:
        world_id: The world identifier (folder name in worlds/)
        worlds_dir: Optional path to worlds directory

    Returns:
        ValidationResult with errors and warnings
    """
    loader = WorldLoader(worlds_dir)
    world_data = loader.load_world(world_id, validate=False)

    validator = WorldValidator(world_data, world_id)
    return validator.validate()
