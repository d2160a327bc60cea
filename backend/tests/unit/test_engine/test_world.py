"""Unit tests for world loading and validation.

Tests cover:
- WorldLoader: listing worlds, parsing YAML, missing and invalid worlds
- get_world: one load per process
- WorldValidator: reference, gate and condition errors; orphan warnings
- The bundled auror-exam world passing validation
"""

from pathlib import Path

import pytest
import yaml

from auror_exam.engine.validator import WorldValidator, validate_world
from auror_exam.engine.world import WorldLoader, get_world
from auror_exam.models.validation import RejectionCode
from auror_exam.models.world import ExitLock, Location


def write_world(root: Path, world_id: str, locations: dict, items: dict | None = None) -> Path:
    """Write a minimal world folder under root."""
    world_dir = root / world_id
    world_dir.mkdir()
    (world_dir / "world.yaml").write_text(
        yaml.safe_dump({"name": "Tiny Maze", "theme": "test", "starting_location": "hall"})
    )
    (world_dir / "locations.yaml").write_text(yaml.safe_dump(locations))
    if items is not None:
        (world_dir / "items.yaml").write_text(yaml.safe_dump(items))
    return world_dir


TINY_LOCATIONS = {
    "hall": {
        "name": "Hall",
        "exits": {"north": "cellar"},
        "items": ["herb"],
        "description": [{"text": "A hall."}],
        "locks": [{"direction": "north", "when": {"door_unlocked": False}, "message": "Locked."}],
        "hints": [{"nudges": ["Try the door."]}],
    },
    "cellar": {"name": "Cellar", "exits": {"south": "hall"}, "dark": True, "retreat": "south"},
}
TINY_ITEMS = {"herb": {"name": "Herb", "aliases": ["herb"], "heals": 5}}


class TestWorldLoader:
    """Tests for WorldLoader."""

    def test_list_worlds(self, tmp_path) -> None:
        write_world(tmp_path, "tiny", TINY_LOCATIONS, TINY_ITEMS)
        (tmp_path / "not-a-world").mkdir()

        worlds = WorldLoader(tmp_path).list_worlds()

        assert worlds == [{"id": "tiny", "name": "Tiny Maze", "theme": "test"}]

    def test_list_worlds_missing_dir(self, tmp_path) -> None:
        assert WorldLoader(tmp_path / "missing").list_worlds() == []

    def test_load_world(self, tmp_path) -> None:
        write_world(tmp_path, "tiny", TINY_LOCATIONS, TINY_ITEMS)

        world = WorldLoader(tmp_path).load_world("tiny")

        assert world.world.name == "Tiny Maze"
        assert world.world.max_health == 100
        hall = world.get_location("hall")
        assert hall.locks[0].code == RejectionCode.EXIT_LOCKED
        assert hall.hints[0].nudges == ["Try the door."]
        assert world.get_location("cellar").retreat == "south"
        assert world.get_item("herb").heals == 5

    def test_items_are_optional(self, tmp_path) -> None:
        locations = {"hall": {"name": "Hall"}}
        write_world(tmp_path, "bare", locations)

        world = WorldLoader(tmp_path).load_world("bare")

        assert world.items == {}

    def test_missing_world(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            WorldLoader(tmp_path).load_world("nowhere")

    def test_invalid_world_raises(self, tmp_path) -> None:
        locations = {"hall": {"name": "Hall", "exits": {"east": "void"}}}
        write_world(tmp_path, "broken", locations)

        with pytest.raises(ValueError, match="validation failed with 1 error"):
            WorldLoader(tmp_path).load_world("broken")

    def test_validation_can_be_skipped(self, tmp_path) -> None:
        locations = {"hall": {"name": "Hall", "exits": {"east": "void"}}}
        write_world(tmp_path, "broken", locations)

        world = WorldLoader(tmp_path).load_world("broken", validate=False)

        assert world.get_location("hall").exits == {"east": "void"}

    def test_validate_world_helper(self, tmp_path) -> None:
        write_world(tmp_path, "tiny", TINY_LOCATIONS, TINY_ITEMS)

        assert validate_world("tiny", str(tmp_path)).is_valid

    def test_get_world_is_cached(self) -> None:
        assert get_world("auror-exam") is get_world("auror-exam")


class TestWorldValidator:
    """Tests for WorldValidator."""

    def test_sample_world_is_valid(self, sample_world_data) -> None:
        result = WorldValidator(sample_world_data, "sample").validate()

        assert result.is_valid
        assert result.warnings == []

    def test_bundled_world_is_valid(self, world) -> None:
        result = WorldValidator(world, "auror-exam").validate()

        assert result.errors == []

    def test_missing_starting_location(self, sample_world_data) -> None:
        sample_world_data.world.starting_location = "limbo"

        result = WorldValidator(sample_world_data, "sample").validate()

        assert "Starting location 'limbo' does not exist" in result.errors

    def test_exit_to_nowhere(self, sample_world_data) -> None:
        sample_world_data.locations["vault"].exits["down"] = "crypt"

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("nonexistent location 'crypt'" in error for error in result.errors)

    def test_undefined_item(self, sample_world_data) -> None:
        sample_world_data.locations["vault"].items.append("gold")

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("undefined item 'gold'" in error for error in result.errors)

    def test_lock_without_exit(self, sample_world_data) -> None:
        sample_world_data.locations["vault"].locks.append(
            ExitLock(direction="west", message="Shut.")
        )

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("locks direction 'west'" in error for error in result.errors)

    def test_retreat_without_exit(self, sample_world_data) -> None:
        sample_world_data.locations["cellar"].retreat = "up"

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("retreat 'up' has no exit" in error for error in result.errors)

    def test_unknown_condition_key(self, sample_world_data) -> None:
        sample_world_data.locations["start_room"].locks[0].when = {"door_open": False}

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("unknown condition 'door_open'" in error for error in result.errors)

    def test_special_key_needs_known_item(self, sample_world_data) -> None:
        sample_world_data.locations["start_room"].description[0].when = {
            "item_available": "crown"
        }

        result = WorldValidator(sample_world_data, "sample").validate()

        assert any("undefined item 'crown'" in error for error in result.errors)

    def test_dark_room_without_retreat_warns(self, sample_world_data) -> None:
        sample_world_data.locations["cellar"].retreat = None

        result = WorldValidator(sample_world_data, "sample").validate()

        assert result.is_valid
        assert "Dark location 'cellar' has no retreat direction" in result.warnings

    def test_orphan_location_warns(self, sample_world_data) -> None:
        sample_world_data.locations["attic"] = Location(name="Attic")

        result = WorldValidator(sample_world_data, "sample").validate()

        assert result.is_valid
        assert "Location 'attic' has no exit leading to it" in result.warnings
