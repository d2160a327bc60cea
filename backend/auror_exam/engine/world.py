"""
World loader - Load and validate YAML world files
"""

import logging
from pathlib import Path

import yaml

from auror_exam import config
from auror_exam.models.world import (
    DescriptionSegment,
    Detail,
    ExitBlock,
    ExitLock,
    HintRule,
    Item,
    Location,
    RuneText,
    World,
    WorldData,
)

logger = logging.getLogger(__name__)


class WorldLoader:
    """Loads examination worlds from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        if worlds_dir is None:
            worlds_dir = config.get_worlds_dir()
        self.worlds_dir = Path(worlds_dir)

    def list_worlds(self) -> list[dict]:
        """List available worlds with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if not world_yaml.exists():
                continue
            try:
                with open(world_yaml) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning(f"Skipping world '{world_path.name}': {e}")
                continue
            worlds.append({
                "id": world_path.name,
                "name": data.get("name", world_path.name),
                "theme": data.get("theme", ""),
            })

        return worlds

    def load_world(self, world_id: str, validate: bool = True) -> WorldData:
        """
        Load a complete world from YAML files.

        Args:
            world_id: The world identifier (folder name in worlds/)
            validate: Whether to validate the world on load (default True)

        Returns:
            WorldData with all world content

        Raises:
            FileNotFoundError: If world doesn't exist
            ValueError: If validation fails and validate=True
        """
        world_path = self.worlds_dir / world_id

        if not world_path.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_path}")

        world = self._load_world_yaml(world_path / "world.yaml")
        locations = self._load_locations_yaml(world_path / "locations.yaml")
        items = self._load_items_yaml(world_path / "items.yaml")

        world_data = WorldData(world=world, locations=locations, items=items)

        if validate:
            from auror_exam.engine.validator import WorldValidator

            validator = WorldValidator(world_data, world_id)
            result = validator.validate()

            for warning in result.warnings:
                logger.warning(f"World '{world_id}': {warning}")

            if not result.is_valid:
                error_list = "\n  - ".join(result.errors)
                raise ValueError(
                    f"World '{world_id}' validation failed with {len(result.errors)} error(s):\n  - {error_list}"
                )

        logger.info(f"Loaded world '{world_id}' with {len(locations)} locations")
        return world_data

    def _load_world_yaml(self, path: Path) -> World:
        """Load world.yaml"""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return World(
            name=data.get("name", "Unnamed World"),
            theme=data.get("theme", ""),
            premise=data.get("premise", ""),
            briefing=data.get("briefing", ""),
            name_prompt=data.get("name_prompt", "What is your name?"),
            starting_location=data.get("starting_location", "start"),
            max_health=data.get("max_health", 100),
            total_challenges=data.get("total_challenges", 9),
            default_hint=data.get("default_hint", ""),
            help_text=data.get("help_text", ""),
        )

    def _load_locations_yaml(self, path: Path) -> dict[str, Location]:
        """Load locations.yaml"""
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        locations = {}
        for loc_id, loc_data in data.items():
            description = [
                DescriptionSegment(**segment)
                for segment in loc_data.get("description", [])
            ]
            locks = [ExitLock(**lock) for lock in loc_data.get("locks", [])]

            blocked_when = None
            block_data = loc_data.get("blocked_when")
            if block_data and isinstance(block_data, dict):
                blocked_when = ExitBlock(
                    when=block_data.get("when", {}),
                    message=block_data.get("message", ""),
                )

            locations[loc_id] = Location(
                name=loc_data.get("name", loc_id),
                description=description,
                exits=loc_data.get("exits", {}),
                items=loc_data.get("items", []),
                challenge=loc_data.get("challenge"),
                dark=loc_data.get("dark", False),
                retreat=loc_data.get("retreat"),
                dark_message=loc_data.get("dark_message", ""),
                locks=locks,
                blocked_when=blocked_when,
                details=[Detail(**detail) for detail in loc_data.get("details", [])],
                runes=[RuneText(**rune) for rune in loc_data.get("runes", [])],
                hints=[HintRule(**hint) for hint in loc_data.get("hints", [])],
            )

        return locations

    def _load_items_yaml(self, path: Path) -> dict[str, Item]:
        """Load items.yaml"""
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        items = {}
        for item_id, item_data in data.items():
            items[item_id] = Item(
                name=item_data.get("name", item_id),
                aliases=item_data.get("aliases", [item_id]),
                examine=item_data.get("examine", ""),
                take_description=item_data.get("take_description", ""),
                heals=item_data.get("heals", 0),
                use_description=item_data.get("use_description", ""),
                full_health_message=item_data.get("full_health_message", ""),
                wearable=item_data.get("wearable", False),
            )

        return items


# Loaded worlds, keyed by (worlds_dir, world_id)
_world_cache: dict[tuple[str, str], WorldData] = {}


def get_world(world_id: str | None = None) -> WorldData:
    """Load a world once per process and reuse it.

    World data is never mutated by the engine, so every session can share
    the same instance.
    """
    world_id = world_id or config.get_world_id()
    worlds_dir = config.get_worlds_dir()
    key = (str(worlds_dir), world_id)
    if key not in _world_cache:
        _world_cache[key] = WorldLoader(worlds_dir).load_world(world_id)
    return _world_cache[key]
