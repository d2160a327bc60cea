"""
World schema models - Pydantic models for YAML world definitions

Conditions throughout the schema are ``when`` maps: every key names a
ChallengeState field or property (or one of the special keys
``item_available`` / ``carrying``) and the value it must equal.
"""

from pydantic import BaseModel, Field

from auror_exam.models.validation import RejectionCode


Conditions = dict[str, bool | int | str]


class World(BaseModel):
    """Main world definition from world.yaml"""
    name: str
    theme: str = ""
    premise: str = ""
    briefing: str = ""
    name_prompt: str = "What is your name?"
    starting_location: str
    max_health: int = 100
    total_challenges: int = 9
    default_hint: str = ""
    help_text: str = ""


class DescriptionSegment(BaseModel):
    """One paragraph of a location description.

    Segments sharing a group behave like an if/elif chain: only the first
    matching one is shown.
    """
    text: str
    when: Conditions = Field(default_factory=dict)
    group: str | None = None


class ExitLock(BaseModel):
    """A single exit that stays shut while its conditions hold"""
    direction: str
    when: Conditions = Field(default_factory=dict)
    message: str
    code: RejectionCode = RejectionCode.EXIT_LOCKED


class ExitBlock(BaseModel):
    """Blocks every exit of a location while its conditions hold"""
    when: Conditions = Field(default_factory=dict)
    message: str


class Detail(BaseModel):
    """Something that can be examined, matched by keyword"""
    keywords: list[str]
    text: str
    when: Conditions = Field(default_factory=dict)


class RuneText(BaseModel):
    """Text revealed by READ RUNES"""
    text: str
    when: Conditions = Field(default_factory=dict)


class HintRule(BaseModel):
    """Progressive hints for a location; later nudges are more specific"""
    nudges: list[str]
    when: Conditions = Field(default_factory=dict)


class Location(BaseModel):
    """Location/room definition from locations.yaml"""
    name: str
    description: list[DescriptionSegment] = Field(default_factory=list)
    exits: dict[str, str] = Field(default_factory=dict)
    items: list[str] = Field(default_factory=list)
    challenge: str | None = None
    dark: bool = False
    retreat: str | None = None  # Direction still usable without light
    dark_message: str = ""
    locks: list[ExitLock] = Field(default_factory=list)
    blocked_when: ExitBlock | None = None
    details: list[Detail] = Field(default_factory=list)
    runes: list[RuneText] = Field(default_factory=list)
    hints: list[HintRule] = Field(default_factory=list)


class Item(BaseModel):
    """Item definition from items.yaml"""
    name: str
    aliases: list[str] = Field(default_factory=list)
    examine: str = ""
    take_description: str = ""
    heals: int = 0
    use_description: str = ""
    full_health_message: str = ""
    wearable: bool = False


class WorldData(BaseModel):
    """Complete world data loaded from YAML files"""
    world: World
    locations: dict[str, Location]
    items: dict[str, Item] = Field(default_factory=dict)

    def get_location(self, location_id: str) -> Location | None:
        return self.locations.get(location_id)

    def get_item(self, item_id: str) -> Item | None:
        return self.items.get(item_id)

    def find_item(self, text: str) -> str | None:
        """Resolve free text ("the vial") to an item ID by alias."""
        for item_id, item in self.items.items():
            if any(alias in text for alias in item.aliases):
                return item_id
        return None
