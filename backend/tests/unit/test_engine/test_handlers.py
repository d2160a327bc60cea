"""Unit tests for the command handlers.

Tests cover:
- MovementHandler: moves, stumbling in the dark, entry effects, the
  Hippogriff block and leaving the training hall
- SpellHandler: routing, healing, detection and refusals
- ActionHandler: routing and generic fallbacks
"""

import pytest

from auror_exam.engine.handlers import ActionHandler, ItemHandler, MovementHandler, SpellHandler
from auror_exam.engine.handlers.movement import FALL_DEATH_MESSAGE
from auror_exam.engine.handlers.spells import SECTUMSEMPRA_MESSAGE
from auror_exam.engine.parser import parse_command
from auror_exam.models.game import Color, GamePhase


class TestMovementHandler:
    """Tests for MovementHandler."""

    @pytest.fixture
    def handler(self) -> MovementHandler:
        return MovementHandler()

    def test_move_describes_destination(self, handler, make_manager) -> None:
        result = handler.handle("east", make_manager())

        assert result.state.location == "preparation_room"
        assert result.message.startswith("A small chamber lined with shelves.")
        assert result.color == Color.NORMAL
        assert "preparation_room" in result.state.visited_locations

    def test_refusal_keeps_location(self, handler, make_manager) -> None:
        result = handler.handle("north", make_manager())

        assert result.state.location == "entrance_hall"
        assert result.message == "The heavy iron door is locked. You'll need to unlock it somehow."
        assert result.state.health == 100

    def test_no_exit(self, handler, make_manager) -> None:
        assert handler.handle("up", make_manager()).message == "You can't go that way."

    def test_stumbling_in_the_dark(self, handler, make_manager) -> None:
        result = handler.handle("north", make_manager("dark_corridor"))

        assert result.state.health == 95
        assert result.color == Color.DAMAGE
        assert result.message.endswith("You stumble and hit your head on the wall. [-5 HP]")

    def test_fatal_fall(self, handler, make_manager) -> None:
        result = handler.handle("north", make_manager("dark_corridor", health=5))

        assert result.state.game_phase == GamePhase.DEATH
        assert result.message == FALL_DEATH_MESSAGE

    def test_retreat_from_the_dark(self, handler, make_manager) -> None:
        result = handler.handle("south", make_manager("dark_corridor"))

        assert result.state.location == "entrance_hall"
        assert result.state.health == 100

    def test_entry_effect_appended(self, handler, make_manager) -> None:
        result = handler.handle("east", make_manager("chasm_other_side"))

        assert result.state.location == "dementor_chamber"
        assert result.state.health == 90
        assert result.color == Color.DAMAGE
        assert result.state.challenge_state.dementor_engaged is True

    def test_hippogriff_block(self, handler, make_manager) -> None:
        result = handler.handle("north", make_manager("creature_enclosure"))

        assert result.state.location == "creature_enclosure"
        assert result.state.health == 75

    def test_training_hall_entry_and_exit(self, handler, make_manager) -> None:
        manager = make_manager(
            "chasm_other_side",
            dementor_defeated=True,
            inferi_cleared=True,
            hippogriff_trusts=True,
        )

        entered = handler.handle("north", manager)
        assert entered.state.combat_state is not None
        assert entered.color == Color.WARNING

        left = handler.handle("south", manager)
        assert left.state.combat_state is None


class TestSpellHandler:
    """Tests for SpellHandler."""

    @pytest.fixture
    def handler(self) -> SpellHandler:
        return SpellHandler(ItemHandler())

    def cast(self, handler, manager, text):
        return handler.handle(parse_command(text), manager)

    def test_routes_to_challenge(self, handler, make_manager) -> None:
        manager = make_manager()

        result = self.cast(handler, manager, "alohomora")

        assert manager.challenges.door_unlocked is True
        assert result.color == Color.MAGIC

    def test_episkey_heals(self, handler, make_manager) -> None:
        manager = make_manager(health=50)

        result = self.cast(handler, manager, "episkey")

        assert result.state.health == 65
        assert result.state.episkey_casts == 1
        assert result.color == Color.HEALING
        assert "[+15 HP -> 65/100]" in result.message

    def test_episkey_third_cast_is_last(self, handler, make_manager) -> None:
        manager = make_manager(health=10)
        manager.state.episkey_casts = 2

        result = self.cast(handler, manager, "episkey")

        assert "That was the last time you can cast this." in result.message

    def test_episkey_depleted(self, handler, make_manager) -> None:
        manager = make_manager(health=10)
        manager.state.episkey_casts = 3

        result = self.cast(handler, manager, "episkey")

        assert result.state.health == 10
        assert "magical reserves are depleted" in result.message

    def test_episkey_at_full_health(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "episkey")

        assert result.message == "You're not injured. There's nothing to heal."
        assert result.state.episkey_casts == 0

    def test_protego_with_nothing_to_block(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "protego")

        assert result.message.endswith("There's no attack to block.")

    def test_protego_routes_to_duel(self, handler, make_manager) -> None:
        manager = make_manager("death_eater_chamber")

        self.cast(handler, manager, "protego")

        assert manager.challenges.duel_defending is True

    def test_fire_with_nothing_to_burn(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "incendio")

        assert "nothing here that needs burning" in result.message

    def test_fire_routes_to_inferi(self, handler, make_manager) -> None:
        manager = make_manager("inferi_lake", inferi_engaged=True)

        self.cast(handler, manager, "confringo")

        assert manager.challenges.inferi_cleared is True

    def test_attack_without_target(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "stupefy")

        assert result.message == (
            '"Stupefy!"\n\nThe spell fires into the air, but there\'s no target here.'
        )

    def test_attack_routes_to_guards(self, handler, make_manager) -> None:
        manager = make_manager("guard_corridor", guards_alerted=True)

        self.cast(handler, manager, "petrificus totalus")

        assert manager.challenges.stealth_passed is True
        assert manager.state.score == 5

    def test_homenum_revelio_on_guards(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager("guard_corridor"), "homenum revelio")

        assert "two guards patrol ahead" in result.message

    def test_revelio_in_shadow_passage(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager("shadow_passage"), "revelio")

        assert "faint magical signature further east" in result.message

    def test_revelio_finds_nothing(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "revelio")

        assert "finds nothing hidden" in result.message

    def test_sectumsempra_refused(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "sectumsempra")

        assert result.message == SECTUMSEMPRA_MESSAGE
        assert result.color == Color.WARNING

    def test_accio_without_target(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "accio")

        assert "doesn't seem to have any effect here" in result.message

    def test_spell_without_resolver(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "obliviate")

        assert result.message == (
            "You cast the spell, but it doesn't seem to have any effect here."
        )

    def test_failed_incantation(self, handler, make_manager) -> None:
        result = self.cast(handler, make_manager(), "abracadabra")

        assert result.message == "Nothing happens. That doesn't seem to be a proper incantation."


class TestActionHandler:
    """Tests for ActionHandler."""

    @pytest.fixture
    def handler(self) -> ActionHandler:
        return ActionHandler(ItemHandler())

    def act(self, handler, manager, text):
        return handler.handle(parse_command(text), manager)

    def test_routes_to_items(self, handler, make_manager) -> None:
        result = self.act(handler, make_manager("preparation_room"), "pick up the vial")

        assert result.state.inventory == ["dittany"]

    def test_attack_hippogriff(self, handler, make_manager) -> None:
        result = self.act(handler, make_manager("creature_enclosure"), "attack creature")

        assert result.state.health == 60

    def test_attack_nothing(self, handler, make_manager) -> None:
        assert self.act(handler, make_manager(), "attack").message == (
            "There's nothing here to attack."
        )

    def test_look_into_mirror(self, handler, make_manager) -> None:
        result = self.act(handler, make_manager("final_chamber"), "look into")

        assert result.state.game_phase == GamePhase.DEATH

    def test_claim(self, handler, make_manager) -> None:
        assert self.act(handler, make_manager(), "claim prize").message == (
            "There's nothing to claim here."
        )

    @pytest.mark.parametrize(
        "text, message",
        [
            ("drop", "Drop what?"),
            ("open door", "You can't open the door."),
            ("close book", "You can't close the book."),
        ],
    )
    def test_generic_fallbacks(self, handler, make_manager, text, message) -> None:
        assert self.act(handler, make_manager(), text).message == message
