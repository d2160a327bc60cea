"""Unit tests for game state models.

Tests cover:
- ChallengeState defaults and derived properties
- Field constraints on the Death Eater's health
- GameState copies not sharing mutable containers
"""

import pytest
from pydantic import ValidationError

from auror_exam.models.game import ChallengeState, DementorPhase, GameState


class TestChallengeState:
    """Tests for ChallengeState."""

    def test_defaults(self) -> None:
        cs = ChallengeState()

        assert cs.door_unlocked is False
        assert cs.dementor_phase == DementorPhase.INITIAL
        assert cs.death_eater_health == 100
        assert cs.duel_round == 0

    def test_eastern_trials_need_all_three(self) -> None:
        cs = ChallengeState(dementor_defeated=True, inferi_cleared=True)
        assert cs.eastern_trials_complete is False

        cs.hippogriff_trusts = True
        assert cs.eastern_trials_complete is True

    @pytest.mark.parametrize(
        "flag", ["stealth_passed", "wearing_cloak", "stealth_active"]
    )
    def test_any_stealth_evades_guards(self, flag) -> None:
        assert ChallengeState(**{flag: True}).guards_evaded is True

    def test_guards_not_evaded_by_default(self) -> None:
        assert ChallengeState().guards_evaded is False

    def test_death_eater_health_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ChallengeState(death_eater_health=101)
        with pytest.raises(ValidationError):
            ChallengeState(death_eater_health=-1)


class TestGameState:
    """Tests for GameState."""

    def test_deep_copy_is_independent(self) -> None:
        state = GameState(inventory=["dittany"])

        copy = state.model_copy(deep=True)
        copy.inventory.append("healing_herbs")
        copy.challenge_state.door_unlocked = True
        copy.items_taken.add("preparation_room:dittany")

        assert state.inventory == ["dittany"]
        assert state.challenge_state.door_unlocked is False
        assert state.items_taken == set()

    def test_json_has_plain_values(self) -> None:
        state = GameState(visited_locations={"entrance_hall"})

        data = state.model_dump(mode="json")

        assert data["game_phase"] == "intro"
        assert data["visited_locations"] == ["entrance_hall"]
        assert data["combat_state"] is None
