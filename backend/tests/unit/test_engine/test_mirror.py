"""Unit tests for the Mirror of Erised.

Tests cover:
- Turning away (the wise answer)
- Looking once (warning) and twice (seeded gamble)
- Touching or taking the mirror
- Fallback responses away from the mirror
"""

import pytest

from auror_exam.engine.challenges import mirror
from auror_exam.models.game import Color, GamePhase


class TestMirror:
    """Tests for the Final Chamber."""

    @pytest.fixture
    def manager(self, make_manager):
        return make_manager("final_chamber")

    def test_turning_away_wins(self, manager) -> None:
        result = mirror.leave(manager)

        assert result.state.game_phase == GamePhase.VICTORY
        assert result.state.score == 20
        assert "final" in result.state.challenges_completed
        assert result.color == Color.GOLD
        assert "(Wisdom bonus)" in result.message

    def test_first_look_is_a_warning(self, manager) -> None:
        result = mirror.see(manager, None)

        assert manager.challenges.mirror_looked_once is True
        assert result.state.game_phase == GamePhase.PLAYING
        assert result.color == Color.WARNING
        assert "TURN AWAY" in result.message

    def test_turning_away_after_warning_still_wins(self, manager) -> None:
        mirror.see(manager, "mirror")

        result = mirror.leave(manager)

        assert result.state.game_phase == GamePhase.VICTORY
        assert result.state.score == 20

    def test_second_look_true_heart(self, manager, rng) -> None:
        rng.randoms.append(0.5)
        mirror.see(manager, None)

        result = mirror.see(manager, "erised")

        assert result.state.game_phase == GamePhase.VICTORY
        assert result.state.score == 10
        assert result.color == Color.WARNING
        assert "(Acceptable - risky choice)" in result.message

    def test_second_look_corruption(self, manager, rng) -> None:
        rng.randoms.append(0.05)
        manager.state.score = 80
        mirror.see(manager, None)

        result = mirror.see(manager, None)

        assert result.state.game_phase == GamePhase.DEATH
        assert result.state.score == 0
        assert "CORRUPTED BY DESIRE" in result.message

    def test_corruption_boundary(self, manager, rng) -> None:
        """A roll of exactly 0.10 is not corruption."""
        rng.randoms.append(mirror.CORRUPTION_CHANCE)
        mirror.see(manager, None)

        result = mirror.see(manager, None)

        assert result.state.game_phase == GamePhase.VICTORY

    def test_touch_consumes(self, manager) -> None:
        manager.state.score = 80

        result = mirror.touch(manager, "mirror")

        assert result.state.game_phase == GamePhase.DEATH
        assert result.state.score == 0
        assert "CONSUMED BY DESIRE" in result.message

    def test_take_consumes(self, manager) -> None:
        result = mirror.take(manager)

        assert result.state.game_phase == GamePhase.DEATH

    def test_touch_anything_in_the_chamber_consumes(self, manager) -> None:
        manager.state.score = 80

        result = mirror.touch(manager, "stone")

        assert result.state.game_phase == GamePhase.DEATH
        assert result.state.score == 0
        assert result.state.challenge_state.final_challenge_complete is True

    def test_touch_stone_through_engine(self, engine, state) -> None:
        state.location = "final_chamber"
        state.score = 80

        result = engine.process_command(state, "touch stone")

        assert result.state.game_phase == GamePhase.DEATH
        assert result.state.score == 0

    def test_mirror_words(self) -> None:
        assert mirror.is_mirror(None)
        assert mirror.is_mirror("the golden mirror")
        assert mirror.is_mirror("glass")
        assert not mirror.is_mirror("door")


class TestAwayFromMirror:
    """Mirror verbs anywhere else in the maze."""

    def test_see(self, make_manager) -> None:
        manager = make_manager()

        assert mirror.see(manager, None).message == "See what?"
        assert mirror.see(manager, "torch").message == (
            "You look at the torch, but nothing special happens."
        )

    def test_touch(self, make_manager) -> None:
        assert mirror.touch(make_manager(), None).message == "Touch what?"

    def test_take(self, make_manager) -> None:
        assert mirror.take(make_manager()).message == "There's no mirror here."

    def test_leave(self, make_manager) -> None:
        result = mirror.leave(make_manager())

        assert result.message == "There's nothing to leave here."
        assert result.state.game_phase == GamePhase.PLAYING

    def test_after_completion(self, make_manager) -> None:
        manager = make_manager("final_chamber", final_challenge_complete=True)

        assert mirror.leave(manager).message == "There's nothing to leave here."
