"""Integration tests for complete examination runs.

Drives the GameEngine turn by turn through the bundled world with a
scripted random source, checking state and scoring along the way.

Tests cover:
- A full winning run through all nine scored challenges
- The cloak route past the guards via the hidden room
- Failing in the dark and restarting
- Progress, visits and health bounds holding after every turn
"""

import pytest

from auror_exam.engine.state import create_initial_state
from auror_exam.models.game import SCORED_CHALLENGES, GamePhase


@pytest.mark.integration
class TestFullExamination:
    """A candidate who solves every challenge the intended way."""

    def test_winning_run(self, engine, world) -> None:
        state = engine.start(create_initial_state(world)).state

        def turn(command: str):
            nonlocal state
            result = engine.process_command(state, command)
            state = result.state
            return result

        turn("Nymphadora")
        turn("alohomora")
        turn("north")
        turn("lumos")
        turn("north")
        turn("north")
        turn("wingardium leviosa")
        turn("north")
        assert state.location == "chasm_other_side"
        assert state.score == 30

        turn("east")
        assert state.health == 90
        turn("expecto patronum")
        assert state.health == 80
        turn("the morning my letter from Hogwarts arrived")
        assert state.challenge_state.dementor_defeated is True

        turn("east")
        turn("east")
        assert state.location == "inferi_lake"
        assert state.health == 70
        turn("incendio")
        assert state.health == 70

        turn("east")
        turn("take potion")
        assert state.inventory == ["wiggenweld_potion"]

        turn("north")
        turn("bow")
        turn("bow")
        assert state.challenge_state.hippogriff_trusts is True
        turn("north")
        assert state.challenge_state.eastern_trials_complete is True

        turn("north")
        assert state.challenge_state.guards_alerted is True
        turn("confundo")
        turn("north")
        assert state.location == "beyond_guards"
        assert state.health == 70

        turn("east")
        turn("stupefy")
        assert (state.health, state.challenge_state.death_eater_health) == (70, 75)
        turn("protego maxima")
        assert state.health == 70
        turn("stupefy")
        assert (state.health, state.challenge_state.death_eater_health) == (65, 50)
        turn("stupefy")
        assert (state.health, state.challenge_state.death_eater_health) == (50, 25)
        disarm = turn("expelliarmus")
        assert state.health == 35
        assert "(Mercy bonus)" in disarm.message
        assert state.score == 90

        turn("north")
        turn("north")
        finale = turn("turn away")
        assert state.game_phase == GamePhase.VICTORY
        assert state.score == 110
        assert state.challenges_completed == set(SCORED_CHALLENGES)
        assert "EXAMINATION COMPLETE" in finale.message
        assert "Challenges Completed: 9/9" in finale.message

        results = turn("continue")
        assert "GRADE: O - Outstanding" in results.message
        assert state.game_phase == GamePhase.DEATH

        journey = turn("journey")
        assert journey.message == "The examination has ended. Type RESTART to try again."


@pytest.mark.integration
class TestAlternativeRoutes:
    """Side paths and failures."""

    def test_cloak_route_past_guards(self, play, state) -> None:
        state.location = "deep_tunnel"
        state.challenge_state.lumos_active = True

        result = play(state, "east", "crawl", "take cloak")

        assert result.state.location == "hidden_room"
        assert "invisibility_cloak" in result.state.inventory

        state = result.state
        state.location = "beyond_creature"
        result = play(state, "wear cloak", "north")

        assert result.state.location == "guard_corridor"
        assert result.state.challenge_state.guards_alerted is False

        result = play(result.state, "north")

        assert result.state.location == "beyond_guards"
        assert "stealth" in result.state.challenges_completed
        assert result.state.score == 15
        assert "[STEALTH SECTION COMPLETED - +10 points]" in result.message

    def test_stumbling_to_death_in_the_dark(self, play, state) -> None:
        state.location = "dark_corridor"
        state.health = 10

        result = play(state, "north", "north")

        assert result.state.game_phase == GamePhase.DEATH
        assert "EXAMINATION FAILED - CANDIDATE FELL" in result.message
        assert "EXAMINATION FAILED\n" in result.message

    def test_restart_after_failure(self, play, state) -> None:
        state.location = "dark_corridor"
        state.health = 5

        result = play(state, "north", "restart", "Alastor")

        assert result.state.game_phase == GamePhase.PLAYING
        assert result.state.player_name == "Alastor"
        assert result.state.health == 100
        assert result.state.location == "entrance_hall"


@pytest.mark.integration
class TestTurnInvariants:
    """Properties that hold after every turn, whatever the candidate types."""

    @staticmethod
    def assert_turn_holds(before, after) -> None:
        assert after.challenges_completed >= before.challenges_completed
        assert after.visited_locations >= before.visited_locations
        assert 0 <= after.health <= after.max_health

    def run_checked(self, engine, state, *commands: str):
        for command in commands:
            after = engine.process_command(state, command).state
            self.assert_turn_holds(state, after)
            state = after
        return state

    def test_mixed_run_never_loses_progress(self, engine, state) -> None:
        state = self.run_checked(
            engine,
            state,
            "look",
            "episkey",
            "north",
            "alohomora",
            "north",
            "north",
            "episkey",
            "lumos",
            "north",
        )
        assert state.location == "deep_tunnel"
        assert state.episkey_casts == 1

        state.location = "death_eater_chamber"
        state = self.run_checked(
            engine,
            state,
            "stupefy",
            "protego maxima",
            "stupefy",
            "wait",
            "stupefy",
            "expelliarmus",
        )
        assert state.challenge_state.death_eater_defeated is True

        state.location = "final_chamber"
        state = self.run_checked(engine, state, "touch mirror", "look", "north")

        assert state.game_phase == GamePhase.DEATH
        assert state.score == 0
        assert {"alohomora", "lumos", "duel"} <= state.challenges_completed

    def test_look_is_idempotent(self, engine, state) -> None:
        first = engine.process_command(state, "look")
        second = engine.process_command(first.state, "look")

        assert first.message == second.message
        assert first.state.model_dump(exclude={"attempt_counts"}) == (
            second.state.model_dump(exclude={"attempt_counts"})
        )
        assert second.state.attempt_counts["entrance_hall"] == 2
