"""
Session-based turn logger.

Creates human-readable transcript files for each examination session with
clearly separated turns: player input, parsed command, outcome and the
state changes that mattered.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from auror_exam import config

if TYPE_CHECKING:
    from auror_exam.models.command import ParsedCommand
    from auror_exam.models.game import CommandResult, GameState


class SessionLogger:
    """Logs engine turns for a session to a dedicated file."""

    def __init__(self, session_id: str, world_id: str, logs_dir: Path | None = None):
        self.session_id = session_id
        self.world_id = world_id
        self.logs_dir = logs_dir or config.get_logs_dir()
        self.turn_count = 0
        self.log_file: Path | None = None

    def _ensure_log_file(self) -> Path:
        """Create the log file on first turn."""
        if self.log_file is None:
            world_dir = self.logs_dir / self.world_id
            world_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            self.log_file = world_dir / f"{timestamp}_{self.session_id}.log"

            with open(self.log_file, "w") as f:
                f.write("Auror Examination Session Log\n")
                f.write("=============================\n")
                f.write(f"Session ID: {self.session_id}\n")
                f.write(f"World: {self.world_id}\n")
                f.write(f"Started: {datetime.now().isoformat()}\n")
                f.write("\n")

        return self.log_file

    def log_turn(
        self,
        raw_input: str,
        command: "ParsedCommand | None",
        before: "GameState",
        result: "CommandResult",
    ) -> None:
        """Log a complete turn to the session file."""
        log_file = self._ensure_log_file()
        self.turn_count += 1

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        after = result.state

        with open(log_file, "a") as f:
            f.write("═" * 70 + "\n")
            f.write(f"TURN #{self.turn_count} | {timestamp} | {before.location}\n")
            f.write("═" * 70 + "\n\n")

            f.write("─── PLAYER INPUT ───\n")
            f.write(f'"{raw_input}"\n\n')

            if command is not None:
                f.write("─── PARSED COMMAND ───\n")
                f.write(f"  type: {command.type.value}\n")
                f.write(f"  verb: {command.verb}\n")
                if command.target:
                    f.write(f"  target: {command.target}\n")
                f.write("\n")

            changes = self._describe_changes(before, after)
            if changes:
                f.write("─── STATE CHANGES ───\n")
                for change in changes:
                    f.write(f"  {change}\n")
                f.write("\n")

            f.write("─── OUTCOME ───\n")
            color = result.color.value if result.color else "none"
            f.write(f"Color: {color}\n")
            f.write(f"{result.message}\n\n")

    def _describe_changes(self, before: "GameState", after: "GameState") -> list[str]:
        """Summarise the fields that moved during the turn."""
        changes = []
        for field in ("location", "health", "score", "hints_used", "game_phase"):
            old, new = getattr(before, field), getattr(after, field)
            if old != new:
                changes.append(f"{field}: {old} -> {new}")

        gained = [i for i in after.inventory if i not in before.inventory]
        lost = [i for i in before.inventory if i not in after.inventory]
        if gained:
            changes.append(f"inventory +{', '.join(gained)}")
        if lost:
            changes.append(f"inventory -{', '.join(lost)}")

        completed = sorted(after.challenges_completed - before.challenges_completed)
        if completed:
            changes.append(f"completed: {', '.join(completed)}")

        old_flags = before.challenge_state.model_dump()
        for key, value in after.challenge_state.model_dump().items():
            if old_flags.get(key) != value:
                changes.append(f"{key}: {old_flags.get(key)} -> {value}")

        return changes


# Store active loggers per session
_session_loggers: dict[str, SessionLogger] = {}


def get_session_logger(session_id: str, world_id: str) -> SessionLogger:
    """Get or create a session logger for the given session."""
    if session_id not in _session_loggers:
        _session_loggers[session_id] = SessionLogger(session_id, world_id)
    return _session_loggers[session_id]


def log_turn(
    session_id: str,
    world_id: str,
    raw_input: str,
    command: "ParsedCommand | None",
    before: "GameState",
    result: "CommandResult",
) -> None:
    """Convenience function to log a turn when session logging is enabled."""
    if not config.session_logs_enabled():
        return
    logger = get_session_logger(session_id, world_id)
    logger.log_turn(raw_input=raw_input, command=command, before=before, result=result)
