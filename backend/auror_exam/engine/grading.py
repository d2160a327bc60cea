"""Final examination grade, on the O.W.L. scale."""

from auror_exam.models.game import GameState, Grade

# (minimum percentage, grade, title, description), best first
GRADE_THRESHOLDS = [
    (95, "O", "Outstanding", "Elite Auror material. Welcome to the Department."),
    (85, "E", "Exceeds Expectations", "Excellent Auror candidate. You will serve the Ministry well."),
    (75, "E", "Exceeds Expectations", "Strong Auror candidate. Report for duty."),
    (65, "A", "Acceptable", "Qualified Auror. Additional training recommended."),
    (55, "A", "Acceptable", "Probationary Auror. Close supervision required."),
    (45, "P", "Poor", "You must retake the examination."),
    (30, "D", "Dreadful", "Failed. You are not Auror material."),
]
TROLL = Grade(
    grade="T",
    title="Troll",
    description="Catastrophic failure. How did you even get here?",
)


def total_score(state: GameState) -> int:
    """Score plus a health bonus, less the hint penalty, never negative."""
    return max(0, state.score + state.health // 5 - state.hints_used * 2)


def calculate_grade(state: GameState) -> Grade:
    percentage = min(100, total_score(state))
    for minimum, grade, title, description in GRADE_THRESHOLDS:
        if percentage >= minimum:
            return Grade(grade=grade, title=title, description=description)
    return TROLL.model_copy()
