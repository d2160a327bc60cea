"""
Game API endpoints - Start examinations and process candidate input
"""

import logging
import uuid
from typing import NamedTuple

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from auror_exam import config, session_logger
from auror_exam.engine.descriptions import get_location_description
from auror_exam.engine.grading import calculate_grade, total_score
from auror_exam.engine.parser import parse_command
from auror_exam.engine.processor import GameEngine
from auror_exam.engine.state import create_initial_state
from auror_exam.engine.world import get_world
from auror_exam.models.game import Color, GameState, Grade

logger = logging.getLogger(__name__)

router = APIRouter()


class GameSession(NamedTuple):
    """Session data: the latest state plus the world it runs against."""

    state: GameState
    world_id: str


# In-memory game sessions (a process restart ends every examination)
game_sessions: dict[str, GameSession] = {}


class NewGameRequest(BaseModel):
    """Request to start a new examination"""

    world_id: str | None = None  # Configured world when omitted


class ActionRequest(BaseModel):
    """One line of candidate input"""

    session_id: str
    action: str


class GameResponse(BaseModel):
    """Narration and the state after the turn"""

    session_id: str
    message: str
    color: Color | None = None
    state: GameState


class GradeResponse(BaseModel):
    """Current grade for a session"""

    session_id: str
    total: int
    grade: Grade


def _get_session(session_id: str) -> GameSession:
    if session_id not in game_sessions:
        raise HTTPException(status_code=404, detail="Game session not found")
    return game_sessions[session_id]


def _engine(world_id: str) -> GameEngine:
    try:
        return GameEngine(world=get_world(world_id))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"World '{world_id}' not found")


@router.post("/new", response_model=GameResponse)
async def new_game(request: NewGameRequest):
    """Start a new examination and ask for the candidate's name"""
    world_id = request.world_id or config.get_world_id()
    engine = _engine(world_id)

    session_id = uuid.uuid4().hex[:12]
    result = engine.start(create_initial_state(engine.world))
    game_sessions[session_id] = GameSession(state=result.state, world_id=world_id)
    logger.info(f"Started session {session_id} in world '{world_id}'")

    return GameResponse(
        session_id=session_id,
        message=result.message,
        color=result.color,
        state=result.state,
    )


@router.post("/action", response_model=GameResponse)
async def process_action(request: ActionRequest):
    """Process one line of candidate input"""
    session = _get_session(request.session_id)
    engine = _engine(session.world_id)

    result = engine.process_command(session.state, request.action)
    game_sessions[request.session_id] = session._replace(state=result.state)

    session_logger.log_turn(
        session_id=request.session_id,
        world_id=session.world_id,
        raw_input=request.action,
        command=parse_command(request.action),
        before=session.state,
        result=result,
    )

    return GameResponse(
        session_id=request.session_id,
        message=result.message,
        color=result.color,
        state=result.state,
    )


@router.get("/state/{session_id}")
async def get_state(session_id: str):
    """Get current examination state"""
    session = _get_session(session_id)
    return {"state": session.state}


@router.get("/grade/{session_id}", response_model=GradeResponse)
async def get_grade(session_id: str):
    """Grade the examination as it stands"""
    session = _get_session(session_id)
    return GradeResponse(
        session_id=session_id,
        total=total_score(session.state),
        grade=calculate_grade(session.state),
    )


@router.get("/describe/{session_id}")
async def describe_location(session_id: str):
    """Describe the candidate's current location without taking a turn"""
    session = _get_session(session_id)
    world = _engine(session.world_id).world
    return {
        "location": session.state.location,
        "description": get_location_description(session.state, world),
    }
