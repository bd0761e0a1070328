"""
Team management endpoints
"""
from fastapi import APIRouter, HTTPException
import logging

from judging import state
from judging.core.errors import NotFoundError, ValidationError
from judging.services.registry import register_team


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("")
async def list_teams():
    """All teams in presentation order"""
    return [t.model_dump() for t in state.STORE.list_teams()]


@router.post("")
async def add_team(payload: dict):
    """
    Add a team

    Request:
        {"name": "Team A", "order_number": 1}
    """
    try:
        team = register_team(state.STORE, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return team.model_dump()


@router.get("/{team_id}")
async def get_team(team_id: int):
    try:
        return state.STORE.get_team(team_id).model_dump()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{team_id}")
async def delete_team(team_id: int):
    """Delete a team and all of its scores"""
    try:
        state.STORE.delete_team(team_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"success": True, "message": "Team deleted successfully"}
