"""
Expert (judge) management endpoints
"""
from fastapi import APIRouter, HTTPException
import logging

from judging import state
from judging.core.errors import ConstraintError, NotFoundError, ValidationError
from judging.services.registry import register_expert, rename_expert


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/experts", tags=["experts"])


@router.get("")
async def list_experts():
    return [e.model_dump() for e in state.STORE.list_experts()]


@router.post("")
async def add_expert(payload: dict):
    """
    Add an expert

    Request:
        {"name": "Expert 3"}
    """
    try:
        expert = register_expert(state.STORE, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {**expert.model_dump(), "message": "Expert added"}


@router.get("/{expert_id}")
async def get_expert(expert_id: int):
    try:
        return state.STORE.get_expert(expert_id).model_dump()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.put("/{expert_id}")
async def update_expert(expert_id: int, payload: dict):
    try:
        expert = rename_expert(state.STORE, expert_id, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {**expert.model_dump(), "message": "Expert updated"}


@router.delete("/{expert_id}")
async def delete_expert(expert_id: int):
    """Delete an expert and their scores (at least one expert must remain)"""
    try:
        state.STORE.delete_expert(expert_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConstraintError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"success": True, "message": "Expert deleted"}
