"""
Scoring category endpoints
"""
from fastapi import APIRouter, HTTPException
import logging

from judging import state
from judging.core.errors import ConstraintError, NotFoundError, ValidationError
from judging.services.registry import register_category, rename_category


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
async def list_categories():
    return [c.model_dump() for c in state.STORE.list_categories()]


@router.post("")
async def add_category(payload: dict):
    """
    Add a category

    Request:
        {"name": "Design"}
    """
    try:
        category = register_category(state.STORE, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return category.model_dump()


@router.get("/{category_id}")
async def get_category(category_id: int):
    try:
        return state.STORE.get_category(category_id).model_dump()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.put("/{category_id}")
async def update_category(category_id: int, payload: dict):
    try:
        category = rename_category(state.STORE, category_id, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {**category.model_dump(), "message": "Category updated"}


@router.delete("/{category_id}")
async def delete_category(category_id: int):
    """Delete a category and its scores (at least one category must remain)"""
    try:
        state.STORE.delete_category(category_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConstraintError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"success": True, "message": "Category deleted"}
