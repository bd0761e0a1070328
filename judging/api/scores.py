"""
Score submission endpoints
"""
from fastapi import APIRouter, HTTPException, Request
import logging

from judging import state
from judging.core.errors import NotFoundError, ValidationError
from judging.core.validation import validate_score_submission


router = APIRouter(prefix="/scores", tags=["scores"])
logger = logging.getLogger(__name__)


@router.post("")
async def submit_score(request: Request):
    """
    Submit (or resubmit) a score

    Request:
        {
            "team_id": 1,
            "expert_id": 2,
            "category_id": 3,
            "score": 7.5    # 0..10, 0 = not scored
        }

    A second submission for the same team/expert/category replaces the first.
    """
    try:
        body = await request.json()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Request body must be JSON") from exc

    logger.info(f"📥 Score submission | Body: {body}")

    try:
        team_id, expert_id, category_id, score = validate_score_submission(body)
    except ValidationError as exc:
        logger.warning(f"❌ Rejected score submission: {exc}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        row = state.STORE.upsert_score(team_id, expert_id, category_id, score)
    except NotFoundError as exc:
        logger.warning(f"❌ Rejected score submission: {exc}")
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    logger.info(
        f"✅ Saved score | team={team_id} expert={expert_id} "
        f"category={category_id} score={score} (row {row.id})"
    )
    return row.model_dump()


@router.get("/{team_id}")
async def get_team_scores(team_id: int):
    """Raw scores of one team with expert and category names"""
    try:
        return state.STORE.scores_for_team(team_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
