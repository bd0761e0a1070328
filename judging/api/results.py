"""
Results endpoint
"""
from fastapi import APIRouter, HTTPException
import logging

from judging import state
from judging.services.results import get_results, serialize_results


router = APIRouter(tags=["results"])
logger = logging.getLogger(__name__)


@router.get("/results")
async def results():
    """
    Ranked results for all teams

    Each team:
        {
            "id": 1,
            "name": "Team A",
            "order_number": 1,
            "rank": 1,
            "categories": {
                "1": {"id": 1, "name": "...", "scores": [...],
                      "scoresWithExperts": [{"score": 8, "expert_id": 1}], "average": 8.0}
            },
            "overall_score": 8.0
        }

    Sorted by overall_score desc, then order_number asc, then id asc.
    """
    try:
        return serialize_results(get_results(state.STORE))
    except Exception as e:
        logger.error(f"❌ ERROR computing results: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
