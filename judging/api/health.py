"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from judging import state


router = APIRouter(tags=["health"])

VERSION = "1.0.0"


@router.get("/")
async def health_check():
    """Health check endpoint"""
    counts = state.STORE.counts()
    return {
        "status": "ok",
        "message": state.SETTINGS.title,
        "version": VERSION,
        "total_teams": counts["teams"],
        "total_experts": counts["experts"],
        "total_categories": counts["categories"],
    }
