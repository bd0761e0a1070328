"""
Results service - compute ranked team results from one store snapshot
"""
import logging
from typing import Dict, List

from judging.core.aggregation import compute_results, group_scores
from judging.core.store import ScoreStore
from judging.models import TeamResult


logger = logging.getLogger(__name__)


def get_results(store: ScoreStore) -> List[TeamResult]:
    """
    Compute results for all teams

    One snapshot is taken for the whole computation, so every team is scored
    against the same set of scores. Nothing is cached.
    """
    snapshot = store.snapshot()
    grouped = group_scores(snapshot.scores)
    results = compute_results(snapshot.teams, snapshot.categories, grouped)

    logger.info(
        f"Computed results for {len(results)} teams from {len(snapshot.scores)} scores"
    )
    return results


def serialize_results(results: List[TeamResult]) -> List[Dict]:
    """Results as plain JSON-ready dicts"""
    return [r.model_dump() for r in results]
