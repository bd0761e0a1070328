"""
Score Aggregation Engine

Rules:
  - A score of 0 means "not scored" and is discarded before anything else
  - Category average = trimmed mean of the remaining scores:
      0 scores  -> 0
      1 score   -> that score
      2 scores  -> plain mean
      3+ scores -> drop ONE lowest and ONE highest, mean of the rest
  - Team total = SUM of its category averages (categories are additive)
  - Ranking: total desc, then order_number asc, then team id asc

The engine is pure: it works on a materialized snapshot and never touches the store.
"""
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

from judging.core.errors import ValidationError
from judging.models import Category, CategoryResult, ExpertScore, Score, Team, TeamResult


MIN_SCORE = 0.0
MAX_SCORE = 10.0
TRIM_THRESHOLD = 3  # trimming kicks in at this many non-zero scores


def _check_value(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Score must be numeric, got {value!r}")
    # range first: comparing a huge int is exact, math.isnan on it overflows
    if value < MIN_SCORE or value > MAX_SCORE or math.isnan(value):
        raise ValidationError(f"Score must be between {MIN_SCORE:g} and {MAX_SCORE:g}")
    return float(value)


def trimmed_average(scores: Iterable[float]) -> float:
    """
    Calculate trimmed average of one team's scores in one category

    Logic:
    1. Discard zeros (withdrawn / not scored)
    2. Nothing left -> 0, one value left -> that value
    3. Sort ascending; with 3+ values remove a single min and a single max
    4. Arithmetic mean of what remains

    Example:
        [0, 4, 6, 8]     -> [4, 6, 8] -> [6]      -> 6
        [2, 4, 6, 8, 10] -> [4, 6, 8]             -> 6
        [4, 6]           -> no trimming           -> 5

    Args:
        scores: Raw scores in any order

    Returns:
        Trimmed average (0.0 when nothing was scored)

    Raises:
        ValidationError: If a value is non-numeric or outside [0, 10]
    """
    values = sorted(v for v in (_check_value(s) for s in scores) if v > 0)

    if not values:
        return 0.0
    if len(values) == 1:
        return values[0]

    if len(values) >= TRIM_THRESHOLD:
        values = values[1:-1]

    return sum(values) / len(values)


def group_scores(scores: Iterable[Score]) -> Dict[Tuple[int, int], List[ExpertScore]]:
    """
    Group raw score rows by (team_id, category_id)

    Entries inside a group are ordered by expert id so the
    attribution list is stable between calls.
    """
    grouped: Dict[Tuple[int, int], List[ExpertScore]] = defaultdict(list)
    for row in scores:
        grouped[(row.team_id, row.category_id)].append(
            ExpertScore(score=row.score, expert_id=row.expert_id)
        )

    for entries in grouped.values():
        entries.sort(key=lambda e: e.expert_id)

    return dict(grouped)


def rank_results(results: List[TeamResult]) -> List[TeamResult]:
    """Sort by total (desc), order_number (asc), id (asc) and assign 1-based ranks"""
    ordered = sorted(results, key=lambda r: (-r.overall_score, r.order_number, r.id))
    for idx, result in enumerate(ordered):
        result.rank = idx + 1
    return ordered


def compute_results(
    teams: Sequence[Team],
    categories: Sequence[Category],
    scores_by_team_and_category: Dict[Tuple[int, int], List[ExpertScore]],
) -> List[TeamResult]:
    """
    Compute per-category trimmed averages and totals for every team, ranked

    Every team gets an entry for every category (cartesian product), even
    with no scores at all, in which case its total is 0.

    Args:
        teams: Currently configured teams
        categories: Currently configured categories
        scores_by_team_and_category: Output of group_scores()

    Returns:
        TeamResult list sorted by overall_score descending.
        Empty if there are no teams or no categories.
    """
    if not teams or not categories:
        return []

    ordered_categories = sorted(categories, key=lambda c: c.id)
    results = []

    for team in teams:
        per_category: Dict[int, CategoryResult] = {}

        for category in ordered_categories:
            entries = scores_by_team_and_category.get((team.id, category.id), [])
            raw = [e.score for e in entries]
            per_category[category.id] = CategoryResult(
                id=category.id,
                name=category.name,
                scores=raw,
                scoresWithExperts=[e.model_copy() for e in entries],
                average=trimmed_average(raw),
            )

        # Sum, not mean: each category is its own point bucket
        total = sum(c.average for c in per_category.values())

        results.append(TeamResult(
            id=team.id,
            name=team.name,
            order_number=team.order_number,
            categories=per_category,
            overall_score=total,
            overall_average=total,
        ))

    return rank_results(results)
