"""
In-memory Score Store

Holds teams, experts, categories and scores.
All state is guarded by a single lock:
  - upsert_score is atomic per (team, expert, category) key, last writer wins
  - snapshot() copies everything under the lock so aggregation sees one consistent view
"""
import logging
import threading
from typing import Dict, List, Tuple

from judging.core.errors import ConstraintError, NotFoundError
from judging.models import Category, Expert, Score, Snapshot, Team


logger = logging.getLogger(__name__)

ScoreKey = Tuple[int, int, int]  # (team_id, expert_id, category_id)


class ScoreStore:
    """Thread-safe in-memory store for judging data"""

    def __init__(self):
        self._lock = threading.Lock()
        self._teams: Dict[int, Team] = {}
        self._experts: Dict[int, Expert] = {}
        self._categories: Dict[int, Category] = {}
        self._scores: Dict[ScoreKey, Score] = {}
        self._next_ids = {"team": 1, "expert": 1, "category": 1, "score": 1}

    def _next_id(self, kind: str) -> int:
        value = self._next_ids[kind]
        self._next_ids[kind] = value + 1
        return value

    def _drop_scores(self, **match) -> int:
        keys = [
            key for key, row in self._scores.items()
            if all(getattr(row, field) == value for field, value in match.items())
        ]
        for key in keys:
            del self._scores[key]
        return len(keys)

    # ==================== TEAMS ====================

    def add_team(self, name: str, order_number: int) -> Team:
        with self._lock:
            team = Team(id=self._next_id("team"), name=name, order_number=order_number)
            self._teams[team.id] = team
        logger.info(f"Added team {team.id} '{name}' (order {order_number})")
        return team.model_copy()

    def list_teams(self) -> List[Team]:
        """Teams in presentation order"""
        with self._lock:
            teams = sorted(self._teams.values(), key=lambda t: (t.order_number, t.id))
            return [t.model_copy() for t in teams]

    def get_team(self, team_id: int) -> Team:
        with self._lock:
            team = self._teams.get(team_id)
            if team is None:
                raise NotFoundError("Team not found")
            return team.model_copy()

    def delete_team(self, team_id: int) -> None:
        """Delete a team together with all of its scores"""
        with self._lock:
            if team_id not in self._teams:
                raise NotFoundError("Team not found")
            dropped = self._drop_scores(team_id=team_id)
            del self._teams[team_id]
        logger.info(f"Deleted team {team_id} and {dropped} scores")

    # ==================== EXPERTS ====================

    def add_expert(self, name: str) -> Expert:
        with self._lock:
            expert = Expert(id=self._next_id("expert"), name=name)
            self._experts[expert.id] = expert
        logger.info(f"Added expert {expert.id} '{name}'")
        return expert.model_copy()

    def list_experts(self) -> List[Expert]:
        with self._lock:
            return [self._experts[k].model_copy() for k in sorted(self._experts)]

    def get_expert(self, expert_id: int) -> Expert:
        with self._lock:
            expert = self._experts.get(expert_id)
            if expert is None:
                raise NotFoundError("Expert not found")
            return expert.model_copy()

    def update_expert(self, expert_id: int, name: str) -> Expert:
        with self._lock:
            if expert_id not in self._experts:
                raise NotFoundError("Expert not found")
            self._experts[expert_id] = Expert(id=expert_id, name=name)
            return self._experts[expert_id].model_copy()

    def delete_expert(self, expert_id: int) -> None:
        """Delete an expert and their scores; the last expert cannot be removed"""
        with self._lock:
            if expert_id not in self._experts:
                raise NotFoundError("Expert not found")
            if len(self._experts) <= 1:
                raise ConstraintError("At least one expert must remain")
            dropped = self._drop_scores(expert_id=expert_id)
            del self._experts[expert_id]
        logger.info(f"Deleted expert {expert_id} and {dropped} scores")

    # ==================== CATEGORIES ====================

    def add_category(self, name: str) -> Category:
        with self._lock:
            category = Category(id=self._next_id("category"), name=name)
            self._categories[category.id] = category
        logger.info(f"Added category {category.id} '{name}'")
        return category.model_copy()

    def list_categories(self) -> List[Category]:
        with self._lock:
            return [self._categories[k].model_copy() for k in sorted(self._categories)]

    def get_category(self, category_id: int) -> Category:
        with self._lock:
            category = self._categories.get(category_id)
            if category is None:
                raise NotFoundError("Category not found")
            return category.model_copy()

    def update_category(self, category_id: int, name: str) -> Category:
        with self._lock:
            if category_id not in self._categories:
                raise NotFoundError("Category not found")
            self._categories[category_id] = Category(id=category_id, name=name)
            return self._categories[category_id].model_copy()

    def delete_category(self, category_id: int) -> None:
        """Delete a category and its scores; the last category cannot be removed"""
        with self._lock:
            if category_id not in self._categories:
                raise NotFoundError("Category not found")
            if len(self._categories) <= 1:
                raise ConstraintError("At least one category must remain")
            dropped = self._drop_scores(category_id=category_id)
            del self._categories[category_id]
        logger.info(f"Deleted category {category_id} and {dropped} scores")

    # ==================== SCORES ====================

    def upsert_score(self, team_id: int, expert_id: int, category_id: int, score: float) -> Score:
        """
        Insert or replace the score for (team, expert, category)

        A resubmission replaces the value in place and keeps the row id.

        Raises:
            NotFoundError: If the team, expert or category does not exist
        """
        with self._lock:
            if team_id not in self._teams:
                raise NotFoundError("Team not found")
            if expert_id not in self._experts:
                raise NotFoundError("Expert not found")
            if category_id not in self._categories:
                raise NotFoundError("Category not found")

            key = (team_id, expert_id, category_id)
            existing = self._scores.get(key)
            row_id = existing.id if existing else self._next_id("score")
            row = Score(
                id=row_id,
                team_id=team_id,
                expert_id=expert_id,
                category_id=category_id,
                score=score,
            )
            self._scores[key] = row
            return row.model_copy()

    def scores_for_team(self, team_id: int) -> List[Dict]:
        """Raw score rows for a team with expert and category names attached"""
        with self._lock:
            if team_id not in self._teams:
                raise NotFoundError("Team not found")
            rows = [r for r in self._scores.values() if r.team_id == team_id]
            rows.sort(key=lambda r: (r.category_id, r.expert_id))
            return [
                {
                    **r.model_dump(),
                    "expert_name": self._experts[r.expert_id].name,
                    "category_name": self._categories[r.category_id].name,
                }
                for r in rows
            ]

    # ==================== BULK ====================

    def snapshot(self) -> Snapshot:
        """Copy of the whole store taken atomically"""
        with self._lock:
            return Snapshot(
                teams=sorted(self._teams.values(), key=lambda t: (t.order_number, t.id)),
                experts=[self._experts[k] for k in sorted(self._experts)],
                categories=[self._categories[k] for k in sorted(self._categories)],
                scores=sorted(self._scores.values(), key=lambda r: r.id),
            ).model_copy(deep=True)

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "teams": len(self._teams),
                "experts": len(self._experts),
                "categories": len(self._categories),
                "scores": len(self._scores),
            }

    def clear(self) -> None:
        """Drop everything (tests / re-seeding)"""
        with self._lock:
            self._teams.clear()
            self._experts.clear()
            self._categories.clear()
            self._scores.clear()
            self._next_ids = {"team": 1, "expert": 1, "category": 1, "score": 1}
