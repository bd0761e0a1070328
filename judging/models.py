"""
Data models for judging server
"""
from pydantic import BaseModel
from typing import List, Dict


class Team(BaseModel):
    """Team being judged"""
    id: int
    name: str
    order_number: int  # presentation order, not used for ranking except as tie-break


class Expert(BaseModel):
    """Judge submitting scores"""
    id: int
    name: str


class Category(BaseModel):
    """Additive scoring dimension"""
    id: int
    name: str


class Score(BaseModel):
    """One judgment, unique per (team_id, expert_id, category_id)"""
    id: int
    team_id: int
    expert_id: int
    category_id: int
    score: float  # 0..10, 0 means "not scored"


class ExpertScore(BaseModel):
    """Raw score with expert attribution"""
    score: float
    expert_id: int


class CategoryResult(BaseModel):
    """Aggregated scores of one team in one category"""
    id: int
    name: str
    scores: List[float] = []
    scoresWithExperts: List[ExpertScore] = []
    average: float = 0.0


class TeamResult(BaseModel):
    """Computed result for one team (derived, never stored)"""
    id: int
    name: str
    order_number: int
    rank: int = 0
    categories: Dict[int, CategoryResult] = {}
    overall_score: float = 0.0
    overall_average: float = 0.0  # same value as overall_score


class Snapshot(BaseModel):
    """Consistent copy of the store contents"""
    teams: List[Team] = []
    experts: List[Expert] = []
    categories: List[Category] = []
    scores: List[Score] = []


class TeamSeed(BaseModel):
    """Team declared in the config file"""
    name: str
    order_number: int


class Settings(BaseModel):
    """Server configuration loaded from YAML"""
    title: str = "Expert Judging Server"
    default_categories: List[str] = [
        "Innovation", "Technical Merit", "Practical Value", "Presentation", "Teamwork"
    ]
    default_experts: List[str] = ["Expert 1", "Expert 2"]
    teams: List[TeamSeed] = []
    log_level: str = "INFO"
