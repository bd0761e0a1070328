"""Team, expert and category registration on top of the store"""
from typing import Dict

from judging.core.store import ScoreStore
from judging.core.validation import validate_name, validate_order_number
from judging.models import Category, Expert, Team


def register_team(store: ScoreStore, payload: Dict) -> Team:
    name = validate_name(payload.get("name"), "name")
    order_number = validate_order_number(payload.get("order_number"))
    return store.add_team(name, order_number)


def register_expert(store: ScoreStore, payload: Dict) -> Expert:
    return store.add_expert(validate_name(payload.get("name"), "name"))


def rename_expert(store: ScoreStore, expert_id: int, payload: Dict) -> Expert:
    return store.update_expert(expert_id, validate_name(payload.get("name"), "name"))


def register_category(store: ScoreStore, payload: Dict) -> Category:
    return store.add_category(validate_name(payload.get("name"), "name"))


def rename_category(store: ScoreStore, category_id: int, payload: Dict) -> Category:
    return store.update_category(category_id, validate_name(payload.get("name"), "name"))
