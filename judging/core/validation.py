"""
Validation of raw request payloads before they reach the store
"""
import math
from typing import Dict, Tuple

from judging.core.aggregation import MAX_SCORE, MIN_SCORE
from judging.core.errors import ValidationError


SCORE_FIELDS = ("team_id", "expert_id", "category_id", "score")


def parse_int(value) -> int:
    """
    Parse an identifier from JSON

    Accepts ints and integer strings ("3", " 3 "). Rejects bools, floats with
    a fractional part and anything else.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"Not an integer: {value!r}")


def parse_number(value) -> float:
    """Parse a finite number from an int, float or numeric string"""
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if not isinstance(value, (int, float, str)):
        raise ValueError(f"Not a number: {value!r}")

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except OverflowError:
        raise ValueError("Not a finite number: too large") from None

    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def validate_score_submission(payload: Dict) -> Tuple[int, int, int, float]:
    """
    Validate a score submission

    Body format:
    {
        "team_id": 1,
        "expert_id": 2,
        "category_id": 3,
        "score": 7.5
    }

    Args:
        payload: Request body JSON

    Returns:
        (team_id, expert_id, category_id, score)

    Raises:
        ValidationError: Missing fields, bad types or score outside [0, 10]
    """
    if not isinstance(payload, dict) or any(payload.get(f) is None for f in SCORE_FIELDS):
        raise ValidationError("Missing required fields")

    try:
        team_id = parse_int(payload["team_id"])
        expert_id = parse_int(payload["expert_id"])
        category_id = parse_int(payload["category_id"])
        score = parse_number(payload["score"])
    except ValueError as e:
        raise ValidationError(f"Invalid parameter types: {e}") from e

    if score < MIN_SCORE or score > MAX_SCORE:
        raise ValidationError(f"Score must be between {MIN_SCORE:g} and {MAX_SCORE:g}")

    return team_id, expert_id, category_id, score


def validate_name(value, field: str = "name") -> str:
    """Non-empty, trimmed display name"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


def validate_order_number(value) -> int:
    """Team presentation order"""
    if value is None:
        raise ValidationError("order_number is required")
    try:
        return parse_int(value)
    except ValueError as e:
        raise ValidationError(f"order_number must be an integer: {e}") from e
