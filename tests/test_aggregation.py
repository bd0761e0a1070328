"""
Tests for trimmed-mean aggregation and team ranking
"""
import itertools

import pytest
from judging.core.aggregation import (
    trimmed_average,
    group_scores,
    compute_results,
)
from judging.core.errors import ValidationError
from judging.models import Category, Score, Team


def _teams(*specs):
    return [Team(id=i, name=f"Team {i}", order_number=o) for i, o in specs]


def _categories(*ids):
    return [Category(id=i, name=f"Category {i}") for i in ids]


def _scores(rows):
    return [
        Score(id=idx + 1, team_id=t, expert_id=e, category_id=c, score=s)
        for idx, (t, e, c, s) in enumerate(rows)
    ]


# ==================== trimmed_average ====================

def test_trimmed_average_empty():
    """No scores → 0"""
    assert trimmed_average([]) == 0


def test_trimmed_average_all_zero():
    """Zeros are 'not scored' → 0"""
    assert trimmed_average([0, 0, 0]) == 0


def test_trimmed_average_single():
    """One value → that value"""
    assert trimmed_average([5]) == 5


def test_trimmed_average_two_values():
    """Two values → plain mean, no trimming"""
    assert trimmed_average([4, 6]) == 5


def test_trimmed_average_three_values():
    """Three values → drop min and max, leaves the middle"""
    assert trimmed_average([1, 5, 9]) == 5


def test_trimmed_average_zero_discarded_first():
    """[0,4,6,8] → [4,6,8] → drop 4 and 8 → 6"""
    assert trimmed_average([0, 4, 6, 8]) == 6


def test_trimmed_average_five_values():
    """Five values → only one min and one max removed"""
    # (4 + 6 + 8) / 3 = 6
    assert trimmed_average([2, 4, 6, 8, 10]) == 6


def test_trimmed_average_duplicate_extremes():
    """Only a single copy of a repeated min/max is removed"""
    # [1,1,9,9] → [1,9] → 5
    assert trimmed_average([9, 1, 9, 1]) == 5


def test_trimmed_average_zero_and_single():
    """[0, 7] → one value left → 7"""
    assert trimmed_average([0, 7]) == 7


def test_trimmed_average_order_independent():
    """Every permutation gives the same result"""
    values = [0, 3, 7.5, 9, 2]
    expected = trimmed_average(values)
    for perm in itertools.permutations(values):
        assert trimmed_average(perm) == expected


def test_trimmed_average_rejects_out_of_range():
    """Values outside [0, 10] fail fast"""
    with pytest.raises(ValidationError):
        trimmed_average([5, 11])
    with pytest.raises(ValidationError):
        trimmed_average([-1, 5])


def test_trimmed_average_rejects_non_numeric():
    """Non-numeric values fail fast"""
    with pytest.raises(ValidationError):
        trimmed_average([5, "7"])
    with pytest.raises(ValidationError):
        trimmed_average([float("nan")])


# ==================== group_scores ====================

def test_group_scores_by_team_and_category():
    """Rows grouped per (team, category), ordered by expert id"""
    grouped = group_scores(_scores([
        (1, 3, 1, 7),
        (1, 1, 1, 5),
        (1, 2, 2, 9),
        (2, 1, 1, 4),
    ]))
    assert set(grouped) == {(1, 1), (1, 2), (2, 1)}
    assert [e.expert_id for e in grouped[(1, 1)]] == [1, 3]
    assert [e.score for e in grouped[(1, 1)]] == [5, 7]


# ==================== compute_results ====================

def test_compute_results_empty_teams():
    """No teams → empty result"""
    assert compute_results([], _categories(1), {}) == []


def test_compute_results_empty_categories():
    """No categories → empty result"""
    assert compute_results(_teams((1, 1)), [], {}) == []


def test_compute_results_total_is_sum():
    """Total is the sum of category averages, not their mean"""
    grouped = group_scores(_scores([
        (1, 1, 1, 8), (1, 2, 1, 6),          # avg 7
        (1, 1, 2, 2), (1, 2, 2, 5), (1, 3, 2, 9),  # avg 5
    ]))
    [result] = compute_results(_teams((1, 1)), _categories(1, 2), grouped)
    assert result.categories[1].average == 7
    assert result.categories[2].average == 5
    assert result.overall_score == 12


def test_compute_results_keeps_expert_attribution():
    """Raw scores and expert ids survive aggregation"""
    grouped = group_scores(_scores([(1, 2, 1, 6), (1, 1, 1, 4)]))
    [result] = compute_results(_teams((1, 1)), _categories(1), grouped)
    cat = result.categories[1]
    assert cat.scores == [4, 6]
    assert [(e.expert_id, e.score) for e in cat.scoresWithExperts] == [(1, 4), (2, 6)]
    assert cat.average == 5


def test_compute_results_unscored_team_included():
    """A team with no scores appears with total 0"""
    grouped = group_scores(_scores([(1, 1, 1, 8)]))
    results = compute_results(_teams((1, 1), (2, 2)), _categories(1, 2), grouped)
    assert [r.id for r in results] == [1, 2]
    assert results[1].overall_score == 0
    assert set(results[1].categories) == {1, 2}
    assert results[1].categories[2].scoresWithExperts == []


def test_compute_results_sorted_desc():
    """Highest total first, ranks assigned"""
    grouped = group_scores(_scores([
        (1, 1, 1, 3),
        (2, 1, 1, 9),
        (3, 1, 1, 6),
    ]))
    results = compute_results(_teams((1, 1), (2, 2), (3, 3)), _categories(1), grouped)
    assert [r.id for r in results] == [2, 3, 1]
    assert [r.rank for r in results] == [1, 2, 3]


def test_compute_results_tie_break_order_number():
    """Equal totals → lower order_number first, then lower id"""
    grouped = group_scores(_scores([
        (1, 1, 1, 5),
        (2, 1, 1, 5),
        (3, 1, 1, 5),
    ]))
    teams = _teams((1, 3), (2, 1), (3, 1))
    results = compute_results(teams, _categories(1), grouped)
    assert [r.id for r in results] == [2, 3, 1]


def test_compute_results_deterministic():
    """Repeated calls and shuffled inputs give identical output"""
    rows = _scores([
        (1, 1, 1, 5), (2, 1, 1, 5), (1, 2, 2, 7), (2, 2, 2, 7), (3, 1, 1, 2),
    ])
    teams = _teams((1, 2), (2, 1), (3, 3))
    cats = _categories(1, 2)
    first = compute_results(teams, cats, group_scores(rows))
    second = compute_results(list(reversed(teams)), list(reversed(cats)), group_scores(list(reversed(rows))))
    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_compute_results_ignores_unknown_groups():
    """Scores for teams/categories not configured are ignored"""
    grouped = group_scores(_scores([(1, 1, 1, 8), (1, 1, 99, 10), (42, 1, 1, 10)]))
    [result] = compute_results(_teams((1, 1)), _categories(1), grouped)
    assert result.overall_score == 8
    assert set(result.categories) == {1}


def test_trimmed_average_rejects_huge_integer():
    """Integers too large for a float fail the range check"""
    with pytest.raises(ValidationError, match="between"):
        trimmed_average([5, 10 ** 400])


def test_compute_results_overall_average_matches_total():
    """overall_average mirrors overall_score"""
    grouped = group_scores(_scores([(1, 1, 1, 8), (1, 1, 2, 6)]))
    [result] = compute_results(_teams((1, 1)), _categories(1, 2), grouped)
    assert result.overall_score == 14
    assert result.overall_average == 14
