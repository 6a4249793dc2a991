import pytest

from rustlings.lessons.scores import Team, build_scores_table

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_keeps_its_name():
    assert build_scores_table(RESULTS)["France"] == Team("France", 5, 5)


def test_empty_results_give_empty_table():
    assert build_scores_table("") == {}


def test_bad_goal_count_raises():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_short_line_raises():
    with pytest.raises(ValueError):
        build_scores_table("England,France\n")


def test_goal_overflow_raises():
    with pytest.raises(OverflowError):
        build_scores_table("A,B,200,0\nA,B,100,0\n")