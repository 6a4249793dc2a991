"""A scores table built from match results."""

from __future__ import annotations

import re
from dataclasses import dataclass

_U8_MAX = 255
_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass
class Team:
    """A team's name and the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def _record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _checked_add(self.goals_scored, scored)
        self.goals_conceded = _checked_add(self.goals_conceded, conceded)


def _checked_add(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("goal count does not fit in 0..=255")
    return total


def _parse_goals(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the table from lines of the form team1,team2,goals1,goals2."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2, goals_1, goals_2 = fields[:4]
        score_1 = _parse_goals(goals_1)
        score_2 = _parse_goals(goals_2)
        scores.setdefault(team_1, Team(team_1))._record(score_1, score_2)
        scores.setdefault(team_2, Team(team_2))._record(score_2, score_1)
    return scores