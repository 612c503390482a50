"""
Small data models for league results.

These lightweight dataclasses document the fields that flow through the
standings pipeline. All of them are frozen (immutable) so each stage can hand
its output to the next one without risk of accidental modification.

    - `Match`: one played fixture expanded from the results grid.
    - `TeamRecord`: per-team totals accumulated over all played fixtures.
    - `StandingsRow`: one ranked line of the final league table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
        home_code: str
        away_code: str
        home_goals: int
        away_goals: int


@dataclass(frozen=True)
class TeamRecord:
        code: str
        points: int = 0
        goals_for: int = 0
        goals_against: int = 0

        @property
        def goal_diff(self) -> int:
                return self.goals_for - self.goals_against

        def __add__(self, other: "TeamRecord") -> "TeamRecord":
                if other.code != self.code:
                        raise ValueError(f"Cannot merge records of {self.code!r} and {other.code!r}")
                return TeamRecord(
                        code=self.code,
                        points=self.points + other.points,
                        goals_for=self.goals_for + other.goals_for,
                        goals_against=self.goals_against + other.goals_against,
                )


@dataclass(frozen=True)
class StandingsRow:
        rank: int
        code: str
        display_name: str
        points: int
        goal_diff: int
        goals_for: int
        goals_against: int
