"""Exceptions raised while building the league table."""

from __future__ import annotations
from typing import Any


class StandingsError(ValueError):
    """Base class for invalid league input."""


class ScoreParseError(StandingsError):
    """A results-grid cell could not be read as `<home>-<away>` goals."""

    def __init__(self, home_code: str, away_code: str, value: Any):
        self.home_code = home_code
        self.away_code = away_code
        self.value = value
        super().__init__(
            f"Cannot parse score {value!r} at cell (home={home_code!r}, away={away_code!r})"
        )


class UnknownTeamCode(StandingsError):
    """A team code from the grid has no entry in the team metadata."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Team code {code!r} not found in team metadata")
