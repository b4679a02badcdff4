"""Domain entities and their JSON representation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_ID_PATTERN = re.compile(r"[A-Za-z0-9-]+")


def is_valid_id(value: Any) -> bool:
    """Return True when ``value`` is a well-formed entity identifier."""
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None


def _as_object(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{kind} must be a JSON object")
    return data


@dataclass
class Team:
    id: str = ""
    name: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_json(cls, data: Any) -> Team:
        obj = _as_object(data, "team")
        return cls(id=obj.get("id", ""), name=obj.get("name", ""))


@dataclass
class Tournament:
    name: str = ""
    id: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_json(cls, data: Any) -> Tournament:
        obj = _as_object(data, "tournament")
        return cls(name=obj.get("name", ""), id=obj.get("id", ""))


@dataclass
class Group:
    name: str = ""
    id: str = ""
    tournament_id: str = ""
    teams: list[Team] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tournamentId": self.tournament_id,
            "teams": [team.to_json() for team in self.teams],
        }

    @classmethod
    def from_json(cls, data: Any) -> Group:
        obj = _as_object(data, "group")
        return cls(
            name=obj.get("name", ""),
            id=obj.get("id", ""),
            tournament_id=obj.get("tournamentId", ""),
            teams=[Team.from_json(team) for team in obj.get("teams") or []],
        )


@dataclass
class Score:
    home_team_score: int = 0
    visitor_team_score: int = 0

    def to_json(self) -> dict[str, Any]:
        return {
            "homeTeamScore": self.home_team_score,
            "visitorTeamScore": self.visitor_team_score,
        }

    @classmethod
    def from_json(cls, data: Any) -> Score:
        obj = _as_object(data, "score")
        return cls(
            home_team_score=obj.get("homeTeamScore", 0),
            visitor_team_score=obj.get("visitorTeamScore", 0),
        )


@dataclass
class Match:
    id: str = ""
    tournament_id: str = ""
    name: str = ""
    home_team_id: str = ""
    visitor_team_id: str = ""
    score: Score = field(default_factory=Score)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tournamentId": self.tournament_id,
            "name": self.name,
            "homeTeamId": self.home_team_id,
            "visitorTeamId": self.visitor_team_id,
            "score": self.score.to_json(),
        }

    @classmethod
    def from_json(cls, data: Any) -> Match:
        obj = _as_object(data, "match")
        score = obj.get("score")
        return cls(
            id=obj.get("id", ""),
            tournament_id=obj.get("tournamentId", ""),
            name=obj.get("name", ""),
            home_team_id=obj.get("homeTeamId", ""),
            visitor_team_id=obj.get("visitorTeamId", ""),
            score=Score.from_json(score) if score is not None else Score(),
        )