"""Interfaces of the collaborators the delegates depend on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol

from .domain import Group, Match, Score, Team, Tournament


class MessageProducer(Protocol):
    """Publishes a text message to a named queue."""

    def send_message(self, message: str, queue: str) -> None: ...


class TeamRepository(Protocol):
    def read_by_id(self, team_id: str) -> Optional[Team]: ...

    def create(self, team: Team) -> str: ...

    def update(self, team: Team) -> str: ...

    def delete(self, team_id: str) -> None: ...

    def read_all(self) -> list[Team]: ...


class TournamentRepository(Protocol):
    def read_by_id(self, tournament_id: str) -> Optional[Tournament]: ...

    def create(self, tournament: Tournament) -> str: ...

    def update(self, tournament: Tournament) -> str: ...

    def delete(self, tournament_id: str) -> None: ...

    def read_all(self) -> list[Tournament]: ...


class GroupRepository(Protocol):
    def read_by_id(self, group_id: str) -> Optional[Group]: ...

    def create(self, group: Group) -> str: ...

    def update(self, group: Group) -> str: ...

    def delete(self, group_id: str) -> None: ...

    def read_all(self) -> list[Group]: ...

    def find_by_tournament_id(self, tournament_id: str) -> list[Group]: ...

    def find_by_tournament_id_and_group_id(
        self, tournament_id: str, group_id: str
    ) -> Optional[Group]: ...

    def find_by_tournament_id_and_team_id(
        self, tournament_id: str, team_id: str
    ) -> Optional[Group]: ...

    def find_by_group_id_and_team_id(self, group_id: str, team_id: str) -> Optional[Group]: ...

    def update_group_add_team(self, group_id: str, team: Team) -> None: ...


class MatchRepository(Protocol):
    def find_by_tournament_id_and_match_id(
        self, tournament_id: str, match_id: str
    ) -> Optional[Match]: ...

    def find_by_tournament_id(self, tournament_id: str) -> list[Match]: ...

    def find_by_tournament_id_and_name(self, tournament_id: str, name: str) -> Optional[Match]: ...

    def create_bulk(self, matches: Sequence[Match]) -> list[str]: ...

    def update(self, match_id: str, match: Match) -> None: ...

    def update_match_score(self, match_id: str, score: Score) -> None: ...

    def matches_exist_for_tournament(self, tournament_id: str) -> bool: ...