"""Business rules for groups within a tournament."""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from .domain import Group, Team, Tournament, is_valid_id
from .errors import Error, ServiceError, UniqueViolation
from .ports import GroupRepository, MessageProducer, TeamRepository, TournamentRepository

TEAM_ADD_QUEUE = "tournament.team-add"
MAX_TEAMS_PER_GROUP = 32


def _ensure(condition: object, error: Error) -> None:
    if not condition:
        raise ServiceError(error)


@contextmanager
def _repository_errors(*, duplicates: bool = False) -> Iterator[None]:
    try:
        yield
    except UniqueViolation as exc:
        if duplicates and exc.sqlstate == "23505":
            raise ServiceError(Error.DUPLICATE) from exc
        raise ServiceError(Error.UNKNOWN_ERROR) from exc
    except Exception as exc:
        raise ServiceError(Error.UNKNOWN_ERROR) from exc


class GroupDelegate:
    """Validates group requests and announces teams joining a group."""

    def __init__(
        self,
        tournament_repository: TournamentRepository,
        group_repository: GroupRepository,
        team_repository: TeamRepository,
        message_producer: MessageProducer,
    ) -> None:
        self._tournaments = tournament_repository
        self._groups = group_repository
        self._teams = team_repository
        self._producer = message_producer

    def _require_tournament(self, tournament_id: str) -> Tournament:
        _ensure(is_valid_id(tournament_id), Error.INVALID_FORMAT)
        tournament = self._tournaments.read_by_id(tournament_id)
        _ensure(tournament is not None, Error.NOT_FOUND)
        return tournament

    def _require_group(self, tournament_id: str, group_id: str) -> Group:
        _ensure(
            is_valid_id(tournament_id) and is_valid_id(group_id), Error.INVALID_FORMAT
        )
        self._require_tournament(tournament_id)
        group = self._groups.find_by_tournament_id_and_group_id(tournament_id, group_id)
        _ensure(group is not None, Error.NOT_FOUND)
        return group

    def _announce(self, tournament_id: str, group_id: str, team_id: str) -> None:
        message = json.dumps(
            {"tournamentId": tournament_id, "groupId": group_id, "teamId": team_id},
            separators=(",", ":"),
            sort_keys=True,
        )
        self._producer.send_message(message, TEAM_ADD_QUEUE)

    def get_groups(self, tournament_id: str) -> list[Group]:
        self._require_tournament(tournament_id)
        with _repository_errors():
            return self._groups.find_by_tournament_id(tournament_id)

    def get_group(self, tournament_id: str, group_id: str) -> Group:
        self._require_group(tournament_id, group_id)
        with _repository_errors():
            return self._groups.find_by_tournament_id_and_group_id(tournament_id, group_id)

    def create_group(self, tournament_id: str, group: Group) -> str:
        _ensure(group.name, Error.INVALID_FORMAT)
        tournament = self._require_tournament(tournament_id)
        _ensure(len(group.teams) <= MAX_TEAMS_PER_GROUP, Error.UNPROCESSABLE_ENTITY)

        new_group = replace(group, tournament_id=tournament.id)
        for team in new_group.teams:
            _ensure(is_valid_id(team.id), Error.INVALID_FORMAT)
            _ensure(self._teams.read_by_id(team.id) is not None, Error.NOT_FOUND)

        with _repository_errors(duplicates=True):
            group_id = self._groups.create(new_group)
            if new_group.teams:
                self._announce(tournament_id, group_id, "")
        return group_id

    def update_group(self, tournament_id: str, group: Group, group_id: str) -> None:
        _ensure(group.name, Error.INVALID_FORMAT)
        self._require_group(tournament_id, group_id)
        updated = replace(group, id=group_id, tournament_id=tournament_id)
        with _repository_errors(duplicates=True):
            self._groups.update(updated)

    def remove_group(self, tournament_id: str, group_id: str) -> None:
        self._require_group(tournament_id, group_id)
        with _repository_errors():
            self._groups.delete(group_id)

    def update_teams(self, tournament_id: str, group_id: str, teams: Sequence[Team]) -> None:
        group = self._require_group(tournament_id, group_id)
        _ensure(
            len(group.teams) + len(teams) <= MAX_TEAMS_PER_GROUP, Error.UNPROCESSABLE_ENTITY
        )

        for team in teams:
            _ensure(is_valid_id(team.id), Error.INVALID_FORMAT)
            _ensure(
                self._groups.find_by_group_id_and_team_id(group_id, team.id) is None,
                Error.DUPLICATE,
            )
            persisted = self._teams.read_by_id(team.id)
            _ensure(persisted is not None, Error.UNPROCESSABLE_ENTITY)
            with _repository_errors():
                self._groups.update_group_add_team(group_id, persisted)
                self._announce(tournament_id, group_id, team.id)