"""Business rules for teams, and the shared rules for simple named entities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from .domain import Team, is_valid_id
from .errors import DataException, Error, ServiceError, UniqueViolation
from .ports import TeamRepository

_Entity = TypeVar("_Entity")


def _require_valid_ids(*ids: str) -> None:
    """Raise INVALID_FORMAT unless every identifier is well formed."""
    if not all(is_valid_id(value) for value in ids):
        raise ServiceError(Error.INVALID_FORMAT)


@contextmanager
def _repository_errors(*, duplicates: bool = False, malformed: bool = False) -> Iterator[None]:
    """Translate repository exceptions into service errors."""
    try:
        yield
    except UniqueViolation as exc:
        if duplicates and exc.sqlstate == "23505":
            raise ServiceError(Error.DUPLICATE) from exc
        raise ServiceError(Error.UNKNOWN_ERROR) from exc
    except DataException as exc:
        if malformed and exc.sqlstate == "22P02":
            raise ServiceError(Error.INVALID_FORMAT) from exc
        raise ServiceError(Error.UNKNOWN_ERROR) from exc
    except Exception as exc:
        raise ServiceError(Error.UNKNOWN_ERROR) from exc


class _EntityDelegate(Generic[_Entity]):
    """CRUD rules shared by entities that carry an id and a name."""

    def __init__(self, repository: Any) -> None:
        self._repository = repository

    def _read_all(self) -> list[_Entity]:
        with _repository_errors():
            return self._repository.read_all()

    def _read(self, entity_id: str) -> _Entity:
        _require_valid_ids(entity_id)
        with _repository_errors(malformed=True):
            entity = self._repository.read_by_id(entity_id)
        if not entity:
            raise ServiceError(Error.NOT_FOUND)
        return entity

    def _create(self, entity: Any) -> str:
        if entity.id or not entity.name:
            raise ServiceError(Error.INVALID_FORMAT)
        with _repository_errors(duplicates=True):
            new_id = self._repository.create(entity)
        if not new_id:
            raise ServiceError(Error.UNKNOWN_ERROR)
        return str(new_id)

    def _update(self, entity: Any) -> str:
        _require_valid_ids(entity.id)
        with _repository_errors(malformed=True):
            updated = self._repository.update(entity)
        if not updated:
            raise ServiceError(Error.NOT_FOUND)
        return str(updated)

    def _delete(self, entity_id: str) -> None:
        with _repository_errors(malformed=True):
            self._repository.delete(entity_id)


class TeamDelegate(_EntityDelegate[Team]):
    """Validates team requests and maps repository failures to service errors."""

    def __init__(self, repository: TeamRepository) -> None:
        super().__init__(repository)

    def get_all_teams(self) -> list[Team]:
        return self._read_all()

    def get_team(self, team_id: str) -> Team:
        return self._read(team_id)

    def create_team(self, team: Team) -> str:
        return self._create(team)

    def update_team(self, team: Team) -> str:
        return self._update(team)

    def delete_team(self, team_id: str) -> None:
        self._delete(team_id)