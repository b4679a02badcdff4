"""HTTP handlers for the group resource of a tournament."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from .domain import Group, Team
from .errors import ServiceError
from .group_delegate import GroupDelegate
from .web import CONTENT_TYPE_HEADER, JSON_CONTENT_TYPE, Response, group_status_for


def _dump(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"))


def _error(exc: ServiceError) -> Response:
    return Response(group_status_for(exc.error), "Error")


def _parse_teams(data: Any) -> list[Team]:
    if not isinstance(data, list):
        raise TypeError("teams must be a JSON array")
    return [Team.from_json(item) for item in data]


class GroupController:
    """Turns group requests into delegate calls and delegate results into responses.

    Request bodies that are not valid JSON raise ``ValueError``; the router
    reports such failures as internal server errors.
    """

    def __init__(self, delegate: GroupDelegate) -> None:
        self._delegate = delegate

    def get_groups(self, tournament_id: str) -> Response:
        try:
            groups = self._delegate.get_groups(tournament_id)
        except ServiceError as exc:
            return _error(exc)
        payload = [group.to_json() if group else None for group in groups]
        return Response(HTTPStatus.OK, _dump(payload), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})

    def get_group(self, tournament_id: str, group_id: str) -> Response:
        try:
            group = self._delegate.get_group(tournament_id, group_id)
        except ServiceError as exc:
            return _error(exc)
        payload = group.to_json() if group else None
        return Response(HTTPStatus.OK, _dump(payload), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})

    def create_group(self, body: str | bytes, tournament_id: str) -> Response:
        group = Group.from_json(json.loads(body))
        try:
            group_id = self._delegate.create_group(tournament_id, group)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.CREATED, "", {"location": group_id})

    def update_group(self, body: str | bytes, tournament_id: str, group_id: str) -> Response:
        group = Group.from_json(json.loads(body))
        try:
            self._delegate.update_group(tournament_id, group, group_id)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.NO_CONTENT)

    def add_teams(self, body: str | bytes, tournament_id: str, group_id: str) -> Response:
        teams = _parse_teams(json.loads(body))
        try:
            self._delegate.update_teams(tournament_id, group_id, teams)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.NO_CONTENT)

    def remove_group(self, tournament_id: str, group_id: str) -> Response:
        try:
            self._delegate.remove_group(tournament_id, group_id)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.NO_CONTENT, "", {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})