"""HTTP handlers for the team resource."""

from __future__ import annotations

import functools
import json
from collections.abc import Callable
from http import HTTPStatus
from typing import Any, Optional

from .domain import Team, is_valid_id
from .errors import ServiceError
from .team_delegate import TeamDelegate
from .web import JSON_CONTENT_TYPE, Response, status_for


def _answers_service_errors(handler: Callable[..., Response]) -> Callable[..., Response]:
    """Turn a ServiceError raised by the handler into an error response."""

    @functools.wraps(handler)
    def wrapper(*args: Any, **kwargs: Any) -> Response:
        try:
            return handler(*args, **kwargs)
        except ServiceError as exc:
            return Response(status_for(exc.error), "Error")

    return wrapper


def _requires_valid_id(handler: Callable[..., Response]) -> Callable[..., Response]:
    """Answer 400 before calling the handler when the team id is malformed."""

    @functools.wraps(handler)
    def wrapper(self: "TeamController", team_id: str) -> Response:
        if not is_valid_id(team_id):
            return Response(HTTPStatus.BAD_REQUEST, "Invalid ID format")
        return handler(self, team_id)

    return wrapper


def _json_response(payload: Any) -> Response:
    return Response(
        HTTPStatus.OK,
        json.dumps(payload, separators=(",", ":")),
        {"Content-Type": JSON_CONTENT_TYPE},
    )


def _team_from_body(body: str | bytes) -> Optional[Team]:
    """Decode a request body into a Team, or None when it is not a valid team."""
    try:
        return Team.from_json(json.loads(body))
    except (ValueError, TypeError):
        return None


class TeamController:
    """Turns team requests into delegate calls and delegate results into responses."""

    def __init__(self, delegate: TeamDelegate) -> None:
        self._delegate = delegate

    @_answers_service_errors
    @_requires_valid_id
    def get_team(self, team_id: str) -> Response:
        return _json_response(self._delegate.get_team(team_id).to_json())

    @_answers_service_errors
    def get_all_teams(self) -> Response:
        teams = self._delegate.get_all_teams()
        return _json_response([team.to_json() if team else None for team in teams])

    @_answers_service_errors
    def create_team(self, body: str | bytes) -> Response:
        team = _team_from_body(body)
        if team is None:
            return Response(HTTPStatus.BAD_REQUEST)
        new_id = self._delegate.create_team(team)
        return Response(HTTPStatus.CREATED, new_id, {"Content-Type": "text/plain"})

    @_answers_service_errors
    def update_team(self, body: str | bytes, team_id: str) -> Response:
        team = _team_from_body(body)
        if team is None:
            return Response(HTTPStatus.BAD_REQUEST, "Invalid JSON format")
        if team.id:
            return Response(HTTPStatus.BAD_REQUEST, "ID is not editable")
        team.id = team_id
        updated = self._delegate.update_team(team)
        return Response(HTTPStatus.OK, updated, {"Content-Type": JSON_CONTENT_TYPE})

    @_answers_service_errors
    @_requires_valid_id
    def delete_team(self, team_id: str) -> Response:
        self._delegate.delete_team(team_id)
        return Response(HTTPStatus.NO_CONTENT, "")