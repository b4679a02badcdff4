"""HTTP handlers for the tournament resource."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from .domain import Tournament, is_valid_id
from .errors import ServiceError
from .tournament_delegate import TournamentDelegate
from .web import CONTENT_TYPE_HEADER, JSON_CONTENT_TYPE, Response, status_for


def _dump(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"))


def _error(exc: ServiceError) -> Response:
    return Response(status_for(exc.error), "Error")


class TournamentController:
    """Turns tournament requests into delegate calls and results into responses."""

    def __init__(self, delegate: TournamentDelegate) -> None:
        self._delegate = delegate

    def get_tournament(self, tournament_id: str) -> Response:
        if not is_valid_id(tournament_id):
            return Response(HTTPStatus.BAD_REQUEST, "Invalid ID format")
        try:
            tournament = self._delegate.get_tournament(tournament_id)
        except ServiceError as exc:
            return _error(exc)
        return Response(
            HTTPStatus.OK, _dump(tournament.to_json()), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE}
        )

    def read_all(self) -> Response:
        try:
            tournaments = self._delegate.read_all()
        except ServiceError as exc:
            return _error(exc)
        payload = [t.to_json() if t else None for t in tournaments]
        return Response(HTTPStatus.OK, _dump(payload), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})

    def create_tournament(self, body: str | bytes) -> Response:
        try:
            tournament = Tournament.from_json(json.loads(body))
        except (ValueError, TypeError):
            return Response(HTTPStatus.BAD_REQUEST)
        try:
            new_id = self._delegate.create_tournament(tournament)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.CREATED, "", {"Location": new_id})

    def update_tournament(self, body: str | bytes, tournament_id: str) -> Response:
        try:
            tournament = Tournament.from_json(json.loads(body))
        except (ValueError, TypeError):
            return Response(HTTPStatus.BAD_REQUEST, "Invalid JSON format")
        if tournament.id:
            return Response(HTTPStatus.BAD_REQUEST, "ID is not editable")
        tournament.id = tournament_id
        try:
            self._delegate.update_tournament(tournament)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.NO_CONTENT, "")

    def delete_tournament(self, tournament_id: str) -> Response:
        if not is_valid_id(tournament_id):
            return Response(HTTPStatus.BAD_REQUEST, "Invalid ID format")
        try:
            self._delegate.delete_tournament(tournament_id)
        except ServiceError as exc:
            return _error(exc)
        return Response(HTTPStatus.NO_CONTENT, "")