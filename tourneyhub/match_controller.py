"""HTTP handlers for the match resource of a tournament."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from .domain import Match
from .errors import ServiceError
from .match_delegate import MatchDelegate
from .web import CONTENT_TYPE_HEADER, JSON_CONTENT_TYPE, Response, status_for


def _dump(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"))


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _bad_request(message: str) -> Response:
    return Response(HTTPStatus.BAD_REQUEST, message)


class MatchController:
    """Turns match requests into delegate calls and delegate results into responses."""

    def __init__(self, delegate: MatchDelegate) -> None:
        self._delegate = delegate

    def get_matches(self, tournament_id: str) -> Response:
        try:
            matches = self._delegate.get_matches(tournament_id)
        except ServiceError as exc:
            return Response(status_for(exc.error))
        payload = [match.to_json() if match else None for match in matches]
        return Response(HTTPStatus.OK, _dump(payload), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})

    def get_match(self, tournament_id: str, match_id: str) -> Response:
        try:
            match = self._delegate.get_match(tournament_id, match_id)
        except ServiceError as exc:
            return Response(status_for(exc.error))
        if match is None:
            return Response(HTTPStatus.NOT_FOUND)
        return Response(
            HTTPStatus.OK, _dump(match.to_json()), {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE}
        )

    def update_match_score(self, body: str | bytes, tournament_id: str, match_id: str) -> Response:
        try:
            data = json.loads(body)
        except ValueError:
            return _bad_request("Invalid JSON format")

        score = data.get("score") if isinstance(data, dict) else None
        if not isinstance(score, dict):
            return _bad_request("Missing or invalid score object")

        home = score.get("homeTeamScore")
        visitor = score.get("visitorTeamScore")
        if not (_is_integer(home) and _is_integer(visitor)):
            return _bad_request("score must contain integer homeTeamScore and visitorTeamScore")
        if home < 0 or visitor < 0:
            return _bad_request("Scores must be non-negative")

        match = Match.from_json(data)
        if match.tournament_id and match.tournament_id != tournament_id:
            return _bad_request("Tournament ID in body does not match path")
        match.tournament_id = tournament_id
        if match.id and match.id != match_id:
            return _bad_request("Match ID in body does not match path")
        match.id = match_id

        try:
            result = self._delegate.update_match_score(match)
        except ServiceError as exc:
            return Response(status_for(exc.error), "Error")
        return Response(HTTPStatus.OK, result, {CONTENT_TYPE_HEADER: JSON_CONTENT_TYPE})