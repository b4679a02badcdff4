"""Maps HTTP methods and paths onto controller handlers."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus

from .group_controller import GroupController
from .match_controller import MatchController
from .team_controller import TeamController
from .tournament_controller import TournamentController
from .web import Response

logger = logging.getLogger(__name__)

_PARAMETER = "<string>"


def _compile(pattern: str) -> re.Pattern[str]:
    parts = pattern.split(_PARAMETER)
    return re.compile("([^/]+)".join(re.escape(part) for part in parts))


@dataclass(frozen=True)
class _Route:
    method: str
    regex: re.Pattern[str]
    handler: Callable[..., Response]
    takes_body: bool


class Router:
    """Routes requests to handlers; ``<string>`` in a pattern captures one path segment."""

    def __init__(self) -> None:
        self._routes: list[_Route] = []

    def add(
        self,
        method: str,
        pattern: str,
        handler: Callable[..., Response],
        takes_body: bool = False,
    ) -> None:
        """Register ``handler`` for ``method`` requests whose path matches ``pattern``."""
        self._routes.append(_Route(method.upper(), _compile(pattern), handler, takes_body))

    def dispatch(self, method: str, path: str, body: str | bytes = "") -> Response:
        """Run the handler registered for the request and return its response."""
        method = method.upper()
        path_matched = False
        for route in self._routes:
            found = route.regex.fullmatch(path)
            if found is None:
                continue
            path_matched = True
            if route.method != method:
                continue
            params = found.groups()
            try:
                if route.takes_body:
                    return route.handler(body, *params)
                return route.handler(*params)
            except Exception:
                logger.exception("handler for %s %s failed", method, path)
                return Response(HTTPStatus.INTERNAL_SERVER_ERROR, "")
        if path_matched:
            return Response(HTTPStatus.METHOD_NOT_ALLOWED, "")
        return Response(HTTPStatus.NOT_FOUND, "")


def build_router(
    team_controller: TeamController,
    tournament_controller: TournamentController,
    group_controller: GroupController,
    match_controller: MatchController,
) -> Router:
    """Return a router serving every resource of the service."""
    router = Router()

    router.add("GET", "/teams/<string>", team_controller.get_team)
    router.add("GET", "/teams", team_controller.get_all_teams)
    router.add("POST", "/teams", team_controller.create_team, takes_body=True)
    router.add("PATCH", "/teams/<string>", team_controller.update_team, takes_body=True)
    router.add("DELETE", "/teams/<string>", team_controller.delete_team)

    router.add("GET", "/tournaments/<string>", tournament_controller.get_tournament)
    router.add(
        "PATCH", "/tournaments/<string>", tournament_controller.update_tournament, takes_body=True
    )
    router.add("DELETE", "/tournaments/<string>", tournament_controller.delete_tournament)
    router.add("POST", "/tournaments", tournament_controller.create_tournament, takes_body=True)
    router.add("GET", "/tournaments", tournament_controller.read_all)

    router.add("GET", "/tournaments/<string>/groups", group_controller.get_groups)
    router.add("GET", "/tournaments/<string>/groups/<string>", group_controller.get_group)
    router.add(
        "POST", "/tournaments/<string>/groups", group_controller.create_group, takes_body=True
    )
    router.add(
        "PATCH",
        "/tournaments/<string>/groups/<string>",
        group_controller.update_group,
        takes_body=True,
    )
    router.add(
        "PATCH",
        "/tournaments/<string>/groups/<string>/teams",
        group_controller.add_teams,
        takes_body=True,
    )
    router.add("DELETE", "/tournaments/<string>/groups/<string>", group_controller.remove_group)

    router.add("GET", "/tournaments/<string>/matches", match_controller.get_matches)
    router.add("GET", "/tournaments/<string>/matches/<string>", match_controller.get_match)
    router.add(
        "PATCH",
        "/tournaments/<string>/matches/<string>",
        match_controller.update_match_score,
        takes_body=True,
    )
    return router