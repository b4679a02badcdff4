"""Business rules for matches and score updates."""

from __future__ import annotations

import json
import logging
from typing import Optional

from .domain import Match
from .errors import Error, ServiceError
from .ports import MatchRepository, MessageProducer, TournamentRepository
from .team_delegate import _require_valid_ids

logger = logging.getLogger(__name__)

SCORE_UPDATE_QUEUE = "tournament.score-update"


class MatchDelegate:
    """Reads matches and records scores, announcing each score update."""

    def __init__(
        self,
        match_repository: MatchRepository,
        tournament_repository: TournamentRepository,
        message_producer: MessageProducer,
    ) -> None:
        self._matches = match_repository
        self._tournaments = tournament_repository
        self._producer = message_producer

    def _require_tournament(self, tournament_id: str) -> None:
        if not self._tournaments.read_by_id(tournament_id):
            raise ServiceError(Error.NOT_FOUND)

    def get_matches(self, tournament_id: str) -> list[Match]:
        _require_valid_ids(tournament_id)
        self._require_tournament(tournament_id)
        return self._matches.find_by_tournament_id(tournament_id)

    def get_match(self, tournament_id: str, match_id: str) -> Optional[Match]:
        _require_valid_ids(tournament_id, match_id)
        self._require_tournament(tournament_id)
        return self._matches.find_by_tournament_id_and_match_id(tournament_id, match_id)

    def update_match_score(self, match: Match) -> str:
        _require_valid_ids(match.tournament_id, match.id)
        if not self._matches.find_by_tournament_id_and_match_id(match.tournament_id, match.id):
            raise ServiceError(Error.NOT_FOUND)
        score = match.score
        if min(score.home_team_score, score.visitor_team_score) < 0:
            raise ServiceError(Error.INVALID_FORMAT)

        self._matches.update_match_score(match.id, score)

        message = json.dumps(
            {
                "tournamentId": match.tournament_id,
                "matchId": match.id,
                "homeTeamScore": score.home_team_score,
                "visitorTeamScore": score.visitor_team_score,
            },
            separators=(",", ":"),
            sort_keys=True,
        )
        try:
            self._producer.send_message(message, SCORE_UPDATE_QUEUE)
        except Exception as exc:
            logger.error("error sending score update message: %s", exc)
        return match.id