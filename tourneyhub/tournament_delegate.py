"""Business rules for tournaments."""

from __future__ import annotations

from .domain import Tournament
from .ports import TournamentRepository
from .team_delegate import _EntityDelegate


class TournamentDelegate(_EntityDelegate[Tournament]):
    """Validates tournament requests and maps repository failures to service errors."""

    def __init__(self, repository: TournamentRepository) -> None:
        super().__init__(repository)

    def read_all(self) -> list[Tournament]:
        return self._read_all()

    def get_tournament(self, tournament_id: str) -> Tournament:
        return self._read(tournament_id)

    def create_tournament(self, tournament: Tournament) -> str:
        return self._create(tournament)

    def update_tournament(self, tournament: Tournament) -> str:
        return self._update(tournament)

    def delete_tournament(self, tournament_id: str) -> None:
        self._delete(tournament_id)