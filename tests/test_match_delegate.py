import json
from unittest.mock import Mock

import pytest

from tourneyhub.domain import Match, Score, Tournament
from tourneyhub.errors import Error, ServiceError
from tourneyhub.match_delegate import MatchDelegate

TOURNAMENT_ID = "550e8400-e29b-41d4-a716-446655440000"
MATCH_ID = "880e8400-e29b-41d4-a716-446655440003"


@pytest.fixture
def match_repository():
    return Mock()


@pytest.fixture
def tournament_repository():
    return Mock()


@pytest.fixture
def producer():
    return Mock()


@pytest.fixture
def delegate(match_repository, tournament_repository, producer):
    return MatchDelegate(match_repository, tournament_repository, producer)


@pytest.fixture
def known_tournament(tournament_repository):
    tournament_repository.read_by_id.return_value = Tournament("Test Tournament", TOURNAMENT_ID)


@pytest.fixture
def existing_match(match_repository):
    match_repository.find_by_tournament_id_and_match_id.return_value = Match(
        id=MATCH_ID, tournament_id=TOURNAMENT_ID
    )


def _score_match(home, visitor, match_id=MATCH_ID, tournament_id=TOURNAMENT_ID):
    return Match(id=match_id, tournament_id=tournament_id, score=Score(home, visitor))


def _error_of(call, *args):
    with pytest.raises(ServiceError) as info:
        call(*args)
    return info.value.error


@pytest.mark.usefixtures("known_tournament")
def test_get_matches_ok(delegate, match_repository, tournament_repository):
    match_repository.find_by_tournament_id.return_value = [
        Match(id="660e8400-e29b-41d4-a716-446655440001", tournament_id=TOURNAMENT_ID),
        Match(id="770e8400-e29b-41d4-a716-446655440002", tournament_id=TOURNAMENT_ID),
    ]
    assert len(delegate.get_matches(TOURNAMENT_ID)) == 2
    tournament_repository.read_by_id.assert_called_once_with(TOURNAMENT_ID)
    match_repository.find_by_tournament_id.assert_called_once_with(TOURNAMENT_ID)


@pytest.mark.usefixtures("known_tournament")
def test_get_matches_empty(delegate, match_repository):
    match_repository.find_by_tournament_id.return_value = []
    assert delegate.get_matches(TOURNAMENT_ID) == []


@pytest.mark.parametrize(
    "method,args",
    [("get_matches", (TOURNAMENT_ID,)), ("get_match", (TOURNAMENT_ID, MATCH_ID))],
)
def test_tournament_not_found(delegate, tournament_repository, method, args):
    tournament_repository.read_by_id.return_value = None
    assert _error_of(getattr(delegate, method), *args) is Error.NOT_FOUND


@pytest.mark.parametrize(
    "method,args",
    [("get_matches", ("invalid-id-format!@#",)), ("get_match", ("invalid!@#", MATCH_ID))],
)
def test_invalid_format(delegate, tournament_repository, method, args):
    assert _error_of(getattr(delegate, method), *args) is Error.INVALID_FORMAT
    tournament_repository.read_by_id.assert_not_called()


@pytest.mark.usefixtures("known_tournament")
def test_get_match_ok(delegate, match_repository):
    match_repository.find_by_tournament_id_and_match_id.return_value = Match(
        id=MATCH_ID,
        tournament_id=TOURNAMENT_ID,
        home_team_id="aa0e8400-e29b-41d4-a716-446655440011",
        visitor_team_id="bb0e8400-e29b-41d4-a716-446655440022",
    )
    match = delegate.get_match(TOURNAMENT_ID, MATCH_ID)
    assert (match.id, match.tournament_id) == (MATCH_ID, TOURNAMENT_ID)
    match_repository.find_by_tournament_id_and_match_id.assert_called_once_with(
        TOURNAMENT_ID, MATCH_ID
    )


@pytest.mark.usefixtures("existing_match")
@pytest.mark.parametrize("home,visitor", [(3, 2), (0, 0)])
def test_update_match_score_ok(delegate, match_repository, producer, home, visitor):
    assert delegate.update_match_score(_score_match(home, visitor)) == MATCH_ID
    match_repository.update_match_score.assert_called_once_with(MATCH_ID, Score(home, visitor))
    assert producer.send_message.call_count == 1
    assert producer.send_message.call_args.args[1] == "tournament.score-update"


def test_update_match_score_match_not_found(delegate, match_repository):
    match_repository.find_by_tournament_id_and_match_id.return_value = None
    match = _score_match(3, 2, match_id="990e8400-e29b-41d4-a716-446655440099")
    assert _error_of(delegate.update_match_score, match) is Error.NOT_FOUND


def test_update_match_score_invalid_format(delegate, match_repository):
    match = _score_match(3, 2, match_id="invalid!@#", tournament_id="invalid-tournament!@#")
    assert _error_of(delegate.update_match_score, match) is Error.INVALID_FORMAT
    match_repository.find_by_tournament_id_and_match_id.assert_not_called()


@pytest.mark.usefixtures("existing_match")
@pytest.mark.parametrize("home,visitor", [(-1, 2), (-1, -2)])
def test_update_match_score_negative(delegate, match_repository, producer, home, visitor):
    assert _error_of(delegate.update_match_score, _score_match(home, visitor)) is Error.INVALID_FORMAT
    match_repository.update_match_score.assert_not_called()
    producer.send_message.assert_not_called()


@pytest.mark.usefixtures("existing_match")
def test_update_match_score_message_contents(delegate, producer):
    assert delegate.update_match_score(_score_match(5, 3)) == MATCH_ID
    message = producer.send_message.call_args.args[0]
    for fragment in (
        '"tournamentId":"' + TOURNAMENT_ID + '"',
        '"matchId":"' + MATCH_ID + '"',
        '"homeTeamScore":5',
        '"visitorTeamScore":3',
    ):
        assert fragment in message
    assert json.loads(message) == {
        "tournamentId": TOURNAMENT_ID,
        "matchId": MATCH_ID,
        "homeTeamScore": 5,
        "visitorTeamScore": 3,
    }


@pytest.mark.usefixtures("existing_match")
def test_update_match_score_survives_messaging_failure(delegate, match_repository, producer):
    producer.send_message.side_effect = RuntimeError("broker down")
    assert delegate.update_match_score(_score_match(1, 0)) == MATCH_ID
    match_repository.update_match_score.assert_called_once_with(MATCH_ID, Score(1, 0))