# tourneyhub

A service layer for running tournaments. It tracks teams, tournaments, the
groups inside a tournament and the matches played in it. Requests come in as
HTTP-style calls (a method, a path and an optional body), and the answers go
back as `Response` objects that hold a status code, a body and headers.

## Layers

- **Domain** (`tourneyhub.domain`): the dataclasses `Team`, `Tournament`,
  `Group`, `Score` and `Match`. Each one has `to_json()` and the class method
  `from_json()`, and the JSON keys are camelCase (`tournamentId`,
  `homeTeamId`, `homeTeamScore` and so on). `is_valid_id(value)` accepts a
  non-empty string made only of letters, digits and hyphens.
- **Delegates** hold the business rules:
  - `tourneyhub.team_delegate.TeamDelegate`
  - `tourneyhub.tournament_delegate.TournamentDelegate`
  - `tourneyhub.group_delegate.GroupDelegate`
  - `tourneyhub.match_delegate.MatchDelegate`

  A delegate reports a failure by raising `tourneyhub.errors.ServiceError`.
  Its `error` attribute is one of the `Error` kinds: `NOT_FOUND`,
  `INVALID_FORMAT`, `DUPLICATE`, `UNPROCESSABLE_ENTITY` or `UNKNOWN_ERROR`.
- **Controllers** turn requests into delegate calls and delegate results into
  `tourneyhub.web.Response`:
  - `TeamController`
  - `TournamentController`
  - `GroupController`
  - `MatchController`

  `Response.header(name)` looks a header up without regard to case.
- **Routing**: `tourneyhub.router.build_router()` returns a `Router` with every
  route registered. `Router.dispatch(method, path, body)` runs the matching
  handler. It answers 404 for an unknown path and 405 when the path is known
  but the method is not. A handler that raises is answered with 500.

## Business rules

- Identifiers must pass `is_valid_id`. A bad identifier gives
  `INVALID_FORMAT`.
- A new team or tournament must have a name and no id.
- A group holds at most 32 teams. If a request would go over that limit, the
  delegate raises `UNPROCESSABLE_ENTITY`.
- Adding a team that is already in the group gives `DUPLICATE`.
- Adding a team that does not exist gives `UNPROCESSABLE_ENTITY`.
- Scores must be non-negative integers.

## Status codes

Service errors map to status codes through `tourneyhub.web.status_for`:

| Error            | Status |
|------------------|--------|
| `NOT_FOUND`      | 404    |
| `INVALID_FORMAT` | 400    |
| `DUPLICATE`      | 409    |
| any other error  | 500    |

The group resource uses `group_status_for` instead. It is the same mapping,
except that `UNPROCESSABLE_ENTITY` maps to 406.

## Supplying storage and messaging

Your code provides the storage and the messaging by implementing the protocols
in `tourneyhub.ports`:

- `TeamRepository`
- `TournamentRepository`
- `GroupRepository`
- `MatchRepository`
- `MessageProducer`

A repository reports a unique-constraint conflict by raising
`tourneyhub.errors.UniqueViolation` with sqlstate `"23505"`. It reports a
malformed value by raising `tourneyhub.errors.DataException` with sqlstate
`"22P02"`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from tourneyhub.team_delegate import TeamDelegate
from tourneyhub.tournament_delegate import TournamentDelegate
from tourneyhub.group_delegate import GroupDelegate
from tourneyhub.match_delegate import MatchDelegate
from tourneyhub.team_controller import TeamController
from tourneyhub.tournament_controller import TournamentController
from tourneyhub.group_controller import GroupController
from tourneyhub.match_controller import MatchController
from tourneyhub.router import build_router

router = build_router(
    TeamController(TeamDelegate(team_repo)),
    TournamentController(TournamentDelegate(tournament_repo)),
    GroupController(GroupDelegate(tournament_repo, group_repo, team_repo, producer)),
    MatchController(MatchDelegate(match_repo, tournament_repo, producer)),
)

response = router.dispatch("POST", "/teams", '{"name": "New Team"}')
print(response.code, response.body)
```

## Routes

| Method | Path                                             |
|--------|--------------------------------------------------|
| GET    | `/teams`, `/teams/<id>`                          |
| POST   | `/teams`                                         |
| PATCH  | `/teams/<id>`                                    |
| DELETE | `/teams/<id>`                                    |
| GET    | `/tournaments`, `/tournaments/<id>`              |
| POST   | `/tournaments`                                   |
| PATCH  | `/tournaments/<id>`                              |
| DELETE | `/tournaments/<id>`                              |
| GET    | `/tournaments/<id>/groups`, `.../groups/<g>`     |
| POST   | `/tournaments/<id>/groups`                       |
| PATCH  | `/tournaments/<id>/groups/<g>`                   |
| PATCH  | `/tournaments/<id>/groups/<g>/teams`             |
| DELETE | `/tournaments/<id>/groups/<g>`                   |
| GET    | `/tournaments/<id>/matches`, `.../matches/<m>`   |
| PATCH  | `/tournaments/<id>/matches/<m>`                  |

A score update takes a body such as
`{"score": {"homeTeamScore": 3, "visitorTeamScore": 2}}`.

## Messages

The delegates send compact JSON messages through your `MessageProducer`:

- **`tournament.team-add`**: fields `tournamentId`, `groupId` and `teamId`.
  It is sent once for each team added to a group. It is also sent once, with
  an empty `teamId`, when a group is created with teams.
- **`tournament.score-update`**: fields `tournamentId`, `matchId`,
  `homeTeamScore` and `visitorTeamScore`. It is sent when a score is recorded.
  If sending fails, the failure is logged and the update still succeeds.

## What the package does not do

- It has no database-backed repositories and no message-queue client. You
  supply both through the protocols in `tourneyhub.ports`.
- It has no network server and no command-line program. `Router.dispatch` is
  the entry point, and you call it from whatever server you use.
- It does not generate brackets or schedule matches. It only reads matches and
  updates their scores.