"""HTTP response value and the mapping from service errors to status codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus

from .errors import Error

JSON_CONTENT_TYPE = "application/json"
CONTENT_TYPE_HEADER = "content-type"

_STATUS_BY_ERROR = {
    Error.NOT_FOUND: HTTPStatus.NOT_FOUND,
    Error.INVALID_FORMAT: HTTPStatus.BAD_REQUEST,
    Error.DUPLICATE: HTTPStatus.CONFLICT,
}

_GROUP_STATUS_BY_ERROR = {
    **_STATUS_BY_ERROR,
    Error.UNPROCESSABLE_ENTITY: HTTPStatus.NOT_ACCEPTABLE,
}


@dataclass
class Response:
    """An HTTP response: status code, body text and headers."""

    code: int = HTTPStatus.OK
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str:
        """Return the value of header ``name`` (case-insensitive), or "" if absent."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return ""


def status_for(error: Error) -> int:
    """Status code for a service error as reported by most resources."""
    return _STATUS_BY_ERROR.get(error, HTTPStatus.INTERNAL_SERVER_ERROR)


def group_status_for(error: Error) -> int:
    """Status code for a service error as reported by the group resource."""
    return _GROUP_STATUS_BY_ERROR.get(error, HTTPStatus.INTERNAL_SERVER_ERROR)