from http import HTTPStatus

import pytest

from tourneyhub.errors import Error
from tourneyhub.web import Response, group_status_for, status_for


@pytest.mark.parametrize(
    "error, expected",
    [
        (Error.NOT_FOUND, HTTPStatus.NOT_FOUND),
        (Error.INVALID_FORMAT, HTTPStatus.BAD_REQUEST),
        (Error.DUPLICATE, HTTPStatus.CONFLICT),
        (Error.UNPROCESSABLE_ENTITY, HTTPStatus.INTERNAL_SERVER_ERROR),
        (Error.UNKNOWN_ERROR, HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


@pytest.mark.parametrize(
    "error, expected",
    [
        (Error.NOT_FOUND, HTTPStatus.NOT_FOUND),
        (Error.INVALID_FORMAT, HTTPStatus.BAD_REQUEST),
        (Error.DUPLICATE, HTTPStatus.CONFLICT),
        (Error.UNPROCESSABLE_ENTITY, HTTPStatus.NOT_ACCEPTABLE),
        (Error.UNKNOWN_ERROR, HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_group_status_for(error, expected):
    assert group_status_for(error) == expected


def test_header_lookup_ignores_case():
    response = Response(HTTPStatus.OK, "", {"Content-Type": "application/json"})
    assert response.header("content-type") == "application/json"
    assert response.header("CONTENT-TYPE") == "application/json"


def test_missing_header_is_empty():
    response = Response(HTTPStatus.NO_CONTENT)
    assert response.header("location") == ""
    assert response.body == ""