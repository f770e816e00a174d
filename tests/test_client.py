"""
Tests for the requests-based API client.

The session is mocked; responses are real ``requests.Response`` objects
so status handling and body parsing go through the library code.
"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from user_management_client import UserManagementAPI


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test/api/users"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    else:
        response._content = b""
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return UserManagementAPI(base_url="http://api.test/", session=session, timeout=5)


def test_list_users(api, session):
    users = [{"id": 1, "name": "John Doe", "email": "john@example.com"}]
    session.request.return_value = make_response(200, users)

    data, error = api.list_users()

    assert error is None
    assert data == users
    session.request.assert_called_once_with(
        method="GET", url="http://api.test/api/users", json=None, timeout=5
    )


def test_get_user_count_returns_text(api, session):
    session.request.return_value = make_response(200, text="Total users: 3")

    assert api.get_user_count() == ("Total users: 3", None)


def test_create_user_sends_body(api, session):
    created = {"id": 7, "name": "John Doe", "email": "john@example.com"}
    session.request.return_value = make_response(201, created)

    data, error = api.create_user("John Doe", "john@example.com")

    assert data == created
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {"name": "John Doe", "email": "john@example.com"}


def test_http_error_carries_status_and_detail(api, session):
    session.request.return_value = make_response(
        400, {"detail": "User with email john@example.com already exists"}
    )

    data, error = api.create_user("John Doe", "john@example.com")

    assert data is None
    assert error == {
        "status_code": 400,
        "message": "User with email john@example.com already exists",
    }


def test_update_user_not_found(api, session):
    session.request.return_value = make_response(404, {"detail": "User not found"})

    data, error = api.update_user(9, "Ghost", "ghost@example.com")

    assert data is None
    assert error["status_code"] == 404
    assert session.request.call_args.kwargs["url"] == "http://api.test/api/users/9"


def test_delete_user(api, session):
    session.request.return_value = make_response(204)

    assert api.delete_user(1) == (True, None)


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    users, error = api.list_users()

    assert users == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_get_status(api, session):
    session.request.return_value = make_response(200, text="Application is running successfully!")

    assert api.get_status() == ("Application is running successfully!", None)
