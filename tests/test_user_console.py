"""
Tests for the console front end.
"""
from unittest.mock import MagicMock

import pytest

from user_console import FILL_ALL_FIELDS, UserConsole, ValidationError, validate_form
from user_management_client import UserManagementAPI


JOHN = {"id": 1, "name": "John Doe", "email": "john@example.com"}
JANE = {"id": 2, "name": "Jane Smith", "email": "jane@example.com"}


@pytest.fixture
def api():
    api = MagicMock(spec=UserManagementAPI)
    api.list_users.return_value = ([JOHN], None)
    api.get_user_count.return_value = ("Total users: 1", None)
    return api


@pytest.fixture
def console(api):
    return UserConsole(api, input_func=MagicMock(), output=MagicMock())


def test_validate_form():
    assert validate_form(" John ", "john@example.com") == {"name": "John", "email": "john@example.com"}
    with pytest.raises(ValidationError):
        validate_form("", "john@example.com")
    with pytest.raises(ValidationError):
        validate_form("John", "   ")


def test_refresh_loads_list_and_count(console, api):
    console.refresh()

    assert console.users == [JOHN]
    assert console.user_count == "Total users: 1"


def test_blank_form_makes_no_request(console, api):
    console.start_create()

    assert console.submit("John Doe", "") is False

    assert console.error_message == FILL_ALL_FIELDS
    api.create_user.assert_not_called()
    api.update_user.assert_not_called()


def test_create_reloads_list(console, api):
    api.create_user.return_value = (JANE, None)
    api.list_users.return_value = ([JOHN, JANE], None)
    api.get_user_count.return_value = ("Total users: 2", None)
    console.start_create()

    assert console.submit("Jane Smith", "jane@example.com") is True

    api.create_user.assert_called_once_with("Jane Smith", "jane@example.com")
    assert console.users == [JOHN, JANE]
    assert console.user_count == "Total users: 2"
    assert not console.is_creating


def test_create_error_is_shown(console, api):
    api.create_user.return_value = (
        None,
        {"status_code": 400, "message": "User with email john@example.com already exists"},
    )
    console.start_create()

    assert console.submit("John Again", "john@example.com") is False

    assert console.error_message == "Error creating user: User with email john@example.com already exists"
    assert console.is_creating
    api.list_users.assert_not_called()


def test_edit_updates_selected_user(console, api):
    console.refresh()
    api.update_user.return_value = ({**JOHN, "name": "John Updated"}, None)

    assert console.start_edit(1) is True
    assert console.selected_user == JOHN
    assert console.submit("John Updated", "john@example.com") is True

    api.update_user.assert_called_once_with(1, "John Updated", "john@example.com")
    api.create_user.assert_not_called()
    assert console.selected_user is None


def test_start_edit_unknown_user(console):
    console.refresh()

    assert console.start_edit(99) is False
    assert console.error_message == "User 99 not found"


def test_delete_requires_confirmation(console, api):
    assert console.delete(1, confirm=lambda question: False) is False
    api.delete_user.assert_not_called()


def test_delete_reloads_list(console, api):
    api.delete_user.return_value = (True, None)
    api.list_users.return_value = ([], None)
    api.get_user_count.return_value = ("Total users: 0", None)

    assert console.delete(1, confirm=lambda question: True) is True

    assert console.users == []
    assert console.user_count == "Total users: 0"


def test_delete_error_is_shown(console, api):
    api.delete_user.return_value = (False, {"status_code": 404, "message": "User not found"})

    assert console.delete(1) is False
    assert console.error_message == "Error deleting user: User not found"


def test_render(console):
    console.refresh()

    rendered = console.render()

    assert "John Doe" in rendered
    assert "john@example.com" in rendered
    assert rendered.splitlines()[-1] == "Total users: 1"


def test_render_empty_list_with_error(console, api):
    api.list_users.return_value = ([], {"status_code": None, "message": "connection refused"})

    console.load_users()

    assert console.render() == "No users found.\n! Error loading users: connection refused"


def test_handle_new_command_prompts_for_fields(console, api):
    console.input.side_effect = ["Jane Smith", "jane@example.com"]
    api.create_user.return_value = (JANE, None)

    assert console.handle_command("new") is True

    api.create_user.assert_called_once_with("Jane Smith", "jane@example.com")
    console.output.assert_called()


def test_handle_edit_command_keeps_current_values(console, api):
    console.refresh()
    console.input.side_effect = ["", "john.new@example.com"]
    api.update_user.return_value = ({**JOHN, "email": "john.new@example.com"}, None)

    console.handle_command("edit 1")

    api.update_user.assert_called_once_with(1, "John Doe", "john.new@example.com")


def test_handle_quit(console):
    assert console.handle_command("quit") is False


def test_run_stops_at_end_of_input(console, api):
    console.input.side_effect = ["list", EOFError()]

    console.run()

    assert api.list_users.call_count == 2
