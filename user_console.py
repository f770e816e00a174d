"""Console front end for the user management service.

This module implements the list + form client of the service.  It
talks to the API exclusively through :class:`UserManagementAPI` and
keeps no data of its own between actions: after every successful
create, update or delete it reloads the full list and the user count
from the server.

Features:

* Show all users in a table together with the ``Total users`` line.
* Create a user through a two-field form (name, email).
* Edit an existing user; the form starts out with the current values.
* Delete a user after confirmation.
* Validate the form locally: a blank name or email blocks submission
  before any request is sent.

Run it against a running API with::

    USER_API_BASE_URL=http://localhost:8080 python user_console.py

Commands are read from stdin: ``list``, ``new``, ``edit <id>``,
``delete <id>``, ``help`` and ``quit``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from user_management_client import UserManagementAPI


logger = logging.getLogger(__name__)

FILL_ALL_FIELDS = "Please fill in all fields"

HELP_TEXT = (
    "Commands:\n"
    "  list          reload and show all users\n"
    "  new           create a user\n"
    "  edit <id>     edit a user\n"
    "  delete <id>   delete a user\n"
    "  help          show this help\n"
    "  quit          exit"
)


class ValidationError(ValueError):
    """Raised when the user form is submitted with missing fields."""


def validate_form(name: Optional[str], email: Optional[str]) -> Dict[str, str]:
    """Return the cleaned form data or raise :class:`ValidationError`."""
    name = (name or "").strip()
    email = (email or "").strip()
    if not name or not email:
        raise ValidationError(FILL_ALL_FIELDS)
    return {"name": name, "email": email}


class UserConsole:
    """List and form views over the user management API."""

    def __init__(
        self,
        api: Optional[UserManagementAPI] = None,
        *,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.api = api or UserManagementAPI()
        self.input = input_func
        self.output = output
        self.users: List[Dict[str, Any]] = []
        self.user_count = ""
        self.selected_user: Optional[Dict[str, Any]] = None
        self.is_creating = False
        self.is_editing = False
        self.error_message = ""

    # ------------------------------------------------------------------
    # List view
    # ------------------------------------------------------------------
    def load_users(self) -> None:
        users, error = self.api.list_users()
        if error:
            self.error_message = f"Error loading users: {error['message']}"
            return
        self.users = users
        self.error_message = ""

    def load_user_count(self) -> None:
        count, error = self.api.get_user_count()
        if error:
            # The list view stays usable without the count.
            logger.error("Error loading user count: %s", error["message"])
            return
        self.user_count = count or ""

    def refresh(self) -> None:
        self.load_users()
        self.load_user_count()

    def delete(self, user_id: int, confirm: Optional[Callable[[str], bool]] = None) -> bool:
        """Delete a user after confirmation.  Returns ``True`` on success."""
        if confirm is not None and not confirm("Are you sure you want to delete this user?"):
            return False
        _, error = self.api.delete_user(user_id)
        if error:
            self.error_message = f"Error deleting user: {error['message']}"
            return False
        self.error_message = ""
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Form view
    # ------------------------------------------------------------------
    def start_create(self) -> None:
        self.is_creating = True
        self.is_editing = False
        self.selected_user = None
        self.error_message = ""

    def start_edit(self, user_id: int) -> bool:
        """Open the form for a user from the current list."""
        for user in self.users:
            if user.get("id") == user_id:
                self.selected_user = dict(user)
                self.is_editing = True
                self.is_creating = False
                self.error_message = ""
                return True
        self.error_message = f"User {user_id} not found"
        return False

    def cancel(self) -> None:
        self.is_creating = False
        self.is_editing = False
        self.selected_user = None
        self.error_message = ""

    def submit(self, name: Optional[str], email: Optional[str]) -> bool:
        """Submit the open form.

        Creates a user, or updates ``selected_user`` when editing.  On
        success the form is closed and the list and count are reloaded.
        On failure the form stays open and ``error_message`` is set.
        """
        try:
            form = validate_form(name, email)
        except ValidationError as exc:
            self.error_message = str(exc)
            return False

        if self.is_editing and self.selected_user and self.selected_user.get("id"):
            _, error = self.api.update_user(self.selected_user["id"], form["name"], form["email"])
            if error:
                self.error_message = f"Error updating user: {error['message']}"
                return False
        else:
            _, error = self.api.create_user(form["name"], form["email"])
            if error:
                self.error_message = f"Error creating user: {error['message']}"
                return False

        self.cancel()
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """Render the user table, the count line and any error message."""
        lines = []
        if self.users:
            id_width = max(len("ID"), *(len(str(u.get("id", ""))) for u in self.users))
            name_width = max(len("Name"), *(len(str(u.get("name", ""))) for u in self.users))
            lines.append(f"{'ID':<{id_width}}  {'Name':<{name_width}}  Email")
            for user in self.users:
                lines.append(
                    f"{str(user.get('id', '')):<{id_width}}  "
                    f"{str(user.get('name', '')):<{name_width}}  {user.get('email', '')}"
                )
        else:
            lines.append("No users found.")
        if self.user_count:
            lines.append(self.user_count)
        if self.error_message:
            lines.append(f"! {self.error_message}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Interactive loop
    # ------------------------------------------------------------------
    def _prompt_form(self) -> bool:
        current = self.selected_user or {}
        name = self.input(f"Name [{current.get('name', '')}]: ") or current.get("name", "")
        email = self.input(f"Email [{current.get('email', '')}]: ") or current.get("email", "")
        return self.submit(name, email)

    def _confirm(self, question: str) -> bool:
        return self.input(f"{question} [y/N]: ").strip().lower() in {"y", "yes"}

    def _parse_id(self, args: List[str]) -> Optional[int]:
        if len(args) != 1:
            self.output("A user id is required")
            return None
        try:
            return int(args[0])
        except ValueError:
            self.output(f"Invalid user id: {args[0]}")
            return None

    def handle_command(self, line: str) -> bool:
        """Execute one command line.  Returns ``False`` when the loop should stop."""
        parts = line.strip().split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]
        if command in {"quit", "exit", "q"}:
            return False
        if command == "help":
            self.output(HELP_TEXT)
            return True
        if command == "list":
            self.refresh()
        elif command == "new":
            self.start_create()
            if not self._prompt_form():
                self.cancel_keeping_error()
        elif command == "edit":
            user_id = self._parse_id(args)
            if user_id is None:
                return True
            if self.start_edit(user_id) and not self._prompt_form():
                self.cancel_keeping_error()
        elif command == "delete":
            user_id = self._parse_id(args)
            if user_id is None:
                return True
            self.delete(user_id, confirm=self._confirm)
        else:
            self.output(f"Unknown command: {command}")
            self.output(HELP_TEXT)
            return True
        self.output(self.render())
        return True

    def cancel_keeping_error(self) -> None:
        """Close the form but keep its error visible in the next render."""
        error = self.error_message
        self.cancel()
        self.error_message = error

    def run(self) -> None:
        """Run the interactive loop until ``quit`` or end of input."""
        self.refresh()
        self.output(self.render())
        self.output(HELP_TEXT)
        while True:
            try:
                line = self.input("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle_command(line):
                break


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    UserConsole().run()


if __name__ == "__main__":
    main()
