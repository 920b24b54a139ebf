"""Local session storage for tripcal.

A small key-value store kept next to the config file. Login itself
happens elsewhere; this module only remembers what it was given.
"""

import os
import tomllib
from pathlib import Path

import tomli_w

from tripcal.config import get_config_dir

USER_TOKEN = "user_token"
USER_ID = "user_id"
USER_EMAIL = "user_email"
USER_ROLE = "user_role"

SESSION_KEYS = (USER_TOKEN, USER_ID, USER_EMAIL, USER_ROLE)


def get_session_path() -> Path:
    """Get the session file path."""
    return get_config_dir() / "session.toml"


class SessionStore:
    """Key-value session store backed by a TOML file.

    Args:
        path: Session file. If None, uses the default location.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_session_path()

    def load(self) -> dict[str, str]:
        """Read all stored values. A missing file is an empty session."""
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return {}
        return {key: str(value) for key, value in data.items() if key in SESSION_KEYS}

    def get(self, key: str) -> str | None:
        return self.load().get(key)

    def save_user_details(self, token: str, user_id: str, email: str | None = None, role: str | None = None) -> None:
        """Store the details of a logged in user, replacing any previous session."""
        values = {USER_TOKEN: token, USER_ID: user_id}
        if email:
            values[USER_EMAIL] = email
        if role:
            values[USER_ROLE] = role

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "wb") as f:
            tomli_w.dump(values, f)

        os.chmod(self.path, 0o600)

    def fetch_auth_token(self) -> str | None:
        return self.get(USER_TOKEN)

    def get_user_id(self) -> str | None:
        return self.get(USER_ID)

    def clear(self) -> None:
        """Forget the stored session."""
        self.path.unlink(missing_ok=True)
