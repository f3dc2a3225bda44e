"""Locations of the per-user credential data."""

from __future__ import annotations

import os
import stat

DATA_DIR_NAME = ".oauth-cred"
DB_FILE_NAME = "credential"
DB_FILE_EXT = ".db"


def _home_directory(home: str | None) -> str:
    if home is not None:
        return home
    env_home = os.environ.get("HOME")
    if env_home is not None:
        return env_home
    try:
        import pwd

        return pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError, AttributeError) as exc:
        raise LookupError("cannot determine the home directory") from exc


def credential_data_directory(home: str | None = None) -> str:
    """Return the credential data directory, ending with a slash."""
    return f"{_home_directory(home)}/{DATA_DIR_NAME}/"


def credential_data_path(home: str | None = None) -> str:
    """Return the path of the credential database file."""
    return f"{credential_data_directory(home)}{DB_FILE_NAME}{DB_FILE_EXT}"


def create_credential_data_directory(home: str | None = None) -> str:
    """Create the credential data directory if it does not exist.

    Returns the directory path. Raises ``NotADirectoryError`` when
    something other than a directory already occupies that path.
    """
    data_dir = credential_data_directory(home)
    try:
        mode = os.stat(data_dir).st_mode
    except FileNotFoundError:
        os.mkdir(data_dir, 0o700)
        return data_dir
    if not stat.S_ISDIR(mode):
        raise NotADirectoryError(data_dir)
    return data_dir