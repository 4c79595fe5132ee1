"""Locating executables through the PATH variable of an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.textops import split_words

_PATH_VARIABLE = "PATH"
_PATH_SEPARATOR = ":"


def get_path_from_env(env: Mapping[str, str]) -> str | None:
    """Return the value of PATH in ``env``, or None when it is not set."""
    return env.get(_PATH_VARIABLE)


def find_command_path(command: str | None, env: Mapping[str, str]) -> str | None:
    """Return the first ``<dir>/<command>`` on PATH that is executable.

    Empty PATH entries are ignored. Returns None for an empty command, a
    missing PATH, or when no directory holds an executable of that name.
    """
    if not command:
        return None
    search_path = get_path_from_env(env)
    if search_path is None:
        return None
    for directory in split_words(search_path, _PATH_SEPARATOR):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None