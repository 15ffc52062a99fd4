"""Reading and writing process environment variables."""

from __future__ import annotations

import os


def _check_name(env_var: str | None) -> str:
    if env_var is None:
        raise RuntimeError("argument env_name is null")
    if not isinstance(env_var, str):
        raise RuntimeError("argument env_name must be a string")
    return env_var


def get_env_var(env_var: str | None) -> str:
    """Return the value of an environment variable, or "" if it is not set.

    Raises RuntimeError if the name is missing.
    """
    name = _check_name(env_var)
    if "\0" in name:
        return ""
    return os.environ.get(name, "")


def set_env_var(env_var: str | None, env_value: str | None) -> bool:
    """Set an environment variable, or unset it when env_value is None.

    Returns True on success and raises RuntimeError on failure.
    """
    name = _check_name(env_var)
    if not name or "=" in name or "\0" in name:
        raise RuntimeError(f"invalid environment variable name: {name!r}")
    if env_value is None:
        os.environ.pop(name, None)
        return True
    if not isinstance(env_value, str) or "\0" in env_value:
        raise RuntimeError(f"invalid value for environment variable {name!r}")
    try:
        os.environ[name] = env_value
    except (OSError, ValueError) as exc:
        raise RuntimeError(str(exc)) from exc
    return True