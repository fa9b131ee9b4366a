"""Test helpers for programs built on bel7_cli."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TypeVar

# Environment variables consulted (directly or by shells) during shell detection
SHELL_DETECTION_ENV_VARS = (
    "SHELL",
    "NU_VERSION",
    "FISH_VERSION",
    "ZSH_VERSION",
    "BASH_VERSION",
    "PSModulePath",
)

EnvT = TypeVar("EnvT", bound=MutableMapping[str, str])


def clear_shell_detection_env(env: EnvT) -> EnvT:
    """Remove the shell detection variables from ``env``.

    Gives consistent shell detection when spawning a program under test:

        env = clear_shell_detection_env(os.environ.copy())
        subprocess.run(["mytool", "completions"], env=env, check=True)

    Returns:
        The same mapping, for chaining.
    """
    for var in SHELL_DETECTION_ENV_VARS:
        env.pop(var, None)
    return env
