from __future__ import annotations

import platform
import sys
from typing import Callable

from slsdiag.version import __version__

from .types import EnvironmentSnapshot

EnvironmentProvider = Callable[[], EnvironmentSnapshot]


def capture_environment() -> EnvironmentSnapshot:
    """
    Snapshot the running process: platform id, Python version, tool version.

    Usage example
    -------------
        env = capture_environment()
        env.operating_system  # "linux", "darwin", "win32", ...
    """
    return EnvironmentSnapshot(
        operating_system=sys.platform,
        runtime_version=platform.python_version(),
        tool_version=__version__,
    )


def fixed_environment(snapshot: EnvironmentSnapshot) -> EnvironmentProvider:
    """Return a provider that always yields `snapshot`."""

    def _provider() -> EnvironmentSnapshot:
        return snapshot

    return _provider
