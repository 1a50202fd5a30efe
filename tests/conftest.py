"""Pytest fixtures shared by every test.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest

from tests.fakes import InMemoryFileSystem
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    The match engine reads local files only, so no test has a reason to open a socket.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture(autouse=True)
def isolate_match_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear MATCH_* variables so a developer's shell or .env cannot leak into tests."""
    for name in (
        "MATCH_JOBSCOPE_FUZZY_THRESHOLD",
        "MATCH_PREFERENCE_FUZZY_THRESHOLD",
        "MATCH_URGENT_DAYS",
        "MATCH_NEAR_DAYS",
        "MATCH_MAX_WORKERS",
        "MATCH_TOP_N",
        "MATCH_CANDIDATE_CACHE_TTL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()
