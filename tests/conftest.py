"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


# =============================================================================
# Server Fixtures
# =============================================================================


@pytest.fixture
def server():
    """The FastMCP server instance."""
    from dinner_wine_mcp.server import mcp
    return mcp


@pytest.fixture
def connect(server):
    """Factory for an in-memory client session connected to the server.

    Use as ``async with connect() as session:`` inside the test so the
    session's task group opens and closes in the same task.
    """
    from mcp.shared.memory import create_connected_server_and_client_session

    def _connect():
        return create_connected_server_and_client_session(server._mcp_server)

    return _connect


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def seeded_rng():
    """Deterministic random source for cuisine fallback tests."""
    return random.Random(1234)


@pytest.fixture
def expected_cuisines():
    """The cuisine list, in order."""
    return [
        "Italian",
        "French",
        "Mexican",
        "Japanese",
        "Mediterranean",
        "Indian",
        "Thai",
        "Spanish",
        "Korean",
        "Moroccan",
    ]
