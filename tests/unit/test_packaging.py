"""
Unit tests for declared dependencies.
"""

import re
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


class TestDependencies:
    """Tests for the runtime dependency pins."""

    @pytest.mark.unit
    def test_mcp_stays_on_v1(self):
        """The server imports mcp.server.fastmcp, which only the 1.x line ships."""
        text = PYPROJECT.read_text(encoding="utf-8")
        match = re.search(r'"mcp([^"]*)"', text)

        assert match
        specifiers = {s.strip() for s in match.group(1).split(",")}
        assert ">=1.10" in specifiers
        assert "<2" in specifiers

    @pytest.mark.unit
    def test_fastmcp_importable(self):
        from mcp.server.fastmcp import FastMCP

        assert FastMCP is not None
