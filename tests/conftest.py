"""
Shared pytest fixtures for the icon builder test suite.
"""

import os
import sys

# Add project root to sys.path so the top-level modules can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture
def write_svg(tmp_path):
    """Write an SVG file into tmp_path and return its path."""

    def _write(file_name, content):
        path = tmp_path / file_name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def icon_svg():
    """Build a minimal namespaced icon around the given path data."""

    def _svg(path_data):
        return f'<svg xmlns="{SVG_NS}" viewBox="0 0 24 24"><path d="{path_data}"/></svg>'

    return _svg
