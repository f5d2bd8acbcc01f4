"""
Pytest configuration and fixtures for itemtree tests.
"""

import sys
from pathlib import Path

import pytest

# Flat layout: make the root modules importable without installing.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from item_models import Leaf, Node  # noqa: E402

EXAMPLE_INPUT = "(id, name, email, type(id, name, customFields(c1, c2, c3)), externalId)"


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch) -> Path:
    """Send activity log writes to a temporary file."""
    path = tmp_path / "itemtree.log"
    monkeypatch.setenv("ITEMTREE_LOG_PATH", str(path))
    return path


@pytest.fixture
def example_items():
    """The parsed form of the shipped example input."""
    return [
        Leaf("id"),
        Leaf("name"),
        Leaf("email"),
        Node(
            "type",
            [
                Leaf("id"),
                Leaf("name"),
                Node("customFields", [Leaf("c1"), Leaf("c2"), Leaf("c3")]),
            ],
        ),
        Leaf("externalId"),
    ]
