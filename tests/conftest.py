"""Pytest configuration and fixtures for swaytab tests."""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Make the swaytab package importable without installation
package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))

from tests.mocks.sway_connection import MockCon, MockSwayConnection  # noqa: E402


@pytest.fixture
def sample_tree() -> MockCon:
    """Tree with a named window, an unnamed container and a nested window.

    root(100)
    ├── A(1, "Foo")
    └── B(2, None)
        └── C(3, "Bar")
    """
    return MockCon(
        id=100,
        name=None,
        nodes=[
            MockCon(id=1, name="Foo"),
            MockCon(id=2, name=None, nodes=[MockCon(id=3, name="Bar")]),
        ],
    )


@pytest.fixture
def workspace_tree() -> MockCon:
    """Realistic tree: outputs, workspaces, tiled and floating windows."""
    return MockCon(
        id=1,
        name="root",
        nodes=[
            MockCon(id=2, name="__i3", nodes=[
                MockCon(id=3, name="__i3_scratch", floating_nodes=[
                    MockCon(id=4, name="Scratch Terminal"),
                ]),
            ]),
            MockCon(id=5, name="DP-1", nodes=[
                MockCon(id=6, name="1", nodes=[
                    MockCon(id=7, name="Firefox"),
                    MockCon(id=8, name=None, nodes=[
                        MockCon(id=9, name="Terminal"),
                        MockCon(id=10, name="Terminal"),
                    ]),
                ], floating_nodes=[
                    MockCon(id=11, name="Calculator"),
                ]),
            ]),
        ],
    )


@pytest.fixture
def mock_connection(sample_tree) -> MockSwayConnection:
    """Mock Sway connection serving sample_tree."""
    return MockSwayConnection(sample_tree)


@pytest.fixture
def console() -> Console:
    """Console that records output instead of printing it."""
    return Console(file=io.StringIO(), record=True, width=200)


@pytest.fixture
def stub_filter():
    """Build a filter command that runs a Python snippet.

    Returns a callable taking the snippet (and extra argv) and returning
    (command, args) for run_filter.
    """
    def _build(script: str, *extra: str):
        return sys.executable, ["-c", script, *extra]

    return _build


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Path for a configuration file inside a temporary directory."""
    return tmp_path / "swaytab" / "config.json"
