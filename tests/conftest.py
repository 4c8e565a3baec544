"""Shared pytest fixtures for the dviforge test suite.

Fixtures:
    ctxt: fresh page context with the default system parameters
    handler: fresh TPic special handler
    tpic: callable running one TPic directive through handler on ctxt
    snippet: callable returning the serialized elements of the current page
    script_file: callable writing a special script into tmp_path

Markers:
    integration: mark test as an integration test
"""

import pytest

from dviforge.core.context_init import create_context, init_system_params
from dviforge.core.tpic_handler import TpicSpecialHandler
from dviforge.core.xml_node import serialize_children


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Context Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def ctxt():
    """Page context created from the default system parameters."""
    context, err = create_context(init_system_params())
    assert err is None
    return context


@pytest.fixture
def handler():
    """TPic handler with a fresh graphics state."""
    return TpicSpecialHandler()


@pytest.fixture
def tpic(ctxt, handler):
    """Run a TPic directive and return whether it was handled.

    Example:
        def test_dot(tpic, snippet):
            tpic("pa", "0 0")
            tpic("fp")
    """
    def run(cmd, params=""):
        return handler.process(cmd, params, ctxt)
    return run


@pytest.fixture
def snippet(ctxt):
    """Serialize the elements appended to the current page, then clear it."""
    def get(clear=True):
        if ctxt.page is None:
            return ""
        text = serialize_children(ctxt.page)
        if clear:
            ctxt.clear()
        return text
    return get


# -----------------------------------------------------------------------------
# Script Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def script_file(tmp_path):
    """Write lines to a special script in tmp_path and return its path."""
    def write(lines, name="drawing.tps"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return write
