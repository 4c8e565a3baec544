"""Unit tests for special dispatch, configuration and the page context.

Tests:
    - SpecialManager: registration, ignore lists, dispatch, end-of-page notification
    - init_system_params / create_context: defaults and failure tuple
    - Context: page groups, transforms, bounding boxes
    - error.e: error recording
"""

import logging
import xml.etree.ElementTree as ET

import pytest

from dviforge.core import error as ps_error
from dviforge.core import types as ps
from dviforge.core.context_init import create_context, init_system_params
from dviforge.core.special_manager import (
    SpecialHandler,
    SpecialManager,
    ignores_all,
    parse_ignore_list,
)
from dviforge.core.tpic_handler import TpicSpecialHandler
from dviforge.core.xml_node import serialize, serialize_children


class RecordingHandler(SpecialHandler):
    """Handler that records the specials it receives."""

    name = "rec"

    def __init__(self):
        self.calls = []
        self.pages_ended = 0

    def prefixes(self):
        return ("rec", "log")

    def process(self, prefix, params, ctxt):
        self.calls.append((prefix, params))
        return params != "reject"

    def notify_end_page(self, ctxt):
        self.pages_ended += 1


# ---------------------------------------------------------------------------
# SpecialManager
# ---------------------------------------------------------------------------

class TestIgnoreList:
    """Tests for ignore list parsing."""

    def test_separators(self):
        """Any run of non-alphanumeric characters separates names."""
        assert parse_ignore_list("color, em;;ps tpic") == {"color", "em", "ps", "tpic"}

    def test_empty(self):
        """No list ignores nothing."""
        assert parse_ignore_list(None) == set()
        assert parse_ignore_list("") == set()

    def test_star(self):
        """A lone '*' ignores all specials."""
        assert ignores_all("*")
        assert ignores_all(" * ")
        assert not ignores_all("tpic")
        assert not ignores_all(None)


class TestSpecialManager:
    """Tests for SpecialManager."""

    def test_dispatch_by_prefix(self, ctxt):
        """Specials reach the handler registered for their prefix."""
        manager = SpecialManager()
        handler = RecordingHandler()
        assert manager.register_handler(handler)
        assert manager.process("rec 1 2", ctxt)
        assert manager.process("log", ctxt)
        assert handler.calls == [("rec", "1 2"), ("log", "")]

    def test_unknown_prefix(self, ctxt, caplog):
        """Specials without a handler are skipped and logged at debug level."""
        manager = SpecialManager()
        manager.register_handler(RecordingHandler())
        with caplog.at_level(logging.DEBUG, logger="dviforge.core.special_manager"):
            assert not manager.process("color push Red", ctxt)
        assert "color push Red" in caplog.text

    def test_rejected_special(self, ctxt):
        """A handler may refuse a special."""
        manager = SpecialManager()
        manager.register_handler(RecordingHandler())
        assert not manager.process("rec reject", ctxt)

    def test_ignored_handler(self, ctxt):
        """Handlers named in the ignore list are not registered."""
        manager = SpecialManager()
        assert not manager.register_handler(RecordingHandler(), "tpic, rec")
        assert manager.find_handler("rec") is None
        assert not manager.process("rec 1", ctxt)

    def test_notify_end_page(self, ctxt):
        """All handlers learn about the end of a page."""
        manager = SpecialManager()
        handler = RecordingHandler()
        manager.register_handler(handler)
        manager.notify_end_page(ctxt)
        assert handler.pages_ended == 1

    def test_tpic_through_manager(self, ctxt):
        """TPic specials run end to end through the manager."""
        assert ctxt.special_manager.process("pa 0 0", ctxt)
        assert ctxt.special_manager.process("pa 1000 0", ctxt)
        assert ctxt.special_manager.process("fp", ctxt)
        assert serialize_children(ctxt.page) == (
            "<polyline fill='none' points='0,0 72,0' stroke='#000000' "
            "stroke-linecap='round' stroke-width='1'/>"
        )

    def test_base_handler(self):
        """The base handler announces nothing and must be subclassed."""
        handler = SpecialHandler()
        assert handler.prefixes() == ()
        with pytest.raises(NotImplementedError):
            handler.process("x", "", None)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class TestContextInit:
    """Tests for init_system_params and create_context."""

    def test_defaults(self):
        """The default parameters describe a two-place SVG job."""
        params = init_system_params()
        assert params["Precision"] == 2
        assert params["IgnoreSpecials"] is None
        assert params["OutputDirectory"] == "df_output"
        assert params["OutputBaseName"] == "page"
        assert params["PageFilter"] is None

    def test_overrides(self):
        """Keyword arguments replace defaults."""
        assert init_system_params(Precision=3)["Precision"] == 3

    def test_unknown_override(self):
        """Misspelled parameters are rejected."""
        with pytest.raises(KeyError):
            init_system_params(Precission=3)

    def test_create_context(self):
        """A context comes with a manager holding the TPic handler."""
        ctxt, err = create_context(init_system_params())
        assert err is None
        handler = ctxt.special_manager.find_handler("pa")
        assert isinstance(handler, TpicSpecialHandler)

    def test_ignore_all_specials(self):
        """'*' creates no special manager at all."""
        ctxt, err = create_context(init_system_params(IgnoreSpecials="*"))
        assert err is None
        assert ctxt.special_manager is None

    def test_ignore_tpic(self):
        """Naming tpic disables its prefixes."""
        ctxt, _ = create_context(init_system_params(IgnoreSpecials="tpic"))
        assert ctxt.special_manager.find_handler("pa") is None

    @pytest.mark.parametrize("precision", [-1, 16, 2.5, "2", True])
    def test_invalid_precision(self, precision):
        """Bad precisions fail with a message instead of raising."""
        ctxt, err = create_context(init_system_params(Precision=precision))
        assert ctxt is None
        assert "precision" in err

    def test_precision_reaches_output(self):
        """The context precision controls emitted numbers."""
        ctxt, _ = create_context(init_system_params(Precision=3))
        ctxt.special_manager.process("pn 10", ctxt)
        ctxt.special_manager.process("pa 0 0", ctxt)
        ctxt.special_manager.process("pa 1 0", ctxt)
        ctxt.special_manager.process("fp", ctxt)
        assert "points='0,0 0.072,0'" in serialize_children(ctxt.page)
        assert "stroke-width='0.72'" in serialize_children(ctxt.page)


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

class TestContext:
    """Tests for the page context."""

    def test_implicit_page(self, ctxt):
        """Appending without an open page opens one."""
        ctxt.append_to_page(ET.Element("circle"))
        assert ctxt.page_count == 1
        assert ctxt.page.get("id") == "page1"

    def test_pages(self, ctxt):
        """begin_page() closes the previous page and resets the cursor."""
        ctxt.begin_page()
        ctxt.set_x(5)
        ctxt.embed_point(1, 1)
        ctxt.begin_page()
        assert ctxt.page_count == 2
        assert (ctxt.get_x(), ctxt.get_y()) == (0, 0)
        assert not ctxt.bbox.valid
        assert ctxt.pages[0][1].valid

    def test_end_page_resets_tpic(self, ctxt):
        """Ending a page resets the TPic graphics state."""
        handler = ctxt.special_manager.find_handler("pn")
        ctxt.begin_page()
        ctxt.special_manager.process("pn 500", ctxt)
        ctxt.end_page()
        assert handler.pen_width == 1.0

    def test_transform(self, ctxt):
        """A non-identity matrix becomes the page transform."""
        ctxt.begin_page()
        ctxt.matrix = (2.0, 0.0, 0.0, 2.0, 10.0, 0.5)
        ctxt.end_page()
        group = ctxt.pages[0][0]
        assert serialize(group) == "<g id='page1' transform='matrix(2 0 0 2 10 0.5)'/>"

    def test_color_is_untouched(self, ctxt):
        """TPic drawing leaves the foreground color alone."""
        ctxt.set_color(ps.Color(255, 0, 0))
        for special in ("pa 0 0", "pa 100 100", "pa 100 0", "pa 0 0", "bk", "fp"):
            ctxt.special_manager.process(special, ctxt)
        assert ctxt.get_color() == ps.Color(255, 0, 0)
        assert ctxt.get_matrix() == ps.IDENTITY_MATRIX


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    """Tests for error reporting."""

    def test_error_is_recorded_and_logged(self, ctxt, caplog):
        """e() records a SpecialError and logs a warning."""
        with caplog.at_level(logging.WARNING, logger="dviforge.core.error"):
            assert ps_error.e(ctxt, ps_error.STACKUNDERFLOW, "ps_pa") is None
        err = ctxt.errors[0]
        assert (err.code, err.command, err.name) == (ps_error.STACKUNDERFLOW, "pa", "stackunderflow")
        assert "error in special 'pa'" in caplog.text

    def test_custom_message(self, ctxt):
        """A message replaces the default description."""
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, "ar", "ellipse needs six numbers")
        assert str(ctxt.errors[0]) == "error in special 'ar': ellipse needs six numbers"
