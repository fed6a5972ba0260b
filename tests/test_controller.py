import logging

from portfolio.ui import boot
from portfolio.ui import controller as controller_module
from portfolio.ui.controller import DebugHandle, PortfolioController
from portfolio.ui.cursor import CrosshairCursor
from portfolio.ui.dom import Document, Location, Window
from portfolio.ui.events import Event
from portfolio.ui.navigation import MobileNavigation
from portfolio.ui.state import PageContext

from conftest import INDEX_HTML, fill


def test_components_built_in_order(ctx):
    controller = PortfolioController(ctx).start()

    assert controller.initialized
    assert [type(c).__name__ for c in controller.components] == [
        "CrosshairCursor",
        "MobileNavigation",
        "SmoothScrolling",
        "ScrollAnimations",
        "ContactForm",
        "InteractiveElements",
        "PerformanceOptimizer",
        "AccessibilityEnhancements",
    ]


def test_waits_for_dom_ready():
    ctx = PageContext.create(Document.from_html(INDEX_HTML, ready_state="loading"))
    controller = PortfolioController(ctx).start()
    assert not controller.initialized

    ctx.document.mark_ready()
    assert controller.initialized


def test_debug_handle_in_development(ctx):
    controller = PortfolioController(ctx).start()
    handle = ctx.window.globals["portfolio"]

    assert isinstance(handle, DebugHandle)
    assert handle.components is controller.components
    handle.toggle_cursor()
    assert ctx.document.get_element_by_id("crosshair").style["display"] == "none"
    handle.reload()
    assert ctx.window.reload_count == 1


def test_no_debug_handle_in_production():
    window = Window(location=Location(hostname="example.com", port=""))
    ctx = PageContext.create(Document.from_html(INDEX_HTML), window=window)
    PortfolioController(ctx).start()
    assert "portfolio" not in window.globals


def test_explicit_port_counts_as_development():
    window = Window(location=Location(hostname="example.com", port="3000"))
    ctx = PageContext.create(Document.from_html(INDEX_HTML), window=window)
    PortfolioController(ctx).start()
    assert "portfolio" in window.globals


def test_init_error_is_logged_and_stops_setup(ctx, monkeypatch, caplog):
    def broken(_ctx):
        raise RuntimeError("boom")

    monkeypatch.setattr(controller_module, "SmoothScrolling", broken)

    with caplog.at_level(logging.ERROR, logger="portfolio.ui.controller"):
        controller = PortfolioController(ctx).start()

    assert not controller.initialized
    assert [type(c) for c in controller.components] == [CrosshairCursor, MobileNavigation]
    assert "Error initializing portfolio" in caplog.text
    assert "portfolio" not in ctx.window.globals


def test_escape_closes_the_existing_menu(ctx):
    controller = PortfolioController(ctx).start()
    controller.navigation.toggle_menu()

    ctx.document.dispatch_event(Event("keydown", key="Escape"))

    assert not controller.navigation.is_open
    assert ctx.document.get_element_by_id("nav-toggle").get_attribute("aria-expanded") == "false"


def test_boot_runs_contact_flow_end_to_end():
    controller = boot(INDEX_HTML)
    document = controller.ctx.document
    fill(document, name="Al", email="a@b.co", message="this is long enough")

    document.get_element_by_id("contact-form").dispatch_event(Event("submit"))
    controller.ctx.scheduler.advance(1500)

    message = document.query_selector(".form-message")
    assert "form-message-success" in message.class_list
    assert document.get_element_by_id("contact-form").form_data()["name"] == ""
