import pytest

from portfolio.ui.navigation import MobileNavigation


@pytest.fixture
def nav(ctx):
    return MobileNavigation(ctx)


def test_toggle_opens_and_locks_scroll(ctx, nav):
    event = nav.nav_toggle.click()

    assert event.default_prevented
    assert nav.is_open
    assert "active" in nav.nav_toggle.class_list
    assert ctx.state.scroll_locked
    assert ctx.document.body.style["overflow"] == "hidden"


@pytest.mark.parametrize("toggles", [2, 4, 6])
def test_even_toggles_restore_initial_state(ctx, nav, toggles):
    for _ in range(toggles):
        nav.toggle_menu()
    assert not nav.is_open
    assert "active" not in nav.nav_toggle.class_list
    assert not ctx.state.scroll_locked


def test_nav_link_closes_menu(ctx, nav):
    nav.toggle_menu()
    nav.nav_links[0].click()
    assert not nav.is_open
    assert not ctx.state.scroll_locked


def test_click_outside_closes_menu(ctx, nav):
    nav.toggle_menu()
    ctx.document.query_selector(".skill-card").click()
    assert not nav.is_open


def test_click_inside_menu_keeps_it_open(nav):
    nav.toggle_menu()
    nav.nav_menu.query_selector("li").click()
    assert nav.is_open


def test_widening_closes_after_debounce(ctx, nav):
    nav.toggle_menu()
    ctx.window.resize(1024)
    assert nav.is_open
    ctx.scheduler.advance(250)
    assert not nav.is_open


def test_resize_settling_narrow_keeps_menu(ctx, nav):
    nav.toggle_menu()
    ctx.window.resize(1024)
    ctx.scheduler.advance(200)
    ctx.window.resize(500)
    ctx.scheduler.advance(250)
    assert nav.is_open


def test_close_menu_is_idempotent(ctx, nav):
    nav.close_menu()
    nav.close_menu()
    assert not nav.is_open
    assert not ctx.state.scroll_locked
