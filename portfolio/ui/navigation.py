from portfolio.ui.cursor import MOBILE_BREAKPOINT
from portfolio.ui.events import debounce
from portfolio.ui.state import PageContext

ACTIVE_CLASS = "active"
RESIZE_DEBOUNCE_MS = 250


class MobileNavigation:
    """Hamburger menu: toggle, close on link/outside click and on widening."""

    def __init__(self, ctx: PageContext):
        self.ctx = ctx
        self.nav_toggle = ctx.document.get_element_by_id("nav-toggle")
        self.nav_menu = ctx.document.get_element_by_id("nav-menu")
        self.nav_links = ctx.document.query_selector_all(".nav-link")
        self.init()

    @property
    def is_open(self):
        return self.nav_menu is not None and ACTIVE_CLASS in self.nav_menu.class_list

    def init(self):
        if self.nav_toggle is not None:
            self.nav_toggle.add_event_listener("click", self._on_toggle_click)

        for link in self.nav_links:
            link.add_event_listener("click", lambda e: self.close_menu())

        self.ctx.document.add_event_listener("click", self._on_document_click)
        self.ctx.window.add_event_listener(
            "resize", debounce(self.ctx.scheduler, self._on_resize, RESIZE_DEBOUNCE_MS)
        )

    def _on_toggle_click(self, event):
        event.prevent_default()
        self.toggle_menu()

    def _on_document_click(self, event):
        if self.nav_toggle is None or self.nav_menu is None:
            return
        if not self.nav_toggle.contains(event.target) and not self.nav_menu.contains(event.target):
            self.close_menu()

    def _on_resize(self, event=None):
        if self.ctx.window.inner_width > MOBILE_BREAKPOINT:
            self.close_menu()

    def toggle_menu(self):
        if self.nav_menu is None:
            return
        self.nav_menu.class_list.toggle(ACTIVE_CLASS)
        if self.nav_toggle is not None:
            self.nav_toggle.class_list.toggle(ACTIVE_CLASS)

        if self.is_open:
            self.ctx.state.lock_scroll()
        else:
            self.ctx.state.unlock_scroll()

    def close_menu(self):
        if self.nav_menu is not None:
            self.nav_menu.class_list.remove(ACTIVE_CLASS)
        if self.nav_toggle is not None:
            self.nav_toggle.class_list.remove(ACTIVE_CLASS)
        self.ctx.state.unlock_scroll()
