from portfolio.ui.dom import MutationObserver
from portfolio.ui.navigation import ACTIVE_CLASS
from portfolio.ui.state import PageContext

REDUCED_MOTION_QUERY = "(prefers-reduced-motion: reduce)"
ACTIVATION_KEYS = ("Enter", " ")


class AccessibilityEnhancements:
    """Keyboard activation, focus styling, aria state and reduced motion.

    close_menu is the navigation unit's bound close action; Escape calls it.
    """

    def __init__(self, ctx: PageContext, close_menu=None):
        self.ctx = ctx
        self.close_menu = close_menu
        self.aria_observer = None
        self.init()

    def init(self):
        self.setup_keyboard_navigation()
        self.setup_focus_management()
        self.setup_aria_labels()
        self.handle_reduced_motion()

    def setup_keyboard_navigation(self):
        for button in self.ctx.document.query_selector_all(".menkrep-btn"):
            button.add_event_listener("keydown", lambda e, button=button: self._on_button_key(button, e))
        self.ctx.document.add_event_listener("keydown", self._on_escape)

    def _on_button_key(self, button, event):
        if event.key in ACTIVATION_KEYS:
            event.prevent_default()
            button.click()

    def _on_escape(self, event):
        if event.key == "Escape" and self.close_menu is not None:
            self.close_menu()

    def setup_focus_management(self):
        state = self.ctx.state

        def on_keydown(event):
            if event.key == "Tab":
                state.set_keyboard_nav(True)

        self.ctx.document.add_event_listener("keydown", on_keydown)
        self.ctx.document.add_event_listener("mousedown", lambda e: state.set_keyboard_nav(False))

    def setup_aria_labels(self):
        nav_toggle = self.ctx.document.get_element_by_id("nav-toggle")
        nav_menu = self.ctx.document.get_element_by_id("nav-menu")
        if nav_toggle is None:
            return
        nav_toggle.set_attribute("aria-label", "Toggle navigation menu")
        nav_toggle.set_attribute("aria-expanded", "false")

        def sync(records, observer):
            for record in records:
                if record.type == "attributes" and record.attribute_name == "class":
                    is_active = ACTIVE_CLASS in record.target.class_list
                    nav_toggle.set_attribute("aria-expanded", "true" if is_active else "false")

        if nav_menu is not None:
            self.aria_observer = MutationObserver(self.ctx.document, sync)
            self.aria_observer.observe(nav_menu, attributes=True, attribute_filter=["class"])

    def handle_reduced_motion(self):
        if self.ctx.window.match_media(REDUCED_MOTION_QUERY).matches:
            self.ctx.state.enable_reduced_motion()
