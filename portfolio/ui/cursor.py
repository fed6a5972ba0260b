from portfolio.ui.state import PageContext

MOBILE_BREAKPOINT = 768


def is_touch_device(window):
    return window.has_touch_events or window.max_touch_points > 0


class CrosshairCursor:
    """Custom pointer overlay that follows the mouse on desktop viewports."""

    def __init__(self, ctx: PageContext):
        self.ctx = ctx
        self.crosshair = ctx.document.get_element_by_id("crosshair")
        self.is_enabled = ctx.window.inner_width > MOBILE_BREAKPOINT and not is_touch_device(ctx.window)
        if self.is_enabled:
            self.init()

    def init(self):
        document = self.ctx.document
        document.add_event_listener("mousemove", self._on_move)
        document.add_event_listener("mouseleave", lambda e: self._set_opacity("0"))
        document.add_event_listener("mouseenter", lambda e: self._set_opacity("1"))

    def _on_move(self, event):
        if self.crosshair is not None:
            self.crosshair.style["left"] = f"{event.client_x}px"
            self.crosshair.style["top"] = f"{event.client_y}px"

    def _set_opacity(self, value):
        if self.crosshair is not None:
            self.crosshair.style["opacity"] = value

    def disable(self):
        if self.crosshair is not None:
            self.crosshair.style["display"] = "none"
            self.ctx.document.body.style["cursor"] = "auto"

    def toggle_visibility(self):
        if self.crosshair is not None:
            hidden = self.crosshair.style.get("display") == "none"
            self.crosshair.style["display"] = "block" if hidden else "none"
