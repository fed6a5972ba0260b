from portfolio.ui.state import PageContext

RIPPLE_SIZE = 60
RIPPLE_MS = 600
HOVER_MS = 300
RIPPLE_STYLE_ID = "ripple-styles"
RIPPLE_KEYFRAMES = """
@keyframes ripple {
    to {
        transform: scale(4);
        opacity: 0;
    }
}
"""


class InteractiveElements:
    """Click ripples on buttons and a short brightness pulse on hover."""

    def __init__(self, ctx: PageContext):
        self.ctx = ctx
        self.init()

    def init(self):
        for button in self.ctx.document.query_selector_all(".menkrep-btn"):
            button.add_event_listener("click", lambda e, button=button: self.create_click_effect(button, e))

        for element in self.ctx.document.query_selector_all(".menkrep-btn, .skill-card, .project-card"):
            element.add_event_listener("mouseenter", lambda e, element=element: self.simulate_hover_effect(element))

    def _ensure_keyframes(self):
        document = self.ctx.document
        if document.get_element_by_id(RIPPLE_STYLE_ID) is None:
            style = document.create_element("style")
            style.set_attribute("id", RIPPLE_STYLE_ID)
            style.text_content = RIPPLE_KEYFRAMES
            document.head.append_child(style)

    def create_click_effect(self, element, event):
        rect = element.get_bounding_client_rect()
        x = event.client_x - rect.left - RIPPLE_SIZE / 2
        y = event.client_y - rect.top - RIPPLE_SIZE / 2

        ripple = self.ctx.document.create_element("span")
        ripple.set_attribute("class", "ripple")
        ripple.style.update({
            "position": "absolute",
            "width": f"{RIPPLE_SIZE}px",
            "height": f"{RIPPLE_SIZE}px",
            "left": f"{x:g}px",
            "top": f"{y:g}px",
            "background": "rgba(255, 255, 255, 0.6)",
            "border-radius": "50%",
            "transform": "scale(0)",
            "animation": "ripple 0.6s linear",
            "pointer-events": "none",
        })
        self._ensure_keyframes()

        element.style["position"] = "relative"
        element.style["overflow"] = "hidden"
        element.append_child(ripple)

        def expire():
            if ripple.parent is not None:
                ripple.remove()

        self.ctx.scheduler.set_timeout(expire, RIPPLE_MS)
        return ripple

    def simulate_hover_effect(self, element):
        element.style["transition"] = "all 0.3s ease"
        element.style["filter"] = "brightness(1.05)"

        def revert():
            element.style["filter"] = ""

        self.ctx.scheduler.set_timeout(revert, HOVER_MS)
