from portfolio.ui.dom import IntersectionObserver
from portfolio.ui.state import PageContext

REVEAL_SELECTOR = ".skill-card, .project-card, .contact-item"
REVEAL_THRESHOLD = 0.1
REVEAL_ROOT_MARGIN = "0px 0px -50px 0px"


class ScrollAnimations:
    """Cards fade and slide into place the first time they scroll into view."""

    def __init__(self, ctx: PageContext):
        self.ctx = ctx
        self.elements = ctx.document.query_selector_all(REVEAL_SELECTOR)
        self.observer = None
        self.init()

    def init(self):
        self.observer = IntersectionObserver(
            self.ctx.document,
            self._on_intersect,
            threshold=REVEAL_THRESHOLD,
            root_margin=REVEAL_ROOT_MARGIN,
        )
        for element in self.elements:
            element.style["opacity"] = "0"
            element.style["transform"] = "translateY(30px)"
            element.style["transition"] = "opacity 0.6s ease, transform 0.6s ease"
            self.observer.observe(element)

    def _on_intersect(self, entries, observer):
        for entry in entries:
            if entry.is_intersecting:
                entry.target.style["opacity"] = "1"
                entry.target.style["transform"] = "translateY(0)"
