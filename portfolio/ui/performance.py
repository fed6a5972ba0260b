from portfolio.ui.dom import IntersectionObserver
from portfolio.ui.state import PageContext

SCROLLED_OFFSET = 100
HEADER_BG_SCROLLED = "rgba(34, 49, 35, 0.98)"
HEADER_BG_TOP = "rgba(34, 49, 35, 0.95)"
FONT_URLS = (
    "https://fonts.googleapis.com/css2?family=Orbitron:wght@400;700;900&display=swap",
)


class PerformanceOptimizer:
    def __init__(self, ctx: PageContext, font_urls=FONT_URLS):
        self.ctx = ctx
        self.font_urls = font_urls
        self.image_observer = None
        self._ticking = False
        self.init()

    def init(self):
        self.setup_lazy_loading()
        self.optimize_scroll_events()
        self.preload_resources()

    def setup_lazy_loading(self):
        images = self.ctx.document.query_selector_all("img[data-src]")
        if not images:
            return

        def on_intersect(entries, observer):
            for entry in entries:
                if entry.is_intersecting:
                    img = entry.target
                    img.set_attribute("src", img.get_attribute("data-src"))
                    img.remove_attribute("data-src")
                    observer.unobserve(img)

        self.image_observer = IntersectionObserver(self.ctx.document, on_intersect)
        for img in images:
            self.image_observer.observe(img)

    def update_scroll_effects(self):
        header = self.ctx.document.query_selector(".header")
        if header is not None:
            if self.ctx.window.scroll_y > SCROLLED_OFFSET:
                header.style["background"] = HEADER_BG_SCROLLED
            else:
                header.style["background"] = HEADER_BG_TOP
        self._ticking = False

    def optimize_scroll_events(self):
        # one pending frame at most, however many scroll events arrive
        def on_scroll(event):
            if not self._ticking:
                self.ctx.scheduler.request_animation_frame(self.update_scroll_effects)
                self._ticking = True

        self.ctx.window.add_event_listener("scroll", on_scroll)

    def preload_resources(self):
        for url in self.font_urls:
            link = self.ctx.document.create_element("link")
            link.set_attribute("rel", "preload")
            link.set_attribute("as", "style")
            link.set_attribute("href", url)
            self.ctx.document.head.append_child(link)
