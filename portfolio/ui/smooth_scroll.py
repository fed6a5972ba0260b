from portfolio.ui.state import PageContext

HEADER_MARGIN = 20


class SmoothScrolling:
    def __init__(self, ctx: PageContext):
        self.ctx = ctx
        self.anchors = ctx.document.query_selector_all('a[href^="#"]')
        self.init()

    def init(self):
        for anchor in self.anchors:
            anchor.add_event_listener("click", lambda e, anchor=anchor: self._on_click(anchor, e))

    def target_position(self, target):
        header = self.ctx.document.query_selector(".header")
        header_height = header.offset_height if header is not None else 0
        return target.offset_top - header_height - HEADER_MARGIN

    def _on_click(self, anchor, event):
        event.prevent_default()
        target_id = anchor.get_attribute("href")[1:]
        target = self.ctx.document.get_element_by_id(target_id) if target_id else None
        if target is not None:
            self.ctx.window.scroll_to(top=self.target_position(target), behavior="smooth")
