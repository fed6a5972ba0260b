from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from portfolio.ui.dom import Document, Window
from portfolio.ui.events import Scheduler

KEYBOARD_NAV_CLASS = "keyboard-nav"
REDUCED_MOTION_STYLE_ID = "reduced-motion-styles"
REDUCED_MOTION_CSS = """
*, *::before, *::after {
    animation-duration: 0.01ms !important;
    animation-iteration-count: 1 !important;
    transition-duration: 0.01ms !important;
}
"""


@dataclass
class UIState:
    """Page-wide flags shared between units.

    Units never touch the body's overflow, the keyboard-nav class or the
    reduced-motion stylesheet directly; they go through here.
    """

    document: Document
    scroll_locked: bool = False
    keyboard_nav: bool = False
    reduced_motion: bool = False

    def lock_scroll(self) -> None:
        self.scroll_locked = True
        self.document.body.style["overflow"] = "hidden"

    def unlock_scroll(self) -> None:
        self.scroll_locked = False
        self.document.body.style["overflow"] = "auto"

    def set_keyboard_nav(self, active: bool) -> None:
        self.keyboard_nav = active
        if active:
            self.document.body.class_list.add(KEYBOARD_NAV_CLASS)
        else:
            self.document.body.class_list.remove(KEYBOARD_NAV_CLASS)

    def enable_reduced_motion(self) -> None:
        if self.reduced_motion:
            return
        style = self.document.create_element("style")
        style.set_attribute("id", REDUCED_MOTION_STYLE_ID)
        style.text_content = REDUCED_MOTION_CSS
        self.document.head.append_child(style)
        self.reduced_motion = True


@dataclass
class PageContext:
    """What every unit is constructed with."""

    document: Document
    window: Window
    scheduler: Scheduler
    state: UIState

    @classmethod
    def create(cls, document: Document, window: Optional[Window] = None,
               scheduler: Optional[Scheduler] = None) -> "PageContext":
        return cls(
            document=document,
            window=window or Window(),
            scheduler=scheduler or Scheduler(),
            state=UIState(document),
        )
