from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from portfolio.ui.accessibility import AccessibilityEnhancements
from portfolio.ui.contact_form import ContactForm
from portfolio.ui.cursor import CrosshairCursor
from portfolio.ui.feedback import InteractiveElements
from portfolio.ui.navigation import MobileNavigation
from portfolio.ui.performance import PerformanceOptimizer
from portfolio.ui.reveal import ScrollAnimations
from portfolio.ui.smooth_scroll import SmoothScrolling
from portfolio.ui.state import PageContext

logger = logging.getLogger(__name__)

DEV_HOSTNAMES = {"localhost", "127.0.0.1"}
DEBUG_GLOBAL = "portfolio"


@dataclass
class DebugHandle:
    components: List[Any]
    reload: Callable[[], None]
    toggle_cursor: Callable[[], None]


def is_development(location) -> bool:
    return location.hostname in DEV_HOSTNAMES or location.port != ""


class PortfolioController:
    """Builds every behaviour unit once the page is ready."""

    def __init__(self, ctx: PageContext, submitter=None):
        self.ctx = ctx
        self.submitter = submitter
        self.components: List[Any] = []
        self.navigation: Optional[MobileNavigation] = None
        self.cursor: Optional[CrosshairCursor] = None
        self.initialized = False

    def start(self):
        if self.ctx.document.ready_state == "loading":
            self.ctx.document.add_event_listener("DOMContentLoaded", lambda e: self.initialize_components())
        else:
            self.initialize_components()
        return self

    def initialize_components(self) -> bool:
        try:
            self.cursor = CrosshairCursor(self.ctx)
            self.components.append(self.cursor)
            self.navigation = MobileNavigation(self.ctx)
            self.components.append(self.navigation)
            self.components.append(SmoothScrolling(self.ctx))
            self.components.append(ScrollAnimations(self.ctx))
            self.components.append(ContactForm(self.ctx, submitter=self.submitter))
            self.components.append(InteractiveElements(self.ctx))
            self.components.append(PerformanceOptimizer(self.ctx))
            self.components.append(AccessibilityEnhancements(self.ctx, close_menu=self.navigation.close_menu))
        except Exception:
            logger.exception("Error initializing portfolio")
            return False

        self.initialized = True
        logger.info("Portfolio initialized with %d components", len(self.components))

        if is_development(self.ctx.window.location):
            self.add_development_helpers()
        return True

    def add_development_helpers(self):
        self.ctx.window.globals[DEBUG_GLOBAL] = DebugHandle(
            components=self.components,
            reload=self.ctx.window.reload,
            toggle_cursor=self.cursor.toggle_visibility,
        )
        logger.debug("Development helpers available via window.%s", DEBUG_GLOBAL)
