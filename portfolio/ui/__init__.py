"""Behaviour of the portfolio page, bound to a headless page model."""

from portfolio.ui.controller import PortfolioController
from portfolio.ui.dom import Document, Window
from portfolio.ui.state import PageContext


def boot(markup, window=None, scheduler=None, submitter=None):
    """Parse markup and start a controller on it."""
    document = Document.from_html(markup)
    ctx = PageContext.create(document, window=window, scheduler=scheduler)
    return PortfolioController(ctx, submitter=submitter).start()


__all__ = ["PortfolioController", "Document", "Window", "PageContext", "boot"]
