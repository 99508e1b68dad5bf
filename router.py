"""Page navigation: token -> page -> renderer"""
import logging
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from models.page import Page

logger = logging.getLogger(__name__)


class ViewRouter(QObject):
    """Tracks the current page and asks the matching view to re-render"""

    page_changed = pyqtSignal(object)  # Page

    def __init__(self, render_upcoming: Callable[[], None], render_completed: Callable[[], None], parent=None):
        super().__init__(parent)
        self.render_upcoming = render_upcoming
        self.render_completed = render_completed
        self.current = Page.DASHBOARD

    def navigate(self, token) -> Page:
        page = Page.from_token(token)
        if not isinstance(token, Page) and page.value != token:
            logger.debug("Navigation token %r resolved to %s", token, page.value)
        self.current = page
        self.page_changed.emit(page)
        self.refresh()
        return page

    def refresh(self):
        """Re-render the current page; the dashboard only hosts the form"""
        page = self.current
        if page is Page.UPCOMING:
            self.render_upcoming()
        elif page is Page.COMPLETED:
            self.render_completed()
        elif page is Page.DASHBOARD:
            pass
        else:
            raise ValueError(f"unhandled page {page!r}")
