from typing import Dict

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal

from models.page import Page
from constants import ACCENT_COLOR, BORDER_COLOR, PANEL_COLOR

NAV_LABELS = {
    Page.DASHBOARD: "Dashboard",
    Page.UPCOMING: "Upcoming",
    Page.COMPLETED: "Completed",
}


class NavBar(QWidget):
    """页面导航条，点击按钮请求切换页面"""
    page_requested = pyqtSignal(object)  # Page

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(40)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"NavBar {{ background-color: {PANEL_COLOR}; border-bottom: 1px solid {BORDER_COLOR}; }}")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 4, 10, 4)
        layout.setSpacing(6)

        self.buttons: Dict[Page, QPushButton] = {}
        for page in Page:
            btn = QPushButton(NAV_LABELS[page])
            btn.setCheckable(True)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setStyleSheet(f"""
                QPushButton {{ background: transparent; color: white; border: none; padding: 4px 10px; }}
                QPushButton:hover {{ background: {BORDER_COLOR}; }}
                QPushButton:checked {{ background: {ACCENT_COLOR}; border-radius: 4px; }}
            """)
            btn.clicked.connect(lambda _checked, p=page: self.page_requested.emit(p))
            layout.addWidget(btn)
            self.buttons[page] = btn
        layout.addStretch()

    def set_active(self, page: Page):
        for p, btn in self.buttons.items():
            btn.setChecked(p is page)
