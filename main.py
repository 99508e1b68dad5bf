#!/usr/bin/env python3
import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QStackedWidget, QMessageBox
)
from PyQt6.QtCore import Qt

from models import Page, TaskStore, TaskValidationError
from storage import LocalStorage, TaskStorage
from router import ViewRouter
from config import Settings, get_settings
from logging_setup import setup_logging
from constants import (
    BG_COLOR, BORDER_COLOR, INVALID_INPUT_MESSAGE, TASK_ADDED_MESSAGE,
    WINDOW_HEIGHT, WINDOW_WIDTH, APP_TITLE
)
from components.title_bar import CustomTitleBar
from components.nav_bar import NavBar
from components.add_task_form import AddTaskForm
from components.task_list_view import UpcomingView, CompletedView

logger = logging.getLogger(__name__)


class PlannerWindow(QMainWindow):
    """Main window: wires store signals to the router and widget signals back to the store"""

    def __init__(self, store: TaskStore):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.store = store
        self.init_ui()

        self.router = ViewRouter(self.render_upcoming, self.render_completed, parent=self)
        self.router.page_changed.connect(self.show_page)

        # 存储变更 -> 重新渲染当前页面
        self.store.tasks_changed.connect(self.router.refresh)

    def init_ui(self):
        self.main_widget = QWidget()
        self.setCentralWidget(self.main_widget)
        self.main_layout = QVBoxLayout(self.main_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.custom_title_bar = CustomTitleBar(self)
        self.custom_title_bar.close_btn.clicked.connect(self.close)
        self.main_layout.addWidget(self.custom_title_bar)

        self.nav_bar = NavBar()
        self.nav_bar.page_requested.connect(self.navigate)
        self.main_layout.addWidget(self.nav_bar)

        self.add_form = AddTaskForm()
        self.add_form.submitted.connect(self.add_task)
        self.upcoming_view = UpcomingView()
        self.completed_view = CompletedView()
        for view in (self.upcoming_view, self.completed_view):
            view.toggle_requested.connect(self.store.toggle_completed)
            view.delete_requested.connect(self.store.remove)

        self.pages = QStackedWidget()
        self.page_widgets = {
            Page.DASHBOARD: self.add_form,
            Page.UPCOMING: self.upcoming_view,
            Page.COMPLETED: self.completed_view,
        }
        for page in Page:
            self.pages.addWidget(self.page_widgets[page])
        self.main_layout.addWidget(self.pages, stretch=1)

        self.setStyleSheet(f"QMainWindow {{ background-color: {BG_COLOR}; border: 1px solid {BORDER_COLOR}; }}")

    def navigate(self, token) -> Page:
        return self.router.navigate(token)

    def show_page(self, page: Page):
        self.pages.setCurrentWidget(self.page_widgets[page])
        self.nav_bar.set_active(page)

    def render_upcoming(self):
        self.upcoming_view.render_tasks(self.store.all())

    def render_completed(self):
        self.completed_view.render_tasks(self.store.all())

    def add_task(self, name: str, due_date: str, time_estimate: str):
        try:
            task = self.store.add(name, due_date, time_estimate)
        except TaskValidationError as e:
            logger.info("Rejected task input: %s", e)
            QMessageBox.warning(self, APP_TITLE, INVALID_INPUT_MESSAGE)
            return

        self.add_form.clear()
        QMessageBox.information(self, APP_TITLE, TASK_ADDED_MESSAGE.format(name=task.name))
        self.navigate(Page.UPCOMING)


def build_store(settings: Settings) -> TaskStore:
    storage = TaskStorage(LocalStorage(settings.storage_file))
    store = TaskStore(storage)
    store.load()
    return store


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Study planner task list")
    parser.add_argument("--page", help="initial page: dashboard, upcoming or completed")
    parser.add_argument("--data-dir", type=Path, help="directory for task data and logs")
    return parser.parse_known_args(argv)[0]


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.data_dir is not None:
        settings = replace(settings, data_dir=args.data_dir.expanduser())

    console_level = getattr(logging, settings.log_level, logging.INFO)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting, data=%s log=%s", settings.storage_file, log_file)

    if sys.platform == "linux" and "QT_QPA_PLATFORM" not in os.environ:
        os.environ["QT_QPA_PLATFORM"] = "xcb"
    app = QApplication(sys.argv)
    store = build_store(settings)
    window = PlannerWindow(store)
    window.navigate(args.page or settings.start_page)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
