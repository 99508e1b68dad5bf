import html
from typing import Iterable, List

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QScrollArea
from PyQt6.QtCore import Qt, pyqtSignal

from components.task_item import TaskItem
from models.task import Task
from models.prioritizer import completed_tasks, upcoming_tasks
from constants import (
    BG_COLOR, COMPLETED_EMPTY_MESSAGE, HIGHLIGHT_COLOR, PANEL_COLOR,
    TOP_PRIORITY_MESSAGE, UPCOMING_EMPTY_MESSAGE
)


class TaskListView(QWidget):
    """Scrollable task list page; subclasses pick and order the rows"""
    toggle_requested = pyqtSignal(object)  # task_id
    delete_requested = pyqtSignal(object)  # task_id

    title = ""
    empty_message = ""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.items: List[TaskItem] = []
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"TaskListView {{ background-color: {BG_COLOR}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)

        heading = QLabel(self.title)
        heading.setStyleSheet("color: #FFFFFF; font-size: 16px; font-weight: bold;")
        layout.addWidget(heading)

        self.header_layout = QVBoxLayout()
        layout.addLayout(self.header_layout)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setStyleSheet(f"QScrollArea {{ background: {BG_COLOR}; border: none; }}")
        self.container = QWidget()
        self.container_layout = QVBoxLayout(self.container)
        self.container_layout.setContentsMargins(0, 0, 0, 0)
        self.container_layout.setSpacing(6)
        self.scroll.setWidget(self.container)
        layout.addWidget(self.scroll, stretch=1)

        self.placeholder = QLabel(self.empty_message)
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.placeholder.setStyleSheet(f"color: #FFFFFF; background: {PANEL_COLOR}; border-radius: 4px; padding: 12px;")
        self.placeholder.hide()

    def select(self, tasks: Iterable[Task]) -> List[Task]:
        raise NotImplementedError

    def render_tasks(self, tasks: Iterable[Task]) -> List[Task]:
        """Rebuild rows from scratch; returns the tasks shown, in order"""
        self.clear_layout()
        shown = self.select(tasks)

        if not shown:
            self.container_layout.addWidget(self.placeholder)
            self.placeholder.show()
        else:
            for index, task in enumerate(shown):
                item = self.create_item(task, index)
                item.toggle_requested.connect(self.toggle_requested)
                item.delete_requested.connect(self.delete_requested)
                self.container_layout.addWidget(item)
                self.items.append(item)

        # 底部弹簧
        self.container_layout.addStretch()
        return shown

    def create_item(self, task: Task, index: int) -> TaskItem:
        return TaskItem(task)

    def clear_layout(self):
        self.items = []
        while self.container_layout.count():
            item = self.container_layout.takeAt(0)
            widget = item.widget()
            if widget is self.placeholder:
                self.placeholder.hide()
                self.placeholder.setParent(None)
            elif widget is not None:
                widget.deleteLater()

    def is_empty(self) -> bool:
        return not self.placeholder.isHidden()


class UpcomingView(TaskListView):
    title = "Upcoming tasks"
    empty_message = UPCOMING_EMPTY_MESSAGE

    def __init__(self, parent=None):
        super().__init__(parent)
        self.priority_message = QLabel()
        self.priority_message.setTextFormat(Qt.TextFormat.RichText)
        self.priority_message.setStyleSheet(f"color: #FFFFFF; background: {PANEL_COLOR}; border-radius: 4px; padding: 8px;")
        self.priority_message.hide()
        self.header_layout.addWidget(self.priority_message)

    def select(self, tasks):
        return upcoming_tasks(tasks)

    def render_tasks(self, tasks):
        self.priority_message.hide()
        shown = super().render_tasks(tasks)
        if shown:
            self.priority_message.setText(TOP_PRIORITY_MESSAGE.format(color=HIGHLIGHT_COLOR, name=html.escape(shown[0].name)))
            self.priority_message.show()
        return shown

    def create_item(self, task, index):
        return TaskItem(task, first_priority=index == 0)


class CompletedView(TaskListView):
    title = "Completed tasks"
    empty_message = COMPLETED_EMPTY_MESSAGE

    def select(self, tasks):
        return completed_tasks(tasks)
