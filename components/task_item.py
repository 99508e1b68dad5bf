from PyQt6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal

from models.task import Task
from constants import (
    BORDER_COLOR, DANGER_COLOR, DONE_COLOR, HIGHLIGHT_COLOR, MUTED_TEXT_COLOR,
    PANEL_COLOR, COMPLETED_META, UPCOMING_META
)


class TaskItem(QFrame):
    """单个任务行：名称、元信息、完成/取消完成与删除按钮"""
    toggle_requested = pyqtSignal(object)  # task_id
    delete_requested = pyqtSignal(object)  # task_id

    def __init__(self, task: Task, first_priority: bool = False, parent=None):
        super().__init__(parent)
        self.task_id = task.id
        self.first_priority = first_priority

        if first_priority:
            border = f"2px solid {HIGHLIGHT_COLOR}"
        else:
            border = f"1px solid {BORDER_COLOR}"
        self.setStyleSheet(f"TaskItem {{ background-color: {PANEL_COLOR}; border: {border}; border-radius: 4px; }}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 6, 10, 6)

        details = QVBoxLayout()
        self.name_label = QLabel(task.name)
        self.name_label.setTextFormat(Qt.TextFormat.PlainText)
        name_style = "color: #FFFFFF; font-weight: bold;"
        if task.completed:
            name_style += " text-decoration: line-through;"
        self.name_label.setStyleSheet(name_style)
        template = COMPLETED_META if task.completed else UPCOMING_META
        self.meta_label = QLabel(template.format(due=task.due_date.isoformat(), minutes=task.time_estimate))
        self.meta_label.setTextFormat(Qt.TextFormat.PlainText)
        self.meta_label.setStyleSheet(f"color: {MUTED_TEXT_COLOR}; font-size: 11px;")
        details.addWidget(self.name_label)
        details.addWidget(self.meta_label)
        layout.addLayout(details, stretch=1)

        # 已完成任务的按钮是 "Unmark"，与 "Complete" 同为切换操作
        self.toggle_btn = QPushButton("Unmark" if task.completed else "Complete")
        self.toggle_btn.setStyleSheet(f"QPushButton {{ background: {DONE_COLOR}; color: #1F2329; border: none; border-radius: 4px; padding: 4px 8px; }}")
        self.toggle_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.toggle_btn.clicked.connect(lambda: self.toggle_requested.emit(self.task_id))
        layout.addWidget(self.toggle_btn)

        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setStyleSheet(f"QPushButton {{ background: {DANGER_COLOR}; color: white; border: none; border-radius: 4px; padding: 4px 8px; }}")
        self.delete_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.task_id))
        layout.addWidget(self.delete_btn)
