from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal

from constants import ACCENT_COLOR, BG_COLOR, PANEL_COLOR

INPUT_STYLE = f"""
    QLineEdit {{
        background: {PANEL_COLOR};
        color: white;
        border: 2px solid {ACCENT_COLOR};
        padding: 4px;
        font-family: 'Consolas';
        font-size: 12px;
    }}
"""


class AddTaskForm(QWidget):
    """Dashboard 页面：新建任务表单，只负责收集原始输入"""
    submitted = pyqtSignal(str, str, str)  # name, due date, time estimate

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"AddTaskForm {{ background-color: {BG_COLOR}; }} QLabel {{ color: #FFFFFF; }}")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)

        heading = QLabel("Add a new task")
        heading.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(heading)

        self.name_input = self._add_field(layout, "Task name", "e.g. Essay draft")
        self.due_input = self._add_field(layout, "Due date", "YYYY-MM-DD")
        self.time_input = self._add_field(layout, "Time estimate (minutes)", "e.g. 45")

        self.add_btn = QPushButton("Add Task")
        self.add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_btn.setStyleSheet(f"""
            QPushButton {{ background: {ACCENT_COLOR}; color: white; border: none; border-radius: 4px; padding: 6px; font-weight: bold; }}
            QPushButton:hover {{ background: #5A9FF0; }}
        """)
        self.add_btn.clicked.connect(self.submit)
        layout.addWidget(self.add_btn)
        layout.addStretch()

    def _add_field(self, layout, label, placeholder) -> QLineEdit:
        layout.addWidget(QLabel(label))
        editor = QLineEdit()
        editor.setPlaceholderText(placeholder)
        editor.setStyleSheet(INPUT_STYLE)
        editor.returnPressed.connect(self.submit)
        layout.addWidget(editor)
        return editor

    def submit(self):
        self.submitted.emit(self.name_input.text(), self.due_input.text(), self.time_input.text())

    def clear(self):
        for editor in (self.name_input, self.due_input, self.time_input):
            editor.clear()
        self.name_input.setFocus()
