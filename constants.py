"""Fixed keys, texts and colours shared by the planner modules"""

APP_TITLE = "📚 Study Planner"

# localStorage key of the original web build, kept so exported data stays compatible
STORAGE_KEY = "studyPlannerTasks"
STORAGE_FILE_NAME = "local_storage.json"
LOG_FILE_NAME = "planner.log"

WINDOW_WIDTH = 520
WINDOW_HEIGHT = 640
TITLE_BAR_HEIGHT = 35

# 文案
INVALID_INPUT_MESSAGE = "Please fill in all fields with valid data."
TASK_ADDED_MESSAGE = 'Task "{name}" added!'
TOP_PRIORITY_MESSAGE = "Your top priority: <span style='color: {color}; font-weight: bold;'>{name}</span>"
UPCOMING_EMPTY_MESSAGE = "🎉 All caught up! No upcoming tasks."
COMPLETED_EMPTY_MESSAGE = "Go get some work done! Nothing completed yet."
UPCOMING_META = "Due: {due} • Est. time: {minutes} min"
COMPLETED_META = "Completed • Was Due: {due} • Time: {minutes} min"

# 配色 (Nord)
BG_COLOR = "#1F2329"
PANEL_COLOR = "#2A3039"
BORDER_COLOR = "#3A4049"
ACCENT_COLOR = "#4A90E2"
HIGHLIGHT_COLOR = "#EBCB8B"
DONE_COLOR = "#A3BE8C"
DANGER_COLOR = "#BF616A"
MUTED_TEXT_COLOR = "#888888"
