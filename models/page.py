from enum import Enum


class Page(Enum):
    DASHBOARD = "dashboard"
    UPCOMING = "upcoming"
    COMPLETED = "completed"

    @classmethod
    def from_token(cls, token) -> 'Page':
        """Resolve a navigation token such as "#upcoming"; unknown ones go to the dashboard"""
        if isinstance(token, cls):
            return token
        if not token:
            return cls.DASHBOARD
        value = str(token).strip().lstrip("#")
        for page in cls:
            if page.value == value:
                return page
        return cls.DASHBOARD
