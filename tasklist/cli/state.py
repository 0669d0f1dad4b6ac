"""Ephemeral UI state of the task list screen.

Nothing here is persisted: the form, the picker/settings toggles and the theme
all reset on every launch.
"""

from dataclasses import dataclass, field
from datetime import datetime

from tasklist.tasks.models import utc_now


@dataclass
class AppState:
    """Form fields and view toggles owned by the CLI provider."""
    name: str = ""
    description: str = ""
    date: datetime = field(default_factory=utc_now)
    is_date_picker_visible: bool = False
    is_settings_visible: bool = False
    is_dark_mode: bool = False

    def clear_form(self) -> None:
        """Reset the form after a task was added."""
        self.name = ""
        self.description = ""
        self.date = utc_now()
