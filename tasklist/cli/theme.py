"""
Light and dark console themes

Style names used by the renderer. Only the colors differ between themes.
"""

from rich.theme import Theme

LIGHT_THEME = Theme({
    "title": "bold black",
    "button": "bold white on black",
    "form.label": "grey50",
    "form.value": "black",
    "task.name": "bold black",
    "task.description": "grey35",
    "task.date": "black",
    "task.overdue": "bold red",
    "calendar.selected": "bold white on blue",
    "calendar.today": "underline",
    "notice": "blue",
    "warning": "yellow",
    "error": "bold red",
})

DARK_THEME = Theme({
    "title": "bold white",
    "button": "bold black on white",
    "form.label": "grey62",
    "form.value": "white",
    "task.name": "bold white",
    "task.description": "grey70",
    "task.date": "white",
    "task.overdue": "bold red",
    "calendar.selected": "bold black on cyan",
    "calendar.today": "underline",
    "notice": "cyan",
    "warning": "yellow",
    "error": "bold red",
})


def theme_for(is_dark_mode: bool) -> Theme:
    return DARK_THEME if is_dark_mode else LIGHT_THEME
