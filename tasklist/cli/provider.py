"""
Task List CLI Provider

Interactive single-screen task list, focused only on:
- Input/output handling
- Wiring the form and view toggles to the task store
- Saving after every change
"""

from datetime import datetime
from typing import Iterable, List, Optional
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory, InMemoryHistory
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tasklist.app_config import AppConfig
from tasklist.persistence import TaskStorage
from tasklist.tasks import Task, TaskStore
from tasklist.tasks.models import utc_now
from .commands import register_all_commands
from .dates import format_due_date, month_weeks, parse_due_date
from .registry import SlashCommandRegistry
from .state import AppState
from .theme import LIGHT_THEME, theme_for

logger = logging.getLogger(__name__)


class TaskListCLIProvider:
    """Task list screen: owns the UI state, the task store and its storage"""

    def __init__(self, config: Optional[AppConfig] = None,
                 storage: Optional[TaskStorage] = None,
                 store: Optional[TaskStore] = None,
                 console: Optional[Console] = None,
                 history=None):
        """Initialize the task list provider."""
        self.config = config or AppConfig()
        self.storage = storage or TaskStorage(self.config.data_dir)
        self.store = store or TaskStore()
        self.state = AppState()
        self._running: bool = False

        # UI components
        self.console = console or Console(theme=LIGHT_THEME)
        self._theme_pushed: bool = False
        self._history = history

        # Command system
        self.command_registry = SlashCommandRegistry()
        register_all_commands(self.command_registry)
        self.completer = self.command_registry.create_dynamic_completer()

    # ---- task operations ----

    def load_tasks(self) -> bool:
        """Populate the store from disk. Keeps the current tasks on failure."""
        tasks = self.storage.load()
        if tasks is None:
            self._warn_storage_failure("load")
            return False
        self.store.replace(tasks)
        return True

    def save_tasks(self) -> bool:
        """Write the whole store to disk, warning the user on failure."""
        if self.storage.save(self.store.all()):
            return True
        self._warn_storage_failure("save")
        return False

    def add_task(self) -> Task:
        """Add a task from the form fields, then clear the form and save."""
        task = self.store.add(self.state.name, self.state.description, self.state.date)
        self.state.clear_form()
        self.save_tasks()
        logger.info(f"Added task {task.id}")
        return task

    def delete_tasks(self, offsets: Iterable[int]) -> List[Task]:
        """Delete tasks by 0-based position in the displayed list, then save."""
        removed = self.store.delete_at(offsets)
        if removed:
            self.save_tasks()
        return removed

    def edit_task(self, offset: int, *,
                  name: Optional[str] = None,
                  description: Optional[str] = None,
                  date: Optional[datetime] = None) -> Optional[Task]:
        """Change fields of one task by 0-based position, then save."""
        task = self.store.edit_at(offset, name=name, description=description, date=date)
        if task is not None:
            self.save_tasks()
        return task

    def _warn_storage_failure(self, action: str) -> None:
        error = self.storage.last_error
        detail = f": {escape(str(error))}" if error else ""
        self.console.print(f"[warning]Could not {action} tasks{detail}[/warning]")

    # ---- form and view toggles ----

    def set_due_date(self, text: str) -> bool:
        """Parse and set the form due date. Returns False on bad input."""
        try:
            self.state.date = parse_due_date(text, base=self.state.date)
        except ValueError:
            self.console.print(f"[error]Not a date:[/error] {escape(text)} [dim](use YYYY-MM-DD, today, +N)[/dim]")
            return False
        return True

    def toggle_date_picker(self) -> bool:
        self.state.is_date_picker_visible = not self.state.is_date_picker_visible
        return self.state.is_date_picker_visible

    def open_settings(self) -> bool:
        """Toggle the settings panel."""
        self.state.is_settings_visible = not self.state.is_settings_visible
        return self.state.is_settings_visible

    def set_dark_mode(self, enabled: bool) -> None:
        """Switch theme. Held in memory only, every launch starts light."""
        self.state.is_dark_mode = enabled
        if self._theme_pushed:
            self.console.pop_theme()
        self.console.push_theme(theme_for(enabled))
        self._theme_pushed = True

    def toggle_dark_mode(self) -> bool:
        self.set_dark_mode(not self.state.is_dark_mode)
        return self.state.is_dark_mode

    def date_style(self, task: Task, now: Optional[datetime] = None) -> str:
        """Style name for a task's due date: overdue dates are highlighted"""
        return "task.overdue" if task.is_overdue(now) else "task.date"

    def process_plain_input(self, text: str) -> None:
        """Non-command input fills the date when the picker is open, else the name"""
        if self.state.is_date_picker_visible:
            if self.set_due_date(text):
                self.render()
            return
        self.state.name = text
        self.render()

    # ---- rendering ----

    def _format_date(self, value: datetime) -> str:
        return format_due_date(value, self.config.date_format)

    def _render_header(self) -> Table:
        chevron = "▴" if self.state.is_settings_visible else "▾"
        header = Table.grid(expand=True)
        header.add_column()
        header.add_column(justify="right")
        header.add_row(Text("Tasks", style="title"), Text(f" Settings {chevron} ", style="button"))
        return header

    def _render_form(self) -> Panel:
        chevron = "▴" if self.state.is_date_picker_visible else "▾"
        form = Table.grid(padding=(0, 2))
        form.add_column(style="form.label")
        form.add_column(style="form.value")
        form.add_row("Task Name", Text(self.state.name) if self.state.name else "[dim]/name ...[/dim]")
        form.add_row("Description", Text(self.state.description) if self.state.description else "[dim]/desc ...[/dim]")
        form.add_row("Due Date", f"{self._format_date(self.state.date)} {chevron}")
        return Panel(form, title="New Task", title_align="left", subtitle="/add", subtitle_align="right")

    def _render_calendar(self) -> Table:
        local = self.state.date.astimezone()
        today = utc_now().astimezone().date()
        table = Table(title=local.strftime("%B %Y"), show_edge=False, box=None, padding=(0, 1))
        for day_name in ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"):
            table.add_column(day_name, justify="right")

        for week in month_weeks(self.state.date):
            cells = []
            for day in week:
                if day == 0:
                    cells.append(Text(""))
                elif day == local.day:
                    cells.append(Text(f"{day:2d}", style="calendar.selected"))
                elif (local.year, local.month, day) == (today.year, today.month, today.day):
                    cells.append(Text(f"{day:2d}", style="calendar.today"))
                else:
                    cells.append(Text(f"{day:2d}"))
            table.add_row(*cells)
        return table

    def _render_settings(self) -> Panel:
        switch = "[bold]● ON[/bold]" if self.state.is_dark_mode else "○ OFF"
        body = Text.from_markup(f"Dark theme  {switch}\n[dim]/theme to toggle, /settings to close[/dim]")
        return Panel(body, title="Settings", title_align="left")

    def task_table(self, now: Optional[datetime] = None) -> Table:
        """Table of all tasks, overdue due dates highlighted"""
        table = Table(expand=True, show_lines=False)
        table.add_column("#", justify="right", style="dim", width=3)
        table.add_column("Task")
        table.add_column("Description")
        table.add_column("Due", justify="right")

        for i, task in enumerate(self.store, start=1):
            name = Text(task.name, style="task.name")
            if task.is_completed:
                name.stylize("strike")
            table.add_row(
                str(i),
                name,
                Text(task.description, style="task.description"),
                Text(self._format_date(task.date), style=self.date_style(task, now)),
            )
        return table

    def render(self, now: Optional[datetime] = None) -> None:
        """Draw the whole screen"""
        parts = [self._render_header(), self._render_form()]
        if self.state.is_date_picker_visible:
            parts.append(self._render_calendar())
        if self.state.is_settings_visible:
            parts.append(self._render_settings())
        if len(self.store):
            parts.append(self.task_table(now))
        else:
            parts.append(Text("No tasks yet", style="notice"))
        self.console.print(Group(*parts))

    # ---- session ----

    def get_input(self) -> str:
        """Get input with slash command completion and history"""
        if self._history is None:
            history_path = self.config.history_path()
            try:
                history_path.parent.mkdir(parents=True, exist_ok=True)
                self._history = FileHistory(str(history_path))
            except OSError as e:
                logger.warning(f"History file unavailable ({e}), keeping history in memory")
                self._history = InMemoryHistory()

        prompt_session = PromptSession(
            message="> ",
            completer=self.completer,
            history=self._history,
            auto_suggest=AutoSuggestFromHistory(),
            complete_while_typing=True,
        )
        try:
            return prompt_session.prompt().strip()
        except EOFError:
            return "/exit"

    def run_interactive(self) -> None:
        """Run the interactive task list session."""
        self._running = True

        self.console.clear()
        self.console.print("✨ [bold]Welcome to tasklist![/bold]")
        self.console.print("[dim]Type /help for commands, or type a task name[/dim]")

        self.load_tasks()
        self.render()

        while self._running:
            try:
                user_input = self.get_input()

                if not user_input:
                    continue

                if user_input.startswith('/'):
                    self.command_registry.execute(self, user_input)
                else:
                    self.process_plain_input(user_input)

            except KeyboardInterrupt:
                self.console.print("\n[dim]Use /exit to quit[/dim]")
            except Exception as e:
                logger.error(f"Error in interactive session: {e}")
                self.console.print(f"[error]Error:[/error] {e}")
