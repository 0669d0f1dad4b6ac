"""
Task Commands

Filling the new-task form, adding, editing, deleting and saving tasks.
"""

from typing import List, Optional

from rich.markup import escape

from ..dates import parse_due_date

_EDIT_FIELDS = {
    "name": "name",
    "desc": "description",
    "description": "description",
    "due": "date",
    "date": "date",
}


def parse_positions(args: str) -> Optional[List[int]]:
    """Turn '1 3,4' into 0-based offsets [0, 2, 3]. None if any token is not a number."""
    tokens = args.replace(",", " ").split()
    if not tokens or not all(t.isdigit() for t in tokens):
        return None
    return [int(t) - 1 for t in tokens]


def register_task_commands(registry):
    """Register task list commands"""

    @registry.command(help="Set the task name", usage="<text>", category="Form")
    def name(cli, args):
        """Fill the Task Name field"""
        cli.state.name = args
        cli.render()
        return True

    @registry.command(aliases=["/description"], help="Set the task description", usage="<text>", category="Form")
    def desc(cli, args):
        """Fill the Description field"""
        cli.state.description = args
        cli.render()
        return True

    @registry.command(help="Set the due date", usage="<YYYY-MM-DD|today|+N>", category="Form")
    def due(cli, args):
        """Set the Due Date field"""
        if not args.strip():
            cli.console.print(f"Due date: {cli._format_date(cli.state.date)}")
            return True
        if cli.set_due_date(args):
            cli.render()
        return True

    @registry.command(aliases=["/picker"], help="Show or hide the date picker", category="Form")
    def date(cli, args):
        """Toggle the calendar; plain input picks a date while it is open"""
        cli.toggle_date_picker()
        cli.render()
        return True

    @registry.command(help="Add a task from the form", category="Tasks")
    def add(cli, args):
        """Add the task described by the form fields"""
        task = cli.add_task()
        cli.console.print(f"[notice]Added:[/notice] {escape(task.name) or '(untitled)'}")
        cli.render()
        return True

    @registry.command(aliases=["/rm", "/del"], help="Delete tasks by number", usage="<n> [n ...]", category="Tasks")
    def delete(cli, args):
        """Delete one or more tasks by their displayed number"""
        offsets = parse_positions(args)
        if offsets is None:
            cli.console.print("[error]Usage:[/error] /delete <n> \\[n ...]")
            return True

        removed = cli.delete_tasks(offsets)
        if not removed:
            cli.console.print("[warning]No task at that position[/warning]")
            return True
        cli.console.print(f"[notice]Deleted {len(removed)} task(s)[/notice]")
        cli.render()
        return True

    @registry.command(help="Edit a task field", usage="<n> name|desc|due <value>", category="Tasks")
    def edit(cli, args):
        """Change the name, description or due date of one task"""
        parts = args.split(maxsplit=2)
        field = _EDIT_FIELDS.get(parts[1].lower()) if len(parts) > 1 else None
        # Name and description may be cleared, a due date is required
        if not field or not parts[0].isdigit() or (field == "date" and len(parts) < 3):
            cli.console.print("[error]Usage:[/error] /edit <n> name|desc|due <value>")
            return True

        offset = int(parts[0]) - 1
        if not 0 <= offset < len(cli.store):
            cli.console.print("[warning]No task at that position[/warning]")
            return True

        value = parts[2] if len(parts) == 3 else ""
        if field == "date":
            try:
                value = parse_due_date(value, base=cli.store[offset].date)
            except ValueError:
                cli.console.print(f"[error]Not a date:[/error] {escape(parts[2])}")
                return True

        cli.edit_task(offset, **{field: value})
        cli.render()
        return True

    @registry.command(help="Save all tasks to disk", category="Tasks")
    def save(cli, args):
        """Write the whole list to tasks.json"""
        if cli.save_tasks():
            cli.console.print(f"[notice]Saved {len(cli.store)} task(s) to {cli.storage.file_path}[/notice]")
        return True

    @registry.command(aliases=["/ls"], help="Redraw the task list", category="Tasks")
    def list(cli, args):
        """Show the screen again"""
        cli.render()
        return True
