"""tasklist - single-screen task list with local JSON storage.

Modules:
- tasks: Task entity and the in-memory task store
- persistence: tasks.json reader/writer
- cli: interactive screen and Typer entry points
"""

__version__ = "0.1.0"

__all__ = ['__version__']
