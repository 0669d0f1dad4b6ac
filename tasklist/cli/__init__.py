"""
tasklist CLI - Command Line Interface Module

- Single-screen interactive task list
- Slash command registration with auto-completion and history
- Rich formatting with light and dark themes
"""

from .provider import TaskListCLIProvider
from .registry import SlashCommandRegistry
from .state import AppState

__all__ = [
    'TaskListCLIProvider',
    'SlashCommandRegistry',
    'AppState'
]
