"""
CLI Commands Module

Organizes slash commands by category for better maintainability.
"""

from .system import register_system_commands
from .tasks import register_task_commands
from .settings import register_settings_commands


def register_all_commands(registry):
    """Register all command categories with the given registry"""
    register_system_commands(registry)
    register_task_commands(registry)
    register_settings_commands(registry)
