"""
Slash command registry for the task list prompt.

Commands register through a decorator, are looked up by name or alias,
and feed the prompt's tab completion.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import click
from prompt_toolkit.completion import Completer, Completion


@dataclass
class SlashCommand:
    name: str
    callback: Callable
    help: str = ""
    usage: str = ""
    aliases: List[str] = field(default_factory=list)
    hidden: bool = False
    category: str = "General"

    @property
    def short_help(self) -> str:
        return self.help[:50] + '...' if len(self.help) > 50 else self.help


class SlashCompleter(Completer):
    """Completes the command word of a line starting with '/'"""

    def __init__(self, registry: "SlashCommandRegistry"):
        self.registry = registry

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith('/') or ' ' in text:
            return

        for name, command in self.registry.visible_commands().items():
            if name.startswith(text):
                yield Completion(
                    name,
                    start_position=-len(text),
                    display=f"{name:<15}",
                    display_meta=command.short_help,
                )


class SlashCommandRegistry:
    """Name and alias table of the task list's slash commands"""

    def __init__(self):
        self.commands: Dict[str, SlashCommand] = {}

    def command(self, name: Optional[str] = None, *,
                aliases: Optional[List[str]] = None,
                help: Optional[str] = None,
                usage: str = "",
                hidden: bool = False,
                category: str = "General"):
        """
        Register the decorated ``callback(cli, args)`` as a slash command.

        The name defaults to the function name with a leading '/' and
        underscores turned into dashes. The callback returns False to end
        the session.
        """
        def decorator(func):
            command = SlashCommand(
                name=name or f'/{func.__name__.replace("_", "-")}',
                callback=func,
                help=help if help is not None else (func.__doc__ or ''),
                usage=usage,
                aliases=list(aliases or []),
                hidden=hidden,
                category=category,
            )
            for key in [command.name, *command.aliases]:
                self.commands[key] = command
            return func
        return decorator

    def visible_commands(self) -> Dict[str, SlashCommand]:
        """Non-hidden commands keyed by their primary name"""
        return {
            key: command for key, command in self.commands.items()
            if key == command.name and not command.hidden
        }

    def create_dynamic_completer(self) -> Completer:
        return SlashCompleter(self)

    def execute(self, cli_instance, command_line: str):
        """Run one command line. Unknown commands print a hint and return True."""
        cmd_name, _, args = command_line.strip().partition(' ')
        command = self.commands.get(cmd_name)
        if command is None:
            click.secho(f"Unknown command: {cmd_name}", fg='red')
            click.echo("Type /help for available commands")
            return True
        return command.callback(cli_instance, args.strip())
