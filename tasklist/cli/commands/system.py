"""
System Commands

Core system commands like exit, help, status, and clear.
"""

import click
from rich.markup import escape


def register_system_commands(registry):
    """Register system-level commands"""

    @registry.command("/exit", aliases=["/q", "/quit"], help="Exit tasklist", category="System")
    def exit_command(cli, args):
        """Exit tasklist"""
        cli._running = False
        click.secho("👋 Goodbye!", fg='green')
        return False

    @registry.command(help="Show available commands", category="Help")
    def help(cli, args):
        """Display all available slash commands"""
        click.echo()
        click.secho("📝 tasklist", fg='cyan', bold=True)
        click.echo("=" * 50)

        # Group by category
        categories = {}
        for cmd, info in registry.visible_commands().items():
            categories.setdefault(info.category, []).append((cmd, info))

        for category, commands in sorted(categories.items()):
            click.echo()
            click.secho(f"{category}:", fg='yellow', bold=True)
            for cmd, info in sorted(commands, key=lambda item: item[0]):
                aliases = [a for a in info.aliases if a != cmd]
                alias_text = f" ({', '.join(aliases)})" if aliases else ""
                usage = f"{cmd} {info.usage}".strip()

                click.echo(
                    click.style(f"  {usage:<34}", fg='green') +
                    click.style(f"{info.help}", fg='white') +
                    click.style(alias_text, fg='cyan', dim=True)
                )

        click.echo()
        click.secho("Any other text sets the task name, or the due date while /date is open.", fg='blue')
        click.echo()
        return True

    @registry.command(aliases=["/cls"], help="Clear the screen", category="Utility")
    def clear(cli, args):
        """Clear the terminal screen"""
        click.clear()
        return True

    @registry.command(help="Show session status", category="System")
    def status(cli, args):
        """Display current session state"""
        cli.console.print("\n[bold]📊 tasklist Status[/bold]")
        cli.console.print(f"[dim]Task file:[/dim] {cli.storage.file_path}")
        cli.console.print(f"[dim]Tasks:[/dim] {len(cli.store)}")
        cli.console.print(f"[dim]Theme:[/dim] {'dark' if cli.state.is_dark_mode else 'light'}")
        cli.console.print(f"[dim]Date picker:[/dim] {'open' if cli.state.is_date_picker_visible else 'closed'}")
        cli.console.print(f"[dim]Settings:[/dim] {'open' if cli.state.is_settings_visible else 'closed'}")
        if cli.storage.last_error:
            cli.console.print(f"[dim]Last storage error:[/dim] [error]{escape(str(cli.storage.last_error))}[/error]")
        cli.console.print()
        return True
