"""
Settings Commands

Settings panel and theme switching.
"""

from rich.markup import escape

_ON = {"on", "dark", "true", "1", "yes"}
_OFF = {"off", "light", "false", "0", "no"}


def register_settings_commands(registry):
    """Register settings commands"""

    @registry.command(help="Show or hide the settings panel", category="Settings")
    def settings(cli, args):
        """Toggle the settings panel"""
        cli.open_settings()
        cli.render()
        return True

    @registry.command(help="Toggle dark theme", usage="[on|off]", category="Settings")
    def theme(cli, args):
        """Switch between light and dark theme"""
        value = args.strip().lower()
        if not value:
            cli.toggle_dark_mode()
        elif value in _ON:
            cli.set_dark_mode(True)
        elif value in _OFF:
            cli.set_dark_mode(False)
        else:
            cli.console.print(f"[error]Unknown theme:[/error] {escape(args)} [dim](use on or off)[/dim]")
            return True

        mode = "dark" if cli.state.is_dark_mode else "light"
        cli.console.print(f"[notice]Theme: {mode}[/notice]")
        if cli.state.is_settings_visible:
            cli.render()
        return True
