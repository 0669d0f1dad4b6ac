"""Tests for the slash command registry and the registered commands."""

import json
from unittest.mock import patch

from prompt_toolkit.document import Document

from tasklist.cli.commands.tasks import parse_positions
from tasklist.cli.registry import SlashCommandRegistry


def _completions(registry, text):
    completer = registry.create_dynamic_completer()
    return [c.text for c in completer.get_completions(Document(text), None)]


class TestSlashCommandRegistry:
    """Test cases for SlashCommandRegistry"""

    def test_register_with_default_name_and_aliases(self):
        registry = SlashCommandRegistry()

        @registry.command(aliases=["/t"], help="Test command")
        def show_all(cli, args):
            return args

        assert "/show-all" in registry.commands
        assert registry.commands["/t"].callback is show_all
        assert registry.execute(None, "/t hello world") == "hello world"

    def test_unknown_command(self, capsys):
        registry = SlashCommandRegistry()
        assert registry.execute(None, "/nope") is True
        assert "Unknown command: /nope" in capsys.readouterr().out

    def test_visible_commands_skip_aliases_and_hidden(self):
        registry = SlashCommandRegistry()

        @registry.command("/shown", aliases=["/s"])
        def shown(cli, args):
            return True

        @registry.command("/secret", hidden=True)
        def secret(cli, args):
            return True

        assert list(registry.visible_commands()) == ["/shown"]

    def test_completer(self, cli):
        registry = cli.command_registry
        assert "/add" in _completions(registry, "/")
        assert sorted(_completions(registry, "/de")) == ["/delete", "/desc"]
        assert _completions(registry, "/delete 1") == []
        assert _completions(registry, "plain") == []


class TestParsePositions:
    """Test cases for parse_positions"""

    def test_spaces_and_commas(self):
        assert parse_positions("1 3,4") == [0, 2, 3]

    def test_rejects_non_numbers(self):
        assert parse_positions("1 x") is None
        assert parse_positions("") is None
        assert parse_positions("-1") is None


class TestTaskCommands:
    """Test cases for the form and task commands"""

    def _run(self, cli, *lines):
        for line in lines:
            cli.command_registry.execute(cli, line)

    def test_fill_form_and_add(self, cli):
        self._run(cli, "/name Buy milk", "/desc 2%", "/due 2030-01-01", "/add")

        task = cli.store[0]
        assert (task.name, task.description) == ("Buy milk", "2%")
        assert task.date.astimezone().year == 2030
        assert cli.state.name == ""
        assert cli.storage.exists()

    def test_description_alias(self, cli):
        self._run(cli, "/description some text")
        assert cli.state.description == "some text"

    def test_due_invalid_keeps_date(self, cli, console):
        before = cli.state.date
        self._run(cli, "/due later")
        assert cli.state.date == before
        assert "Not a date" in console.file.getvalue()

    def test_due_out_of_range(self, cli, console):
        before = cli.state.date
        self._run(cli, "/due +9999999")
        assert cli.state.date == before
        assert "Not a date" in console.file.getvalue()

    def test_date_toggles_picker(self, cli):
        self._run(cli, "/date")
        assert cli.state.is_date_picker_visible is True
        self._run(cli, "/picker")
        assert cli.state.is_date_picker_visible is False

    def test_delete(self, cli):
        self._run(cli, "/name a", "/add", "/name b", "/add", "/name c", "/add")
        self._run(cli, "/delete 1 3")

        assert [t.name for t in cli.store] == ["b"]
        saved = json.loads(cli.storage.file_path.read_text(encoding="utf-8"))
        assert [d["name"] for d in saved] == ["b"]

    def test_delete_bad_input(self, cli, console):
        self._run(cli, "/name a", "/add")
        self._run(cli, "/rm first", "/rm 9")

        assert len(cli.store) == 1
        out = console.file.getvalue()
        assert "Usage:" in out
        assert "No task at that position" in out

    def test_edit(self, cli):
        self._run(cli, "/name a", "/add")
        task_id = cli.store[0].id

        self._run(cli, "/edit 1 name renamed task", "/edit 1 desc new details", "/edit 1 due 2031-07-08")

        task = cli.store[0]
        assert task.id == task_id
        assert task.name == "renamed task"
        assert task.description == "new details"
        assert task.date.astimezone().year == 2031
        saved = json.loads(cli.storage.file_path.read_text(encoding="utf-8"))
        assert saved[0]["name"] == "renamed task"

    def test_edit_clears_description(self, cli):
        self._run(cli, "/name a", "/desc details", "/add")
        self._run(cli, "/edit 1 desc")

        assert cli.store[0].description == ""
        saved = json.loads(cli.storage.file_path.read_text(encoding="utf-8"))
        assert saved[0]["description"] == ""

    def test_edit_due_needs_value(self, cli, console):
        self._run(cli, "/name a", "/add")
        before = cli.store[0].date
        self._run(cli, "/edit 1 due")

        assert cli.store[0].date == before
        assert "Usage:" in console.file.getvalue()

    def test_edit_bad_input(self, cli, console):
        self._run(cli, "/name a", "/add")
        self._run(cli, "/edit 1 colour red", "/edit 5 name x", "/edit 1 due whenever")

        assert cli.store[0].name == "a"
        out = console.file.getvalue()
        assert "Usage:" in out
        assert "No task at that position" in out
        assert "Not a date" in out

    def test_save(self, cli, console):
        self._run(cli, "/save")
        assert cli.storage.exists()
        assert "Saved 0 task(s)" in console.file.getvalue()


class TestSettingsCommands:
    """Test cases for settings and theme"""

    def test_settings_toggle(self, cli):
        cli.command_registry.execute(cli, "/settings")
        assert cli.state.is_settings_visible is True
        cli.command_registry.execute(cli, "/settings")
        assert cli.state.is_settings_visible is False

    def test_theme_toggle_and_explicit(self, cli, console):
        cli.command_registry.execute(cli, "/theme")
        assert cli.state.is_dark_mode is True
        cli.command_registry.execute(cli, "/theme light")
        assert cli.state.is_dark_mode is False
        cli.command_registry.execute(cli, "/theme dark")
        assert cli.state.is_dark_mode is True
        cli.command_registry.execute(cli, "/theme purple")
        assert cli.state.is_dark_mode is True
        assert "Unknown theme" in console.file.getvalue()


class TestSystemCommands:
    """Test cases for exit, help and status"""

    def test_exit_aliases(self, cli):
        for line in ("/exit", "/q", "/quit"):
            cli._running = True
            assert cli.command_registry.execute(cli, line) is False
            assert cli._running is False

    def test_help_lists_commands(self, cli, capsys):
        cli.command_registry.execute(cli, "/help")
        out = capsys.readouterr().out
        for cmd in ("/add", "/delete", "/edit", "/settings", "/theme", "/exit"):
            assert cmd in out

    def test_status(self, cli, console):
        cli.command_registry.execute(cli, "/status")
        out = console.file.getvalue()
        assert "tasks.json" in out
        assert "light" in out

    def test_clear(self, cli):
        with patch("tasklist.cli.commands.system.click.clear") as clear:
            assert cli.command_registry.execute(cli, "/cls") is True
        clear.assert_called_once()
