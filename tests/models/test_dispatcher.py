"""Unit tests for the Dispatcher and line splitting."""

import logging

import pytest

from models.dispatcher import Dispatcher, split_commands
from models.errors import GENERIC_ERROR_MESSAGE


class TestSplitCommands:
    @pytest.mark.parametrize("line", ["", "   ", "\t", "# comment", "   # indented"])
    def test_no_op_lines(self, line):
        assert split_commands(line) == []

    def test_single_command(self):
        assert split_commands("  pwd  ") == ["pwd"]

    def test_splits_and_trims(self):
        assert split_commands("mkdir a &cd a&  pwd") == ["mkdir a", "cd a", "pwd"]

    def test_empty_pieces_dropped(self):
        assert split_commands("pwd && & ls &") == ["pwd", "ls"]

    def test_hash_after_start_is_not_a_comment(self):
        assert split_commands("echo #x") == ["echo #x"]

    def test_ampersand_inside_quotes_still_splits(self):
        """Splitting is textual and happens before tokenizing."""
        assert split_commands('echo "a & b"') == ['echo "a', 'b"']


class TestDispatcherExecute:
    def test_one_result_per_sub_command(self, shell_session):
        results = Dispatcher(shell_session).execute("pwd & echo hi")
        assert [r.command for r in results] == ["pwd", "echo hi"]
        assert [r.output for r in results] == ["/home/user", "hi"]

    def test_comment_yields_no_results(self, shell_session):
        assert Dispatcher(shell_session).execute("# mkdir x") == []
        assert not shell_session.filesystem.exists("/home/user/x")

    def test_sub_command_without_tokens_skipped(self, shell_session):
        results = Dispatcher(shell_session).execute('"" & pwd')
        assert [r.command for r in results] == ["pwd"]

    def test_later_commands_see_earlier_effects(self, shell_session):
        results = Dispatcher(shell_session).execute("mkdir a & cd a & pwd")
        assert [r.is_error for r in results] == [False, False, False]
        assert results[-1].output == "/home/user/a"

    def test_failure_does_not_stop_the_line(self, shell_session):
        results = Dispatcher(shell_session).execute("cd missing & pwd")
        assert results[0].is_error
        assert results[0].output == GENERIC_ERROR_MESSAGE
        assert results[1].output == "/home/user"

    def test_command_text_is_trimmed_sub_command(self, shell_session):
        results = Dispatcher(shell_session).execute('  echo  "a  b"   ')
        assert results[0].command == 'echo  "a  b"'
        assert results[0].output == "a  b"


class TestDispatcherRun:
    def test_unknown_command_fails_generically(self, shell_session):
        result = Dispatcher(shell_session).run("frobnicate now")
        assert result.is_error
        assert result.output == GENERIC_ERROR_MESSAGE
        assert result.command == "frobnicate now"

    def test_failure_is_logged_at_debug(self, shell_session, caplog):
        with caplog.at_level(logging.DEBUG, logger="models.dispatcher"):
            Dispatcher(shell_session).run("cat nope")
        assert "cat nope" in caplog.text

    def test_error_text_never_varies(self, shell_session):
        dispatcher = Dispatcher(shell_session)
        outputs = {
            dispatcher.run(line).output
            for line in ["cd", "cd /nope", "cat /bin", "mkdir /bin", "exit 1", "nope"]
        }
        assert outputs == {GENERIC_ERROR_MESSAGE}

    def test_external_command_simulated(self, session_with_executables):
        result = Dispatcher(session_with_executables).run("hello world  again")
        assert not result.is_error
        assert result.output == "Executed: hello world again"

    def test_external_command_without_args(self, session_with_executables):
        result = Dispatcher(session_with_executables).run("hello")
        assert result.output == "Executed: hello"

    def test_external_command_after_path_change(self, session_with_executables):
        dispatcher = Dispatcher(session_with_executables)
        assert dispatcher.run("tool").is_error
        dispatcher.run("path /bin /usr/bin")
        assert dispatcher.run("tool").output == "Executed: tool"

    def test_empty_search_path_only_builtins(self, session_with_executables):
        dispatcher = Dispatcher(session_with_executables)
        dispatcher.run("path")
        assert dispatcher.run("hello").is_error
        assert dispatcher.run("pwd").output == "/home/user"

    def test_builtin_wins_over_file(self, shell_session):
        shell_session.filesystem.create_file("/bin/ls")
        result = Dispatcher(shell_session).run("ls")
        assert result.output == ""
        assert not result.is_error

    def test_unset_variable_as_command_fails(self, shell_session):
        assert Dispatcher(shell_session).run("$NOPE").is_error

    def test_variable_as_command_name(self, shell_session):
        shell_session.environment.set("CMD", "pwd")
        assert Dispatcher(shell_session).run("$CMD").output == "/home/user"
