"""Unit tests for command resolution."""

import pytest

from models.resolver import (
    BUILTIN_NAMES,
    BuiltinKind,
    ExecutableKind,
    resolve,
)
from tests.fixtures.core import create_filesystem


@pytest.fixture
def fs_with_tools():
    fs = create_filesystem(
        directories=["/bin", "/usr/bin", "/opt"],
        files={"/bin/hello": "", "/usr/bin/hello": "", "/usr/bin/tool": ""},
    )
    fs.create_directory("/opt/pkg")
    return fs


class TestBuiltins:
    def test_builtin_set_is_closed(self):
        assert BUILTIN_NAMES == {
            "cd", "path", "exit", "ls", "pwd", "echo",
            "env", "mkdir", "touch", "cat", "clear",
        }
        assert len(BuiltinKind) == 11

    @pytest.mark.parametrize("name", sorted(BUILTIN_NAMES))
    def test_builtins_resolve_without_search_path(self, name):
        ref = resolve(name, [], create_filesystem())
        assert ref.kind == ExecutableKind.BUILTIN
        assert ref.name == name
        assert ref.path is None

    def test_builtin_not_shadowed_by_file(self):
        fs = create_filesystem(files={"/bin/ls": ""})
        ref = resolve("ls", ["/bin"], fs)
        assert ref.kind == ExecutableKind.BUILTIN

    def test_custom_builtin_set(self, fs_with_tools):
        ref = resolve("hello", ["/bin"], fs_with_tools, builtins=frozenset({"hello"}))
        assert ref.kind == ExecutableKind.BUILTIN


class TestSearchPath:
    def test_first_match_wins(self, fs_with_tools):
        ref = resolve("hello", ["/usr/bin", "/bin"], fs_with_tools)
        assert ref.kind == ExecutableKind.EXTERNAL
        assert ref.path == "/usr/bin/hello"

        ref = resolve("hello", ["/bin", "/usr/bin"], fs_with_tools)
        assert ref.path == "/bin/hello"

    def test_later_directory_searched(self, fs_with_tools):
        ref = resolve("tool", ["/bin", "/usr/bin"], fs_with_tools)
        assert ref.path == "/usr/bin/tool"

    def test_directory_entry_counts(self, fs_with_tools):
        """Any node type matches, not only files."""
        ref = resolve("pkg", ["/opt"], fs_with_tools)
        assert ref.path == "/opt/pkg"

    def test_search_directory_is_normalized(self, fs_with_tools):
        ref = resolve("tool", ["/usr//bin/"], fs_with_tools)
        assert ref.path == "/usr/bin/tool"

    def test_missing_directory_skipped(self, fs_with_tools):
        ref = resolve("hello", ["/nope", "/bin"], fs_with_tools)
        assert ref.path == "/bin/hello"

    def test_no_match(self, fs_with_tools):
        assert resolve("nothing", ["/bin", "/usr/bin"], fs_with_tools) is None

    def test_empty_search_path_only_builtins(self, fs_with_tools):
        assert resolve("hello", [], fs_with_tools) is None

    def test_empty_command(self, fs_with_tools):
        assert resolve("", ["/bin"], fs_with_tools) is None

    @pytest.mark.parametrize("name", [".", ".."])
    def test_dot_names_do_not_resolve_to_directories(self, fs_with_tools, name):
        assert resolve(name, ["/usr/bin"], fs_with_tools) is None
