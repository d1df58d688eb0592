"""Unit tests for EnvironmentStore."""

import json

import pytest

from models.environment import EnvironmentStore
from tests.fixtures.core import create_environment_store


class TestEnvironmentStoreInstantiation:
    def test_seeded_holds_required_variables(self):
        env = EnvironmentStore.seeded(
            home="/home/user", user="user", search_path=["/bin", "/usr/bin"]
        )
        assert env.items() == [
            ("HOME", "/home/user"),
            ("USER", "user"),
            ("PATH", "/bin:/usr/bin"),
        ]

    def test_empty_search_path_gives_empty_path(self):
        env = EnvironmentStore.seeded(home="/home/user", user="user", search_path=[])
        assert env.get("PATH") == ""
        assert env.has("PATH")


class TestAccess:
    def test_get_unset_is_empty_string(self, env_store):
        assert env_store.get("UNSET") == ""
        assert not env_store.has("UNSET")

    def test_set_and_get(self, env_store):
        env_store.set("EDITOR", "vi")
        assert env_store.get("EDITOR") == "vi"

    def test_set_preserves_insertion_order(self, env_store):
        env_store.set("ZED", "1")
        env_store.set("HOME", "/root")
        names = [name for name, _ in env_store.items()]
        assert names == ["HOME", "USER", "PATH", "GREETING", "ZED"]
        assert env_store.get("HOME") == "/root"

    def test_empty_name_rejected(self, env_store):
        with pytest.raises(ValueError):
            env_store.set("", "x")


class TestSearchPathSync:
    def test_sync_rewrites_path(self, env_store):
        env_store.sync_search_path(["/a", "/b"])
        assert env_store.get("PATH") == "/a:/b"

    def test_sync_empty(self, env_store):
        env_store.sync_search_path([])
        assert env_store.get("PATH") == ""


class TestSnapshotAndValidation:
    """GENERAL PATTERN: snapshot export and consistency checks."""

    def test_snapshot_is_a_copy(self, env_store):
        snapshot = env_store.get_snapshot()
        snapshot["HOME"] = "/changed"
        assert env_store.get("HOME") == "/home/user"
        json.dumps(snapshot)

    def test_valid_when_consistent(self):
        env = create_environment_store(search_path=["/bin"])
        assert env.validate_state(["/bin"]) == []

    def test_detects_path_mismatch(self):
        env = create_environment_store(search_path=["/bin"])
        errors = env.validate_state(["/usr/bin"])
        assert len(errors) == 1
        assert "does not match" in errors[0]

    def test_detects_missing_required(self):
        env = EnvironmentStore(variables={"PATH": ""})
        errors = env.validate_state([])
        assert "required variable HOME is missing" in errors
        assert "required variable USER is missing" in errors
