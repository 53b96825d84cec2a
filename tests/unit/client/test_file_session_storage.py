"""Unit tests for FileSessionStorage."""

import json
import stat
from uuid import uuid4

import pytest

from portier.client import FileSessionStorage, SessionData, SessionManager


@pytest.fixture
def session_data() -> SessionData:
    return SessionData.parse(
        {
            "token": "token-abc",
            "user": {"id": str(uuid4()), "name": "Ada", "email": "ada@example.com"},
        },
    )


class TestFileSessionStorage:
    """Tests for the JSON file session store."""

    def test_load_missing_file_returns_none(self, tmp_path):
        storage = FileSessionStorage(tmp_path / "session.json")

        assert storage.load() is None

    def test_save_then_load(self, tmp_path, session_data):
        storage = FileSessionStorage(tmp_path / "nested" / "session.json")

        storage.save(session_data)

        assert storage.load() == session_data

    def test_file_is_owner_only(self, tmp_path, session_data):
        path = tmp_path / "session.json"
        storage = FileSessionStorage(path)

        storage.save(session_data)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_file_does_not_contain_password(self, tmp_path, session_data):
        path = tmp_path / "session.json"
        FileSessionStorage(path).save(session_data)

        content = json.loads(path.read_text())

        assert set(content) == {"token", "user"}
        assert "password" not in content["user"]

    def test_clear_removes_file(self, tmp_path, session_data):
        path = tmp_path / "session.json"
        storage = FileSessionStorage(path)
        storage.save(session_data)

        storage.clear()

        assert not path.exists()

    def test_clear_without_file_is_noop(self, tmp_path):
        FileSessionStorage(tmp_path / "session.json").clear()

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[]", '{"token": "t"}', ""],
    )
    def test_corrupt_file_loads_as_no_session(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content)

        assert FileSessionStorage(path).load() is None

    def test_manager_hydrates_corrupt_file_as_logged_out(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{broken")
        manager = SessionManager(FileSessionStorage(path))

        manager.hydrate()

        assert not manager.loading
        assert not manager.is_authenticated
