import pytest

from ekaci.dirs import DirectoryError, default_socket_path, runtime_file


@pytest.fixture
def runtime_dir(tmp_path, monkeypatch):
    tmp_path.chmod(0o700)
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    return tmp_path


def test_runtime_file_under_prefix(runtime_dir):
    assert runtime_file("thing") == runtime_dir / "ekaci" / "thing"


def test_default_socket_path(runtime_dir):
    assert default_socket_path() == runtime_dir / "ekaci" / "ekaci.socket"


def test_runtime_file_does_not_create_anything(runtime_dir):
    path = runtime_file("thing")
    assert path == runtime_dir / "ekaci" / "thing"
    assert not path.exists()
    assert not path.parent.exists()
    assert list(runtime_dir.iterdir()) == []


def test_missing_variable(monkeypatch):
    monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
    with pytest.raises(DirectoryError):
        runtime_file("thing")


def test_relative_variable(monkeypatch):
    monkeypatch.setenv("XDG_RUNTIME_DIR", "relative/dir")
    with pytest.raises(DirectoryError):
        runtime_file("thing")


def test_missing_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "absent"))
    with pytest.raises(DirectoryError):
        runtime_file("thing")


def test_insecure_directory(tmp_path, monkeypatch):
    tmp_path.chmod(0o750)
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    with pytest.raises(DirectoryError):
        runtime_file("thing")


def test_default_socket_error_message(monkeypatch):
    monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
    with pytest.raises(DirectoryError, match="consider setting it explicitly"):
        default_socket_path()