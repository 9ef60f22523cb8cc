import pytest

from fluentq.config.env import EnvLoader
from fluentq.db.driver_factory import driver_from_env, driver_config_from_env, create_driver
from fluentq.db.sqlite_driver import SQLiteDriver


def test_env_loaded():
    EnvLoader.load()
    info = EnvLoader.debug_info()
    assert info["loaded"] is True


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("true", True), ("Yes", True), ("on", True),
    ("0", False), ("false", False), ("nope", False),
])
def test_get_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("FQ_TEST_FLAG", raw)
    assert EnvLoader.get_bool("FQ_TEST_FLAG") is expected


def test_get_bool_default(monkeypatch):
    monkeypatch.delenv("FQ_TEST_FLAG", raising=False)
    assert EnvLoader.get_bool("FQ_TEST_FLAG", True) is True


@pytest.mark.parametrize("raw, expected", [("42", 42), (" 7 ", 7), ("x", 5), ("", 5)])
def test_get_int(monkeypatch, raw, expected):
    monkeypatch.setenv("FQ_TEST_INT", raw)
    assert EnvLoader.get_int("FQ_TEST_INT", 5) == expected


def test_driver_from_env(monkeypatch):
    monkeypatch.setenv("DB_DRIVER", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", ":memory:")
    cfg = driver_config_from_env()
    assert cfg == {"driver": "sqlite", "params": {"path": ":memory:"}, "source": "env"}

    drv = driver_from_env()
    try:
        assert isinstance(drv, SQLiteDriver)
        assert drv.select_value("SELECT 1") == 1
    finally:
        drv.close()


def test_sqlite_file_path(tmp_path):
    path = tmp_path / "db" / "app.db"
    drv = create_driver("sqlite", {"path": str(path)})
    try:
        drv.execute("CREATE TABLE t (id INTEGER PRIMARY KEY)")
        assert drv.select_value("SELECT COUNT(*) FROM t") == 0
    finally:
        drv.close()
    assert path.exists()


def test_sqlite_path_is_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SQLiteDriver(path=str(tmp_path))


def test_unknown_driver(monkeypatch):
    monkeypatch.setenv("DB_DRIVER", "oracle")
    with pytest.raises(ValueError):
        driver_from_env()
    with pytest.raises(ValueError):
        create_driver("json")


def test_explicit_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / "query.env"
    env_file.write_text("FQ_TEST_FROM_FILE=from-file\nFQ_TEST_KEPT=from-file\n", encoding="utf-8")
    monkeypatch.setenv("FLUENTQ_ENV_FILE", str(env_file))
    # setenv pa delenv: monkeypatch na kraju uklanja i vrednost koju upiše load_dotenv
    monkeypatch.setenv("FQ_TEST_FROM_FILE", "")
    monkeypatch.delenv("FQ_TEST_FROM_FILE")
    monkeypatch.setenv("FQ_TEST_KEPT", "from-environ")
    monkeypatch.setattr(EnvLoader, "_loaded", False)
    monkeypatch.setattr(EnvLoader, "_loaded_path", None)

    assert EnvLoader.get("FQ_TEST_FROM_FILE") == "from-file"
    assert EnvLoader.get("FQ_TEST_KEPT") == "from-environ"
    assert EnvLoader.debug_info() == {"loaded": True, "env_path": str(env_file)}


def test_explicit_env_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("FLUENTQ_ENV_FILE", str(tmp_path / "nope.env"))
    monkeypatch.setattr(EnvLoader, "_loaded", False)
    monkeypatch.setattr(EnvLoader, "_loaded_path", None)

    EnvLoader.load()
    assert EnvLoader.debug_info() == {"loaded": True, "env_path": None}


@pytest.mark.parametrize("raw, expected", [
    ("full", "FULL"), (" Normal ", "NORMAL"), ("bogus", "NORMAL"), ("", "NORMAL"),
])
def test_get_choice(monkeypatch, raw, expected):
    monkeypatch.setenv("FQ_TEST_SYNC", raw)
    assert EnvLoader.get_choice("FQ_TEST_SYNC", ("OFF", "NORMAL", "FULL", "EXTRA"), "NORMAL") == expected


def test_sqlite_pragmas_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SQLITE_JOURNAL_MODE", "WAL")
    monkeypatch.setenv("SQLITE_SYNCHRONOUS", "full")
    drv = SQLiteDriver(path=str(tmp_path / "p.db"))
    try:
        assert drv.select_value("PRAGMA journal_mode") == "wal"
        assert drv.select_value("PRAGMA synchronous") == 2
    finally:
        drv.close()
