import sys
from pathlib import Path
import pytest

# Omogući import projekta kad se testovi pokreću iz bilo kog radnog dir-a
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fluentq.config.env import EnvLoader
from fluentq.db.model import Model
from fluentq.db.sqlite_driver import SQLiteDriver
from fluentq.managers.error_manager import ErrorManager
from fluentq.managers.log_manager import LogManager


class User(Model):
    table = "users"
    searchable_fields = ["name", "email"]
    casts = {"age": int}


USERS = [
    (1, "Ana", "ana@example.com", "active", 30),
    (2, "Boris", "boris@example.com", "inactive", 25),
    (3, "Ceca", "ceca@example.com", "active", 27),
    (4, "O'Brien", "obrien@example.com", "pending", 41),
    (5, "Dejan", "dejan@test.org", "active", 19),
]


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """
    - Log ide u tmp_path (ne diramo data/logs projekta).
    - Memorija LogManager-a i ErrorManager-a se prazni pre svakog testa.
    """
    log_path = tmp_path / "logs" / "app.log"
    monkeypatch.setenv("LOG_FILE_PATH", str(log_path))
    EnvLoader.load()
    LogManager.initialize()
    ErrorManager.initialize(dev_mode=False)
    return log_path


@pytest.fixture
def driver():
    drv = SQLiteDriver(path=":memory:")
    yield drv
    drv.close()


@pytest.fixture
def seeded(driver):
    """In-memory baza sa tabelom users i 5 standardnih zapisa."""
    driver.execute(
        "CREATE TABLE users ("
        " id INTEGER PRIMARY KEY,"
        " name TEXT,"
        " email TEXT,"
        " status TEXT,"
        " age INTEGER"
        ")"
    )
    driver.execute_many(
        "INSERT INTO users (id, name, email, status, age) VALUES (?, ?, ?, ?, ?)",
        USERS,
    )
    return driver


@pytest.fixture
def user_model():
    return User
