import pytest

from emberexchange.db import StoveRepository, init_db


class StubRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "ember.db"
    init_db(path)
    return path


@pytest.fixture
def repository(db_path):
    return StoveRepository(db_path)
