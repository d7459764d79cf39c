import logging

import pytest
from pydantic import ValidationError

from emberexchange.config import Settings
from emberexchange.main import bootstrap


def test_defaults(monkeypatch):
    monkeypatch.delenv("EMBER_STRIP_LENGTH", raising=False)
    monkeypatch.delenv("EMBER_FINAL_INDEX", raising=False)
    s = Settings(_env_file=None)
    assert s.strip_length == 60
    assert s.final_index == 40
    assert s.seed is None


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("EMBER_DATABASE_PATH", str(tmp_path / "x.db"))
    monkeypatch.setenv("EMBER_SEED", "17")
    s = Settings(_env_file=None)
    assert s.database_path == tmp_path / "x.db"
    assert s.seed == 17


def test_final_index_must_be_inside_strip():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, strip_length=10, final_index=10)


def test_strip_length_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, strip_length=0, final_index=0)


def test_bootstrap_opens_lootboxes(tmp_path, caplog):
    db_path = tmp_path / "runtime.db"
    with caplog.at_level(logging.INFO):
        runtime = bootstrap(db_path)
        opening = runtime.open(21)

    assert opening.mint.success
    assert runtime.repository.count_stoves_by_owner(21) == 1
    assert "runtime ready" in caplog.text
    assert "opened a lootbox" in caplog.text
