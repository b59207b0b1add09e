import logging

import pytest

from utils import app_config


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "CONFIG_DIR", tmp_path / "cfg")
    monkeypatch.setattr(app_config, "CONFIG_FILE", tmp_path / "cfg" / "config.json")
    return tmp_path / "cfg"


def test_missing_config_is_empty():
    assert app_config.load_config() == {}
    assert app_config.get_db_folder() is None
    assert app_config.get_log_level() == logging.INFO


def test_corrupt_config_is_empty(config_dir):
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{oops", encoding="utf-8")
    assert app_config.load_config() == {}


def test_db_folder_round_trip():
    app_config.set_db_folder("/data/ledger")
    assert app_config.get_db_folder() == "/data/ledger"
    app_config.set_db_folder(None)
    assert app_config.get_db_folder() is None


def test_log_level():
    app_config.save_config({"log_level": "debug"})
    assert app_config.get_log_level() == logging.DEBUG
    app_config.save_config({"log_level": "chatty"})
    assert app_config.get_log_level() == logging.INFO
