import importlib

import pytest
from sdes import config
from sdes.cipher import construct, encrypt
from sdes.errors import InvalidKeyWidth

ENV_VARS = ("SDES_STRICT_KEY_WIDTH", "SDES_NUM_WORKERS", "SDES_LOG_LEVEL")


@pytest.fixture
def reload_config(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    # Put the module back the way the real environment configures it
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults_without_environment(reload_config):
    reload_config()
    assert config.STRICT_KEY_WIDTH is False
    assert config.NUM_WORKERS == 1
    assert config.LOG_LEVEL == "WARNING"


@pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
def test_strict_flag_truthy(reload_config, monkeypatch, value):
    monkeypatch.setenv("SDES_STRICT_KEY_WIDTH", value)
    reload_config()
    assert config.STRICT_KEY_WIDTH is True
    with pytest.raises(InvalidKeyWidth):
        construct(1024)


@pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
def test_strict_flag_falsy(reload_config, monkeypatch, value):
    monkeypatch.setenv("SDES_STRICT_KEY_WIDTH", value)
    reload_config()
    assert config.STRICT_KEY_WIDTH is False
    assert construct(1024 + 813).master_key == 813


def test_num_workers_from_environment(reload_config, monkeypatch):
    monkeypatch.setenv("SDES_NUM_WORKERS", "4")
    reload_config()
    assert config.NUM_WORKERS == 4
    engine = construct(813)
    assert [ord(c) for c in encrypt(engine, "hello world")] == \
        [110, 74, 43, 43, 21, 124, 117, 21, 0, 43, 169]


def test_num_workers_must_be_an_integer(reload_config, monkeypatch):
    monkeypatch.setenv("SDES_NUM_WORKERS", "four")
    with pytest.raises(ValueError, match="SDES_NUM_WORKERS must be an integer"):
        reload_config()


def test_log_level_from_environment(reload_config, monkeypatch):
    monkeypatch.setenv("SDES_LOG_LEVEL", "DEBUG")
    reload_config()
    assert config.LOG_LEVEL == "DEBUG"
