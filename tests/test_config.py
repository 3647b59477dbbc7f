import logging

import pytest

from durcalc.config import CliConfig, load_config

_NAMES = (
    "DURCALC_COMPACT",
    "DURCALC_TOTAL_PREFIX",
    "DURCALC_STDIN_SUM_PREFIX",
    "DURCALC_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no durcalc variables set.

    Setting before deleting makes monkeypatch restore the original state,
    including removing values that a .env file loaded during the test.
    """
    monkeypatch.chdir(tmp_path)
    for name in _NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


def test_defaults(clean_env):
    config = load_config()
    assert config == CliConfig()
    assert config.level == logging.WARNING


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("DURCALC_COMPACT", "yes")
    monkeypatch.setenv("DURCALC_TOTAL_PREFIX", "total")
    monkeypatch.setenv("DURCALC_STDIN_SUM_PREFIX", "today")
    monkeypatch.setenv("DURCALC_LOG_LEVEL", "debug")

    config = load_config()
    assert config.compact
    assert config.total_prefix == "total"
    assert config.stdin_sum_prefix == "today"
    assert config.level == logging.DEBUG


@pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
def test_false_values(clean_env, monkeypatch, value):
    monkeypatch.setenv("DURCALC_COMPACT", value)
    assert not load_config().compact


def test_reads_dotenv_file(clean_env):
    (clean_env / ".env").write_text("DURCALC_COMPACT=1\nDURCALC_TOTAL_PREFIX=sum\n")

    config = load_config()
    assert config.compact
    assert config.total_prefix == "sum"


def test_environment_wins_over_dotenv(clean_env, monkeypatch):
    (clean_env / ".env").write_text("DURCALC_TOTAL_PREFIX=file\n")
    monkeypatch.setenv("DURCALC_TOTAL_PREFIX", "env")
    assert load_config().total_prefix == "env"


def test_rejects_unknown_log_level(clean_env, monkeypatch):
    monkeypatch.setenv("DURCALC_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Invalid log level for DURCALC_LOG_LEVEL"):
        load_config()
