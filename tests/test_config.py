# test_config.py
import pytest
from pydantic import ValidationError

from rollr.config import Settings, load_settings


def test_defaults():
    s = load_settings()
    assert s.rng_seed is None
    assert s.logging_level == "WARNING"
    assert s.logging_console == "WARNING"
    assert s.logging_file == "NONE"
    assert s.logging_file_path == "logs/rollr.jsonl"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ROLLR_RNG_SEED", "99")
    monkeypatch.setenv("ROLLR_LOGGING_CONSOLE", "info")
    s = load_settings()
    assert s.rng_seed == 99
    assert s.logging_console == "INFO"


def test_dotenv_beats_os_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ROLLR_RNG_SEED", "1")
    (tmp_path / ".env").write_text("ROLLR_RNG_SEED=2\n")
    assert load_settings().rng_seed == 2


def test_init_beats_everything(monkeypatch):
    monkeypatch.setenv("ROLLR_RNG_SEED", "1")
    assert Settings(rng_seed=3).rng_seed == 3


def test_unrelated_env_is_ignored(monkeypatch):
    monkeypatch.setenv("RNG_SEED", "5")
    assert load_settings().rng_seed is None


@pytest.mark.parametrize("field, value", [("ROLLR_RNG_SEED", "abc"), ("ROLLR_LOGGING_FILE", "LOUD")])
def test_invalid_values_raise(monkeypatch, field, value):
    monkeypatch.setenv(field, value)
    with pytest.raises(ValidationError):
        load_settings()
