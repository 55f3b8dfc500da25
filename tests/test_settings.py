import pytest

from xotic.paths import DEFAULT_THINK_DELAY, env_seed, think_delay


@pytest.mark.parametrize("raw,expected", [
    (None, DEFAULT_THINK_DELAY),
    ("", DEFAULT_THINK_DELAY),
    ("0", 0.0),
    ("0.25", 0.25),
    ("-3", 0.0),
    ("soon", DEFAULT_THINK_DELAY),
])
def test_think_delay(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("XOTIC_THINK_DELAY", raising=False)
    else:
        monkeypatch.setenv("XOTIC_THINK_DELAY", raw)
    assert think_delay() == expected


def test_env_seed(monkeypatch):
    monkeypatch.delenv("XOTIC_SEED", raising=False)
    assert env_seed() is None
    monkeypatch.setenv("XOTIC_SEED", "17")
    assert env_seed() == 17
    monkeypatch.setenv("XOTIC_SEED", "x")
    assert env_seed() is None


def test_invalid_setting_is_logged(monkeypatch, caplog):
    monkeypatch.setenv("XOTIC_THINK_DELAY", "soon")
    with caplog.at_level("WARNING"):
        think_delay()
    assert "XOTIC_THINK_DELAY" in caplog.text
