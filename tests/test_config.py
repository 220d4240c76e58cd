import pytest
from webwater.server import ServerConfig, parse_args


def test_defaults():
    config = ServerConfig.from_env({})

    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.assets_path == "./assets"
    assert config.tick_interval == 0.016
    assert config.send_timeout == 0.25
    assert config.log_level == "INFO"

def test_from_env():
    config = ServerConfig.from_env({
        "HOST": "0.0.0.0",
        "PORT": "9000",
        "ASSETS_PATH": "/srv/assets",
        "TICK_INTERVAL_MS": "33",
        "SEND_TIMEOUT_MS": "500",
        "LOG_LEVEL": "debug",
    })

    assert config.host == "0.0.0.0"
    assert config.port == 9000
    assert config.assets_path == "/srv/assets"
    assert config.tick_interval == pytest.approx(0.033)
    assert config.send_timeout == pytest.approx(0.5)
    assert config.log_level == "DEBUG"

def test_bad_env_values_fall_back(caplog):
    config = ServerConfig.from_env({"PORT": "http", "TICK_INTERVAL_MS": "-5", "SEND_TIMEOUT_MS": "soon"})

    assert config.port == 8080
    assert config.tick_interval == 0.016
    assert config.send_timeout == 0.25
    assert "PORT" in caplog.text
    assert "TICK_INTERVAL_MS" in caplog.text

def test_flags_override_base():
    base = ServerConfig(port=9000, assets_path="/srv/assets")
    config = parse_args(["--port", "7000", "--tick-ms", "10", "--log-level", "warning"], base=base)

    assert config.port == 7000
    assert config.assets_path == "/srv/assets"
    assert config.tick_interval == pytest.approx(0.01)
    assert config.log_level == "WARNING"
    # base is untouched
    assert base.port == 9000

def test_no_flags_keeps_base():
    base = ServerConfig(host="0.0.0.0")
    assert parse_args([], base=base) == base

def test_non_positive_tick_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--tick-ms", "0"], base=ServerConfig())
