import json
import os

from main import parse_args, settings_from_args, split_address


def test_cli_flags_override_settings(monkeypatch):
    monkeypatch.delenv("CONFIG", raising=False)
    args = parse_args(
        ["-a", "127.0.0.1:9000", "-d", "sqlite+aiosqlite://", "--access-exp", "7", "--refresh-secret", "r"]
    )

    settings = settings_from_args(args)

    assert settings.SERVER_ADDRESS == "127.0.0.1:9000"
    assert settings.DATABASE_URL == "sqlite+aiosqlite://"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 7
    assert settings.REFRESH_TOKEN_SECRET == "r"


def test_config_flag_reads_json_without_touching_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("CONFIG", raising=False)
    monkeypatch.delenv("REFRESH_TOKEN_EXPIRE_MINUTES", raising=False)
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"REFRESH_TOKEN_EXPIRE_MINUTES": 99}))

    settings = settings_from_args(parse_args(["-c", str(config_path)]))

    assert settings.REFRESH_TOKEN_EXPIRE_MINUTES == 99
    assert settings.CONFIG == str(config_path)
    assert "CONFIG" not in os.environ


def test_cli_flags_beat_config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("CONFIG", raising=False)
    monkeypatch.delenv("ACCESS_TOKEN_EXPIRE_MINUTES", raising=False)
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"ACCESS_TOKEN_EXPIRE_MINUTES": 5}))

    settings = settings_from_args(parse_args(["-c", str(config_path), "--access-exp", "8"]))

    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 8


def test_split_address():
    assert split_address("localhost:3000") == ("localhost", 3000)
    assert split_address(":8080") == ("0.0.0.0", 8080)
