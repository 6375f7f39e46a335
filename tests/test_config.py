from src.todo_service.config import DEFAULT_PORT, Config


def test_from_yaml_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Config.from_yaml(tmp_path / "missing.yaml")
    assert config.server.port == DEFAULT_PORT == 3000
    assert config.log_level == "INFO"


def test_from_yaml_reads_values_and_env_overrides(tmp_path, monkeypatch):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text(
        "server:\n  port: 8080\nlog:\n  level: DEBUG\n  file: ''\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)

    config = Config.from_yaml(config_path)
    assert config.server.port == 8080
    assert config.log_level == "DEBUG"
    assert config.log_file == ""

    monkeypatch.setenv("PORT", "4321")
    assert Config.from_yaml(config_path).server.port == 4321


def test_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    config = Config.from_env()
    assert config.server.port == 5000
    assert config.log_level == "WARNING"

    monkeypatch.delenv("PORT")
    assert Config.from_env().server.port == 3000
