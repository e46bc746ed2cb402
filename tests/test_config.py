"""
Configuration Tests
===================

Tests for settings defaults, YAML loading, and env overrides.
"""

from crowd_zones.config import DEFAULT_SNAPSHOT_PATH, Settings, load_config


class TestConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        settings = Settings()

        assert settings.snapshot.path == DEFAULT_SNAPSHOT_PATH
        assert settings.thresholds.tier.high == 80
        assert settings.thresholds.tier.medium == 50
        assert settings.thresholds.alerts.critical_density == 90
        assert settings.thresholds.alerts.dense == 70
        assert settings.thresholds.alerts.stagnation_speed == 1.0
        assert settings.thresholds.alerts.high_speed == 3.0
        assert settings.flow.meters_per_degree == 111320

    def test_yaml_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CROWD_ZONES_LOG_LEVEL", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\nserver:\n  port: 9000\n")
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("CROWD_ZONES_PORT", raising=False)

        settings = load_config(str(path))

        assert settings.logging.level == "DEBUG"
        assert settings.server.port == 9000

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("thresholds:\n  alerts:\n    critical_density: 85\n")
        monkeypatch.setenv("CROWD_ZONES_CRITICAL_DENSITY", "92.5")
        monkeypatch.setenv("CROWD_ZONES_SNAPSHOT_PATH", "/tmp/zones.yaml")
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.setenv("CROWD_ZONES_PORT", "8100")

        settings = load_config(str(path))

        assert settings.thresholds.alerts.critical_density == 92.5
        assert settings.snapshot.path == "/tmp/zones.yaml"
        assert settings.server.port == 8100

    def test_port_env_takes_precedence(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CROWD_ZONES_PORT", "8100")

        settings = load_config(str(tmp_path / "missing.yaml"))

        assert settings.server.port == 8080
