"""Tests for servicemap.config."""

from __future__ import annotations

from pathlib import Path

from servicemap.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        monkeypatch.delenv("RUNNER_DEBUG", raising=False)
        settings = Settings()
        assert settings.region is None
        assert settings.endpoint_url is None
        assert settings.github_output is None
        assert settings.effective_log_level == "INFO"

    def test_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICEMAP_REGION", "eu-west-1")
        monkeypatch.setenv("SERVICEMAP_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.setenv("SERVICEMAP_LOG_LEVEL", "warning")
        settings = Settings()
        assert settings.region == "eu-west-1"
        assert settings.endpoint_url == "http://localhost:4566"
        assert settings.effective_log_level == "WARNING"

    def test_runner_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "out"))
        monkeypatch.setenv("RUNNER_DEBUG", "1")
        settings = Settings()
        assert settings.github_output == Path(tmp_path / "out")
        assert settings.effective_log_level == "DEBUG"
