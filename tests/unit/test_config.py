"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from bucketfs.core.config import AppSettings, LocalConfig, S3Config


def test_default_settings():
    settings = AppSettings()
    assert settings.driver == "s3"
    assert settings.log_level == "INFO"


def test_s3_config_defaults():
    config = S3Config()
    assert config.root == ""
    assert config.region == "us-east-1"
    assert config.endpoint_url is None
    assert config.access_key is None


def test_s3_config_env_override(monkeypatch):
    monkeypatch.setenv("BUCKETFS_S3_BUCKET", "media")
    monkeypatch.setenv("BUCKETFS_S3_ROOT", "uploads")
    monkeypatch.setenv("BUCKETFS_S3_ENDPOINT_URL", "http://localhost:9000")
    config = S3Config()
    assert config.bucket == "media"
    assert config.root == "uploads"
    assert config.endpoint_url == "http://localhost:9000"


def test_driver_env_override(monkeypatch):
    monkeypatch.setenv("BUCKETFS_DRIVER", "memory")
    assert AppSettings().driver == "memory"


def test_local_config_defaults():
    assert LocalConfig().base_dir == "storage"
