"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class S3Config(BaseSettings):
    """S3 (or S3-compatible) storage configuration."""

    model_config = {"env_prefix": "BUCKETFS_S3_"}

    bucket: str = "bucketfs-files"
    root: str = ""
    region: str = "us-east-1"
    endpoint_url: str | None = None  # MinIO / LocalStack override
    access_key: str | None = None  # falls back to the boto3 credential chain
    secret_key: str | None = None
    addressing_style: Literal["auto", "virtual", "path"] = "virtual"


class LocalConfig(BaseSettings):
    """Local disk storage configuration."""

    model_config = {"env_prefix": "BUCKETFS_LOCAL_"}

    base_dir: str = "storage"
    root: str = ""


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "BUCKETFS_"}

    driver: Literal["s3", "memory", "local"] = "s3"
    log_level: str = "INFO"

    s3: S3Config = S3Config()
    local: LocalConfig = LocalConfig()
