"""Tests for the bucket creation script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from create_bucket import create_bucket  # noqa: E402


@pytest.fixture
def s3():
    with mock_aws():
        yield boto3.client("s3", region_name="us-east-1")


class TestCreateBucket:
    def test_creates_bucket(self, s3):
        assert create_bucket(s3, "fresh-bucket") is True
        names = [b["Name"] for b in s3.list_buckets()["Buckets"]]
        assert names == ["fresh-bucket"]

    def test_idempotent_skips_existing(self, s3):
        create_bucket(s3, "fresh-bucket")
        assert create_bucket(s3, "fresh-bucket") is False

    def test_non_default_region(self):
        with mock_aws():
            client = boto3.client("s3", region_name="eu-west-1")
            assert create_bucket(client, "eu-bucket", region="eu-west-1") is True
            location = client.get_bucket_location(Bucket="eu-bucket")["LocationConstraint"]
            assert location == "eu-west-1"
