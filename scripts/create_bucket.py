"""Create the storage bucket on S3, MinIO or LocalStack.

Usage:
    python scripts/create_bucket.py --bucket bucketfs-files --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3
from botocore.exceptions import ClientError

ALREADY_EXISTS_CODES = ("BucketAlreadyOwnedByYou", "BucketAlreadyExists")


def create_bucket(s3: Any, bucket: str, region: str = "us-east-1") -> bool:
    """Create ``bucket``. Returns False if it already exists."""
    try:
        s3.head_bucket(Bucket=bucket)
        print(f"  Bucket {bucket} already exists, skipping")
        return False
    except ClientError as exc:
        if exc.response.get("Error", {}).get("Code") not in ("404", "NoSuchBucket", "NotFound"):
            raise

    kwargs: dict[str, Any] = {"Bucket": bucket}
    # us-east-1 rejects an explicit location constraint.
    if region != "us-east-1":
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}
    try:
        s3.create_bucket(**kwargs)
    except ClientError as exc:
        if exc.response.get("Error", {}).get("Code") in ALREADY_EXISTS_CODES:
            print(f"  Bucket {bucket} already exists, skipping")
            return False
        raise
    print(f"  Created bucket {bucket}")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the bucketfs storage bucket")
    parser.add_argument("--bucket", default="bucketfs-files", help="Bucket name")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url
    s3 = boto3.client("s3", **kwargs)

    print("Creating bucket...")
    create_bucket(s3, args.bucket, region=args.region)
    print("Done!")


if __name__ == "__main__":
    main()
