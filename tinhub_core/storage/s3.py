"""
S3 Storage Client
=================
Thin wrapper over boto3 for a single S3 bucket.
"""

from typing import Any, Dict, List, Optional, Union

import boto3
import structlog
from botocore.exceptions import ClientError

from tinhub_core.config import S3Config

logger = structlog.get_logger(__name__)


class S3Service:
    """
    File operations against one bucket.

    Errors from S3 propagate as botocore ``ClientError``, except
    ``get_file_metadata`` which returns None for a missing object.
    """

    def __init__(self, config: S3Config, client: Optional[Any] = None):
        self.bucket_name = config.bucket_name
        self._client = client or boto3.client(
            "s3",
            region_name=config.region,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    def upload_file(
        self,
        key: str,
        body: Union[bytes, bytearray, str],
        metadata: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Upload a file.

        Args:
            key: Object key (path) in the bucket
            body: File content
            metadata: Optional user metadata stored with the object
        """
        params: Dict[str, Any] = {"Bucket": self.bucket_name, "Key": key, "Body": body}
        if metadata:
            params["Metadata"] = metadata
        self._client.put_object(**params)
        logger.debug("S3 object uploaded", bucket=self.bucket_name, key=key)

    def get_file(self, key: str) -> bytes:
        """Download a file's content."""
        response = self._client.get_object(Bucket=self.bucket_name, Key=key)
        return response["Body"].read()

    def delete_file(self, key: str) -> None:
        self._client.delete_object(Bucket=self.bucket_name, Key=key)
        logger.debug("S3 object deleted", bucket=self.bucket_name, key=key)

    def list_files(self, prefix: Optional[str] = None) -> List[str]:
        """
        List object keys, following pagination.

        Args:
            prefix: Only return keys starting with this prefix
        """
        params: Dict[str, Any] = {"Bucket": self.bucket_name}
        if prefix:
            params["Prefix"] = prefix

        keys: List[str] = []
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(**params):
            for item in page.get("Contents", []):
                if item.get("Key"):
                    keys.append(item["Key"])
        return keys

    def copy_file(self, source_key: str, destination_key: str) -> None:
        """Copy an object within the bucket."""
        self._client.copy_object(
            Bucket=self.bucket_name,
            CopySource={"Bucket": self.bucket_name, "Key": source_key},
            Key=destination_key,
        )

    def get_presigned_url(self, key: str, expires_in_seconds: int) -> str:
        """
        Generate a presigned GET URL.

        Args:
            key: Object key
            expires_in_seconds: URL lifetime
        """
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket_name, "Key": key},
            ExpiresIn=expires_in_seconds,
        )

    def get_file_metadata(self, key: str) -> Optional[Dict[str, str]]:
        """User metadata of an object, or None if it cannot be read (e.g. missing)."""
        try:
            response = self._client.head_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            logger.debug(
                "S3 head_object failed",
                bucket=self.bucket_name,
                key=key,
                error_code=e.response.get("Error", {}).get("Code"),
            )
            return None
        return response.get("Metadata", {})
