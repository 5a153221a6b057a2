"""
Unit Tests for S3 Storage
=========================
"""

import io
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def s3_client():
    return MagicMock()


@pytest.fixture
def service(s3_client):
    from tinhub_core.config import S3Config
    from tinhub_core.storage import S3Service

    return S3Service(S3Config(bucket_name="uploads", region="eu-west-1"), client=s3_client)


class TestS3Service:
    """Tests for bucket operations."""

    def test_builds_client_from_config(self):
        """Should create a boto3 S3 client with the configured credentials."""
        from tinhub_core.config import S3Config
        from tinhub_core.storage import S3Service

        with patch("tinhub_core.storage.s3.boto3.client") as client_factory:
            S3Service(S3Config("uploads", "eu-west-1", "AKIA...", "secret"))

        client_factory.assert_called_once_with(
            "s3",
            region_name="eu-west-1",
            aws_access_key_id="AKIA...",
            aws_secret_access_key="secret",
        )

    def test_upload_file(self, service, s3_client):
        """Should put the object with metadata."""
        service.upload_file("avatars/1.png", b"png-bytes", {"owner": "u-1"})

        s3_client.put_object.assert_called_once_with(
            Bucket="uploads",
            Key="avatars/1.png",
            Body=b"png-bytes",
            Metadata={"owner": "u-1"},
        )

    def test_upload_file_without_metadata(self, service, s3_client):
        """Should omit Metadata when none is given."""
        service.upload_file("a.txt", "hello")

        assert "Metadata" not in s3_client.put_object.call_args.kwargs

    def test_get_file(self, service, s3_client):
        """Should return the object body as bytes."""
        s3_client.get_object.return_value = {"Body": io.BytesIO(b"content")}

        assert service.get_file("a.txt") == b"content"
        s3_client.get_object.assert_called_once_with(Bucket="uploads", Key="a.txt")

    def test_get_file_missing_propagates(self, service, s3_client):
        """Errors other than metadata lookups should propagate."""
        s3_client.get_object.side_effect = ClientError(
            {"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject"
        )

        with pytest.raises(ClientError):
            service.get_file("missing.txt")

    def test_delete_file(self, service, s3_client):
        service.delete_file("a.txt")

        s3_client.delete_object.assert_called_once_with(Bucket="uploads", Key="a.txt")

    def test_list_files_paginates(self, service, s3_client):
        """Should collect keys across pages."""
        paginator = s3_client.get_paginator.return_value
        paginator.paginate.return_value = [
            {"Contents": [{"Key": "docs/a.pdf"}, {"Key": "docs/b.pdf"}]},
            {"Contents": [{"Key": "docs/c.pdf"}]},
            {},
        ]

        keys = service.list_files(prefix="docs/")

        assert keys == ["docs/a.pdf", "docs/b.pdf", "docs/c.pdf"]
        s3_client.get_paginator.assert_called_once_with("list_objects_v2")
        paginator.paginate.assert_called_once_with(Bucket="uploads", Prefix="docs/")

    def test_list_files_empty_bucket(self, service, s3_client):
        """Should return an empty list when there is nothing to list."""
        s3_client.get_paginator.return_value.paginate.return_value = [{}]

        assert service.list_files() == []
        s3_client.get_paginator.return_value.paginate.assert_called_once_with(Bucket="uploads")

    def test_copy_file(self, service, s3_client):
        """Should copy within the same bucket."""
        service.copy_file("a.txt", "backup/a.txt")

        s3_client.copy_object.assert_called_once_with(
            Bucket="uploads",
            CopySource={"Bucket": "uploads", "Key": "a.txt"},
            Key="backup/a.txt",
        )

    def test_get_presigned_url(self, service, s3_client):
        """Should request a presigned GET URL."""
        s3_client.generate_presigned_url.return_value = "https://signed.example/a.txt"

        url = service.get_presigned_url("a.txt", 300)

        assert url == "https://signed.example/a.txt"
        s3_client.generate_presigned_url.assert_called_once_with(
            "get_object",
            Params={"Bucket": "uploads", "Key": "a.txt"},
            ExpiresIn=300,
        )

    def test_get_file_metadata(self, service, s3_client):
        """Should return the object's user metadata."""
        s3_client.head_object.return_value = {"Metadata": {"owner": "u-1"}}

        assert service.get_file_metadata("a.txt") == {"owner": "u-1"}

    def test_get_file_metadata_missing(self, service, s3_client):
        """Should return None when the object cannot be read."""
        s3_client.head_object.side_effect = ClientError(
            {"Error": {"Code": "404", "Message": "Not Found"}}, "HeadObject"
        )

        assert service.get_file_metadata("missing.txt") is None
