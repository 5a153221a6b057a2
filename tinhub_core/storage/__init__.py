"""
Object Storage
==============
S3-backed file storage.
"""

from .s3 import S3Service

__all__ = ["S3Service"]
