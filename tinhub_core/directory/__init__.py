"""
User Directory
==============
Admin operations on a Cognito user pool.
"""

from .cognito import UserDirectoryService

__all__ = ["UserDirectoryService"]
