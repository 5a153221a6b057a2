"""
Cognito User Directory
======================
Admin-side user management over boto3's ``cognito-idp`` client.

Every operation reports failure through its return value (False, or None for
``get_user_details``) and logs the AWS error; nothing is raised to the caller.
"""

from typing import Any, Dict, List, Optional

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from tinhub_core.config import CognitoConfig

logger = structlog.get_logger(__name__)

AWS_ERRORS = (ClientError, BotoCoreError)


def _attribute(name: str, value: str) -> Dict[str, str]:
    return {"Name": name, "Value": value}


def _flag(value: bool) -> str:
    return "true" if value else "false"


class UserDirectoryService:
    """
    Manage users in one user pool.

    Usage:
        directory = UserDirectoryService(CognitoConfig.from_env())
        if directory.add_user("jane", "jane@example.com", is_verified=True):
            directory.set_user_password("jane", "S3cure!pass", permanent=True)
    """

    def __init__(self, config: CognitoConfig, client: Optional[Any] = None):
        self.user_pool_id = config.user_pool_id
        self.client_id = config.client_id
        self.enable_cognito_email = config.enable_cognito_email
        self._client = client or boto3.client(
            "cognito-idp",
            region_name=config.region,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    def _failed(self, operation: str, username: str, error: Exception) -> None:
        error_code = None
        if isinstance(error, ClientError):
            error_code = error.response.get("Error", {}).get("Code")
        logger.error(
            "Cognito operation failed",
            operation=operation,
            username=username,
            error_code=error_code,
            error=str(error),
        )

    def set_user_password(self, username: str, password: str, permanent: bool = False) -> bool:
        """
        Set a user's password from the admin side.

        Args:
            username: User to update
            password: New password
            permanent: False leaves the user forced to change it at next sign-in
        """
        try:
            self._client.admin_set_user_password(
                UserPoolId=self.user_pool_id,
                Username=username,
                Password=password,
                Permanent=permanent,
            )
        except AWS_ERRORS as e:
            self._failed("set_user_password", username, e)
            return False
        logger.info("Cognito password set", username=username, permanent=permanent)
        return True

    def add_user(
        self,
        username: str,
        email: str,
        phone_number: Optional[str] = None,
        temporary_password: Optional[str] = None,
        is_verified: bool = False,
        additional_attributes: Optional[Dict[str, str]] = None,
    ) -> bool:
        """
        Create a user in the pool.

        Args:
            username: Username for the new user
            email: Email address
            phone_number: Optional phone number (E.164)
            temporary_password: Optional; the pool generates one when omitted
            is_verified: Mark email (and phone) as already verified
            additional_attributes: Extra attributes, e.g. {"custom:tenant": "t-1"}

        Returns:
            True if the user was created
        """
        attributes: List[Dict[str, str]] = [
            _attribute("email", email),
            _attribute("email_verified", _flag(is_verified)),
        ]
        if phone_number:
            attributes.append(_attribute("phone_number", phone_number))
            attributes.append(_attribute("phone_number_verified", _flag(is_verified)))
        for name, value in (additional_attributes or {}).items():
            attributes.append(_attribute(name, value))

        params: Dict[str, Any] = {
            "UserPoolId": self.user_pool_id,
            "Username": username,
            "UserAttributes": attributes,
        }
        if temporary_password:
            params["TemporaryPassword"] = temporary_password
        if not self.enable_cognito_email:
            params["MessageAction"] = "SUPPRESS"

        try:
            self._client.admin_create_user(**params)
        except AWS_ERRORS as e:
            self._failed("add_user", username, e)
            return False
        logger.info("Cognito user created", username=username)
        return True

    def remove_user(self, username: str) -> bool:
        try:
            self._client.admin_delete_user(UserPoolId=self.user_pool_id, Username=username)
        except AWS_ERRORS as e:
            self._failed("remove_user", username, e)
            return False
        logger.info("Cognito user removed", username=username)
        return True

    def change_user_email(self, username: str, new_email: str) -> bool:
        """Replace a user's email; the new address is marked verified."""
        return self._update_attributes(
            "change_user_email",
            username,
            [_attribute("email", new_email), _attribute("email_verified", "true")],
        )

    def change_phone_number(self, username: str, new_phone_number: str) -> bool:
        """Replace a user's phone number; the new number is marked verified."""
        return self._update_attributes(
            "change_phone_number",
            username,
            [
                _attribute("phone_number", new_phone_number),
                _attribute("phone_number_verified", "true"),
            ],
        )

    def _update_attributes(
        self, operation: str, username: str, attributes: List[Dict[str, str]]
    ) -> bool:
        try:
            self._client.admin_update_user_attributes(
                UserPoolId=self.user_pool_id,
                Username=username,
                UserAttributes=attributes,
            )
        except AWS_ERRORS as e:
            self._failed(operation, username, e)
            return False
        return True

    def verify_user(self, username: str) -> bool:
        """Enable a user account."""
        try:
            self._client.admin_enable_user(UserPoolId=self.user_pool_id, Username=username)
        except AWS_ERRORS as e:
            self._failed("verify_user", username, e)
            return False
        return True

    def get_user_details(self, username: str) -> Optional[Dict[str, str]]:
        """
        Fetch a user's attributes.

        Returns:
            Attribute name -> value (empty values dropped), or None if the
            user cannot be read
        """
        try:
            response = self._client.admin_get_user(UserPoolId=self.user_pool_id, Username=username)
        except AWS_ERRORS as e:
            self._failed("get_user_details", username, e)
            return None

        user_attributes = response.get("UserAttributes")
        if user_attributes is None:
            return None
        return {
            attr["Name"]: attr["Value"]
            for attr in user_attributes
            if attr.get("Name") and attr.get("Value")
        }
