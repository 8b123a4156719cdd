"""Credential interface and the default account implementation."""

import logging
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

ACCESS_TOKEN_PROPERTY = "access_token"


@runtime_checkable
class Credential(Protocol):
    """Read-only view over an authenticated account's properties."""

    def has_property(self, name: str) -> bool:
        """Return True if the property is present."""

    def get_property(self, name: str) -> str:
        """Return the property value."""


class Account:
    """An authenticated user account.

    Properties are string key/value pairs produced by the OAuth2 flow that
    authenticated the account, e.g. ``access_token``, ``refresh_token`` and
    ``expires_in``.
    """

    def __init__(
        self, username: str = "", properties: Optional[Mapping[str, str]] = None
    ):
        """Initialize the account.

        Args:
            username: Display name of the account
            properties: Initial properties, copied into the account
        """
        self.username = username
        self.properties: Dict[str, str] = dict(properties or {})

    @classmethod
    def from_token_response(
        cls, payload: Mapping[str, Any], username: str = ""
    ) -> "Account":
        """Build an account from an OAuth2 token endpoint response.

        Scalar values are stored as strings; ``None`` values are skipped.

        Args:
            payload: Decoded JSON body of the token response
            username: Display name of the account

        Returns:
            Account holding the response fields as properties
        """
        properties = {
            key: value if isinstance(value, str) else str(value)
            for key, value in payload.items()
            if value is not None
        }
        if ACCESS_TOKEN_PROPERTY not in properties:
            logger.warning("Token response did not include an access_token")
        return cls(username=username, properties=properties)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get_property(self, name: str) -> str:
        return self.properties[name]

    def __repr__(self) -> str:
        # Values are secrets, only show the keys
        return f"Account(username={self.username!r}, properties={sorted(self.properties)!r})"
