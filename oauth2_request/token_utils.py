"""Utilities for reading and logging access tokens."""

import logging
from typing import Optional

from .account import ACCESS_TOKEN_PROPERTY, Credential
from .errors import InvalidArgumentError, InvalidCredentialError

logger = logging.getLogger(__name__)

# Tokens shorter than this are hidden completely
MIN_MASKED_PREFIX_LENGTH = 12


def mask_token(text: str, token: Optional[str]) -> str:
    """Hide every occurrence of a token inside text meant for logs.

    Long tokens keep their first four characters so log lines can still be
    correlated, e.g. ``...?access_token=eyJh***``.

    Args:
        text: Text that may contain the token, such as an authenticated URL
        token: Access token to hide

    Returns:
        Text with the token replaced
    """
    if not token:
        return text
    masked = f"{token[:4]}***" if len(token) >= MIN_MASKED_PREFIX_LENGTH else "***"
    return text.replace(token, masked)


def require_access_token(account: Optional[Credential]) -> str:
    """Return the account's access token after checking it is usable.

    Args:
        account: Authenticated account

    Returns:
        The access token, unchanged

    Raises:
        InvalidArgumentError: If account is None
        InvalidCredentialError: If account has no access_token property
    """
    if account is None:
        logger.warning("No account provided for OAuth2 request")
        raise InvalidArgumentError("account")
    if not account.has_property(ACCESS_TOKEN_PROPERTY):
        logger.warning("OAuth2 account is missing the access_token property")
        raise InvalidCredentialError()
    return account.get_property(ACCESS_TOKEN_PROPERTY)
