"""Embed an OAuth2 access token into a URL or an Authorization header."""

import logging
from typing import Optional, Union

import httpx

from .account import Credential
from .errors import InvalidArgumentError
from .token_utils import mask_token, require_access_token

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_TOKEN_PARAMETER_NAME = "access_token"


def get_authenticated_url(
    account: Optional[Credential],
    unauthenticated_url: Optional[Union[str, httpx.URL]],
    access_token_parameter_name: Optional[str] = (
        DEFAULT_ACCESS_TOKEN_PARAMETER_NAME
    ),
) -> httpx.URL:
    """Transform an unauthenticated URL to an authenticated one.

    The token is appended as the last query parameter without any
    percent-encoding. A URL counts as already having a query when its text
    contains a ``?`` anywhere, so a ``?`` inside the fragment also selects
    ``&`` as the separator. Calling this on its own output appends a second
    parameter.

    Args:
        account: Account that has been authenticated
        unauthenticated_url: URL to authenticate, never modified
        access_token_parameter_name: Query parameter name, ``access_token``
            when None. Any other value, even an empty string, is used as-is

    Returns:
        New URL carrying the access token

    Raises:
        InvalidArgumentError: If account or unauthenticated_url is None
        InvalidCredentialError: If account has no access_token property
    """
    token = require_access_token(account)
    if unauthenticated_url is None:
        raise InvalidArgumentError("unauthenticated_url")

    name = access_token_parameter_name
    if name is None:
        name = DEFAULT_ACCESS_TOKEN_PARAMETER_NAME
    url = str(unauthenticated_url)
    separator = "&" if "?" in url else "?"
    url += f"{separator}{name}={token}"

    logger.debug("Authenticated request URL: %s", mask_token(url, token))
    return httpx.URL(url)


def get_authorization_header(account: Optional[Credential]) -> str:
    """Get an HTTP Authorization header value for the account.

    Raises:
        InvalidArgumentError: If account is None
        InvalidCredentialError: If account has no access_token property
    """
    return "Bearer " + require_access_token(account)
