"""OAuth2 Request.

Authenticate HTTP requests with an access token obtained from an OAuth2 flow.
"""

from .account import Account, Credential
from .errors import InvalidArgumentError, InvalidCredentialError, OAuth2RequestError
from .injector import (
    DEFAULT_ACCESS_TOKEN_PARAMETER_NAME,
    get_authenticated_url,
    get_authorization_header,
)
from .request import OAuth2Request, Request

__all__ = [
    "Account",
    "Credential",
    "DEFAULT_ACCESS_TOKEN_PARAMETER_NAME",
    "InvalidArgumentError",
    "InvalidCredentialError",
    "OAuth2Request",
    "OAuth2RequestError",
    "Request",
    "get_authenticated_url",
    "get_authorization_header",
]
