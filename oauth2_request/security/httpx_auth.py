"""httpx authentication helpers that attach an account's access token."""

from __future__ import annotations

from typing import Optional

import httpx

from ..account import Credential
from ..injector import (
    DEFAULT_ACCESS_TOKEN_PARAMETER_NAME,
    get_authenticated_url,
    get_authorization_header,
)


class OAuth2BearerAuth(httpx.Auth):
    """Attach `Authorization: Bearer <token>` from the account.

    An Authorization header already set on the request is left unchanged.
    """

    def __init__(self, account: Optional[Credential]):
        self.account = account

    def auth_flow(self, request: httpx.Request):  # type: ignore[override]
        request.headers.setdefault(
            "Authorization", get_authorization_header(self.account)
        )
        yield request


class OAuth2QueryAuth(httpx.Auth):
    """Append the account's access token to the request URL."""

    def __init__(
        self,
        account: Optional[Credential],
        access_token_parameter_name: str = DEFAULT_ACCESS_TOKEN_PARAMETER_NAME,
    ):
        self.account = account
        self.access_token_parameter_name = access_token_parameter_name

    def auth_flow(self, request: httpx.Request):  # type: ignore[override]
        request.url = get_authenticated_url(
            self.account, request.url, self.access_token_parameter_name
        )
        yield request
