"""HTTP request descriptions, plain and OAuth2-authenticated."""

import logging
from typing import Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import httpx

from .account import Credential
from .injector import DEFAULT_ACCESS_TOKEN_PARAMETER_NAME, get_authenticated_url

logger = logging.getLogger(__name__)

# Methods whose parameters travel in a form body rather than the query string
FORM_BODY_METHODS = frozenset({"POST"})


class Request:
    """An HTTP request that has not been sent yet."""

    def __init__(
        self,
        method: str,
        url: Union[str, httpx.URL],
        parameters: Optional[Mapping[str, str]] = None,
        account: Optional[Credential] = None,
    ):
        """Initialize the request.

        Args:
            method: HTTP method
            url: Target URL
            parameters: Request parameters, copied into ``parameters``
            account: Account used to authenticate the request, if any
        """
        self.method = method.upper()
        self.url = httpx.URL(url)
        self.parameters: Dict[str, str] = dict(parameters or {})
        self.account = account

    def get_prepared_url(self) -> httpx.URL:
        """Get the URL the request will be sent to.

        Except for POST, parameters are percent-encoded and appended after
        the existing query, which is kept byte for byte. Repeated keys are
        not merged.
        """
        if self.method in FORM_BODY_METHODS or not self.parameters:
            return self.url
        url = str(self.url)
        separator = "&" if "?" in url else "?"
        return httpx.URL(url + separator + urlencode(self.parameters, quote_via=quote))

    def build_request(self, client: Optional[httpx.Client] = None) -> httpx.Request:
        """Build an unsent ``httpx.Request``.

        Args:
            client: Optional client whose defaults (headers, cookies) apply

        Returns:
            Request ready to be passed to ``client.send``
        """
        url = self.get_prepared_url()
        data = None
        if self.method in FORM_BODY_METHODS and self.parameters:
            data = self.parameters
        logger.debug("Building %s request", self.method)
        if client is not None:
            return client.build_request(self.method, url, data=data)
        return httpx.Request(self.method, url, data=data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method} {self.url})"


class OAuth2Request(Request):
    """Request authenticated with an account from an OAuth2 flow.

    The access token is added to the prepared URL as a query parameter.
    ``access_token_parameter_name`` defaults to ``access_token``; some
    providers, such as Foursquare, expect another name.
    """

    def __init__(
        self,
        method: str,
        url: Union[str, httpx.URL],
        parameters: Optional[Mapping[str, str]] = None,
        account: Optional[Credential] = None,
    ):
        super().__init__(method, url, parameters, account)
        self.access_token_parameter_name = DEFAULT_ACCESS_TOKEN_PARAMETER_NAME

    def get_prepared_url(self) -> httpx.URL:
        return get_authenticated_url(
            self.account, super().get_prepared_url(), self.access_token_parameter_name
        )
