"""Exceptions raised while authenticating OAuth2 requests."""

from typing import Optional


class OAuth2RequestError(ValueError):
    """Base class for OAuth2 request errors."""

    def __init__(self, message: str, argument_name: Optional[str] = None):
        super().__init__(message)
        self.argument_name = argument_name


class InvalidArgumentError(OAuth2RequestError):
    """A required argument was None."""

    def __init__(self, argument_name: str):
        super().__init__(f"{argument_name} must not be None", argument_name)


class InvalidCredentialError(OAuth2RequestError):
    """The account exists but cannot authenticate a request."""

    def __init__(
        self,
        message: str = "OAuth2 account is missing required access_token property.",
        argument_name: str = "account",
    ):
        super().__init__(message, argument_name)
