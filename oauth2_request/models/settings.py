"""Settings for authenticating outgoing OAuth2 requests."""

from typing import Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..account import Credential
from ..injector import DEFAULT_ACCESS_TOKEN_PARAMETER_NAME
from ..security.httpx_auth import OAuth2BearerAuth, OAuth2QueryAuth

_RESERVED_CHARACTERS = frozenset("&=?#")


class OAuth2RequestSettings(BaseSettings):
    """Where and under which name the access token is sent.

    Environment Variables:
        OAUTH2_REQUEST_ACCESS_TOKEN_PARAMETER_NAME: Query parameter name
        OAUTH2_REQUEST_TOKEN_PLACEMENT: ``query`` or ``header``
    """

    model_config = SettingsConfigDict(
        env_prefix="OAUTH2_REQUEST_",
        case_sensitive=False,
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    access_token_parameter_name: str = Field(
        default=DEFAULT_ACCESS_TOKEN_PARAMETER_NAME,
        description="Query parameter carrying the token when placed in the URL.",
    )
    token_placement: Literal["query", "header"] = Field(
        default="query",
        description="Send the token as a query parameter or an Authorization header.",
    )

    @field_validator("access_token_parameter_name")
    @classmethod
    def _validate_parameter_name(cls, value: str) -> str:
        if not value:
            raise ValueError("access_token_parameter_name must not be empty")
        if _RESERVED_CHARACTERS.intersection(value):
            raise ValueError(
                "access_token_parameter_name must not contain '&', '=', '?' or '#'"
            )
        return value

    def build_auth(
        self, account: Optional[Credential]
    ) -> Union[OAuth2BearerAuth, OAuth2QueryAuth]:
        """Return the httpx auth matching ``token_placement``."""
        if self.token_placement == "header":
            return OAuth2BearerAuth(account)
        return OAuth2QueryAuth(account, self.access_token_parameter_name)
