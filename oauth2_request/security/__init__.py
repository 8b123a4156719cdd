"""httpx integration for OAuth2 request authentication."""

from .httpx_auth import OAuth2BearerAuth, OAuth2QueryAuth  # noqa: F401
