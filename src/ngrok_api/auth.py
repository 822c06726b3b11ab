"""Authentication handling for the ngrok API client."""

from __future__ import annotations

import os

from .config import NGROK_API_KEY_ENV
from .exceptions import AuthenticationError


def get_api_key(api_key: str | None = None) -> str | None:
    """Get the API key from various sources.

    Checks in order of priority:
    1. Explicitly provided api_key parameter
    2. NGROK_API_KEY environment variable

    Args:
        api_key: Explicitly provided API key.

    Returns:
        The API key if found, None otherwise.
    """
    if api_key:
        return api_key

    env_key = os.environ.get(NGROK_API_KEY_ENV)
    if env_key:
        return env_key

    return None


class AuthProvider:
    """Provider for authentication headers.

    Resolves the API key lazily and caches it for subsequent requests.
    """

    def __init__(self, api_key: str | None = None) -> None:
        """Initialize the auth provider.

        Args:
            api_key: Explicit API key to use.
        """
        self._api_key = api_key
        self._resolved_key: str | None = None

    @property
    def api_key(self) -> str | None:
        """Get the resolved API key."""
        if self._resolved_key is None:
            self._resolved_key = get_api_key(api_key=self._api_key)
        return self._resolved_key

    def get_headers(self) -> dict[str, str]:
        """Get authorization headers for requests.

        Returns:
            Headers dictionary with the bearer Authorization header.

        Raises:
            AuthenticationError: If no API key is available.
        """
        key = self.api_key
        if not key:
            raise AuthenticationError(
                f"No API key found. Set the {NGROK_API_KEY_ENV} environment variable "
                "or pass the api_key parameter"
            )

        return {"Authorization": f"Bearer {key}"}

    def refresh(self) -> None:
        """Clear cached key and re-resolve on next access."""
        self._resolved_key = None

    def is_authenticated(self) -> bool:
        """Check if an API key is available."""
        return self.api_key is not None
