"""Provider-agnostic exceptions raised by compute providers."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for errors raised by a cloud provider integration."""


class ProviderCredentialsError(ProviderError):
    """Cloud credentials are missing, incomplete or rejected."""


class ProviderConnectionError(ProviderError):
    """The provider endpoint could not be reached."""


class ProviderAPIError(ProviderError):
    """The provider API returned an error response.

    Parameters
    ----------
    message : str
        Error message reported by the provider
    error_code : str | None
        Provider error code (e.g. ``UnauthorizedOperation``)
    """

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
