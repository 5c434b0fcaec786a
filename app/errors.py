"""Errors surfaced to API callers as {"error": message} responses"""

from typing import Optional


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ProxyError):
    """Client credentials are missing from the environment"""


class ValidationError(ProxyError):
    """Caller supplied an invalid mediaType or license"""
    status_code = 400


class UpstreamAuthError(ProxyError):
    """Openverse token endpoint rejected or failed the credentials exchange"""


class UpstreamSearchError(ProxyError):
    """Openverse search endpoint returned an error or could not be reached"""
