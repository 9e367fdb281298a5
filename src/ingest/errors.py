"""Errors raised while loading the request sheet."""


class LoadError(Exception):
    """Base class for anything that stops the dataset from loading."""


class ConfigError(LoadError):
    """The CSV source URL is not configured."""


class NetworkError(LoadError):
    """The fetch failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(LoadError):
    """The response body could not be tokenized as CSV."""
