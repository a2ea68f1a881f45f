"""Custom exceptions for poolcrawl."""


class ConfigurationError(ValueError):
    """Raised when a crawl is requested with invalid settings.

    Always raised before any worker starts, so no partial report exists.
    """

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class FetchError(Exception):
    """Base class for per-URL fetch failures. Never fatal to a crawl."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class HttpFetchError(FetchError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.original = original
        super().__init__(url, f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(FetchError):
    """Raised when a fetch completes with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"HTTP {status_code} for {url}")
