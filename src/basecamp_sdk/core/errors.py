class BasecampClientError(Exception):
    """Base error for client failures."""


class BasecampTransportError(BasecampClientError):
    """Network-level failure before any HTTP status was obtained."""

    def __init__(self, *, method: str, url: str, message: str):
        super().__init__(f"{method} {url}: {message}")
        self.method = method
        self.url = url


class BasecampParseError(BasecampClientError):
    pass


__all__ = [
    "BasecampClientError",
    "BasecampTransportError",
    "BasecampParseError",
]
