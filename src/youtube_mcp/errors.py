"""Exceptions raised by the YouTube MCP server."""


class YouTubeMCPError(Exception):
    """Base exception for the server.

    The class name leads the message so that a client reading only the tool
    error text can still tell the failure kinds apart.
    """

    def __str__(self) -> str:
        return f"{type(self).__name__}: {super().__str__()}"


class ConfigError(YouTubeMCPError, ValueError):
    """Supplied configuration could not be parsed."""

    pass


class MissingAPIKeyError(YouTubeMCPError):
    """No YouTube API key was resolved for a call that needs one."""

    def __init__(self):
        super().__init__(
            "YouTube API key is not configured. Set YOUTUBE_API_KEY or pass apiKey in the server config."
        )


class UpstreamError(YouTubeMCPError):
    """YouTube Data API request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(UpstreamError):
    """The API answered but returned no item for the requested id."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"{kind} not found: {identifier}", status_code=404)
        self.kind = kind
        self.identifier = identifier


class TranscriptUnavailableError(YouTubeMCPError):
    """No transcript could be fetched for a video."""

    pass


class RegistrationError(YouTubeMCPError):
    """Catalog entries are inconsistent. Raised before any traffic is served."""

    pass


class DuplicateNameError(RegistrationError):
    pass


class TemplateMismatchError(RegistrationError):
    pass
