class ExaError(Exception):
    """Base class for errors raised by exa_search itself."""


class InvalidConfiguration(ExaError, ValueError):
    """The client was constructed without a usable API key."""


class InvalidQuery(ExaError, ValueError):
    """The search query is missing or blank."""


class ApiError(ExaError):
    """Exa answered with a non-200 status.

    The raw response body is kept verbatim so callers can see what the
    service said; nothing is retried.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Exa API error {status_code}: {body}")
