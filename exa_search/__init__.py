from .client import SEARCH_URL, SearchClient
from .errors import ApiError, ExaError, InvalidConfiguration, InvalidQuery
from .options import SearchOptions, build_payload

__all__ = [
    "SEARCH_URL",
    "SearchClient",
    "SearchOptions",
    "build_payload",
    "ApiError",
    "ExaError",
    "InvalidConfiguration",
    "InvalidQuery",
]
