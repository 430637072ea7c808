"""Exa semantic search client.

One call, one POST: options are shaped into the /search payload, sent with the
API key header, and the decoded JSON response is handed back untouched.

Usage:
    client = SearchClient(api_key)
    data = client.search_and_contents("AI news", {"category": "news_article", "numResults": 5})
"""

import json
import sys
from collections.abc import Mapping
from typing import Any, Optional, TextIO

import requests

from .display import redact_secrets, safe_serialize
from .errors import ApiError, InvalidConfiguration, InvalidQuery
from .options import build_payload


SEARCH_URL = "https://api.exa.ai/search"


class SearchClient:
    """Client for Exa's search-and-contents endpoint.

    `session` is the HTTP transport: anything with a requests-style
    `post(url, headers=..., data=..., timeout=...)` returning an object with
    `status_code` and `text`. Transport exceptions are logged and re-raised unchanged.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        log_enabled: bool = False,
        session: Any = None,
        timeout_s: Optional[float] = None,
        log_stream: Optional[TextIO] = None,
    ):
        if not isinstance(api_key, str) or not api_key.strip():
            raise InvalidConfiguration("Exa API key is missing or empty")
        self._api_key = api_key
        self._log_enabled = bool(log_enabled)
        self.session = session if session is not None else requests.Session()
        self.timeout_s = timeout_s
        self.log_stream = log_stream

    @property
    def logging_enabled(self) -> bool:
        return self._log_enabled

    def set_logging(self, enabled: bool) -> None:
        self._log_enabled = bool(enabled)

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self._api_key,
        }

    def _log(self, label: str, value: Any) -> None:
        if not self._log_enabled:
            return
        text = value if isinstance(value, str) else safe_serialize(value, indent=None)
        text = redact_secrets(text, [self._api_key])
        print(f"[DEBUG] exa: {label}: {text}", file=self.log_stream or sys.stderr)

    def search_and_contents(self, query: str, options: Optional[Mapping[str, Any]] = None) -> dict:
        """Search Exa and return the decoded response body.

        Raises InvalidQuery for a blank query and ApiError for any status other
        than 200 (message carries the status and raw body).
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidQuery("query must be a non-empty string")

        self._log("query", query)
        payload = build_payload(query, options)
        self._log("payload", payload)

        try:
            response = self.session.post(
                SEARCH_URL,
                headers=self._headers(),
                data=json.dumps(payload),
                timeout=self.timeout_s,
            )
        except Exception as e:
            self._log("error", f"{type(e).__name__}: {e}")
            raise
        self._log("status", str(response.status_code))

        if response.status_code != 200:
            err = ApiError(response.status_code, response.text)
            self._log("error", str(err))
            raise err

        data = json.loads(response.text)
        self._log("response", data)
        return data
