"""Search options and payload construction for the Exa /search endpoint.

Options are an open mapping keyed by the wire (camelCase) names. Known keys are
listed in SearchOptions; anything else is forwarded untouched so fields Exa adds
later work without a client release.
"""

from collections.abc import Mapping
from typing import Any, Optional, TypedDict


SEARCH_TYPES = ("neural", "keyword", "auto")

CATEGORIES = (
    "company",
    "research paper",
    "news",
    "news_article",
    "pdf",
    "github",
    "tweet",
    "personal site",
    "linkedin profile",
    "financial report",
)

LIVECRAWL_MODES = ("never", "fallback", "always", "auto")

CONTENT_KEYS = ("text", "highlights", "summary")

DEFAULT_TYPE = "neural"
DEFAULT_USE_AUTOPROMPT = True
DEFAULT_NUM_RESULTS = 10


class TextOptions(TypedDict, total=False):
    includeHtmlTags: bool
    maxCharacters: int


class HighlightsOptions(TypedDict, total=False):
    query: str
    numSentences: int
    highlightsPerUrl: int


class SummaryOptions(TypedDict, total=False):
    query: str


class SearchOptions(TypedDict, total=False):
    type: str
    category: str
    useAutoprompt: bool
    numResults: int
    livecrawl: str
    includeDomains: list[str]
    excludeDomains: list[str]
    startCrawlDate: str
    endCrawlDate: str
    startPublishedDate: str
    endPublishedDate: str
    text: TextOptions
    highlights: HighlightsOptions
    summary: SummaryOptions


def _text_contents(value: Any) -> Optional[dict]:
    if isinstance(value, Mapping):
        return {"enabled": True, **value}
    if value is True:
        return {"enabled": True}
    if value is False:
        return None
    raise TypeError(f"text option must be a mapping or bool, got {type(value).__name__}")


def build_contents(options: Mapping[str, Any]) -> dict:
    """Build the `contents` object from the text/highlights/summary options only.

    A content key appears in the result only when the caller supplied it, so Exa
    never runs an extraction nobody asked for.
    """
    contents: dict = {}
    if options.get("text") is not None:
        text = _text_contents(options["text"])
        if text is not None:
            contents["text"] = text
    for key in ("highlights", "summary"):
        value = options.get(key)
        if value is not None and value is not False:
            contents[key] = value
    return contents


def build_payload(query: str, options: Optional[Mapping[str, Any]] = None) -> dict:
    """Return the JSON body for one /search call.

    Defaults: type -> "neural" when missing, useAutoprompt -> True only when
    absent (False is kept), numResults -> 10 when missing or falsy. A value of
    None counts as not supplied. The caller's mapping is not modified.
    """
    opts = {k: v for k, v in (options or {}).items() if v is not None}

    payload: dict[str, Any] = {"query": query}
    for key, value in opts.items():
        if key == "contents" or key in CONTENT_KEYS:
            continue
        payload[key] = value

    payload["type"] = opts.get("type") or DEFAULT_TYPE
    payload["useAutoprompt"] = opts["useAutoprompt"] if "useAutoprompt" in opts else DEFAULT_USE_AUTOPROMPT
    # numResults=0 also falls back to the default; kept for compatibility with existing callers.
    payload["numResults"] = opts.get("numResults") or DEFAULT_NUM_RESULTS
    payload["contents"] = build_contents(opts)
    return payload
