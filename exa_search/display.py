"""Helpers for turning arbitrary objects into diagnostic text."""

import json
from collections.abc import Iterable
from typing import Any


CIRCULAR = "[Circular]"

# shorter secrets would match ordinary text all over a log line
MIN_SECRET_LEN = 4


def _plain(obj: Any, path: set[int]) -> Any:
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    if isinstance(obj, (dict, list, tuple, set, frozenset)):
        if id(obj) in path:
            return CIRCULAR
        path.add(id(obj))
        try:
            if isinstance(obj, dict):
                return {str(k): _plain(v, path) for k, v in obj.items()}
            return [_plain(v, path) for v in obj]
        finally:
            path.discard(id(obj))
    return str(obj)


def safe_serialize(obj: Any, indent: int = 2) -> str:
    """JSON-ish rendering that survives reference cycles.

    A container that contains itself (directly or further down) is shown as
    "[Circular]" at the point of the back-reference. Values JSON can't encode
    are rendered with str().
    """
    return json.dumps(_plain(obj, set()), indent=indent, ensure_ascii=False)


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Best-effort redaction of known secrets (API keys) in log text."""
    if not text:
        return text
    for secret in secrets:
        if secret and len(secret) >= MIN_SECRET_LEN:
            text = text.replace(secret, "REDACTED")
    return text
