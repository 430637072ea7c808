"""API key lookup: EXA_API_KEY from the environment, else from a .env file.

Only the one key is read from the file. Lines may use shell syntax
(`export EXA_API_KEY=...`), quoted values, and trailing `# comments` after an
unquoted value.
"""

import os
from typing import Optional


EXA_API_KEY_ENV = "EXA_API_KEY"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    # inline comment only counts when separated from an unquoted value
    if " #" in value:
        value = value.split(" #", 1)[0].rstrip()
    return value


def read_key_from_file(path: str, key: str = EXA_API_KEY_ENV) -> Optional[str]:
    """First non-empty value assigned to `key` in a .env file, or None."""
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.strip()
            if line.startswith("export "):
                line = line[len("export "):].lstrip()
            name, sep, value = line.partition("=")
            if not sep or name.strip() != key:
                continue
            value = _unquote(value.strip())
            if value:
                return value
    return None


def get_api_key(dotenv_path: str = ".env") -> Optional[str]:
    val = (os.getenv(EXA_API_KEY_ENV) or "").strip()
    if val:
        return val
    return read_key_from_file(dotenv_path)
