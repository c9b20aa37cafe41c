"""Parser for flat ``key = value`` language files."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

COMMENT_PREFIXES = (";", "#")


def _parse_value(value: str) -> str:
    # Quoted values keep everything up to the closing quote, ";" included.
    if value[:1] in ("'", '"'):
        end = value.find(value[0], 1)
        if end != -1:
            return value[1:end]
    return value.split(";", 1)[0].rstrip()


def parse_ini_string(text: str) -> Dict[str, str]:
    """Parse ``text`` into a flat mapping of keys to string values.

    Blank lines, comments, ``[section]`` headers and lines without ``=`` are
    skipped, and an unquoted value ends at an inline ";" comment.
    Keys from all sections end up in the same mapping and the last occurrence
    of a key wins.
    """
    result: Dict[str, str] = {}
    for raw in text.lstrip("\ufeff").splitlines():
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if line.startswith("[") and line.endswith("]"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        result[key] = _parse_value(value.strip())
    return result


def parse_ini_file(path: Union[str, Path]) -> Dict[str, str]:
    """Read a UTF-8 language file and parse it with :func:`parse_ini_string`."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_ini_string(f.read())
