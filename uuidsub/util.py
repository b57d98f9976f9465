import base64
import logging
import re
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

import orjson

logger = logging.getLogger(__name__)

UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_HTML_RE = re.compile(r"[&<>\"']")


def _as_text(item: Any) -> str:
    # string form of a decoded json value, as javascript String() gives it
    if isinstance(item, str):
        return item
    if item is None:
        return "null"
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, (int, float)):
        return str(item)
    if isinstance(item, list):
        return ",".join("" if x is None else _as_text(x) for x in item)
    return "[object Object]"


def dedupe(items: Iterable[Any]) -> list[str]:
    """Trim, drop empties and keep the first occurrence of each value."""
    out: list[str] = []
    seen = set()
    for item in items:
        s = _as_text(item).strip()
        if not s or s in seen:
            continue
        seen.add(s)
        out.append(s)
    return out


def _split(value: str) -> list[str]:
    return dedupe(value.split(","))


def load_uuids(
    env: Optional[Mapping[str, Any]],
    defaults: Union[Sequence[str], str, None] = None,
) -> list[str]:
    if env:
        raw_json = env.get("UUID_JSON")
        if raw_json:
            try:
                data = orjson.loads(raw_json)
            except orjson.JSONDecodeError:
                logger.debug("UUID_JSON is not valid json, falling back")
                data = None
            if isinstance(data, list):
                return _checked(dedupe(data))
            if data is not None:
                logger.debug("UUID_JSON is not a json array, falling back")
        raw_list = env.get("UUIDS")
        if raw_list:
            return _checked(_split(str(raw_list)))
    if isinstance(defaults, str):
        return _checked(_split(defaults))
    if defaults:
        return _checked(dedupe(defaults))
    return []


def looks_like_uuid(value: str) -> bool:
    # canonical uuid, or any token of 8+ chars
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    if not trimmed:
        return False
    return bool(UUID_RE.match(trimmed)) or len(trimmed) >= 8


def _checked(uuids: list[str]) -> list[str]:
    odd = [u for u in uuids if not looks_like_uuid(u)]
    if odd:
        logger.warning("identifiers do not look like uuids: %s", ",".join(odd))
    return uuids


def escape_html(value: Any) -> str:
    return _HTML_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], str(value))


def b64encode_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
