"""Sanitizer applied to every shaped record before it reaches the host.

HTML elements are removed (script/style together with their content), any
angle bracket left over is escaped, and entities are never decoded, so the
output holds no live markup. URL values pass through untouched. Containers
are rebuilt recursively so the input is never mutated.
"""

import re
from typing import Any

_HTML_TAGS = (
    "a|abbr|b|big|blockquote|br|center|code|del|div|em|embed|font|form|h[1-6]|hr|i|"
    "iframe|img|input|ins|li|link|meta|object|ol|p|pre|s|small|span|strike|strong|"
    "sub|sup|svg|table|tbody|td|th|thead|tr|tt|u|ul"
)
_DROP_ELEMENT_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(rf"</?(?:{_HTML_TAGS}|script|style)\b[^<>]*/?>", re.IGNORECASE)
_URL_RE = re.compile(r"^(?:https?|ftp|magnet):\S*$", re.IGNORECASE)


def sanitize_text(value: str) -> str:
    """Remove HTML elements from a string and escape stray angle brackets."""
    if _URL_RE.match(value):
        return value
    value = _DROP_ELEMENT_RE.sub("", value)
    value = _TAG_RE.sub("", value)
    return value.replace("<", "&lt;").replace(">", "&gt;")


def sanitize(value: Any) -> Any:
    """Return a host-safe copy of a record, a list of records or a scalar.

    Args:
        value: Shaped data (dicts, lists, strings, numbers, None)

    Returns:
        New structure of the same shape with every string sanitized
    """
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, dict):
        return {key: sanitize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    return value
