"""Tag-building primitives shared by every widget."""

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional
import re

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset({"input", "br", "hr", "img", "link", "meta"})


def stringify(value: Any) -> str:
    """Render a Python value the way it appears in a form field."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def sanitize_id(value: Any) -> str:
    return re.sub(r"[^-\w]", "", re.sub(r"\s", "_", stringify(value))).lower()


def class_names(*groups: Any) -> Optional[str]:
    """Union of css classes in first-seen order; groups may be strings or iterables."""
    seen: list = []
    for group in groups:
        if not group:
            continue
        names = group.split() if isinstance(group, str) else group
        for name in names:
            if name and name not in seen:
                seen.append(name)
    return " ".join(seen) or None


def tag_attributes(attrs: Mapping[str, Any]) -> str:
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            value = key
        elif isinstance(value, (list, tuple, set)):
            value = " ".join(str(v) for v in value)
        parts.append(f' {escape(key)}="{escape(value)}"')
    return "".join(parts)


def build_tag(name: str, attrs: Optional[Mapping[str, Any]] = None, content: Any = None) -> Markup:
    """
    Build one HTML element.

    Attribute values and text content are escaped unless they are already
    ``Markup``. ``True`` renders as ``key="key"``; ``None`` and ``False`` are
    omitted.
    """
    attributes = tag_attributes(attrs or {})
    if name in VOID_ELEMENTS:
        return Markup(f"<{name}{attributes} />")
    body = escape(content) if content is not None else ""
    return Markup(f"<{name}{attributes}>{body}</{name}>")


def join(fragments: Iterable[Any], separator: str = "") -> Markup:
    return Markup(separator).join(fragments)
