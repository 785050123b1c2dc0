"""XML codec for SoundTouch request and response bodies.

Decoding flattens every element into one dictionary: attributes and child
elements share the same namespace, element text that sits next to attributes
or children is stored under :data:`TEXT_KEY`, and text-only elements collapse
to plain strings.  The speaker's schema is shallow enough that losing the
attribute/child distinction is harmless.

Because a single ``<preset>`` decodes to a record while two decode to a list,
repeatable elements are normalised per endpoint using
:data:`~.api_constants.REPEATABLE_FIELDS`.

Encoding builds minimal XML fragments and escapes every interpolated value.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from xml.sax.saxutils import escape

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from .api_constants import REPEATABLE_FIELDS
from .exceptions import SoundTouchApiError, SoundTouchInvalidDataError

_LOGGER = logging.getLogger(__name__)

TEXT_KEY = "#text"

# saxutils handles & < > itself; quotes must be added for attribute values.
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


# -----------------------------------------------------------------------------
# Decode
# -----------------------------------------------------------------------------


def _normalize_text(text: str | None) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    if not text:
        return ""
    return " ".join(text.split())


def _element_to_value(element: Any) -> Any:
    node: dict[str, Any] = dict(element.attrib)

    for child in element:
        value = _element_to_value(child)
        existing = node.get(child.tag)
        if existing is None:
            node[child.tag] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            node[child.tag] = [existing, value]

    text = _normalize_text(element.text)
    if not node:
        return text
    if text:
        node[TEXT_KEY] = text
    return node


def parse_xml(text: str) -> dict[str, Any]:
    """Decode *text* into ``{root_tag: value}``.

    Raises:
        SoundTouchInvalidDataError: the body is empty, malformed, or uses
            constructs defusedxml refuses (entity expansion, external DTDs).
    """
    if not text or not text.strip():
        raise SoundTouchInvalidDataError("Empty response body")

    try:
        root = fromstring(text)
    except (ParseError, DefusedXmlException) as err:
        raise SoundTouchInvalidDataError(f"Failed to parse XML: {err}") from err

    return {root.tag: _element_to_value(root)}


def unwrap_root(document: dict[str, Any]) -> dict[str, Any]:
    """Return the root element's value as a dictionary."""
    if not document:
        return {}
    value = next(iter(document.values()))
    if isinstance(value, dict):
        return value
    if value:
        return {TEXT_KEY: value}
    return {}


def as_list(value: Any) -> list[Any]:
    """Wrap a single decoded node into a list; absent becomes empty."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if value == "":
        # an empty element is still one occurrence
        return [{}]
    return [value]


def normalize_response(endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Force the repeatable fields registered for *endpoint* into lists."""
    fields = REPEATABLE_FIELDS.get(endpoint)
    if not fields:
        return payload

    normalized = dict(payload)
    for field in fields:
        normalized[field] = as_list(normalized.get(field))
    return normalized


def decode_response(endpoint: str, text: str) -> dict[str, Any]:
    """Parse a response body and apply the endpoint's normalisation."""
    return normalize_response(endpoint, unwrap_root(parse_xml(text)))


# -----------------------------------------------------------------------------
# Error bodies
# -----------------------------------------------------------------------------


def _find_error_object(payload: Any) -> dict[str, Any] | None:
    if not isinstance(payload, dict):
        return None

    error = payload.get("error")
    if error is None:
        errors = payload.get("errors")
        if isinstance(errors, dict):
            error = errors.get("error")
    if isinstance(error, list):
        error = error[0] if error else None
    return error if isinstance(error, dict) else None


def parse_error_body(body: str) -> SoundTouchApiError | None:
    """Build a :class:`SoundTouchApiError` from an error response body.

    Understands the speaker's ``<errors><error value=".." name="..">`` form
    and the ``{"error": {"name": .., "code": ..}}`` JSON form.  Returns
    ``None`` when the body carries no error object with a name and a
    numeric code.
    """
    if not body or not body.strip():
        return None

    stripped = body.strip()
    payload: Any
    if stripped.startswith("{"):
        try:
            payload = json.loads(stripped)
        except json.JSONDecodeError:
            return None
    else:
        try:
            payload = unwrap_root(parse_xml(stripped))
        except SoundTouchInvalidDataError:
            return None
        # <error> as the document root
        if "name" in payload and "error" not in payload:
            payload = {"error": payload}

    error = _find_error_object(payload)
    if error is None:
        return None

    name = error.get("name")
    code = error.get("code", error.get("value"))
    if not name or code is None or isinstance(code, bool):
        return None
    try:
        code = int(code)
    except (TypeError, ValueError):
        _LOGGER.debug("Ignoring error body with non-numeric code: %r", code)
        return None

    message = error.get("message") or error.get(TEXT_KEY) or None
    return SoundTouchApiError(str(name), code, message)


# -----------------------------------------------------------------------------
# Encode
# -----------------------------------------------------------------------------


def escape_xml(text: Any) -> str:
    """Escape the five XML-reserved characters in *text*."""
    return escape(str(text), _QUOTE_ENTITIES)


def build_element(tag: str, text: Any = "", attrs: dict[str, Any] | None = None) -> str:
    """Return ``<tag a="v">text</tag>``.

    Attributes whose value is ``None`` are left out; empty strings are kept
    (``location=""``).  The element is never self-closing.
    """
    attr_text = "".join(
        f' {name}="{escape_xml(value)}"' for name, value in (attrs or {}).items() if value is not None
    )
    return f"<{tag}{attr_text}>{escape_xml(text)}</{tag}>"
