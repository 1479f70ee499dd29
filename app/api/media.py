"""Content Negotiation — render a customer as JSON or XML based on the Accept header.

Invariants:
    - JSON is the default whenever the Accept header is absent, */* or unrecognised
    - XML is chosen only when application/xml (or text/xml) outranks application/json
    - Both representations use the same camelCase field names

Design Decisions:
    - xml.etree from the stdlib: single flat document, no schema, same as json for JSONFormatter
"""

import xml.etree.ElementTree as ET

from fastapi import Response
from fastapi.responses import JSONResponse

from app.core.domain_types import MediaType

_XML_TYPES = {"application/xml", "text/xml"}


def preferred_media_type(accept: str | None) -> MediaType:
    """Pick JSON or XML from an Accept header, honouring q-values."""
    if not accept:
        return MediaType.JSON
    best_type, best_q = MediaType.JSON, -1.0
    for position, part in enumerate(accept.split(",")):
        media, _, params = part.strip().partition(";")
        media = media.strip().lower()
        q = _parse_quality(params)
        if media in _XML_TYPES:
            candidate = MediaType.XML
        elif media in ("application/json", "application/*", "*/*"):
            candidate = MediaType.JSON
        else:
            continue
        # Ties keep the earlier entry
        if q > best_q:
            best_type, best_q = candidate, q
    return best_type


def _parse_quality(params: str) -> float:
    for param in params.split(";"):
        key, _, value = param.strip().partition("=")
        if key.strip() == "q":
            try:
                return float(value)
            except ValueError:
                return 0.0
    return 1.0


def to_xml(root_tag: str, data: dict) -> bytes:
    """Serialize a (nested) dict into an XML document. None values become empty elements."""
    root = ET.Element(root_tag)
    _append_children(root, data)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _append_children(parent: ET.Element, data: dict) -> None:
    for key, value in data.items():
        child = ET.SubElement(parent, key)
        if isinstance(value, dict):
            _append_children(child, value)
        elif value is not None:
            child.text = str(value)


def render(data: dict, root_tag: str, accept: str | None) -> Response:
    """Build a 200 response in the representation the client prefers."""
    if preferred_media_type(accept) is MediaType.XML:
        return Response(
            content=to_xml(root_tag, data), media_type=MediaType.XML.value,
        )
    return JSONResponse(content=data)
