"""Response rendering with JSON/XML content negotiation."""

import re
from typing import Any
from xml.etree import ElementTree

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"

_JSON_TYPES = {"application/json", "text/json", "application/*", "text/*", "*/*"}
_XML_TYPES = {"application/xml", "text/xml"}

# Characters outside the XML 1.0 Char production cannot appear even escaped
_XML_INVALID_CHARS = re.compile("[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _accepted_media_types(accept: str) -> list[str]:
    """Media types from an Accept header, most preferred first, q=0 dropped."""
    entries = []
    for position, part in enumerate(accept.split(",")):
        media_type, *params = (piece.strip() for piece in part.split(";"))
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            entries.append((-quality, position, media_type.lower()))
    return [media_type for _, _, media_type in sorted(entries)]


def negotiate_media_type(request: Request) -> str:
    """Pick JSON or XML for the response; JSON unless XML is preferred."""
    for media_type in _accepted_media_types(request.headers.get("accept", "")):
        if media_type in _XML_TYPES:
            return XML_MEDIA_TYPE
        if media_type in _JSON_TYPES:
            return JSON_MEDIA_TYPE
    return JSON_MEDIA_TYPE


def _fill_element(element: ElementTree.Element, content: Any, item_tag: str) -> None:
    if isinstance(content, dict):
        for key, value in content.items():
            _fill_element(ElementTree.SubElement(element, key), value, item_tag)
    elif isinstance(content, list):
        for value in content:
            _fill_element(ElementTree.SubElement(element, item_tag), value, item_tag)
    elif content is not None:
        text = str(content).lower() if isinstance(content, bool) else str(content)
        element.text = _XML_INVALID_CHARS.sub("", text)


def to_xml(content: Any, root_tag: str, item_tag: str = "UserDto") -> bytes:
    """Serialize JSON-compatible ``content`` to an XML document.

    Args:
        content: Dict, list or scalar as produced by ``model_dump(mode="json")``
        root_tag: Name of the document element
        item_tag: Element name used for each entry of a list

    Returns:
        UTF-8 encoded XML with declaration
    """
    root = ElementTree.Element(root_tag)
    _fill_element(root, content, item_tag)
    return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def render(
    request: Request,
    content: Any,
    *,
    root_tag: str,
    item_tag: str = "UserDto",
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> Response:
    """Build a JSON or XML response for ``content`` according to the Accept header."""
    if negotiate_media_type(request) == XML_MEDIA_TYPE:
        return Response(
            content=to_xml(content, root_tag, item_tag),
            status_code=status_code,
            headers=headers,
            media_type=XML_MEDIA_TYPE,
        )
    return JSONResponse(content=content, status_code=status_code, headers=headers)
