"""Rendering a resolved environment as text, JSON or XML."""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Optional

from enve.env.variables import EnvironmentSet
from enve.exceptions import InvalidArgumentError

TEXT = "text"
JSON = "json"
XML = "xml"
OUTPUT_FORMATS = (TEXT, JSON, XML)
DEFAULT_OUTPUT = TEXT

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters that must not appear raw when the JSON ends up inside HTML
_JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# ElementTree leaves line breaks raw, and XML parsers normalize them away
_XML_LINE_ESCAPES = {
    "\r": "&#13;",
    "\n": "&#10;",
}

# Anything outside the XML 1.0 Char production cannot be written, even escaped
_XML_INVALID_CHARS = re.compile(
    r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _xml_text(value: str) -> str:
    return _XML_INVALID_CHARS.sub("\ufffd", value)


def to_text(env: EnvironmentSet) -> str:
    """``NAME=VALUE`` lines without a trailing newline."""
    return "\n".join(str(var) for var in env)


def to_json(env: EnvironmentSet) -> str:
    """``{"environment":[{"name":..,"value":..},..]}``, compact."""
    payload = {"environment": [{"name": var.name, "value": var.value} for var in env]}
    out = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    # These characters only ever occur inside string literals here
    for char, escaped in _JSON_HTML_ESCAPES.items():
        out = out.replace(char, escaped)
    return out


def to_xml(env: EnvironmentSet) -> str:
    """``<Environment><Env><Name/><Value/></Env>..</Environment>`` with declaration."""
    root = ET.Element("Environment")
    for var in env:
        node = ET.SubElement(root, "Env")
        ET.SubElement(node, "Name").text = _xml_text(var.name)
        ET.SubElement(node, "Value").text = _xml_text(var.value)

    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    for char, escaped in _XML_LINE_ESCAPES.items():
        body = body.replace(char, escaped)
    return XML_DECLARATION + body


_RENDERERS: Dict[str, Callable[[EnvironmentSet], str]] = {
    TEXT: to_text,
    JSON: to_json,
    XML: to_xml,
}


def validate_format(output: Optional[str]) -> str:
    """Check an output format name.

    Raises:
        InvalidArgumentError: If the format is empty or unsupported
    """
    if not output:
        raise InvalidArgumentError("output format was empty or not provided")
    if output not in _RENDERERS:
        raise InvalidArgumentError(
            f"output format '{output}' is not supported",
            details={"supported": list(OUTPUT_FORMATS)},
        )
    return output


def render(env: EnvironmentSet, output: Optional[str] = DEFAULT_OUTPUT) -> str:
    """Render ``env`` in the given format."""
    return _RENDERERS[validate_format(output)](env)


__all__ = [
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT",
    "XML_DECLARATION",
    "render",
    "to_json",
    "to_text",
    "to_xml",
    "validate_format",
]
