"""XML formatter for ResultSet output.

Document layout::

    <resultset statement="..." xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
        <row>
            <field name="id">1</field>
            <field name="name"></field>
        </row>
    </resultset>

Every column produces exactly one field per row, NULL included.
Carriage returns are written as character references, since parsers
normalise a literal CR away.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Any

from querier.core.exceptions import EncodingError
from querier.core.projector import project
from querier.core.values import ValueKind, decode_bytes, kind_of, to_text
from querier.formatters.base import registry

if TYPE_CHECKING:
    from querier.core.models import ResultSet

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _xml_text(value: Any) -> str:
    if kind_of(value) is ValueKind.BYTES:
        text = decode_bytes(value, strict=True)
    else:
        text = to_text(value)
    if _INVALID_XML_CHARS.search(text):
        msg = f"Value {text[:32]!r} contains characters not allowed in XML"
        raise EncodingError(msg)
    return text


class XMLFormatter:
    def __init__(self, statement: str | None = None) -> None:
        self.statement = statement

    def render(self, result: ResultSet) -> bytes:
        statement = self.statement if self.statement is not None else result.statement
        root = ET.Element(
            "resultset",
            {"statement": _xml_text(statement), "xmlns:xsi": XSI_NAMESPACE},
        )
        names = result.column_names
        for row in result.rows:
            row_el = ET.SubElement(root, "row")
            for name, value in zip(names, project(row, result.columns), strict=True):
                field = ET.SubElement(row_el, "field", {"name": _xml_text(name)})
                field.text = _xml_text(value)

        ET.indent(root, space="    ")
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
        # ElementTree escapes CR in attributes only
        body = body.replace("\r", "&#13;")
        return (XML_HEADER + body).encode("utf-8")


registry.register("xml", XMLFormatter)
