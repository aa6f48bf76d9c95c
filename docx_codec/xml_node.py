from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterator

from lxml import etree

from docx_codec.errors import MalformedMarkupError, MissingPartError

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
WP_NS = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
PIC_NS = "http://schemas.openxmlformats.org/drawingml/2006/picture"
W14_NS = "http://schemas.microsoft.com/office/word/2010/wordml"
W15_NS = "http://schemas.microsoft.com/office/word/2012/wordml"
WPS_NS = "http://schemas.microsoft.com/office/word/2010/wordprocessingShape"
WPG_NS = "http://schemas.microsoft.com/office/word/2010/wordprocessingGroup"
WP14_NS = "http://schemas.microsoft.com/office/word/2010/wordprocessingDrawing"
MC_NS = "http://schemas.openxmlformats.org/markup-compatibility/2006"
V_NS = "urn:schemas-microsoft-com:vml"
O_NS = "urn:schemas-microsoft-com:office:office"
W10_NS = "urn:schemas-microsoft-com:office:word"
VT_NS = "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes"
XML_NS = "http://www.w3.org/XML/1998/namespace"

NAMESPACE_PREFIXES = {
    W_NS: "w",
    R_NS: "r",
    WP_NS: "wp",
    A_NS: "a",
    PIC_NS: "pic",
    W14_NS: "w14",
    W15_NS: "w15",
    WPS_NS: "wps",
    WPG_NS: "wpg",
    WP14_NS: "wp14",
    MC_NS: "mc",
    V_NS: "v",
    O_NS: "o",
    W10_NS: "w10",
    VT_NS: "vt",
    XML_NS: "xml",
}


@dataclass(slots=True)
class XmlNode:
    """One parsed element: qualified tag, attributes and immediate children.

    Tags and attribute keys use the conventional prefix of their namespace
    (``w:p``, ``r:id``) whatever prefix the source declared, and the bare local
    name when the name has no namespace.
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[XmlNode] = field(default_factory=list)
    text: str | None = None

    @property
    def local_name(self) -> str:
        return self.tag.rpartition(":")[2]

    def get(self, *keys: str) -> str | None:
        for key in keys:
            value = self.attrs.get(key)
            if value is not None:
                return value
        return None

    def find(self, *tags: str) -> XmlNode | None:
        for child in self.children:
            if child.tag in tags:
                return child
        return None

    def iter_children(self, *tags: str) -> Iterator[XmlNode]:
        for child in self.children:
            if child.tag in tags:
                yield child


def _qualify(name: str, nsmap: dict | None) -> str:
    if not name.startswith("{"):
        return name
    uri, _, local = name[1:].partition("}")
    prefix = NAMESPACE_PREFIXES.get(uri)
    if prefix is None and nsmap:
        for key, value in nsmap.items():
            if value == uri and key:
                prefix = key
                break
    if not prefix:
        return local
    return f"{prefix}:{local}"


def _build_node(elem: etree._Element) -> XmlNode:
    nsmap = elem.nsmap
    attrs = {_qualify(key, nsmap): value for key, value in elem.attrib.items()}
    node = XmlNode(tag=_qualify(elem.tag, nsmap), attrs=attrs, text=elem.text)
    for child in elem:
        if not isinstance(child.tag, str):
            continue
        node.children.append(_build_node(child))
    return node


def _new_parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        huge_tree=True,
    )


def parse_node(data: bytes | str | None, part: str = "xml") -> XmlNode:
    if data is None or not data:
        raise MissingPartError(part)
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        root = etree.fromstring(data, parser=_new_parser())
    except etree.XMLSyntaxError as exc:
        raise MalformedMarkupError(f"malformed markup in {part}: {exc}", line=exc.lineno) from exc
    if root is None:
        raise MissingPartError(part)
    return _build_node(root)


def node_from_element(elem: etree._Element) -> XmlNode:
    return _build_node(elem)


@dataclass
class XmlData:
    name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    data: str | None = None
    children: list[XmlData] = field(default_factory=list)

    def __str__(self) -> str:
        parts = [f"<{self.name}"]
        for key, value in self.attributes:
            parts.append(f' {key}="{value}"')
        parts.append(">")
        if self.data is not None:
            parts.append(self.data)
        for child in self.children:
            parts.append(str(child))
        parts.append(f"</{self.name}>")
        return "".join(parts)


@dataclass
class XmlDocument:
    """Schema-free projection of a markup part for tooling and debugging."""

    data: list[XmlData] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(item) for item in self.data)

    @classmethod
    def from_string(cls, source: str, trim: bool = True) -> XmlDocument:
        return cls.from_bytes(source.encode("utf-8"), trim=trim)

    @classmethod
    def from_bytes(cls, source: bytes, trim: bool = False) -> XmlDocument:
        stack: list[XmlData] = []
        roots: list[XmlData] = []
        pending_ns: list[tuple[str, str]] = []
        events = etree.iterparse(
            BytesIO(source),
            events=("start-ns", "start", "end"),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
        )
        try:
            for event, item in events:
                if event == "start-ns":
                    prefix, uri = item
                    key = f"xmlns:{prefix}" if prefix else "xmlns"
                    pending_ns.append((key, uri))
                    continue
                if event == "start":
                    attributes = pending_ns + [
                        (_raw_name(key, item), value) for key, value in item.attrib.items()
                    ]
                    pending_ns = []
                    stack.append(XmlData(name=_raw_name(item.tag, item), attributes=attributes))
                    continue
                node = stack.pop()
                text = _last_text(item)
                if text is not None:
                    node.data = text.strip() if trim else text
                if stack:
                    stack[-1].children.append(node)
                else:
                    roots.append(node)
        except etree.XMLSyntaxError as exc:
            raise MalformedMarkupError(f"could not parse string to XML: {exc}", line=exc.lineno) from exc
        return cls(data=roots)


def _raw_name(name: str, elem: etree._Element) -> str:
    if not name.startswith("{"):
        return name
    uri, _, local = name[1:].partition("}")
    if uri == XML_NS:
        return f"xml:{local}"
    for prefix, value in elem.nsmap.items():
        if value == uri:
            return f"{prefix}:{local}" if prefix else local
    return local


def _last_text(elem: etree._Element) -> str | None:
    text = elem.text
    for child in elem:
        if child.tail is not None:
            text = child.tail
    return text
