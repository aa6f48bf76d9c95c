from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Any, BinaryIO, Callable, Iterable

from lxml import etree

from docx_codec import config


DOCUMENT_NAMESPACES = (
    ("xmlns:o", "urn:schemas-microsoft-com:office:office"),
    ("xmlns:r", "http://schemas.openxmlformats.org/officeDocument/2006/relationships"),
    ("xmlns:v", "urn:schemas-microsoft-com:vml"),
    ("xmlns:w", "http://schemas.openxmlformats.org/wordprocessingml/2006/main"),
    ("xmlns:w10", "urn:schemas-microsoft-com:office:word"),
    ("xmlns:wp", "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"),
    ("xmlns:wps", "http://schemas.microsoft.com/office/word/2010/wordprocessingShape"),
    ("xmlns:wpg", "http://schemas.microsoft.com/office/word/2010/wordprocessingGroup"),
    ("xmlns:mc", "http://schemas.openxmlformats.org/markup-compatibility/2006"),
    ("xmlns:wp14", "http://schemas.microsoft.com/office/word/2010/wordprocessingDrawing"),
    ("xmlns:w14", "http://schemas.microsoft.com/office/word/2010/wordml"),
    ("xmlns:w15", "http://schemas.microsoft.com/office/word/2012/wordml"),
    ("mc:Ignorable", "w14 wp14"),
)

HEADER_FOOTER_NAMESPACES = (
    ("xmlns:r", "http://schemas.openxmlformats.org/officeDocument/2006/relationships"),
    ("xmlns:o", "urn:schemas-microsoft-com:office:office"),
    ("xmlns:v", "urn:schemas-microsoft-com:vml"),
    ("xmlns:w", "http://schemas.openxmlformats.org/wordprocessingml/2006/main"),
    ("xmlns:w10", "urn:schemas-microsoft-com:office:word"),
    ("xmlns:wp", "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"),
    ("xmlns:wps", "http://schemas.microsoft.com/office/word/2010/wordprocessingShape"),
    ("xmlns:wpg", "http://schemas.microsoft.com/office/word/2010/wordprocessingGroup"),
    ("xmlns:mc", "http://schemas.openxmlformats.org/markup-compatibility/2006"),
    ("xmlns:wp14", "http://schemas.microsoft.com/office/word/2010/wordprocessingDrawing"),
    ("xmlns:w14", "http://schemas.microsoft.com/office/word/2010/wordml"),
    ("mc:Ignorable", "w14 wp14"),
)

PART_NAMESPACES = (
    ("xmlns:w", "http://schemas.openxmlformats.org/wordprocessingml/2006/main"),
    ("xmlns:w14", "http://schemas.microsoft.com/office/word/2010/wordml"),
    ("xmlns:w15", "http://schemas.microsoft.com/office/word/2012/wordml"),
)


Attrs = Iterable[tuple[str, object]]


@dataclass
class BuildContext:
    """Counters for generated identifiers, owned by whoever drives one build."""

    next_change_id: int = 1
    next_para_id: int = config.DEFAULT_PARA_ID_START
    reserved_para_ids: set[str] = field(default_factory=set)

    def change_id(self) -> int:
        value = self.next_change_id
        self.next_change_id += 1
        return value

    def reserve_para_ids(self, ids: Iterable[str]) -> None:
        self.reserved_para_ids.update(value.upper() for value in ids)

    def para_id(self) -> str:
        # never reuse an id some paragraph already carries
        while True:
            value = f"{self.next_para_id:08X}"
            self.next_para_id += 1
            if value not in self.reserved_para_ids:
                return value


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class XMLBuilder:
    """Streams markup events through an lxml incremental writer.

    Use it as a context manager. Each event is flushed to the sink as it is
    written, so sink errors surface at once. lxml escapes text and attribute
    values and raises ``ValueError`` for characters XML cannot carry. Every
    method returns the builder so calls chain.
    """

    def __init__(self, sink: BinaryIO | None = None, context: BuildContext | None = None) -> None:
        self._sink = sink if sink is not None else BytesIO()
        self._file = etree.xmlfile(self._sink, encoding="UTF-8", buffered=False)
        self._writer: Any = None
        self._stack: list[Any] = []
        self.context = context if context is not None else BuildContext()

    def __enter__(self) -> XMLBuilder:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # nothing written means the lxml file was never opened
        if self._writer is not None:
            self._writer = None
            self._file.__exit__(exc_type, exc_val, exc_tb)

    @property
    def _xf(self) -> Any:
        if self._writer is None:
            self._writer = self._file.__enter__()
        return self._writer

    def declaration(self, standalone: bool = True) -> XMLBuilder:
        self._xf.write_declaration(standalone=True if standalone else None)
        return self

    def open(self, tag: str, attrs: Attrs = ()) -> XMLBuilder:
        element = self._xf.element(tag, _attrib(attrs))
        element.__enter__()
        self._stack.append(element)
        return self

    def empty(self, tag: str, attrs: Attrs = ()) -> XMLBuilder:
        return self.open(tag, attrs).close()

    def val(self, tag: str, value: object) -> XMLBuilder:
        return self.empty(tag, (("w:val", value),))

    def text(self, value: str) -> XMLBuilder:
        if value:
            self._xf.write(value)
        return self

    def text_element(self, tag: str, value: str, attrs: Attrs = ()) -> XMLBuilder:
        return self.open(tag, attrs).text(value).close()

    def close(self) -> XMLBuilder:
        if not self._stack:
            raise ValueError("close() without an open element")
        self._stack.pop().__exit__(None, None, None)
        return self

    def add_child(self, child: BuildXML) -> XMLBuilder:
        return child.build_to(self)

    def add_optional_child(self, child: BuildXML | None) -> XMLBuilder:
        if child is None:
            return self
        return child.build_to(self)

    def add_children(self, children: Iterable[BuildXML]) -> XMLBuilder:
        for child in children:
            child.build_to(self)
        return self

    def apply_if(self, condition: bool, fn: Callable[[XMLBuilder], XMLBuilder]) -> XMLBuilder:
        if condition:
            return fn(self)
        return self

    @property
    def depth(self) -> int:
        return len(self._stack)

    def getvalue(self) -> bytes:
        if not isinstance(self._sink, BytesIO):
            raise TypeError("getvalue() is only available for in-memory builds")
        return self._sink.getvalue()


def _attrib(attrs: Attrs) -> dict[str, str]:
    return {key: format_value(value) for key, value in attrs if value is not None}


class BuildXML:
    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        raise NotImplementedError(f"{type(self).__name__} has no writer")

    def build(self, context: BuildContext | None = None) -> bytes:
        sink = BytesIO()
        self.write_to(sink, context)
        return sink.getvalue()

    def write_to(self, sink: BinaryIO, context: BuildContext | None = None) -> None:
        with XMLBuilder(sink, context=context) as b:
            self.build_to(b)
            if b.depth:
                raise ValueError(f"{type(self).__name__} left {b.depth} element(s) open")


def to_xml(entity: BuildXML, context: BuildContext | None = None) -> str:
    return entity.build(context).decode("utf-8")
