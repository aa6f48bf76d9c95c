from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from docx_codec.paragraph import (
    BookmarkEnd,
    BookmarkStart,
    CommentRangeEnd,
    CommentRangeStart,
    Paragraph,
    ParagraphProperty,
)
from docx_codec.section import DocGrid, PageMargin, PageNumType, PageSize, SectionProperty
from docx_codec.structured import StructuredDataTag, any_numbering
from docx_codec.table import Table
from docx_codec.types import PageOrientationType, TextDirectionType
from docx_codec.writer import (
    DOCUMENT_NAMESPACES,
    HEADER_FOOTER_NAMESPACES,
    BuildXML,
    XMLBuilder,
)


@dataclass(frozen=True)
class Section(BuildXML):
    """Body content closed by its own section break.

    The break is written as an empty paragraph whose properties carry the
    section property, the only place the format allows a mid-body ``sectPr``.
    ``breaker_id`` is that paragraph's ``w14:paraId`` once it has been read.
    """

    property: SectionProperty = field(default_factory=SectionProperty)
    children: tuple[BuildXML, ...] = ()
    breaker_id: str | None = field(default=None, compare=False)
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.children))

    def add_paragraph(self, paragraph: Paragraph) -> Section:
        return replace(self, children=self.children + (paragraph,))

    def add_table(self, table: Table) -> Section:
        return replace(self, children=self.children + (table,))

    def add_structured_data_tag(self, tag: StructuredDataTag) -> Section:
        return replace(self, children=self.children + (tag,))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.add_children(self.children)
        breaker = Paragraph(
            property=ParagraphProperty(section_property=self.property),
            id=self.breaker_id,
        )
        return b.add_child(breaker)


def explicit_para_ids(children: Iterable[BuildXML]) -> Iterator[str]:
    """Yield every ``w14:paraId`` already fixed on block level content."""
    for child in children:
        if isinstance(child, Paragraph):
            if child.id is not None:
                yield child.id
        elif isinstance(child, Section):
            if child.breaker_id is not None:
                yield child.breaker_id
            yield from explicit_para_ids(child.children)
        elif isinstance(child, Table):
            for row in child.rows:
                for cell in row.cells:
                    yield from explicit_para_ids(cell.children)
        elif isinstance(child, StructuredDataTag):
            yield from explicit_para_ids(child.children)


@dataclass(frozen=True)
class _Body(BuildXML):
    children: tuple[BuildXML, ...] = ()
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.children))

    def _add(self, child: BuildXML):
        return replace(self, children=self.children + (child,))

    def add_paragraph(self, paragraph: Paragraph):
        return self._add(paragraph)

    def add_table(self, table: Table):
        return self._add(table)

    def add_structured_data_tag(self, tag: StructuredDataTag):
        return self._add(tag)


@dataclass(frozen=True)
class Header(_Body):
    """Header part content (paragraphs, tables, structured tags)."""

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.context.reserve_para_ids(explicit_para_ids(self.children))
        b.declaration()
        b.open("w:hdr", HEADER_FOOTER_NAMESPACES)
        b.add_children(self.children)
        return b.close()


@dataclass(frozen=True)
class Footer(_Body):
    """Footer part content (paragraphs, tables, structured tags)."""

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.context.reserve_para_ids(explicit_para_ids(self.children))
        b.declaration()
        b.open("w:ftr", HEADER_FOOTER_NAMESPACES)
        b.add_children(self.children)
        return b.close()


@dataclass(frozen=True)
class Document(BuildXML):
    """The main document part.

    Builder methods return a new document. Section level settings apply to
    the final, body level section property.
    """

    children: tuple[BuildXML, ...] = ()
    section_property: SectionProperty = field(default_factory=SectionProperty)
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.children))

    def _add(self, child: BuildXML) -> Document:
        return replace(self, children=self.children + (child,))

    def _section(self, section_property: SectionProperty) -> Document:
        return replace(self, section_property=section_property)

    def add_paragraph(self, paragraph: Paragraph) -> Document:
        return self._add(paragraph)

    def add_table(self, table: Table) -> Document:
        return self._add(table)

    def add_bookmark_start(self, bookmark_id: int, name: str) -> Document:
        return self._add(BookmarkStart(bookmark_id, name))

    def add_bookmark_end(self, bookmark_id: int) -> Document:
        return self._add(BookmarkEnd(bookmark_id))

    def add_comment_start(self, comment_id: int) -> Document:
        return self._add(CommentRangeStart(comment_id))

    def add_comment_end(self, comment_id: int) -> Document:
        return self._add(CommentRangeEnd(comment_id))

    def add_structured_data_tag(self, tag: StructuredDataTag) -> Document:
        return self._add(tag)

    def add_section(self, section: Section) -> Document:
        return self._add(section)

    def default_section_property(self, section_property: SectionProperty) -> Document:
        return self._section(section_property)

    def page_size(self, w: int, h: int, orient: PageOrientationType | None = None) -> Document:
        return self._section(self.section_property.page_size_of(w, h, orient))

    def page_orient(self, orient: PageOrientationType) -> Document:
        size = self.section_property.page_size
        return self._section(replace(self.section_property, page_size=PageSize(size.w, size.h, orient)))

    def page_margin(self, margin: PageMargin) -> Document:
        return self._section(self.section_property.margin(margin))

    def columns(self, count: int) -> Document:
        return self._section(self.section_property.cols(count))

    def text_direction(self, direction: TextDirectionType) -> Document:
        return self._section(self.section_property.direction(direction))

    def doc_grid(self, grid: DocGrid) -> Document:
        return self._section(self.section_property.grid(grid))

    def page_num_type(self, page_num_type: PageNumType) -> Document:
        return self._section(self.section_property.page_numbering(page_num_type))

    def title_pg(self) -> Document:
        return self._section(self.section_property.with_title_pg())

    def header(self, header: Header, rid: str) -> Document:
        return self._section(self.section_property.with_header(rid, header))

    def first_header(self, header: Header, rid: str) -> Document:
        return self._section(self.section_property.with_first_header(rid, header))

    def even_header(self, header: Header, rid: str) -> Document:
        return self._section(self.section_property.with_even_header(rid, header))

    def footer(self, footer: Footer, rid: str) -> Document:
        return self._section(self.section_property.with_footer(rid, footer))

    def first_footer(self, footer: Footer, rid: str) -> Document:
        return self._section(self.section_property.with_first_footer(rid, footer))

    def even_footer(self, footer: Footer, rid: str) -> Document:
        return self._section(self.section_property.with_even_footer(rid, footer))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.context.reserve_para_ids(explicit_para_ids(self.children))
        b.declaration()
        b.open("w:document", DOCUMENT_NAMESPACES)
        b.open("w:body")
        b.add_children(self.children)
        b.add_child(self.section_property)
        b.close()
        return b.close()
