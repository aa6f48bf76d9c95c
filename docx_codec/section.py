from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec import config
from docx_codec.types import (
    DocGridType,
    HeaderFooterType,
    PageOrientationType,
    SectionType,
    TextDirectionType,
)
from docx_codec.writer import BuildXML, XMLBuilder


@dataclass(frozen=True)
class PageSize(BuildXML):
    w: int = config.DEFAULT_PAGE_WIDTH
    h: int = config.DEFAULT_PAGE_HEIGHT
    orient: PageOrientationType | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:pgSz", (("w:w", self.w), ("w:h", self.h), ("w:orient", self.orient)))


@dataclass(frozen=True)
class PageMargin(BuildXML):
    top: int = config.DEFAULT_PAGE_MARGIN["top"]
    right: int = config.DEFAULT_PAGE_MARGIN["right"]
    bottom: int = config.DEFAULT_PAGE_MARGIN["bottom"]
    left: int = config.DEFAULT_PAGE_MARGIN["left"]
    header: int = config.DEFAULT_PAGE_MARGIN["header"]
    footer: int = config.DEFAULT_PAGE_MARGIN["footer"]
    gutter: int = config.DEFAULT_PAGE_MARGIN["gutter"]

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:pgMar",
            (
                ("w:top", self.top),
                ("w:right", self.right),
                ("w:bottom", self.bottom),
                ("w:left", self.left),
                ("w:header", self.header),
                ("w:footer", self.footer),
                ("w:gutter", self.gutter),
            ),
        )


@dataclass(frozen=True)
class DocGrid(BuildXML):
    grid_type: DocGridType = DocGridType.DEFAULT
    line_pitch: int | None = None
    char_space: int | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:docGrid",
            (("w:type", self.grid_type), ("w:linePitch", self.line_pitch), ("w:charSpace", self.char_space)),
        )


@dataclass(frozen=True)
class PageNumType(BuildXML):
    start: int | None = None
    chap_style: str | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:pgNumType", (("w:start", self.start), ("w:chapStyle", self.chap_style)))


@dataclass(frozen=True)
class HeaderReference(BuildXML):
    id: str
    header_type: HeaderFooterType = HeaderFooterType.DEFAULT

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:headerReference", (("w:type", self.header_type), ("r:id", self.id)))


@dataclass(frozen=True)
class FooterReference(BuildXML):
    id: str
    footer_type: HeaderFooterType = HeaderFooterType.DEFAULT

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:footerReference", (("w:type", self.footer_type), ("r:id", self.id)))


@dataclass(frozen=True)
class SectionProperty(BuildXML):
    """Page geometry plus header/footer bindings.

    The header and footer parts themselves live in separate packaged parts. They
    are carried next to their reference for the packaging layer and are not
    part of equality because the section markup only holds the reference.
    """

    page_size: PageSize = field(default_factory=PageSize)
    page_margin: PageMargin = field(default_factory=PageMargin)
    columns: int = 1
    space: int = config.DEFAULT_COLUMN_SPACE
    doc_grid: DocGrid | None = None
    header_reference: HeaderReference | None = None
    first_header_reference: HeaderReference | None = None
    even_header_reference: HeaderReference | None = None
    footer_reference: FooterReference | None = None
    first_footer_reference: FooterReference | None = None
    even_footer_reference: FooterReference | None = None
    page_num_type: PageNumType | None = None
    text_direction: TextDirectionType = TextDirectionType.LR_TB
    section_type: SectionType | None = None
    title_pg: bool = False
    header: BuildXML | None = field(default=None, compare=False)
    first_header: BuildXML | None = field(default=None, compare=False)
    even_header: BuildXML | None = field(default=None, compare=False)
    footer: BuildXML | None = field(default=None, compare=False)
    first_footer: BuildXML | None = field(default=None, compare=False)
    even_footer: BuildXML | None = field(default=None, compare=False)

    def page_size_of(self, w: int, h: int, orient: PageOrientationType | None = None) -> SectionProperty:
        return replace(self, page_size=PageSize(w, h, orient))

    def margin(self, page_margin: PageMargin) -> SectionProperty:
        return replace(self, page_margin=page_margin)

    def cols(self, columns: int, space: int | None = None) -> SectionProperty:
        return replace(self, columns=columns, space=self.space if space is None else space)

    def grid(self, doc_grid: DocGrid) -> SectionProperty:
        return replace(self, doc_grid=doc_grid)

    def page_numbering(self, page_num_type: PageNumType) -> SectionProperty:
        return replace(self, page_num_type=page_num_type)

    def direction(self, text_direction: TextDirectionType) -> SectionProperty:
        return replace(self, text_direction=text_direction)

    def kind(self, section_type: SectionType) -> SectionProperty:
        return replace(self, section_type=section_type)

    def with_title_pg(self) -> SectionProperty:
        return replace(self, title_pg=True)

    def with_header(self, rid: str, header: BuildXML) -> SectionProperty:
        return replace(self, header_reference=HeaderReference(rid), header=header)

    def with_first_header(self, rid: str, header: BuildXML) -> SectionProperty:
        return replace(
            self,
            first_header_reference=HeaderReference(rid, HeaderFooterType.FIRST),
            first_header=header,
            title_pg=True,
        )

    def with_even_header(self, rid: str, header: BuildXML) -> SectionProperty:
        return replace(
            self,
            even_header_reference=HeaderReference(rid, HeaderFooterType.EVEN),
            even_header=header,
        )

    def with_footer(self, rid: str, footer: BuildXML) -> SectionProperty:
        return replace(self, footer_reference=FooterReference(rid), footer=footer)

    def with_first_footer(self, rid: str, footer: BuildXML) -> SectionProperty:
        return replace(
            self,
            first_footer_reference=FooterReference(rid, HeaderFooterType.FIRST),
            first_footer=footer,
            title_pg=True,
        )

    def with_even_footer(self, rid: str, footer: BuildXML) -> SectionProperty:
        return replace(
            self,
            even_footer_reference=FooterReference(rid, HeaderFooterType.EVEN),
            even_footer=footer,
        )

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:sectPr")
        b.add_child(self.page_size)
        b.add_child(self.page_margin)
        b.empty("w:cols", (("w:space", self.space), ("w:num", self.columns)))
        b.add_optional_child(self.doc_grid)
        b.add_optional_child(self.header_reference)
        b.add_optional_child(self.first_header_reference)
        b.add_optional_child(self.even_header_reference)
        b.add_optional_child(self.footer_reference)
        b.add_optional_child(self.first_footer_reference)
        b.add_optional_child(self.even_footer_reference)
        b.add_optional_child(self.page_num_type)
        if self.text_direction != TextDirectionType.LR_TB:
            b.val("w:textDirection", self.text_direction)
        if self.section_type is not None:
            b.val("w:type", self.section_type)
        b.apply_if(self.title_pg, lambda x: x.empty("w:titlePg"))
        return b.close()
