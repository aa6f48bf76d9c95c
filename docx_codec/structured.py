from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec.paragraph import (
    BookmarkEnd,
    BookmarkStart,
    CommentRangeEnd,
    CommentRangeStart,
    Paragraph,
)
from docx_codec.run import Run, RunProperty
from docx_codec.types import FieldCharType
from docx_codec.writer import BuildXML, XMLBuilder


def any_numbering(children: tuple) -> bool:
    return any(getattr(child, "has_numbering", False) for child in children)


@dataclass(frozen=True)
class DataBinding(BuildXML):
    xpath: str | None = None
    prefix_mappings: str | None = None
    store_item_id: str | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:dataBinding",
            (
                ("w:xpath", self.xpath),
                ("w:prefixMappings", self.prefix_mappings),
                ("w:storeItemID", self.store_item_id),
            ),
        )


@dataclass(frozen=True)
class StructuredDataTagProperty(BuildXML):
    run_property: RunProperty = field(default_factory=RunProperty)
    data_binding: DataBinding | None = None
    alias: str | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:sdtPr")
        b.add_child(self.run_property)
        b.add_optional_child(self.data_binding)
        if self.alias is not None:
            b.val("w:alias", self.alias)
        return b.close()


@dataclass(frozen=True)
class StructuredDataTag(BuildXML):
    """Content control holding runs, paragraphs, tables, markers or nested tags."""

    property: StructuredDataTagProperty = field(default_factory=StructuredDataTagProperty)
    children: tuple[BuildXML, ...] = ()
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.children))

    def _add(self, child: BuildXML) -> StructuredDataTag:
        return replace(self, children=self.children + (child,))

    def add_run(self, run: Run) -> StructuredDataTag:
        return self._add(run)

    def add_paragraph(self, paragraph: Paragraph) -> StructuredDataTag:
        return self._add(paragraph)

    def add_table(self, table: BuildXML) -> StructuredDataTag:
        return self._add(table)

    def add_structured_data_tag(self, tag: StructuredDataTag) -> StructuredDataTag:
        return self._add(tag)

    def add_bookmark_start(self, bookmark_id: int, name: str) -> StructuredDataTag:
        return self._add(BookmarkStart(bookmark_id, name))

    def add_bookmark_end(self, bookmark_id: int) -> StructuredDataTag:
        return self._add(BookmarkEnd(bookmark_id))

    def add_comment_start(self, comment_id: int) -> StructuredDataTag:
        return self._add(CommentRangeStart(comment_id))

    def add_comment_end(self, comment_id: int) -> StructuredDataTag:
        return self._add(CommentRangeEnd(comment_id))

    def data_binding(self, binding: DataBinding) -> StructuredDataTag:
        return replace(self, property=replace(self.property, data_binding=binding))

    def alias(self, alias: str) -> StructuredDataTag:
        return replace(self, property=replace(self.property, alias=alias))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:sdt")
        b.add_child(self.property)
        b.open("w:sdtContent")
        for child in self.children:
            child.build_to(b)
        return b.close().close()


def table_of_contents(levels: str = "1-3", alias: str | None = None) -> StructuredDataTag:
    """Empty TOC field wrapped in a content control, refreshed by the consumer on open."""
    begin = (
        Run()
        .add_field_char(FieldCharType.BEGIN, dirty=True)
        .add_instr_text(f'TOC \\o "{levels}"')
        .add_field_char(FieldCharType.SEPARATE)
    )
    end = Run().add_field_char(FieldCharType.END)
    tag = StructuredDataTag().add_paragraph(Paragraph().add_run(begin)).add_paragraph(
        Paragraph().add_run(end)
    )
    if alias is not None:
        tag = tag.alias(alias)
    return tag
