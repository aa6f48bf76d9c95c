from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec.paragraph import Indent, LineSpacing, ParagraphProperty
from docx_codec.run import RunFonts, RunProperty
from docx_codec.table import TableCellProperty, TableProperty
from docx_codec.types import AlignmentType, StyleType, TextAlignmentType
from docx_codec.writer import PART_NAMESPACES, BuildXML, XMLBuilder


@dataclass(frozen=True)
class Style(BuildXML):
    """One named formatting bundle.

    Run, paragraph and table formatting are always present. Table cell and
    table properties are only written for table styles.
    """

    style_id: str
    style_type: StyleType = StyleType.PARAGRAPH
    name: str = ""
    run_property: RunProperty = field(default_factory=RunProperty)
    paragraph_property: ParagraphProperty = field(default_factory=ParagraphProperty)
    table_property: TableProperty = field(default_factory=TableProperty)
    table_cell_property: TableCellProperty = field(default_factory=TableCellProperty)
    based_on: str | None = None
    next: str | None = None
    link: str | None = None

    def _run(self, run_property: RunProperty) -> Style:
        return replace(self, run_property=run_property)

    def _para(self, **changes: object) -> Style:
        return replace(self, paragraph_property=replace(self.paragraph_property, **changes))

    def with_name(self, name: str) -> Style:
        return replace(self, name=name)

    def with_based_on(self, base: str) -> Style:
        return replace(self, based_on=base)

    def with_next(self, next_id: str) -> Style:
        return replace(self, next=next_id)

    def with_link(self, link: str) -> Style:
        return replace(self, link=link)

    def size(self, half_points: int) -> Style:
        return self._run(self.run_property.size(half_points))

    def color(self, color: str) -> Style:
        return self._run(self.run_property.with_color(color))

    def highlight(self, color: str) -> Style:
        return self._run(self.run_property.with_highlight(color))

    def bold(self) -> Style:
        return self._run(self.run_property.with_bold())

    def italic(self) -> Style:
        return self._run(self.run_property.with_italic())

    def underline(self, line_type: str) -> Style:
        return self._run(self.run_property.with_underline(line_type))

    def vanish(self) -> Style:
        return self._run(self.run_property.with_vanish())

    def fonts(self, fonts: RunFonts) -> Style:
        return self._run(self.run_property.with_fonts(fonts))

    def align(self, alignment: AlignmentType) -> Style:
        return self._para(alignment=alignment)

    def text_alignment(self, alignment: TextAlignmentType) -> Style:
        return self._para(text_alignment=alignment)

    def snap_to_grid(self, value: bool) -> Style:
        return self._para(snap_to_grid=value)

    def line_spacing(self, spacing: LineSpacing) -> Style:
        return self._para(line_spacing=spacing)

    def indent(self, indent: Indent) -> Style:
        return self._para(indent=indent)

    def outline_lvl(self, level: int) -> Style:
        return self._para(outline_lvl=level)

    def with_table_property(self, table_property: TableProperty) -> Style:
        return replace(self, table_property=table_property)

    def with_table_cell_property(self, cell_property: TableCellProperty) -> Style:
        return replace(self, table_cell_property=cell_property)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:style", (("w:type", self.style_type), ("w:styleId", self.style_id)))
        b.val("w:name", self.name)
        b.add_child(self.run_property)
        b.add_child(self.paragraph_property)
        if self.style_type == StyleType.TABLE:
            b.add_child(self.table_cell_property)
            b.add_child(self.table_property)
        if self.next is not None:
            b.val("w:next", self.next)
        if self.link is not None:
            b.val("w:link", self.link)
        b.empty("w:qFormat")
        if self.based_on is not None:
            b.val("w:basedOn", self.based_on)
        return b.close()


@dataclass(frozen=True)
class DocDefaults(BuildXML):
    run_property: RunProperty = field(default_factory=RunProperty)
    paragraph_property: ParagraphProperty = field(default_factory=ParagraphProperty)

    def size(self, half_points: int) -> DocDefaults:
        return replace(self, run_property=self.run_property.size(half_points))

    def fonts(self, fonts: RunFonts) -> DocDefaults:
        return replace(self, run_property=self.run_property.with_fonts(fonts))

    def line_spacing(self, spacing: LineSpacing) -> DocDefaults:
        return replace(
            self,
            paragraph_property=replace(self.paragraph_property, line_spacing=spacing),
        )

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:docDefaults")
        b.open("w:rPrDefault").add_child(self.run_property).close()
        b.open("w:pPrDefault").add_child(self.paragraph_property).close()
        return b.close()


@dataclass(frozen=True)
class Styles(BuildXML):
    """The styles part: document defaults followed by the style list."""

    doc_defaults: DocDefaults = field(default_factory=DocDefaults)
    styles: tuple[Style, ...] = ()

    def add_style(self, style: Style) -> Styles:
        return replace(self, styles=self.styles + (style,))

    def default_size(self, half_points: int) -> Styles:
        return replace(self, doc_defaults=self.doc_defaults.size(half_points))

    def default_fonts(self, fonts: RunFonts) -> Styles:
        return replace(self, doc_defaults=self.doc_defaults.fonts(fonts))

    def find_style(self, style_id: str) -> Style | None:
        for style in self.styles:
            if style.style_id == style_id:
                return style
        return None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.declaration()
        b.open("w:styles", PART_NAMESPACES)
        b.add_child(self.doc_defaults)
        b.add_children(self.styles)
        return b.close()
