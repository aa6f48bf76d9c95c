from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec import config
from docx_codec.paragraph import Paragraph
from docx_codec.run import Shading
from docx_codec.structured import StructuredDataTag, any_numbering
from docx_codec.types import (
    BorderType,
    HeightRule,
    TableAlignmentType,
    TableLayoutType,
    TextDirectionType,
    VAlignType,
    VMergeType,
    WidthType,
)
from docx_codec.writer import BuildXML, XMLBuilder

TABLE_BORDER_POSITIONS = ("top", "left", "bottom", "right", "insideH", "insideV")
CELL_BORDER_POSITIONS = TABLE_BORDER_POSITIONS + ("tl2br", "tr2bl")


@dataclass(frozen=True)
class Width(BuildXML):
    tag: str
    w: int = 0
    width_type: WidthType = WidthType.AUTO

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(self.tag, (("w:w", self.w), ("w:type", self.width_type)))


@dataclass(frozen=True)
class Border(BuildXML):
    position: str
    border_type: BorderType = BorderType.SINGLE
    size: int = config.DEFAULT_BORDER_SIZE
    space: int | None = config.DEFAULT_BORDER_SPACE
    color: str = config.DEFAULT_BORDER_COLOR

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            f"w:{self.position}",
            (
                ("w:val", self.border_type),
                ("w:sz", self.size),
                ("w:space", self.space),
                ("w:color", self.color),
            ),
        )


@dataclass(frozen=True)
class Borders(BuildXML):
    """Border set keyed by position, written in schema order."""

    tag: str
    items: tuple[Border, ...] = ()

    @classmethod
    def table_default(cls) -> Borders:
        return cls("w:tblBorders", tuple(Border(position) for position in TABLE_BORDER_POSITIONS))

    @classmethod
    def empty_table(cls) -> Borders:
        return cls("w:tblBorders")

    def get(self, position: str) -> Border | None:
        for border in self.items:
            if border.position == position:
                return border
        return None

    def set(self, border: Border) -> Borders:
        items = tuple(item for item in self.items if item.position != border.position)
        order = CELL_BORDER_POSITIONS
        return replace(
            self,
            items=tuple(sorted(items + (border,), key=lambda item: order.index(item.position))),
        )

    def clear(self, position: str) -> Borders:
        return replace(self, items=tuple(item for item in self.items if item.position != position))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        if not self.items:
            return b
        b.open(self.tag)
        b.add_children(self.items)
        return b.close()


@dataclass(frozen=True)
class TableProperty(BuildXML):
    style: str | None = None
    width: Width = field(default_factory=lambda: Width("w:tblW"))
    justification: TableAlignmentType = TableAlignmentType.LEFT
    indent: Width | None = None
    borders: Borders = field(default_factory=Borders.table_default)
    layout: TableLayoutType | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:tblPr")
        if self.style is not None:
            b.val("w:tblStyle", self.style)
        b.add_child(self.width)
        b.val("w:jc", self.justification)
        b.add_optional_child(self.indent)
        b.add_child(self.borders)
        if self.layout is not None:
            b.empty("w:tblLayout", (("w:type", self.layout),))
        return b.close()


@dataclass(frozen=True)
class TrackedMark(BuildXML):
    tag: str
    author: str = config.DEFAULT_AUTHOR
    date: str = config.DEFAULT_DATE
    id: int | None = field(default=None, compare=False)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        change_id = self.id if self.id is not None else b.context.change_id()
        return b.empty(self.tag, (("w:id", change_id), ("w:author", self.author), ("w:date", self.date)))


@dataclass(frozen=True)
class TableRowProperty(BuildXML):
    grid_before: int | None = None
    grid_after: int | None = None
    width_before: Width | None = None
    width_after: Width | None = None
    cant_split: bool = False
    height: int | None = None
    height_rule: HeightRule | None = None
    insert: TrackedMark | None = None
    delete: TrackedMark | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:trPr")
        if self.grid_before is not None:
            b.val("w:gridBefore", self.grid_before)
        if self.grid_after is not None:
            b.val("w:gridAfter", self.grid_after)
        b.add_optional_child(self.width_before)
        b.add_optional_child(self.width_after)
        b.apply_if(self.cant_split, lambda x: x.empty("w:cantSplit"))
        if self.height is not None:
            b.empty("w:trHeight", (("w:val", self.height), ("w:hRule", self.height_rule)))
        b.add_optional_child(self.insert)
        b.add_optional_child(self.delete)
        return b.close()


@dataclass(frozen=True)
class TableCellProperty(BuildXML):
    width: Width | None = None
    grid_span: int | None = None
    vertical_merge: VMergeType | None = None
    borders: Borders | None = None
    shading: Shading | None = None
    text_direction: TextDirectionType | None = None
    vertical_align: VAlignType | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:tcPr")
        b.add_optional_child(self.width)
        if self.grid_span is not None:
            b.val("w:gridSpan", self.grid_span)
        if self.vertical_merge is not None:
            b.val("w:vMerge", self.vertical_merge)
        b.add_optional_child(self.borders)
        b.add_optional_child(self.shading)
        if self.text_direction is not None:
            b.val("w:textDirection", self.text_direction)
        if self.vertical_align is not None:
            b.val("w:vAlign", self.vertical_align)
        return b.close()


def _with_trailing_paragraph(children: tuple) -> tuple:
    if not children or isinstance(children[-1], Table):
        return children + (Paragraph(),)
    return children


@dataclass(frozen=True)
class TableCell(BuildXML):
    """Cell content. A cell never ends without a paragraph."""

    property: TableCellProperty = field(default_factory=TableCellProperty)
    children: tuple[BuildXML, ...] = ()
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _with_trailing_paragraph(self.children))
        object.__setattr__(self, "has_numbering", any_numbering(self.children))

    def _content(self) -> tuple:
        if len(self.children) == 1 and self.children[0] == Paragraph():
            return ()
        return self.children

    def _add(self, child: BuildXML) -> TableCell:
        return replace(self, children=self._content() + (child,))

    def _props(self, **changes: object) -> TableCell:
        return replace(self, property=replace(self.property, **changes))

    def add_paragraph(self, paragraph: Paragraph) -> TableCell:
        return self._add(paragraph)

    def add_table(self, table: Table) -> TableCell:
        return self._add(table)

    def add_structured_data_tag(self, tag: StructuredDataTag) -> TableCell:
        return self._add(tag)

    def width(self, w: int, width_type: WidthType = WidthType.DXA) -> TableCell:
        return self._props(width=Width("w:tcW", w, width_type))

    def grid_span(self, span: int) -> TableCell:
        return self._props(grid_span=span)

    def vertical_merge(self, merge: VMergeType) -> TableCell:
        return self._props(vertical_merge=merge)

    def vertical_align(self, align: VAlignType) -> TableCell:
        return self._props(vertical_align=align)

    def text_direction(self, direction: TextDirectionType) -> TableCell:
        return self._props(text_direction=direction)

    def shading(self, shading: Shading) -> TableCell:
        return self._props(shading=shading)

    def set_border(self, border: Border) -> TableCell:
        borders = self.property.borders or Borders("w:tcBorders")
        return self._props(borders=borders.set(border))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:tc")
        b.add_child(self.property)
        for child in _with_trailing_paragraph(self.children):
            child.build_to(b)
        return b.close()


@dataclass(frozen=True)
class TableRow(BuildXML):
    cells: tuple[TableCell, ...] = ()
    property: TableRowProperty = field(default_factory=TableRowProperty)
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.cells))

    def _props(self, **changes: object) -> TableRow:
        return replace(self, property=replace(self.property, **changes))

    def add_cell(self, cell: TableCell) -> TableRow:
        return replace(self, cells=self.cells + (cell,))

    def cant_split(self) -> TableRow:
        return self._props(cant_split=True)

    def row_height(self, height: int, rule: HeightRule | None = None) -> TableRow:
        return self._props(height=height, height_rule=rule)

    def grid_before(self, count: int) -> TableRow:
        return self._props(grid_before=count)

    def grid_after(self, count: int) -> TableRow:
        return self._props(grid_after=count)

    def width_before(self, w: int, width_type: WidthType = WidthType.DXA) -> TableRow:
        return self._props(width_before=Width("w:wBefore", w, width_type))

    def width_after(self, w: int, width_type: WidthType = WidthType.DXA) -> TableRow:
        return self._props(width_after=Width("w:wAfter", w, width_type))

    def insert(self, author: str = config.DEFAULT_AUTHOR, date: str = config.DEFAULT_DATE) -> TableRow:
        return self._props(insert=TrackedMark("w:ins", author, date))

    def delete(self, author: str = config.DEFAULT_AUTHOR, date: str = config.DEFAULT_DATE) -> TableRow:
        return self._props(delete=TrackedMark("w:del", author, date))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:tr")
        b.add_child(self.property)
        b.add_children(self.cells)
        return b.close()


@dataclass(frozen=True)
class Table(BuildXML):
    rows: tuple[TableRow, ...] = ()
    grid: tuple[int, ...] = ()
    property: TableProperty = field(default_factory=TableProperty)
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_numbering", any_numbering(self.rows))

    def _props(self, **changes: object) -> Table:
        return replace(self, property=replace(self.property, **changes))

    def add_row(self, row: TableRow) -> Table:
        return replace(self, rows=self.rows + (row,))

    def set_grid(self, grid: tuple[int, ...] | list[int]) -> Table:
        return replace(self, grid=tuple(grid))

    def style(self, style_id: str) -> Table:
        return self._props(style=style_id)

    def width(self, w: int, width_type: WidthType = WidthType.DXA) -> Table:
        return self._props(width=Width("w:tblW", w, width_type))

    def align(self, justification: TableAlignmentType) -> Table:
        return self._props(justification=justification)

    def indent(self, w: int) -> Table:
        return self._props(indent=Width("w:tblInd", w, WidthType.DXA))

    def layout(self, layout: TableLayoutType) -> Table:
        return self._props(layout=layout)

    def set_border(self, border: Border) -> Table:
        return self._props(borders=self.property.borders.set(border))

    def clear_border(self, position: str) -> Table:
        return self._props(borders=self.property.borders.clear(position))

    def without_borders(self) -> Table:
        return self._props(borders=Borders.empty_table())

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:tbl")
        b.add_child(self.property)
        b.open("w:tblGrid")
        for width in self.grid:
            b.empty("w:gridCol", (("w:w", width), ("w:type", WidthType.DXA)))
        b.close()
        b.add_children(self.rows)
        return b.close()
