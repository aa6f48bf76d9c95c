from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec import config
from docx_codec.run import Run, RunProperty
from docx_codec.types import AlignmentType, LineSpacingType, TextAlignmentType
from docx_codec.writer import BuildContext, BuildXML, XMLBuilder


@dataclass(frozen=True)
class Indent(BuildXML):
    start: int | None = None
    end: int | None = None
    first_line: int | None = None
    hanging: int | None = None
    start_chars: int | None = None
    hanging_chars: int | None = None
    first_line_chars: int | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:ind",
            (
                ("w:left", self.start),
                ("w:right", self.end),
                ("w:firstLine", self.first_line),
                ("w:hanging", self.hanging),
                ("w:leftChars", self.start_chars),
                ("w:hangingChars", self.hanging_chars),
                ("w:firstLineChars", self.first_line_chars),
            ),
        )


@dataclass(frozen=True)
class LineSpacing(BuildXML):
    line_rule: LineSpacingType | None = None
    before: int | None = None
    after: int | None = None
    before_lines: int | None = None
    after_lines: int | None = None
    line: int | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:spacing",
            (
                ("w:before", self.before),
                ("w:after", self.after),
                ("w:beforeLines", self.before_lines),
                ("w:afterLines", self.after_lines),
                ("w:line", self.line),
                ("w:lineRule", self.line_rule),
            ),
        )


@dataclass(frozen=True)
class NumberingProperty(BuildXML):
    id: int | None = None
    level: int | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:numPr")
        if self.level is not None:
            b.val("w:ilvl", self.level)
        if self.id is not None:
            b.val("w:numId", self.id)
        return b.close()


@dataclass(frozen=True)
class ParagraphProperty(BuildXML):
    style: str | None = None
    keep_next: bool = False
    keep_lines: bool = False
    page_break_before: bool = False
    widow_control: bool = False
    numbering_property: NumberingProperty | None = None
    adjust_right_ind: bool | None = None
    snap_to_grid: bool | None = None
    line_spacing: LineSpacing | None = None
    indent: Indent | None = None
    alignment: AlignmentType | None = None
    text_alignment: TextAlignmentType | None = None
    outline_lvl: int | None = None
    div_id: str | None = None
    run_property: RunProperty = field(default_factory=RunProperty)
    section_property: BuildXML | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:pPr")
        if self.style is not None:
            b.val("w:pStyle", self.style)
        b.apply_if(self.keep_next, lambda x: x.empty("w:keepNext"))
        b.apply_if(self.keep_lines, lambda x: x.empty("w:keepLines"))
        b.apply_if(self.page_break_before, lambda x: x.empty("w:pageBreakBefore"))
        b.apply_if(self.widow_control, lambda x: x.empty("w:widowControl"))
        b.add_optional_child(self.numbering_property)
        if self.adjust_right_ind is not None:
            b.val("w:adjustRightInd", "1" if self.adjust_right_ind else "0")
        if self.snap_to_grid is not None:
            b.val("w:snapToGrid", "1" if self.snap_to_grid else "0")
        b.add_optional_child(self.line_spacing)
        b.add_optional_child(self.indent)
        if self.alignment is not None:
            b.val("w:jc", self.alignment)
        if self.text_alignment is not None:
            b.val("w:textAlignment", self.text_alignment)
        if self.outline_lvl is not None:
            b.val("w:outlineLvl", self.outline_lvl)
        if self.div_id is not None:
            b.val("w:divId", self.div_id)
        b.add_child(self.run_property)
        b.add_optional_child(self.section_property)
        return b.close()


@dataclass(frozen=True)
class BookmarkStart(BuildXML):
    id: int
    name: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:bookmarkStart", (("w:id", self.id), ("w:name", self.name)))


@dataclass(frozen=True)
class BookmarkEnd(BuildXML):
    id: int

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:bookmarkEnd", (("w:id", self.id),))


@dataclass(frozen=True)
class CommentRangeStart(BuildXML):
    id: int

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:commentRangeStart", (("w:id", self.id),))


@dataclass(frozen=True)
class CommentRangeEnd(BuildXML):
    id: int

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:commentRangeEnd", (("w:id", self.id),))


def _change_attrs(b: XMLBuilder, change_id: int | None, author: str, date: str) -> tuple:
    if change_id is None:
        change_id = b.context.change_id()
    return (("w:id", change_id), ("w:author", author), ("w:date", date))


@dataclass(frozen=True)
class Delete(BuildXML):
    """Tracked deletion. ``id`` is generated bookkeeping and is ignored by equality."""

    children: tuple[BuildXML, ...] = ()
    author: str = config.DEFAULT_AUTHOR
    date: str = config.DEFAULT_DATE
    id: int | None = field(default=None, compare=False)

    @classmethod
    def new(cls, run: Run, context: BuildContext | None = None) -> Delete:
        change_id = context.change_id() if context is not None else None
        return cls(children=(run,), id=change_id)

    def add_run(self, run: Run) -> Delete:
        return replace(self, children=self.children + (run,))

    def add_comment_start(self, comment_id: int) -> Delete:
        return replace(self, children=self.children + (CommentRangeStart(comment_id),))

    def add_comment_end(self, comment_id: int) -> Delete:
        return replace(self, children=self.children + (CommentRangeEnd(comment_id),))

    def with_author(self, author: str) -> Delete:
        return replace(self, author=author)

    def with_date(self, date: str) -> Delete:
        return replace(self, date=date)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:del", _change_attrs(b, self.id, self.author, self.date))
        for child in self.children:
            child.build_to(b)
        return b.close()


@dataclass(frozen=True)
class Insert(BuildXML):
    """Tracked insertion. ``id`` is generated bookkeeping and is ignored by equality."""

    children: tuple[BuildXML, ...] = ()
    author: str = config.DEFAULT_AUTHOR
    date: str = config.DEFAULT_DATE
    id: int | None = field(default=None, compare=False)

    @classmethod
    def new(cls, run: Run, context: BuildContext | None = None) -> Insert:
        change_id = context.change_id() if context is not None else None
        return cls(children=(run,), id=change_id)

    def add_run(self, run: Run) -> Insert:
        return replace(self, children=self.children + (run,))

    def add_delete(self, delete: Delete) -> Insert:
        return replace(self, children=self.children + (delete,))

    def add_comment_start(self, comment_id: int) -> Insert:
        return replace(self, children=self.children + (CommentRangeStart(comment_id),))

    def add_comment_end(self, comment_id: int) -> Insert:
        return replace(self, children=self.children + (CommentRangeEnd(comment_id),))

    def with_author(self, author: str) -> Insert:
        return replace(self, author=author)

    def with_date(self, date: str) -> Insert:
        return replace(self, date=date)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:ins", _change_attrs(b, self.id, self.author, self.date))
        for child in self.children:
            child.build_to(b)
        return b.close()


@dataclass(frozen=True)
class Hyperlink(BuildXML):
    rid: str | None = None
    anchor: str | None = None
    history: int | None = 1
    children: tuple[BuildXML, ...] = ()

    @classmethod
    def external(cls, rid: str) -> Hyperlink:
        return cls(rid=rid)

    @classmethod
    def to_anchor(cls, anchor: str) -> Hyperlink:
        return cls(anchor=anchor)

    @property
    def is_external(self) -> bool:
        return self.rid is not None

    def _add(self, child: BuildXML) -> Hyperlink:
        return replace(self, children=self.children + (child,))

    def add_run(self, run: Run) -> Hyperlink:
        return self._add(run)

    def add_insert(self, insert: Insert) -> Hyperlink:
        return self._add(insert)

    def add_delete(self, delete: Delete) -> Hyperlink:
        return self._add(delete)

    def add_bookmark_start(self, bookmark_id: int, name: str) -> Hyperlink:
        return self._add(BookmarkStart(bookmark_id, name))

    def add_bookmark_end(self, bookmark_id: int) -> Hyperlink:
        return self._add(BookmarkEnd(bookmark_id))

    def add_comment_start(self, comment_id: int) -> Hyperlink:
        return self._add(CommentRangeStart(comment_id))

    def add_comment_end(self, comment_id: int) -> Hyperlink:
        return self._add(CommentRangeEnd(comment_id))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        if self.rid is not None:
            attrs = (("r:id", self.rid), ("w:history", self.history))
        else:
            attrs = (("w:anchor", self.anchor), ("w:history", self.history))
        b.open("w:hyperlink", attrs)
        for child in self.children:
            child.build_to(b)
        return b.close()


@dataclass(frozen=True)
class Paragraph(BuildXML):
    """A paragraph and its ordered children.

    ``id`` is the ``w14:paraId`` revision identifier. When it is missing the
    build context assigns one at write time, so it is left out of equality.
    """

    property: ParagraphProperty = field(default_factory=ParagraphProperty)
    children: tuple[BuildXML, ...] = ()
    id: str | None = field(default=None, compare=False)
    has_numbering: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "has_numbering",
            self.property.numbering_property is not None,
        )

    def _add(self, child: BuildXML) -> Paragraph:
        return replace(self, children=self.children + (child,))

    def _props(self, **changes: object) -> Paragraph:
        return replace(self, property=replace(self.property, **changes))

    def add_run(self, run: Run) -> Paragraph:
        return self._add(run)

    def add_insert(self, insert: Insert) -> Paragraph:
        return self._add(insert)

    def add_delete(self, delete: Delete) -> Paragraph:
        return self._add(delete)

    def add_hyperlink(self, hyperlink: Hyperlink) -> Paragraph:
        return self._add(hyperlink)

    def add_bookmark_start(self, bookmark_id: int, name: str) -> Paragraph:
        return self._add(BookmarkStart(bookmark_id, name))

    def add_bookmark_end(self, bookmark_id: int) -> Paragraph:
        return self._add(BookmarkEnd(bookmark_id))

    def add_comment_start(self, comment_id: int) -> Paragraph:
        return self._add(CommentRangeStart(comment_id))

    def add_comment_end(self, comment_id: int) -> Paragraph:
        return self._add(CommentRangeEnd(comment_id))

    def add_structured_data_tag(self, tag: BuildXML) -> Paragraph:
        return self._add(tag)

    def with_id(self, para_id: str) -> Paragraph:
        return replace(self, id=para_id)

    def style(self, style_id: str) -> Paragraph:
        return self._props(style=style_id)

    def align(self, alignment: AlignmentType) -> Paragraph:
        return self._props(alignment=alignment)

    def text_alignment(self, alignment: TextAlignmentType) -> Paragraph:
        return self._props(text_alignment=alignment)

    def indent(
        self,
        start: int | None = None,
        end: int | None = None,
        first_line: int | None = None,
        hanging: int | None = None,
    ) -> Paragraph:
        return self._props(indent=Indent(start=start, end=end, first_line=first_line, hanging=hanging))

    def line_spacing(self, spacing: LineSpacing) -> Paragraph:
        return self._props(line_spacing=spacing)

    def numbering(self, numbering_id: int, level: int) -> Paragraph:
        return self._props(numbering_property=NumberingProperty(numbering_id, level))

    def keep_next(self) -> Paragraph:
        return self._props(keep_next=True)

    def keep_lines(self) -> Paragraph:
        return self._props(keep_lines=True)

    def page_break_before(self) -> Paragraph:
        return self._props(page_break_before=True)

    def widow_control(self) -> Paragraph:
        return self._props(widow_control=True)

    def outline_lvl(self, level: int) -> Paragraph:
        return self._props(outline_lvl=level)

    def snap_to_grid(self, value: bool) -> Paragraph:
        return self._props(snap_to_grid=value)

    def adjust_right_ind(self, value: bool) -> Paragraph:
        return self._props(adjust_right_ind=value)

    def div_id(self, div_id: str) -> Paragraph:
        return self._props(div_id=div_id)

    def run_property(self, run_property: RunProperty) -> Paragraph:
        return self._props(run_property=run_property)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        para_id = self.id if self.id is not None else b.context.para_id()
        b.open("w:p", (("w14:paraId", para_id),))
        b.add_child(self.property)
        for child in self.children:
            child.build_to(b)
        return b.close()
