from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec import config
from docx_codec.types import (
    BreakType,
    DrawingPositionType,
    FieldCharType,
    PicAlign,
    PositionalTabAlignmentType,
    PositionalTabRelativeTo,
    RelativeFromHType,
    RelativeFromVType,
    ShdType,
    TabLeaderType,
)
from docx_codec.writer import BuildXML, XMLBuilder

A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
PIC_NS = "http://schemas.openxmlformats.org/drawingml/2006/picture"


def _toggle(b: XMLBuilder, tag: str, value: bool | None) -> XMLBuilder:
    if value is None:
        return b
    if value:
        return b.empty(tag)
    return b.val(tag, "false")


@dataclass(frozen=True)
class RunFonts(BuildXML):
    ascii: str | None = None
    hi_ansi: str | None = None
    east_asia: str | None = None
    cs: str | None = None
    ascii_theme: str | None = None
    hi_ansi_theme: str | None = None
    east_asia_theme: str | None = None
    cs_theme: str | None = None
    hint: str | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:rFonts",
            (
                ("w:ascii", self.ascii),
                ("w:hAnsi", self.hi_ansi),
                ("w:eastAsia", self.east_asia),
                ("w:cs", self.cs),
                ("w:asciiTheme", self.ascii_theme),
                ("w:hAnsiTheme", self.hi_ansi_theme),
                ("w:eastAsiaTheme", self.east_asia_theme),
                ("w:cstheme", self.cs_theme),
                ("w:hint", self.hint),
            ),
        )


@dataclass(frozen=True)
class RunProperty(BuildXML):
    style: str | None = None
    fonts: RunFonts | None = None
    bold: bool | None = None
    bold_cs: bool | None = None
    italic: bool | None = None
    italic_cs: bool | None = None
    caps: bool | None = None
    strike: bool | None = None
    dstrike: bool | None = None
    vanish: bool = False
    spec_vanish: bool = False
    color: str | None = None
    spacing: int | None = None
    sz: int | None = None
    sz_cs: int | None = None
    highlight: str | None = None
    underline: str | None = None
    vert_align: str | None = None

    def size(self, half_points: int) -> RunProperty:
        return replace(self, sz=half_points, sz_cs=half_points)

    def with_style(self, style_id: str) -> RunProperty:
        return replace(self, style=style_id)

    def with_color(self, color: str) -> RunProperty:
        return replace(self, color=color)

    def with_highlight(self, color: str) -> RunProperty:
        return replace(self, highlight=color)

    def with_spacing(self, spacing: int) -> RunProperty:
        return replace(self, spacing=spacing)

    def with_fonts(self, fonts: RunFonts) -> RunProperty:
        return replace(self, fonts=fonts)

    def with_underline(self, line_type: str) -> RunProperty:
        return replace(self, underline=line_type)

    def with_vert_align(self, value: str) -> RunProperty:
        return replace(self, vert_align=value)

    def with_bold(self) -> RunProperty:
        return replace(self, bold=True, bold_cs=True)

    def disable_bold(self) -> RunProperty:
        return replace(self, bold=False, bold_cs=False)

    def with_italic(self) -> RunProperty:
        return replace(self, italic=True, italic_cs=True)

    def disable_italic(self) -> RunProperty:
        return replace(self, italic=False, italic_cs=False)

    def with_strike(self) -> RunProperty:
        return replace(self, strike=True)

    def disable_strike(self) -> RunProperty:
        return replace(self, strike=False)

    def with_dstrike(self) -> RunProperty:
        return replace(self, dstrike=True)

    def with_caps(self) -> RunProperty:
        return replace(self, caps=True)

    def with_vanish(self) -> RunProperty:
        return replace(self, vanish=True)

    def with_spec_vanish(self) -> RunProperty:
        return replace(self, spec_vanish=True)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:rPr")
        if self.style is not None:
            b.val("w:rStyle", self.style)
        b.add_optional_child(self.fonts)
        _toggle(b, "w:b", self.bold)
        _toggle(b, "w:bCs", self.bold_cs)
        _toggle(b, "w:i", self.italic)
        _toggle(b, "w:iCs", self.italic_cs)
        _toggle(b, "w:caps", self.caps)
        _toggle(b, "w:strike", self.strike)
        _toggle(b, "w:dstrike", self.dstrike)
        b.apply_if(self.vanish, lambda x: x.empty("w:vanish"))
        b.apply_if(self.spec_vanish, lambda x: x.empty("w:specVanish"))
        if self.color is not None:
            b.val("w:color", self.color)
        if self.spacing is not None:
            b.val("w:spacing", self.spacing)
        if self.sz is not None:
            b.val("w:sz", self.sz)
        if self.sz_cs is not None:
            b.val("w:szCs", self.sz_cs)
        if self.highlight is not None:
            b.val("w:highlight", self.highlight)
        if self.underline is not None:
            b.val("w:u", self.underline)
        if self.vert_align is not None:
            b.val("w:vertAlign", self.vert_align)
        return b.close()


@dataclass(frozen=True)
class Text(BuildXML):
    text: str = ""
    preserve_space: bool = True

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        attrs = (("xml:space", "preserve"),) if self.preserve_space else ()
        return b.text_element("w:t", self.text, attrs)


@dataclass(frozen=True)
class DeleteText(BuildXML):
    text: str = ""
    preserve_space: bool = True

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        attrs = (("xml:space", "preserve"),) if self.preserve_space else ()
        return b.text_element("w:delText", self.text, attrs)


@dataclass(frozen=True)
class Sym(BuildXML):
    font: str
    char: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:sym", (("w:font", self.font), ("w:char", self.char)))


@dataclass(frozen=True)
class Tab(BuildXML):
    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:tab")


@dataclass(frozen=True)
class PositionalTab(BuildXML):
    alignment: PositionalTabAlignmentType = PositionalTabAlignmentType.LEFT
    relative_to: PositionalTabRelativeTo = PositionalTabRelativeTo.MARGIN
    leader: TabLeaderType = TabLeaderType.NONE

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:ptab",
            (
                ("w:alignment", self.alignment),
                ("w:relativeTo", self.relative_to),
                ("w:leader", self.leader),
            ),
        )


@dataclass(frozen=True)
class Break(BuildXML):
    break_type: BreakType = BreakType.TEXT_WRAPPING

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:br", (("w:type", self.break_type),))


@dataclass(frozen=True)
class FieldChar(BuildXML):
    field_char_type: FieldCharType = FieldCharType.UNSUPPORTED
    dirty: bool = False

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:fldChar",
            (("w:fldCharType", self.field_char_type), ("w:dirty", self.dirty)),
        )


@dataclass(frozen=True)
class InstrText(BuildXML):
    text: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.text_element("w:instrText", self.text)


@dataclass(frozen=True)
class DeleteInstrText(BuildXML):
    text: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.text_element("w:delInstrText", self.text)


@dataclass(frozen=True)
class FootnoteReference(BuildXML):
    id: int

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:footnoteReference", (("w:id", self.id),))


@dataclass(frozen=True)
class Shading(BuildXML):
    shd_type: ShdType = ShdType.CLEAR
    color: str = "auto"
    fill: str = "FFFFFF"

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w:shd",
            (("w:val", self.shd_type), ("w:color", self.color), ("w:fill", self.fill)),
        )


@dataclass(frozen=True)
class Pic(BuildXML):
    id: str = ""
    size: tuple[int, int] = (0, 0)
    position_type: DrawingPositionType = DrawingPositionType.INLINE
    simple_pos: bool = False
    simple_pos_x: int = 0
    simple_pos_y: int = 0
    layout_in_cell: bool = False
    relative_height: int = config.DEFAULT_RELATIVE_HEIGHT
    allow_overlap: bool = False
    dist_t: int = 0
    dist_b: int = 0
    dist_l: int = 0
    dist_r: int = 0
    relative_from_h: RelativeFromHType = RelativeFromHType.MARGIN
    relative_from_v: RelativeFromVType = RelativeFromVType.MARGIN
    position_h: int | PicAlign = 0
    position_v: int | PicAlign = 0
    doc_pr_id: str = "1"
    name: str = "Figure"
    description: str = ""
    rot: int = 0

    @classmethod
    def new(cls, rid: str, width_px: int, height_px: int) -> Pic:
        return cls(
            id=rid,
            size=(width_px * config.EMU_PER_PIXEL, height_px * config.EMU_PER_PIXEL),
        )

    def floating(self) -> Pic:
        return replace(self, position_type=DrawingPositionType.ANCHOR)

    def overlapping(self) -> Pic:
        return replace(self, allow_overlap=True)

    def offset_x(self, emu: int) -> Pic:
        return replace(self, position_h=emu)

    def offset_y(self, emu: int) -> Pic:
        return replace(self, position_v=emu)

    def align_h(self, align: PicAlign, relative_from: RelativeFromHType) -> Pic:
        return replace(self, position_h=align, relative_from_h=relative_from)

    def align_v(self, align: PicAlign, relative_from: RelativeFromVType) -> Pic:
        return replace(self, position_v=align, relative_from_v=relative_from)

    def rotate(self, degrees: int) -> Pic:
        return replace(self, rot=degrees % 360)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("pic:pic", (("xmlns:pic", PIC_NS),))
        b.open("pic:nvPicPr")
        b.empty("pic:cNvPr", (("id", "0"), ("name", "")))
        b.open("pic:cNvPicPr")
        b.empty("a:picLocks", (("noChangeAspect", "1"), ("noChangeArrowheads", "1")))
        b.close().close()
        b.open("pic:blipFill")
        b.empty("a:blip", (("r:embed", self.id),))
        b.empty("a:srcRect")
        b.open("a:stretch").empty("a:fillRect").close()
        b.close()
        b.open("pic:spPr", (("bwMode", "auto"),))
        b.open("a:xfrm", (("rot", self.rot * config.EMU_PER_ROTATION_DEGREE),))
        b.empty("a:off", (("x", 0), ("y", 0)))
        b.empty("a:ext", (("cx", self.size[0]), ("cy", self.size[1])))
        b.close()
        b.open("a:prstGeom", (("prst", "rect"),)).empty("a:avLst").close()
        b.close()
        return b.close()


def _write_position(b: XMLBuilder, tag: str, relative_from: object, position: int | PicAlign) -> None:
    b.open(tag, (("relativeFrom", relative_from),))
    if isinstance(position, PicAlign):
        b.text_element("wp:align", position.value)
    else:
        b.text_element("wp:posOffset", str(position))
    b.close()


@dataclass(frozen=True)
class TextBox(BuildXML):
    """Text box drawing. Read-only: it is parsed but never written."""

    children: tuple = ()
    size: tuple[int, int] = (0, 0)
    position_type: DrawingPositionType = DrawingPositionType.INLINE
    position_h: int | PicAlign = 0
    position_v: int | PicAlign = 0
    relative_from_h: RelativeFromHType = RelativeFromHType.MARGIN
    relative_from_v: RelativeFromVType = RelativeFromVType.MARGIN

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        raise NotImplementedError("writing text box drawings is not supported")


@dataclass(frozen=True)
class Drawing(BuildXML):
    data: Pic | TextBox | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        if isinstance(self.data, TextBox):
            raise NotImplementedError("writing text box drawings is not supported")
        if self.data is None:
            raise NotImplementedError("writing an empty drawing is not supported")
        p = self.data
        b.open("w:drawing")
        if p.position_type == DrawingPositionType.INLINE:
            b.open(
                "wp:inline",
                (("distT", p.dist_t), ("distB", p.dist_b), ("distL", p.dist_l), ("distR", p.dist_r)),
            )
        else:
            b.open(
                "wp:anchor",
                (
                    ("distT", p.dist_t),
                    ("distB", p.dist_b),
                    ("distL", p.dist_l),
                    ("distR", p.dist_r),
                    ("simplePos", "1" if p.simple_pos else "0"),
                    ("allowOverlap", "1" if p.allow_overlap else "0"),
                    ("behindDoc", "0"),
                    ("locked", "0"),
                    ("layoutInCell", "1" if p.layout_in_cell else "0"),
                    ("relativeHeight", p.relative_height),
                ),
            )
            b.empty("wp:simplePos", (("x", p.simple_pos_x), ("y", p.simple_pos_y)))
            _write_position(b, "wp:positionH", p.relative_from_h, p.position_h)
            _write_position(b, "wp:positionV", p.relative_from_v, p.position_v)
        b.empty("wp:extent", (("cx", p.size[0]), ("cy", p.size[1])))
        b.empty("wp:effectExtent", (("b", 0), ("l", 0), ("r", 0), ("t", 0)))
        if p.allow_overlap:
            b.empty("wp:wrapNone")
        elif p.position_type == DrawingPositionType.ANCHOR:
            b.empty("wp:wrapSquare", (("wrapText", "bothSides"),))
        b.empty(
            "wp:docPr",
            (("id", p.doc_pr_id or "1"), ("name", p.name or "Figure"), ("descr", p.description)),
        )
        b.open("wp:cNvGraphicFramePr")
        b.empty("a:graphicFrameLocks", (("xmlns:a", A_NS), ("noChangeAspect", "1")))
        b.close()
        b.open("a:graphic", (("xmlns:a", A_NS),))
        b.open("a:graphicData", (("uri", PIC_NS),))
        b.add_child(p)
        b.close().close()
        return b.close().close()


@dataclass(frozen=True)
class Shape(BuildXML):
    """Legacy VML shape. Read-only."""

    style: str | None = None
    image_data_id: str | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        raise NotImplementedError("writing VML shapes is not supported")


@dataclass(frozen=True)
class Pict(BuildXML):
    """Legacy picture container. Read-only."""

    shape: Shape | None = None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        raise NotImplementedError("writing legacy picture containers is not supported")


@dataclass(frozen=True)
class Run(BuildXML):
    run_property: RunProperty = field(default_factory=RunProperty)
    children: tuple[BuildXML, ...] = ()

    def _add(self, child: BuildXML) -> Run:
        return replace(self, children=self.children + (child,))

    def _props(self, run_property: RunProperty) -> Run:
        return replace(self, run_property=run_property)

    def add_text(self, text: str) -> Run:
        return self._add(Text(text.replace("\n", "")))

    def add_delete_text(self, text: str) -> Run:
        return self._add(DeleteText(text.replace("\n", "")))

    def add_tab(self) -> Run:
        return self._add(Tab())

    def add_ptab(self, ptab: PositionalTab) -> Run:
        return self._add(ptab)

    def add_break(self, break_type: BreakType) -> Run:
        return self._add(Break(break_type))

    def add_sym(self, sym: Sym) -> Run:
        return self._add(sym)

    def add_image(self, pic: Pic) -> Run:
        return self._add(Drawing(pic))

    def add_drawing(self, drawing: Drawing) -> Run:
        return self._add(drawing)

    def add_field_char(self, field_char_type: FieldCharType, dirty: bool = False) -> Run:
        return self._add(FieldChar(field_char_type, dirty))

    def add_instr_text(self, text: str) -> Run:
        return self._add(InstrText(text))

    def add_delete_instr_text(self, text: str) -> Run:
        return self._add(DeleteInstrText(text))

    def add_footnote_reference(self, footnote_id: int) -> Run:
        run = self._props(self.run_property.with_style("FootnoteReference"))
        return run._add(FootnoteReference(footnote_id))

    def shading(self, shading: Shading) -> Run:
        return self._add(shading)

    def style(self, style_id: str) -> Run:
        return self._props(self.run_property.with_style(style_id))

    def size(self, half_points: int) -> Run:
        return self._props(self.run_property.size(half_points))

    def color(self, color: str) -> Run:
        return self._props(self.run_property.with_color(color))

    def highlight(self, color: str) -> Run:
        return self._props(self.run_property.with_highlight(color))

    def spacing(self, spacing: int) -> Run:
        return self._props(self.run_property.with_spacing(spacing))

    def fonts(self, fonts: RunFonts) -> Run:
        return self._props(self.run_property.with_fonts(fonts))

    def bold(self) -> Run:
        return self._props(self.run_property.with_bold())

    def disable_bold(self) -> Run:
        return self._props(self.run_property.disable_bold())

    def italic(self) -> Run:
        return self._props(self.run_property.with_italic())

    def disable_italic(self) -> Run:
        return self._props(self.run_property.disable_italic())

    def underline(self, line_type: str) -> Run:
        return self._props(self.run_property.with_underline(line_type))

    def strike(self) -> Run:
        return self._props(self.run_property.with_strike())

    def dstrike(self) -> Run:
        return self._props(self.run_property.with_dstrike())

    def vanish(self) -> Run:
        return self._props(self.run_property.with_vanish())

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:r")
        b.add_child(self.run_property)
        for child in self.children:
            child.build_to(b)
        return b.close()

