from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from time import perf_counter
from typing import Any, Callable

from docx_codec import config
from docx_codec.coerce import (
    VAL,
    VAL_DXA,
    VAL_INT,
    Attr,
    dual_attr,
    enum_parser,
    on_off_element,
    parse_dxa,
    parse_enum,
    parse_int,
    parse_non_negative_dxa,
    parse_non_negative_int,
    parse_on_off,
    parse_percent,
    w,
)
from docx_codec.document import Document, Footer, Header, Section
from docx_codec.errors import MalformedMarkupError, MissingPartError
from docx_codec.extras import (
    CommentExtended,
    CommentsExtended,
    CustomProps,
    Div,
    FontGroup,
    FontScheme,
    FontSchemeFont,
    Rels,
    Theme,
    WebSettings,
)
from docx_codec.numbering import AbstractNumbering, Level, LevelOverride, Numbering, Numberings
from docx_codec.paragraph import (
    BookmarkEnd,
    BookmarkStart,
    CommentRangeEnd,
    CommentRangeStart,
    Delete,
    Hyperlink,
    Indent,
    Insert,
    LineSpacing,
    NumberingProperty,
    Paragraph,
    ParagraphProperty,
)
from docx_codec.run import (
    Break,
    DeleteInstrText,
    DeleteText,
    Drawing,
    FieldChar,
    FootnoteReference,
    InstrText,
    Pic,
    Pict,
    PositionalTab,
    Run,
    RunFonts,
    RunProperty,
    Shading,
    Shape,
    Sym,
    Tab,
    Text,
    TextBox,
)
from docx_codec.section import (
    DocGrid,
    FooterReference,
    HeaderReference,
    PageMargin,
    PageNumType,
    PageSize,
    SectionProperty,
)
from docx_codec.settings import DocId, DocVar, Settings
from docx_codec.structured import DataBinding, StructuredDataTag, StructuredDataTagProperty
from docx_codec.styles import DocDefaults, Style, Styles
from docx_codec.table import (
    CELL_BORDER_POSITIONS,
    TABLE_BORDER_POSITIONS,
    Border,
    Borders,
    Table,
    TableCell,
    TableCellProperty,
    TableProperty,
    TableRow,
    TableRowProperty,
    TrackedMark,
    Width,
)
from docx_codec.types import (
    AlignmentType,
    BorderType,
    BreakType,
    CharacterSpacingValues,
    DocGridType,
    DrawingPositionType,
    FieldCharType,
    HeaderFooterType,
    HeightRule,
    LevelSuffixType,
    LineSpacingType,
    PageOrientationType,
    PicAlign,
    PositionalTabAlignmentType,
    PositionalTabRelativeTo,
    RelativeFromHType,
    RelativeFromVType,
    SectionType,
    ShdType,
    StyleType,
    TabLeaderType,
    TableAlignmentType,
    TableLayoutType,
    TextAlignmentType,
    TextDirectionType,
    VAlignType,
    VMergeType,
    WidthType,
)
from docx_codec.xml_node import XmlNode, parse_node

ChildReader = Callable[[XmlNode, "ReadLogState | None"], Any]


@dataclass
class WarningEntry:
    rule: str
    reason: str
    tag: str | None = None


@dataclass
class ReadLogState:
    part: str
    start_time: datetime
    warnings: list[WarningEntry] = field(default_factory=list)
    element_count: int = 0
    error: str | None = None
    elapsed_sec: float | None = None


def _warn(
    log_state: ReadLogState | None,
    rule: str,
    reason: str,
    tag: str | None = None,
) -> None:
    if log_state is None:
        return
    log_state.warnings.append(WarningEntry(rule=rule, reason=reason, tag=tag))


def _write_log(log_state: ReadLogState) -> None:
    config.ensure_base_dirs()
    log_path = config.build_log_path(log_state.start_time)
    lines = [
        f"part: {log_state.part}",
        f"elapsed_sec: {log_state.elapsed_sec:.3f}"
        if log_state.elapsed_sec is not None
        else "elapsed_sec: unknown",
        f"element_count: {log_state.element_count}",
    ]
    if log_state.error:
        lines.append(f"error: {log_state.error}")
    lines.append(f"warnings_count: {len(log_state.warnings)}")
    for warning in log_state.warnings:
        parts = [f"rule={warning.rule}", f"reason={warning.reason}"]
        if warning.tag:
            parts.append(f"tag={warning.tag}")
        lines.append("warning: " + " ".join(parts))
    log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# field helpers
# ---------------------------------------------------------------------------


def _read(node: XmlNode | None, attr: Attr, log_state: ReadLogState | None) -> Any:
    if node is None:
        return attr.default
    raw = node.get(*attr.keys)
    if raw is None:
        return attr.default
    value = attr.convert(raw)
    if value is None:
        _warn(
            log_state,
            rule="default",
            reason=f"unparsable {attr.keys[0]}={raw!r}, default used",
            tag=node.tag,
        )
        return attr.default
    return value


def _optional(
    node: XmlNode | None,
    reader: ChildReader,
    log_state: ReadLogState | None,
) -> Any:
    if node is None:
        return None
    return reader(node, log_state)


def _toggle(node: XmlNode | None) -> bool | None:
    if node is None:
        return None
    return on_off_element(node)


def _note_duplicates(node: XmlNode, log_state: ReadLogState | None) -> None:
    if log_state is None:
        return
    seen: set[str] = set()
    for child in node.children:
        if child.tag in seen:
            _warn(log_state, rule="duplicate", reason="later duplicate ignored", tag=child.tag)
        seen.add(child.tag)


def _read_children(
    node: XmlNode,
    readers: dict[str, ChildReader],
    log_state: ReadLogState | None,
    skip: tuple[str, ...] = (),
) -> tuple:
    children = []
    for child in node.children:
        if child.tag in skip:
            continue
        reader = readers.get(child.tag)
        if reader is None:
            _warn(log_state, rule="unknown_child", reason=f"unsupported in {node.tag}", tag=child.tag)
            continue
        value = reader(child, log_state)
        if value is None:
            _warn(log_state, rule="dropped_child", reason="missing required field", tag=child.tag)
            continue
        children.append(value)
    return tuple(children)


def _enum_val(enum_cls: type, default: Any = None) -> Attr:
    return Attr(w("val"), default, enum_parser(enum_cls))


_ID_INT = Attr(w("id"), convert=parse_int)
_NAME = Attr(w("name"))
_AUTHOR = Attr(w("author"), config.DEFAULT_AUTHOR)
_DATE = Attr(w("date"), config.DEFAULT_DATE)
_HALF_POINTS = Attr(w("val"), convert=parse_non_negative_int)
_PARA_ID = Attr(("w14:paraId", "paraId"))
_RID = Attr(("r:id", "id"))


# ---------------------------------------------------------------------------
# run level
# ---------------------------------------------------------------------------

_FONT_ATTRS = (
    ("ascii", Attr(w("ascii"))),
    ("hi_ansi", Attr(w("hAnsi"))),
    ("east_asia", Attr(w("eastAsia"))),
    ("cs", Attr(w("cs"))),
    ("ascii_theme", Attr(w("asciiTheme"))),
    ("hi_ansi_theme", Attr(w("hAnsiTheme"))),
    ("east_asia_theme", Attr(w("eastAsiaTheme"))),
    ("cs_theme", Attr(("w:cstheme", "cstheme", "w:csTheme", "csTheme"))),
    ("hint", Attr(w("hint"))),
)


def read_run_fonts(node: XmlNode, log_state: ReadLogState | None = None) -> RunFonts:
    return RunFonts(**{name: attr.read(node) for name, attr in _FONT_ATTRS})


def read_run_property(node: XmlNode | None, log_state: ReadLogState | None = None) -> RunProperty:
    """Run formatting. When a property is listed twice the first one wins."""
    if node is None:
        return RunProperty()
    _note_duplicates(node, log_state)
    return RunProperty(
        style=VAL.read(node.find("w:rStyle")),
        fonts=_optional(node.find("w:rFonts"), read_run_fonts, log_state),
        bold=_toggle(node.find("w:b")),
        bold_cs=_toggle(node.find("w:bCs")),
        italic=_toggle(node.find("w:i")),
        italic_cs=_toggle(node.find("w:iCs")),
        caps=_toggle(node.find("w:caps")),
        strike=_toggle(node.find("w:strike")),
        dstrike=_toggle(node.find("w:dstrike")),
        vanish=on_off_element(node.find("w:vanish")),
        spec_vanish=on_off_element(node.find("w:specVanish")),
        color=VAL.read(node.find("w:color")),
        spacing=_read(node.find("w:spacing"), VAL_DXA, log_state),
        sz=_read(node.find("w:sz"), _HALF_POINTS, log_state),
        sz_cs=_read(node.find("w:szCs"), _HALF_POINTS, log_state),
        highlight=VAL.read(node.find("w:highlight")),
        underline=VAL.read(node.find("w:u")),
        vert_align=VAL.read(node.find("w:vertAlign")),
    )


def read_text(node: XmlNode, log_state: ReadLogState | None = None) -> Text:
    return Text(node.text or "", preserve_space=node.get("xml:space") == "preserve")


def read_delete_text(node: XmlNode, log_state: ReadLogState | None = None) -> DeleteText:
    return DeleteText(node.text or "", preserve_space=node.get("xml:space") == "preserve")


def read_sym(node: XmlNode, log_state: ReadLogState | None = None) -> Sym | None:
    font = node.get(*w("font"))
    char = node.get(*w("char"))
    if font is None or char is None:
        return None
    return Sym(font, char)


def read_tab(node: XmlNode, log_state: ReadLogState | None = None) -> Tab:
    return Tab()


_PTAB_ALIGNMENT = Attr(w("alignment"), PositionalTabAlignmentType.LEFT, enum_parser(PositionalTabAlignmentType))
_PTAB_RELATIVE_TO = Attr(w("relativeTo"), PositionalTabRelativeTo.MARGIN, enum_parser(PositionalTabRelativeTo))
_PTAB_LEADER = Attr(w("leader"), TabLeaderType.NONE, enum_parser(TabLeaderType))


def read_positional_tab(node: XmlNode, log_state: ReadLogState | None = None) -> PositionalTab:
    return PositionalTab(
        alignment=_read(node, _PTAB_ALIGNMENT, log_state),
        relative_to=_read(node, _PTAB_RELATIVE_TO, log_state),
        leader=_read(node, _PTAB_LEADER, log_state),
    )


_BREAK_TYPE = Attr(w("type"), BreakType.TEXT_WRAPPING, enum_parser(BreakType))


def read_break(node: XmlNode, log_state: ReadLogState | None = None) -> Break:
    return Break(_read(node, _BREAK_TYPE, log_state))


_FIELD_CHAR_TYPE = Attr(w("fldCharType"), FieldCharType.UNSUPPORTED, enum_parser(FieldCharType))


def read_field_char(node: XmlNode, log_state: ReadLogState | None = None) -> FieldChar:
    return FieldChar(
        field_char_type=_read(node, _FIELD_CHAR_TYPE, log_state),
        dirty=parse_on_off(node.get(*w("dirty")), default=False),
    )


def read_instr_text(node: XmlNode, log_state: ReadLogState | None = None) -> InstrText | None:
    text = node.text or ""
    if not text.strip():
        return None
    return InstrText(text)


def read_delete_instr_text(node: XmlNode, log_state: ReadLogState | None = None) -> DeleteInstrText:
    return DeleteInstrText(node.text or "")


def read_footnote_reference(node: XmlNode, log_state: ReadLogState | None = None) -> FootnoteReference | None:
    footnote_id = _read(node, _ID_INT, log_state)
    if footnote_id is None:
        return None
    return FootnoteReference(footnote_id)


_SHD_TYPE = Attr(w("val"), ShdType.CLEAR, enum_parser(ShdType))
_SHD_COLOR = Attr(w("color"), "auto")
_SHD_FILL = Attr(w("fill"), "FFFFFF")


def read_shading(node: XmlNode, log_state: ReadLogState | None = None) -> Shading:
    return Shading(
        shd_type=_read(node, _SHD_TYPE, log_state),
        color=_SHD_COLOR.read(node),
        fill=_SHD_FILL.read(node),
    )


def _wp(name: str) -> tuple[str, str]:
    return (name, f"wp:{name}")


_DIST_ATTRS = (
    ("dist_t", Attr(_wp("distT"), 0, parse_int)),
    ("dist_b", Attr(_wp("distB"), 0, parse_int)),
    ("dist_l", Attr(_wp("distL"), 0, parse_int)),
    ("dist_r", Attr(_wp("distR"), 0, parse_int)),
)
_RELATIVE_HEIGHT = Attr(_wp("relativeHeight"), config.DEFAULT_RELATIVE_HEIGHT, parse_non_negative_int)
_RELATIVE_FROM_H = Attr(_wp("relativeFrom"), RelativeFromHType.MARGIN, enum_parser(RelativeFromHType))
_RELATIVE_FROM_V = Attr(_wp("relativeFrom"), RelativeFromVType.MARGIN, enum_parser(RelativeFromVType))
_EMU_X = Attr(("x", "wp:x", "a:x"), 0, parse_int)
_EMU_Y = Attr(("y", "wp:y", "a:y"), 0, parse_int)
_EMU_CX = Attr(("cx", "wp:cx", "a:cx"), 0, parse_non_negative_int)
_EMU_CY = Attr(("cy", "wp:cy", "a:cy"), 0, parse_non_negative_int)


def _read_position(node: XmlNode) -> int | PicAlign:
    for child in node.children:
        if child.tag == "wp:posOffset":
            offset = parse_int(child.text)
            if offset is not None:
                return offset
        elif child.tag == "wp:align":
            align = parse_enum((child.text or "").strip(), PicAlign)
            if align is not None:
                return align
    return 0


def _read_pic(node: XmlNode, log_state: ReadLogState | None) -> Pic:
    pic = Pic(name="")
    for child in node.children:
        if child.tag == "pic:nvPicPr":
            c_nv_pr = child.find("pic:cNvPr")
            if c_nv_pr is not None and not pic.name:
                pic = replace(pic, name=c_nv_pr.get("name", "pic:name") or "")
        elif child.tag == "pic:blipFill":
            blip = child.find("a:blip")
            if blip is not None and blip.get("r:embed", "embed") is not None:
                pic = replace(pic, id=blip.get("r:embed", "embed"))
        elif child.tag == "pic:spPr":
            xfrm = child.find("a:xfrm")
            if xfrm is None:
                continue
            rot = parse_non_negative_int(xfrm.get("rot", "a:rot"))
            if rot is not None:
                pic = replace(pic, rot=rot // config.EMU_PER_ROTATION_DEGREE)
            ext = xfrm.find("a:ext")
            if ext is not None:
                pic = replace(pic, size=(_EMU_CX.read(ext), _EMU_CY.read(ext)))
    return pic


def _read_text_box_content(node: XmlNode, log_state: ReadLogState | None) -> tuple | None:
    text_box = node.find("wps:txbx")
    if text_box is None:
        return None
    content = text_box.find("w:txbxContent")
    if content is None:
        return None
    return _read_children(content, TEXT_BOX_CHILD_READERS, log_state)


def _read_drawing_container(
    node: XmlNode,
    position_type: DrawingPositionType,
    log_state: ReadLogState | None,
) -> Drawing | None:
    anchor = dict(
        position_type=position_type,
        simple_pos=parse_on_off(node.get(*_wp("simplePos")), default=False),
        layout_in_cell=parse_on_off(node.get(*_wp("layoutInCell")), default=False),
        allow_overlap=parse_on_off(node.get(*_wp("allowOverlap")), default=False),
        relative_height=_read(node, _RELATIVE_HEIGHT, log_state),
        **{name: _read(node, attr, log_state) for name, attr in _DIST_ATTRS},
    )
    placement: dict[str, Any] = {
        "relative_from_h": RelativeFromHType.MARGIN,
        "relative_from_v": RelativeFromVType.MARGIN,
        "position_h": 0,
        "position_v": 0,
    }
    extent = (0, 0)
    doc_pr: dict[str, str] = {}
    pic: Pic | None = None
    text_box_children: tuple | None = None

    for child in node.children:
        if child.tag == "wp:simplePos":
            anchor["simple_pos_x"] = _read(child, _EMU_X, log_state)
            anchor["simple_pos_y"] = _read(child, _EMU_Y, log_state)
        elif child.tag == "wp:positionH":
            placement["relative_from_h"] = _read(child, _RELATIVE_FROM_H, log_state)
            placement["position_h"] = _read_position(child)
        elif child.tag == "wp:positionV":
            placement["relative_from_v"] = _read(child, _RELATIVE_FROM_V, log_state)
            placement["position_v"] = _read_position(child)
        elif child.tag == "wp:extent":
            extent = (_read(child, _EMU_CX, log_state), _read(child, _EMU_CY, log_state))
        elif child.tag == "wp:docPr":
            doc_pr = {
                "doc_pr_id": child.get("id", "wp:id") or "",
                "name": child.get("name", "wp:name") or "",
                "description": child.get("descr", "wp:descr") or "",
            }
        elif child.tag == "a:graphic":
            data = child.find("a:graphicData")
            if data is None:
                continue
            for payload in data.children:
                if payload.tag == "pic:pic" and pic is None:
                    pic = _read_pic(payload, log_state)
                elif payload.tag == "wps:wsp" and text_box_children is None:
                    text_box_children = _read_text_box_content(payload, log_state)

    if pic is not None:
        size = extent if pic.size == (0, 0) and extent != (0, 0) else pic.size
        return Drawing(replace(pic, size=size, **anchor, **placement, **doc_pr))
    if text_box_children is not None:
        return Drawing(
            TextBox(
                children=text_box_children,
                size=extent,
                position_type=position_type,
                **placement,
            )
        )
    return None


def read_drawing(node: XmlNode, log_state: ReadLogState | None = None) -> Drawing | None:
    for child in node.children:
        if child.tag == "wp:inline":
            return _read_drawing_container(child, DrawingPositionType.INLINE, log_state)
        if child.tag == "wp:anchor":
            return _read_drawing_container(child, DrawingPositionType.ANCHOR, log_state)
    return None


def read_pict(node: XmlNode, log_state: ReadLogState | None = None) -> Pict:
    shape = node.find("v:shape")
    if shape is None:
        return Pict()
    image_data = shape.find("v:imagedata")
    image_id = image_data.get("r:id", "id") if image_data is not None else None
    return Pict(Shape(style=shape.get("style"), image_data_id=image_id))


def read_run(node: XmlNode, log_state: ReadLogState | None = None) -> Run:
    return Run(
        run_property=read_run_property(node.find("w:rPr"), log_state),
        children=_read_children(node, RUN_CHILD_READERS, log_state, skip=("w:rPr",)),
    )


RUN_CHILD_READERS: dict[str, ChildReader] = {
    "w:t": read_text,
    "w:delText": read_delete_text,
    "w:sym": read_sym,
    "w:tab": read_tab,
    "w:ptab": read_positional_tab,
    "w:br": read_break,
    "w:drawing": read_drawing,
    "w:pict": read_pict,
    "w:fldChar": read_field_char,
    "w:instrText": read_instr_text,
    "w:delInstrText": read_delete_instr_text,
    "w:footnoteReference": read_footnote_reference,
    "w:shd": read_shading,
}


# ---------------------------------------------------------------------------
# paragraph level
# ---------------------------------------------------------------------------


def read_bookmark_start(node: XmlNode, log_state: ReadLogState | None = None) -> BookmarkStart | None:
    bookmark_id = _read(node, _ID_INT, log_state)
    name = _NAME.read(node)
    if bookmark_id is None or name is None:
        return None
    return BookmarkStart(bookmark_id, name)


def read_bookmark_end(node: XmlNode, log_state: ReadLogState | None = None) -> BookmarkEnd | None:
    bookmark_id = _read(node, _ID_INT, log_state)
    if bookmark_id is None:
        return None
    return BookmarkEnd(bookmark_id)


def read_comment_range_start(node: XmlNode, log_state: ReadLogState | None = None) -> CommentRangeStart | None:
    comment_id = _read(node, _ID_INT, log_state)
    if comment_id is None:
        return None
    return CommentRangeStart(comment_id)


def read_comment_range_end(node: XmlNode, log_state: ReadLogState | None = None) -> CommentRangeEnd | None:
    comment_id = _read(node, _ID_INT, log_state)
    if comment_id is None:
        return None
    return CommentRangeEnd(comment_id)


def read_delete(node: XmlNode, log_state: ReadLogState | None = None) -> Delete:
    return Delete(
        children=_read_children(node, DELETE_CHILD_READERS, log_state),
        author=_AUTHOR.read(node),
        date=_DATE.read(node),
        id=_read(node, _ID_INT, log_state),
    )


def read_insert(node: XmlNode, log_state: ReadLogState | None = None) -> Insert:
    return Insert(
        children=_read_children(node, INSERT_CHILD_READERS, log_state),
        author=_AUTHOR.read(node),
        date=_DATE.read(node),
        id=_read(node, _ID_INT, log_state),
    )


def _parse_history(value: str | None) -> int | None:
    if value is None:
        return None
    text = value.strip().lower()
    if text in ("on", "true"):
        return 1
    if text in ("off", "false"):
        return 0
    return parse_int(text)


_HISTORY = Attr(w("history"), convert=_parse_history)


def read_hyperlink(node: XmlNode, log_state: ReadLogState | None = None) -> Hyperlink:
    rid = _RID.read(node)
    history = _read(node, _HISTORY, log_state)
    return Hyperlink(
        rid=rid,
        anchor=None if rid is not None else node.get(*w("anchor")),
        history=history,
        children=_read_children(node, HYPERLINK_CHILD_READERS, log_state),
    )


def read_indent(node: XmlNode, log_state: ReadLogState | None = None) -> Indent:
    """``start``/``end`` win over the legacy ``left``/``right``; hanging wins over firstLine."""
    hanging = _read(node, Attr(w("hanging"), convert=parse_dxa), log_state)
    hanging_chars = _read(node, Attr(w("hangingChars"), convert=parse_int), log_state)
    first_line = _read(node, Attr(w("firstLine"), convert=parse_dxa), log_state)
    first_line_chars = _read(node, Attr(w("firstLineChars"), convert=parse_int), log_state)
    return Indent(
        start=dual_attr(node, Attr(w("start"), convert=parse_dxa), Attr(w("left"), convert=parse_dxa)),
        end=dual_attr(node, Attr(w("end"), convert=parse_dxa), Attr(w("right"), convert=parse_dxa)),
        first_line=None if hanging is not None else first_line,
        hanging=hanging,
        start_chars=dual_attr(
            node,
            Attr(w("startChars"), convert=parse_int),
            Attr(w("leftChars"), convert=parse_int),
        ),
        hanging_chars=hanging_chars,
        first_line_chars=None if hanging_chars is not None else first_line_chars,
    )


_SPACING_ATTRS = (
    ("before", Attr(w("before"), convert=parse_non_negative_dxa)),
    ("after", Attr(w("after"), convert=parse_non_negative_dxa)),
    ("before_lines", Attr(w("beforeLines"), convert=parse_non_negative_int)),
    ("after_lines", Attr(w("afterLines"), convert=parse_non_negative_int)),
    ("line", Attr(w("line"), convert=parse_int)),
    ("line_rule", Attr(w("lineRule"), convert=enum_parser(LineSpacingType))),
)


def read_line_spacing(node: XmlNode, log_state: ReadLogState | None = None) -> LineSpacing:
    return LineSpacing(**{name: _read(node, attr, log_state) for name, attr in _SPACING_ATTRS})


def read_numbering_property(node: XmlNode, log_state: ReadLogState | None = None) -> NumberingProperty | None:
    numbering_id = _read(node.find("w:numId"), VAL_INT, log_state)
    level = _read(node.find("w:ilvl"), VAL_INT, log_state)
    if numbering_id is None and level is None:
        return None
    return NumberingProperty(numbering_id, level)


def _optional_on_off(node: XmlNode | None) -> bool | None:
    if node is None:
        return None
    return on_off_element(node)


_ALIGNMENT = _enum_val(AlignmentType)
_TEXT_ALIGNMENT = _enum_val(TextAlignmentType)


def read_paragraph_property(
    node: XmlNode | None,
    log_state: ReadLogState | None = None,
) -> ParagraphProperty:
    if node is None:
        return ParagraphProperty()
    _note_duplicates(node, log_state)
    return ParagraphProperty(
        style=VAL.read(node.find("w:pStyle")),
        keep_next=on_off_element(node.find("w:keepNext")),
        keep_lines=on_off_element(node.find("w:keepLines")),
        page_break_before=on_off_element(node.find("w:pageBreakBefore")),
        widow_control=on_off_element(node.find("w:widowControl")),
        numbering_property=_optional(node.find("w:numPr"), read_numbering_property, log_state),
        adjust_right_ind=_optional_on_off(node.find("w:adjustRightInd")),
        snap_to_grid=_optional_on_off(node.find("w:snapToGrid")),
        line_spacing=_optional(node.find("w:spacing"), read_line_spacing, log_state),
        indent=_optional(node.find("w:ind"), read_indent, log_state),
        alignment=_read(node.find("w:jc"), _ALIGNMENT, log_state),
        text_alignment=_read(node.find("w:textAlignment"), _TEXT_ALIGNMENT, log_state),
        outline_lvl=_read(node.find("w:outlineLvl"), VAL_INT, log_state),
        div_id=VAL.read(node.find("w:divId")),
        run_property=read_run_property(node.find("w:rPr"), log_state),
        section_property=_optional(node.find("w:sectPr"), read_section_property, log_state),
    )


def read_paragraph(node: XmlNode, log_state: ReadLogState | None = None) -> Paragraph:
    return Paragraph(
        property=read_paragraph_property(node.find("w:pPr"), log_state),
        children=_read_children(node, PARAGRAPH_CHILD_READERS, log_state, skip=("w:pPr",)),
        id=_PARA_ID.read(node),
    )


# ---------------------------------------------------------------------------
# structured data tags
# ---------------------------------------------------------------------------


def read_data_binding(node: XmlNode, log_state: ReadLogState | None = None) -> DataBinding:
    return DataBinding(
        xpath=node.get(*w("xpath")),
        prefix_mappings=node.get(*w("prefixMappings")),
        store_item_id=node.get(*w("storeItemID")),
    )


def read_structured_data_tag_property(
    node: XmlNode | None,
    log_state: ReadLogState | None = None,
) -> StructuredDataTagProperty:
    if node is None:
        return StructuredDataTagProperty()
    return StructuredDataTagProperty(
        run_property=read_run_property(node.find("w:rPr"), log_state),
        data_binding=_optional(node.find("w:dataBinding"), read_data_binding, log_state),
        alias=VAL.read(node.find("w:alias")),
    )


def read_structured_data_tag(node: XmlNode, log_state: ReadLogState | None = None) -> StructuredDataTag:
    content = node.find("w:sdtContent")
    children = () if content is None else _read_children(content, SDT_CHILD_READERS, log_state)
    return StructuredDataTag(
        property=read_structured_data_tag_property(node.find("w:sdtPr"), log_state),
        children=children,
    )


# ---------------------------------------------------------------------------
# tables
# ---------------------------------------------------------------------------

_WIDTH_W = Attr(w("w"), 0, parse_dxa)
_WIDTH_TYPE = Attr(w("type"), WidthType.DXA, enum_parser(WidthType))


def read_width(node: XmlNode | None, tag: str, log_state: ReadLogState | None = None) -> Width | None:
    if node is None:
        return None
    return Width(tag, _read(node, _WIDTH_W, log_state), _read(node, _WIDTH_TYPE, log_state))


_BORDER_TYPE = Attr(w("val"), BorderType.SINGLE, enum_parser(BorderType))
_BORDER_SIZE = Attr(w("sz"), config.DEFAULT_BORDER_SIZE, parse_non_negative_int)
_BORDER_SPACE = Attr(w("space"), convert=parse_non_negative_int)
_BORDER_COLOR = Attr(w("color"), config.DEFAULT_BORDER_COLOR)
_BORDER_ALIASES = {"left": "start", "right": "end"}


def read_border(node: XmlNode, position: str, log_state: ReadLogState | None = None) -> Border:
    return Border(
        position,
        border_type=_read(node, _BORDER_TYPE, log_state),
        size=_read(node, _BORDER_SIZE, log_state),
        space=_read(node, _BORDER_SPACE, log_state),
        color=_BORDER_COLOR.read(node),
    )


def read_borders(
    node: XmlNode,
    tag: str,
    positions: tuple[str, ...],
    log_state: ReadLogState | None = None,
) -> Borders:
    items = []
    for position in positions:
        child = node.find(f"w:{position}")
        if child is None and position in _BORDER_ALIASES:
            child = node.find(f"w:{_BORDER_ALIASES[position]}")
        if child is not None:
            items.append(read_border(child, position, log_state))
    return Borders(tag, tuple(items))


_TABLE_ALIGNMENT = _enum_val(TableAlignmentType, TableAlignmentType.LEFT)
_TABLE_LAYOUT = Attr(w("type"), convert=enum_parser(TableLayoutType))


def read_table_property(node: XmlNode | None, log_state: ReadLogState | None = None) -> TableProperty:
    if node is None:
        return TableProperty(borders=Borders.empty_table())
    _note_duplicates(node, log_state)
    borders = node.find("w:tblBorders")
    return TableProperty(
        style=VAL.read(node.find("w:tblStyle")),
        width=read_width(node.find("w:tblW"), "w:tblW", log_state) or Width("w:tblW"),
        justification=_read(node.find("w:jc"), _TABLE_ALIGNMENT, log_state),
        indent=read_width(node.find("w:tblInd"), "w:tblInd", log_state),
        borders=(
            Borders.empty_table()
            if borders is None
            else read_borders(borders, "w:tblBorders", TABLE_BORDER_POSITIONS, log_state)
        ),
        layout=_read(node.find("w:tblLayout"), _TABLE_LAYOUT, log_state),
    )


def _read_tracked_mark(node: XmlNode | None, tag: str, log_state: ReadLogState | None) -> TrackedMark | None:
    if node is None:
        return None
    return TrackedMark(tag, _AUTHOR.read(node), _DATE.read(node), _read(node, _ID_INT, log_state))


_HEIGHT_RULE = Attr(w("hRule"), convert=enum_parser(HeightRule))


def read_table_row_property(node: XmlNode | None, log_state: ReadLogState | None = None) -> TableRowProperty:
    if node is None:
        return TableRowProperty()
    _note_duplicates(node, log_state)
    height = node.find("w:trHeight")
    return TableRowProperty(
        grid_before=_read(node.find("w:gridBefore"), VAL_INT, log_state),
        grid_after=_read(node.find("w:gridAfter"), VAL_INT, log_state),
        width_before=read_width(node.find("w:wBefore"), "w:wBefore", log_state),
        width_after=read_width(node.find("w:wAfter"), "w:wAfter", log_state),
        cant_split=on_off_element(node.find("w:cantSplit")),
        height=_read(height, VAL_DXA, log_state),
        height_rule=_read(height, _HEIGHT_RULE, log_state) if height is not None else None,
        insert=_read_tracked_mark(node.find("w:ins"), "w:ins", log_state),
        delete=_read_tracked_mark(node.find("w:del"), "w:del", log_state),
    )


_V_MERGE = _enum_val(VMergeType, VMergeType.CONTINUE)
_CELL_TEXT_DIRECTION = _enum_val(TextDirectionType)
_V_ALIGN = _enum_val(VAlignType)


def read_table_cell_property(node: XmlNode | None, log_state: ReadLogState | None = None) -> TableCellProperty:
    if node is None:
        return TableCellProperty()
    _note_duplicates(node, log_state)
    borders = node.find("w:tcBorders")
    v_merge = node.find("w:vMerge")
    return TableCellProperty(
        width=read_width(node.find("w:tcW"), "w:tcW", log_state),
        grid_span=_read(node.find("w:gridSpan"), VAL_INT, log_state),
        # a bare vMerge continues the merge above
        vertical_merge=_read(v_merge, _V_MERGE, log_state) if v_merge is not None else None,
        borders=(
            None
            if borders is None
            else read_borders(borders, "w:tcBorders", CELL_BORDER_POSITIONS, log_state)
        ),
        shading=_optional(node.find("w:shd"), read_shading, log_state),
        text_direction=_read(node.find("w:textDirection"), _CELL_TEXT_DIRECTION, log_state),
        vertical_align=_read(node.find("w:vAlign"), _V_ALIGN, log_state),
    )


def read_table_cell(node: XmlNode, log_state: ReadLogState | None = None) -> TableCell:
    return TableCell(
        property=read_table_cell_property(node.find("w:tcPr"), log_state),
        children=_read_children(node, TABLE_CELL_CHILD_READERS, log_state, skip=("w:tcPr",)),
    )


def read_table_row(node: XmlNode, log_state: ReadLogState | None = None) -> TableRow:
    cells = _read_children(
        node,
        {"w:tc": read_table_cell},
        log_state,
        skip=("w:trPr", "w:tblPrEx"),
    )
    return TableRow(cells=cells, property=read_table_row_property(node.find("w:trPr"), log_state))


def read_table(node: XmlNode, log_state: ReadLogState | None = None) -> Table:
    grid_node = node.find("w:tblGrid")
    grid: tuple[int, ...] = ()
    if grid_node is not None:
        grid = tuple(_read(col, _WIDTH_W, log_state) for col in grid_node.iter_children("w:gridCol"))
    rows = _read_children(node, {"w:tr": read_table_row}, log_state, skip=("w:tblPr", "w:tblGrid"))
    return Table(
        rows=rows,
        grid=grid,
        property=read_table_property(node.find("w:tblPr"), log_state),
    )


# ---------------------------------------------------------------------------
# sections and document
# ---------------------------------------------------------------------------

_PAGE_W = Attr(w("w"), config.DEFAULT_PAGE_WIDTH, parse_non_negative_dxa)
_PAGE_H = Attr(w("h"), config.DEFAULT_PAGE_HEIGHT, parse_non_negative_dxa)
_ORIENT = Attr(w("orient"), convert=enum_parser(PageOrientationType))
_MARGIN_ATTRS = tuple(
    (name, Attr(w(name), default, parse_dxa)) for name, default in config.DEFAULT_PAGE_MARGIN.items()
)
_COLUMNS = Attr(w("num"), 1, parse_non_negative_int)
_COLUMN_SPACE = Attr(w("space"), config.DEFAULT_COLUMN_SPACE, parse_non_negative_dxa)
_GRID_TYPE = Attr(w("type"), DocGridType.DEFAULT, enum_parser(DocGridType))
_LINE_PITCH = Attr(w("linePitch"), convert=parse_int)
_CHAR_SPACE = Attr(w("charSpace"), convert=parse_int)
_PAGE_NUM_START = Attr(w("start"), convert=parse_int)
_HEADER_FOOTER_TYPE = Attr(w("type"), HeaderFooterType.DEFAULT, enum_parser(HeaderFooterType))
_SECTION_TEXT_DIRECTION = _enum_val(TextDirectionType, TextDirectionType.LR_TB)
_SECTION_TYPE = _enum_val(SectionType)


def _read_references(
    node: XmlNode,
    tag: str,
    factory: type,
    log_state: ReadLogState | None,
) -> dict[HeaderFooterType, Any]:
    refs: dict[HeaderFooterType, Any] = {}
    for child in node.iter_children(tag):
        rid = _RID.read(child)
        if rid is None:
            _warn(log_state, rule="dropped_child", reason="reference without r:id", tag=tag)
            continue
        kind = _read(child, _HEADER_FOOTER_TYPE, log_state)
        if kind in refs:
            _warn(log_state, rule="duplicate", reason=f"second {kind.value} reference ignored", tag=tag)
            continue
        refs[kind] = factory(rid, kind)
    return refs


def read_section_property(node: XmlNode, log_state: ReadLogState | None = None) -> SectionProperty:
    _note_duplicates(node, log_state)
    page_size = node.find("w:pgSz")
    margin = node.find("w:pgMar")
    cols = node.find("w:cols")
    grid = node.find("w:docGrid")
    page_num = node.find("w:pgNumType")
    headers = _read_references(node, "w:headerReference", HeaderReference, log_state)
    footers = _read_references(node, "w:footerReference", FooterReference, log_state)
    return SectionProperty(
        page_size=PageSize(
            _read(page_size, _PAGE_W, log_state),
            _read(page_size, _PAGE_H, log_state),
            _read(page_size, _ORIENT, log_state),
        ),
        page_margin=PageMargin(**{name: _read(margin, attr, log_state) for name, attr in _MARGIN_ATTRS}),
        columns=_read(cols, _COLUMNS, log_state),
        space=_read(cols, _COLUMN_SPACE, log_state),
        doc_grid=(
            None
            if grid is None
            else DocGrid(
                _read(grid, _GRID_TYPE, log_state),
                _read(grid, _LINE_PITCH, log_state),
                _read(grid, _CHAR_SPACE, log_state),
            )
        ),
        header_reference=headers.get(HeaderFooterType.DEFAULT),
        first_header_reference=headers.get(HeaderFooterType.FIRST),
        even_header_reference=headers.get(HeaderFooterType.EVEN),
        footer_reference=footers.get(HeaderFooterType.DEFAULT),
        first_footer_reference=footers.get(HeaderFooterType.FIRST),
        even_footer_reference=footers.get(HeaderFooterType.EVEN),
        page_num_type=(
            None
            if page_num is None
            else PageNumType(_read(page_num, _PAGE_NUM_START, log_state), page_num.get(*w("chapStyle")))
        ),
        text_direction=_read(node.find("w:textDirection"), _SECTION_TEXT_DIRECTION, log_state),
        section_type=_read(node.find("w:type"), _SECTION_TYPE, log_state),
        title_pg=on_off_element(node.find("w:titlePg")),
    )


def read_document(node: XmlNode, log_state: ReadLogState | None = None) -> Document:
    """Body children in order.

    A paragraph whose properties hold a ``sectPr`` closes a :class:`Section`
    made of everything read since the previous break. The body level ``sectPr``
    becomes the document's own section property.
    """
    body = node.find("w:body")
    if body is None:
        _warn(log_state, rule="default", reason="document without body", tag=node.tag)
        return Document()
    section_property = SectionProperty()
    children: list = []
    pending: list = []
    for child in body.children:
        if child.tag == "w:sectPr":
            section_property = read_section_property(child, log_state)
            continue
        reader = DOCUMENT_CHILD_READERS.get(child.tag)
        if reader is None:
            _warn(log_state, rule="unknown_child", reason=f"unsupported in {body.tag}", tag=child.tag)
            continue
        value = reader(child, log_state)
        if value is None:
            _warn(log_state, rule="dropped_child", reason="missing required field", tag=child.tag)
            continue
        if isinstance(value, Paragraph) and value.property.section_property is not None:
            breaker = replace(value, property=replace(value.property, section_property=None))
            breaker_id = None
            if breaker.children:
                pending.append(breaker)
            else:
                breaker_id = value.id
            children.append(Section(value.property.section_property, tuple(pending), breaker_id))
            pending = []
            continue
        pending.append(value)
    children.extend(pending)
    return Document(children=tuple(children), section_property=section_property)


def read_header(node: XmlNode, log_state: ReadLogState | None = None) -> Header:
    return Header(children=_read_children(node, HEADER_FOOTER_CHILD_READERS, log_state))


def read_footer(node: XmlNode, log_state: ReadLogState | None = None) -> Footer:
    return Footer(children=_read_children(node, HEADER_FOOTER_CHILD_READERS, log_state))


# ---------------------------------------------------------------------------
# styles and numbering
# ---------------------------------------------------------------------------

_STYLE_TYPE = Attr(w("type"), StyleType.PARAGRAPH, enum_parser(StyleType))


def read_style(node: XmlNode, log_state: ReadLogState | None = None) -> Style | None:
    style_id = node.get(*w("styleId"))
    if style_id is None:
        return None
    _note_duplicates(node, log_state)
    table_property = node.find("w:tblPr")
    return Style(
        style_id=style_id,
        style_type=_read(node, _STYLE_TYPE, log_state),
        name=VAL.read(node.find("w:name")) or "",
        run_property=read_run_property(node.find("w:rPr"), log_state),
        paragraph_property=read_paragraph_property(node.find("w:pPr"), log_state),
        table_property=(
            TableProperty() if table_property is None else read_table_property(table_property, log_state)
        ),
        table_cell_property=read_table_cell_property(node.find("w:tcPr"), log_state),
        based_on=VAL.read(node.find("w:basedOn")),
        next=VAL.read(node.find("w:next")),
        link=VAL.read(node.find("w:link")),
    )


def read_doc_defaults(node: XmlNode | None, log_state: ReadLogState | None = None) -> DocDefaults:
    if node is None:
        return DocDefaults()
    run_default = node.find("w:rPrDefault")
    paragraph_default = node.find("w:pPrDefault")
    return DocDefaults(
        run_property=read_run_property(
            run_default.find("w:rPr") if run_default is not None else None, log_state
        ),
        paragraph_property=read_paragraph_property(
            paragraph_default.find("w:pPr") if paragraph_default is not None else None, log_state
        ),
    )


def read_styles(node: XmlNode, log_state: ReadLogState | None = None) -> Styles:
    styles = _read_children(
        node,
        {"w:style": read_style},
        log_state,
        skip=("w:docDefaults", "w:latentStyles"),
    )
    return Styles(doc_defaults=read_doc_defaults(node.find("w:docDefaults"), log_state), styles=styles)


_LEVEL_INDEX = Attr(w("ilvl"), 0, parse_non_negative_int)
_LEVEL_START = Attr(w("val"), 1, parse_non_negative_int)
_LEVEL_SUFFIX = _enum_val(LevelSuffixType, LevelSuffixType.TAB)
_LEVEL_RESTART = Attr(w("val"), convert=parse_non_negative_int)


def read_level(node: XmlNode, log_state: ReadLogState | None = None) -> Level:
    _note_duplicates(node, log_state)
    return Level(
        level=_read(node, _LEVEL_INDEX, log_state),
        start=_read(node.find("w:start"), _LEVEL_START, log_state),
        format=VAL.read(node.find("w:numFmt")) or "decimal",
        text=VAL.read(node.find("w:lvlText")) or "",
        jc=VAL.read(node.find("w:lvlJc")) or "left",
        paragraph_property=read_paragraph_property(node.find("w:pPr"), log_state),
        run_property=read_run_property(node.find("w:rPr"), log_state),
        suffix=_read(node.find("w:suff"), _LEVEL_SUFFIX, log_state),
        paragraph_style=VAL.read(node.find("w:pStyle")),
        level_restart=_read(node.find("w:lvlRestart"), _LEVEL_RESTART, log_state),
        is_lgl=on_off_element(node.find("w:isLgl")),
    )


_ABSTRACT_NUM_ID = Attr(w("abstractNumId"), 0, parse_non_negative_int)
_NUM_ID = Attr(w("numId"), convert=parse_non_negative_int)


def read_abstract_numbering(node: XmlNode, log_state: ReadLogState | None = None) -> AbstractNumbering:
    return AbstractNumbering(
        id=_read(node, _ABSTRACT_NUM_ID, log_state),
        levels=tuple(read_level(level, log_state) for level in node.iter_children("w:lvl")),
        style_link=VAL.read(node.find("w:styleLink")),
        num_style_link=VAL.read(node.find("w:numStyleLink")),
        multi_level_type=VAL.read(node.find("w:multiLevelType")),
    )


def read_level_override(node: XmlNode, log_state: ReadLogState | None = None) -> LevelOverride:
    return LevelOverride(
        level=_read(node, _LEVEL_INDEX, log_state),
        override_start=_read(node.find("w:startOverride"), VAL_INT, log_state),
        override_level=_optional(node.find("w:lvl"), read_level, log_state),
    )


def read_numbering(node: XmlNode, log_state: ReadLogState | None = None) -> Numbering | None:
    numbering_id = _read(node, _NUM_ID, log_state)
    if numbering_id is None:
        return None
    abstract = node.find("w:abstractNumId")
    return Numbering(
        id=numbering_id,
        abstract_num_id=_read(abstract, Attr(w("val"), 0, parse_non_negative_int), log_state),
        level_overrides=_read_children(
            node,
            {"w:lvlOverride": read_level_override},
            log_state,
            skip=("w:abstractNumId",),
        ),
    )


def read_numberings(node: XmlNode, log_state: ReadLogState | None = None) -> Numberings:
    abstract_nums = tuple(
        read_abstract_numbering(child, log_state) for child in node.iter_children("w:abstractNum")
    )
    numberings = []
    for child in node.iter_children("w:num"):
        numbering = read_numbering(child, log_state)
        if numbering is None:
            _warn(log_state, rule="dropped_child", reason="num without numId", tag=child.tag)
            continue
        numberings.append(numbering)
    return Numberings(abstract_nums=abstract_nums, numberings=tuple(numberings))


# ---------------------------------------------------------------------------
# settings and auxiliary parts
# ---------------------------------------------------------------------------

_DOC_ID_TAGS = ("w:docId", "w14:docId", "w15:docId")
_TAB_STOP = Attr(w("val"), config.DEFAULT_TAB_STOP, parse_non_negative_int)
_ZOOM_PERCENT = Attr(w("percent"), convert=parse_percent)
_ZOOM_VAL = Attr(w("val"), config.DEFAULT_ZOOM, parse_percent)
_CHARACTER_SPACING = _enum_val(CharacterSpacingValues)


def _normalize_doc_id(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip().strip("{}").strip()
    return value or None


def _pick_doc_id(nodes: list[XmlNode]) -> str | None:
    # w15 beats plain val beats w14; the last occurrence wins inside each
    for keys in (("w15:val",), w("val"), ("w14:val",)):
        for node in reversed(nodes):
            value = _normalize_doc_id(node.get(*keys))
            if value is not None:
                return value
    return None


def _read_doc_var(node: XmlNode) -> DocVar | None:
    name = node.get(*w("name"))
    value = node.get(*w("val"))
    if name is None or value is None:
        return None
    return DocVar(name, value)


def read_settings(node: XmlNode, log_state: ReadLogState | None = None) -> Settings:
    nested = []
    for container in node.iter_children("w:docVars"):
        nested.extend(container.iter_children("w:docVar"))
    doc_vars = []
    for child in nested + list(node.iter_children("w:docVar")):
        doc_var = _read_doc_var(child)
        if doc_var is None:
            _warn(log_state, rule="dropped_child", reason="docVar needs name and val", tag=child.tag)
            continue
        doc_vars.append(doc_var)
    compat = node.find("w:compat")
    line_height = node.find("w:adjustLineHeightInTable")
    spacing = node.find("w:characterSpacingControl")
    if compat is not None and line_height is None:
        line_height = compat.find("w:adjustLineHeightInTable")
    if compat is not None and spacing is None:
        spacing = compat.find("w:characterSpacingControl")
    doc_id = _pick_doc_id(list(node.iter_children(*_DOC_ID_TAGS)))
    return Settings(
        default_tab_stop=_read(node.find("w:defaultTabStop"), _TAB_STOP, log_state),
        zoom=dual_attr(node.find("w:zoom"), _ZOOM_PERCENT, _ZOOM_VAL),
        doc_id=DocId(doc_id) if doc_id is not None else None,
        doc_vars=tuple(doc_vars),
        even_and_odd_headers=on_off_element(node.find("w:evenAndOddHeaders")),
        adjust_line_height_in_table=on_off_element(line_height),
        character_spacing_control=_read(spacing, _CHARACTER_SPACING, log_state),
    )


def _parse_done(value: str | None) -> bool | None:
    if value is None:
        return False
    text = value.strip().lower()
    if text in ("1", "true"):
        return True
    if text in ("0", "false", ""):
        return False
    return None


_DONE = Attr(("w15:done", "done"), False, _parse_done)


def read_comment_extended(node: XmlNode, log_state: ReadLogState | None = None) -> CommentExtended | None:
    paragraph_id = node.get("w15:paraId", "paraId")
    if paragraph_id is None:
        return None
    return CommentExtended(
        paragraph_id=paragraph_id,
        done=_read(node, _DONE, log_state),
        parent_paragraph_id=node.get("w15:paraIdParent", "paraIdParent"),
    )


def read_comments_extended(node: XmlNode, log_state: ReadLogState | None = None) -> CommentsExtended:
    """Entries sharing a paraId collapse into the first slot, holding the last value."""
    deduped: list[CommentExtended] = []
    for comment in _read_children(node, {"w15:commentEx": read_comment_extended}, log_state):
        for index, current in enumerate(deduped):
            if current.paragraph_id == comment.paragraph_id:
                deduped[index] = comment
                break
        else:
            deduped.append(comment)
    return CommentsExtended(children=tuple(deduped))


_DIV_MARGIN = Attr(w("val"), 0, parse_non_negative_int)


def read_div(node: XmlNode, log_state: ReadLogState | None = None) -> Div:
    children = node.find("w:divsChild")
    return Div(
        id=node.get(*w("id")) or "",
        margin_left=_read(node.find("w:marLeft"), _DIV_MARGIN, log_state),
        margin_right=_read(node.find("w:marRight"), _DIV_MARGIN, log_state),
        margin_top=_read(node.find("w:marTop"), _DIV_MARGIN, log_state),
        margin_bottom=_read(node.find("w:marBottom"), _DIV_MARGIN, log_state),
        divs_child=(
            () if children is None else tuple(read_div(div, log_state) for div in children.iter_children("w:div"))
        ),
    )


def read_web_settings(node: XmlNode, log_state: ReadLogState | None = None) -> WebSettings:
    divs = node.find("w:divs")
    if divs is None:
        return WebSettings()
    return WebSettings(divs=tuple(read_div(div, log_state) for div in divs.iter_children("w:div")))


def _read_font_group(node: XmlNode | None) -> FontGroup:
    if node is None:
        return FontGroup()
    typefaces = {}
    for tag in ("a:latin", "a:ea", "a:cs"):
        child = node.find(tag)
        typefaces[tag[2:]] = (child.get("typeface") or "") if child is not None else ""
    fonts = tuple(
        FontSchemeFont(font.get("script") or "", font.get("typeface") or "")
        for font in node.iter_children("a:font")
    )
    return FontGroup(fonts=fonts, **typefaces)


def read_theme(node: XmlNode, log_state: ReadLogState | None = None) -> Theme:
    elements = node.find("a:themeElements")
    scheme = elements.find("a:fontScheme") if elements is not None else None
    if scheme is None:
        _warn(log_state, rule="default", reason="theme without font scheme", tag=node.tag)
        return Theme()
    return Theme(
        FontScheme(
            major_font=_read_font_group(scheme.find("a:majorFont")),
            minor_font=_read_font_group(scheme.find("a:minorFont")),
        )
    )


def read_custom_props(node: XmlNode, log_state: ReadLogState | None = None) -> CustomProps:
    props = CustomProps()
    for prop in node.iter_children("property"):
        name = prop.get("name")
        if not name:
            continue
        value = prop.find("vt:lpwstr")
        if value is None:
            continue
        props = props.add(name, value.text or "")
    return props


def read_rels(node: XmlNode, log_state: ReadLogState | None = None) -> Rels:
    rels = Rels()
    for rel in node.iter_children("Relationship"):
        rels = rels.add(rel.get("Type") or "", rel.get("Id") or "", rel.get("Target") or "")
    return rels


# ---------------------------------------------------------------------------
# dispatch tables, one per container; keys mirror docx_codec.variants
# ---------------------------------------------------------------------------

_MARKER_READERS: dict[str, ChildReader] = {
    "w:bookmarkStart": read_bookmark_start,
    "w:bookmarkEnd": read_bookmark_end,
    "w:commentRangeStart": read_comment_range_start,
    "w:commentRangeEnd": read_comment_range_end,
}

DELETE_CHILD_READERS: dict[str, ChildReader] = {
    "w:r": read_run,
    "w:commentRangeStart": read_comment_range_start,
    "w:commentRangeEnd": read_comment_range_end,
}

INSERT_CHILD_READERS: dict[str, ChildReader] = {**DELETE_CHILD_READERS, "w:del": read_delete}

HYPERLINK_CHILD_READERS: dict[str, ChildReader] = {
    "w:r": read_run,
    "w:ins": read_insert,
    "w:del": read_delete,
    **_MARKER_READERS,
}

PARAGRAPH_CHILD_READERS: dict[str, ChildReader] = {
    **HYPERLINK_CHILD_READERS,
    "w:hyperlink": read_hyperlink,
    "w:sdt": read_structured_data_tag,
}

SDT_CHILD_READERS: dict[str, ChildReader] = {
    "w:r": read_run,
    "w:p": read_paragraph,
    "w:tbl": read_table,
    **_MARKER_READERS,
    "w:sdt": read_structured_data_tag,
}

TABLE_CELL_CHILD_READERS: dict[str, ChildReader] = {
    "w:p": read_paragraph,
    "w:tbl": read_table,
    "w:sdt": read_structured_data_tag,
}

HEADER_FOOTER_CHILD_READERS: dict[str, ChildReader] = dict(TABLE_CELL_CHILD_READERS)

TEXT_BOX_CHILD_READERS: dict[str, ChildReader] = {
    "w:p": read_paragraph,
    "w:tbl": read_table,
}

DOCUMENT_CHILD_READERS: dict[str, ChildReader] = {
    "w:p": read_paragraph,
    "w:tbl": read_table,
    **_MARKER_READERS,
    "w:sdt": read_structured_data_tag,
}

CHILD_READERS = {
    "run": RUN_CHILD_READERS,
    "paragraph": PARAGRAPH_CHILD_READERS,
    "insert": INSERT_CHILD_READERS,
    "delete": DELETE_CHILD_READERS,
    "hyperlink": HYPERLINK_CHILD_READERS,
    "structured_data_tag": SDT_CHILD_READERS,
    "table_cell": TABLE_CELL_CHILD_READERS,
    "header_footer": HEADER_FOOTER_CHILD_READERS,
    "text_box": TEXT_BOX_CHILD_READERS,
    "document": DOCUMENT_CHILD_READERS,
}


# ---------------------------------------------------------------------------
# part level entry points
# ---------------------------------------------------------------------------


def _load(data: bytes | str | Path | None, part: str) -> bytes | str | None:
    if isinstance(data, Path):
        if not data.is_file():
            raise MissingPartError(str(data))
        return data.read_bytes()
    return data


def _count_elements(root: XmlNode) -> int:
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.children)
    return count


class DocxReader:
    """Reads individual markup parts into the typed model.

    Every part read keeps its own :class:`ReadLogState`. Field level recoveries
    become warnings on it; only a missing or malformed part raises.
    """

    def __init__(self, write_log: bool = False) -> None:
        self.write_log = write_log
        self._last_log_state: ReadLogState | None = None

    def last_log_state(self) -> ReadLogState | None:
        return self._last_log_state

    def _read_part(
        self,
        data: bytes | str | Path | None,
        part: str,
        root_tag: str,
        read: ChildReader,
    ) -> Any:
        started = perf_counter()
        log_state = ReadLogState(part=part, start_time=datetime.now())
        try:
            root = parse_node(_load(data, part), part=part)
            if root.tag != root_tag:
                raise MalformedMarkupError(f"{part}: expected <{root_tag}> root, found <{root.tag}>")
            log_state.element_count = _count_elements(root)
            result = read(root, log_state)
        except Exception as exc:
            log_state.error = str(exc)
            log_state.elapsed_sec = perf_counter() - started
            self._finish(log_state)
            raise
        log_state.elapsed_sec = perf_counter() - started
        self._finish(log_state)
        return result

    def _finish(self, log_state: ReadLogState) -> None:
        if self.write_log:
            _write_log(log_state)
        self._last_log_state = log_state

    def read_document_xml(self, data: bytes | str | Path | None) -> Document:
        return self._read_part(data, "document", "w:document", read_document)

    def read_header_xml(self, data: bytes | str | Path | None) -> Header:
        return self._read_part(data, "header", "w:hdr", read_header)

    def read_footer_xml(self, data: bytes | str | Path | None) -> Footer:
        return self._read_part(data, "footer", "w:ftr", read_footer)

    def read_styles_xml(self, data: bytes | str | Path | None) -> Styles:
        return self._read_part(data, "styles", "w:styles", read_styles)

    def read_numbering_xml(self, data: bytes | str | Path | None) -> Numberings:
        return self._read_part(data, "numbering", "w:numbering", read_numberings)

    def read_settings_xml(self, data: bytes | str | Path | None) -> Settings:
        return self._read_part(data, "settings", "w:settings", read_settings)

    def read_comments_extended_xml(self, data: bytes | str | Path | None) -> CommentsExtended:
        return self._read_part(data, "commentsExtended", "w15:commentsEx", read_comments_extended)

    def read_web_settings_xml(self, data: bytes | str | Path | None) -> WebSettings:
        return self._read_part(data, "webSettings", "w:webSettings", read_web_settings)

    def read_theme_xml(self, data: bytes | str | Path | None) -> Theme:
        return self._read_part(data, "theme", "a:theme", read_theme)

    def read_custom_props_xml(self, data: bytes | str | Path | None) -> CustomProps:
        return self._read_part(data, "custom", "Properties", read_custom_props)

    def read_rels_xml(self, data: bytes | str | Path | None) -> Rels:
        return self._read_part(data, "rels", "Relationships", read_rels)


def read_document_xml(data: bytes | str | Path | None, write_log: bool = False) -> Document:
    return DocxReader(write_log).read_document_xml(data)


def read_header_xml(data: bytes | str | Path | None, write_log: bool = False) -> Header:
    return DocxReader(write_log).read_header_xml(data)


def read_footer_xml(data: bytes | str | Path | None, write_log: bool = False) -> Footer:
    return DocxReader(write_log).read_footer_xml(data)


def read_styles_xml(data: bytes | str | Path | None, write_log: bool = False) -> Styles:
    return DocxReader(write_log).read_styles_xml(data)


def read_numbering_xml(data: bytes | str | Path | None, write_log: bool = False) -> Numberings:
    return DocxReader(write_log).read_numbering_xml(data)


def read_settings_xml(data: bytes | str | Path | None, write_log: bool = False) -> Settings:
    return DocxReader(write_log).read_settings_xml(data)


def read_comments_extended_xml(data: bytes | str | Path | None, write_log: bool = False) -> CommentsExtended:
    return DocxReader(write_log).read_comments_extended_xml(data)


def read_web_settings_xml(data: bytes | str | Path | None, write_log: bool = False) -> WebSettings:
    return DocxReader(write_log).read_web_settings_xml(data)


def read_theme_xml(data: bytes | str | Path | None, write_log: bool = False) -> Theme:
    return DocxReader(write_log).read_theme_xml(data)


def read_custom_props_xml(data: bytes | str | Path | None, write_log: bool = False) -> CustomProps:
    return DocxReader(write_log).read_custom_props_xml(data)


def read_rels_xml(data: bytes | str | Path | None, write_log: bool = False) -> Rels:
    return DocxReader(write_log).read_rels_xml(data)
