from __future__ import annotations

from dataclasses import dataclass, replace

from docx_codec import config
from docx_codec.types import CharacterSpacingValues
from docx_codec.writer import PART_NAMESPACES, BuildXML, XMLBuilder

COMPAT_URI = "http://schemas.microsoft.com/office/word"

COMPAT_FLAGS = (
    "w:spaceForUL",
    "w:balanceSingleByteDoubleByteWidth",
    "w:doNotLeaveBackslashAlone",
    "w:ulTrailSpace",
    "w:doNotExpandShiftReturn",
)

COMPAT_SETTINGS = (
    ("compatibilityMode", "15"),
    ("overrideTableStyleFontSizeAndJustification", "1"),
    ("enableOpenTypeFeatures", "1"),
    ("doNotFlipMirrorIndents", "1"),
    ("differentiateMultirowTableHeaders", "1"),
    ("useWord2013TrackBottomHyphenation", "0"),
)


@dataclass(frozen=True)
class DocVar(BuildXML):
    name: str
    val: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w:docVar", (("w:name", self.name), ("w:val", self.val)))


@dataclass(frozen=True)
class DocId(BuildXML):
    """Document GUID, stored without braces and written in the w15 form."""

    id: str

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty("w15:docId", (("w15:val", f"{{{self.id}}}"),))


@dataclass(frozen=True)
class Settings(BuildXML):
    default_tab_stop: int = config.DEFAULT_TAB_STOP
    zoom: int = config.DEFAULT_ZOOM
    doc_id: DocId | None = None
    doc_vars: tuple[DocVar, ...] = ()
    even_and_odd_headers: bool = False
    adjust_line_height_in_table: bool = False
    character_spacing_control: CharacterSpacingValues | None = None

    def with_doc_id(self, doc_id: str) -> Settings:
        return replace(self, doc_id=DocId(doc_id))

    def with_default_tab_stop(self, tab_stop: int) -> Settings:
        return replace(self, default_tab_stop=tab_stop)

    def with_zoom(self, percent: int) -> Settings:
        return replace(self, zoom=percent)

    def add_doc_var(self, name: str, val: str) -> Settings:
        return replace(self, doc_vars=self.doc_vars + (DocVar(name, val),))

    def with_even_and_odd_headers(self) -> Settings:
        return replace(self, even_and_odd_headers=True)

    def with_adjust_line_height_in_table(self) -> Settings:
        return replace(self, adjust_line_height_in_table=True)

    def with_character_spacing_control(self, value: CharacterSpacingValues) -> Settings:
        return replace(self, character_spacing_control=value)

    def _compat(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:compat")
        for tag in COMPAT_FLAGS:
            b.empty(tag)
        if self.character_spacing_control is not None:
            b.val("w:characterSpacingControl", self.character_spacing_control)
        b.apply_if(self.adjust_line_height_in_table, lambda x: x.empty("w:adjustLineHeightInTable"))
        b.empty("w:useFELayout")
        for name, value in COMPAT_SETTINGS:
            b.empty(
                "w:compatSetting",
                (("w:name", name), ("w:uri", COMPAT_URI), ("w:val", value)),
            )
        return b.close()

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.declaration()
        b.open("w:settings", PART_NAMESPACES)
        b.val("w:defaultTabStop", self.default_tab_stop)
        b.empty("w:zoom", (("w:percent", self.zoom),))
        self._compat(b)
        b.add_optional_child(self.doc_id)
        if self.doc_vars:
            b.open("w:docVars").add_children(self.doc_vars).close()
        b.apply_if(self.even_and_odd_headers, lambda x: x.empty("w:evenAndOddHeaders"))
        return b.close()
