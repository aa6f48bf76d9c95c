from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec.paragraph import Indent, ParagraphProperty
from docx_codec.run import RunProperty
from docx_codec.types import LevelSuffixType
from docx_codec.writer import PART_NAMESPACES, BuildXML, XMLBuilder


@dataclass(frozen=True)
class Level(BuildXML):
    level: int = 0
    start: int = 1
    format: str = "decimal"
    text: str = ""
    jc: str = "left"
    paragraph_property: ParagraphProperty = field(default_factory=ParagraphProperty)
    run_property: RunProperty = field(default_factory=RunProperty)
    suffix: LevelSuffixType = LevelSuffixType.TAB
    paragraph_style: str | None = None
    level_restart: int | None = None
    is_lgl: bool = False

    def indent(self, indent: Indent) -> Level:
        return replace(self, paragraph_property=replace(self.paragraph_property, indent=indent))

    def with_suffix(self, suffix: LevelSuffixType) -> Level:
        return replace(self, suffix=suffix)

    def with_paragraph_style(self, style_id: str) -> Level:
        return replace(self, paragraph_style=style_id)

    def with_level_restart(self, level: int) -> Level:
        return replace(self, level_restart=level)

    def legal(self) -> Level:
        return replace(self, is_lgl=True)

    def size(self, half_points: int) -> Level:
        return replace(self, run_property=self.run_property.size(half_points))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:lvl", (("w:ilvl", self.level),))
        b.val("w:start", self.start)
        b.val("w:numFmt", self.format)
        if self.level_restart is not None:
            b.val("w:lvlRestart", self.level_restart)
        if self.paragraph_style is not None:
            b.val("w:pStyle", self.paragraph_style)
        b.apply_if(self.is_lgl, lambda x: x.empty("w:isLgl"))
        if self.suffix != LevelSuffixType.TAB:
            b.val("w:suff", self.suffix)
        b.val("w:lvlText", self.text)
        b.val("w:lvlJc", self.jc)
        b.add_child(self.paragraph_property)
        b.add_child(self.run_property)
        return b.close()


@dataclass(frozen=True)
class AbstractNumbering(BuildXML):
    id: int
    levels: tuple[Level, ...] = ()
    style_link: str | None = None
    num_style_link: str | None = None
    multi_level_type: str | None = None

    def add_level(self, level: Level) -> AbstractNumbering:
        return replace(self, levels=self.levels + (level,))

    def with_style_link(self, link: str) -> AbstractNumbering:
        return replace(self, style_link=link)

    def with_num_style_link(self, link: str) -> AbstractNumbering:
        return replace(self, num_style_link=link)

    def with_multi_level_type(self, value: str) -> AbstractNumbering:
        return replace(self, multi_level_type=value)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:abstractNum", (("w:abstractNumId", self.id),))
        if self.multi_level_type is not None:
            b.val("w:multiLevelType", self.multi_level_type)
        if self.style_link is not None:
            b.val("w:styleLink", self.style_link)
        if self.num_style_link is not None:
            b.val("w:numStyleLink", self.num_style_link)
        b.add_children(self.levels)
        return b.close()


@dataclass(frozen=True)
class LevelOverride(BuildXML):
    """Per-instance override of one level: a restart value, a whole level, or both."""

    level: int
    override_start: int | None = None
    override_level: Level | None = None

    def start(self, value: int) -> LevelOverride:
        return replace(self, override_start=value)

    def level_definition(self, level: Level) -> LevelOverride:
        return replace(self, override_level=level)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:lvlOverride", (("w:ilvl", self.level),))
        if self.override_start is not None:
            b.val("w:startOverride", self.override_start)
        b.add_optional_child(self.override_level)
        return b.close()


@dataclass(frozen=True)
class Numbering(BuildXML):
    id: int
    abstract_num_id: int
    level_overrides: tuple[LevelOverride, ...] = ()

    def overrides(self, overrides: tuple[LevelOverride, ...] | list[LevelOverride]) -> Numbering:
        return replace(self, level_overrides=tuple(overrides))

    def add_override(self, override: LevelOverride) -> Numbering:
        return replace(self, level_overrides=self.level_overrides + (override,))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.open("w:num", (("w:numId", self.id),))
        b.val("w:abstractNumId", self.abstract_num_id)
        b.add_children(self.level_overrides)
        return b.close()


@dataclass(frozen=True)
class Numberings(BuildXML):
    abstract_nums: tuple[AbstractNumbering, ...] = ()
    numberings: tuple[Numbering, ...] = ()

    def add_abstract_numbering(self, abstract_num: AbstractNumbering) -> Numberings:
        return replace(self, abstract_nums=self.abstract_nums + (abstract_num,))

    def add_numbering(self, numbering: Numbering) -> Numberings:
        return replace(self, numberings=self.numberings + (numbering,))

    def find_numbering(self, numbering_id: int) -> Numbering | None:
        for numbering in self.numberings:
            if numbering.id == numbering_id:
                return numbering
        return None

    def find_abstract(self, abstract_id: int) -> AbstractNumbering | None:
        for abstract_num in self.abstract_nums:
            if abstract_num.id == abstract_id:
                return abstract_num
        return None

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.declaration()
        b.open("w:numbering", PART_NAMESPACES)
        b.add_children(self.abstract_nums)
        b.add_children(self.numberings)
        return b.close()
