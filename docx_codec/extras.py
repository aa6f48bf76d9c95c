"""Auxiliary parts read alongside the main document.

Comments-extended is written as well as read. Web settings, theme fonts,
custom properties and relationships are reader-only: the packaging layer
produces those parts itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from docx_codec.writer import BuildXML, XMLBuilder

W15_NAMESPACES = (
    ("xmlns:w", "http://schemas.openxmlformats.org/wordprocessingml/2006/main"),
    ("xmlns:w15", "http://schemas.microsoft.com/office/word/2012/wordml"),
    ("xmlns:mc", "http://schemas.openxmlformats.org/markup-compatibility/2006"),
    ("mc:Ignorable", "w15"),
)


@dataclass(frozen=True)
class CommentExtended(BuildXML):
    paragraph_id: str
    done: bool = False
    parent_paragraph_id: str | None = None

    def mark_done(self) -> CommentExtended:
        return replace(self, done=True)

    def with_parent(self, paragraph_id: str) -> CommentExtended:
        return replace(self, parent_paragraph_id=paragraph_id)

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        return b.empty(
            "w15:commentEx",
            (
                ("w15:paraId", self.paragraph_id),
                ("w15:paraIdParent", self.parent_paragraph_id),
                ("w15:done", "1" if self.done else "0"),
            ),
        )


@dataclass(frozen=True)
class CommentsExtended(BuildXML):
    children: tuple[CommentExtended, ...] = ()

    def add(self, comment: CommentExtended) -> CommentsExtended:
        return replace(self, children=self.children + (comment,))

    def build_to(self, b: XMLBuilder) -> XMLBuilder:
        b.declaration()
        b.open("w15:commentsEx", W15_NAMESPACES)
        b.add_children(self.children)
        return b.close()


@dataclass(frozen=True)
class Div:
    id: str = ""
    margin_left: int = 0
    margin_right: int = 0
    margin_top: int = 0
    margin_bottom: int = 0
    divs_child: tuple[Div, ...] = ()


@dataclass(frozen=True)
class WebSettings:
    divs: tuple[Div, ...] = ()


@dataclass(frozen=True)
class FontSchemeFont:
    script: str
    typeface: str


@dataclass(frozen=True)
class FontGroup:
    latin: str = ""
    ea: str = ""
    cs: str = ""
    fonts: tuple[FontSchemeFont, ...] = ()


@dataclass(frozen=True)
class FontScheme:
    major_font: FontGroup = field(default_factory=FontGroup)
    minor_font: FontGroup = field(default_factory=FontGroup)


@dataclass(frozen=True)
class Theme:
    font_scheme: FontScheme = field(default_factory=FontScheme)


@dataclass(frozen=True)
class CustomProps:
    properties: tuple[tuple[str, str], ...] = ()

    def add(self, name: str, value: str) -> CustomProps:
        return replace(self, properties=self.properties + ((name, value),))

    def get(self, name: str) -> str | None:
        for key, value in self.properties:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class Rels:
    """``(type, id, target)`` triples in document order."""

    rels: tuple[tuple[str, str, str], ...] = ()

    def add(self, rel_type: str, rid: str, target: str) -> Rels:
        return replace(self, rels=self.rels + ((rel_type, rid, target),))

    def find_target(self, rid: str) -> str | None:
        for _, key, target in self.rels:
            if key == rid:
                return target
        return None
