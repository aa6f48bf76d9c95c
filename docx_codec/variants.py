"""Closed child sets per container.

Each table maps the element tag of a legal child to the model class it
becomes. The reader dispatches on the same tags, and every class listed here
writes itself through ``build_to``. Adding a child kind to a builder means
adding it here and to the matching reader table.
"""

from __future__ import annotations

from docx_codec.document import Section
from docx_codec.paragraph import (
    BookmarkEnd,
    BookmarkStart,
    CommentRangeEnd,
    CommentRangeStart,
    Delete,
    Hyperlink,
    Insert,
    Paragraph,
)
from docx_codec.run import (
    Break,
    DeleteInstrText,
    DeleteText,
    Drawing,
    FieldChar,
    FootnoteReference,
    InstrText,
    Pict,
    PositionalTab,
    Run,
    Shading,
    Sym,
    Tab,
    Text,
)
from docx_codec.structured import StructuredDataTag
from docx_codec.table import Table

_MARKERS = {
    "w:bookmarkStart": BookmarkStart,
    "w:bookmarkEnd": BookmarkEnd,
    "w:commentRangeStart": CommentRangeStart,
    "w:commentRangeEnd": CommentRangeEnd,
}

RUN_CHILDREN = {
    "w:t": Text,
    "w:delText": DeleteText,
    "w:sym": Sym,
    "w:tab": Tab,
    "w:ptab": PositionalTab,
    "w:br": Break,
    "w:drawing": Drawing,
    "w:pict": Pict,
    "w:fldChar": FieldChar,
    "w:instrText": InstrText,
    "w:delInstrText": DeleteInstrText,
    "w:footnoteReference": FootnoteReference,
    "w:shd": Shading,
}

DELETE_CHILDREN = {
    "w:r": Run,
    "w:commentRangeStart": CommentRangeStart,
    "w:commentRangeEnd": CommentRangeEnd,
}

INSERT_CHILDREN = {**DELETE_CHILDREN, "w:del": Delete}

HYPERLINK_CHILDREN = {
    "w:r": Run,
    "w:ins": Insert,
    "w:del": Delete,
    **_MARKERS,
}

PARAGRAPH_CHILDREN = {
    **HYPERLINK_CHILDREN,
    "w:hyperlink": Hyperlink,
    "w:sdt": StructuredDataTag,
}

STRUCTURED_DATA_TAG_CHILDREN = {
    "w:r": Run,
    "w:p": Paragraph,
    "w:tbl": Table,
    **_MARKERS,
    "w:sdt": StructuredDataTag,
}

TABLE_CELL_CHILDREN = {
    "w:p": Paragraph,
    "w:tbl": Table,
    "w:sdt": StructuredDataTag,
}

HEADER_FOOTER_CHILDREN = dict(TABLE_CELL_CHILDREN)

TEXT_BOX_CHILDREN = {
    "w:p": Paragraph,
    "w:tbl": Table,
}

DOCUMENT_CHILDREN = {
    "w:p": Paragraph,
    "w:tbl": Table,
    **_MARKERS,
    "w:sdt": StructuredDataTag,
}

# A paragraph carrying a sectPr closes a Section instead of staying a paragraph.
DOCUMENT_DERIVED_CHILDREN = (Section,)

CONTAINERS = {
    "run": RUN_CHILDREN,
    "paragraph": PARAGRAPH_CHILDREN,
    "insert": INSERT_CHILDREN,
    "delete": DELETE_CHILDREN,
    "hyperlink": HYPERLINK_CHILDREN,
    "structured_data_tag": STRUCTURED_DATA_TAG_CHILDREN,
    "table_cell": TABLE_CELL_CHILDREN,
    "header_footer": HEADER_FOOTER_CHILDREN,
    "text_box": TEXT_BOX_CHILDREN,
    "document": DOCUMENT_CHILDREN,
}


def tag_for(child: object, table: dict[str, type]) -> str | None:
    """Write direction: the tag a child is emitted under inside one container."""
    for tag, cls in table.items():
        if type(child) is cls:
            return tag
    return None


def accepts(child: object, table: dict[str, type]) -> bool:
    return tag_for(child, table) is not None
