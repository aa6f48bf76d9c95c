from __future__ import annotations

from enum import Enum


class AlignmentType(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTH = "both"
    JUSTIFIED = "justified"
    DISTRIBUTE = "distribute"
    START = "start"
    END = "end"
    NUM_TAB = "numTab"


class LineSpacingType(str, Enum):
    AUTO = "auto"
    EXACT = "exact"
    AT_LEAST = "atLeast"


class TextAlignmentType(str, Enum):
    AUTO = "auto"
    BASELINE = "baseline"
    BOTTOM = "bottom"
    CENTER = "center"
    TOP = "top"


class BreakType(str, Enum):
    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class FieldCharType(str, Enum):
    BEGIN = "begin"
    SEPARATE = "separate"
    END = "end"
    UNSUPPORTED = "unsupported"


class PositionalTabAlignmentType(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PositionalTabRelativeTo(str, Enum):
    MARGIN = "margin"
    INDENT = "indent"


class TabLeaderType(str, Enum):
    NONE = "none"
    DOT = "dot"
    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"
    HEAVY = "heavy"
    MIDDLE_DOT = "middleDot"


class ShdType(str, Enum):
    NIL = "nil"
    CLEAR = "clear"
    SOLID = "solid"
    HORZ_STRIPE = "horzStripe"
    VERT_STRIPE = "vertStripe"
    REVERSE_DIAG_STRIPE = "reverseDiagStripe"
    DIAG_STRIPE = "diagStripe"
    HORZ_CROSS = "horzCross"
    DIAG_CROSS = "diagCross"
    PCT10 = "pct10"
    PCT20 = "pct20"
    PCT25 = "pct25"
    PCT50 = "pct50"


class BorderType(str, Enum):
    NIL = "nil"
    NONE = "none"
    SINGLE = "single"
    THICK = "thick"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOT_DASH = "dotDash"
    DOT_DOT_DASH = "dotDotDash"
    TRIPLE = "triple"
    WAVE = "wave"


class WidthType(str, Enum):
    DXA = "dxa"
    AUTO = "auto"
    PCT = "pct"
    NIL = "nil"


class VMergeType(str, Enum):
    RESTART = "restart"
    CONTINUE = "continue"


class VAlignType(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    BOTH = "both"


class TextDirectionType(str, Enum):
    LR_TB = "lrTb"
    TB_RL = "tbRl"
    BT_LR = "btLr"
    LR_TB_V = "lrTbV"
    TB_RL_V = "tbRlV"
    TB_LR_V = "tbLrV"


class HeightRule(str, Enum):
    AUTO = "auto"
    AT_LEAST = "atLeast"
    EXACT = "exact"


class TableAlignmentType(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TableLayoutType(str, Enum):
    FIXED = "fixed"
    AUTOFIT = "autofit"


class SectionType(str, Enum):
    NEXT_PAGE = "nextPage"
    NEXT_COLUMN = "nextColumn"
    CONTINUOUS = "continuous"
    EVEN_PAGE = "evenPage"
    ODD_PAGE = "oddPage"


class DocGridType(str, Enum):
    DEFAULT = "default"
    LINES = "lines"
    LINES_AND_CHARS = "linesAndChars"
    SNAP_TO_CHARS = "snapToChars"


class PageOrientationType(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class StyleType(str, Enum):
    PARAGRAPH = "paragraph"
    CHARACTER = "character"
    NUMBERING = "numbering"
    TABLE = "table"


class LevelSuffixType(str, Enum):
    TAB = "tab"
    SPACE = "space"
    NOTHING = "nothing"


class CharacterSpacingValues(str, Enum):
    DO_NOT_COMPRESS = "doNotCompress"
    COMPRESS_PUNCTUATION = "compressPunctuation"
    COMPRESS_PUNCTUATION_AND_JAPANESE_KANA = "compressPunctuationAndJapaneseKana"


class DrawingPositionType(str, Enum):
    INLINE = "inline"
    ANCHOR = "anchor"


class RelativeFromHType(str, Enum):
    CHARACTER = "character"
    COLUMN = "column"
    INSIDE_MARGIN = "insideMargin"
    LEFT_MARGIN = "leftMargin"
    MARGIN = "margin"
    OUTSIDE_MARGIN = "outsideMargin"
    PAGE = "page"
    RIGHT_MARGIN = "rightMargin"


class RelativeFromVType(str, Enum):
    BOTTOM_MARGIN = "bottomMargin"
    INSIDE_MARGIN = "insideMargin"
    LINE = "line"
    MARGIN = "margin"
    OUTSIDE_MARGIN = "outsideMargin"
    PAGE = "page"
    PARAGRAPH = "paragraph"
    TOP_MARGIN = "topMargin"


class PicAlign(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"


class HeaderFooterType(str, Enum):
    DEFAULT = "default"
    FIRST = "first"
    EVEN = "even"
