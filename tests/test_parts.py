import unittest

from docx_codec import config
from docx_codec.extras import CommentExtended, CommentsExtended, CustomProps, Rels
from docx_codec.numbering import AbstractNumbering, Level, LevelOverride, Numbering, Numberings
from docx_codec.paragraph import Indent
from docx_codec.run import RunFonts
from docx_codec.settings import Settings
from docx_codec.styles import DocDefaults, Style, Styles
from docx_codec.types import CharacterSpacingValues, LevelSuffixType, StyleType
from docx_codec.writer import PART_NAMESPACES, to_xml

PART_ROOT_ATTRS = "".join(f' {key}="{value}"' for key, value in PART_NAMESPACES)

COMPAT = (
    "<w:compat><w:spaceForUL></w:spaceForUL>"
    "<w:balanceSingleByteDoubleByteWidth></w:balanceSingleByteDoubleByteWidth>"
    "<w:doNotLeaveBackslashAlone></w:doNotLeaveBackslashAlone><w:ulTrailSpace></w:ulTrailSpace>"
    "<w:doNotExpandShiftReturn></w:doNotExpandShiftReturn>"
    "{extra}<w:useFELayout></w:useFELayout>"
    '<w:compatSetting w:name="compatibilityMode" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="15"></w:compatSetting>'
    '<w:compatSetting w:name="overrideTableStyleFontSizeAndJustification" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="1"></w:compatSetting>'
    '<w:compatSetting w:name="enableOpenTypeFeatures" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="1"></w:compatSetting>'
    '<w:compatSetting w:name="doNotFlipMirrorIndents" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="1"></w:compatSetting>'
    '<w:compatSetting w:name="differentiateMultirowTableHeaders" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="1"></w:compatSetting>'
    '<w:compatSetting w:name="useWord2013TrackBottomHyphenation" '
    'w:uri="http://schemas.microsoft.com/office/word" w:val="0"></w:compatSetting>'
    "</w:compat>"
)


class StyleWriterTests(unittest.TestCase):
    def test_paragraph_style(self) -> None:
        style = Style("Heading").with_name("Heading1")
        self.assertEqual(
            to_xml(style),
            '<w:style w:type="paragraph" w:styleId="Heading"><w:name w:val="Heading1"></w:name>'
            "<w:rPr></w:rPr><w:pPr><w:rPr></w:rPr></w:pPr><w:qFormat></w:qFormat></w:style>",
        )

    def test_links_and_based_on(self) -> None:
        style = (
            Style("Heading1Char", StyleType.CHARACTER)
            .with_name("Heading 1 Char")
            .size(32)
            .with_based_on("DefaultParagraphFont")
            .with_link("Heading1")
            .with_next("Normal")
        )
        self.assertEqual(
            to_xml(style),
            '<w:style w:type="character" w:styleId="Heading1Char"><w:name w:val="Heading 1 Char"></w:name>'
            '<w:rPr><w:sz w:val="32"></w:sz><w:szCs w:val="32"></w:szCs></w:rPr><w:pPr><w:rPr></w:rPr></w:pPr>'
            '<w:next w:val="Normal"></w:next><w:link w:val="Heading1"></w:link><w:qFormat></w:qFormat>'
            '<w:basedOn w:val="DefaultParagraphFont"></w:basedOn></w:style>',
        )

    def test_table_style_writes_table_blocks(self) -> None:
        xml = to_xml(Style("Grid", StyleType.TABLE))
        self.assertIn("</w:pPr><w:tcPr></w:tcPr><w:tblPr>", xml)
        xml = to_xml(Style("Normal").indent(Indent(first_line=420)))
        self.assertNotIn("w:tblPr", xml)
        self.assertIn('<w:ind w:firstLine="420"></w:ind>', xml)

    def test_doc_defaults(self) -> None:
        self.assertEqual(
            to_xml(DocDefaults()),
            "<w:docDefaults><w:rPrDefault><w:rPr></w:rPr></w:rPrDefault>"
            "<w:pPrDefault><w:pPr><w:rPr></w:rPr></w:pPr></w:pPrDefault></w:docDefaults>",
        )

    def test_styles_part(self) -> None:
        styles = Styles().default_size(21).default_fonts(RunFonts(ascii="Arial")).add_style(Style("Normal"))
        xml = to_xml(styles)
        self.assertTrue(xml.startswith(config.XML_DECLARATION + "<w:styles" + PART_ROOT_ATTRS + ">"))
        self.assertIn('<w:rPr><w:rFonts w:ascii="Arial"></w:rFonts><w:sz w:val="21"></w:sz><w:szCs w:val="21"></w:szCs></w:rPr>', xml)
        self.assertIsNotNone(styles.find_style("Normal"))
        self.assertIsNone(styles.find_style("Missing"))


class NumberingWriterTests(unittest.TestCase):
    def test_numbering(self) -> None:
        self.assertEqual(
            to_xml(Numbering(0, 2)),
            '<w:num w:numId="0"><w:abstractNumId w:val="2"></w:abstractNumId></w:num>',
        )

    def test_level(self) -> None:
        level = Level(0, 1, "decimal", "%1.", "left")
        self.assertEqual(
            to_xml(level),
            '<w:lvl w:ilvl="0"><w:start w:val="1"></w:start><w:numFmt w:val="decimal"></w:numFmt>'
            '<w:lvlText w:val="%1."></w:lvlText><w:lvlJc w:val="left"></w:lvlJc><w:pPr><w:rPr></w:rPr></w:pPr>'
            "<w:rPr></w:rPr></w:lvl>",
        )

    def test_level_optional_fields(self) -> None:
        level = (
            Level(1, 1, "lowerLetter", "%2)", "left")
            .with_level_restart(0)
            .with_paragraph_style("ListHeading")
            .legal()
            .with_suffix(LevelSuffixType.SPACE)
        )
        self.assertIn(
            '<w:numFmt w:val="lowerLetter"></w:numFmt><w:lvlRestart w:val="0"></w:lvlRestart><w:pStyle w:val="ListHeading"></w:pStyle>'
            '<w:isLgl></w:isLgl><w:suff w:val="space"></w:suff><w:lvlText w:val="%2)"></w:lvlText>',
            to_xml(level),
        )

    def test_abstract_numbering(self) -> None:
        abstract = AbstractNumbering(1).with_multi_level_type("hybridMultilevel").with_style_link("List")
        self.assertEqual(
            to_xml(abstract),
            '<w:abstractNum w:abstractNumId="1"><w:multiLevelType w:val="hybridMultilevel"></w:multiLevelType>'
            '<w:styleLink w:val="List"></w:styleLink></w:abstractNum>',
        )

    def test_override(self) -> None:
        self.assertEqual(
            to_xml(LevelOverride(0).start(3)),
            '<w:lvlOverride w:ilvl="0"><w:startOverride w:val="3"></w:startOverride></w:lvlOverride>',
        )
        numbering = Numbering(2, 1).overrides([LevelOverride(0).start(1)]).add_override(LevelOverride(1))
        self.assertEqual(len(numbering.level_overrides), 2)

    def test_numberings_part(self) -> None:
        numberings = Numberings().add_abstract_numbering(AbstractNumbering(1)).add_numbering(Numbering(1, 1))
        xml = to_xml(numberings)
        self.assertTrue(xml.startswith(config.XML_DECLARATION + "<w:numbering" + PART_ROOT_ATTRS + ">"))
        self.assertLess(xml.index("w:abstractNum "), xml.index("<w:num "))
        self.assertEqual(numberings.find_numbering(1).abstract_num_id, 1)
        self.assertIsNotNone(numberings.find_abstract(1))
        self.assertIsNone(numberings.find_numbering(9))


class SettingsWriterTests(unittest.TestCase):
    def test_default(self) -> None:
        self.assertEqual(
            to_xml(Settings()),
            config.XML_DECLARATION
            + "<w:settings"
            + PART_ROOT_ATTRS
            + '><w:defaultTabStop w:val="840"></w:defaultTabStop><w:zoom w:percent="100"></w:zoom>'
            + COMPAT.format(extra="")
            + "</w:settings>",
        )

    def test_all_fields(self) -> None:
        settings = (
            Settings()
            .with_default_tab_stop(420)
            .with_zoom(150)
            .with_doc_id("A1B2")
            .add_doc_var("k", "v")
            .with_even_and_odd_headers()
            .with_adjust_line_height_in_table()
            .with_character_spacing_control(CharacterSpacingValues.DO_NOT_COMPRESS)
        )
        self.assertEqual(
            to_xml(settings),
            config.XML_DECLARATION
            + "<w:settings"
            + PART_ROOT_ATTRS
            + '><w:defaultTabStop w:val="420"></w:defaultTabStop><w:zoom w:percent="150"></w:zoom>'
            + COMPAT.format(
                extra='<w:characterSpacingControl w:val="doNotCompress"></w:characterSpacingControl><w:adjustLineHeightInTable></w:adjustLineHeightInTable>'
            )
            + '<w15:docId w15:val="{A1B2}"></w15:docId>'
            + '<w:docVars><w:docVar w:name="k" w:val="v"></w:docVar></w:docVars>'
            + "<w:evenAndOddHeaders></w:evenAndOddHeaders></w:settings>",
        )


class ExtrasTests(unittest.TestCase):
    def test_comment_extended(self) -> None:
        self.assertEqual(
            to_xml(CommentExtended("00000001")),
            '<w15:commentEx w15:paraId="00000001" w15:done="0"></w15:commentEx>',
        )
        comment = CommentExtended("A").mark_done().with_parent("B")
        self.assertEqual(
            to_xml(comment),
            '<w15:commentEx w15:paraId="A" w15:paraIdParent="B" w15:done="1"></w15:commentEx>',
        )

    def test_comments_extended_part(self) -> None:
        xml = to_xml(CommentsExtended().add(CommentExtended("A")))
        self.assertTrue(xml.startswith(config.XML_DECLARATION + '<w15:commentsEx xmlns:w="'))
        self.assertTrue(xml.endswith('<w15:commentEx w15:paraId="A" w15:done="0"></w15:commentEx></w15:commentsEx>'))

    def test_custom_props_lookup(self) -> None:
        props = CustomProps().add("Client", "ACME").add("Client", "Other")
        self.assertEqual(props.get("Client"), "ACME")
        self.assertIsNone(props.get("Missing"))

    def test_rels_lookup(self) -> None:
        rels = Rels().add("http://x/styles", "rId1", "styles.xml")
        self.assertEqual(rels.find_target("rId1"), "styles.xml")
        self.assertIsNone(rels.find_target("rId2"))


if __name__ == "__main__":
    unittest.main()
