import unittest

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
    Paragraph,
)
from docx_codec.run import Run
from docx_codec.types import AlignmentType, LineSpacingType, TextAlignmentType
from docx_codec.writer import BuildContext, XMLBuilder, to_xml


class ParagraphWriterTests(unittest.TestCase):
    def test_paragraph_with_run(self) -> None:
        paragraph = Paragraph().with_id("00000001").add_run(Run().add_text("Hello"))
        self.assertEqual(
            to_xml(paragraph),
            '<w:p w14:paraId="00000001"><w:pPr><w:rPr></w:rPr></w:pPr>'
            '<w:r><w:rPr></w:rPr><w:t xml:space="preserve">Hello</w:t></w:r></w:p>',
        )

    def test_ids_come_from_shared_context(self) -> None:
        with XMLBuilder(context=BuildContext()) as b:
            b.open("w:body")
            b.add_children((Paragraph(), Paragraph().with_id("ABCDEF01"), Paragraph()))
            b.close()
        xml = b.getvalue().decode("utf-8")
        self.assertIn('w14:paraId="00000001"', xml)
        self.assertIn('w14:paraId="ABCDEF01"', xml)
        self.assertIn('w14:paraId="00000002"', xml)

    def test_numbering_and_alignment(self) -> None:
        paragraph = Paragraph().with_id("X").align(AlignmentType.CENTER).numbering(2, 0)
        self.assertTrue(paragraph.has_numbering)
        self.assertEqual(
            to_xml(paragraph),
            '<w:p w14:paraId="X"><w:pPr><w:numPr><w:ilvl w:val="0"></w:ilvl><w:numId w:val="2"></w:numId>'
            '</w:numPr><w:jc w:val="center"></w:jc><w:rPr></w:rPr></w:pPr></w:p>',
        )

    def test_property_order(self) -> None:
        paragraph = (
            Paragraph()
            .style("Body")
            .keep_next()
            .page_break_before()
            .snap_to_grid(False)
            .line_spacing(LineSpacing(line_rule=LineSpacingType.AUTO, before=100, line=240))
            .indent(start=720, hanging=360)
            .text_alignment(TextAlignmentType.CENTER)
            .outline_lvl(1)
        )
        self.assertEqual(
            to_xml(paragraph.property),
            '<w:pPr><w:pStyle w:val="Body"></w:pStyle><w:keepNext></w:keepNext><w:pageBreakBefore></w:pageBreakBefore>'
            '<w:snapToGrid w:val="0"></w:snapToGrid><w:spacing w:before="100" w:line="240" w:lineRule="auto"></w:spacing>'
            '<w:ind w:left="720" w:hanging="360"></w:ind><w:textAlignment w:val="center"></w:textAlignment>'
            '<w:outlineLvl w:val="1"></w:outlineLvl><w:rPr></w:rPr></w:pPr>',
        )

    def test_indent_chars(self) -> None:
        self.assertEqual(
            to_xml(Indent(start_chars=200, first_line_chars=100)),
            '<w:ind w:leftChars="200" w:firstLineChars="100"></w:ind>',
        )

    def test_paragraph_without_id_is_equal_to_one_with_id(self) -> None:
        self.assertEqual(Paragraph(), Paragraph().with_id("0000ABCD"))


class MarkerWriterTests(unittest.TestCase):
    def test_markers(self) -> None:
        self.assertEqual(to_xml(BookmarkStart(1, "bm")), '<w:bookmarkStart w:id="1" w:name="bm"></w:bookmarkStart>')
        self.assertEqual(to_xml(BookmarkEnd(1)), '<w:bookmarkEnd w:id="1"></w:bookmarkEnd>')
        self.assertEqual(to_xml(CommentRangeStart(4)), '<w:commentRangeStart w:id="4"></w:commentRangeStart>')
        self.assertEqual(to_xml(CommentRangeEnd(4)), '<w:commentRangeEnd w:id="4"></w:commentRangeEnd>')


class TrackedChangeTests(unittest.TestCase):
    def test_insert_takes_generated_id(self) -> None:
        insert = Insert(children=(Run(),)).with_author("alice")
        self.assertEqual(
            to_xml(insert),
            '<w:ins w:id="1" w:author="alice" w:date="1970-01-01T00:00:00Z">'
            "<w:r><w:rPr></w:rPr></w:r></w:ins>",
        )

    def test_ids_are_sequential_across_changes(self) -> None:
        paragraph = (
            Paragraph()
            .with_id("P")
            .add_delete(Delete().add_run(Run().add_delete_text("old")))
            .add_insert(Insert().add_run(Run().add_text("new")))
        )
        xml = to_xml(paragraph)
        self.assertIn('<w:del w:id="1"', xml)
        self.assertIn('<w:ins w:id="2"', xml)

    def test_explicit_context_id(self) -> None:
        ctx = BuildContext(next_change_id=7)
        delete = Delete.new(Run(), ctx)
        self.assertEqual(delete.id, 7)
        self.assertEqual(delete, Delete(children=(Run(),)))

    def test_insert_may_hold_delete(self) -> None:
        insert = Insert().add_delete(Delete().add_run(Run())).add_comment_start(1)
        self.assertEqual(len(insert.children), 2)


class HyperlinkWriterTests(unittest.TestCase):
    def test_external(self) -> None:
        link = Hyperlink.external("rId5").add_run(Run())
        self.assertTrue(link.is_external)
        self.assertEqual(
            to_xml(link),
            '<w:hyperlink r:id="rId5" w:history="1"><w:r><w:rPr></w:rPr></w:r></w:hyperlink>',
        )

    def test_anchor(self) -> None:
        link = Hyperlink.to_anchor("_Toc1").add_bookmark_start(1, "x").add_bookmark_end(1)
        self.assertFalse(link.is_external)
        self.assertEqual(
            to_xml(link),
            '<w:hyperlink w:anchor="_Toc1" w:history="1"><w:bookmarkStart w:id="1" w:name="x"></w:bookmarkStart>'
            '<w:bookmarkEnd w:id="1"></w:bookmarkEnd></w:hyperlink>',
        )


if __name__ == "__main__":
    unittest.main()
