import unittest

from docx_codec import config
from docx_codec.document import Document, Footer, Header, Section
from docx_codec.paragraph import Paragraph
from docx_codec.run import Run
from docx_codec.section import DocGrid, PageMargin, PageNumType, SectionProperty
from docx_codec.structured import DataBinding, StructuredDataTag, table_of_contents
from docx_codec.table import Table, TableCell, TableRow
from docx_codec.types import (
    DocGridType,
    PageOrientationType,
    SectionType,
    TextDirectionType,
)
from docx_codec.writer import to_xml

DEFAULT_SECT_PR = (
    '<w:sectPr><w:pgSz w:w="11906" w:h="16838"></w:pgSz>'
    '<w:pgMar w:top="1985" w:right="1701" w:bottom="1701" w:left="1701" '
    'w:header="851" w:footer="992" w:gutter="0"></w:pgMar>'
    '<w:cols w:space="425" w:num="1"></w:cols></w:sectPr>'
)


class SectionPropertyTests(unittest.TestCase):
    def test_default(self) -> None:
        self.assertEqual(to_xml(SectionProperty()), DEFAULT_SECT_PR)

    def test_full_order(self) -> None:
        prop = (
            SectionProperty()
            .page_size_of(16838, 11906, PageOrientationType.LANDSCAPE)
            .margin(PageMargin(top=1000))
            .cols(2, 720)
            .grid(DocGrid(DocGridType.LINES, line_pitch=360))
            .with_header("rId1", Header())
            .with_first_footer("rId2", Footer())
            .page_numbering(PageNumType(start=1))
            .direction(TextDirectionType.TB_RL)
            .kind(SectionType.CONTINUOUS)
        )
        self.assertTrue(prop.title_pg)
        self.assertEqual(
            to_xml(prop),
            '<w:sectPr><w:pgSz w:w="16838" w:h="11906" w:orient="landscape"></w:pgSz>'
            '<w:pgMar w:top="1000" w:right="1701" w:bottom="1701" w:left="1701" '
            'w:header="851" w:footer="992" w:gutter="0"></w:pgMar>'
            '<w:cols w:space="720" w:num="2"></w:cols>'
            '<w:docGrid w:type="lines" w:linePitch="360"></w:docGrid>'
            '<w:headerReference w:type="default" r:id="rId1"></w:headerReference>'
            '<w:footerReference w:type="first" r:id="rId2"></w:footerReference>'
            '<w:pgNumType w:start="1"></w:pgNumType>'
            '<w:textDirection w:val="tbRl"></w:textDirection>'
            '<w:type w:val="continuous"></w:type>'
            "<w:titlePg></w:titlePg></w:sectPr>",
        )

    def test_header_content_is_not_part_of_equality(self) -> None:
        with_content = SectionProperty().with_header("rId1", Header().add_paragraph(Paragraph()))
        without_content = SectionProperty().with_header("rId1", Header())
        self.assertEqual(with_content, without_content)


class DocumentWriterTests(unittest.TestCase):
    def test_empty_document(self) -> None:
        xml = to_xml(Document())
        self.assertTrue(xml.startswith(config.XML_DECLARATION + "<w:document xmlns:o="))
        self.assertIn('mc:Ignorable="w14 wp14"', xml)
        self.assertTrue(xml.endswith("<w:body>" + DEFAULT_SECT_PR + "</w:body></w:document>"))

    def test_children_in_order(self) -> None:
        doc = (
            Document()
            .add_bookmark_start(1, "start")
            .add_paragraph(Paragraph().with_id("A").add_run(Run().add_text("a")))
            .add_bookmark_end(1)
            .add_table(Table())
        )
        xml = to_xml(doc)
        body = xml[xml.index("<w:body>"):]
        self.assertLess(body.index("w:bookmarkStart"), body.index('w14:paraId="A"'))
        self.assertLess(body.index('w14:paraId="A"'), body.index("w:bookmarkEnd"))
        self.assertLess(body.index("w:bookmarkEnd"), body.index("<w:tbl>"))

    def test_section_writes_breaking_paragraph(self) -> None:
        section = Section(SectionProperty().kind(SectionType.NEXT_PAGE)).add_paragraph(
            Paragraph().with_id("A")
        )
        doc = Document().add_section(section)
        xml = to_xml(doc)
        self.assertIn(
            '<w:p w14:paraId="A"><w:pPr><w:rPr></w:rPr></w:pPr></w:p>'
            '<w:p w14:paraId="00000001"><w:pPr><w:rPr></w:rPr><w:sectPr>',
            xml,
        )
        self.assertIn('<w:type w:val="nextPage"></w:type></w:sectPr></w:pPr></w:p>', xml)

    def test_builder_settings_land_on_final_section(self) -> None:
        doc = (
            Document()
            .page_size(1000, 2000)
            .page_orient(PageOrientationType.LANDSCAPE)
            .columns(3)
            .title_pg()
            .header(Header(), "rId7")
            .even_footer(Footer(), "rId8")
        )
        prop = doc.section_property
        self.assertEqual((prop.page_size.w, prop.page_size.h), (1000, 2000))
        self.assertEqual(prop.page_size.orient, PageOrientationType.LANDSCAPE)
        self.assertEqual(prop.columns, 3)
        self.assertTrue(prop.title_pg)
        self.assertEqual(prop.header_reference.id, "rId7")
        self.assertEqual(prop.even_footer_reference.id, "rId8")

    def test_numbering_flag(self) -> None:
        self.assertFalse(Document().add_paragraph(Paragraph()).has_numbering)
        cell = TableCell().add_paragraph(Paragraph().numbering(1, 0))
        doc = Document().add_table(Table().add_row(TableRow().add_cell(cell)))
        self.assertTrue(doc.has_numbering)
        section = Section().add_paragraph(Paragraph().numbering(1, 0))
        self.assertTrue(Document().add_section(section).has_numbering)


class HeaderFooterWriterTests(unittest.TestCase):
    def test_header(self) -> None:
        xml = to_xml(Header().add_paragraph(Paragraph().with_id("H")))
        self.assertTrue(xml.startswith(config.XML_DECLARATION + "<w:hdr xmlns:r="))
        self.assertTrue(xml.endswith('<w:p w14:paraId="H"><w:pPr><w:rPr></w:rPr></w:pPr></w:p></w:hdr>'))

    def test_footer(self) -> None:
        xml = to_xml(Footer())
        self.assertTrue(xml.startswith(config.XML_DECLARATION + "<w:ftr xmlns:r="))
        self.assertTrue(xml.endswith('mc:Ignorable="w14 wp14"></w:ftr>'))


class StructuredDataTagWriterTests(unittest.TestCase):
    def test_tag(self) -> None:
        tag = (
            StructuredDataTag()
            .alias("Title")
            .data_binding(DataBinding(xpath="/root/title", store_item_id="{1}"))
            .add_run(Run().add_text("x"))
        )
        self.assertEqual(
            to_xml(tag),
            '<w:sdt><w:sdtPr><w:rPr></w:rPr><w:dataBinding w:xpath="/root/title" w:storeItemID="{1}"></w:dataBinding>'
            '<w:alias w:val="Title"></w:alias></w:sdtPr><w:sdtContent>'
            '<w:r><w:rPr></w:rPr><w:t xml:space="preserve">x</w:t></w:r></w:sdtContent></w:sdt>',
        )

    def test_table_of_contents(self) -> None:
        xml = to_xml(table_of_contents("1-2", alias="Contents"))
        self.assertIn('<w:alias w:val="Contents"></w:alias>', xml)
        self.assertIn('<w:fldChar w:fldCharType="begin" w:dirty="true"></w:fldChar>', xml)
        self.assertIn('TOC \\o "1-2"', xml)
        self.assertIn('<w:fldChar w:fldCharType="end" w:dirty="false"></w:fldChar>', xml)


if __name__ == "__main__":
    unittest.main()
