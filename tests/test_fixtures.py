import unittest
from io import BytesIO
from zipfile import ZipFile

from docx_codec.paragraph import Paragraph
from docx_codec.reader import (
    read_document_xml,
    read_numbering_xml,
    read_rels_xml,
    read_settings_xml,
    read_styles_xml,
    read_theme_xml,
)
from docx_codec.run import Run, Text
from docx_codec.table import Table
from docx_codec.types import StyleType


def _build_package() -> dict[str, bytes]:
    try:
        from docx import Document
        from docx.shared import Pt
    except ImportError as exc:
        raise unittest.SkipTest("python-docx is not installed") from exc

    doc = Document()
    doc.add_heading("第一章 总则", level=1)
    body = doc.add_paragraph("正文内容")
    body.add_run(" bold tail").bold = True
    body.runs[0].font.size = Pt(12)
    doc.add_paragraph("Item one", style="List Number")
    table = doc.add_table(rows=2, cols=2)
    for row_index, row in enumerate(table.rows):
        for col_index, cell in enumerate(row.cells):
            cell.text = f"R{row_index}C{col_index}"
    doc.add_page_break()
    doc.add_paragraph("Last page")

    buffer = BytesIO()
    doc.save(buffer)
    with ZipFile(BytesIO(buffer.getvalue())) as archive:
        return {name: archive.read(name) for name in archive.namelist()}


def _paragraph_text(paragraph: Paragraph) -> str:
    return "".join(
        child.text
        for run in paragraph.children
        if isinstance(run, Run)
        for child in run.children
        if isinstance(child, Text)
    )


class PythonDocxPackageTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.parts = _build_package()

    def test_document_content(self) -> None:
        doc = read_document_xml(self.parts["word/document.xml"])
        paragraphs = [child for child in doc.children if isinstance(child, Paragraph)]
        texts = [_paragraph_text(paragraph) for paragraph in paragraphs]
        self.assertIn("第一章 总则", texts)
        self.assertIn("正文内容 bold tail", texts)
        self.assertIn("Last page", texts)

        heading = paragraphs[texts.index("第一章 总则")]
        self.assertEqual(heading.property.style, "Heading1")
        body = paragraphs[texts.index("正文内容 bold tail")]
        self.assertEqual(body.children[0].run_property.sz, 24)
        self.assertTrue(body.children[1].run_property.bold)
        item = paragraphs[texts.index("Item one")]
        self.assertEqual(item.property.style, "ListNumber")

    def test_table_content(self) -> None:
        doc = read_document_xml(self.parts["word/document.xml"])
        tables = [child for child in doc.children if isinstance(child, Table)]
        self.assertEqual(len(tables), 1)
        table = tables[0]
        self.assertEqual(len(table.grid), 2)
        self.assertEqual(len(table.rows), 2)
        cell = table.rows[1].cells[0]
        self.assertEqual(_paragraph_text(cell.children[0]), "R1C0")

    def test_document_survives_rewrite(self) -> None:
        doc = read_document_xml(self.parts["word/document.xml"])
        rebuilt = doc.build()
        self.assertEqual(read_document_xml(rebuilt), doc)
        self.assertEqual(read_document_xml(rebuilt).build(), rebuilt)

    def test_styles(self) -> None:
        styles = read_styles_xml(self.parts["word/styles.xml"])
        heading = styles.find_style("Heading1")
        self.assertIsNotNone(heading)
        self.assertEqual(heading.style_type, StyleType.PARAGRAPH)
        self.assertEqual(heading.name.lower(), "heading 1")
        self.assertEqual(read_styles_xml(styles.build()), styles)

    def test_settings(self) -> None:
        settings = read_settings_xml(self.parts["word/settings.xml"])
        self.assertGreater(settings.default_tab_stop, 0)
        self.assertEqual(read_settings_xml(settings.build()), settings)

    def test_numbering(self) -> None:
        if "word/numbering.xml" not in self.parts:
            self.skipTest("template has no numbering part")
        numberings = read_numbering_xml(self.parts["word/numbering.xml"])
        self.assertTrue(numberings.abstract_nums)
        for numbering in numberings.numberings:
            self.assertIsNotNone(numberings.find_abstract(numbering.abstract_num_id))
        self.assertEqual(read_numbering_xml(numberings.build()), numberings)

    def test_relationships(self) -> None:
        rels = read_rels_xml(self.parts["word/_rels/document.xml.rels"])
        styles = [rid for rel_type, rid, _ in rels.rels if rel_type.endswith("/styles")]
        self.assertEqual(len(styles), 1)
        self.assertEqual(rels.find_target(styles[0]), "styles.xml")

    def test_theme(self) -> None:
        if "word/theme/theme1.xml" not in self.parts:
            self.skipTest("template has no theme part")
        theme = read_theme_xml(self.parts["word/theme/theme1.xml"])
        self.assertTrue(theme.font_scheme.major_font.latin)
        self.assertTrue(theme.font_scheme.minor_font.latin)


if __name__ == "__main__":
    unittest.main()
