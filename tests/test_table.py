import unittest

from docx_codec.paragraph import Paragraph
from docx_codec.run import Shading
from docx_codec.table import (
    Border,
    Borders,
    Table,
    TableCell,
    TableProperty,
    TableRow,
    Width,
)
from docx_codec.types import (
    BorderType,
    HeightRule,
    TableAlignmentType,
    TableLayoutType,
    VAlignType,
    VMergeType,
    WidthType,
)
from docx_codec.writer import to_xml


class BorderTests(unittest.TestCase):
    def test_border(self) -> None:
        self.assertEqual(
            to_xml(Border("top")),
            '<w:top w:val="single" w:sz="2" w:space="0" w:color="000000"></w:top>',
        )

    def test_default_table_borders(self) -> None:
        borders = Borders.table_default()
        self.assertEqual(
            [border.position for border in borders.items],
            ["top", "left", "bottom", "right", "insideH", "insideV"],
        )

    def test_set_keeps_schema_order(self) -> None:
        borders = Borders("w:tcBorders").set(Border("tr2bl")).set(Border("top"))
        borders = borders.set(Border("top", BorderType.DOUBLE))
        self.assertEqual([border.position for border in borders.items], ["top", "tr2bl"])
        self.assertEqual(borders.get("top").border_type, BorderType.DOUBLE)
        self.assertIsNone(borders.clear("top").get("top"))

    def test_empty_borders_write_nothing(self) -> None:
        self.assertEqual(to_xml(Borders.empty_table()), "")


class TableWriterTests(unittest.TestCase):
    def test_property_without_borders(self) -> None:
        prop = TableProperty(borders=Borders.empty_table())
        self.assertEqual(
            to_xml(prop),
            '<w:tblPr><w:tblW w:w="0" w:type="auto"></w:tblW><w:jc w:val="left"></w:jc></w:tblPr>',
        )

    def test_property_order(self) -> None:
        table = (
            Table()
            .style("Grid")
            .width(5000, WidthType.PCT)
            .align(TableAlignmentType.CENTER)
            .indent(100)
            .without_borders()
            .layout(TableLayoutType.FIXED)
        )
        self.assertEqual(
            to_xml(table.property),
            '<w:tblPr><w:tblStyle w:val="Grid"></w:tblStyle><w:tblW w:w="5000" w:type="pct"></w:tblW>'
            '<w:jc w:val="center"></w:jc><w:tblInd w:w="100" w:type="dxa"></w:tblInd>'
            '<w:tblLayout w:type="fixed"></w:tblLayout></w:tblPr>',
        )

    def test_grid(self) -> None:
        xml = to_xml(Table().set_grid([2000, 3000]))
        self.assertIn(
            '<w:tblGrid><w:gridCol w:w="2000" w:type="dxa"></w:gridCol><w:gridCol w:w="3000" w:type="dxa"></w:gridCol>'
            "</w:tblGrid>",
            xml,
        )

    def test_empty_cell_gets_paragraph(self) -> None:
        self.assertEqual(
            to_xml(TableCell()),
            '<w:tc><w:tcPr></w:tcPr><w:p w14:paraId="00000001"><w:pPr><w:rPr></w:rPr></w:pPr></w:p></w:tc>',
        )

    def test_cell_ending_in_table_gets_paragraph(self) -> None:
        cell = TableCell().add_table(Table())
        self.assertEqual(len(cell.children), 2)
        self.assertIsInstance(cell.children[0], Table)
        self.assertEqual(cell.children[1], Paragraph())

    def test_cell_properties(self) -> None:
        cell = (
            TableCell()
            .width(2000)
            .grid_span(2)
            .vertical_merge(VMergeType.RESTART)
            .set_border(Border("bottom"))
            .shading(Shading(fill="EEEEEE"))
            .vertical_align(VAlignType.CENTER)
        )
        self.assertEqual(
            to_xml(cell.property),
            '<w:tcPr><w:tcW w:w="2000" w:type="dxa"></w:tcW><w:gridSpan w:val="2"></w:gridSpan>'
            '<w:vMerge w:val="restart"></w:vMerge><w:tcBorders><w:bottom w:val="single" w:sz="2" '
            'w:space="0" w:color="000000"></w:bottom></w:tcBorders>'
            '<w:shd w:val="clear" w:color="auto" w:fill="EEEEEE"></w:shd><w:vAlign w:val="center"></w:vAlign></w:tcPr>',
        )

    def test_row_properties(self) -> None:
        row = TableRow().row_height(300, HeightRule.EXACT).cant_split().grid_after(1).insert("bob")
        self.assertEqual(
            to_xml(row.property),
            '<w:trPr><w:gridAfter w:val="1"></w:gridAfter><w:cantSplit></w:cantSplit><w:trHeight w:val="300" w:hRule="exact"></w:trHeight>'
            '<w:ins w:id="1" w:author="bob" w:date="1970-01-01T00:00:00Z"></w:ins></w:trPr>',
        )

    def test_width(self) -> None:
        self.assertEqual(to_xml(Width("w:tcW", 1000, WidthType.DXA)), '<w:tcW w:w="1000" w:type="dxa"></w:tcW>')

    def test_numbering_flag_bubbles_up(self) -> None:
        cell = TableCell().add_paragraph(Paragraph().numbering(1, 0))
        table = Table().add_row(TableRow().add_cell(cell))
        self.assertTrue(table.has_numbering)
        self.assertFalse(Table().add_row(TableRow().add_cell(TableCell())).has_numbering)


if __name__ == "__main__":
    unittest.main()
