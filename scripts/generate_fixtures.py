from __future__ import annotations

from pathlib import Path
from zipfile import ZipFile, ZIP_DEFLATED

from docx import Document
from docx.shared import Pt

from docx_codec import config
from docx_codec.reader import DocxReader

FIXTURES_DIR = config.OUTPUT_DIR / "fixtures"

REWRITTEN_PARTS = {
    "word/document.xml": "read_document_xml",
    "word/styles.xml": "read_styles_xml",
    "word/settings.xml": "read_settings_xml",
    "word/numbering.xml": "read_numbering_xml",
}


def _save(doc: Document, name: str) -> Path:
    path = FIXTURES_DIR / name
    doc.save(path)
    return path


def _patch_zip(path: Path, updates: dict[str, bytes]) -> None:
    temp_path = path.with_suffix(".tmp")
    with ZipFile(path, "r") as src, ZipFile(temp_path, "w", ZIP_DEFLATED) as dst:
        for info in src.infolist():
            content = src.read(info.filename)
            if info.filename in updates:
                content = updates[info.filename]
            dst.writestr(info, content)
    temp_path.replace(path)


def _make_basic() -> Path:
    doc = Document()
    doc.add_heading("第一章 总则", level=1)
    body = doc.add_paragraph("正文内容")
    body.add_run(" bold tail").bold = True
    body.runs[0].font.size = Pt(12)
    doc.add_paragraph("Item one", style="List Number")
    doc.add_paragraph("Item two", style="List Number")
    return _save(doc, "basic.docx")


def _make_table() -> Path:
    doc = Document()
    doc.add_paragraph("Table below")
    table = doc.add_table(rows=3, cols=3)
    table.style = "Table Grid"
    for row_index, row in enumerate(table.rows):
        for col_index, cell in enumerate(row.cells):
            cell.text = f"R{row_index}C{col_index}"
    table.cell(2, 0).merge(table.cell(2, 1))
    doc.add_page_break()
    doc.add_paragraph("Last page")
    return _save(doc, "table.docx")


def _make_sections() -> Path:
    doc = Document()
    doc.add_paragraph("Portrait section")
    section = doc.add_section()
    section.page_width, section.page_height = section.page_height, section.page_width
    doc.add_paragraph("Landscape section")
    section.header.paragraphs[0].text = "Running header"
    section.footer.paragraphs[0].text = "Running footer"
    return _save(doc, "sections.docx")


def _rewrite(path: Path) -> Path:
    """Copy a package and replace its main parts with re-emitted markup."""
    reader = DocxReader()
    target = path.with_name(f"{path.stem}_rewritten.docx")
    target.write_bytes(path.read_bytes())
    updates: dict[str, bytes] = {}
    with ZipFile(path, "r") as src:
        names = set(src.namelist())
        for part, method in REWRITTEN_PARTS.items():
            if part not in names:
                continue
            entity = getattr(reader, method)(src.read(part))
            updates[part] = entity.build()
            state = reader.last_log_state()
            if state is not None and state.warnings:
                print(f"{path.name}:{part} warnings={len(state.warnings)}")
    _patch_zip(target, updates)
    return target


def main() -> None:
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    for path in (_make_basic(), _make_table(), _make_sections()):
        _rewrite(path)
    print(f"fixtures generated in {FIXTURES_DIR}")


if __name__ == "__main__":
    main()
