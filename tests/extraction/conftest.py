from __future__ import annotations

from io import BytesIO
from typing import Callable
from xml.sax.saxutils import escape
from zipfile import ZipFile

from docx import Document as DocxDocument
from pptx import Presentation
from pptx.util import Inches
import pytest

_REL_BASE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
_S = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
_SPREADSHEET_CT = "application/vnd.openxmlformats-officedocument.spreadsheetml"

# Slide layout without placeholders in the python-pptx default template.
_BLANK_LAYOUT = 6


def _rels(entries: list[tuple[str, str, str]]) -> str:
    body = "".join(
        f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"/>' for rel_id, rel_type, target in entries
    )
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">{body}</Relationships>'
    )


def _content_types(overrides: dict[str, str]) -> str:
    entries = "".join(
        f'<Override PartName="/{part}" ContentType="{content_type}"/>' for part, content_type in overrides.items()
    )
    return (
        '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
        '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
        f'<Default Extension="xml" ContentType="application/xml"/>{entries}</Types>'
    )


def _zip(parts: dict[str, str], overrides: dict[str, str] | None = None) -> bytes:
    buffer = BytesIO()
    with ZipFile(buffer, "w") as archive:
        archive.writestr("[Content_Types].xml", _content_types(overrides or {}))
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def _replace_part(payload: bytes, part_name: str, content: str) -> bytes:
    buffer = BytesIO()
    with ZipFile(BytesIO(payload)) as source, ZipFile(buffer, "w") as target:
        for item in source.infolist():
            data = content.encode("utf-8") if item.filename == part_name else source.read(item.filename)
            target.writestr(item, data)
    return buffer.getvalue()


def _workbook_package(
    sheets: list[tuple[str, str, str]],
    worksheets: dict[str, str],
    shared_strings: list[str] | None = None,
) -> bytes:
    """Assemble an XLSX package.

    ``sheets`` holds ``(name, rel_id, target)`` entries, ``worksheets`` maps part
    names under ``xl/`` to raw ``<sheetData>`` markup and ``shared_strings``
    holds raw ``<si>`` markup.
    """

    sheet_entries = "".join(
        f'<sheet name="{escape(name)}" sheetId="{index}" r:id="{rel_id}"/>'
        for index, (name, rel_id, _) in enumerate(sheets, start=1)
    )
    sheets_xml = f"<sheets>{sheet_entries}</sheets>" if sheets else ""
    workbook_rels = [(rel_id, f"{_REL_BASE}/worksheet", target) for _, rel_id, target in sheets]
    overrides = {"xl/workbook.xml": f"{_SPREADSHEET_CT}.sheet.main+xml"}
    parts = {
        "_rels/.rels": _rels([("rId1", f"{_REL_BASE}/officeDocument", "xl/workbook.xml")]),
        "xl/workbook.xml": f'<workbook xmlns="{_S}" xmlns:r="{_REL_BASE}">{sheets_xml}</workbook>',
    }

    for part_name, sheet_data in worksheets.items():
        parts[f"xl/{part_name}"] = f'<worksheet xmlns="{_S}"><sheetData>{sheet_data}</sheetData></worksheet>'
        overrides[f"xl/{part_name}"] = f"{_SPREADSHEET_CT}.worksheet+xml"

    if shared_strings is not None:
        workbook_rels.append(("rIdShared", f"{_REL_BASE}/sharedStrings", "sharedStrings.xml"))
        items = "".join(shared_strings)
        parts["xl/sharedStrings.xml"] = f'<sst xmlns="{_S}" count="{len(shared_strings)}">{items}</sst>'
        overrides["xl/sharedStrings.xml"] = f"{_SPREADSHEET_CT}.sharedStrings+xml"

    parts["xl/_rels/workbook.xml.rels"] = _rels(workbook_rels)
    return _zip(parts, overrides)


@pytest.fixture
def build_docx() -> Callable[..., bytes]:
    def _build(paragraphs: list[str], *, with_body: bool = True) -> bytes:
        document = DocxDocument()
        for text in paragraphs:
            document.add_paragraph(text)
        if not with_body:
            document.element.remove(document.element.body)

        buffer = BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def build_pptx() -> Callable[..., bytes]:
    def _build(slides: list[list[str]]) -> bytes:
        presentation = Presentation()
        layout = presentation.slide_layouts[_BLANK_LAYOUT]

        for lines in slides:
            slide = presentation.slides.add_slide(layout)
            if not lines:
                continue
            frame = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(6), Inches(3)).text_frame
            frame.text = lines[0]
            for line in lines[1:]:
                frame.add_paragraph().text = line

        buffer = BytesIO()
        presentation.save(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def build_xlsx() -> Callable[..., bytes]:
    """Build a workbook; string cells go through the shared string table."""

    def _build(sheets: dict[str, list[list[object]]]) -> bytes:
        shared: list[str] = []
        entries: list[tuple[str, str, str]] = []
        worksheets: dict[str, str] = {}

        for index, (name, rows) in enumerate(sheets.items(), start=1):
            entries.append((name, f"rId{index}", f"worksheets/sheet{index}.xml"))

            row_xml: list[str] = []
            for row_number, row in enumerate(rows, start=1):
                cells: list[str] = []
                for value in row:
                    if isinstance(value, str):
                        shared.append(f"<si><t>{escape(value)}</t></si>")
                        cells.append(f'<c t="s"><v>{len(shared) - 1}</v></c>')
                    else:
                        cells.append(f"<c><v>{value}</v></c>")
                row_xml.append(f'<row r="{row_number}">{"".join(cells)}</row>')
            worksheets[f"worksheets/sheet{index}.xml"] = "".join(row_xml)

        return _workbook_package(entries, worksheets, shared)

    return _build


@pytest.fixture
def build_workbook() -> Callable[..., bytes]:
    return _workbook_package


@pytest.fixture
def zip_parts() -> Callable[..., bytes]:
    """Raw package builder for malformed or hand-crafted containers."""

    return _zip


@pytest.fixture
def replace_part() -> Callable[[bytes, str, str], bytes]:
    """Copy a package, swapping the content of one part."""

    return _replace_part
