"""
Word (.docx) export derived directly from the document model.

Word documents flow paragraph by paragraph, so sidebars and grids from the
visual layouts cannot be carried over. This exporter rebuilds one linear
document from the model instead:

- centered name, job title and contact lines
- a bordered heading per non-empty section (summary, experience,
  education, skills, then custom sections in model order)
- description text written verbatim; bullets are not parsed

Page breaks are left to the viewer.
"""

from __future__ import annotations

import io
import os
import tempfile
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, Twips
from docx.text.paragraph import Paragraph

from ..errors import ExportError
from ..layouts.base import date_range
from ..logging_utils import LOG
from ..model import CVDocument, CustomSection
from ..shared import export_filename, sanitize_for_xml

SEPARATOR = " | "
DATE_SEPARATOR = " - "

_executor: Optional[ThreadPoolExecutor] = None


def _text(value: str) -> str:
    # CRLF would otherwise become two line breaks in the run
    return sanitize_for_xml(value).replace("\r\n", "\n")


def _spacing(paragraph: Paragraph, before: Optional[int] = None, after: Optional[int] = None) -> Paragraph:
    """Apply paragraph spacing given in twips (twentieths of a point)."""
    fmt = paragraph.paragraph_format
    if before is not None:
        fmt.space_before = Twips(before)
    if after is not None:
        fmt.space_after = Twips(after)
    return paragraph


def _add_bottom_border(paragraph: Paragraph, size: int = 6, space: int = 1, color: str = "auto") -> None:
    """Single bottom border under a paragraph (used for section headings)."""
    pPr = paragraph._p.get_or_add_pPr()
    existing = pPr.find(qn("w:pBdr"))
    if existing is not None:
        pPr.remove(existing)
    pBdr = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), str(size))
    bottom.set(qn("w:space"), str(space))
    bottom.set(qn("w:color"), color)
    pBdr.append(bottom)
    pPr.append(pBdr)


def _add_runs(paragraph: Paragraph, runs: Iterable[Tuple[str, bool]], size: Optional[Pt] = None) -> Paragraph:
    for text, bold in runs:
        run = paragraph.add_run(_text(text))
        run.bold = bold or None
        if size is not None:
            run.font.size = size
    return paragraph


def _joined_runs(parts: Iterable[Tuple[str, bool]], sep: str = SEPARATOR) -> List[Tuple[str, bool]]:
    """Interleave non-empty parts with separators; no separator at the ends."""
    runs: List[Tuple[str, bool]] = []
    for text, bold in parts:
        if not text:
            continue
        if runs:
            runs.append((sep, False))
        runs.append((text, bold))
    return runs


class DocxExporter:
    """Builds a .docx CV from the document model with python-docx."""

    suffix = "docx"

    # ------------------------- Assembly -------------------------

    def build(self, doc: CVDocument) -> DocxDocument:
        """Assemble the Word document in memory."""
        document = Document()
        info = doc.personal_info
        document.core_properties.title = _text(f"{info.full_name} - CV")
        document.core_properties.author = _text(info.full_name)

        self._header(document, doc)

        if info.summary:
            self._section_heading(document, "Professional Summary")
            _spacing(document.add_paragraph(_text(info.summary)), after=200)

        if doc.experience:
            self._section_heading(document, "Experience")
            for exp in doc.experience:
                title = document.add_paragraph()
                _add_runs(title, [(exp.role, True)], size=Pt(12))
                _spacing(title, before=100)
                meta = document.add_paragraph()
                _add_runs(meta, _joined_runs([
                    (exp.company, True),
                    (date_range(exp.start_date, exp.end_date, exp.is_current, DATE_SEPARATOR), False),
                    (exp.location, False),
                ]))
                _spacing(meta, after=100)
                _spacing(document.add_paragraph(_text(exp.description)), after=200)

        if doc.education:
            self._section_heading(document, "Education")
            for edu in doc.education:
                title = document.add_paragraph()
                _add_runs(title, [(edu.school, True)], size=Pt(12))
                _spacing(title, before=100)
                degree = ", ".join(p for p in (edu.degree, edu.field) if p)
                meta = document.add_paragraph()
                _add_runs(meta, _joined_runs([
                    (degree, False),
                    (date_range(edu.start_date, edu.end_date, edu.is_current, DATE_SEPARATOR), False),
                    (edu.location, False),
                ]))
                _spacing(meta, after=200)

        if doc.skills:
            self._section_heading(document, "Skills")
            names = ", ".join(s.name for s in doc.skills if s.name)
            _spacing(document.add_paragraph(_text(names)), after=200)

        for section in doc.custom_sections:
            self._custom_section(document, section)

        return document

    def _header(self, document: DocxDocument, doc: CVDocument) -> None:
        info = doc.personal_info
        if info.full_name:
            name = document.add_heading(_text(info.full_name.upper()), level=1)
            name.alignment = WD_ALIGN_PARAGRAPH.CENTER
            _spacing(name, after=100)
        if info.job_title:
            title = document.add_heading(_text(info.job_title), level=2)
            title.alignment = WD_ALIGN_PARAGRAPH.CENTER
            _spacing(title, after=200)

        contact = _joined_runs([(info.email, False), (info.phone, False), (info.location, False)])
        if contact:
            line = _add_runs(document.add_paragraph(), contact)
            line.alignment = WD_ALIGN_PARAGRAPH.CENTER
            _spacing(line, after=300)

        links = _joined_runs([(info.linkedin, False), (info.website, False)])
        if links:
            line = _add_runs(document.add_paragraph(), links)
            line.alignment = WD_ALIGN_PARAGRAPH.CENTER
            _spacing(line, after=300)

    def _section_heading(self, document: DocxDocument, title: str) -> Paragraph:
        heading = document.add_heading(_text(title), level=3)
        _add_bottom_border(heading)
        return _spacing(heading, before=200, after=100)

    def _custom_section(self, document: DocxDocument, section: CustomSection) -> None:
        if not section.items:
            return
        # An untitled section still gets its (empty) heading
        self._section_heading(document, section.title)
        for item in section.items:
            runs: List[Tuple[str, bool]] = []
            if item.title:
                runs.append((item.title, True))
            if item.subtitle:
                runs.append((f"{SEPARATOR}{item.subtitle}" if item.title else item.subtitle, False))
            if runs:
                _spacing(_add_runs(document.add_paragraph(), runs), before=100)
            if item.description:
                _spacing(document.add_paragraph(_text(item.description)), after=200)

    # ------------------------- Packaging -------------------------

    def to_bytes(self, doc: CVDocument) -> bytes:
        """
        Serialize the document to .docx bytes.

        Raises:
            ExportError: If the document cannot be assembled or packaged
        """
        try:
            buffer = io.BytesIO()
            self.build(doc).save(buffer)
            return buffer.getvalue()
        except Exception as e:
            raise ExportError(f"failed to build Word document: {type(e).__name__}: {e}") from e

    def export(self, doc: CVDocument, target_dir: Path, output_path: Optional[Path] = None) -> Path:
        """
        Write the document to `output_path` (default: <Full_Name>_CV.docx in
        `target_dir`). The file only appears once it is fully written.

        Raises:
            ExportError: On assembly, packaging or write failure
        """
        data = self.to_bytes(doc)
        output_path = output_path or target_dir / export_filename(doc.personal_info.full_name, self.suffix)

        tmp_name = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(output_path.parent), suffix=".part")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, output_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ExportError(f"failed to write {output_path}: {e}") from e

        LOG.info("Word document written to %s", output_path)
        return output_path

    def export_async(
        self,
        doc: CVDocument,
        target_dir: Path,
        output_path: Optional[Path] = None,
        executor: Optional[Executor] = None,
    ) -> "Future[Path]":
        """
        Run export() as one unit of work on an executor.

        The exporter keeps no state between calls, so concurrent exports of
        the same or different documents are independent.
        """
        return (executor or _default_executor()).submit(self.export, doc, target_dir, output_path)


def _default_executor() -> ThreadPoolExecutor:
    global _executor
    if _executor is None:
        _executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="cvstudio-docx")
    return _executor
