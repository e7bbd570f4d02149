"""Structured-document PDF generator.

Renders a DocumentDefinitions value with ReportLab's platypus layout
engine. The font registry is injected at construction; without one the
built-in Helvetica family is used.

Example:
    ```python
    from pdfgen.generators.structured import StructuredDocumentGenerator
    from pdfgen.models.document_definition import DocumentDefinitions

    document = DocumentDefinitions(content=["First paragraph", "Another paragraph"])
    result = StructuredDocumentGenerator().generate_pdf("pdfs/structured.pdf", document)
    ```
"""

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO

from reportlab.platypus import SimpleDocTemplate

from pdfgen.generators.base import PdfGenerator
from pdfgen.models.document_definition import DocumentDefinitions
from pdfgen.models.font_registry import FontRegistry, default_font_registry
from pdfgen.template.flowables import DocumentFlowableBuilder
from pdfgen.template.fonts import FontBook, register_fonts
from pdfgen.template.header_footer import create_page_decorator
from pdfgen.template.pdf_utils import get_page_geometry, set_pdf_metadata

logger = logging.getLogger(__name__)


def _create_doc_template(
    destination: str | BinaryIO, document: DocumentDefinitions
) -> SimpleDocTemplate:
    pagesize, left_margin, top_margin, right_margin, bottom_margin = get_page_geometry(document)
    return SimpleDocTemplate(
        destination,
        pagesize=pagesize,
        leftMargin=left_margin,
        rightMargin=right_margin,
        topMargin=top_margin,
        bottomMargin=bottom_margin,
    )


class StructuredDocumentGenerator(PdfGenerator[DocumentDefinitions]):
    """Generate PDFs from declarative document definitions.
    
    Attributes:
        fonts: Font registry, family name to style variants
        default_font: Family used when the document names no font; the
            first registry family when None or not in the registry
    """
    
    name = "structured-document"
    
    def __init__(
        self,
        fonts: FontRegistry | None = None,
        default_font: str | None = None,
    ) -> None:
        self.fonts = fonts if fonts else default_font_registry()
        self.default_font = default_font
    
    def render(self, output_path: Path, payload: DocumentDefinitions) -> None:
        font_book = register_fonts(self.fonts, self.default_font)
        
        page_count = 0
        if callable(payload.header) or callable(payload.footer):
            page_count = self._count_pages(payload, font_book)
            logger.debug(f"Document has {page_count} pages")
        
        doc = _create_doc_template(str(output_path), payload)
        builder = DocumentFlowableBuilder(payload, font_book)
        story = builder.build_content(doc.width)
        decorate_page = create_page_decorator(payload, builder, doc.pagesize, page_count)
        
        def on_first_page(canvas: Any, doc: Any) -> None:
            """Set metadata and draw decorations on the first page."""
            set_pdf_metadata(canvas, payload.info)
            decorate_page(canvas, doc)
        
        doc.build(story, onFirstPage=on_first_page, onLaterPages=decorate_page)
    
    def _count_pages(self, document: DocumentDefinitions, font_book: FontBook) -> int:
        """Lay the document out in memory and return its page count.
        
        Decorations are drawn inside the margins, so they do not change
        the page count and are left out of this pass.
        """
        pages: list[int] = []
        
        def record_page(canvas: Any, doc: Any) -> None:
            pages.append(canvas.getPageNumber())
        
        doc = _create_doc_template(io.BytesIO(), document)
        story = DocumentFlowableBuilder(document, font_book).build_content(doc.width)
        doc.build(story, onFirstPage=record_page, onLaterPages=record_page)
        return max(pages, default=1)
