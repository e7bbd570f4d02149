"""PDF generators sharing the PdfGenerator contract.

- StructuredDocumentGenerator: document definitions rendered with ReportLab platypus
- DirectDrawingGenerator: text drawn directly on a ReportLab canvas
- HtmlTemplateGenerator: HTML templates converted with xhtml2pdf
"""

from pdfgen.generators.base import GenerationResult, PdfGenerator
from pdfgen.generators.direct_drawing import DirectDrawingGenerator
from pdfgen.generators.html_template import HtmlTemplateGenerator
from pdfgen.generators.structured import StructuredDocumentGenerator

__all__ = [
    "DirectDrawingGenerator",
    "GenerationResult",
    "HtmlTemplateGenerator",
    "PdfGenerator",
    "StructuredDocumentGenerator",
]
