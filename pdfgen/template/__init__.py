"""ReportLab rendering of document definitions.

This package contains the pieces used by the structured-document generator:
- fonts: registration of font registries with ReportLab
- pdf_styles: style cascade and ParagraphStyle construction
- flowables: document items to platypus flowables
- header_footer: per-page header, footer and background drawing
- pdf_utils: metadata and page geometry
"""

from pdfgen.template.flowables import DocumentFlowableBuilder
from pdfgen.template.fonts import FontBook, register_fonts

__all__ = [
    "DocumentFlowableBuilder",
    "FontBook",
    "register_fonts",
]
