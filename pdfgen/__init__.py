"""PDF generation toolkit.

Three ways of producing a PDF: a declarative document definition rendered by
ReportLab's layout engine, direct drawing on a ReportLab canvas, and HTML
templates converted with xhtml2pdf.
"""

__version__ = "1.0.0"
