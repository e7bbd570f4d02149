"""Generation error exception.

This module defines the GenerationError exception raised when a generator
fails to produce a PDF file. The original exception is chained as
``__cause__`` and the context names the generator and the output path.
"""

from pdfgen.exceptions.base import BasePdfError


class GenerationError(BasePdfError):
    """Raised when PDF generation fails.
    
    This covers backend construction failures, rendering failures reported
    by ReportLab or xhtml2pdf, unreadable templates and unwritable output
    paths. Generators do not retry; a failed render may leave a truncated
    file behind.
    """
    
    pass
