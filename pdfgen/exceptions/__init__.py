"""Custom exception classes for PDF generation.

This package contains the exception hierarchy:
- BasePdfError: Base exception for all PDF generation errors
- DocumentDefinitionError: Raised when a document definition cannot be used
- GenerationError: Raised when producing a PDF file fails
"""

from pdfgen.exceptions.base import BasePdfError
from pdfgen.exceptions.document_definition_error import DocumentDefinitionError
from pdfgen.exceptions.generation_error import GenerationError

__all__ = [
    "BasePdfError",
    "DocumentDefinitionError",
    "GenerationError",
]
