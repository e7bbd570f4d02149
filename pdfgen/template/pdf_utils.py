"""PDF utility functions for metadata and page geometry."""

import logging
from typing import Any

from pdfgen.models.document_definition import DocumentDefinitions, DocumentInformation
from pdfgen.models.page_sizes import get_page_size

logger = logging.getLogger(__name__)

PDF_CREATOR = "pdfgen"


def set_pdf_metadata(canvas: Any, info: DocumentInformation | None) -> None:
    """Set PDF document metadata properties via canvas.

    Sets title, author, subject and keywords when given, and always the
    creator. These properties are visible in PDF viewers.

    Args:
        canvas: ReportLab canvas object
        info: Document information, or None
    """
    try:
        canvas.setCreator(PDF_CREATOR)
        if info is None:
            return
        if info.title:
            canvas.setTitle(info.title)
        if info.author:
            canvas.setAuthor(info.author)
        if info.subject:
            canvas.setSubject(info.subject)
        if info.keywords:
            canvas.setKeywords(info.keywords)

        logger.debug(f"PDF metadata set: title='{info.title}', author='{info.author}'")

    except Exception as e:
        logger.warning(f"Failed to set PDF metadata: {e}")


def get_page_geometry(
    document: DocumentDefinitions,
) -> tuple[tuple[float, float], float, float, float, float]:
    """Get page size and margins of a document definition.

    Returns:
        Tuple of (pagesize, left_margin, top_margin, right_margin, bottom_margin)
    """
    pagesize = get_page_size(document.page_size, document.page_orientation)
    left_margin, top_margin, right_margin, bottom_margin = document.page_margins
    return pagesize, left_margin, top_margin, right_margin, bottom_margin
