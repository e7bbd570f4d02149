"""Header, footer and background drawing for structured documents.

This module returns a page callback for SimpleDocTemplate's onFirstPage and
onLaterPages hooks. The callback resolves the document's header, footer and
background for the current page and draws them in frames: the header in
the top margin, the footer in the bottom margin, the background over the
whole page before the page content.
"""

import logging
from typing import Any, Callable

from pydantic import ValidationError
from reportlab.platypus import Frame

from pdfgen.exceptions.document_definition_error import DocumentDefinitionError
from pdfgen.models.document_definition import DocumentDefinitions, document_item_adapter
from pdfgen.template.flowables import DocumentFlowableBuilder, strip_page_flow

logger = logging.getLogger(__name__)


def resolve_page_item(decoration: Any, *page_args: int) -> Any:
    """Resolve a static or callable decoration for one page.
    
    Args:
        decoration: A document item, a callable returning one, or None
        page_args: Arguments for the callable (page number, page count)
        
    Returns:
        Validated document item, or None when there is nothing to draw
        
    Raises:
        DocumentDefinitionError: If the callable raises or returns an
            invalid document item
    """
    if decoration is None:
        return None
    if callable(decoration):
        try:
            decoration = decoration(*page_args)
        except Exception as e:
            raise DocumentDefinitionError(
                f"Page decoration callable failed: {e}",
                context={"page_args": page_args},
            ) from e
        if decoration is None:
            return None
    try:
        return document_item_adapter.validate_python(decoration)
    except ValidationError as e:
        raise DocumentDefinitionError(
            f"Page decoration is not a valid document item: {e}",
            context={"page_args": page_args},
        ) from e


def _draw_in_frame(
    canvas: Any,
    builder: DocumentFlowableBuilder,
    item: Any,
    x: float,
    y: float,
    width: float,
    height: float,
) -> None:
    if item is None or width <= 0 or height <= 0:
        return
    
    flowables = strip_page_flow(builder.build_item(item, builder.base_style(), width))
    frame = Frame(
        x, y, width, height,
        leftPadding=0, bottomPadding=0, rightPadding=0, topPadding=0,
        showBoundary=0,
    )
    frame.addFromList(flowables, canvas)
    if flowables:
        logger.warning(f"{len(flowables)} flowables did not fit in the page decoration area")


def create_page_decorator(
    document: DocumentDefinitions,
    builder: DocumentFlowableBuilder,
    page_size: tuple[float, float],
    page_count: int,
) -> Callable[[Any, Any], None]:
    """Create the page callback drawing header, footer and background.
    
    Args:
        document: Document definition carrying the decorations
        builder: Flowable builder for the document
        page_size: (width, height) of the page in points
        page_count: Total number of pages, passed to header/footer callables
        
    Returns:
        Callable function(canvas, doc) for the page hooks
    """
    left, top, right, bottom = document.page_margins
    page_width, page_height = page_size
    content_width = page_width - left - right
    
    def decorate_page(canvas: Any, doc: Any) -> None:
        """Draw the decorations of the current page.
        
        Args:
            canvas: ReportLab canvas object
            doc: ReportLab document object
            
        Raises:
            DocumentDefinitionError: If a decoration cannot be resolved or built
        """
        page_num = canvas.getPageNumber()
        decorations = (
            (resolve_page_item(document.background, page_num), 0, 0, page_width, page_height),
            (resolve_page_item(document.header, page_num, page_count), left, page_height - top, content_width, top),
            (resolve_page_item(document.footer, page_num, page_count), left, 0, content_width, bottom),
        )
        canvas.saveState()
        try:
            for item, x, y, width, height in decorations:
                _draw_in_frame(canvas, builder, item, x, y, width, height)
        except DocumentDefinitionError:
            raise
        except Exception as e:
            logger.warning(f"Error drawing page decorations on page {page_num}: {e}")
        finally:
            canvas.restoreState()
    
    return decorate_page
