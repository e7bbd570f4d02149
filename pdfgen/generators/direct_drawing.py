"""Direct-drawing PDF generator.

Draws a single text run on a ReportLab canvas: set the font size, draw the
text at the top-left margin, finish the page, save. Long text is wrapped
to the page width; there is no other layout.
"""

import logging
from pathlib import Path

from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from pdfgen.generators.base import PdfGenerator

logger = logging.getLogger(__name__)

PAGE_MARGIN = 72.0


class DirectDrawingGenerator(PdfGenerator[str]):
    """Generate a one-page PDF by drawing text directly on a canvas.
    
    Attributes:
        font_name: Standard PDF font used for the text
        font_size: Font size in points
        page_size: (width, height) of the page in points
    """
    
    name = "direct-drawing"
    
    def __init__(
        self,
        font_size: float = 25,
        font_name: str = "Helvetica",
        page_size: tuple[float, float] = letter,
    ) -> None:
        self.font_size = font_size
        self.font_name = font_name
        self.page_size = page_size
    
    def render(self, output_path: Path, payload: str) -> None:
        page_width, page_height = self.page_size
        pdf = canvas.Canvas(str(output_path), pagesize=self.page_size)
        pdf.setFont(self.font_name, self.font_size)
        
        lines: list[str] = []
        for paragraph in payload.splitlines() or [""]:
            lines.extend(
                simpleSplit(paragraph, self.font_name, self.font_size, page_width - 2 * PAGE_MARGIN)
                or [""]
            )
        
        text = pdf.beginText(PAGE_MARGIN, page_height - PAGE_MARGIN - self.font_size)
        text.setFont(self.font_name, self.font_size)
        text.setLeading(self.font_size * 1.2)
        for line in lines:
            text.textLine(line)
        pdf.drawText(text)
        
        pdf.showPage()
        pdf.save()
        logger.debug(f"Drew {len(lines)} lines at {self.font_size}pt on {output_path}")
