"""HTML-template PDF generator.

Fills ``{{placeholder}}`` tokens of an HTML template and converts the
result to PDF with xhtml2pdf. The generator is configured once with a
template path, page options and the image injected for ``{{image}}``, and
can then render any number of substitution sets.

Example:
    ```python
    from pdfgen.generators.html_template import HtmlTemplateGenerator
    from pdfgen.models.html_pdf_options import HtmlPdfOptions

    generator = HtmlTemplateGenerator(
        "templates/template.html",
        HtmlPdfOptions(width="50mm", height="90mm"),
        image_path="templates/image.png",
    )
    result = await generator.generate_pdf_async(
        "pdfs/template.pdf", {"firstName": "John", "lastName": "Doe"}
    )
    ```
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from xhtml2pdf import pisa

from pdfgen.exceptions.generation_error import GenerationError
from pdfgen.generators.base import PdfGenerator
from pdfgen.models.html_pdf_options import HtmlPdfOptions

logger = logging.getLogger(__name__)

IMAGE_PLACEHOLDER = "image"

_HEAD_CLOSE_PATTERN = re.compile(r"</head\s*>", re.IGNORECASE)


def render_template(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace ``{{key}}`` placeholders in a single pass.
    
    Every occurrence of a placeholder whose key is in ``substitutions`` is
    replaced by its value, including occurrences preceded by stray braces.
    Inserted values are never scanned again, and placeholders without a
    substitution are left as they are.
    
    Args:
        template: Template text
        substitutions: Placeholder key to replacement value
        
    Returns:
        Template text with placeholders replaced
    """
    if not substitutions:
        return template
    pattern = re.compile(r"\{\{(" + "|".join(map(re.escape, substitutions)) + r")\}\}")
    return pattern.sub(lambda match: substitutions[match.group(1)], template)


def inject_page_css(html: str, css: str) -> str:
    """Insert a style element before </head>, or at the start of the document."""
    style = f"<style>{css}</style>"
    if _HEAD_CLOSE_PATTERN.search(html):
        return _HEAD_CLOSE_PATTERN.sub(lambda match: style + match.group(0), html, count=1)
    return style + html


def resolve_link(uri: str, rel: str) -> str:
    """Resolve file:// URIs to local paths for xhtml2pdf."""
    if uri.startswith("file://"):
        return url2pathname(urlparse(uri).path)
    return uri


class HtmlTemplateGenerator(PdfGenerator[Mapping[str, str]]):
    """Generate PDFs from an HTML template and substitution values.
    
    Attributes:
        template_path: HTML template read on every call
        options: Page geometry for rendering
        image_path: Image whose file URI replaces ``{{image}}``
    """
    
    name = "html-template"
    
    def __init__(
        self,
        template_path: str | Path,
        options: HtmlPdfOptions | None = None,
        image_path: str | Path | None = None,
    ) -> None:
        self.template_path = Path(template_path)
        self.options = options or HtmlPdfOptions()
        self.image_path = (
            Path(image_path) if image_path is not None
            else self.template_path.parent / "image.png"
        )
    
    @property
    def image_uri(self) -> str:
        return self.image_path.resolve().as_uri()
    
    def transform_html(self, substitutions: Mapping[str, str]) -> str:
        """Read the template and fill its placeholders.
        
        The bundled image takes precedence over a substitution named
        ``image``.
        
        Args:
            substitutions: Placeholder key to value, in caller order
            
        Returns:
            HTML with placeholders replaced and the page CSS injected
        """
        template = self.template_path.read_text(encoding="utf-8")
        values = {**substitutions, IMAGE_PLACEHOLDER: self.image_uri}
        return inject_page_css(render_template(template, values), self.options.page_css())
    
    def render(self, output_path: Path, payload: Mapping[str, str]) -> None:
        html = self.transform_html(payload)
        with open(output_path, "wb") as destination:
            status = pisa.CreatePDF(html, dest=destination, link_callback=resolve_link)
        
        if status.err:
            raise GenerationError(
                f"HTML rendering reported {status.err} error(s)",
                context={
                    "generator": self.name,
                    "output_path": str(output_path),
                    "template": str(self.template_path),
                },
            )
        logger.debug(f"Rendered {self.template_path} with {len(payload)} substitutions")
