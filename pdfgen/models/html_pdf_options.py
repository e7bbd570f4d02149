"""HTML-to-PDF rendering options.

Options for the template generator: either an explicit page ``width`` and
``height`` given as dimensioned strings ("50mm", "3.5in"), or a named
``format`` with an ``orientation``. ``border`` is the page margin.

Example:
    ```python
    from pdfgen.models.html_pdf_options import HtmlPdfOptions

    options = HtmlPdfOptions(width="50mm", height="90mm")
    options.page_css()  # '@page { size: 50mm 90mm; margin: 0; }'
    ```
"""

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

_DIMENSION_PATTERN = re.compile(r"^\d+(\.\d+)?(mm|cm|in|px|pt)$")


class HtmlPdfOptions(BaseModel):
    """Page geometry for HTML-to-PDF rendering.
    
    Attributes:
        width: Page width with unit (mm, cm, in, px, pt)
        height: Page height with unit (mm, cm, in, px, pt)
        format: Named page format, used when width/height are not set
        orientation: Orientation of the named format
        border: Page margin with unit, or None for no margin
    """
    
    model_config = {"extra": "forbid", "frozen": True}
    
    width: str | None = Field(default=None, description="Page width with unit")
    height: str | None = Field(default=None, description="Page height with unit")
    format: Literal["A3", "A4", "A5", "Legal", "Letter", "Tabloid"] = Field(
        default="A4",
        description="Named page format",
    )
    orientation: Literal["portrait", "landscape"] = Field(
        default="portrait",
        description="Orientation of the named format",
    )
    border: str | None = Field(default=None, description="Page margin with unit")
    
    @field_validator("width", "height", "border")
    @classmethod
    def validate_dimension(cls, value: str | None) -> str | None:
        """Validate a dimensioned string such as "50mm".
        
        Raises:
            ValueError: If the value has no number or an unsupported unit
        """
        if value is None:
            return value
        normalized = value.strip().lower()
        if not _DIMENSION_PATTERN.match(normalized):
            raise ValueError(
                f"Dimension must be a number followed by mm, cm, in, px or pt, got {value!r}"
            )
        return normalized
    
    @model_validator(mode="after")
    def validate_page_box(self) -> "HtmlPdfOptions":
        if (self.width is None) != (self.height is None):
            raise ValueError("width and height must be given together")
        return self
    
    def page_css(self) -> str:
        """Return the CSS @page rule for these options."""
        if self.width and self.height:
            size = f"{self.width} {self.height}"
        else:
            size = f"{self.format.lower()} {self.orientation}"
        margin = self.border or "0"
        return f"@page {{ size: {size}; margin: {margin}; }}"
