"""Font registry model.

A font registry maps a family name to its four style variants. Each
variant is either a path to a TrueType file or the name of one of the
standard PDF fonts built into ReportLab (e.g. "Helvetica-Bold").

Example:
    ```python
    from pdfgen.models.font_registry import FontFamilyTypes

    fonts = {
        "Roboto": FontFamilyTypes(
            normal="fonts/Roboto-Regular.ttf",
            bold="fonts/Roboto-Medium.ttf",
            italics="fonts/Roboto-Italic.ttf",
            bolditalics="fonts/Roboto-MediumItalic.ttf",
        )
    }
    ```
"""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_FONT_FAMILY = "Helvetica"

ROBOTO_FILES = {
    "normal": "Roboto-Regular.ttf",
    "bold": "Roboto-Medium.ttf",
    "italics": "Roboto-Italic.ttf",
    "bolditalics": "Roboto-MediumItalic.ttf",
}


class FontFamilyTypes(BaseModel):
    """Style variants of one font family.
    
    Missing variants fall back to ``normal``.
    
    Attributes:
        normal: Regular variant (required)
        bold: Bold variant
        italics: Italic variant
        bolditalics: Bold italic variant
    """
    
    model_config = {"extra": "forbid", "frozen": True}
    
    normal: str = Field(..., min_length=1)
    bold: str | None = None
    italics: str | None = None
    bolditalics: str | None = None
    
    def variant(self, bold: bool = False, italics: bool = False) -> str:
        """Return the font source for a bold/italic combination."""
        if bold and italics:
            return self.bolditalics or self.bold or self.italics or self.normal
        if bold:
            return self.bold or self.normal
        if italics:
            return self.italics or self.normal
        return self.normal
    
    def variants(self) -> dict[str, str]:
        """Return all four variants with fallbacks applied."""
        return {
            "normal": self.variant(),
            "bold": self.variant(bold=True),
            "italics": self.variant(italics=True),
            "bolditalics": self.variant(bold=True, italics=True),
        }


FontRegistry = dict[str, FontFamilyTypes]


def default_font_registry() -> FontRegistry:
    """Return a registry with ReportLab's built-in Helvetica family.
    
    The built-in fonts need no files on disk, so this registry always works.
    """
    return {
        DEFAULT_FONT_FAMILY: FontFamilyTypes(
            normal="Helvetica",
            bold="Helvetica-Bold",
            italics="Helvetica-Oblique",
            bolditalics="Helvetica-BoldOblique",
        )
    }


def roboto_font_registry(fonts_dir: Path) -> FontRegistry:
    """Return a registry with the Roboto TrueType family from ``fonts_dir``."""
    return {
        "Roboto": FontFamilyTypes(
            **{variant: str(fonts_dir / filename) for variant, filename in ROBOTO_FILES.items()}
        )
    }
