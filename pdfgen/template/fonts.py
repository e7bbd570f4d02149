"""Font registration for ReportLab.

Turns a font registry into fonts ReportLab can draw with. TrueType files
are registered under "<family>-<variant>-<path digest>" names; standard PDF
font names (Helvetica, Times-Roman, Courier and their variants) are used as
they are.
"""

import hashlib
import logging
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from pdfgen.exceptions.document_definition_error import DocumentDefinitionError
from pdfgen.models.font_registry import FontRegistry

logger = logging.getLogger(__name__)


class FontBook:
    """Registered font names per family and style variant.
    
    Attributes:
        families: Family name to {variant: ReportLab font name}
        default_family: Family used when a style names no font
    """
    
    def __init__(self, families: dict[str, dict[str, str]], default_family: str) -> None:
        self.families = families
        self.default_family = default_family
    
    def font_name(
        self, family: str | None, bold: bool = False, italics: bool = False
    ) -> str:
        """Return the ReportLab font name for a family and variant.
        
        Args:
            family: Family name, or None for the default family
            bold: Select a bold variant
            italics: Select an italic variant
            
        Returns:
            Registered ReportLab font name
            
        Raises:
            DocumentDefinitionError: If the family is not in the registry
        """
        family_name = family or self.default_family
        variants = self.families.get(family_name)
        if variants is None:
            raise DocumentDefinitionError(
                f"Font family '{family_name}' is not in the font registry",
                context={"family": family_name, "available": sorted(self.families)},
            )
        if bold and italics:
            return variants["bolditalics"]
        if bold:
            return variants["bold"]
        if italics:
            return variants["italics"]
        return variants["normal"]


def ttf_font_name(family: str, variant: str, font_path: Path) -> str:
    """Return the ReportLab name for a TrueType file.
    
    The name carries a digest of the resolved file path, so registries that
    reuse a family name for different files never share a registered font.
    """
    digest = hashlib.sha1(str(font_path.resolve()).encode("utf-8")).hexdigest()[:10]
    return f"{family}-{variant}-{digest}"


def _register_font_source(family: str, variant: str, source: str) -> str:
    if source in pdfmetrics.standardFonts:
        return source
    
    font_path = Path(source)
    if not font_path.is_file():
        raise DocumentDefinitionError(
            f"Font file not found: {source}",
            context={"family": family, "variant": variant, "path": source},
        )
    
    font_name = ttf_font_name(family, variant, font_path)
    if font_name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        logger.debug(f"Registered TrueType font {font_name} from {font_path}")
    return font_name


def register_fonts(registry: FontRegistry, default_family: str | None = None) -> FontBook:
    """Register every family of a font registry with ReportLab.
    
    Args:
        registry: Family name to style variants
        default_family: Family used when a style names no font; falls back
            to the first family of the registry when missing from it
            
    Returns:
        FontBook resolving (family, bold, italics) to font names
        
    Raises:
        DocumentDefinitionError: If the registry is empty or a font file is missing
    """
    if not registry:
        raise DocumentDefinitionError("Font registry is empty")
    
    families: dict[str, dict[str, str]] = {}
    for family, family_types in registry.items():
        names = {
            variant: _register_font_source(family, variant, source)
            for variant, source in family_types.variants().items()
        }
        pdfmetrics.registerFontFamily(
            names["normal"],
            normal=names["normal"],
            bold=names["bold"],
            italic=names["italics"],
            boldItalic=names["bolditalics"],
        )
        families[family] = names
    
    if default_family not in families:
        if default_family is not None:
            logger.warning(
                f"Default font family '{default_family}' is not in the font registry, "
                f"using '{next(iter(families))}'"
            )
        default_family = next(iter(families))
    
    return FontBook(families, default_family)
