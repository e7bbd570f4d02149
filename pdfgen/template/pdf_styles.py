"""Style resolution for document items.

Item styles cascade: the document default style, then the style inherited
from the enclosing item, then named styles in the order an item lists
them, then the item's own attributes.
"""

import logging

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle

from pdfgen.exceptions.document_definition_error import DocumentDefinitionError
from pdfgen.models.document_definition import DocumentStyle, StyledItem
from pdfgen.template.fonts import FontBook

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 12.0
DEFAULT_LINE_HEIGHT = 1.2

_ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
    "justify": TA_JUSTIFY,
}


def to_color(value: str) -> colors.Color:
    """Convert a color name or hex string to a ReportLab Color.
    
    Raises:
        DocumentDefinitionError: If the value is not a color
    """
    try:
        return colors.toColor(value)
    except ValueError as e:
        raise DocumentDefinitionError(
            f"Invalid color: {value!r}", context={"color": value}
        ) from e


def resolve_item_style(
    item: StyledItem,
    inherited: DocumentStyle,
    named_styles: dict[str, DocumentStyle],
) -> DocumentStyle:
    """Resolve the effective style of an item.
    
    Unknown style names are skipped with a warning.
    
    Args:
        item: Document item carrying its own style attributes and style names
        inherited: Style of the enclosing item (or the document default)
        named_styles: Named style registry of the document
        
    Returns:
        Effective style of the item
    """
    named: list[DocumentStyle] = []
    for style_name in item.style_names():
        if style_name not in named_styles:
            logger.warning(f"Unknown style '{style_name}' ignored")
            continue
        named.append(named_styles[style_name])
    return inherited.merged_with(*named, item.own_style())


def paragraph_style(
    style: DocumentStyle, fonts: FontBook, name: str = "Body"
) -> ParagraphStyle:
    """Build a ReportLab ParagraphStyle from an effective style."""
    font_size = style.font_size or DEFAULT_FONT_SIZE
    line_height = style.line_height or DEFAULT_LINE_HEIGHT
    return ParagraphStyle(
        name=name,
        fontName=fonts.font_name(style.font, bool(style.bold), bool(style.italics)),
        fontSize=font_size,
        leading=font_size * line_height,
        textColor=to_color(style.color) if style.color else colors.black,
        alignment=_ALIGNMENTS[style.alignment or "left"],
    )
