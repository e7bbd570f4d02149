"""Translation of document items into ReportLab flowables.

Each document item becomes a list of platypus flowables laid out by
SimpleDocTemplate: strings and text items become Paragraphs, columns and
tables become Tables, lists become ListFlowables, stacks are flattened and
images become Image flowables. Item margins and page breaks wrap the
result in Spacers, Indenters and PageBreaks.
"""

import base64
import io
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    Flowable,
    Image,
    Indenter,
    ListFlowable,
    ListItem,
    PageBreak,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from pdfgen.exceptions.document_definition_error import DocumentDefinitionError
from pdfgen.models.document_definition import (
    BulletedListItem,
    ColumnsItem,
    DocumentDefinitions,
    DocumentStyle,
    ImageItem,
    NumberedListItem,
    StackItem,
    StyledItem,
    TableItem,
    TextItem,
)
from pdfgen.template.fonts import FontBook
from pdfgen.template.pdf_styles import paragraph_style, resolve_item_style, to_color

logger = logging.getLogger(__name__)

CELL_PADDING = 4.0
LIST_INDENT = 18.0
MIN_COLUMN_WIDTH = 10.0

_IMAGE_ALIGNMENTS = {
    "left": "LEFT",
    "center": "CENTER",
    "right": "RIGHT",
    "justify": "LEFT",
}


def escape_text(text: str) -> str:
    """Escape text for Paragraph markup, keeping explicit line breaks."""
    return escape(text).replace("\n", "<br/>")


def resolve_widths(specs: tuple[float | str, ...] | list[float | str], available: float) -> list[float]:
    """Resolve column width specifications to points.

    Numbers are points and percentages are relative to ``available``.
    "*" and "auto" columns share the remaining width equally.

    Args:
        specs: Width specification per column
        available: Width available to all columns together

    Returns:
        Width in points per column
    """
    fixed: list[float | None] = []
    for spec in specs:
        if isinstance(spec, str) and spec.endswith("%"):
            fixed.append(available * float(spec[:-1]) / 100.0)
        elif isinstance(spec, str):
            fixed.append(None)
        else:
            fixed.append(float(spec))

    flexible_count = sum(1 for width in fixed if width is None)
    remaining = available - sum(width for width in fixed if width is not None)
    share = remaining / flexible_count if flexible_count else 0.0
    share = max(share, MIN_COLUMN_WIDTH)
    return [share if width is None else width for width in fixed]


def strip_page_flow(flowables: list[Flowable]) -> list[Flowable]:
    """Drop page breaks and indenters, which only apply to the page frame."""
    return [
        flowable
        for flowable in flowables
        if not isinstance(flowable, (PageBreak, Indenter))
    ]


def _is_inline(item: Any) -> bool:
    if isinstance(item, str):
        return True
    if not isinstance(item, TextItem):
        return False
    return isinstance(item.text, str) or all(_is_inline(child) for child in item.text)


def _read_data_uri(uri: str) -> bytes:
    _, _, payload = uri.partition(",")
    try:
        return base64.b64decode(payload)
    except ValueError as e:
        raise DocumentDefinitionError(
            "Invalid base64 image data URI", context={"uri": uri[:40]}
        ) from e


class DocumentFlowableBuilder:
    """Builds ReportLab flowables for the items of one document.

    Attributes:
        document: Document definition being rendered
        fonts: Registered fonts for the document
    """

    def __init__(self, document: DocumentDefinitions, fonts: FontBook) -> None:
        self.document = document
        self.fonts = fonts

    def base_style(self) -> DocumentStyle:
        """Return the document-wide style every item inherits."""
        return DocumentStyle(font=self.fonts.default_family).merged_with(
            self.document.default_style
        )

    def build_content(self, available_width: float) -> list[Flowable]:
        """Build the flowables for the document body.

        Args:
            available_width: Frame width between the page margins

        Returns:
            Story for SimpleDocTemplate.build
        """
        base = self.base_style()
        story: list[Flowable] = []
        for item in self.document.content:
            story.extend(self.build_item(item, base, available_width))
        logger.debug(
            f"Built {len(story)} flowables from {len(self.document.content)} items"
        )
        return story

    def build_item(
        self, item: Any, inherited: DocumentStyle, width: float
    ) -> list[Flowable]:
        """Build flowables for a single document item.

        Args:
            item: A string or one of the document item models
            inherited: Style of the enclosing item
            width: Width available to the item

        Returns:
            Flowables for the item, including margins and page breaks
        """
        if isinstance(item, str):
            return [Paragraph(escape_text(item), paragraph_style(inherited, self.fonts))]

        style = resolve_item_style(item, inherited, self.document.styles)
        left, _, right, _ = item.margins()
        inner_width = max(width - left - right, MIN_COLUMN_WIDTH)

        if isinstance(item, TextItem):
            body = self._text(item, style, inner_width)
        elif isinstance(item, ColumnsItem):
            body = [self._columns(item, style, inner_width)]
        elif isinstance(item, TableItem):
            body = [self._table(item, style, inner_width)]
        elif isinstance(item, NumberedListItem):
            body = [self._list(item.ol, style, inner_width, ordered=True)]
        elif isinstance(item, BulletedListItem):
            body = [self._list(item.ul, style, inner_width, ordered=False)]
        elif isinstance(item, StackItem):
            body = []
            for child in item.stack:
                body.extend(self.build_item(child, style, inner_width))
        elif isinstance(item, ImageItem):
            body = [self._image(item, style)]
        else:
            raise DocumentDefinitionError(
                f"Unsupported document item: {type(item).__name__}"
            )

        return self._apply_layout(item, body)

    def _apply_layout(self, item: StyledItem, body: list[Flowable]) -> list[Flowable]:
        left, top, right, bottom = item.margins()
        flowables: list[Flowable] = []
        if item.page_break == "before":
            flowables.append(PageBreak())
        if top:
            flowables.append(Spacer(1, top))
        if left or right:
            flowables.append(Indenter(left=left, right=right))
            flowables.extend(body)
            flowables.append(Indenter(left=-left, right=-right))
        else:
            flowables.extend(body)
        if bottom:
            flowables.append(Spacer(1, bottom))
        if item.page_break == "after":
            flowables.append(PageBreak())
        return flowables

    def _text(self, item: TextItem, style: DocumentStyle, width: float) -> list[Flowable]:
        """Build a text item: inline runs become paragraphs, other items blocks."""
        if isinstance(item.text, str):
            return [Paragraph(escape_text(item.text), paragraph_style(style, self.fonts))]

        flowables: list[Flowable] = []
        runs: list[Any] = []
        for child in item.text:
            if _is_inline(child):
                runs.append(child)
                continue
            if runs:
                flowables.append(self._paragraph(runs, style))
                runs = []
            flowables.extend(self.build_item(child, style, width))
        if runs:
            flowables.append(self._paragraph(runs, style))
        return flowables

    def _paragraph(self, runs: list[Any], style: DocumentStyle) -> Paragraph:
        markup = "".join(self._inline(run, style) for run in runs)
        return Paragraph(markup, paragraph_style(style, self.fonts))

    def _inline(self, run: Any, parent_style: DocumentStyle) -> str:
        """Return Paragraph markup for one inline run of a text item."""
        if isinstance(run, str):
            return escape_text(run)

        run_style = resolve_item_style(run, parent_style, self.document.styles)
        if isinstance(run.text, str):
            inner = escape_text(run.text)
        else:
            inner = "".join(self._inline(child, run_style) for child in run.text)

        font_name = self.fonts.font_name(
            run_style.font, bool(run_style.bold), bool(run_style.italics)
        )
        attributes = f'name="{font_name}"'
        if run_style.font_size:
            attributes += f' size="{run_style.font_size}"'
        if run_style.color:
            to_color(run_style.color)  # raises on invalid colors
            attributes += f' color="{escape(run_style.color)}"'
        return f"<font {attributes}>{inner}</font>"

    def _columns(self, item: ColumnsItem, style: DocumentStyle, width: float) -> Table:
        gap = item.column_gap
        column_count = len(item.columns)
        widths = resolve_widths(
            [column.width for column in item.columns],
            width - gap * (column_count - 1),
        )
        # Every column but the last carries the gap as right padding
        col_widths = [column_width + gap for column_width in widths[:-1]] + [widths[-1]]

        cell_style = paragraph_style(style, self.fonts)
        cells = [[Paragraph(escape_text(column.text), cell_style) for column in item.columns]]

        table = Table(cells, colWidths=col_widths, hAlign="LEFT")
        commands: list[tuple[Any, ...]] = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 0),
            ("RIGHTPADDING", (0, 0), (-1, -1), 0),
            ("TOPPADDING", (0, 0), (-1, -1), 0),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ]
        if column_count > 1 and gap:
            commands.append(("RIGHTPADDING", (0, 0), (-2, -1), gap))
        table.setStyle(TableStyle(commands))
        return table

    def _table(self, item: TableItem, style: DocumentStyle, width: float) -> Table:
        info = item.table
        specs = info.widths or ("*",) * info.column_count
        widths = resolve_widths(specs, width)

        data = [
            [
                strip_page_flow(
                    self.build_item(cell, style, max(column_width - 2 * CELL_PADDING, MIN_COLUMN_WIDTH))
                )
                for cell, column_width in zip(row, widths)
            ]
            for row in info.body
        ]

        # Rows taller than a page are split between their cells' lines
        table = Table(
            data,
            colWidths=widths,
            repeatRows=info.header_rows,
            splitInRow=1,
            hAlign="LEFT",
        )
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("TOPPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("BOTTOMPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ]))
        return table

    def _list(
        self,
        children: tuple[Any, ...],
        style: DocumentStyle,
        width: float,
        ordered: bool,
    ) -> ListFlowable:
        bullet_style = paragraph_style(style, self.fonts)
        child_width = max(width - LIST_INDENT, MIN_COLUMN_WIDTH)
        list_items = [
            ListItem(strip_page_flow(self.build_item(child, style, child_width)))
            for child in children
        ]
        if ordered:
            return ListFlowable(
                list_items,
                bulletType="1",
                bulletFormat="%s.",
                bulletFontName=bullet_style.fontName,
                bulletFontSize=bullet_style.fontSize,
                leftIndent=LIST_INDENT,
            )
        return ListFlowable(
            list_items,
            bulletType="bullet",
            start="•",
            bulletFontName=bullet_style.fontName,
            bulletFontSize=bullet_style.fontSize,
            leftIndent=LIST_INDENT,
        )

    def _image_source(self, item: ImageItem) -> str | bytes:
        """Resolve an image reference to a file path or raw image bytes."""
        reference = self.document.images.get(item.image, item.image)
        if reference.startswith("data:"):
            return _read_data_uri(reference)
        if reference.startswith("file://"):
            reference = url2pathname(urlparse(reference).path)

        if not Path(reference).is_file():
            raise DocumentDefinitionError(
                f"Image not found: {item.image}",
                context={"image": item.image, "path": reference},
            )
        return reference

    def _image(self, item: ImageItem, style: DocumentStyle) -> Image:
        source = self._image_source(item)

        def open_source() -> Any:
            return io.BytesIO(source) if isinstance(source, bytes) else source

        image_width, image_height = ImageReader(open_source()).getSize()
        if item.fit:
            scale = min(item.fit[0] / image_width, item.fit[1] / image_height)
            width, height = image_width * scale, image_height * scale
        elif item.width and item.height:
            width, height = item.width, item.height
        elif item.width:
            width, height = item.width, image_height * item.width / image_width
        elif item.height:
            width, height = image_width * item.height / image_height, item.height
        else:
            width, height = image_width, image_height

        image = Image(open_source(), width=width, height=height)
        image.hAlign = _IMAGE_ALIGNMENTS[style.alignment or "left"]
        return image
