"""Document definition model.

This module defines the declarative description of a PDF document consumed
by the structured-document generator. A document is a sequence of
DocumentItem values; each item is either a plain string (a paragraph) or
exactly one of the item models below, identified by its discriminant field
(``text``, ``columns``, ``table``, ``ol``, ``ul``, ``stack``, ``image``).

Field names are snake_case and every model also accepts the camelCase
spelling, so pdfmake-style dictionaries validate unchanged.

Example:
    ```python
    from pdfgen.models.document_definition import DocumentDefinitions

    document = DocumentDefinitions.model_validate({
        "content": [
            "First paragraph",
            {"text": "A bold line", "bold": True, "fontSize": 14},
            {"ul": ["one", "two"]},
        ],
        "pageSize": "A5",
        "info": {"title": "Example"},
    })
    ```
"""

import re
from typing import Annotated, Any, Callable, ClassVar, Literal, Union

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from pdfgen.models.page_sizes import PAGE_SIZES

Alignment = Literal["left", "center", "right", "justify"]
PageBreak = Literal["before", "after"]
PageOrientation = Literal["portrait", "landscape"]

ITEM_DISCRIMINANTS: tuple[str, ...] = (
    "text",
    "columns",
    "table",
    "ol",
    "ul",
    "stack",
    "image",
)

_WIDTH_PATTERN = re.compile(r"^(auto|\*|\d+(\.\d+)?%)$")


def _check_column_width(value: float | str) -> float | str:
    if isinstance(value, str):
        if not _WIDTH_PATTERN.match(value):
            raise ValueError(
                f"Column width must be a number, 'auto', '*' or a percentage, got {value!r}"
            )
        return value
    if value <= 0:
        raise ValueError(f"Column width must be positive, got {value}")
    return float(value)


ColumnWidth = Annotated[Union[float, str], AfterValidator(_check_column_width)]


class _DefinitionModel(BaseModel):
    """Immutable base for every document definition value."""

    model_config = {
        "extra": "forbid",
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class DocumentStyle(_DefinitionModel):
    """Text style attributes shared by named styles and items.

    Attributes:
        font: Font family name, looked up in the font registry
        font_size: Font size in points
        bold: Use the bold variant of the family
        italics: Use the italic variant of the family ("italic" is accepted too)
        color: Color name or hex string (e.g. "red", "#0066cc")
        alignment: Horizontal alignment of the text
        line_height: Line height as a multiple of the font size
    """

    font: str | None = None
    font_size: float | None = Field(default=None, gt=0)
    bold: bool | None = None
    italics: bool | None = Field(
        default=None, validation_alias=AliasChoices("italics", "italic")
    )
    color: str | None = None
    alignment: Alignment | None = None
    line_height: float | None = Field(default=None, gt=0)

    def merged_with(self, *overrides: "DocumentStyle") -> "DocumentStyle":
        """Return a new style where set attributes of each override win.

        Overrides are applied left to right, so the last one has the
        highest precedence.
        """
        values = self.style_values()
        for override in overrides:
            values.update(override.style_values())
        return DocumentStyle(**values)

    def style_values(self) -> dict[str, Any]:
        """Return only the style attributes that are set."""
        return {
            name: getattr(self, name)
            for name in DocumentStyle.model_fields
            if getattr(self, name) is not None
        }


class StyledItem(DocumentStyle):
    """Layout attributes carried by every non-string item."""

    kind: ClassVar[str]

    margin: float | tuple[float, float] | tuple[float, float, float, float] | None = None
    style: str | tuple[str, ...] | None = None
    page_break: PageBreak | None = None

    def margins(self) -> tuple[float, float, float, float]:
        """Return the margin as (left, top, right, bottom).

        A single number applies to all four sides and a pair is read as
        (horizontal, vertical).
        """
        if self.margin is None:
            return (0.0, 0.0, 0.0, 0.0)
        if isinstance(self.margin, (int, float)):
            value = float(self.margin)
            return (value, value, value, value)
        if len(self.margin) == 2:
            horizontal, vertical = self.margin
            return (horizontal, vertical, horizontal, vertical)
        left, top, right, bottom = self.margin
        return (left, top, right, bottom)

    def style_names(self) -> tuple[str, ...]:
        """Return the referenced named styles in application order."""
        if self.style is None:
            return ()
        if isinstance(self.style, str):
            return (self.style,)
        return self.style

    def own_style(self) -> DocumentStyle:
        """Return the inline style attributes of this item."""
        return DocumentStyle(**self.style_values())


class TextItem(StyledItem):
    """A paragraph, or a sequence of items.
    
    Strings and text items in the sequence are inline runs of one paragraph.
    Any other item breaks the paragraph and is laid out as a block.
    """

    kind: ClassVar[str] = "text"

    text: Union[str, tuple["DocumentItem", ...]]


class ColumnInfo(_DefinitionModel):
    """A single column of a columns item."""

    width: ColumnWidth = "*"
    text: str


class ColumnsItem(StyledItem):
    """Side-by-side text columns separated by a fixed gap."""

    kind: ClassVar[str] = "columns"

    columns: tuple[ColumnInfo, ...] = Field(..., min_length=1)
    column_gap: float = Field(default=0.0, ge=0.0)


class TableInfo(_DefinitionModel):
    """Table geometry and cell grid.

    Attributes:
        header_rows: Number of leading rows repeated on every page
        widths: Column widths; empty means equal shares of the width
        body: Rows of cells, every row with the same number of cells
    """

    header_rows: int = Field(default=0, ge=0)
    widths: tuple[ColumnWidth, ...] = ()
    body: tuple[tuple["DocumentItem", ...], ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_grid(self) -> "TableInfo":
        """Check the grid is rectangular and matches widths and header rows."""
        column_counts = {len(row) for row in self.body}
        if len(column_counts) != 1:
            raise ValueError(
                f"Table rows must all have the same number of cells, got {sorted(column_counts)}"
            )
        column_count = column_counts.pop()
        if column_count == 0:
            raise ValueError("Table rows must contain at least one cell")
        if self.widths and len(self.widths) != column_count:
            raise ValueError(
                f"Table has {column_count} columns but {len(self.widths)} widths"
            )
        if self.header_rows > len(self.body):
            raise ValueError(
                f"header_rows ({self.header_rows}) exceeds row count ({len(self.body)})"
            )
        return self

    @property
    def column_count(self) -> int:
        return len(self.body[0])


class TableItem(StyledItem):
    kind: ClassVar[str] = "table"

    table: TableInfo


class NumberedListItem(StyledItem):
    kind: ClassVar[str] = "ol"

    ol: tuple["DocumentItem", ...]


class BulletedListItem(StyledItem):
    kind: ClassVar[str] = "ul"

    ul: tuple["DocumentItem", ...]


class StackItem(StyledItem):
    """Items laid out one below the other, sharing the stack's style."""

    kind: ClassVar[str] = "stack"

    stack: tuple["DocumentItem", ...]


class ImageItem(StyledItem):
    """An image given by path, file URI, data URI or image registry name.

    ``fit`` is a (width, height) box the image is scaled into while keeping
    its aspect ratio. With only one of ``width``/``height`` the other side
    is derived from the aspect ratio.
    """

    kind: ClassVar[str] = "image"

    image: str = Field(..., min_length=1)
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    fit: tuple[float, float] | None = None


def document_item_kind(value: Any) -> str | None:
    """Return the union tag of a raw or validated document item.

    Plain strings are tagged "plain". Mappings are tagged by their single
    discriminant key; a mapping with none or several discriminants has no
    tag and fails validation.
    """
    if isinstance(value, str):
        return "plain"
    if isinstance(value, StyledItem):
        return value.kind
    if isinstance(value, dict):
        present = [key for key in ITEM_DISCRIMINANTS if key in value]
        if len(present) == 1:
            return present[0]
    return None


DocumentItem = Annotated[
    Union[
        Annotated[str, Tag("plain")],
        Annotated[TextItem, Tag("text")],
        Annotated[ColumnsItem, Tag("columns")],
        Annotated[TableItem, Tag("table")],
        Annotated[NumberedListItem, Tag("ol")],
        Annotated[BulletedListItem, Tag("ul")],
        Annotated[StackItem, Tag("stack")],
        Annotated[ImageItem, Tag("image")],
    ],
    Discriminator(
        document_item_kind,
        custom_error_type="invalid_document_item",
        custom_error_message=(
            "A document item must be a string or carry exactly one of: "
            + ", ".join(ITEM_DISCRIMINANTS)
        ),
    ),
]

for _model in (TextItem, TableInfo, TableItem, NumberedListItem, BulletedListItem, StackItem):
    _model.model_rebuild()

document_item_adapter: TypeAdapter[Any] = TypeAdapter(DocumentItem)

HeaderFooterFunction = Callable[[int, int], Any]
BackgroundFunction = Callable[[int], Any]


class DocumentInformation(_DefinitionModel):
    """PDF document information written as file metadata."""

    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None


class DocumentDefinitions(_DefinitionModel):
    """Root description of a document for the structured generator.

    Header and footer are either a static item or a callable receiving
    (current_page, page_count) and returning an item. The background is a
    static item or a callable receiving current_page. Callables are called
    once per rendered page and must not have side effects.

    Attributes:
        content: Items of the document body, in order (at least one)
        header: Static item or callable drawn in the top margin
        footer: Static item or callable drawn in the bottom margin
        background: Static item or callable drawn behind the page content
        info: Document metadata
        images: Image registry, name to path or URI
        styles: Named style registry
        page_size: Page size name (default "A4")
        page_orientation: "portrait" or "landscape"
        page_margins: (left, top, right, bottom) margins in points
        default_style: Style applied to every item; its font names the family
    """

    content: tuple[DocumentItem, ...] = Field(..., min_length=1)
    header: Union[HeaderFooterFunction, DocumentItem, None] = None
    footer: Union[HeaderFooterFunction, DocumentItem, None] = None
    background: Union[BackgroundFunction, DocumentItem, None] = None
    info: DocumentInformation | None = None
    images: dict[str, str] = Field(default_factory=dict)
    styles: dict[str, DocumentStyle] = Field(default_factory=dict)
    page_size: str = "A4"
    page_orientation: PageOrientation = "portrait"
    page_margins: tuple[float, float, float, float] = (40.0, 40.0, 40.0, 40.0)
    default_style: DocumentStyle = Field(default_factory=DocumentStyle)

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, value: str) -> str:
        """Validate the page size is a known standard size.

        Returns:
            Upper-case page size name

        Raises:
            ValueError: If the page size is unknown
        """
        upper_value = value.upper()
        if upper_value not in PAGE_SIZES:
            raise ValueError(f"Unknown page size {value!r}")
        return upper_value

    @field_validator("page_margins")
    @classmethod
    def validate_page_margins(
        cls, value: tuple[float, float, float, float]
    ) -> tuple[float, float, float, float]:
        for margin in value:
            if margin < 0:
                raise ValueError(f"Page margins must be non-negative, got {margin}")
        return value
