"""Tests for the document definition, font registry and rendering option models.

This module contains unit tests for model validation: item discrimination,
camelCase aliases, table grid checks, style merging and page geometry.
"""

import pytest
from pydantic import ValidationError

from pdfgen.models.document_definition import (
    BulletedListItem,
    ColumnsItem,
    DocumentDefinitions,
    DocumentStyle,
    ImageItem,
    NumberedListItem,
    StackItem,
    TableInfo,
    TableItem,
    TextItem,
    document_item_adapter,
    document_item_kind,
)
from pdfgen.models.font_registry import (
    DEFAULT_FONT_FAMILY,
    FontFamilyTypes,
    default_font_registry,
)
from pdfgen.models.html_pdf_options import HtmlPdfOptions
from pdfgen.models.page_sizes import PAGE_SIZES, get_page_size


class TestDocumentItem:
    """Tests for DocumentItem discrimination."""
    
    @pytest.mark.parametrize(
        "raw, expected_type",
        [
            ({"text": "Hello"}, TextItem),
            ({"columns": [{"text": "a"}, {"text": "b"}]}, ColumnsItem),
            ({"table": {"body": [["a", "b"]]}}, TableItem),
            ({"ol": ["one", "two"]}, NumberedListItem),
            ({"ul": ["one", "two"]}, BulletedListItem),
            ({"stack": ["one", {"text": "two"}]}, StackItem),
            ({"image": "logo.png"}, ImageItem),
        ],
    )
    def test_item_kind_selected_by_discriminant(self, raw: dict, expected_type: type) -> None:
        """Test each discriminant key selects its item model."""
        item = document_item_adapter.validate_python(raw)
        assert isinstance(item, expected_type)
    
    def test_plain_string_is_a_paragraph(self) -> None:
        assert document_item_adapter.validate_python("Just text") == "Just text"
    
    def test_item_without_discriminant_rejected(self) -> None:
        """Test a mapping with no discriminant fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            document_item_adapter.validate_python({"bold": True})
        
        assert "invalid_document_item" in str(exc_info.value)
    
    def test_item_with_two_discriminants_rejected(self) -> None:
        """Test a mapping with two discriminants fails validation."""
        with pytest.raises(ValidationError):
            document_item_adapter.validate_python({"text": "a", "ul": ["b"]})
    
    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            document_item_adapter.validate_python({"text": "a", "underline": True})
    
    def test_camel_case_aliases(self) -> None:
        """Test pdfmake-style camelCase keys populate snake_case fields."""
        item = document_item_adapter.validate_python(
            {"text": "Title", "fontSize": 18, "lineHeight": 1.5, "pageBreak": "before"}
        )
        
        assert item.font_size == 18
        assert item.line_height == 1.5
        assert item.page_break == "before"
    
    def test_snake_case_names_accepted(self) -> None:
        item = TextItem(text="Title", font_size=18)
        assert item.font_size == 18
    
    def test_nested_text_runs(self) -> None:
        """Test a text item may hold a sequence of inline runs."""
        item = document_item_adapter.validate_python(
            {"text": ["plain ", {"text": "bold", "bold": True}]}
        )
        
        assert item.text[0] == "plain "
        assert isinstance(item.text[1], TextItem)
        assert item.text[1].bold is True
    
    def test_block_items_inside_text(self) -> None:
        item = document_item_adapter.validate_python({"text": ["a", {"ul": ["b"]}]})
        assert isinstance(item.text[1], BulletedListItem)
    
    def test_italic_accepted_as_italics(self) -> None:
        item = document_item_adapter.validate_python({"text": "slanted", "italic": True})
        
        assert item.italics is True
        assert DocumentStyle.model_validate({"italic": True}).italics is True
        assert DocumentStyle(italics=False).italics is False
    
    def test_nested_lists_and_stacks(self) -> None:
        item = document_item_adapter.validate_python(
            {"stack": [{"ol": ["a", {"ul": ["b", "c"]}]}]}
        )
        
        inner = item.stack[0].ol[1]
        assert isinstance(inner, BulletedListItem)
        assert inner.ul == ("b", "c")
    
    def test_items_are_immutable(self) -> None:
        item = TextItem(text="Frozen")
        with pytest.raises(ValidationError):
            item.text = "Changed"
    
    def test_document_item_kind(self) -> None:
        assert document_item_kind("plain text") == "plain"
        assert document_item_kind({"ul": []}) == "ul"
        assert document_item_kind(TextItem(text="a")) == "text"
        assert document_item_kind({"text": "a", "ol": []}) is None
        assert document_item_kind(42) is None


class TestStyledItem:
    """Tests for margins, style names and style merging."""
    
    def test_single_margin_applies_to_all_sides(self) -> None:
        assert TextItem(text="a", margin=5).margins() == (5.0, 5.0, 5.0, 5.0)
    
    def test_margin_pair_is_horizontal_vertical(self) -> None:
        assert TextItem(text="a", margin=[10, 4]).margins() == (10, 4, 10, 4)
    
    def test_margin_four_values(self) -> None:
        assert TextItem(text="a", margin=[1, 2, 3, 4]).margins() == (1, 2, 3, 4)
    
    def test_no_margin(self) -> None:
        assert TextItem(text="a").margins() == (0.0, 0.0, 0.0, 0.0)
    
    def test_style_names(self) -> None:
        assert TextItem(text="a").style_names() == ()
        assert TextItem(text="a", style="header").style_names() == ("header",)
        assert TextItem(text="a", style=["header", "quote"]).style_names() == ("header", "quote")
    
    def test_own_style_holds_only_style_attributes(self) -> None:
        item = TextItem(text="a", bold=True, margin=3, style="header")
        assert item.own_style() == DocumentStyle(bold=True)
    
    def test_merged_with_later_overrides_win(self) -> None:
        """Test set attributes of later overrides take precedence."""
        base = DocumentStyle(font_size=10, bold=True, color="black")
        merged = base.merged_with(
            DocumentStyle(font_size=14),
            DocumentStyle(color="red"),
        )
        
        assert merged == DocumentStyle(font_size=14, bold=True, color="red")
    
    def test_merged_with_keeps_explicit_false(self) -> None:
        merged = DocumentStyle(bold=True).merged_with(DocumentStyle(bold=False))
        assert merged.bold is False
    
    def test_invalid_font_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DocumentStyle(font_size=0)


class TestTableInfo:
    """Tests for TableInfo grid validation."""
    
    def test_valid_table(self) -> None:
        info = TableInfo.model_validate(
            {"headerRows": 1, "widths": ["*", "auto", 100, "25%"], "body": [["a", "b", "c", "d"]] * 2}
        )
        
        assert info.header_rows == 1
        assert info.column_count == 4
        assert info.widths[2] == 100.0
    
    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TableInfo(body=[["a", "b"], ["c"]])
        
        assert "same number of cells" in str(exc_info.value)
    
    def test_width_count_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableInfo(widths=["*"], body=[["a", "b"]])
    
    def test_header_rows_beyond_body_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableInfo(header_rows=3, body=[["a"], ["b"]])
    
    def test_empty_body_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableInfo(body=[])
    
    @pytest.mark.parametrize("width", ["wide", "50", -5, 0])
    def test_invalid_column_width_rejected(self, width: object) -> None:
        with pytest.raises(ValidationError):
            TableInfo(widths=[width], body=[["a"]])


class TestDocumentDefinitions:
    """Tests for DocumentDefinitions."""
    
    def test_minimal_document_defaults(self) -> None:
        """Test default page geometry of a minimal document."""
        document = DocumentDefinitions(content=["Only paragraph"])
        
        assert document.page_size == "A4"
        assert document.page_orientation == "portrait"
        assert document.page_margins == (40.0, 40.0, 40.0, 40.0)
        assert document.header is None
        assert document.images == {}
    
    def test_empty_content_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DocumentDefinitions(content=[])
    
    def test_page_size_normalized(self) -> None:
        document = DocumentDefinitions.model_validate({"content": ["a"], "pageSize": "letter"})
        assert document.page_size == "LETTER"
    
    def test_unknown_page_size_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DocumentDefinitions(content=["a"], page_size="A99")
        
        assert "Unknown page size" in str(exc_info.value)
    
    def test_negative_page_margin_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DocumentDefinitions(content=["a"], page_margins=(10, -1, 10, 10))
    
    def test_callable_header_and_footer_kept(self) -> None:
        """Test header/footer callables are stored as they are."""
        def footer(current_page: int, page_count: int) -> str:
            return f"{current_page} / {page_count}"
        
        document = DocumentDefinitions(content=["a"], header=lambda page, count: "Header", footer=footer)
        
        assert callable(document.header)
        assert document.footer is footer
        assert document.footer(1, 3) == "1 / 3"
    
    def test_static_header_validated_as_item(self) -> None:
        document = DocumentDefinitions.model_validate(
            {"content": ["a"], "header": {"text": "Header", "alignment": "right"}}
        )
        
        assert isinstance(document.header, TextItem)
        assert document.header.alignment == "right"
    
    def test_full_definition(self) -> None:
        """Test a definition using every top-level section."""
        document = DocumentDefinitions.model_validate({
            "content": [{"text": "Title", "style": "header"}, {"image": "logo"}],
            "info": {"title": "Report", "author": "Jane"},
            "images": {"logo": "logo.png"},
            "styles": {"header": {"fontSize": 18, "bold": True}},
            "pageOrientation": "landscape",
            "pageMargins": [20, 30, 20, 30],
            "defaultStyle": {"font": "Helvetica", "fontSize": 11},
        })
        
        assert document.info.title == "Report"
        assert document.images["logo"] == "logo.png"
        assert document.styles["header"].font_size == 18
        assert document.page_margins == (20, 30, 20, 30)
        assert document.default_style.font_size == 11


class TestFontRegistry:
    """Tests for FontFamilyTypes and the default registry."""
    
    def test_missing_variants_fall_back_to_normal(self) -> None:
        family = FontFamilyTypes(normal="Regular.ttf")
        assert family.variants() == {
            "normal": "Regular.ttf",
            "bold": "Regular.ttf",
            "italics": "Regular.ttf",
            "bolditalics": "Regular.ttf",
        }
    
    def test_bolditalics_falls_back_to_bold(self) -> None:
        family = FontFamilyTypes(normal="Regular.ttf", bold="Bold.ttf")
        assert family.variant(bold=True, italics=True) == "Bold.ttf"
        assert family.variant(italics=True) == "Regular.ttf"
    
    def test_normal_required(self) -> None:
        with pytest.raises(ValidationError):
            FontFamilyTypes(bold="Bold.ttf")
    
    def test_default_registry_uses_builtin_fonts(self) -> None:
        registry = default_font_registry()
        assert registry[DEFAULT_FONT_FAMILY].variants() == {
            "normal": "Helvetica",
            "bold": "Helvetica-Bold",
            "italics": "Helvetica-Oblique",
            "bolditalics": "Helvetica-BoldOblique",
        }


class TestHtmlPdfOptions:
    """Tests for HtmlPdfOptions."""
    
    def test_explicit_page_box(self) -> None:
        options = HtmlPdfOptions(width="50MM", height=" 90mm ")
        
        assert options.width == "50mm"
        assert options.height == "90mm"
        assert options.page_css() == "@page { size: 50mm 90mm; margin: 0; }"
    
    def test_named_format(self) -> None:
        options = HtmlPdfOptions(format="Letter", orientation="landscape", border="10mm")
        assert options.page_css() == "@page { size: letter landscape; margin: 10mm; }"
    
    def test_default_is_a4_portrait(self) -> None:
        assert HtmlPdfOptions().page_css() == "@page { size: a4 portrait; margin: 0; }"
    
    @pytest.mark.parametrize("value", ["50", "50 mm", "mm", "50furlongs"])
    def test_invalid_dimension_rejected(self, value: str) -> None:
        with pytest.raises(ValidationError):
            HtmlPdfOptions(width=value, height="90mm")
    
    def test_width_without_height_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            HtmlPdfOptions(width="50mm")
        
        assert "together" in str(exc_info.value)


class TestPageSizes:
    """Tests for page size lookup."""
    
    def test_portrait_lookup_is_case_insensitive(self) -> None:
        assert get_page_size("a4") == PAGE_SIZES["A4"]
    
    def test_landscape_swaps_sides(self) -> None:
        width, height = get_page_size("A4", "landscape")
        assert width > height
        assert (height, width) == PAGE_SIZES["A4"]
    
    def test_unknown_size_raises(self) -> None:
        with pytest.raises(KeyError):
            get_page_size("A99")
