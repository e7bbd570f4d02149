"""Tests for exception implementations.

This module contains unit tests for all exception classes to verify
inheritance, error messages, and context handling.
"""

import pytest

from pdfgen.exceptions import BasePdfError, DocumentDefinitionError, GenerationError


class TestBasePdfError:
    """Tests for BasePdfError."""
    
    def test_base_error_creation(self) -> None:
        """Test that BasePdfError can be created with a message."""
        error = BasePdfError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.context == {}
    
    def test_base_error_with_context(self) -> None:
        """Test that BasePdfError can include context."""
        context = {"output_path": "pdfs/out.pdf", "count": 2}
        error = BasePdfError("Test error", context=context)
        assert error.context == context
        assert error.context["output_path"] == "pdfs/out.pdf"
    
    def test_base_error_repr_representation(self) -> None:
        """Test detailed representation of BasePdfError."""
        error = BasePdfError("Test message", context={"key": "value"})
        repr_str = repr(error)
        assert "BasePdfError" in repr_str
        assert "Test message" in repr_str
        assert "context" in repr_str
    
    def test_base_error_repr_without_context(self) -> None:
        error = BasePdfError("Test message")
        assert repr(error) == "BasePdfError('Test message')"


class TestGenerationError:
    """Tests for GenerationError."""
    
    def test_generation_error_inheritance(self) -> None:
        """Test that GenerationError inherits from BasePdfError."""
        assert issubclass(GenerationError, BasePdfError)
        assert issubclass(GenerationError, Exception)
    
    def test_generation_error_can_be_caught_by_base(self) -> None:
        """Test that GenerationError can be caught by base exception."""
        with pytest.raises(BasePdfError):
            raise GenerationError("Rendering failed")
    
    def test_generation_error_keeps_cause(self) -> None:
        """Test that the original exception is chained."""
        original = OSError("disk full")
        try:
            raise GenerationError("Rendering failed") from original
        except GenerationError as e:
            assert e.__cause__ is original


class TestDocumentDefinitionError:
    """Tests for DocumentDefinitionError."""
    
    def test_document_definition_error_inheritance(self) -> None:
        assert issubclass(DocumentDefinitionError, BasePdfError)
        assert not issubclass(DocumentDefinitionError, GenerationError)
    
    def test_document_definition_error_with_context(self) -> None:
        error = DocumentDefinitionError("Unknown font", context={"family": "Roboto"})
        assert error.context["family"] == "Roboto"
