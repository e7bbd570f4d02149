"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

import base64
from pathlib import Path

import pytest

import pdfgen.config
from pdfgen.models.document_definition import DocumentDefinitions

PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

TEMPLATE_HTML = """<html>
<head><title>Badge</title></head>
<body>
<img src="{{image}}" width="20" height="20">
<p>{{firstName}} {{lastName}}</p>
</body>
</html>
"""


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    """Write a 1x1 PNG image and return its path."""
    path = tmp_path / "image.png"
    path.write_bytes(PNG_1X1)
    return path


@pytest.fixture
def template_path(tmp_path: Path, png_path: Path) -> Path:
    """Write an HTML template with image and name placeholders."""
    path = tmp_path / "template.html"
    path.write_text(TEMPLATE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def simple_document() -> DocumentDefinitions:
    """Create the two-paragraph example document."""
    return DocumentDefinitions(
        content=(
            "First paragraph",
            "Another paragraph, this time a little bit longer to make sure, "
            "this line will be divided into at least two lines",
        )
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Reset the configuration singleton before and after each test."""
    pdfgen.config._config = None
    yield
    pdfgen.config._config = None
