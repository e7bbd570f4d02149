"""Configuration management for the PDF generators.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models. The defaults reproduce the
conventional layout: fonts in ./fonts, HTML templates and the bundled
image in ./templates, generated files in ./pdfs.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pdfgen.models.font_registry import (
    DEFAULT_FONT_FAMILY,
    ROBOTO_FILES,
    FontRegistry,
    default_font_registry,
    roboto_font_registry,
)
from pdfgen.models.html_pdf_options import HtmlPdfOptions

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    Attributes:
        output_dir: Directory for generated PDF files (created on load)
        fonts_dir: Directory holding TrueType font files
        templates_dir: Directory holding HTML templates and the bundled image
        template_name: File name of the HTML template inside templates_dir
        template_image_name: File name of the image injected as {{image}}
        template_page_width: Page width for the template generator
        template_page_height: Page height for the template generator
        default_font_family: Font family used when a document names none
        direct_drawing_font_size: Font size for the direct-drawing generator
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("./pdfs"),
        description="Directory for generated PDF files",
    )

    fonts_dir: Path = Field(
        default=Path("./fonts"),
        description="Directory holding TrueType font files",
    )

    templates_dir: Path = Field(
        default=Path("./templates"),
        description="Directory holding HTML templates and the bundled image",
    )

    template_name: str = Field(
        default="template.html",
        description="HTML template file name",
        min_length=1,
    )

    template_image_name: str = Field(
        default="image.png",
        description="Image file injected for the {{image}} placeholder",
        min_length=1,
    )

    template_page_width: str = Field(
        default="50mm",
        description="Page width for HTML template rendering",
    )

    template_page_height: str = Field(
        default="90mm",
        description="Page height for HTML template rendering",
    )

    default_font_family: str = Field(
        default=DEFAULT_FONT_FAMILY,
        description="Font family used when a document names none",
        min_length=1,
    )

    direct_drawing_font_size: int = Field(
        default=25,
        description="Font size for the direct-drawing generator",
        ge=1,
        le=200,
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value

    @field_validator("output_dir", mode="before")
    @classmethod
    def validate_output_dir(cls, value: str | Path) -> Path:
        """Convert output_dir to Path object and create if needed."""
        path = Path(value)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def template_path(self) -> Path:
        return self.templates_dir / self.template_name

    @property
    def template_image_path(self) -> Path:
        return self.templates_dir / self.template_image_name

    def template_options(self) -> HtmlPdfOptions:
        """Build HTML rendering options from the configured page size."""
        return HtmlPdfOptions(
            width=self.template_page_width,
            height=self.template_page_height,
        )

    def font_registry(self) -> FontRegistry:
        """Build the font registry handed to the structured generator.

        The built-in Helvetica family is always present. The Roboto family
        is added when all four of its TrueType files exist in fonts_dir.

        Returns:
            Mapping of family name to its style variants
        """
        registry = default_font_registry()
        if all((self.fonts_dir / name).is_file() for name in ROBOTO_FILES.values()):
            registry.update(roboto_font_registry(self.fonts_dir))
            logger.debug(f"Roboto font family loaded from {self.fonts_dir}")
        return registry


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration from `.env` file (if present) and environment variables
    on first call and returns the same instance on subsequent calls.

    Returns:
        Config instance with loaded configuration values

    Raises:
        ValueError: If configuration values are invalid
    """
    global _config
    if _config is None:
        _config = Config()
        logger.debug(
            f"Configuration loaded: OUTPUT_DIR={_config.output_dir}, "
            f"FONTS_DIR={_config.fonts_dir}, TEMPLATES_DIR={_config.templates_dir}, "
            f"DEFAULT_FONT_FAMILY={_config.default_font_family}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
