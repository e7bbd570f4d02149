"""Main entry point running the three PDF generators.

Generates one example file per generator into the output directory:
a two-paragraph structured document, a one-line directly drawn page and a
filled HTML template.

Example:
    ```bash
    python -m pdfgen.main
    python -m pdfgen.main --output-dir /tmp/pdfs --verbose
    ```
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pdfgen.config import Config, get_config
from pdfgen.generators import (
    DirectDrawingGenerator,
    GenerationResult,
    HtmlTemplateGenerator,
    StructuredDocumentGenerator,
)
from pdfgen.models.document_definition import DocumentDefinitions

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

EXAMPLE_DOCUMENT = DocumentDefinitions(
    content=(
        "First paragraph",
        "Another paragraph, this time a little bit longer to make sure, "
        "this line will be divided into at least two lines",
    )
)

EXAMPLE_TEXT = "First text"

EXAMPLE_SUBSTITUTIONS = {
    "firstName": "John",
    "lastName": "Doe",
}


async def run_examples(config: Config, output_dir: Path | None = None) -> dict[str, GenerationResult]:
    """Run every generator once with its example payload.

    The structured and direct-drawing generators run synchronously; the
    template generator is awaited.

    Args:
        config: Config instance from get_config()
        output_dir: Directory for the generated files (default: config.output_dir)

    Returns:
        Dictionary mapping generator name to its result
    """
    target_dir = output_dir or config.output_dir

    structured = StructuredDocumentGenerator(
        fonts=config.font_registry(),
        default_font=config.default_font_family,
    )
    direct = DirectDrawingGenerator(font_size=config.direct_drawing_font_size)
    template = HtmlTemplateGenerator(
        config.template_path,
        config.template_options(),
        image_path=config.template_image_path,
    )

    results = {
        structured.name: structured.generate_pdf(target_dir / "structured.pdf", EXAMPLE_DOCUMENT),
        direct.name: direct.generate_pdf(target_dir / "direct_drawing.pdf", EXAMPLE_TEXT),
    }
    results[template.name] = await template.generate_pdf_async(
        target_dir / "html_template.pdf", EXAMPLE_SUBSTITUTIONS
    )
    return results


def main() -> int:
    """Main entry point for command-line usage.

    Returns:
        Exit code (0 when every generator succeeded, 1 otherwise)
    """
    parser = argparse.ArgumentParser(
        description="Generate example PDFs with the structured, direct-drawing and template generators",
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the generated files (default: OUTPUT_DIR setting)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    args = parser.parse_args()

    try:
        config = get_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)

    results = asyncio.run(run_examples(config, args.output_dir))

    failures = {name: result for name, result in results.items() if not result}
    for name, result in results.items():
        status = "ok" if result else f"failed: {result.error}"
        print(f"  - {name}: {result.output_path} ({status})")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
