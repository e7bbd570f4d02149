"""Generator contract shared by the three PDF generators.

Every generator turns a payload into a PDF file at an output path. The
synchronous ``generate_pdf`` returns a GenerationResult instead of raising,
and ``generate_pdf_async`` runs the same work in a worker thread so callers
on an event loop get an awaitable result.

Example:
    ```python
    result = generator.generate_pdf("pdfs/out.pdf", payload)
    if not result:
        print(result.error)

    result = await generator.generate_pdf_async("pdfs/out.pdf", payload)
    path = result.unwrap()
    ```
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel

from pdfgen.exceptions.generation_error import GenerationError

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT")


class GenerationResult(BaseModel):
    """Outcome of one generation call.
    
    A result is truthy when the file was written.
    
    Attributes:
        output_path: Path the generator wrote (or tried to write)
        error: Failure, or None on success
    """
    
    model_config = {"frozen": True, "arbitrary_types_allowed": True}
    
    output_path: Path
    error: GenerationError | None = None
    
    @property
    def success(self) -> bool:
        return self.error is None
    
    def __bool__(self) -> bool:
        return self.success
    
    def unwrap(self) -> Path:
        """Return the output path, or raise the generation error.
        
        Raises:
            GenerationError: If generation failed
        """
        if self.error is not None:
            raise self.error
        return self.output_path


class PdfGenerator(ABC, Generic[PayloadT]):
    """Abstract base class for PDF generators.
    
    Subclasses implement ``render``; this class handles output directory
    creation, error conversion, logging and asynchronous execution.
    Generators keep only construction-time configuration, so one instance
    can serve concurrent calls writing to distinct paths.
    """
    
    name: str = "pdf"
    
    @abstractmethod
    def render(self, output_path: Path, payload: PayloadT) -> None:
        """Write the PDF for ``payload`` to ``output_path``.
        
        Raises:
            Exception: Any failure; converted to GenerationError by the caller
        """
        raise NotImplementedError("Subclasses must implement render")
    
    def _render_checked(self, output_path: Path, payload: PayloadT) -> None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.render(output_path, payload)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(
                f"PDF generation failed: {e}",
                context={
                    "generator": self.name,
                    "output_path": str(output_path),
                    "error": str(e),
                },
            ) from e
    
    def generate_pdf(self, output_path: str | Path, payload: PayloadT) -> GenerationResult:
        """Generate a PDF file.
        
        Args:
            output_path: Destination file path; parent directories are created
            payload: Generator-specific input
            
        Returns:
            GenerationResult, truthy on success and carrying the
            GenerationError on failure
        """
        path = Path(output_path)
        try:
            self._render_checked(path, payload)
        except GenerationError as e:
            logger.error(f"Failed to generate PDF {path} with {self.name} generator: {e}", exc_info=True)
            return GenerationResult(output_path=path, error=e)
        
        logger.info(f"Created pdf: {path}")
        return GenerationResult(output_path=path)
    
    async def generate_pdf_async(
        self, output_path: str | Path, payload: PayloadT
    ) -> GenerationResult:
        """Generate a PDF file without blocking the event loop.
        
        Args:
            output_path: Destination file path
            payload: Generator-specific input
            
        Returns:
            GenerationResult, as for generate_pdf
        """
        return await asyncio.to_thread(self.generate_pdf, output_path, payload)
