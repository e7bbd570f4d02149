"""Base exception class for all PDF generation errors.

This module defines the BasePdfError class that serves as the base
for all custom exceptions in the package. Catching BasePdfError catches
every error raised deliberately by the generators and the document model.
"""


class BasePdfError(Exception):
    """Base exception for all PDF generation errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base PDF error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., output path, generator name)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        return self.message
    
    def __repr__(self) -> str:
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
