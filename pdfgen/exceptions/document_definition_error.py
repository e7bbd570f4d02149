"""Document definition error exception.

Raised when a document definition is structurally valid but cannot be
rendered, for example when it references a font family missing from the
font registry or an image name missing from the image registry.
"""

from pdfgen.exceptions.base import BasePdfError


class DocumentDefinitionError(BasePdfError):
    """Raised when a document definition cannot be rendered."""
    
    pass
