"""Value types describing documents, fonts and rendering options."""
